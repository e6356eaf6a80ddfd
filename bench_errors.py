from __future__ import annotations


class BenchError(RuntimeError):
    """Base class for every failure that aborts a benchmark run."""


class ConfigError(BenchError):
    pass


class EmptySampleSet(BenchError):
    def __init__(self, what: str = "samples") -> None:
        super().__init__(f"cannot compute stats for empty {what}")


class TrialError(BenchError):
    def __init__(self, variant: str, trial_index: int, message: str) -> None:
        super().__init__(f"load trial failed [{variant} trial {trial_index}]: {message}")
        self.variant = variant
        self.trial_index = trial_index


class ShapeMismatch(TrialError):
    def __init__(self, variant: str, trial_index: int, expected: int, actual: int | None) -> None:
        got = "a non-list result" if actual is None else f"{actual} objects"
        super().__init__(variant, trial_index, f"expected {expected} objects, got {got}")
        self.expected = expected
        self.actual = actual


class ChecksumMismatch(BenchError):
    def __init__(self, label: str, expected: int, actual: int) -> None:
        super().__init__(f"unexpected checksum for {label} run: expected {expected}, got {actual}")
        self.label = label
        self.expected = expected
        self.actual = actual


class LoadCancelled(BenchError):
    def __init__(self, variant: str, completed: int) -> None:
        super().__init__(f"load run for {variant} stopped after {completed} trials: another variant failed")
        self.variant = variant
        self.completed = completed
