from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Sequence

from bench_errors import EmptySampleSet


@dataclass(frozen=True)
class DistributionSummary:
    samples: int
    mean: float
    median: float
    min: float
    max: float
    standard_deviation: float
    standard_error: float
    relative_standard_deviation: float

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def relative_deviation(deviation: float, mean: float) -> float:
    if mean == 0:
        return math.nan if deviation == 0 else math.inf
    return deviation / mean


def summarize(samples: Sequence[float]) -> DistributionSummary:
    if not samples:
        raise EmptySampleSet()

    n = len(samples)
    ordered = sorted(samples)
    lowest = ordered[0]
    highest = ordered[-1]
    # fsum still rounds once on the division; keep the mean inside the observed range.
    mean = min(max(math.fsum(samples) / n, lowest), highest)
    variance = math.fsum((value - mean) * (value - mean) for value in samples) / n
    standard_deviation = math.sqrt(variance)

    return DistributionSummary(
        samples=n,
        mean=mean,
        median=ordered[n // 2],
        min=lowest,
        max=highest,
        standard_deviation=standard_deviation,
        standard_error=standard_deviation / math.sqrt(n),
        relative_standard_deviation=relative_deviation(standard_deviation, mean),
    )
