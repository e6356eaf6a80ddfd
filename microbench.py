"""Round-robin micro-timing loop.

Registered operations are run in turns: a fixed number of warmup rounds that
are discarded, then measured rounds until every operation has used up the
time budget and collected the minimum number of samples.
"""
from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from typing import Any, Callable

from bench_stats import DistributionSummary, summarize


DEFAULT_TIME_MS = 1000.0
DEFAULT_WARMUP_ITERATIONS = 5
DEFAULT_MIN_ITERATIONS = 10
MARGIN_Z = 1.96


@dataclass
class BenchTask:
    name: str
    fn: Callable[[], Any]
    samples_ms: list[float] = field(default_factory=list)
    elapsed_ms: float = 0.0
    summary: DistributionSummary | None = None

    @property
    def ops_per_sec(self) -> float:
        if self.summary is None or self.summary.mean <= 0:
            return math.nan
        return 1000.0 / self.summary.mean

    @property
    def margin_pct(self) -> float:
        if self.summary is None or self.summary.mean <= 0:
            return math.nan
        return MARGIN_Z * self.summary.standard_error / self.summary.mean * 100.0


class Bench:
    def __init__(
        self,
        *,
        time_ms: float = DEFAULT_TIME_MS,
        warmup_iterations: int = DEFAULT_WARMUP_ITERATIONS,
        min_iterations: int = DEFAULT_MIN_ITERATIONS,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        if time_ms < 0:
            raise ValueError("time_ms must be >= 0")
        if warmup_iterations < 0:
            raise ValueError("warmup_iterations must be >= 0")
        if min_iterations <= 0:
            raise ValueError("min_iterations must be > 0")
        self.time_ms = time_ms
        self.warmup_iterations = warmup_iterations
        self.min_iterations = min_iterations
        self.clock = clock
        self.tasks: list[BenchTask] = []

    def add(self, name: str, fn: Callable[[], Any]) -> Bench:
        if any(task.name == name for task in self.tasks):
            raise ValueError(f"task already registered: {name}")
        self.tasks.append(BenchTask(name=name, fn=fn))
        return self

    def _done(self) -> bool:
        return all(
            len(task.samples_ms) >= self.min_iterations and task.elapsed_ms >= self.time_ms
            for task in self.tasks
        )

    def run(self) -> list[BenchTask]:
        if not self.tasks:
            raise ValueError("no tasks registered")

        for task in self.tasks:
            task.samples_ms.clear()
            task.elapsed_ms = 0.0
            task.summary = None

        for _ in range(self.warmup_iterations):
            for task in self.tasks:
                task.fn()

        while not self._done():
            for task in self.tasks:
                started = self.clock()
                task.fn()
                elapsed_ms = (self.clock() - started) * 1000.0
                task.samples_ms.append(elapsed_ms)
                task.elapsed_ms += elapsed_ms

        for task in self.tasks:
            task.summary = summarize(task.samples_ms)
        return self.tasks

    def table(self) -> list[dict[str, Any]]:
        finished = [task for task in self.tasks if task.summary is not None]
        if not finished:
            return []
        fastest = min(task.summary.mean for task in finished)
        rows: list[dict[str, Any]] = []
        for task in finished:
            mean = task.summary.mean
            rows.append(
                {
                    "Task": task.name,
                    "ops/sec": task.ops_per_sec,
                    "Average (ms)": mean,
                    "Margin": task.margin_pct,
                    "Relative": (mean / fastest) if fastest > 0 else math.nan,
                    "Samples": task.summary.samples,
                }
            )
        return rows
