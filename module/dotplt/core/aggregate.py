"""Aggregator: count and mean of the active metric over the filtered set."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List

from .classify import Metric
from .records import Record


def mean(xs: List[float]) -> float:
    return sum(xs) / len(xs) if xs else float("nan")


@dataclass(frozen=True)
class Summary:
    count: int
    mean: float

    @property
    def is_empty(self) -> bool:
        return self.count == 0 or math.isnan(self.mean)

    def describe(self, metric: Metric | str) -> str:
        """Stats text, e.g. ``Average Coffee Intake: 3.00 cups``."""
        metric = Metric(metric)
        if self.is_empty:
            return f"Average {metric.label}: no data"
        return f"Average {metric.label}: {self.mean:.2f} {metric.unit}"


def summarize(records: Iterable[Record], metric: Metric | str) -> Summary:
    """Summary of *records*; an empty input gives ``Summary(0, nan)``."""
    values = [r.value(metric) for r in records]
    return Summary(count=len(values), mean=mean(values))
