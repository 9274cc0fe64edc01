"""Metric classifier: map a metric value to a low / medium / high bucket."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Metric(str, Enum):
    """Health variable that drives colour (and x position in the age view)."""

    COFFEE = "coffee"
    SLEEP = "sleep"
    CAFFEINE = "caffeine"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def unit(self) -> str:
        return _UNITS[self]


class Bucket(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


_LABELS = {
    Metric.COFFEE: "Coffee Intake",
    Metric.SLEEP: "Sleep Hours",
    Metric.CAFFEINE: "Caffeine",
}
_UNITS = {
    Metric.COFFEE: "cups",
    Metric.SLEEP: "hours",
    Metric.CAFFEINE: "mg",
}

# (low, high): value < low -> LOW, value < high -> MEDIUM, else HIGH
THRESHOLDS: Dict[Metric, Tuple[float, float]] = {
    Metric.COFFEE: (2, 4),
    Metric.SLEEP: (6, 7.5),
    Metric.CAFFEINE: (200, 400),
}


def classify(value: float, metric: Metric | str) -> Bucket:
    """Return the severity bucket of *value* for *metric*.

    Boundaries belong to the upper bucket: ``classify(2, "coffee")`` is
    MEDIUM and ``classify(4, "coffee")`` is HIGH.
    """
    low, high = THRESHOLDS[Metric(metric)]
    if value < low:
        return Bucket.LOW
    if value < high:
        return Bucket.MEDIUM
    return Bucket.HIGH
