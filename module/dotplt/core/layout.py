"""Layout engine: place every record of every group on the canvas.

Each group gets one band along the primary axis. In the distribution view
bands run left to right and members are packed into a grid that grows up
from the baseline (a pictogram bar). In the age view bands run top to
bottom, x is the active metric on a linear scale, and members cycle through
the rows of their band so large groups do not collapse into one line.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from .classify import Bucket, Metric, classify
from .grouping import Group
from .records import Record

logger = logging.getLogger(__name__)

# Grid pitch as a multiple of the point diameter.
SPACING = 1.5
DEFAULT_BAND_PADDING = 0.2


class ViewMode(str, Enum):
    DISTRIBUTION = "distribution"
    BY_AGE = "byAge"


@dataclass(frozen=True)
class Canvas:
    """Drawable area inside the chart margins, in px."""

    width: float = 1080
    height: float = 460
    point_diameter: float = 4

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0 or self.point_diameter <= 0


@dataclass(frozen=True)
class PositionedPoint:
    record: Record
    x: float
    y: float
    bucket: Bucket
    group: str

    @property
    def id(self) -> int:
        return self.record.id


# -----------------------------
# Scales
# -----------------------------
@dataclass(frozen=True)
class BandScale:
    """Evenly spaced bands with equal inner and outer padding (d3.scaleBand)."""

    labels: Tuple[str, ...]
    lo: float
    hi: float
    padding: float = DEFAULT_BAND_PADDING

    @property
    def step(self) -> float:
        n = len(self.labels)
        return (self.hi - self.lo) / max(1.0, n - self.padding + 2 * self.padding)

    @property
    def bandwidth(self) -> float:
        return self.step * (1 - self.padding)

    def start(self, label: str) -> float:
        n = len(self.labels)
        offset = (self.hi - self.lo - self.step * (n - self.padding)) / 2
        return self.lo + offset + self.step * self.labels.index(label)

    def center(self, label: str) -> float:
        return self.start(label) + self.bandwidth / 2


@dataclass(frozen=True)
class LinearScale:
    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return (r0 + r1) / 2
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def ticks(self, count: int = 8) -> List[float]:
        """Round tick values (1, 2 or 5 times a power of ten) inside the domain."""
        lo, hi = sorted(self.domain)
        if count <= 0 or hi <= lo:
            return [lo] if hi == lo else []
        raw = (hi - lo) / count
        power = math.floor(math.log10(raw))
        error = raw / 10 ** power
        if error >= math.sqrt(50):
            factor = 10
        elif error >= math.sqrt(10):
            factor = 5
        elif error >= math.sqrt(2):
            factor = 2
        else:
            factor = 1
        step = factor * 10 ** power
        first = math.ceil(lo / step)
        last = math.floor(hi / step)
        return [round(i * step, 10) for i in range(first, last + 1)]


def metric_domain(records: Iterable[Record], metric: Metric | str) -> Tuple[float, float]:
    """Padded x domain for the age view: ``[max(0, min - 1), max + 1]``."""
    values = [r.value(metric) for r in records]
    if not values:
        return (0.0, 1.0)
    return (max(0.0, min(values) - 1), max(values) + 1)


def country_band_scale(
    groups: Sequence[Group], canvas: Canvas, padding: float = DEFAULT_BAND_PADDING
) -> BandScale:
    return BandScale(tuple(g.label for g in groups), 0.0, canvas.width, padding)


def age_band_scale(
    groups: Sequence[Group], canvas: Canvas, padding: float = DEFAULT_BAND_PADDING
) -> BandScale:
    return BandScale(tuple(g.label for g in groups), 0.0, canvas.height, padding)


# -----------------------------
# Layout
# -----------------------------
def _clamp(v: float, hi: float) -> float:
    return max(0.0, min(hi, v))


def _distribution(
    groups: Sequence[Group], canvas: Canvas, metric: Metric, padding: float
) -> List[PositionedPoint]:
    d = canvas.point_diameter
    pitch = d * SPACING
    bands = country_band_scale(groups, canvas, padding)
    per_row = max(1, math.floor(bands.bandwidth / pitch))

    points: List[PositionedPoint] = []
    for g in groups:
        start = bands.start(g.label)
        for i, r in enumerate(g.members):
            row, col = divmod(i, per_row)
            x = start + col * pitch + d
            y = canvas.height - row * pitch - d
            points.append(
                PositionedPoint(r, x, y, classify(r.value(metric), metric), g.label)
            )
    return points


def _by_age(
    groups: Sequence[Group],
    canvas: Canvas,
    metric: Metric,
    padding: float,
    domain: Optional[Tuple[float, float]],
) -> List[PositionedPoint]:
    d = canvas.point_diameter
    pitch = d * SPACING
    if domain is None:
        domain = metric_domain((r for g in groups for r in g.members), metric)
    x_scale = LinearScale(domain, (0.0, canvas.width))
    bands = age_band_scale(groups, canvas, padding)
    per_row = max(1, math.floor(bands.bandwidth / pitch))

    points: List[PositionedPoint] = []
    for g in groups:
        start = bands.start(g.label)
        # sorted() is stable: equal values keep member order
        ordered = sorted(g.members, key=lambda r: r.value(metric))
        for i, r in enumerate(ordered):
            value = r.value(metric)
            row = i % per_row
            x = x_scale(value)
            y = start + row * pitch + d
            points.append(PositionedPoint(r, x, y, classify(value, metric), g.label))
    return points


def layout(
    groups: Sequence[Group],
    view_mode: ViewMode | str,
    canvas: Canvas = Canvas(),
    metric: Metric | str = Metric.COFFEE,
    *,
    band_padding: float = DEFAULT_BAND_PADDING,
    domain: Optional[Tuple[float, float]] = None,
) -> List[PositionedPoint]:
    """Return one PositionedPoint per member of *groups*.

    ``domain`` overrides the metric range used for x in the age view (the
    caller passes the range of the whole filtered set). Coordinates are
    clamped into the canvas; a degenerate canvas or no groups gives ``[]``.
    """
    view_mode = ViewMode(view_mode)
    metric = Metric(metric)

    if not groups or canvas.is_degenerate:
        logger.warning(
            f"Degenerate layout ({len(groups)} groups, canvas "
            f"{canvas.width}x{canvas.height}, point {canvas.point_diameter}); nothing to place"
        )
        return []

    if view_mode is ViewMode.DISTRIBUTION:
        points = _distribution(groups, canvas, metric, band_padding)
    else:
        points = _by_age(groups, canvas, metric, band_padding, domain)

    clamped = 0
    out: List[PositionedPoint] = []
    for p in points:
        x = _clamp(p.x, canvas.width)
        y = _clamp(p.y, canvas.height)
        if x != p.x or y != p.y:
            clamped += 1
            p = PositionedPoint(p.record, x, y, p.bucket, p.group)
        out.append(p)
    if clamped:
        logger.warning(f"{clamped} of {len(out)} points clamped to the canvas")
    return out
