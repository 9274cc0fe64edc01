"""View state and the single recomputation entry point.

The presentation side owns a ViewState and swaps it for a new one on every
selection change; ``recompute`` turns (state, records) into groups, points
and stats without touching anything shared.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple

from .aggregate import Summary, summarize
from .classify import Metric
from .grouping import Group, group_by_age, group_by_country
from .layout import Canvas, PositionedPoint, ViewMode, layout, metric_domain, DEFAULT_BAND_PADDING
from .records import ALL_COUNTRIES, Record, RecordStore, filter_by_country

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewState:
    metric: Metric = Metric.COFFEE
    country: str = ALL_COUNTRIES
    view_mode: ViewMode = ViewMode.DISTRIBUTION

    def __post_init__(self) -> None:
        # Accept plain strings from controls; fail early on unknown names.
        object.__setattr__(self, "metric", Metric(self.metric))
        object.__setattr__(self, "view_mode", ViewMode(self.view_mode))


def on_metric_change(state: ViewState, metric: Metric | str) -> ViewState:
    return replace(state, metric=Metric(metric))


def on_country_change(state: ViewState, country: str) -> ViewState:
    return replace(state, country=country)


def on_view_change(state: ViewState, view_mode: ViewMode | str) -> ViewState:
    return replace(state, view_mode=ViewMode(view_mode))


@dataclass(frozen=True)
class Recomputation:
    state: ViewState
    records: Tuple[Record, ...]
    groups: List[Group]
    points: List[PositionedPoint]
    stats: Summary


def recompute(
    state: ViewState,
    records: RecordStore | Iterable[Record],
    canvas: Canvas = Canvas(),
    band_padding: float = DEFAULT_BAND_PADDING,
) -> Recomputation:
    """Filter, group, lay out and summarize for *state*."""
    filtered = filter_by_country(records, state.country)

    if state.view_mode is ViewMode.DISTRIBUTION:
        groups = group_by_country(filtered)
        domain = None
    else:
        groups = group_by_age(filtered)
        domain = metric_domain(filtered, state.metric)

    points = layout(
        groups,
        state.view_mode,
        canvas,
        state.metric,
        band_padding=band_padding,
        domain=domain,
    )
    stats = summarize(filtered, state.metric)
    logger.debug(
        f"Recomputed {state.view_mode.value}/{state.country}/{state.metric.value}: "
        f"{len(groups)} groups, {len(points)} points"
    )
    return Recomputation(state, filtered, groups, points, stats)
