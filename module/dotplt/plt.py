"""Public API: figure factory and the one-call pictogram builder."""

from __future__ import annotations

from typing import Optional

from dotplt.core.classify import Metric
from dotplt.core.config import ChartConfig
from dotplt.core.figure import Figure
from dotplt.core.layout import ViewMode
from dotplt.core.records import ALL_COUNTRIES, RecordStore
from dotplt.core.state import StateRegistry
from dotplt.plots.pictogram import PictogramArtist


def figure(state: Optional[StateRegistry] = None, title: Optional[str] = None) -> Figure:
    """Return a new Figure.

    ``state`` may be a shared StateRegistry instance. If omitted, a new
    empty registry is created inside the Figure.
    """
    if title is None:
        return Figure(state=state)
    return Figure(state=state, title=title)


def pictogram(store: RecordStore, config: Optional[ChartConfig] = None) -> Figure:
    """Return a Figure with metric / view / country controls and the pictogram.

    Initial selection: coffee, distribution view,
    all countries.
    """
    config = config or ChartConfig()
    artist = PictogramArtist.from_config(store, config)

    state = StateRegistry()
    metric_var = state.add_radio(
        "metric", artist.metric_options(), default=Metric.COFFEE.value, title="Metric"
    )
    view_var = state.add_radio(
        "view", artist.view_options(), default=ViewMode.DISTRIBUTION.value, title="View"
    )
    country_var = state.add_radio(
        "country", artist.country_options(), default=ALL_COUNTRIES, title="Country"
    )

    fig = Figure(state=state, title=config.title)
    ax = fig.add_subplot()
    ax.add_views(artist.render_html_views(metric_var, country_var, view_var))
    return fig


# Expose so callers can do: from dotplt import plt; plt.figure()
plt = type(
    "plt",
    (),
    {"figure": staticmethod(figure), "pictogram": staticmethod(pictogram)},
)()
