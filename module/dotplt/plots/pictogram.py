"""PictogramArtist: one SVG circle per respondent, switched by CSS only.

Every combination the controls can reach is pre-rendered:

- distribution view: one variant per country option. Positions do not
  depend on the metric, so each circle carries its bucket for all three
  metrics (``data-coffee``, ``data-sleep``, ``data-caffeine``) and the
  metric radio recolours it through CSS.
- age view: one variant per (country, metric), since x is the metric.

Stats lines (per country and metric) and legends (per metric) are switched
the same way. Circles keep ``data-id`` as the identity key of a respondent
across variants. Hover shows a native ``<title>`` tooltip. No JavaScript.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Tuple

from dotplt.core.aggregate import Summary, summarize
from dotplt.core.classify import THRESHOLDS, Bucket, Metric, classify
from dotplt.core.config import ChartConfig, Margins
from dotplt.core.layout import (
    DEFAULT_BAND_PADDING,
    Canvas,
    LinearScale,
    PositionedPoint,
    ViewMode,
    age_band_scale,
    country_band_scale,
    metric_domain,
)
from dotplt.core.records import ALL_COUNTRIES, Record, RecordStore
from dotplt.core.state import selection_selector
from dotplt.core.theme import COLOR_SCHEMES
from dotplt.core.utils import esc, fmt_num, unique_slugs
from dotplt.core.view import Recomputation, ViewState, recompute

if TYPE_CHECKING:
    from dotplt.core.state import RadioVar

logger = logging.getLogger(__name__)

ALL_COUNTRIES_LABEL = "All Countries"
VIEW_LABELS = {
    ViewMode.DISTRIBUTION: "Distribution by Country",
    ViewMode.BY_AGE: "By Age Group",
}
COUNT_TICKS = 5
METRIC_TICKS = 8


def _tooltip(r: Record) -> str:
    return (
        f"{r.country}\n"
        f"Age: {r.age}\n"
        f"Gender: {r.gender}\n"
        f"Coffee: {fmt_num(r.coffee)} cups\n"
        f"Sleep: {fmt_num(r.sleep)} hours\n"
        f"Caffeine: {fmt_num(r.caffeine)} mg"
    )


def _bucket_label(metric: Metric, bucket: Bucket) -> str:
    low, high = THRESHOLDS[metric]
    unit = metric.unit
    if bucket is Bucket.LOW:
        return f"Low (&lt; {fmt_num(low)} {unit})"
    if bucket is Bucket.MEDIUM:
        return f"Medium ({fmt_num(low)}-{fmt_num(high)} {unit})"
    return f"High (&ge; {fmt_num(high)} {unit})"


@dataclass
class PictogramArtist:
    """Pictogram (unit chart) of a RecordStore."""

    store: RecordStore
    canvas: Canvas = field(default_factory=Canvas)
    margins: Margins = field(default_factory=Margins)
    band_padding: float = DEFAULT_BAND_PADDING
    color_schemes: Dict[str, Dict[str, str]] = field(
        default_factory=lambda: COLOR_SCHEMES
    )
    chart_id: str = "pictogram"

    def __post_init__(self) -> None:
        countries = self.store.countries()
        slugs = unique_slugs(countries, reserved=[ALL_COUNTRIES])
        self._country_by_token: Dict[str, str] = {ALL_COUNTRIES: ALL_COUNTRIES}
        self._country_by_token.update(zip(slugs, countries))

    @classmethod
    def from_config(cls, store: RecordStore, config: ChartConfig) -> "PictogramArtist":
        return cls(
            store=store,
            canvas=config.canvas,
            margins=config.margins,
            band_padding=config.band_padding,
            color_schemes=config.color_schemes,
        )

    # Options for the StateRegistry ----------------------------------
    def country_options(self) -> List[Tuple[str, str]]:
        """(token, label) pairs: "all" first, then countries as first seen."""
        return [
            (token, ALL_COUNTRIES_LABEL if token == ALL_COUNTRIES else name)
            for token, name in self._country_by_token.items()
        ]

    @staticmethod
    def metric_options() -> List[Tuple[str, str]]:
        return [(m.value, m.label) for m in Metric]

    @staticmethod
    def view_options() -> List[Tuple[str, str]]:
        return [(v.value, VIEW_LABELS[v]) for v in ViewMode]

    # Single variant -------------------------------------------------
    def recompute(self, state: ViewState) -> Recomputation:
        return recompute(state, self.store, self.canvas, self.band_padding)

    def render(self, result: Recomputation) -> str:
        """Return the SVG for one computed view (points, axes, titles)."""
        state = result.state
        c, m = self.canvas, self.margins
        total_w = c.width + m.left + m.right
        total_h = c.height + m.top + m.bottom

        if not result.points:
            body = (
                f'<text class="dotplt-axis-label" x="{c.width / 2:.2f}" '
                f'y="{c.height / 2:.2f}" text-anchor="middle">No data</text>'
            )
        elif state.view_mode is ViewMode.DISTRIBUTION:
            body = self._distribution_axes(result) + "\n" + self._points(result.points, state.metric)
        else:
            body = self._age_axes(result) + "\n" + self._points(result.points, state.metric)

        return (
            f'<svg class="dotplt-svg" viewBox="0 0 {total_w:g} {total_h:g}" '
            f'preserveAspectRatio="xMidYMid meet">'
            f'<g transform="translate({m.left:g},{m.top:g})">\n'
            f"{body}\n"
            "</g></svg>"
        )

    def _points(self, points: List[PositionedPoint], metric: Metric) -> str:
        scheme = self.color_schemes[metric.value]
        r = self.canvas.point_diameter
        lines: List[str] = []
        for p in points:
            rec = p.record
            buckets = "".join(
                f' data-{mm.value}="{classify(rec.value(mm), mm).value}"' for mm in Metric
            )
            lines.append(
                f'<circle class="dotplt-point" data-id="{rec.id}"{buckets}'
                f' cx="{p.x:.2f}" cy="{p.y:.2f}" r="{r:g}"'
                f' fill="{esc(scheme[p.bucket.value])}">'
                f"<title>{esc(_tooltip(rec))}</title></circle>"
            )
        return "\n".join(lines)

    def _distribution_axes(self, result: Recomputation) -> str:
        c = self.canvas
        bands = country_band_scale(result.groups, c, self.band_padding)
        max_count = max(g.count for g in result.groups)
        y = LinearScale((0, max_count), (c.height, 0))

        parts: List[str] = ['<g class="dotplt-axis dotplt-axis--x">']
        parts.append(f'<line x1="0" y1="{c.height:g}" x2="{c.width:g}" y2="{c.height:g}"/>')
        for g in result.groups:
            cx = bands.center(g.label)
            parts.append(
                f'<text transform="translate({cx:.2f},{c.height + 12:g}) rotate(-45)" '
                f'text-anchor="end">{esc(g.label)}</text>'
            )
        parts.append("</g>")

        parts.append('<g class="dotplt-axis dotplt-axis--y">')
        parts.append(f'<line x1="0" y1="0" x2="0" y2="{c.height:g}"/>')
        for t in y.ticks(COUNT_TICKS):
            ty = y(t)
            parts.append(
                f'<line x1="-6" y1="{ty:.2f}" x2="0" y2="{ty:.2f}"/>'
                f'<text x="-9" y="{ty:.2f}" dy="0.32em" text-anchor="end">{fmt_num(t)}</text>'
            )
        parts.append("</g>")
        parts.append(self._axis_titles("Country", "Number of People", 60))
        return "\n".join(parts)

    def _age_axes(self, result: Recomputation) -> str:
        c = self.canvas
        metric = result.state.metric
        bands = age_band_scale(result.groups, c, self.band_padding)
        x = LinearScale(metric_domain(result.records, metric), (0, c.width))

        parts: List[str] = ['<g class="dotplt-axis dotplt-axis--x">']
        parts.append(f'<line x1="0" y1="{c.height:g}" x2="{c.width:g}" y2="{c.height:g}"/>')
        for t in x.ticks(METRIC_TICKS):
            tx = x(t)
            parts.append(
                f'<line x1="{tx:.2f}" y1="{c.height:g}" x2="{tx:.2f}" y2="{c.height + 6:g}"/>'
                f'<text x="{tx:.2f}" y="{c.height + 9:g}" dy="0.71em" '
                f'text-anchor="middle">{fmt_num(t)}</text>'
            )
        parts.append("</g>")

        parts.append('<g class="dotplt-axis dotplt-axis--y">')
        parts.append(f'<line x1="0" y1="0" x2="0" y2="{c.height:g}"/>')
        for g in result.groups:
            cy = bands.center(g.label)
            parts.append(
                f'<text x="-9" y="{cy:.2f}" dy="0.32em" text-anchor="end">{esc(g.label)}</text>'
            )
        parts.append("</g>")
        parts.append(
            self._axis_titles(f"{metric.label} ({metric.unit})", "Age Group", 50)
        )
        return "\n".join(parts)

    def _axis_titles(self, x_title: str, y_title: str, x_offset: float) -> str:
        c = self.canvas
        return (
            f'<text class="dotplt-axis-label" x="{c.width / 2:.2f}" '
            f'y="{c.height + x_offset:g}" text-anchor="middle">{esc(x_title)}</text>\n'
            f'<text class="dotplt-axis-label" transform="rotate(-90)" '
            f'x="{-c.height / 2:.2f}" y="-60" text-anchor="middle">{esc(y_title)}</text>'
        )

    def _stats_html(self, token: str, stats: Summary, metric: Metric) -> str:
        name = ALL_COUNTRIES_LABEL if token == ALL_COUNTRIES else self._country_by_token[token]
        if stats.is_empty:
            average = f"Average {esc(metric.label)}: <strong>no data</strong>"
        else:
            average = (
                f"Average {esc(metric.label)}: "
                f"<strong>{stats.mean:.2f} {esc(metric.unit)}</strong>"
            )
        return (
            f'<p class="dotplt-stats" data-country="{token}" data-metric="{metric.value}">'
            f"<strong>{esc(name)}</strong> | Showing <strong>{stats.count}</strong> people | "
            f"{average}</p>"
        )

    def _legend_html(self, metric: Metric) -> str:
        scheme = self.color_schemes[metric.value]
        items = [f'<span class="dotplt-legend-theme">{esc(scheme.get("theme", ""))}</span>']
        for b in Bucket:
            items.append(
                f'<span><i class="dotplt-legend-color" data-bucket="{b.value}" '
                f'style="background: {esc(scheme[b.value])}"></i>{_bucket_label(metric, b)}</span>'
            )
        return (
            f'<div class="dotplt-legend" data-metric="{metric.value}">'
            + "".join(items)
            + "</div>"
        )

    # All variants ---------------------------------------------------
    def render_html_views(
        self,
        metric_var: "RadioVar",
        country_var: "RadioVar",
        view_var: "RadioVar",
    ) -> Tuple[str, str]:
        """Pre-render every reachable view and the CSS that picks one.

        ``country_var`` must use the tokens of ``country_options()``.
        """
        unknown = [v for v in country_var.values if v not in self._country_by_token]
        if unknown:
            raise ValueError(f"Unknown country options: {unknown}")

        metrics = [Metric(v) for v in metric_var.values]
        views = [ViewMode(v) for v in view_var.values]
        tokens = country_var.values

        stats_parts: List[str] = []
        variant_parts: List[str] = []
        css: List[str] = [
            ".dotplt-variant, .dotplt-stats, .dotplt-legend { display: none; }",
        ]

        for token in tokens:
            country = self._country_by_token[token]
            for metric in metrics:
                stats = summarize(self.store.filter(country), metric)
                stats_parts.append(self._stats_html(token, stats, metric))
                sel = selection_selector([(country_var, token), (metric_var, metric.value)])
                css.append(
                    f'{sel} .dotplt-stats[data-country="{token}"][data-metric="{metric.value}"] '
                    "{ display: block; }"
                )

            for view in views:
                if view is ViewMode.DISTRIBUTION:
                    keyed = [("", metrics[0])]
                else:
                    keyed = [(m.value, m) for m in metrics]
                for metric_key, metric in keyed:
                    result = self.recompute(ViewState(metric, country, view))
                    attrs = f'data-view="{view.value}" data-country="{token}"'
                    selection = [(view_var, view.value), (country_var, token)]
                    if metric_key:
                        attrs += f' data-metric="{metric_key}"'
                        selection.append((metric_var, metric_key))
                    variant_parts.append(
                        f'<div class="dotplt-variant" {attrs}>{self.render(result)}</div>'
                    )
                    attr_sel = "".join(
                        f"[{a}]" for a in attrs.split(" ")
                    )
                    css.append(
                        f"{selection_selector(selection)} .dotplt-variant{attr_sel} "
                        "{ display: block; }"
                    )

        legend_parts = [self._legend_html(m) for m in metrics]
        for m in metrics:
            css.append(
                f'{metric_var.checked_selector(m.value)} .dotplt-legend[data-metric="{m.value}"] '
                "{ display: flex; }"
            )
            scheme = self.color_schemes[m.value]
            for b in Bucket:
                css.append(
                    f'{metric_var.checked_selector(m.value)} .dotplt-point[data-{m.value}="{b.value}"] '
                    f"{{ fill: {scheme[b.value]}; }}"
                )

        logger.info(
            f"Rendered {len(variant_parts)} chart variants for {len(tokens)} country options"
        )
        html = (
            f'<div class="dotplt-pictogram" data-chart-id="{esc(self.chart_id)}">\n'
            + "\n".join(stats_parts)
            + "\n"
            + "\n".join(legend_parts)
            + "\n"
            + "\n".join(variant_parts)
            + "\n</div>"
        )
        return (html, "\n".join(css))
