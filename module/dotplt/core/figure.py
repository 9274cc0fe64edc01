"""Figure: top-level container; writes one self-contained HTML file.

The page holds a controls bar (rendered from the StateRegistry), a grid of
axes boxes and a single <style> block that merges the shell CSS with the
variant-switching CSS of every axes. No JavaScript.

When loading the data fails the figure is switched into error mode and
the chart area is replaced by a message.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from .axes import Axes
from .state import StateRegistry
from .theme import THEME
from .utils import esc

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Coffee & Health: one dot per person"
LOAD_ERROR_MESSAGE = "Error loading data. Please check the file path."


class Figure:
    """Figure with a shared StateRegistry and one or more Axes."""

    def __init__(
        self, state: Optional[StateRegistry] = None, title: str = DEFAULT_TITLE
    ) -> None:
        # Always have a registry so _build_html() can rely on ``self.state``.
        self.state: StateRegistry = state or StateRegistry()
        self.title = title
        self._axes: List[Axes] = []
        self._error: Optional[str] = None

    # Public API -----------------------------------------------------
    def add_subplot(self) -> Axes:
        """Create a new Axes and attach it to this figure."""
        ax = Axes(figure=self, index=len(self._axes) + 1)
        self._axes.append(ax)
        return ax

    @property
    def axes(self) -> List[Axes]:
        """Return a shallow copy of the axes list."""
        return list(self._axes)

    def set_error(self, detail: str = "") -> None:
        """Replace the chart area with the load-failure message."""
        self._error = detail

    @property
    def has_error(self) -> bool:
        return self._error is not None

    def to_html(self) -> str:
        return self._build_html()

    def write_html(self, path: str | Path) -> None:
        """Write one self-contained HTML file (no JS)."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self._build_html(), encoding="utf-8")
        logger.info(f"Wrote figure: {path.resolve()}")

    # Internal helpers -----------------------------------------------
    def _body_html(self) -> str:
        if self._error is not None:
            detail = (
                f'\n      <p class="dotplt-error-detail">{esc(self._error)}</p>'
                if self._error
                else ""
            )
            return (
                '    <div class="dotplt-chart" id="chart">\n'
                f'      <p class="dotplt-error">{esc(LOAD_ERROR_MESSAGE)}</p>{detail}\n'
                "    </div>"
            )

        controls_html = self.state.render_html()
        controls_block = (
            "\n".join("      " + line for line in controls_html.splitlines())
            if controls_html
            else "      <!-- no controls -->"
        )
        axes_boxes = [ax._render_box() for ax in self._axes]
        axes_block = (
            "\n".join("      " + box for box in axes_boxes)
            if axes_boxes
            else "      <!-- no axes -->"
        )
        return (
            '    <div class="dotplt-controls">\n'
            f"{controls_block}\n"
            "    </div>\n"
            '    <div class="dotplt-axes-grid" id="chart">\n'
            f"{axes_block}\n"
            "    </div>"
        )

    def _build_html(self) -> str:
        extra_css_block = "\n".join(
            ax.extra_css for ax in self._axes if ax.extra_css and self._error is None
        ).strip()
        if extra_css_block:
            extra_css_block = "\n\n" + extra_css_block

        bg = THEME["background"]
        surface = THEME["surface"]
        fg = THEME["foreground"]
        border = THEME["border"]
        pill_bg = THEME["pill_bg"]
        accent = THEME["accent"]
        accent_soft = THEME["accent_soft"]
        muted = THEME["muted"]
        error = THEME["error"]

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{esc(self.title)}</title>
<style>
*, *::before, *::after {{
  box-sizing: border-box;
}}

body {{
  margin: 0;
  padding: clamp(2vw, 1rem, 5vw);
  font-family: system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif;
  background: {bg};
  color: {fg};
  line-height: 1.5;
  -webkit-font-smoothing: antialiased;
}}

.dotplt-fig {{
  width: 100%;
  max-width: min(1320px, 100%);
  margin: 0 auto;
  padding: clamp(1rem, 2.5vw, 1.5rem);
  border-radius: clamp(12px, 2vw, 16px);
  border: 1px solid {border};
  background: {surface};
  box-shadow: 0 18px 45px rgba(15, 23, 42, 0.08);
}}

.dotplt-title {{
  margin: 0 0 1rem 0;
  font-size: 1.35rem;
  font-weight: 600;
}}

.dotplt-controls {{
  display: flex;
  flex-direction: column;
  gap: 0.5rem;
  margin-bottom: 1rem;
}}

.dotplt-control {{
  display: flex;
  flex-wrap: wrap;
  gap: clamp(0.35rem, 1vw, 0.5rem);
  align-items: center;
  min-width: 0;
}}

.dotplt-control-title {{
  min-width: 5rem;
  font-size: 0.8rem;
  font-weight: 600;
  color: {muted};
  text-transform: uppercase;
  letter-spacing: 0.04em;
}}

.dotplt-input {{
  position: absolute;
  opacity: 0;
  pointer-events: none;
}}

.dotplt-pill {{
  display: inline-block;
  padding: 0.25rem 0.8rem;
  border-radius: 999px;
  border: 1px solid {border};
  background: {pill_bg};
  font-size: 0.85rem;
  cursor: pointer;
  user-select: none;
  color: {muted};
  transition: background-color 140ms ease-out, color 140ms ease-out,
              border-color 140ms ease-out;
}}

.dotplt-pill:hover {{
  background: {accent_soft};
  border-color: {accent};
  color: {accent};
}}

.dotplt-input:checked + .dotplt-pill {{
  background: {accent};
  color: #ffffff;
  border-color: {accent};
}}

.dotplt-axes-grid {{
  display: grid;
  gap: 1.25rem;
  grid-template-columns: 1fr;
  min-width: 0;
}}

.dotplt-axes-box {{
  width: 100%;
  min-width: 0;
  border-radius: clamp(8px, 1.5vw, 12px);
  border: 1px solid {border};
  background: {surface};
  padding: clamp(0.75rem, 2vw, 1.25rem);
}}

.dotplt-stats {{
  margin: 0 0 0.5rem 0;
  font-size: 0.95rem;
}}

.dotplt-legend {{
  display: flex;
  flex-wrap: wrap;
  gap: 1rem;
  align-items: center;
  font-size: 0.85rem;
  color: {muted};
}}

.dotplt-legend-color {{
  display: inline-block;
  width: 12px;
  height: 12px;
  margin-right: 0.35rem;
  border-radius: 50%;
  vertical-align: middle;
}}

.dotplt-svg {{
  width: 100%;
  height: auto;
  overflow: visible;
}}

.dotplt-axis line, .dotplt-axis path {{
  stroke: {muted};
  stroke-width: 1;
}}

.dotplt-axis text {{
  fill: {muted};
  font-size: 12px;
}}

.dotplt-axis-label {{
  fill: {fg};
  font-size: 13px;
  font-weight: 600;
}}

.dotplt-point {{
  opacity: 0.8;
  transition: r 200ms ease-out;
}}

.dotplt-point:hover {{
  r: 8px;
  stroke: #000;
  stroke-width: 1;
  opacity: 1;
}}

.dotplt-error {{
  color: {error};
  font-weight: 600;
}}

.dotplt-error-detail {{
  color: {muted};
  font-size: 0.85rem;
}}{extra_css_block}
</style>
</head>
<body>
<div class="dotplt-fig">
  <h1 class="dotplt-title">{esc(self.title)}</h1>
  <div class="dotplt-main-layout">
{self._body_html()}
  </div>
</div>
</body>
</html>
"""
