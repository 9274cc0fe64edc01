"""Axes: subplot container for one artist's HTML and CSS.

The parent Figure places each Axes in its grid and merges the CSS each
artist produced (variant switching rules) into the page's <style>.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from .figure import Figure


@dataclass
class Axes:
    figure: "Figure"
    index: int
    _inner_html: str = field(default="", repr=False)
    _extra_css: str = field(default="", repr=False)

    def set_html(self, html: str) -> None:
        """Set raw HTML content to be rendered inside this axes box."""
        self._inner_html = html

    def set_extra_css(self, css: str) -> None:
        """Set CSS to be merged into the figure's main <style>."""
        self._extra_css = css

    def add_views(self, views: Tuple[str, str]) -> None:
        """Take the ``(html, css)`` pair returned by an artist's ``render_html_views``."""
        html, css = views
        self.set_html(html)
        self.set_extra_css(css)

    @property
    def extra_css(self) -> str:
        return self._extra_css

    def _render_box(self) -> str:
        """Return a single box for this axes, including inner HTML if any."""
        inner = self._inner_html or ""
        return (
            f'<div class="dotplt-axes-box" data-axes-index="{self.index}">{inner}</div>'
        )
