"""Interactive state primitives.

StateRegistry owns the chart's interactive variables (metric, country,
view) which are rendered as HTML-only radio pills. Each variable provides
CSS selector helpers used with ``:has()`` to switch between pre-rendered
chart variants, so the current selection lives in the page and never in
Python.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Sequence, Tuple

from .utils import esc

FIG_CONTAINER = ".dotplt-fig"


@dataclass(frozen=True)
class _Option:
    value: str
    label: str


def _normalize_options(
    options: Sequence[str] | Sequence[Tuple[str, str]] | Mapping[str, str],
) -> List[_Option]:
    """Normalize different option specifications into _Option objects.

    Accepts:
    - Sequence[str]: value and label are the same token
    - Sequence[(value, label)]
    - Mapping[value, label]

    Values are internal tokens (expected to be CSS/HTML safe already, see
    ``utils.slug``). Labels are user-facing and will be escaped via ``esc()``.
    """
    out: List[_Option] = []

    if isinstance(options, Mapping):
        for v, label in options.items():
            out.append(_Option(str(v), str(label)))
        return out

    for item in options:
        if isinstance(item, tuple) and len(item) == 2:
            v, label = item
            out.append(_Option(str(v), str(label)))
        else:
            out.append(_Option(str(item), str(item)))

    return out


@dataclass
class RadioVar:
    """Single-choice variable rendered as a group of radio buttons."""

    key: str
    options: List[_Option]
    default: str | None = None
    title: str | None = None

    @property
    def values(self) -> List[str]:
        return [opt.value for opt in self.options]

    def html(self) -> str:
        """Return HTML for the radio inputs + pill labels."""
        parts: List[str] = []
        key = self.key
        parts.append(
            f'<div class="dotplt-control dotplt-control--radio" data-var-key="{key}">'
        )
        if self.title:
            parts.append(f'  <span class="dotplt-control-title">{esc(self.title)}</span>')

        for opt in self.options:
            value = opt.value
            input_id = f"dotplt-{key}-{value}"
            checked = (
                ' checked="checked"'
                if (self.default is not None and value == self.default)
                else ""
            )
            parts.append(
                '  <input type="radio"'
                f' class="dotplt-input dotplt-input--radio"'
                f' id="{input_id}"'
                f' name="{key}"'
                f' value="{value}"'
                f' data-var-key="{key}"'
                f' data-var-value="{value}"{checked}>'
            )
            parts.append(
                f'  <label class="dotplt-pill" for="{input_id}">{esc(opt.label)}</label>'
            )

        parts.append("</div>")
        return "\n".join(parts)

    def checked_condition(self, value: str) -> str:
        """Return the ``:has(...)`` clause true when *value* is selected."""
        if value not in self.values:
            raise ValueError(f"Unknown value for {self.key}: {value!r}")
        return (
            f':has(input[type="radio"][data-var-key="{self.key}"]'
            f'[data-var-value="{value}"]:checked)'
        )

    def checked_selector(self, value: str, container: str = FIG_CONTAINER) -> str:
        """Return a CSS selector that matches when *value* is selected.

        Example (default container)::

            .dotplt-fig:has(input[type="radio"][data-var-key="metric"][
                data-var-value="sleep"]:checked)
        """
        return container + self.checked_condition(value)


def selection_selector(
    selection: Sequence[Tuple[RadioVar, str]], container: str = FIG_CONTAINER
) -> str:
    """Selector matching when every (var, value) pair is selected at once."""
    return container + "".join(var.checked_condition(v) for var, v in selection)


class StateRegistry:
    """Owns interactive variables and renders their controls."""

    def __init__(self) -> None:
        self._vars: Dict[str, RadioVar] = {}

    # Public API -----------------------------------------------------
    def add_radio(
        self,
        key: str,
        options: Sequence[str] | Sequence[Tuple[str, str]] | Mapping[str, str],
        default: str | None = None,
        title: str | None = None,
    ) -> RadioVar:
        if key in self._vars:
            raise ValueError(f"Variable '{key}' is already registered")
        normalized = _normalize_options(options)
        if default is None and normalized:
            default = normalized[0].value
        radio = RadioVar(key=key, options=normalized, default=default, title=title)
        self._vars[key] = radio
        return radio

    def get(self, key: str) -> RadioVar:
        return self._vars[key]

    def __contains__(self, key: str) -> bool:
        return key in self._vars

    def render_html(self) -> str:
        """Return concatenated HTML for all registered controls."""
        return "\n".join(var.html() for var in self._vars.values())
