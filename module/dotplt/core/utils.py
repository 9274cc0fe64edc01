"""Shared utilities.

``esc()`` HTML-escapes any data-supplied string (country names, genders,
titles) before it goes into text nodes or attribute values. ``slug()``
turns a label into a token that is safe inside ids and CSS attribute
selectors.
"""

from __future__ import annotations

import html
import re
from typing import Any, Iterable, List


def esc(value: Any) -> str:
    """Return an HTML-escaped string representation of *value*.

    Escapes ``&``, ``<``, ``>``, and both single and double quotes so the
    result is safe for use in element text or attribute values.
    """
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def slug(value: Any) -> str:
    """Lowercase token of ``[a-z0-9-]`` for *value* (``"South Korea"`` -> ``"south-korea"``)."""
    s = re.sub(r"[^a-z0-9]+", "-", str(value).strip().lower()).strip("-")
    return s or "x"


def unique_slugs(values: Iterable[Any], reserved: Iterable[str] = ()) -> List[str]:
    """Slug each value, suffixing ``-2``, ``-3``... on collisions."""
    taken = set(reserved)
    out: List[str] = []
    for v in values:
        base = slug(v)
        s, n = base, 1
        while s in taken:
            n += 1
            s = f"{base}-{n}"
        taken.add(s)
        out.append(s)
    return out


def fmt_num(v: float) -> str:
    """Compact number for axis ticks and tooltips (``2``, ``7.5``, ``0.25``)."""
    return f"{v:.2f}".rstrip("0").rstrip(".")
