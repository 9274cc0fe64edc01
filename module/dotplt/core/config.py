"""Chart configuration.

Defaults describe a 1200 px wide container minus the
80/40 px side margins, 600 px tall minus 60/80 px top/bottom, 4 px points,
0.2 band padding). A sectioned CSV can override them:

    section,key,value,metric,bucket,color
    meta,title,My chart,,,
    meta,data_path,data/survey.csv,,,
    layout,width,900,,,
    layout,point_diameter,3,,,
    palette,,,coffee,high,#000000

Sections: ``meta`` (title, data_path), ``layout`` (width, height,
point_diameter, band_padding, margin_top/right/bottom/left) and
``palette`` (one row per metric/bucket colour).
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import pandas as pd

from .classify import Bucket, Metric
from .figure import DEFAULT_TITLE
from .layout import DEFAULT_BAND_PADDING, Canvas
from .theme import COLOR_SCHEMES

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path("data/synthetic_coffee_health_10000.csv")


@dataclass(frozen=True)
class Margins:
    top: float = 60
    right: float = 40
    bottom: float = 80
    left: float = 80


@dataclass
class ChartConfig:
    title: str = DEFAULT_TITLE
    data_path: Path = DEFAULT_DATA_PATH
    canvas: Canvas = field(default_factory=Canvas)
    margins: Margins = field(default_factory=Margins)
    band_padding: float = DEFAULT_BAND_PADDING
    color_schemes: Dict[str, Dict[str, str]] = field(
        default_factory=lambda: copy.deepcopy(COLOR_SCHEMES)
    )


_LAYOUT_KEYS = {
    "width": ("canvas", "width"),
    "height": ("canvas", "height"),
    "point_diameter": ("canvas", "point_diameter"),
    "margin_top": ("margins", "top"),
    "margin_right": ("margins", "right"),
    "margin_bottom": ("margins", "bottom"),
    "margin_left": ("margins", "left"),
}


def _number(key: str, raw: object) -> float:
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Config value for '{key}' is not a number: {raw!r}") from None


def read_chart_config(path: str | Path, base: Optional[ChartConfig] = None) -> ChartConfig:
    """Read a sectioned config CSV on top of *base* (defaults if omitted)."""
    path = Path(path)
    df = pd.read_csv(path, dtype=str).fillna("")
    cfg = copy.deepcopy(base) if base is not None else ChartConfig()

    canvas = {
        "width": cfg.canvas.width,
        "height": cfg.canvas.height,
        "point_diameter": cfg.canvas.point_diameter,
    }
    margins = {
        "top": cfg.margins.top,
        "right": cfg.margins.right,
        "bottom": cfg.margins.bottom,
        "left": cfg.margins.left,
    }

    for _, r in df.iterrows():
        section = str(r.get("section", "")).strip().lower()
        key = str(r.get("key", "")).strip()
        value = str(r.get("value", "")).strip()

        if section == "meta":
            if key == "title" and value:
                cfg.title = value
            elif key == "data_path" and value:
                cfg.data_path = Path(value)
            else:
                logger.debug(f"Ignoring meta key '{key}' in {path}")
        elif section == "layout":
            if key == "band_padding":
                cfg.band_padding = _number(key, value)
            elif key in _LAYOUT_KEYS:
                target, attr = _LAYOUT_KEYS[key]
                (canvas if target == "canvas" else margins)[attr] = _number(key, value)
            else:
                logger.debug(f"Ignoring layout key '{key}' in {path}")
        elif section == "palette":
            metric = Metric(str(r.get("metric", "")).strip())
            bucket = Bucket(str(r.get("bucket", "")).strip())
            color = str(r.get("color", "")).strip()
            if color:
                cfg.color_schemes[metric.value][bucket.value] = color
        elif section:
            logger.debug(f"Ignoring unknown section '{section}' in {path}")

    cfg.canvas = Canvas(**canvas)
    cfg.margins = Margins(**margins)
    logger.info(f"Read chart config from: {path}")
    return cfg
