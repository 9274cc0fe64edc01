from __future__ import annotations

import argparse
import logging
from pathlib import Path

from dotplt.core.config import ChartConfig, read_chart_config
from dotplt.core.figure import Figure
from dotplt.core.logging_config import setup_logging
from dotplt.core.records import LoadFailure, load_records
from dotplt.plt import pictogram

logger = logging.getLogger("dotplt.build_chart")

OUT_PATH = Path("out/pictogram.html")


def build(data_path: Path, out_path: Path, config: ChartConfig) -> bool:
    """Write the chart (or the load-failure page) to *out_path*.

    Returns False when the data could not be loaded.
    """
    try:
        store = load_records(data_path)
    except LoadFailure as e:
        logger.error(f"Error loading the CSV file: {e}")
        fig = Figure(title=config.title)
        fig.set_error(str(e))
        fig.write_html(out_path)
        return False

    pictogram(store, config).write_html(out_path)
    return True


def main() -> None:
    ap = argparse.ArgumentParser(description="Render the survey pictogram as one HTML file (no JS).")
    ap.add_argument("--in", dest="in_path", default=None, help="Survey CSV (default: config data_path)")
    ap.add_argument("--out", dest="out_path", default=str(OUT_PATH), help="Output HTML")
    ap.add_argument("--config", dest="config_path", default=None, help="Sectioned config CSV")
    ap.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING or ERROR")
    ap.add_argument("--log-file", default=None, help="Also write logs to this file")
    args = ap.parse_args()

    setup_logging(getattr(logging, args.log_level.upper(), logging.INFO), args.log_file)

    config = read_chart_config(args.config_path) if args.config_path else ChartConfig()
    data_path = Path(args.in_path) if args.in_path else config.data_path

    if not build(data_path, Path(args.out_path), config):
        raise SystemExit(1)


if __name__ == "__main__":
    main()
