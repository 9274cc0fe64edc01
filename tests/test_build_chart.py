import logging

from build_chart import build
from dotplt.core.config import ChartConfig
from dotplt.core.logging_config import setup_logging
from dotplt.core.records import RecordStore
from examples.generate_demo_data import make_survey_df


def test_build_writes_the_chart(survey_csv, tmp_path):
    out = tmp_path / "out" / "chart.html"
    assert build(survey_csv, out, ChartConfig()) is True
    html = out.read_text(encoding="utf-8")
    assert html.count('class="dotplt-variant"') == 3 * 4  # all, US, Japan
    assert "Error loading data" not in html


def test_build_reports_load_failure(tmp_path, caplog):
    out = tmp_path / "chart.html"
    with caplog.at_level(logging.ERROR, logger="dotplt"):
        ok = build(tmp_path / "missing.csv", out, ChartConfig())
    assert ok is False
    assert "Error loading data. Please check the file path." in out.read_text(encoding="utf-8")
    assert "Error loading the CSV file" in caplog.text


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "dotplt.log"
    setup_logging(logging.DEBUG, str(log_file))
    setup_logging(logging.DEBUG, str(log_file))

    logger = logging.getLogger("dotplt")
    assert len(logger.handlers) == 2
    logging.getLogger("dotplt.test").info("hello from the test")
    for h in logger.handlers:
        h.flush()
    assert "dotplt.test - INFO - hello from the test" in log_file.read_text(encoding="utf-8")

    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)


def test_demo_data_loads_cleanly():
    df = make_survey_df(n=200, seed=7)
    store = RecordStore.from_frame(df)
    assert len(store) == 200
    assert all(r.age >= 18 for r in store)
    assert make_survey_df(n=5, seed=7).equals(make_survey_df(n=5, seed=7))
