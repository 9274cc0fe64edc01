import pytest

from dotplt.core.classify import Bucket, Metric
from dotplt.core.layout import Canvas, ViewMode
from dotplt.core.records import RecordStore
from dotplt.core.view import (
    ViewState,
    on_country_change,
    on_metric_change,
    on_view_change,
    recompute,
)


def test_handlers_return_new_states():
    state = ViewState()
    assert (state.metric, state.country, state.view_mode) == (Metric.COFFEE, "all", ViewMode.DISTRIBUTION)

    sleep = on_metric_change(state, "sleep")
    japan = on_country_change(sleep, "Japan")
    by_age = on_view_change(japan, "byAge")

    assert by_age == ViewState(Metric.SLEEP, "Japan", ViewMode.BY_AGE)
    assert state == ViewState()
    assert sleep.country == "all"


def test_state_rejects_unknown_names():
    with pytest.raises(ValueError):
        ViewState(metric="tea")
    with pytest.raises(ValueError):
        on_view_change(ViewState(), "metric")


def test_distribution_scenario(two_us):
    result = recompute(ViewState("coffee", "all", "distribution"), two_us)

    assert [(g.label, g.count) for g in result.groups] == [("US", 2)]
    buckets = {p.id: p.bucket for p in result.points}
    assert buckets == {1: Bucket.LOW, 2: Bucket.HIGH}
    assert (result.stats.count, result.stats.mean) == (2, 3)


def test_by_age_scenario(two_us):
    result = recompute(ViewState("coffee", "all", "byAge"), two_us)

    assert [(g.label, [r.id for r in g.members]) for g in result.groups] == [
        ("26-35", [1]),
        ("36-45", [2]),
    ]
    assert sorted(p.id for p in result.points) == [1, 2]


def test_country_filter_scenario(mixed_store):
    result = recompute(ViewState("caffeine", "US", "distribution"), mixed_store)

    assert result.records == tuple(r for r in mixed_store if r.country == "US")
    assert result.stats.count == 2
    assert result.stats.mean == 250
    assert len(mixed_store) == 5


def test_unknown_country_gives_empty_view(mixed_store):
    result = recompute(ViewState(country="Atlantis"), mixed_store)
    assert result.groups == []
    assert result.points == []
    assert result.stats.is_empty


def test_by_age_domain_covers_the_whole_filtered_set(make_record):
    # the 120-year-old sits in no band but still widens the x domain
    store = RecordStore([make_record(1, age=30, coffee=1), make_record(2, age=120, coffee=9)])
    result = recompute(ViewState("coffee", "all", "byAge"), store, Canvas(100, 50, 4))
    (point,) = result.points
    assert point.x == pytest.approx(10)
