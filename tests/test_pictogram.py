import re

import pytest

from dotplt.core.layout import Canvas
from dotplt.core.records import RecordStore
from dotplt.core.state import StateRegistry
from dotplt.core.view import ViewState
from dotplt.plots.pictogram import PictogramArtist


@pytest.fixture
def artist(mixed_store):
    return PictogramArtist(mixed_store, canvas=Canvas(300, 200, 4))


@pytest.fixture
def controls(artist):
    reg = StateRegistry()
    return (
        reg.add_radio("metric", artist.metric_options()),
        reg.add_radio("country", artist.country_options()),
        reg.add_radio("view", artist.view_options()),
    )


def test_country_options_use_safe_tokens(artist):
    assert artist.country_options() == [
        ("all", "All Countries"),
        ("us", "US"),
        ("japan", "Japan"),
        ("south-korea", "South Korea"),
    ]


def test_render_draws_one_circle_per_point(artist):
    result = artist.recompute(ViewState("coffee", "all", "distribution"))
    svg = artist.render(result)

    ids = re.findall(r'<circle class="dotplt-point" data-id="(\d+)"', svg)
    assert sorted(map(int, ids)) == [1, 2, 3, 4, 5]
    assert 'data-id="1" data-coffee="low" data-sleep="high" data-caffeine="low"' in svg
    assert 'fill="#654321"' in svg  # id 2: high coffee
    assert "Number of People" in svg
    assert ">South Korea</text>" in svg
    assert "<title>US\nAge: 30\nGender: Female\nCoffee: 1 cups\nSleep: 8 hours\nCaffeine: 50 mg</title>" in svg


def test_render_age_view_axes(artist):
    svg = artist.render(artist.recompute(ViewState("sleep", "all", "byAge")))
    assert "Sleep Hours (hours)" in svg
    assert "Age Group" in svg
    assert ">56+</text>" in svg


def test_render_without_points_says_no_data(artist):
    svg = artist.render(artist.recompute(ViewState(country="Atlantis")))
    assert "No data" in svg
    assert "<circle" not in svg


def test_views_cover_every_reachable_selection(artist, controls):
    metric_var, country_var, view_var = controls
    html, css = artist.render_html_views(metric_var, country_var, view_var)

    # 4 country options x (1 distribution + 3 age-view metrics)
    assert html.count('class="dotplt-variant"') == 16
    assert html.count('class="dotplt-stats"') == 12
    assert html.count('class="dotplt-legend"') == 3
    assert 'data-view="distribution" data-country="south-korea"' in html
    assert 'data-view="byAge" data-country="japan" data-metric="caffeine"' in html


def test_stats_line_per_country_and_metric(artist, controls):
    html, _ = artist.render_html_views(*controls)
    assert (
        '<p class="dotplt-stats" data-country="us" data-metric="coffee">'
        "<strong>US</strong> | Showing <strong>2</strong> people | "
        "Average Coffee Intake: <strong>3.00 cups</strong></p>"
    ) in html
    assert "<strong>All Countries</strong> | Showing <strong>5</strong> people" in html


def test_css_switches_variants_and_colours(artist, controls):
    metric_var, country_var, view_var = controls
    _, css = artist.render_html_views(metric_var, country_var, view_var)

    assert ".dotplt-variant, .dotplt-stats, .dotplt-legend { display: none; }" in css
    assert (
        f'{metric_var.checked_selector("sleep")} .dotplt-point[data-sleep="high"] '
        "{ fill: #4169E1; }"
    ) in css
    assert (
        '.dotplt-variant[data-view="byAge"][data-country="us"][data-metric="coffee"] '
        "{ display: block; }"
    ) in css


def test_unknown_country_tokens_are_rejected(artist):
    reg = StateRegistry()
    with pytest.raises(ValueError):
        artist.render_html_views(
            reg.add_radio("metric", artist.metric_options()),
            reg.add_radio("country", ["all", "narnia"]),
            reg.add_radio("view", artist.view_options()),
        )


def test_colliding_country_slugs_stay_distinct(make_record):
    store = RecordStore([make_record(1, country="Côte d'Ivoire"), make_record(2, country="C te d Ivoire")])
    tokens = [t for t, _ in PictogramArtist(store).country_options()]
    assert len(set(tokens)) == 3
