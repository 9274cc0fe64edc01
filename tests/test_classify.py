import pytest

from dotplt.core.classify import Bucket, Metric, classify


@pytest.mark.parametrize(
    "value, metric, expected",
    [
        (0, "coffee", Bucket.LOW),
        (1.99, "coffee", Bucket.LOW),
        (2, "coffee", Bucket.MEDIUM),
        (3.99, "coffee", Bucket.MEDIUM),
        (4, "coffee", Bucket.HIGH),
        (5.99, "sleep", Bucket.LOW),
        (6, "sleep", Bucket.MEDIUM),
        (7.49, "sleep", Bucket.MEDIUM),
        (7.5, "sleep", Bucket.HIGH),
        (199, "caffeine", Bucket.LOW),
        (200, "caffeine", Bucket.MEDIUM),
        (399.9, "caffeine", Bucket.MEDIUM),
        (400, "caffeine", Bucket.HIGH),
    ],
)
def test_boundaries_go_to_upper_bucket(value, metric, expected):
    assert classify(value, metric) is expected


def test_accepts_enum_and_negative_values():
    assert classify(-1, Metric.SLEEP) is Bucket.LOW
    assert classify(10_000, Metric.CAFFEINE) is Bucket.HIGH


def test_unknown_metric_raises():
    with pytest.raises(ValueError):
        classify(1, "tea")


def test_metric_labels_and_units():
    assert Metric.COFFEE.label == "Coffee Intake"
    assert Metric.SLEEP.unit == "hours"
    assert Metric("caffeine").unit == "mg"
