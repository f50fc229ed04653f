"""Tests for date and URL helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from nitron.utils import as_utc, day_label, extract_domain, serialize_day_buckets


def test_day_label_has_unpadded_day():
    assert day_label(datetime(2026, 10, 5, 12, 0), timezone.utc) == "Monday, October 5, 2026"


def test_day_label_converts_to_time_zone():
    plus_ten = timezone(timedelta(hours=10))
    assert day_label(datetime(2026, 10, 19, 20, 0, tzinfo=timezone.utc), plus_ten) == "Tuesday, October 20, 2026"


def test_as_utc_treats_naive_as_utc():
    assert as_utc(datetime(2026, 1, 1, 12, 0)) == datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("url, domain", [
    ("https://example.com/path/page", "example.com"),
    ("http://example.com", "example.com"),
    ("https://sub.example.com:8080/x", "sub.example.com:8080"),
    ("about:blank", "about:blank"),
])
def test_extract_domain(url, domain):
    assert extract_domain(url) == domain


def test_serialize_day_buckets_keeps_order():
    buckets = {"Monday, October 19, 2026": ["b"], "Sunday, October 18, 2026": ["a"]}
    assert serialize_day_buckets(buckets) == [
        {"day": "Monday, October 19, 2026", "urls": ["b"]},
        {"day": "Sunday, October 18, 2026", "urls": ["a"]},
    ]
