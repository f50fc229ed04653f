"""Tests for the day summary report."""

from datetime import datetime, timezone

import pytest

from nitron.features import HistoryManager
from nitron.summary import DaySummary


@pytest.fixture
def history(fake_db):
    return HistoryManager(fake_db)


@pytest.fixture
def summary(history, clock):
    return DaySummary(history, now=clock, tz=timezone.utc)


def visit(history, clock, *urls):
    for url in urls:
        history.add_to_history(url)
        clock.advance(minutes=1)


def test_only_todays_history_counts(history, clock, summary):
    clock.set(datetime(2026, 10, 18, 20, 0, tzinfo=timezone.utc))
    visit(history, clock, "https://yesterday.example/")
    clock.set(datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc))
    visit(history, clock, "https://example.com/a", "https://python.org/")

    assert summary.todays_history() == ["https://python.org/", "https://example.com/a"]
    assert summary.unique_sites() == {"example.com", "python.org"}


def test_top_sites(history, clock, summary):
    visit(
        history, clock,
        "https://example.com/a",
        "http://python.org/",
        "https://example.com/b",
        "https://docs.python.org/3/",
        "https://example.com/c",
        "http://python.org/downloads",
    )

    assert summary.top_sites() == [("example.com", 3), ("python.org", 2), ("docs.python.org", 1)]
    assert summary.top_sites(n=1) == [("example.com", 3)]


def test_browsing_time(clock, summary):
    clock.advance(hours=2, minutes=5, seconds=59)
    assert summary.browsing_time() == (2, 5)


def test_as_dict(history, clock, summary):
    visit(history, clock, "https://example.com/a", "https://example.com/b")

    data = summary.as_dict()

    assert data["date"] == "2026-10-19"
    assert data["day"] == "Monday, October 19, 2026"
    assert data["sites_visited"] == 1
    assert data["browsing_time"] == {"hours": 0, "minutes": 2}
    assert data["top_sites"] == [{"site": "example.com", "visits": 2}]


def test_to_text(history, clock, summary):
    visit(history, clock, "https://example.com/a", "https://example.com/b", "https://python.org/")
    clock.advance(minutes=2)

    assert summary.to_text() == (
        "=== Day Summary ===\n"
        "Date: 2026-10-19\n"
        "Sites Visited: 2\n"
        "Browsing Time: 0h 5m\n"
        "Top Sites:\n"
        "1. example.com (2 visits)\n"
        "2. python.org (1 visits)\n"
    )


def test_to_text_without_history(summary):
    assert summary.to_text().endswith("Top Sites:\nNo browsing history available\n")


def test_disabled_history_gives_empty_summary(history, clock, summary):
    visit(history, clock, "https://example.com/")
    history.disable()

    assert summary.todays_history() == []
    assert summary.as_dict()["sites_visited"] == 0


def test_top_sites_zero_means_none(history, clock, summary):
    visit(history, clock, "https://a.example/")
    assert summary.top_sites(n=0) == []
