"""Shared fixtures: a controllable clock, a SQLite-backed store and an in-memory fake."""

import os
import tempfile
from datetime import datetime, timedelta, timezone

# Keep log files out of the working tree; must happen before nitron is imported
os.environ.setdefault("NITRON_LOG_DIR", tempfile.mkdtemp(prefix="nitron-logs-"))

import pytest

from nitron.database import DatabaseManager
from nitron.operations import DatabaseOperations
from nitron.utils import day_label


class FakeClock:
    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs):
        self.current = self.current + timedelta(**kwargs)

    def set(self, value: datetime):
        self.current = value


class InMemoryDatabase(DatabaseOperations):
    """List-backed store with the same ordering and delete rules as DatabaseManager"""

    def __init__(self, clock=None, tz=timezone.utc):
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self.tz = tz
        self.bookmarks = []
        self.history = []
        self.closed = False

    def add_bookmark(self, url):
        self.bookmarks.append((url, self.clock()))

    def get_bookmarks(self):
        return [url for url, _ in reversed(self.bookmarks)]

    def delete_bookmark(self, url):
        for i, (stored, _) in enumerate(self.bookmarks):
            if stored == url:
                del self.bookmarks[i]
                return

    def add_history(self, url):
        self.history.append((url, self.clock()))

    def get_history(self):
        return [url for url, _ in reversed(self.history)]

    def get_history_by_day(self):
        buckets = {}
        for url, visited_at in reversed(self.history):
            buckets.setdefault(day_label(visited_at, self.tz), []).append(url)
        return buckets

    def delete_history(self, url):
        for i, (stored, _) in enumerate(self.history):
            if stored == url:
                del self.history[i]
                return

    def close(self):
        self.closed = True


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def db(tmp_path, clock):
    manager = DatabaseManager(f"sqlite:///{tmp_path / 'nitron.db'}", now=clock, tz=timezone.utc)
    yield manager
    manager.close()


@pytest.fixture
def fake_db(clock):
    return InMemoryDatabase(clock=clock)
