"""Bookmark and history features.

Each manager wraps a :class:`~nitron.operations.DatabaseOperations` store
with input validation and an enabled/disabled switch. Nothing is cached:
every call goes to the store.

The two managers reject bad input differently. A bad bookmark is a user
error and raises :class:`~nitron.exceptions.InvalidURLError`; a bad history
write is dropped without an error.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .exceptions import InvalidURLError
from .operations import DatabaseOperations

logger = logging.getLogger(__name__)


@dataclass
class FeatureToggle:
    """Name and on/off state of one feature, enabled when created"""

    name: str
    enabled: bool = True

    def enable(self):
        self.enabled = True
        logger.info(f"{self.name} enabled")

    def disable(self):
        self.enabled = False
        logger.info(f"{self.name} disabled")

    def __str__(self):
        return f"{self.name} [{'ENABLED' if self.enabled else 'DISABLED'}]"


def _is_blank(url: Optional[str]) -> bool:
    return url is None or not url.strip()


class BookmarkManager:
    def __init__(self, db: DatabaseOperations):
        self.db = db
        self.feature = FeatureToggle("Bookmark Manager")

    @property
    def feature_name(self) -> str:
        return self.feature.name

    @property
    def is_enabled(self) -> bool:
        return self.feature.enabled

    def initialize(self):
        logger.info(f"Initializing {self.feature.name}")
        self.feature.enable()

    def enable(self):
        self.feature.enable()

    def disable(self):
        self.feature.disable()

    def add_bookmark(self, url: Optional[str]) -> None:
        """
        Validate and store a bookmark.

        Raises:
            InvalidURLError: the feature is disabled, the URL is blank, or it
                does not start with http:// or https://
        """
        if not self.feature.enabled:
            raise InvalidURLError("Bookmark Manager is disabled", url)

        if _is_blank(url):
            raise InvalidURLError("URL cannot be empty", url)

        if not url.startswith("http://") and not url.startswith("https://"):
            raise InvalidURLError("URL must start with http:// or https://", url)

        self.db.add_bookmark(url)
        logger.info(f"Bookmark added: {url}")

    def get_bookmarks(self) -> List[str]:
        if not self.feature.enabled:
            return []
        return self.db.get_bookmarks()

    def delete_bookmark(self, url: str) -> None:
        if not self.feature.enabled:
            logger.info("Bookmark Manager is disabled")
            return
        self.db.delete_bookmark(url)
        logger.info(f"Bookmark deleted: {url}")

    def get_bookmark_count(self) -> int:
        return len(self.get_bookmarks())

    def __str__(self):
        return str(self.feature)


class HistoryManager:
    def __init__(self, db: DatabaseOperations):
        self.db = db
        self.feature = FeatureToggle("History Manager")

    @property
    def feature_name(self) -> str:
        return self.feature.name

    @property
    def is_enabled(self) -> bool:
        return self.feature.enabled

    def initialize(self):
        logger.info(f"Initializing {self.feature.name}")
        self.feature.enable()

    def enable(self):
        self.feature.enable()

    def disable(self):
        self.feature.disable()

    def add_to_history(self, url: Optional[str]) -> None:
        """Record a visit. Blank URLs and writes while disabled are dropped silently."""
        if not self.feature.enabled:
            logger.info("History Manager is disabled")
            return

        if _is_blank(url):
            logger.info("Cannot add empty URL to history")
            return

        self.db.add_history(url)
        logger.info(f"Added to history: {url}")

    def get_history(self) -> List[str]:
        if not self.feature.enabled:
            return []
        return self.db.get_history()

    def get_history_by_day(self) -> Dict[str, List[str]]:
        if not self.feature.enabled:
            return {}
        return self.db.get_history_by_day()

    def delete_history_entry(self, url: str) -> None:
        if not self.feature.enabled:
            logger.info("History Manager is disabled")
            return
        self.db.delete_history(url)
        logger.info(f"Deleted from history: {url}")

    def clear_all_history(self) -> None:
        """Delete every entry currently listed, one at a time.

        Entries added by another writer while the loop runs are not removed.
        """
        if not self.feature.enabled:
            logger.info("History Manager is disabled")
            return
        for url in self.get_history():
            self.db.delete_history(url)
        logger.info("All history cleared")

    def get_history_count(self) -> int:
        return len(self.get_history())

    def get_most_recent_url(self) -> Optional[str]:
        """Most recently visited URL, or None when there is no history"""
        history = self.get_history()
        return history[0] if history else None

    def __str__(self):
        return str(self.feature)
