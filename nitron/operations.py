"""Storage contract used by the bookmark and history features."""

from abc import ABC, abstractmethod
from typing import Dict, List


class DatabaseOperations(ABC):
    """Bookmark and history persistence.

    Implemented by :class:`nitron.database.DatabaseManager`. The feature
    managers only ever see this interface.
    """

    @abstractmethod
    def add_bookmark(self, url: str) -> None:
        """Store a bookmark stamped with the current time."""

    @abstractmethod
    def get_bookmarks(self) -> List[str]:
        """Return bookmark URLs, most recently added first."""

    @abstractmethod
    def delete_bookmark(self, url: str) -> None:
        """Delete one bookmark whose URL matches exactly, if any."""

    @abstractmethod
    def add_history(self, url: str) -> None:
        """Store a history entry stamped with the current time."""

    @abstractmethod
    def get_history(self) -> List[str]:
        """Return visited URLs, most recent visit first."""

    @abstractmethod
    def get_history_by_day(self) -> Dict[str, List[str]]:
        """Return visited URLs grouped under a calendar-day label, newest day first."""

    @abstractmethod
    def delete_history(self, url: str) -> None:
        """Delete one history entry whose URL matches exactly, if any."""

    @abstractmethod
    def close(self) -> None:
        """Release the backing connection."""
