"""Bookmark and history storage for the Nitron browser."""

from .database import DatabaseManager
from .exceptions import InvalidURLError, NitronError, StoreUnavailableError
from .features import BookmarkManager, FeatureToggle, HistoryManager
from .operations import DatabaseOperations
from .summary import DaySummary

__all__ = [
    "DatabaseManager",
    "DatabaseOperations",
    "BookmarkManager",
    "HistoryManager",
    "FeatureToggle",
    "DaySummary",
    "InvalidURLError",
    "NitronError",
    "StoreUnavailableError",
]
