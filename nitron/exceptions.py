"""Exceptions raised by the bookmark and history store."""

from typing import Optional


class NitronError(Exception):
    """Base exception for all store and feature errors."""


class InvalidURLError(NitronError):
    """A bookmark URL was rejected, or the bookmark feature is disabled."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.url = url

    def __str__(self):
        if self.url is not None:
            return f"{self.message} [URL: {self.url}]"
        return self.message


class StoreUnavailableError(NitronError):
    """The backing database could not be reached or an operation on it failed."""
