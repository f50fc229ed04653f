"""Tests for the exception hierarchy."""

from nitron.exceptions import InvalidURLError, NitronError, StoreUnavailableError


def test_hierarchy():
    assert issubclass(InvalidURLError, NitronError)
    assert issubclass(StoreUnavailableError, NitronError)


def test_invalid_url_str_includes_url():
    err = InvalidURLError("URL must start with http:// or https://", "ftp://x")
    assert err.url == "ftp://x"
    assert str(err) == "URL must start with http:// or https:// [URL: ftp://x]"


def test_invalid_url_without_url():
    err = InvalidURLError("URL cannot be empty")
    assert err.url is None
    assert str(err) == "URL cannot be empty"
