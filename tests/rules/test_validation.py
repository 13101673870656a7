"""Tests for destination validation."""

import pytest

from url_redirector.rules.validation import is_absolute_url, is_valid_destination


@pytest.mark.parametrize(
    "url",
    [
        "https://duckduckgo.com/search",
        "http://localhost:8080/",
        "mailto:someone@example.com",
        "about:blank",
        "example.com",
        "new.example.com/path",
        "https://*.example.com/",
    ],
)
def test_valid_destinations(url: str) -> None:
    assert is_valid_destination(url) is True


@pytest.mark.parametrize("url", ["not a url", "https://", "https:///path", "/relative/path", ""])
def test_invalid_destinations(url: str) -> None:
    assert is_valid_destination(url) is False


def test_is_absolute_url_rejects_bad_ipv6() -> None:
    assert is_absolute_url("http://[::1") is False
