"""Sanity checks applied when a rule is added."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from url_redirector.constants import WILDCARD_TOKEN

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*$")
_DOMAIN_RE = re.compile(r"^[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_HOST_SCHEMES = ("http", "https", "ws", "wss", "ftp")


def is_absolute_url(url: str) -> bool:
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
        return False
    if parts.scheme.lower() in _HOST_SCHEMES:
        return bool(parts.netloc) and " " not in parts.netloc
    return True


def is_valid_destination(url: str) -> bool:
    """Accept globs, absolute URLs and bare domains such as ``example.com/path``."""
    if WILDCARD_TOKEN in url:
        return True
    if is_absolute_url(url):
        return True
    return bool(_DOMAIN_RE.match(url))
