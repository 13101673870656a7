"""Literal escaping and glob translation for rule patterns."""

from __future__ import annotations

import re

from url_redirector.constants import SCHEME_SEPARATOR, WILDCARD_TOKEN

_METACHARACTERS_RE = re.compile(r"[.*+?^${}()|[\]\\]")

_ANY_RUN = ".*"
_HOST_RUN = "[^/]*"


def escape_pattern(text: str) -> str:
    """Backslash-escape ``. * + ? ^ $ { } ( ) | [ ] \\`` so ``text`` matches literally.

    Narrower than :func:`re.escape`; the output also feeds RE2 regex filters
    in declarativeNetRequest rules.
    """
    return _METACHARACTERS_RE.sub(r"\\\g<0>", text)


def host_end(pattern: str) -> int:
    """Index of the ``/`` closing the authority of ``pattern``, or -1.

    Only patterns that open with a scheme and also spell out a path
    delimiter have a bounded host part. A ``://`` appearing after an earlier
    ``/``, as in a query parameter, is not a scheme separator.
    """
    separator = pattern.find(SCHEME_SEPARATOR)
    if separator == -1 or "/" in pattern[:separator]:
        return -1
    return pattern.find("/", separator + len(SCHEME_SEPARATOR))


def _glob_body(pattern: str) -> str:
    boundary = host_end(pattern)
    parts: list[str] = []
    for index, char in enumerate(pattern):
        if char == WILDCARD_TOKEN:
            parts.append(_HOST_RUN if index < boundary else _ANY_RUN)
        else:
            parts.append(escape_pattern(char))
    return "".join(parts)


def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a ``*`` glob into a regex meant for ``fullmatch``.

    A ``*`` inside a bounded host part cannot cross a ``/``, so
    ``https://*.example.com/*`` never matches a URL that merely embeds
    ``sub.example.com`` in its path.
    """
    return re.compile(_glob_body(pattern), re.DOTALL)
