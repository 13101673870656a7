"""Decide how a rule's ``from`` pattern should be matched.

Users type bare paths such as ``https://www.google.com/search`` meaning
"anything under here", and file-like URLs such as
``https://a.example/page.html`` meaning "exactly this page". Nothing in the
rule says which was meant, so the kind is inferred from surface syntax:

* a ``*`` anywhere makes a wildcard rule;
* :func:`is_likely_prefix` or :func:`ends_with_path_segment` makes a prefix
  rule that carries the rest of the URL over to the destination;
* anything else is matched exactly.

The same predicates back :func:`diagnose_rule`, which explains the decision
and warns about rules that probably won't do what the user expects.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from url_redirector.constants import SCHEME_SEPARATOR, WILDCARD_TOKEN
from url_redirector.rules.models import Rule, RuleKind

_FILE_EXTENSION_RE = re.compile(r"\.[a-zA-Z0-9]+\Z")
_FINAL_SEGMENT_RE = re.compile(r"/([^/]+)\Z")


def url_path(source: str) -> str:
    """Everything from the first ``/`` after the host, or "" when there is no path."""
    separator = source.find(SCHEME_SEPARATOR)
    start = separator + len(SCHEME_SEPARATOR) if separator != -1 else 0
    slash = source.find("/", start)
    return "" if slash == -1 else source[slash:]


def looks_like_file(source: str) -> bool:
    return _FILE_EXTENSION_RE.search(url_path(source)) is not None


def is_likely_prefix(source: str) -> bool:
    """True for ``scheme://host`` and for anything ending in ``/``.

    Query strings, fragments and a file extension on the path rule a prefix
    out; a dotted host name such as ``old.example.com`` does not.
    """
    if "?" in source or "#" in source:
        return False
    if looks_like_file(source):
        return False
    if source.endswith("/"):
        return True
    # Without a scheme separator find() gives -1 and the scan starts at 2.
    return "/" not in source[source.find(SCHEME_SEPARATOR) + len(SCHEME_SEPARATOR) :]


def final_segment(source: str) -> str | None:
    """Text after the last ``/`` of the path, None when the path ends in ``/`` or is empty."""
    match = _FINAL_SEGMENT_RE.search(url_path(source))
    return match.group(1) if match else None


def ends_with_path_segment(source: str) -> bool:
    """True when ``source`` ends in a non-empty path segment and its path has no ``.``."""
    segment = final_segment(source)
    return segment is not None and "." not in url_path(source)


def classify_pattern(source: str) -> RuleKind:
    if WILDCARD_TOKEN in source:
        return RuleKind.WILDCARD
    if is_likely_prefix(source) or ends_with_path_segment(source):
        return RuleKind.PREFIX
    return RuleKind.EXACT


@dataclass(frozen=True)
class RuleDiagnosis:
    kind: RuleKind
    likely_prefix: bool
    path_segment: bool
    warnings: tuple[str, ...] = ()


def diagnose_rule(rule: Rule) -> RuleDiagnosis:
    source = rule.source
    kind = classify_pattern(source)
    likely_prefix = kind != RuleKind.WILDCARD and is_likely_prefix(source)
    path_segment = kind != RuleKind.WILDCARD and ends_with_path_segment(source)

    warnings: list[str] = []
    if kind == RuleKind.WILDCARD:
        if WILDCARD_TOKEN in rule.destination:
            warnings.append("'*' in the destination is copied literally, not substituted.")
    elif kind == RuleKind.EXACT:
        if "?" in source or "#" in source:
            warnings.append("Contains '?' or '#': only this exact URL is redirected.")
        segment = final_segment(source)
        if segment is not None and "." in segment:
            if looks_like_file(source):
                warnings.append(
                    f"Final segment '{segment}' looks like a file name: only this exact URL is redirected."
                )
            else:
                warnings.append(
                    f"Final segment '{segment}' contains '.', so it is not treated as a path prefix."
                )
        elif segment is not None and "." in url_path(source):
            warnings.append(
                f"Path '{url_path(source)}' contains '.', so it is not treated as a path prefix."
            )
        warnings.append("Add a trailing '/' or a '*' to redirect more than this one URL.")
    elif source.endswith("/") and not rule.destination.endswith("/"):
        warnings.append(
            "Source ends with '/' but the destination does not; the rest of the URL is appended with no separator."
        )

    return RuleDiagnosis(
        kind=kind,
        likely_prefix=likely_prefix,
        path_segment=path_segment,
        warnings=tuple(warnings),
    )
