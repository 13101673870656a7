"""Rule data models."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

from url_redirector.rules.patterns import glob_to_regex


class RuleKind(str, Enum):
    EXACT = "exact"
    WILDCARD = "wildcard"
    PREFIX = "prefix"


@dataclass(frozen=True)
class Rule:
    """A user-declared source-to-destination mapping, as stored."""

    source: str
    destination: str

    @classmethod
    def from_dict(cls, payload: dict) -> Rule:
        return cls(source=str(payload["from"]), destination=str(payload["to"]))

    def as_dict(self) -> dict[str, str]:
        return {"from": self.source, "to": self.destination}


@dataclass(frozen=True)
class ExactRule:
    kind: ClassVar[RuleKind] = RuleKind.EXACT

    literal: str
    destination: str


@dataclass(frozen=True)
class WildcardRule:
    """Glob rule: every ``*`` matches any run of characters, anchored at both ends."""

    kind: ClassVar[RuleKind] = RuleKind.WILDCARD

    pattern: str
    destination: str
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "regex", glob_to_regex(self.pattern))


@dataclass(frozen=True)
class PrefixCaptureRule:
    """Literal prefix rule; the rest of the URL is appended to the destination."""

    kind: ClassVar[RuleKind] = RuleKind.PREFIX

    prefix: str
    destination_prefix: str


CompiledRule = Union[ExactRule, WildcardRule, PrefixCaptureRule]


@dataclass(frozen=True)
class NoMatch:
    matched: ClassVar[bool] = False


@dataclass(frozen=True)
class Redirect:
    matched: ClassVar[bool] = True

    destination: str
    rule_index: int | None = field(default=None, compare=False)


NO_MATCH = NoMatch()

MatchResult = Union[NoMatch, Redirect]
