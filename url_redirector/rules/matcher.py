"""Evaluate compiled rules against a URL, first match wins."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from url_redirector.rules.compilers import compile_rules
from url_redirector.rules.models import (
    NO_MATCH,
    CompiledRule,
    ExactRule,
    MatchResult,
    PrefixCaptureRule,
    Redirect,
    Rule,
    WildcardRule,
)
from url_redirector.utils import fingerprint


def match_rule(rule: CompiledRule, url: str) -> str | None:
    """Return the rewritten URL if ``rule`` matches ``url``, else None."""
    if isinstance(rule, ExactRule):
        return rule.destination if url == rule.literal else None
    if isinstance(rule, WildcardRule):
        return rule.destination if rule.regex.fullmatch(url) else None
    if isinstance(rule, PrefixCaptureRule):
        if url.startswith(rule.prefix) or url == rule.prefix:
            return rule.destination_prefix + url[len(rule.prefix) :]
        return None
    raise TypeError(f"Unsupported compiled rule: {rule!r}")


def match_url(url: str, rules: Sequence[CompiledRule]) -> MatchResult:
    for index, rule in enumerate(rules):
        destination = match_rule(rule, url)
        if destination is not None:
            return Redirect(destination=destination, rule_index=index)
    return NO_MATCH


def rules_version(rules: Iterable[Rule]) -> str:
    return fingerprint([rule.as_dict() for rule in rules])


@dataclass(frozen=True)
class RuleSet:
    """Compiled snapshot of one version of the rule list."""

    rules: tuple[Rule, ...]
    compiled: tuple[CompiledRule, ...]
    version: str

    @classmethod
    def build(cls, rules: Iterable[Rule]) -> RuleSet:
        items = tuple(rules)
        return cls(rules=items, compiled=compile_rules(items), version=rules_version(items))

    def match(self, url: str) -> MatchResult:
        return match_url(url, self.compiled)

    def __len__(self) -> int:
        return len(self.compiled)
