"""Rule compilers: in-process matchers and Chrome declarativeNetRequest rules."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Sequence

from url_redirector.constants import DNR_PRIORITY, DNR_RESOURCE_TYPES
from url_redirector.rules.classify import classify_pattern
from url_redirector.rules.models import (
    CompiledRule,
    ExactRule,
    PrefixCaptureRule,
    Rule,
    RuleKind,
    WildcardRule,
)
from url_redirector.rules.patterns import escape_pattern

logger = logging.getLogger(__name__)


def compile_rule(rule: Rule) -> CompiledRule:
    """Turn a stored rule into the matcher for its inferred kind.

    Never fails: a pattern that is neither a glob nor a recognizable prefix
    is matched exactly.
    """
    kind = classify_pattern(rule.source)
    if kind == RuleKind.WILDCARD:
        logger.debug("Creating wildcard rule: %s -> %s", rule.source, rule.destination)
        return WildcardRule(pattern=rule.source, destination=rule.destination)
    if kind == RuleKind.PREFIX:
        logger.debug("Creating prefix rule: %s -> %s", rule.source, rule.destination)
        return PrefixCaptureRule(prefix=rule.source, destination_prefix=rule.destination)
    logger.debug("Creating exact rule: %s -> %s", rule.source, rule.destination)
    return ExactRule(literal=rule.source, destination=rule.destination)


def compile_rules(rules: Iterable[Rule]) -> tuple[CompiledRule, ...]:
    return tuple(compile_rule(rule) for rule in rules)


def prefix_regex_filter(rule: PrefixCaptureRule) -> str:
    return "^" + escape_pattern(rule.prefix) + "(.*)$"


class IRuleCompiler(ABC):
    @abstractmethod
    def compile(self, rule: Rule, rule_id: int) -> Any:
        """Return the target representation of ``rule``."""

    def compile_all(self, rules: Sequence[Rule]) -> list[Any]:
        return [self.compile(rule, index + 1) for index, rule in enumerate(rules)]


class DeclarativeNetRequestCompiler(IRuleCompiler):
    """Compile to Chrome ``declarativeNetRequest`` dynamic redirect rules.

    Prefix rules become an anchored ``regexFilter`` whose single capture group
    is appended to the destination through ``regexSubstitution``; exact and
    wildcard rules keep the raw pattern as a ``urlFilter``.
    """

    def compile(self, rule: Rule, rule_id: int) -> dict[str, Any]:
        compiled = compile_rule(rule)
        condition: dict[str, Any] = {"resourceTypes": list(DNR_RESOURCE_TYPES)}

        if isinstance(compiled, PrefixCaptureRule):
            condition["regexFilter"] = prefix_regex_filter(compiled)
            redirect = {"regexSubstitution": compiled.destination_prefix + "\\1"}
        else:
            condition["urlFilter"] = rule.source
            redirect = {"url": rule.destination}

        return {
            "id": rule_id,
            "priority": DNR_PRIORITY,
            "action": {"type": "redirect", "redirect": redirect},
            "condition": condition,
        }
