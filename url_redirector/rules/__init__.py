from url_redirector.rules.classify import RuleDiagnosis, classify_pattern, diagnose_rule
from url_redirector.rules.compilers import DeclarativeNetRequestCompiler, compile_rule, compile_rules
from url_redirector.rules.matcher import RuleSet, match_rule, match_url
from url_redirector.rules.models import (
    NO_MATCH,
    CompiledRule,
    ExactRule,
    MatchResult,
    NoMatch,
    PrefixCaptureRule,
    Redirect,
    Rule,
    RuleKind,
    WildcardRule,
)

__all__ = [
    "CompiledRule",
    "DeclarativeNetRequestCompiler",
    "ExactRule",
    "MatchResult",
    "NO_MATCH",
    "NoMatch",
    "PrefixCaptureRule",
    "Redirect",
    "Rule",
    "RuleDiagnosis",
    "RuleKind",
    "RuleSet",
    "WildcardRule",
    "classify_pattern",
    "compile_rule",
    "compile_rules",
    "diagnose_rule",
    "match_rule",
    "match_url",
]
