"""Tests for RedirectService."""

import logging
from pathlib import Path

from url_redirector.rules.models import NO_MATCH, Redirect
from url_redirector.rules.repository import RulesRepository
from url_redirector.service import RedirectService


def test_evaluate_uses_stored_rules(repository: RulesRepository) -> None:
    repository.add_rule("https://www.google.com/search", "https://duckduckgo.com/search")
    service = RedirectService(repository)

    assert service.evaluate("https://www.google.com/search?q=cats") == Redirect(
        "https://duckduckgo.com/search?q=cats"
    )
    assert service.evaluate("https://example.com/") == NO_MATCH


def test_evaluate_without_rules_file(tmp_path: Path) -> None:
    service = RedirectService(RulesRepository(tmp_path / "missing"))
    assert service.evaluate("https://example.com/") == NO_MATCH
    assert len(service.rule_set) == 0


def test_rule_set_reused_while_unchanged(repository: RulesRepository) -> None:
    repository.add_rule("https://old.example.com", "https://new.example.com")
    service = RedirectService(repository)
    first = service.refresh()
    assert service.refresh() is first


def test_rules_recompiled_after_change(repository: RulesRepository) -> None:
    service = RedirectService(repository)
    assert service.evaluate("https://old.example.com/page") == NO_MATCH
    before = service.rule_set.version

    repository.add_rule("https://old.example.com", "https://new.example.com")

    assert service.evaluate("https://old.example.com/page") == Redirect("https://new.example.com/page")
    assert service.rule_set.version != before


def test_rewrite_returns_original_when_unmatched(repository: RulesRepository) -> None:
    repository.add_rule("https://old.example.com", "https://new.example.com")
    service = RedirectService(repository)
    assert service.rewrite("https://old.example.com/a") == "https://new.example.com/a"
    assert service.rewrite("https://other.example.com/a") == "https://other.example.com/a"


def test_rewrite_many(repository: RulesRepository) -> None:
    repository.add_rule("https://old.example.com", "https://new.example.com")
    service = RedirectService(repository)
    results = list(service.rewrite_many(["https://old.example.com/", "https://x.example/"]))
    assert results == [
        ("https://old.example.com/", Redirect("https://new.example.com/")),
        ("https://x.example/", NO_MATCH),
    ]


def test_redirect_is_logged(repository: RulesRepository, caplog) -> None:
    repository.add_rule("https://old.example.com", "https://new.example.com")
    service = RedirectService(repository)
    with caplog.at_level(logging.INFO, logger="url_redirector.service"):
        service.evaluate("https://old.example.com/a")
    assert "Redirecting from https://old.example.com/a to https://new.example.com/a" in caplog.text
