"""Tests for console panel helpers."""

from rich.console import Console

from url_redirector.rules.models import Rule
from url_redirector.tui.enums import UIStyle
from url_redirector.tui.sections import UISection


def _render(renderable) -> str:
    console = Console(record=True, width=120, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_rule_line_escapes_markup() -> None:
    line = UISection.rule_line("Rule added", Rule("https://a.example/[x]", "https://b.example/"))
    output = _render(UISection.wrap("rule", line))
    assert "Rule added: https://a.example/[x] -> https://b.example/" in output


def test_bullets_lists_each_item() -> None:
    output = _render(UISection.bullets("notes", ["first [bold]", "second"], style=UIStyle.YELLOW.value))
    assert "notes" in output
    assert "- first [bold]" in output
    assert "- second" in output
