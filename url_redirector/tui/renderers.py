from typing import Sequence

from rich.console import Console
from rich.markup import escape

from url_redirector.rules.classify import RuleDiagnosis
from url_redirector.rules.models import MatchResult, Redirect, Rule
from url_redirector.tui.enums import UIStyle
from url_redirector.tui.sections import UISection
from url_redirector.tui.tables import ExplainTable, MatchTable, RulesTable
from url_redirector.utils import compact_home_path


class RedirectorConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_rules(self, rules: Sequence[Rule], diagnoses: Sequence[RuleDiagnosis]) -> None:
        if not rules:
            self.console.print(
                UISection.wrap(
                    "rules",
                    "No rules configured.\n- url-redirector rules add <from> <to>",
                    style=UIStyle.YELLOW.value,
                )
            )
            return

        self.console.print(UISection.wrap("overview", RulesTable.summary_block(diagnoses)))
        self.console.print(
            UISection.wrap("rules", RulesTable.rules_table(rules, diagnoses), style=UIStyle.CYAN.value)
        )

    def render_rule_saved(self, rule: Rule, diagnosis: RuleDiagnosis) -> None:
        self.console.print(
            UISection.wrap(
                "rule",
                f"{UISection.rule_line('Rule added', rule)}\nMatched as: {diagnosis.kind.value}",
                style=UIStyle.GREEN.value,
            )
        )
        self._render_warnings(diagnosis)

    def render_rule_removed(self, rule: Rule) -> None:
        self.console.print(
            UISection.wrap("rule", UISection.rule_line("Removed rule", rule), style=UIStyle.YELLOW.value)
        )

    def render_cleared(self, count: int) -> None:
        self.console.print(UISection.wrap("rules", f"Removed {count} rules.", style=UIStyle.YELLOW.value))

    def render_explain(self, rule: Rule, diagnosis: RuleDiagnosis) -> None:
        self.console.print(UISection.wrap("classification", ExplainTable.diagnosis_table(rule, diagnosis)))
        self._render_warnings(diagnosis)

    def render_matches(self, results: Sequence[tuple[str, MatchResult]]) -> None:
        rows = []
        for url, result in results:
            if isinstance(result, Redirect):
                rows.append((url, result.destination, result.rule_index))
            else:
                rows.append((url, None, None))
        self.console.print(UISection.wrap("matches", MatchTable.result_table(rows)))

    def render_transfer(self, verb: str, path: str, count: int, skipped: int = 0) -> None:
        text = f"{verb} {count} rules: {escape(compact_home_path(path))}"
        if skipped:
            text += f"\nSkipped {skipped} rules with an existing pattern."
        self.console.print(UISection.wrap("rules", text, style=UIStyle.GREEN.value))

    def _render_warnings(self, diagnosis: RuleDiagnosis) -> None:
        if diagnosis.warnings:
            self.console.print(UISection.bullets("notes", diagnosis.warnings, style=UIStyle.YELLOW.value))
