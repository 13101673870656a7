from collections import Counter
from typing import Sequence

from rich.table import Column, Table
from rich.text import Text

from url_redirector.rules.classify import RuleDiagnosis
from url_redirector.rules.models import Rule, RuleKind
from url_redirector.tui.enums import RULE_KIND_STYLE, UIStyle


def _kind_text(kind: RuleKind) -> Text:
    return Text(kind.value, style=RULE_KIND_STYLE[kind])


def _flag(value: bool) -> Text:
    return Text("yes", style=UIStyle.GREEN.value) if value else Text("no", style=UIStyle.DIM.value)


class RulesTable:
    @staticmethod
    def summary_block(diagnoses: Sequence[RuleDiagnosis]):
        counts = Counter(item.kind.value for item in diagnoses)
        chips = [f"{key}={value}" for key, value in sorted(counts.items()) if value > 0]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Rules", str(len(diagnoses)))
        table.add_row("Kinds", "  ".join(chips))
        return table

    @staticmethod
    def rules_table(rules: Sequence[Rule], diagnoses: Sequence[RuleDiagnosis]) -> Table:
        table = Table(
            Column("#", justify="right", style="bold"),
            Column("from", overflow="fold"),
            Column("to", overflow="fold"),
            Column("kind"),
            Column("notes", style=UIStyle.YELLOW.value, overflow="fold"),
            expand=True,
        )
        for position, (rule, diagnosis) in enumerate(zip(rules, diagnoses), start=1):
            table.add_row(
                str(position),
                Text(rule.source),
                Text(rule.destination),
                _kind_text(diagnosis.kind),
                Text("\n".join(diagnosis.warnings)),
            )
        return table


class ExplainTable:
    @staticmethod
    def diagnosis_table(rule: Rule, diagnosis: RuleDiagnosis) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column(overflow="fold")
        table.add_row("From", Text(rule.source))
        table.add_row("To", Text(rule.destination))
        table.add_row("Kind", _kind_text(diagnosis.kind))
        table.add_row("Likely prefix", _flag(diagnosis.likely_prefix))
        table.add_row("Bare path segment", _flag(diagnosis.path_segment))
        return table


class MatchTable:
    @staticmethod
    def result_table(rows: Sequence[tuple[str, str | None, int | None]]) -> Table:
        table = Table(
            Column("url", overflow="fold"),
            Column("destination", overflow="fold"),
            Column("rule", justify="right"),
            expand=True,
        )
        for url, destination, rule_index in rows:
            if destination is None:
                table.add_row(Text(url), Text("no match", style=UIStyle.DIM.value), Text(""))
            else:
                table.add_row(
                    Text(url),
                    Text(destination, style=UIStyle.GREEN.value),
                    Text(str(rule_index + 1) if rule_index is not None else ""),
                )
        return table
