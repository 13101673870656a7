from typing import Iterable

from rich.console import RenderableType
from rich.markup import escape
from rich.panel import Panel

from url_redirector.rules.models import Rule
from url_redirector.tui.enums import UIStyle


class UISection:
    @staticmethod
    def wrap(title: str, body: RenderableType, style: str = UIStyle.BLUE.value) -> Panel:
        return Panel(body, title=title, border_style=style, padding=(0, 1))

    @staticmethod
    def rule_line(label: str, rule: Rule) -> str:
        return f"{label}: [bold]{escape(rule.source)}[/bold] -> {escape(rule.destination)}"

    @staticmethod
    def bullets(title: str, items: Iterable[str], style: str) -> Panel:
        body = "\n".join(f"- {escape(item)}" for item in items)
        return UISection.wrap(title, body, style=style)
