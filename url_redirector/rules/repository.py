"""Repository for rule list CRUD operations."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from url_redirector.constants import RULES_FILENAME
from url_redirector.errors import DuplicateRuleError, InvalidRuleError, RuleNotFoundError
from url_redirector.rules.models import Rule
from url_redirector.rules.parser import dump_rules_file, load_rules_file, serialize_rules
from url_redirector.rules.validation import is_valid_destination
from url_redirector.utils import write_json

logger = logging.getLogger(__name__)


class RulesRepository:
    """Ordered rule list persisted as a JSON array in ``<root>/rules.json``."""

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    @property
    def rules_path(self) -> Path:
        return self._root / RULES_FILENAME

    def stamp(self) -> Optional[tuple[int, int]]:
        """Cheap change marker for the rules file, None when it is missing."""
        try:
            stat = self.rules_path.stat()
        except FileNotFoundError:
            return None
        return stat.st_mtime_ns, stat.st_size

    def list_rules(self) -> list[Rule]:
        if not self.rules_path.exists():
            return []
        return load_rules_file(self.rules_path)

    def save_rules(self, rules: list[Rule]) -> None:
        write_json(self.rules_path, serialize_rules(rules))
        logger.debug("Saved %d rules to %s", len(rules), self.rules_path)

    def add_rule(self, source: str, destination: str) -> Rule:
        source = source.strip()
        destination = destination.strip()
        if not source or not destination:
            raise InvalidRuleError("Please fill in both the source pattern and the destination.")
        if not is_valid_destination(destination):
            raise InvalidRuleError(f"Please enter a valid destination URL: {destination}")

        rules = self.list_rules()
        if any(rule.source == source for rule in rules):
            raise DuplicateRuleError(source)

        rule = Rule(source=source, destination=destination)
        rules.append(rule)
        self.save_rules(rules)
        return rule

    def remove_rule(self, position: int) -> Rule:
        """Remove the rule at 1-based ``position`` and return it."""
        rules = self.list_rules()
        if position < 1 or position > len(rules):
            raise RuleNotFoundError(position)
        removed = rules.pop(position - 1)
        self.save_rules(rules)
        return removed

    def clear(self) -> int:
        count = len(self.list_rules())
        self.save_rules([])
        return count

    def import_rules(self, path: Path, replace: bool = False) -> tuple[int, int]:
        """Append rules from a JSON or YAML file, skipping known sources.

        Returns ``(added, skipped)``.
        """
        incoming = load_rules_file(path)
        rules = [] if replace else self.list_rules()
        seen = {rule.source for rule in rules}
        added = 0
        skipped = 0
        for rule in incoming:
            if rule.source in seen:
                skipped += 1
                continue
            rules.append(rule)
            seen.add(rule.source)
            added += 1
        self.save_rules(rules)
        return added, skipped

    def export_rules(self, path: Path) -> int:
        rules = self.list_rules()
        dump_rules_file(path, rules)
        return len(rules)
