"""Parse and serialize rule lists as JSON or YAML."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

import yaml
from jsonschema import Draft202012Validator

from url_redirector.errors import (
    InvalidJsonFormatError,
    InvalidRulesSchemaError,
    InvalidYamlFormatError,
    UnsupportedRulesFormatError,
)
from url_redirector.rules.models import Rule
from url_redirector.rules.schema import RULES_SCHEMA, format_schema_error

_VALIDATOR = Draft202012Validator(RULES_SCHEMA)

_YAML_SUFFIXES = (".yaml", ".yml")


def parse_rules(payload: Any, path: Path) -> list[Rule]:
    """Validate a decoded rule list and build :class:`Rule` values.

    A mapping with a ``rules`` key (the shape of a browser storage dump) is
    unwrapped first. ``None`` stands for an empty file.
    """
    if payload is None:
        return []
    if isinstance(payload, dict) and "rules" in payload:
        payload = payload["rules"]
    error = next(iter(_VALIDATOR.iter_errors(payload)), None)
    if error is not None:
        raise InvalidRulesSchemaError(path, format_schema_error(error))
    return [Rule.from_dict(item) for item in payload]


def serialize_rules(rules: Iterable[Rule]) -> list[dict[str, str]]:
    return [rule.as_dict() for rule in rules]


def load_rules_file(path: Path) -> list[Rule]:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in _YAML_SUFFIXES:
        try:
            payload = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise InvalidYamlFormatError(path, str(exc)) from exc
    elif suffix == ".json":
        try:
            payload = json.loads(text) if text.strip() else None
        except ValueError as exc:
            raise InvalidJsonFormatError(path, str(exc)) from exc
    else:
        raise UnsupportedRulesFormatError(path)
    return parse_rules(payload, path)


def dump_rules_file(path: Path, rules: Iterable[Rule]) -> None:
    suffix = path.suffix.lower()
    payload = serialize_rules(rules)
    if suffix in _YAML_SUFFIXES:
        text = yaml.dump(payload, default_flow_style=False, sort_keys=False)
    elif suffix == ".json":
        text = json.dumps(payload, indent=2) + "\n"
    else:
        raise UnsupportedRulesFormatError(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
