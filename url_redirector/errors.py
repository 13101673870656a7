from pathlib import Path


class RedirectorError(Exception):
    """Base user-facing application error."""


class RulesFileError(RedirectorError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class InvalidJsonFormatError(RulesFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidYamlFormatError(RulesFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid YAML format ({detail})")


class InvalidRulesSchemaError(RulesFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid rules schema ({detail})")


class UnsupportedRulesFormatError(RulesFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Unsupported rules file type")


class InvalidRuleError(RedirectorError):
    """Raised when a rule cannot be added as typed."""


class DuplicateRuleError(InvalidRuleError):
    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"A rule with this pattern already exists: {source}")


class RuleNotFoundError(RedirectorError):
    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"Rule not found at position {position}")
