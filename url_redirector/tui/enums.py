from enum import Enum

from url_redirector.rules.models import RuleKind


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"


RULE_KIND_STYLE = {
    RuleKind.EXACT: UIStyle.CYAN.value,
    RuleKind.WILDCARD: UIStyle.MAGENTA.value,
    RuleKind.PREFIX: UIStyle.GREEN.value,
}
