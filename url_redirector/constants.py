from typing import Final


APP_NAME: Final[str] = "url-redirector"
ROOT_ENVVAR: Final[str] = "URL_REDIRECTOR_ROOT"

RULES_FILENAME: Final[str] = "rules.json"

WILDCARD_TOKEN: Final[str] = "*"
SCHEME_SEPARATOR: Final[str] = "://"

DNR_RESOURCE_TYPES: Final[tuple[str, ...]] = ("main_frame", "sub_frame")
DNR_PRIORITY: Final[int] = 1
