from typing import Final


CONFIG_FILENAME: Final[str] = "steering-rules.json"
ROOT_ENV_VAR: Final[str] = "STEERING_RULES_ROOT"

DEFAULT_STEERING_DIR: Final[str] = ".kiro/steering"
DEFAULT_HOOKS_DIR: Final[str] = ".kiro/hooks"
DEFAULT_RULE_SUFFIXES: Final[tuple[str, ...]] = (".md",)
HOOK_SUFFIXES: Final[tuple[str, ...]] = (".kiro.hook", ".json")

HEADER_DELIMITER: Final[str] = "---"
TITLE_KEY: Final[str] = "title"
INCLUSION_MODE_KEY: Final[str] = "inclusionMode"
INCLUSION_MODE_ALIAS_KEY: Final[str] = "inclusion"
FILE_MATCH_PATTERN_KEY: Final[str] = "fileMatchPattern"
