"""Project configuration for locating steering documents and hooks."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from steering_rules.constants import (
    CONFIG_FILENAME,
    DEFAULT_HOOKS_DIR,
    DEFAULT_RULE_SUFFIXES,
    DEFAULT_STEERING_DIR,
    ROOT_ENV_VAR,
)
from steering_rules.errors import (
    InvalidConfigSchemaError,
    InvalidJsonFormatError,
    MissingConfigFileError,
)
from steering_rules.utils import format_schema_error, read_json

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "steeringDir": {"type": "string", "minLength": 1},
        "hooksDir": {"type": "string", "minLength": 1},
        "recursive": {"type": "boolean"},
        "suffixes": {
            "type": "array",
            "minItems": 1,
            "items": {"type": "string", "pattern": r"^\.[^/\\]+$"},
        },
    },
}


@dataclass(frozen=True)
class SteeringConfig:
    root: Path
    steering_dir: Path
    hooks_dir: Path
    recursive: bool = False
    suffixes: tuple[str, ...] = field(default=DEFAULT_RULE_SUFFIXES)

    @classmethod
    def for_root(cls, root: Path) -> "SteeringConfig":
        return cls(
            root=root,
            steering_dir=root / DEFAULT_STEERING_DIR,
            hooks_dir=root / DEFAULT_HOOKS_DIR,
        )


def default_root() -> Path:
    value = os.environ.get(ROOT_ENV_VAR)
    return Path(value).expanduser() if value else Path.cwd()


def load_config(root: Path, config_path: Path | None = None) -> SteeringConfig:
    """Build the config for ``root``, applying ``steering-rules.json`` if present.

    An explicit ``config_path`` must exist; the default one is optional.
    """
    root = Path(root).expanduser().resolve()
    path = config_path or root / CONFIG_FILENAME
    if config_path is None and not path.exists():
        return SteeringConfig.for_root(root)

    try:
        payload = read_json(path)
    except FileNotFoundError as exc:
        raise MissingConfigFileError(path) from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonFormatError(path, str(exc)) from exc

    error = next(iter(Draft202012Validator(CONFIG_SCHEMA).iter_errors(payload)), None)
    if error is not None:
        raise InvalidConfigSchemaError(path, format_schema_error(error))

    return SteeringConfig(
        root=root,
        steering_dir=root / payload.get("steeringDir", DEFAULT_STEERING_DIR),
        hooks_dir=root / payload.get("hooksDir", DEFAULT_HOOKS_DIR),
        recursive=payload.get("recursive", False),
        suffixes=tuple(payload.get("suffixes", DEFAULT_RULE_SUFFIXES)),
    )
