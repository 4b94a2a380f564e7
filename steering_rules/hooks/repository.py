"""Load agent hook definitions from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path, PurePath
from typing import Any, Iterable, Iterator

from jsonschema import Draft202012Validator

from steering_rules.constants import HOOK_SUFFIXES
from steering_rules.errors import (
    InvalidConfigSchemaError,
    InvalidJsonFormatError,
    LoadError,
    SteeringError,
)
from steering_rules.hooks.models import Hook, HookActionType, HookTrigger
from steering_rules.hooks.schema import HOOK_SCHEMA
from steering_rules.rules.patterns import compile_pattern
from steering_rules.utils import format_schema_error, read_json

logger = logging.getLogger(__name__)

_VALIDATOR = Draft202012Validator(HOOK_SCHEMA)


class HookSet:
    def __init__(self, hooks: Iterable[Hook] = ()) -> None:
        self._hooks = tuple(hooks)

    @property
    def hooks(self) -> tuple[Hook, ...]:
        return self._hooks

    def hooks_for(
        self, trigger: HookTrigger, path: str | PurePath | None = None
    ) -> list[Hook]:
        matched: list[Hook] = []
        for hook in self._hooks:
            if not hook.enabled or hook.trigger != trigger:
                continue
            if trigger.is_file_event and hook.patterns:
                if path is None:
                    continue
                if not any(compile_pattern(p).matches(path) for p in hook.patterns):
                    continue
            matched.append(hook)
        return matched

    def __len__(self) -> int:
        return len(self._hooks)

    def __iter__(self) -> Iterator[Hook]:
        return iter(self._hooks)


def parse_hook(path: Path, payload: Any, name: str) -> Hook:
    error = next(iter(_VALIDATOR.iter_errors(payload)), None)
    if error is not None:
        raise InvalidConfigSchemaError(path, format_schema_error(error))

    when = payload["when"]
    then = payload["then"]
    patterns = tuple(item.strip() for item in when.get("patterns", []))
    for pattern in patterns:
        compile_pattern(pattern)

    return Hook(
        name=name,
        title=payload["name"],
        description=payload.get("description", ""),
        version=str(payload.get("version", "1")),
        enabled=payload.get("enabled", True),
        trigger=HookTrigger(when["type"]),
        patterns=patterns,
        action=HookActionType(then["type"]),
        prompt=then.get("prompt"),
        command=then.get("command"),
        source_path=path,
    )


def load_hooks(directory: Path) -> HookSet:
    directory = Path(directory)
    if not directory.exists():
        return HookSet()

    try:
        children = sorted(directory.iterdir())
    except OSError as exc:
        raise LoadError(directory, exc) from exc

    hooks: list[Hook] = []
    for child in children:
        if child.name.startswith(".") or not child.is_file():
            continue
        suffix = next((s for s in HOOK_SUFFIXES if child.name.endswith(s)), None)
        if suffix is None:
            continue
        name = child.name[: -len(suffix)]
        try:
            payload = _read_payload(child)
            hook = parse_hook(child, payload, name)
        except (OSError, SteeringError) as exc:
            raise LoadError(child, exc) from exc
        logger.debug("Parsed hook %s (%s) from %s", name, hook.trigger.value, child)
        hooks.append(hook)

    logger.info("Loaded %d hook(s) from %s", len(hooks), directory)
    return HookSet(hooks)


def _read_payload(path: Path) -> Any:
    try:
        return read_json(path)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonFormatError(path, str(exc)) from exc
