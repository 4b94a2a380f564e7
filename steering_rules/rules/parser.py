"""Parse and serialize steering documents with a YAML header block."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from steering_rules.constants import (
    FILE_MATCH_PATTERN_KEY,
    HEADER_DELIMITER,
    INCLUSION_MODE_ALIAS_KEY,
    INCLUSION_MODE_KEY,
    TITLE_KEY,
)
from steering_rules.errors import InvalidInclusionModeError, MalformedHeaderError
from steering_rules.rules.models import InclusionMode, RuleDocument
from steering_rules.rules.patterns import split_pattern_list

_MODES_BY_VALUE = {mode.value: mode for mode in InclusionMode}
_BOM = "\ufeff"


def parse_document(
    text: str, name: str = "", source_path: Path | None = None
) -> RuleDocument:
    split = _split_header(text)
    if split is None:
        return RuleDocument(name=name, title=name, body=text, source_path=source_path)

    header_text, body = split
    raw = _load_header(header_text)

    mode = _parse_mode(raw)
    patterns: tuple[str, ...] = ()
    if mode == InclusionMode.FILE_MATCH:
        patterns = tuple(_parse_patterns(raw.get(FILE_MATCH_PATTERN_KEY)))
        if not patterns:
            raise MalformedHeaderError(
                f"{INCLUSION_MODE_KEY} fileMatch requires {FILE_MATCH_PATTERN_KEY}"
            )

    title = raw.get(TITLE_KEY)
    return RuleDocument(
        name=name,
        title=str(title) if title is not None else name,
        inclusion_mode=mode,
        file_patterns=patterns,
        body=body,
        source_path=source_path,
    )


def parse_rule_file(path: Path, name: str | None = None) -> RuleDocument:
    text = path.read_text(encoding="utf-8-sig")
    return parse_document(text, name=name or path.stem, source_path=path)


def serialize_document(document: RuleDocument) -> str:
    fm: dict = {}
    if document.title and document.title != document.name:
        fm[TITLE_KEY] = document.title
    if document.inclusion_mode != InclusionMode.ALWAYS:
        fm[INCLUSION_MODE_KEY] = document.inclusion_mode.value
    if document.file_patterns:
        fm[FILE_MATCH_PATTERN_KEY] = ", ".join(document.file_patterns)

    if not fm and not _opens_header(document.body):
        return document.body

    parts: list[str] = []
    parts.append(HEADER_DELIMITER)
    if fm:
        parts.append(
            yaml.dump(fm, default_flow_style=False, sort_keys=False).rstrip()
        )
    parts.append(HEADER_DELIMITER)
    parts.append(document.body)
    return "\n".join(parts)


def _opens_header(text: str) -> bool:
    first_line = text.removeprefix(_BOM).split("\n", 1)[0]
    return first_line.rstrip() == HEADER_DELIMITER


def _split_header(text: str) -> tuple[str, str] | None:
    if not _opens_header(text):
        return None

    lines = text.removeprefix(_BOM).splitlines(keepends=True)

    for index in range(1, len(lines)):
        if lines[index].rstrip() == HEADER_DELIMITER:
            header = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            return header, body
    raise MalformedHeaderError("Header block opened with '---' but never closed")


def _load_header(header_text: str) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(header_text)
    except yaml.YAMLError as exc:
        # Unquoted globs such as `**/*.go` read as YAML aliases.
        flat = _load_flat_header(header_text)
        if flat is None:
            raise MalformedHeaderError(f"Header is not valid YAML ({exc})") from exc
        return flat
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise MalformedHeaderError("Header must be a mapping of key: value pairs")
    return raw


def _load_flat_header(header_text: str) -> dict[str, Any] | None:
    raw: dict[str, Any] = {}
    for line in header_text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        key, sep, value = stripped.partition(":")
        if not sep or not key.strip() or line[:1].isspace():
            return None
        raw[key.strip()] = value.strip().strip("\"'")
    return raw


def _parse_mode(raw: dict[str, Any]) -> InclusionMode:
    if INCLUSION_MODE_KEY in raw:
        value = raw[INCLUSION_MODE_KEY]
    elif INCLUSION_MODE_ALIAS_KEY in raw:
        value = raw[INCLUSION_MODE_ALIAS_KEY]
    else:
        return InclusionMode.ALWAYS

    if not isinstance(value, str) or value not in _MODES_BY_VALUE:
        raise InvalidInclusionModeError(value)
    return _MODES_BY_VALUE[value]


def _parse_patterns(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return split_pattern_list(value)
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return [item.strip() for item in value if item.strip()]
    raise MalformedHeaderError(
        f"{FILE_MATCH_PATTERN_KEY} must be a string or a list of strings"
    )
