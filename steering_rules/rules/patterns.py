"""Glob pattern compilation and path matching.

Supported syntax:

- ``*`` matches any run of characters except ``/``
- ``**`` matches any run of characters including ``/``; ``**/`` also
  matches zero directories, so ``**/*.go`` matches ``main.go``
- ``?`` matches one character except ``/``
- ``[abc]``, ``[a-z]``, ``[!abc]`` character classes
- ``{a,b}`` alternation, nestable

Matching is case-sensitive and anchored: the whole path must match.

Example:
    from steering_rules.rules.patterns import match_path

    match_path("internal/storage/db.go", "**/*.go")  # True
    match_path("docs/readme.md", "*.md")  # False
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from pathlib import PurePath, PurePosixPath
from typing import Iterable

from steering_rules.errors import InvalidPatternError

_CLASS_SPECIALS = frozenset("\\^[]")


@dataclass(frozen=True)
class CompiledPattern:
    source: str
    regex: re.Pattern[str]

    def matches(self, path: str | PurePath) -> bool:
        return self.regex.fullmatch(normalize_path(path)) is not None


def normalize_path(path: str | PurePath) -> str:
    """Return ``path`` as a POSIX string with redundant separators removed."""
    text = str(path).replace("\\", "/")
    if not text:
        return ""
    return str(PurePosixPath(text))


@functools.lru_cache(maxsize=512)
def compile_pattern(pattern: str) -> CompiledPattern:
    source = pattern.strip()
    body = source.lstrip("/")
    if not body:
        raise InvalidPatternError(pattern, "empty pattern")

    translated, _ = _translate(pattern, body, 0, depth=0)
    try:
        regex = re.compile(translated)
    except re.error as exc:
        raise InvalidPatternError(pattern, str(exc)) from exc
    return CompiledPattern(source=source, regex=regex)


def match_path(path: str | PurePath, pattern: str) -> bool:
    try:
        compiled = compile_pattern(pattern)
    except InvalidPatternError:
        return False
    return compiled.matches(path)


def matches_any(path: str | PurePath, patterns: Iterable[str]) -> bool:
    return any(match_path(path, pattern) for pattern in patterns)


def split_pattern_list(value: str) -> list[str]:
    """Split a comma-separated pattern list, keeping commas inside ``{}``/``[]``."""
    items: list[str] = []
    current: list[str] = []
    brace_depth = 0
    in_class = False
    for ch in value:
        if in_class:
            if ch == "]":
                in_class = False
        elif ch == "[":
            in_class = True
        elif ch == "{":
            brace_depth += 1
        elif ch == "}" and brace_depth:
            brace_depth -= 1
        elif ch == "," and brace_depth == 0:
            items.append("".join(current))
            current = []
            continue
        current.append(ch)
    items.append("".join(current))
    return [item.strip() for item in items if item.strip()]


def _translate(original: str, pattern: str, pos: int, depth: int) -> tuple[str, int]:
    # Stops at the end of input, or at "," / "}" when inside a brace group.
    parts: list[str] = []
    i = pos
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "*":
            if pattern.startswith("**", i):
                i += 2
                while i < n and pattern[i] == "*":
                    i += 1
                if i < n and pattern[i] == "/":
                    parts.append("(?:.*/)?")
                    i += 1
                else:
                    parts.append(".*")
            else:
                parts.append("[^/]*")
                i += 1
        elif ch == "?":
            parts.append("[^/]")
            i += 1
        elif ch == "[":
            translated, i = _translate_class(original, pattern, i)
            parts.append(translated)
        elif ch == "{":
            translated, i = _translate_braces(original, pattern, i, depth)
            parts.append(translated)
        elif ch in ",}" and depth > 0:
            break
        elif ch == "}":
            raise InvalidPatternError(original, "unmatched '}'")
        else:
            parts.append(re.escape(ch))
            i += 1
    return "".join(parts), i


def _translate_class(original: str, pattern: str, start: int) -> tuple[str, int]:
    n = len(pattern)
    i = start + 1
    negate = False
    if i < n and pattern[i] in "!^":
        negate = True
        i += 1
    body_start = i
    if i < n and pattern[i] == "]":
        i += 1
    while i < n and pattern[i] != "]":
        i += 1
    if i >= n:
        raise InvalidPatternError(original, "unclosed character class")

    body = "".join(
        f"\\{ch}" if ch in _CLASS_SPECIALS else ch for ch in pattern[body_start:i]
    )
    if negate:
        return f"[^/{body}]", i + 1
    return f"[{body}]", i + 1


def _translate_braces(
    original: str, pattern: str, start: int, depth: int
) -> tuple[str, int]:
    alternatives: list[str] = []
    i = start + 1
    while True:
        translated, i = _translate(original, pattern, i, depth + 1)
        alternatives.append(translated)
        if i >= len(pattern):
            raise InvalidPatternError(original, "unclosed '{'")
        if pattern[i] == "}":
            return f"(?:{'|'.join(alternatives)})", i + 1
        i += 1


__all__ = [
    "CompiledPattern",
    "compile_pattern",
    "match_path",
    "matches_any",
    "normalize_path",
    "split_pattern_list",
]
