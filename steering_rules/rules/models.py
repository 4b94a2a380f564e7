"""Rule data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class InclusionMode(str, Enum):
    ALWAYS = "always"
    FILE_MATCH = "fileMatch"
    MANUAL = "manual"


@dataclass(frozen=True)
class RuleDocument:
    name: str
    title: str
    inclusion_mode: InclusionMode = InclusionMode.ALWAYS
    file_patterns: tuple[str, ...] = ()
    body: str = ""
    source_path: Path | None = None

    def __post_init__(self) -> None:
        is_file_match = self.inclusion_mode == InclusionMode.FILE_MATCH
        if is_file_match and not self.file_patterns:
            raise ValueError("fileMatch rules require at least one file pattern")
        if not is_file_match and self.file_patterns:
            raise ValueError(
                f"{self.inclusion_mode.value} rules must not carry file patterns"
            )
