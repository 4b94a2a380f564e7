"""Immutable registry of loaded steering documents."""

from __future__ import annotations

import logging
from pathlib import Path, PurePath
from types import MappingProxyType
from typing import Iterable, Iterator, Sequence

from steering_rules.constants import DEFAULT_RULE_SUFFIXES
from steering_rules.errors import DuplicateRuleError, LoadError, SteeringError
from steering_rules.rules.models import InclusionMode, RuleDocument
from steering_rules.rules.parser import parse_rule_file
from steering_rules.rules.patterns import CompiledPattern, compile_pattern

logger = logging.getLogger(__name__)


class RuleRegistry:
    """Snapshot of the documents from one load, in load order.

    Never mutated after construction; reloading builds a new instance.
    """

    def __init__(
        self,
        documents: Iterable[RuleDocument] = (),
        root: Path | None = None,
    ) -> None:
        self._root = root
        ordered = tuple(documents)
        by_name: dict[str, RuleDocument] = {}
        compiled: dict[str, tuple[CompiledPattern, ...]] = {}
        for document in ordered:
            if document.name in by_name:
                raise DuplicateRuleError(
                    document.source_path or Path(document.name), document.name
                )
            by_name[document.name] = document
            compiled[document.name] = tuple(
                compile_pattern(pattern) for pattern in document.file_patterns
            )

        self._documents = ordered
        self._by_name = MappingProxyType(by_name)
        self._compiled = MappingProxyType(compiled)
        self._by_mode = MappingProxyType(
            {
                mode: tuple(doc for doc in ordered if doc.inclusion_mode == mode)
                for mode in InclusionMode
            }
        )

    @classmethod
    def load(
        cls,
        directory: Path,
        *,
        recursive: bool = False,
        suffixes: Sequence[str] = DEFAULT_RULE_SUFFIXES,
    ) -> "RuleRegistry":
        return load_registry(directory, recursive=recursive, suffixes=suffixes)

    @property
    def root(self) -> Path | None:
        return self._root

    @property
    def documents(self) -> tuple[RuleDocument, ...]:
        return self._documents

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._by_name)

    def get(self, name: str) -> RuleDocument | None:
        return self._by_name.get(name)

    def by_mode(self, mode: InclusionMode) -> tuple[RuleDocument, ...]:
        return self._by_mode[mode]

    def rules_for(self, path: str | PurePath) -> list[RuleDocument]:
        """Return Always rules plus FileMatch rules matching ``path``, in load order."""
        matched: list[RuleDocument] = []
        for document in self._documents:
            if document.inclusion_mode == InclusionMode.ALWAYS:
                matched.append(document)
            elif document.inclusion_mode == InclusionMode.FILE_MATCH:
                patterns = self._compiled[document.name]
                if any(pattern.matches(path) for pattern in patterns):
                    matched.append(document)
        return matched

    def manual_rules(self) -> list[RuleDocument]:
        return list(self._by_mode[InclusionMode.MANUAL])

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[RuleDocument]:
        return iter(self._documents)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name


def load_registry(
    directory: Path,
    *,
    recursive: bool = False,
    suffixes: Sequence[str] = DEFAULT_RULE_SUFFIXES,
) -> RuleRegistry:
    """Parse every document under ``directory`` into a new registry.

    Raises LoadError on the first unreadable or malformed document; no
    partially loaded registry is ever returned.
    """
    directory = Path(directory)
    try:
        sources = _discover(directory, recursive=recursive, suffixes=suffixes)
    except OSError as exc:
        raise LoadError(directory, exc) from exc

    documents: list[RuleDocument] = []
    seen: set[str] = set()
    for path, name in sources:
        if name in seen:
            cause = DuplicateRuleError(path, name)
            raise LoadError(path, cause) from cause
        seen.add(name)
        try:
            document = parse_rule_file(path, name=name)
            for pattern in document.file_patterns:
                compile_pattern(pattern)
        except (OSError, UnicodeDecodeError, SteeringError) as exc:
            raise LoadError(path, exc) from exc
        logger.debug(
            "Parsed rule %s (%s) from %s", name, document.inclusion_mode.value, path
        )
        documents.append(document)

    registry = RuleRegistry(documents, root=directory)
    logger.info("Loaded %d rule(s) from %s", len(registry), directory)
    return registry


def _discover(
    directory: Path, *, recursive: bool, suffixes: Sequence[str]
) -> list[tuple[Path, str]]:
    if not directory.is_dir():
        raise FileNotFoundError(f"Rules directory not found: {directory}")

    candidates = directory.rglob("*") if recursive else directory.iterdir()
    found: list[tuple[Path, str]] = []
    for child in candidates:
        relative = child.relative_to(directory)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if not child.is_file():
            continue
        suffix = _matching_suffix(child.name, suffixes)
        if suffix is None:
            continue
        name = relative.as_posix()[: -len(suffix)]
        found.append((child, name))
    return sorted(found, key=lambda item: item[0].relative_to(directory).as_posix())


def _matching_suffix(filename: str, suffixes: Sequence[str]) -> str | None:
    for suffix in suffixes:
        if filename.endswith(suffix) and len(filename) > len(suffix):
            return suffix
    return None
