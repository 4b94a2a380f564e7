"""Owns the current registry snapshot and swaps it on reload."""

from __future__ import annotations

import logging
from pathlib import Path, PurePath

from steering_rules.config import SteeringConfig
from steering_rules.errors import RegistryNotLoadedError, RuleNotFoundError
from steering_rules.hooks.models import Hook, HookTrigger
from steering_rules.hooks.repository import HookSet, load_hooks
from steering_rules.rules.models import InclusionMode, RuleDocument
from steering_rules.rules.patterns import normalize_path
from steering_rules.rules.registry import RuleRegistry, load_registry
from steering_rules.utils import is_under

logger = logging.getLogger(__name__)


class SteeringService:
    """Readers take ``registry`` and keep using that snapshot; ``reload``
    only ever replaces the reference, and only after a complete load.
    """

    def __init__(self, config: SteeringConfig) -> None:
        self.config = config
        self._registry: RuleRegistry | None = None
        self._hooks = HookSet()

    @property
    def is_loaded(self) -> bool:
        return self._registry is not None

    @property
    def registry(self) -> RuleRegistry:
        if self._registry is None:
            raise RegistryNotLoadedError()
        return self._registry

    @property
    def hooks(self) -> HookSet:
        return self._hooks

    def reload(self) -> RuleRegistry:
        try:
            registry = load_registry(
                self.config.steering_dir,
                recursive=self.config.recursive,
                suffixes=self.config.suffixes,
            )
            hooks = load_hooks(self.config.hooks_dir)
        except Exception:
            if self._registry is not None:
                logger.warning("Reload failed; keeping previous rule snapshot")
            raise
        self._registry = registry
        self._hooks = hooks
        return registry

    def relative_path(self, path: str | PurePath) -> str:
        candidate = Path(path)
        if candidate.is_absolute() and is_under(candidate, self.config.root):
            candidate = candidate.resolve().relative_to(self.config.root.resolve())
        return normalize_path(candidate)

    def rules_for(self, path: str | PurePath) -> list[RuleDocument]:
        return self.registry.rules_for(self.relative_path(path))

    def manual_rules(self) -> list[RuleDocument]:
        return self.registry.manual_rules()

    def manual_rule(self, name: str) -> RuleDocument:
        document = self.registry.get(name)
        if document is None or document.inclusion_mode != InclusionMode.MANUAL:
            raise RuleNotFoundError(name)
        return document

    def hooks_for(
        self, trigger: HookTrigger, path: str | PurePath | None = None
    ) -> list[Hook]:
        relative = self.relative_path(path) if path is not None else None
        return self._hooks.hooks_for(trigger, relative)
