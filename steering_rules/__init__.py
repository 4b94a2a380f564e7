"""Load steering documents and answer which rules apply to a file."""

from steering_rules.rules.models import InclusionMode, RuleDocument
from steering_rules.rules.registry import RuleRegistry, load_registry

__all__ = ["InclusionMode", "RuleDocument", "RuleRegistry", "load_registry"]
