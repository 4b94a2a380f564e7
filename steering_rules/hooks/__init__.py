from steering_rules.hooks.models import Hook, HookActionType, HookTrigger
from steering_rules.hooks.repository import HookSet, load_hooks

__all__ = ["Hook", "HookActionType", "HookSet", "HookTrigger", "load_hooks"]
