from typing import Any

from steering_rules.hooks.models import FILE_TRIGGERS, HookActionType, HookTrigger

HOOK_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["name", "when", "then"],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "description": {"type": "string"},
        "version": {"type": ["string", "integer"]},
        "enabled": {"type": "boolean"},
        "when": {
            "type": "object",
            "required": ["type"],
            "properties": {
                "type": {"enum": [trigger.value for trigger in HookTrigger]},
                "patterns": {
                    "type": "array",
                    "items": {"type": "string", "minLength": 1},
                },
            },
            "if": {
                "properties": {
                    "type": {"enum": sorted(trigger.value for trigger in FILE_TRIGGERS)}
                }
            },
            "then": {"required": ["patterns"]},
        },
        "then": {
            "type": "object",
            "required": ["type"],
            "properties": {
                "type": {"enum": [action.value for action in HookActionType]},
                "prompt": {"type": "string"},
                "command": {"type": "string"},
            },
            "allOf": [
                {
                    "if": {"properties": {"type": {"const": "askAgent"}}},
                    "then": {"required": ["prompt"]},
                },
                {
                    "if": {"properties": {"type": {"const": "runCommand"}}},
                    "then": {"required": ["command"]},
                },
            ],
        },
    },
}
