"""Hook data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class HookTrigger(str, Enum):
    FILE_EDITED = "fileEdited"
    FILE_CREATED = "fileCreated"
    FILE_DELETED = "fileDeleted"
    PROMPT_SUBMIT = "promptSubmit"
    AGENT_STOP = "agentStop"
    USER_TRIGGERED = "userTriggered"

    @property
    def is_file_event(self) -> bool:
        return self in FILE_TRIGGERS


FILE_TRIGGERS = frozenset(
    {HookTrigger.FILE_EDITED, HookTrigger.FILE_CREATED, HookTrigger.FILE_DELETED}
)


class HookActionType(str, Enum):
    ASK_AGENT = "askAgent"
    RUN_COMMAND = "runCommand"


@dataclass(frozen=True)
class Hook:
    name: str
    title: str
    trigger: HookTrigger
    action: HookActionType
    description: str = ""
    version: str = "1"
    enabled: bool = True
    patterns: tuple[str, ...] = ()
    prompt: str | None = None
    command: str | None = None
    source_path: Path | None = None
