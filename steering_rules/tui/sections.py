from typing import Optional

from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from steering_rules.tui.enums import UIStyle


def section(
    title: str, body, style: str = UIStyle.BLUE.value, subtitle: Optional[str] = None
) -> Panel:
    return Panel(
        body,
        title=escape(title),
        subtitle=escape(subtitle) if subtitle is not None else None,
        border_style=style,
        padding=(0, 1),
    )


def empty_note(title: str, message: str) -> Panel:
    return Panel(
        Text(message), title=escape(title), border_style=UIStyle.DIM.value, padding=(0, 1)
    )


def error_note(title: str, error: Exception) -> Panel:
    body = Text(str(error), style=f"bold {UIStyle.RED.value}")
    cause = getattr(error, "cause", None)
    if cause is not None:
        body.append(f"\n{type(cause).__name__}", style=UIStyle.DIM.value)
    return Panel(body, title=escape(title), border_style=UIStyle.RED.value, padding=(0, 1))
