from collections import Counter

from rich.markup import escape
from rich.table import Column, Table

from steering_rules.hooks.models import Hook
from steering_rules.rules.models import RuleDocument
from steering_rules.tui.enums import INCLUSION_MODE_STYLE, UIStyle
from steering_rules.utils import compact_home_path


def _mode_text(document: RuleDocument) -> str:
    style = INCLUSION_MODE_STYLE.get(document.inclusion_mode, UIStyle.WHITE.value)
    return f"[{style}]{document.inclusion_mode.value}[/{style}]"


class RulesTable:
    @staticmethod
    def summary_block(documents: list[RuleDocument], hooks: list[Hook], source: str):
        counts = Counter(doc.inclusion_mode.value for doc in documents)
        chips = [f"{key}={value}" for key, value in sorted(counts.items()) if value > 0]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Source", escape(compact_home_path(source)))
        table.add_row("Rules", str(len(documents)))
        table.add_row("Modes", "  ".join(chips))
        table.add_row("Hooks", str(len(hooks)))
        return table

    @staticmethod
    def rules_table(documents: list[RuleDocument]) -> Table:
        table = Table(
            Column(header="Name", overflow="ellipsis", max_width=32),
            Column(header="Mode", width=10),
            Column(header="Patterns", overflow="ellipsis", max_width=42),
            Column(header="Title", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for document in documents:
            table.add_row(
                escape(document.name),
                _mode_text(document),
                escape(", ".join(document.file_patterns)),
                escape(document.title),
            )
        return table


class HooksTable:
    @staticmethod
    def hooks_table(hooks: list[Hook]) -> Table:
        table = Table(
            Column(header="Name", overflow="ellipsis", max_width=32),
            Column(header="Trigger"),
            Column(header="Patterns", overflow="ellipsis", max_width=36),
            Column(header="Action"),
            Column(header="Enabled", width=7),
            Column(header="Title", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for hook in hooks:
            enabled = (
                f"[{UIStyle.GREEN.value}]yes[/{UIStyle.GREEN.value}]"
                if hook.enabled
                else f"[{UIStyle.DIM.value}]no[/{UIStyle.DIM.value}]"
            )
            table.add_row(
                escape(hook.name),
                hook.trigger.value,
                escape(", ".join(hook.patterns)),
                hook.action.value,
                enabled,
                escape(hook.title),
            )
        return table
