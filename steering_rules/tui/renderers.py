from rich.console import Console
from rich.markdown import Markdown

from steering_rules.hooks.models import Hook
from steering_rules.rules.models import RuleDocument
from steering_rules.tui.enums import UIStyle
from steering_rules.tui.sections import empty_note, error_note, section
from steering_rules.tui.tables import HooksTable, RulesTable


class SteeringConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_check(
        self, documents: list[RuleDocument], hooks: list[Hook], source: str
    ) -> None:
        self.console.print(
            section(
                "steering check",
                RulesTable.summary_block(documents, hooks, source),
                style=UIStyle.GREEN.value,
            )
        )

    def render_load_error(self, error: Exception) -> None:
        self.console.print(error_note("load failed", error))

    def render_rules(self, documents: list[RuleDocument], title: str = "rules") -> None:
        if not documents:
            self.console.print(empty_note(title, "No rules found."))
            return
        self.console.print(
            section(title, RulesTable.rules_table(documents), style=UIStyle.CYAN.value)
        )

    def render_matches(
        self, path: str, documents: list[RuleDocument], show_body: bool = False
    ) -> None:
        title = f"rules for {path}"
        if not documents:
            self.console.print(empty_note(title, "No rules apply."))
            return
        self.console.print(
            section(title, RulesTable.rules_table(documents), style=UIStyle.CYAN.value)
        )
        if show_body:
            for document in documents:
                self.render_rule_body(document)

    def render_rule_body(self, document: RuleDocument) -> None:
        self.console.print(
            section(
                document.name,
                Markdown(document.body),
                style=UIStyle.MAGENTA.value,
                subtitle=document.title if document.title != document.name else None,
            )
        )

    def render_hooks(self, hooks: list[Hook], title: str = "hooks") -> None:
        if not hooks:
            self.console.print(empty_note(title, "No hooks found."))
            return
        self.console.print(
            section(title, HooksTable.hooks_table(hooks), style=UIStyle.BLUE.value)
        )
