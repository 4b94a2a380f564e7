import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from steering_rules.config import default_root, load_config
from steering_rules.errors import SteeringError
from steering_rules.hooks.models import HookTrigger
from steering_rules.service import SteeringService
from steering_rules.tui import SteeringConsoleUI


TRIGGER_VALUES = [trigger.value for trigger in HookTrigger]
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    root = logging.getLogger("steering_rules")
    if not verbose or root.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)


def _loaded_service(obj: dict) -> SteeringService:
    try:
        config = load_config(obj["root"], obj.get("config"))
        service = SteeringService(config)
        service.reload()
    except SteeringError as exc:
        raise click.ClickException(str(exc))
    return service


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root (defaults to $STEERING_RULES_ROOT or the current directory).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to a steering-rules.json config file.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log loader activity to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    root: Optional[Path],
    config_path: Optional[Path],
    verbose: bool,
) -> None:
    """Inspect steering rules and agent hooks."""
    _configure_logging(verbose)
    ctx.obj = {"root": root or default_root(), "config": config_path}


@cli.command(help="Load all rules and hooks and report problems.")
@click.pass_obj
def check(obj: dict) -> None:
    ui = SteeringConsoleUI(Console())
    try:
        config = load_config(obj["root"], obj.get("config"))
        service = SteeringService(config)
        registry = service.reload()
    except SteeringError as exc:
        ui.render_load_error(exc)
        raise click.exceptions.Exit(1)

    ui.render_check(
        list(registry.documents),
        list(service.hooks.hooks),
        source=str(config.steering_dir),
    )


@cli.command("list", help="List every loaded rule.")
@click.pass_obj
def list_rules(obj: dict) -> None:
    ui = SteeringConsoleUI(Console())
    service = _loaded_service(obj)
    ui.render_rules(list(service.registry.documents))


@cli.command(help="Show the rules that apply to PATH.")
@click.argument("path")
@click.option("--show-body", is_flag=True, help="Print each rule's body.")
@click.pass_obj
def match(obj: dict, path: str, show_body: bool) -> None:
    ui = SteeringConsoleUI(Console())
    service = _loaded_service(obj)
    ui.render_matches(
        service.relative_path(path), service.rules_for(path), show_body=show_body
    )


@cli.command(help="List manual rules, or print the manual rule NAME.")
@click.argument("name", required=False)
@click.pass_obj
def manual(obj: dict, name: Optional[str]) -> None:
    ui = SteeringConsoleUI(Console())
    service = _loaded_service(obj)
    if name is None:
        ui.render_rules(service.manual_rules(), title="manual rules")
        return
    try:
        document = service.manual_rule(name)
    except SteeringError as exc:
        raise click.ClickException(str(exc))
    ui.render_rule_body(document)


@cli.group(help="Inspect agent hook definitions.")
def hooks() -> None:
    pass


@hooks.command("list", help="List every loaded hook.")
@click.pass_obj
def hooks_list(obj: dict) -> None:
    ui = SteeringConsoleUI(Console())
    service = _loaded_service(obj)
    ui.render_hooks(list(service.hooks.hooks))


@hooks.command("match", help="Show hooks fired by TRIGGER, optionally for PATH.")
@click.argument("trigger", type=click.Choice(TRIGGER_VALUES))
@click.argument("path", required=False)
@click.pass_obj
def hooks_match(obj: dict, trigger: str, path: Optional[str]) -> None:
    ui = SteeringConsoleUI(Console())
    service = _loaded_service(obj)
    matched = service.hooks_for(HookTrigger(trigger), path)
    title = f"{trigger} hooks" if path is None else f"{trigger} hooks for {path}"
    ui.render_hooks(matched, title=title)


def main() -> int:
    try:
        rv = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
