"""Typer application wiring for the wprig CLI."""

from __future__ import annotations

import io
from pathlib import Path

from rich.table import Table
from rich.traceback import Traceback
import typer

from ..core.config import ThemeConfig, load_theme_config
from ..core.exceptions import ThemeError
from ..core.hooks import HookRegistry
from ..core.markup import MarkupFormatter
from ..script_loader import SCRIPT_LOADER_TAG_HOOK
from ..theme import BODY_CLASS_HOOK, HEAD_HOOK, Theme, theme_from_config
from .state import (
    configure,
    get_cli_state,
    report,
)


app = typer.Typer(
    help="Preview the markup produced by the theme helpers.",
    context_settings={"help_option_names": ["--help"]},
    no_args_is_help=True,
)

ConfigArgument = typer.Argument(
    ...,
    metavar="CONFIG",
    help="YAML file describing the theme and the page to render.",
    exists=True,
    file_okay=True,
    dir_okay=False,
    readable=True,
    resolve_path=True,
)


@app.callback()
def _app_root(
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug/--no-debug",
        help="Show full tracebacks when an unexpected error occurs.",
    ),
) -> None:
    configure(verbose, debug)


def _load(config_path: Path) -> tuple[ThemeConfig, Theme, HookRegistry]:
    try:
        config = load_theme_config(config_path)
    except ThemeError as exc:
        report("error", str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    hooks = HookRegistry()
    theme = theme_from_config(config, hooks)
    return config, theme, hooks


@app.command(name="body-class")
def body_class(
    config_path: Path = ConfigArgument,
    classes: list[str] = typer.Option(
        [],
        "--class",
        "-c",
        help="Existing body class, repeat for several.",
    ),
) -> None:
    """Print the body classes for the configured page."""
    config, _, hooks = _load(config_path)
    result = hooks.apply_filters(BODY_CLASS_HOOK, list(classes), config.page.to_context())
    typer.echo(" ".join(result))


@app.command(name="head")
def head(config_path: Path = ConfigArgument) -> None:
    """Print the preload and print-stylesheet links for the configured page."""
    config, _, hooks = _load(config_path)
    buffer = io.StringIO()
    hooks.do_action(HEAD_HOOK, config.page.to_context(), buffer)
    typer.echo(buffer.getvalue(), nl=False)


@app.command(name="script-tag")
def script_tag(
    config_path: Path = ConfigArgument,
    handle: str = typer.Argument(..., help="Registered script handle."),
) -> None:
    """Print the loader tag of a registered script."""
    config, _, hooks = _load(config_path)
    script = config.scripts.get(handle)
    if script is None:
        report("warning", f"Script '{handle}' is not registered.")
        raise typer.Exit(code=1)

    src = f"{script.src}?ver={script.version}" if script.version else script.src
    tag = MarkupFormatter().script_tag(src=src, handle=handle)
    typer.echo(hooks.apply_filters(SCRIPT_LOADER_TAG_HOOK, tag, handle))


@app.command(name="panels")
def panels(config_path: Path = ConfigArgument) -> None:
    """Print the number of populated front-page panels."""
    _, theme, _ = _load(config_path)
    typer.echo(str(theme.panel_count()))


@app.command(name="hooks")
def hooks_command(config_path: Path = ConfigArgument) -> None:
    """List the callbacks subscribed for the configured theme."""
    _, _, hooks = _load(config_path)
    table = Table("Hook", "Callback", "Priority", "Args")
    for entry in hooks.describe():
        table.add_row(
            str(entry["hook"]),
            str(entry["name"]),
            str(entry["priority"]),
            str(entry["accepted_args"]),
        )
    get_cli_state().console.print(table)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except typer.Exit:
        raise
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - defensive catch-all
        state = get_cli_state()
        if state.show_tracebacks:
            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        else:
            report("error", str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
