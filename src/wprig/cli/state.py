"""Console output and logging setup for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from ..core.exceptions import exception_hint


@dataclass(slots=True)
class CLIState:
    """Flags set by the root callback for the running command."""

    verbosity: int = 0
    show_tracebacks: bool = False

    @property
    def console(self) -> Console:
        return Console(file=sys.stdout)

    @property
    def err_console(self) -> Console:
        return Console(file=sys.stderr, highlight=False)


_CLI_STATE = CLIState()


def get_cli_state() -> CLIState:
    return _CLI_STATE


def configure(verbosity: int, debug: bool) -> None:
    """Store the CLI flags and route the package loggers to stderr."""
    _CLI_STATE.verbosity = max(0, verbosity)
    _CLI_STATE.show_tracebacks = debug

    level = {0: logging.WARNING, 1: logging.INFO}.get(_CLI_STATE.verbosity, logging.DEBUG)
    package_logger = logging.getLogger("wprig")
    package_logger.handlers.clear()
    package_logger.addHandler(
        RichHandler(console=_CLI_STATE.err_console, show_path=False, show_time=False)
    )
    package_logger.setLevel(level)
    package_logger.propagate = False


def report(level: str, message: str, *, exception: BaseException | None = None) -> None:
    """Print ``level: message`` to stderr, with the root cause when verbose."""
    style = "red" if level == "error" else "yellow"
    console = _CLI_STATE.err_console
    console.print(Text.assemble((f"{level}: ", f"bold {style}"), (message, style)))

    hint = exception_hint(exception) if exception is not None else None
    if hint and hint != message and _CLI_STATE.verbosity >= 1:
        console.print(f"  caused by: {hint}", style=style, markup=False)
