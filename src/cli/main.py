"""CLI principal (Typer).

`ascii-timer <seconds>` arranca la cuenta atrás y deja abierto el bucle de
comandos (pause, resume, stop, reset) sobre stdin.
"""

from __future__ import annotations

import sys
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.console_display import ConsoleDisplay
from cli.commands import CommandLoop, parse_seconds
from cli.logging_config import configure_logging
from cli.ui_components import AVAILABLE_COMMANDS, USAGE, print_banner
from core.config import AppSettings
from core.services.timer_engine import TimerEngine

app = typer.Typer(
    add_completion=False,
    help="Terminal countdown timer with large ASCII digits.",
)


# Negative numbers must reach `parse_seconds` instead of being read as options.
@app.command(context_settings={"ignore_unknown_options": True})
def start(
    seconds: Optional[str] = typer.Argument(
        None,
        help="Countdown length in seconds (non-negative integer).",
        show_default=False,
    ),
    no_clear: bool = typer.Option(False, "--no-clear", help="Append renders instead of clearing the screen."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the welcome banner."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level for stderr output."),
) -> None:
    """Start a countdown and read commands from stdin."""

    console = Console()

    parsed = parse_seconds(seconds)
    if parsed is None:
        console.print(USAGE, markup=False, highlight=False)
        raise typer.Exit(code=1)

    overrides: dict[str, object] = {}
    if no_clear:
        overrides["clear_screen"] = False
    if no_banner:
        overrides["show_banner"] = False
    if log_level is not None:
        overrides["log_level"] = log_level
    try:
        settings = AppSettings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    configure_logging(settings.log_level)

    display = ConsoleDisplay(
        console,
        clear_screen=settings.clear_screen,
        digit_style=settings.digit_style,
    )
    if settings.show_banner:
        print_banner(console, parsed)

    engine = TimerEngine(parsed, display=display)
    engine.run()
    display.write(AVAILABLE_COMMANDS)

    try:
        CommandLoop(engine, display, sys.stdin).run()
    except KeyboardInterrupt:
        raise typer.Exit(code=130)
    finally:
        engine.shutdown()


def run() -> None:
    app()
