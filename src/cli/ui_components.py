"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Los textos fijos que ve el usuario viven en un solo sitio (tests incluidos).
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

USAGE = "Usage: ascii-timer <seconds>"
AVAILABLE_COMMANDS = "Available commands: pause, resume, stop, reset"
COMMANDS_HELP = "Commands: pause, resume, stop, reset"
RESET_PROMPT = "Enter new timeout: "
INVALID_TIME = "Invalid time input"


def print_banner(console: Console, seconds: int) -> None:
    """Imprime el banner de bienvenida.

    Se puede desactivar con `--no-banner` o `ASCII_TIMER_SHOW_BANNER=false`
    (p.ej. cuando la salida va a un log).
    """

    title = Text("ASCII TIMER", style="bold cyan")
    subtitle = Text(f"Countdown: {seconds} seconds", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))
