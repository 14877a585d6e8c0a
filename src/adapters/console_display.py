"""Display sobre una consola Rich.

Por qué Rich:
- `Console.clear()` ya sabe no emitir secuencias de escape cuando la salida no
  es una terminal (pipes, CliRunner).
- Permite estilizar los dígitos sin mezclar markup en los mensajes.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text


class ConsoleDisplay:
    """Implementa `core.interfaces.display.Display` con `rich.console.Console`."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        clear_screen: bool = True,
        digit_style: str = "bold cyan",
    ) -> None:
        self._console = console or Console()
        self._clear_screen = clear_screen
        self._digit_style = digit_style

    @property
    def console(self) -> Console:
        return self._console

    def clear(self) -> None:
        if self._clear_screen:
            self._console.clear()

    def write(self, text: str) -> None:
        self._console.print(text, markup=False, highlight=False)

    def write_digits(self, block: str) -> None:
        self._console.print(Text(block, style=self._digit_style), highlight=False, soft_wrap=True)
