"""Bucle interactivo de comandos.

Lee líneas de un stream (stdin en producción, `StringIO` en tests) y las
traduce a llamadas del `TimerEngine`. Toda entrada tiene una respuesta textual;
nada de lo que escriba el usuario termina el bucle.
"""

from __future__ import annotations

import logging
import re
import threading
from typing import TextIO

from cli.ui_components import COMMANDS_HELP, INVALID_TIME, RESET_PROMPT
from core.interfaces.display import Display
from core.services.timer_engine import TimerEngine

logger = logging.getLogger(__name__)

_SECONDS_RE = re.compile(r"\+?[0-9]+")


def parse_seconds(raw: str | None) -> int | None:
    """Parsea un entero no negativo; `None` si la entrada no es válida."""

    if raw is None:
        return None
    text = raw.strip()
    if not _SECONDS_RE.fullmatch(text):
        return None
    return int(text)


class CommandLoop:
    def __init__(self, engine: TimerEngine, display: Display, stream: TextIO) -> None:
        self._engine = engine
        self._display = display
        self._stream = stream
        self._closed = threading.Event()

    def run(self) -> None:
        """Procesa comandos mientras el proceso viva.

        Fin de entrada no termina el bucle: la cuenta sigue (o sigue pausada) y
        el hilo queda bloqueado hasta `close()` o Ctrl+C, sin consumir CPU.
        """

        while True:
            line = self._stream.readline()
            if not line:
                logger.debug("End of input; holding until closed")
                self._hold()
                return
            self.handle(line)

    def close(self) -> None:
        """Libera un `run()` bloqueado tras fin de entrada."""

        self._closed.set()

    def _hold(self) -> None:
        self._closed.wait()

    def handle(self, line: str) -> None:
        command = line.strip().lower()
        logger.debug("Command %r", command)

        if command == "pause":
            self._engine.pause()
        elif command == "resume":
            self._engine.resume()
        elif command == "stop":
            self._engine.stop()
        elif command == "reset":
            self._reset()
        else:
            self._display.write(COMMANDS_HELP)

    def _reset(self) -> None:
        self._display.write(RESET_PROMPT)
        seconds = parse_seconds(self._stream.readline())
        if seconds is None:
            self._display.write(INVALID_TIME)
            return
        self._engine.reset(seconds)
        self._engine.run()
