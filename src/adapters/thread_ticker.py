"""Fuente de ticks basada en un hilo daemon.

Por qué un hilo propio (y no `threading.Timer` encadenado):
- Un único hilo por periodo Running; `stop()` lo apaga con un `Event`.
- El siguiente disparo se calcula sobre `time.monotonic()`, así el retraso del
  callback no se acumula tick a tick.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable

logger = logging.getLogger(__name__)


class ThreadTicker:
    """Invoca `callback` cada `interval` segundos hasta `stop()`.

    El primer disparo ocurre un periodo completo después de `start()`.
    """

    def __init__(self, interval: float, callback: Callable[[], None]) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._interval = interval
        self._callback = callback
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_active(self) -> bool:
        return self._thread is not None and not self._stopped.is_set()

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("Ticker already started.")
        self._thread = threading.Thread(target=self._loop, name="ascii-timer-tick", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        # No join: el hilo del tick puede estar esperando al lock de quien llama.
        self._stopped.set()

    def join(self, timeout: float | None = None) -> None:
        """Espera a que el hilo termine (tests / apagado ordenado)."""

        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def _loop(self) -> None:
        next_at = time.monotonic() + self._interval
        while not self._stopped.wait(max(0.0, next_at - time.monotonic())):
            try:
                self._callback()
            except Exception:
                logger.exception("Tick callback failed")
            next_at += self._interval
