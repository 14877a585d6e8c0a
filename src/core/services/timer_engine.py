"""Motor de la cuenta atrás.

Este módulo concentra el estado mutable del temporizador (segundos restantes,
estado activo y fuente de ticks) y lo protege con un único lock re-entrante:
comandos del usuario (hilo principal) y ticks (hilo de la fuente) se serializan
aquí.

Notas de concurrencia:
- Un tick de una fuente ya parada o reemplazada se descarta bajo el lock, así
  que ningún tick tardío se aplica después de una transición.
- `stop_ticking()` nunca hace `join` del hilo del tick: ese hilo puede estar
  esperando este mismo lock.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from adapters.thread_ticker import ThreadTicker
from core.domain.models import TimerSnapshot, TimerStatus
from core.interfaces.display import Display
from core.interfaces.ticker import TickerFactory, TickSource
from core.services.ascii_renderer import render_time
from core.services.timer_states import ReadyState, TimerState

logger = logging.getLogger(__name__)

TICK_INTERVAL_SECONDS = 1.0
RENDER_EVERY_SECONDS = 5


def _check_seconds(seconds: int) -> int:
    if isinstance(seconds, bool) or not isinstance(seconds, int):
        raise TypeError(f"seconds must be an int, got {type(seconds).__name__}")
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}")
    return seconds


class TimerEngine:
    """Cuenta atrás con estados Ready/Running/Paused.

    `run`, `pause`, `resume` y `stop` se delegan al estado activo, que imprime
    su mensaje y, si corresponde, instala el siguiente estado.
    """

    def __init__(
        self,
        seconds: int,
        *,
        display: Display,
        ticker_factory: TickerFactory = ThreadTicker,
        renderer: Callable[[int], str] = render_time,
    ) -> None:
        self._time_left = _check_seconds(seconds)
        self._display = display
        self._ticker_factory = ticker_factory
        self._renderer = renderer
        self._ticker: TickSource | None = None
        self._lock = threading.RLock()
        self._changed = threading.Condition(self._lock)
        self._state: TimerState = ReadyState(self, display)

    # --- comandos -----------------------------------------------------------

    def run(self) -> None:
        with self._lock:
            self._state.run()

    def pause(self) -> None:
        with self._lock:
            self._state.pause()

    def resume(self) -> None:
        with self._lock:
            self._state.resume()

    def stop(self) -> None:
        with self._lock:
            self._state.stop()

    def reset(self, seconds: int) -> None:
        """Fija los segundos restantes sin tocar el estado.

        El flujo de la CLI llama a `run()` justo después para rearmar la cuenta.
        """

        _check_seconds(seconds)
        with self._lock:
            self._time_left = seconds
            self._display.clear()
            self._display.write(f"Timer reset to: {seconds} seconds")
            logger.info("Timer reset to %d seconds (state=%s)", seconds, self._state.status.label())

    def tick(self) -> None:
        """Avanza un segundo. Solo tiene efecto en Running."""

        with self._lock:
            if self._state.status is not TimerStatus.RUNNING:
                return

            if self._time_left > 0:
                self._time_left -= 1
                if self._time_left % RENDER_EVERY_SECONDS == 0:
                    self._display.clear()
                    self._display.write_digits(self._renderer(self._time_left))

            if self._time_left == 0:
                self._display.write("Time is up!")
                self.stop()

    # --- handle para los estados --------------------------------------------

    def set_state(self, state: TimerState) -> None:
        with self._changed:
            logger.debug("State %s -> %s", self._state.status.label(), state.status.label())
            self._state = state
            self._changed.notify_all()

    def start_ticking(self) -> None:
        with self._lock:
            self.stop_ticking()
            ticker = self._ticker_factory(TICK_INTERVAL_SECONDS, lambda: self._on_tick(ticker))
            self._ticker = ticker
            ticker.start()

    def stop_ticking(self) -> None:
        with self._lock:
            ticker, self._ticker = self._ticker, None
            if ticker is not None:
                ticker.stop()

    def _on_tick(self, source: TickSource) -> None:
        with self._lock:
            if source is not self._ticker:
                logger.debug("Discarding tick from a stopped tick source")
                return
            self.tick()

    # --- consultas ----------------------------------------------------------

    @property
    def time_left(self) -> int:
        with self._lock:
            return self._time_left

    @property
    def status(self) -> TimerStatus:
        with self._lock:
            return self._state.status

    @property
    def ticking(self) -> bool:
        with self._lock:
            return self._ticker is not None and self._ticker.is_active

    def snapshot(self) -> TimerSnapshot:
        with self._lock:
            return TimerSnapshot(status=self._state.status, time_left=self._time_left)

    def wait_until_idle(self, timeout: float | None = None) -> bool:
        """Bloquea hasta que el motor salga de Running. Devuelve False si vence `timeout`."""

        with self._changed:
            return self._changed.wait_for(
                lambda: self._state.status is not TimerStatus.RUNNING,
                timeout,
            )

    def shutdown(self) -> None:
        """Apaga la fuente de ticks sin mensajes y espera a su hilo (salida del proceso)."""

        with self._lock:
            ticker, self._ticker = self._ticker, None
            if ticker is not None:
                ticker.stop()
            logger.debug("Engine shut down at %d seconds left", self._time_left)
        # Fuera del lock: un tick en vuelo ya no es el actual y se descarta sin bloquear.
        if ticker is not None:
            ticker.join(TICK_INTERVAL_SECONDS)
