"""Estados del temporizador (patrón State).

Cada estado decide qué comandos son legales y qué hacen. Las transiciones se
piden al motor a través de `TimerControls`, un handle de capacidades: el estado
no es dueño del motor, solo puede instalar otro estado y encender/apagar el tick.

Comandos ilegales no son errores: imprimen un mensaje informativo y no cambian
nada.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from core.domain.models import TimerStatus
from core.interfaces.display import Display


class TimerControls(Protocol):
    """Operaciones del motor que un estado puede invocar."""

    def set_state(self, state: TimerState) -> None:
        ...

    def start_ticking(self) -> None:
        ...

    def stop_ticking(self) -> None:
        ...


class TimerState(ABC):
    """Base común: guarda el handle al motor y el display."""

    status: TimerStatus

    def __init__(self, controls: TimerControls, display: Display) -> None:
        self._controls = controls
        self._display = display

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @abstractmethod
    def run(self) -> None:
        ...

    @abstractmethod
    def pause(self) -> None:
        ...

    @abstractmethod
    def resume(self) -> None:
        ...

    @abstractmethod
    def stop(self) -> None:
        ...

    def _install(self, state_cls: type[TimerState]) -> None:
        self._controls.set_state(state_cls(self._controls, self._display))


class ReadyState(TimerState):
    status = TimerStatus.READY

    def run(self) -> None:
        self._display.write("Starting timer...")
        self._install(RunningState)
        self._controls.start_ticking()

    def pause(self) -> None:
        self._display.write("Cannot pause. Timer is not running.")

    def resume(self) -> None:
        self._display.write("Timer is not running")

    def stop(self) -> None:
        self._display.write("Timer is not running")


class RunningState(TimerState):
    status = TimerStatus.RUNNING

    def run(self) -> None:
        self._display.write("Timer is already running")

    def pause(self) -> None:
        self._display.write("Pausing timer...")
        self._controls.stop_ticking()
        self._install(PausedState)

    def resume(self) -> None:
        self._display.write("Timer is already running")

    def stop(self) -> None:
        self._display.write("Stopping timer...")
        self._controls.stop_ticking()
        self._install(ReadyState)


class PausedState(TimerState):
    status = TimerStatus.PAUSED

    def run(self) -> None:
        self._display.write("Timer is paused. Use resume to continue")

    def pause(self) -> None:
        self._display.write("Timer is already paused")

    def resume(self) -> None:
        self._display.write("Resuming timer...")
        self._install(RunningState)
        self._controls.start_ticking()

    def stop(self) -> None:
        # Tick source was already stopped on pause.
        self._display.write("Stopping timer...")
        self._install(ReadyState)
