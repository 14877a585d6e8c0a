"""Modelos del dominio del temporizador.

Por qué aquí:
- `TimerStatus` es la etiqueta estable del estado activo; la usan CLI, tests y logs
  sin tener que conocer las clases de estado concretas.
- `TimerSnapshot` congela (estado, segundos restantes) en un único valor validado.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class TimerStatus(str, Enum):
    """Estados posibles del temporizador."""

    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"

    def label(self) -> str:
        """Human readable label for logging."""

        return self.value.capitalize()


class TimerSnapshot(BaseModel):
    """Foto inmutable del motor en un instante dado."""

    model_config = ConfigDict(frozen=True)

    status: TimerStatus = Field(
        ...,
        description="Estado activo del motor.",
    )
    time_left: int = Field(
        ...,
        ge=0,
        description="Segundos restantes de la cuenta atrás.",
    )
