"""Contrato de salida de texto.

Por qué Protocol:
- El motor solo necesita limpiar y escribir; no le importa si detrás hay una
  consola Rich, un buffer de tests o un log.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Display(Protocol):
    """Destino de los mensajes y renders del temporizador."""

    def clear(self) -> None:
        """Borra lo mostrado hasta ahora (puede ser no-op)."""

        ...

    def write(self, text: str) -> None:
        """Escribe `text` seguido de salto de línea."""

        ...

    def write_digits(self, block: str) -> None:
        """Escribe un bloque multilínea de dígitos grandes."""

        ...
