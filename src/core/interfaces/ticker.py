"""Contrato de la fuente de ticks periódicos.

Reglas de diseño:
- Una `TickSource` se crea al entrar en Running y se descarta al salir.
- `start()` se llama una sola vez; `stop()` es idempotente.
- Tras `stop()` la fuente no vuelve a invocar el callback (salvo un tick que ya
  estuviera en vuelo; el motor lo descarta).
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class TickSource(Protocol):
    @property
    def is_active(self) -> bool:
        ...

    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...

    def join(self, timeout: float | None = None) -> None:
        ...


TickerFactory = Callable[[float, Callable[[], None]], TickSource]
