"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el motor depende de abstracciones, no de la consola
  ni de `threading`.
"""

from core.interfaces.display import Display
from core.interfaces.ticker import TickerFactory, TickSource

__all__ = [
    "Display",
    "TickSource",
    "TickerFactory",
]
