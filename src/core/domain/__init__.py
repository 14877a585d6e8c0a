"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Enum + Pydantic v2).
- El dominio no conoce la consola, hilos ni la CLI: solo conceptos del temporizador.
"""
