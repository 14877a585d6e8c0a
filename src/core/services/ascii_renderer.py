"""Render de números como dígitos ASCII grandes.

Función pura: no limpia pantalla ni imprime; devuelve el bloque de texto y el
llamador decide dónde mostrarlo.
"""

from __future__ import annotations

GLYPH_HEIGHT = 6
GLYPH_SEPARATOR = "  "

BIG_DIGITS: dict[str, tuple[str, ...]] = {
    "0": ("  ____  ", " / __ \\ ", "| |  | |", "| |  | |", "| |__| |", " \\____/ "),
    "1": (" __ ", "/_ |", " | |", " | |", " | |", " |_|"),
    "2": (" ___  ", "|__ \\ ", "   ) |", "  / / ", " / /_ ", "|____|"),
    "3": (" ____  ", "|___ \\ ", "  __) |", " |__ < ", " ___) |", "|____/ "),
    "4": (" _  _   ", "| || |  ", "| || |_ ", "|__   _|", "   | |  ", "   |_|  "),
    "5": (" _____ ", "| ____|", "| |__  ", "|___ \\ ", " ___) |", "|____/ "),
    "6": ("   __  ", "  / /  ", " / /_  ", "| '_ \\ ", "| (_) |", " \\___/ "),
    "7": (" ______", "|____  |", "    / / ", "   / /  ", "  / /   ", " /_/    "),
    "8": ("  ___  ", " / _ \\ ", "| (_) |", " > _ < ", "| (_) |", " \\___/ "),
    "9": ("  ___  ", " / _ \\ ", "| (_) |", " \\__, |", "   / / ", "  /_/  "),
}


def render_time(seconds: int) -> str:
    """Devuelve `seconds` como bloque de 6 filas de dígitos grandes.

    Cada dígito se dibuja con su glifo de `BIG_DIGITS`, uno al lado del otro y
    separados por dos espacios. Caracteres sin glifo se omiten.
    """

    glyphs = [BIG_DIGITS[c] for c in str(seconds) if c in BIG_DIGITS]
    rows = (GLYPH_SEPARATOR.join(glyph[row] for glyph in glyphs) for row in range(GLYPH_HEIGHT))
    return "\n".join(rows)
