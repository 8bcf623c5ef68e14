"""TerminalRenderer - ANSI frame around a fixed viewport."""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, TextIO

if TYPE_CHECKING:
    from flowgrid.graph import EntityGraph, Glyph

ESC = "\x1b"
CLEAR = f"{ESC}[2J"
RESET = f"{ESC}[0m"

# SGR foreground per holding band, lowest first.
BAND_COLORS = (34, 32, 33, 31)

GLYPH_CHARS = "0123456789abcdefghijklmnopqrstuvwxyz"

# Border occupies row/column 1; viewport cell (0, 0) sits at (2, 2).
MARGIN = (2, 2)


def move_to(row: int, col: int) -> str:
    return f"{ESC}[{row};{col}H"


def glyph_char(index: int) -> str:
    return GLYPH_CHARS[index % len(GLYPH_CHARS)]


class TerminalRenderer:
    def __init__(self, width: int = 64, height: int = 32, stream: TextIO | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"viewport must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._stream = stream if stream is not None else sys.stdout

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_view(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _border_top(self) -> list[str]:
        right = self._width + 2
        parts = [move_to(1, 1) + "╔"]
        parts.extend(move_to(1, x) + "═" for x in range(2, right))
        parts.append(move_to(1, right) + "╗")
        return parts

    def _border_sides(self) -> list[str]:
        right = self._width + 2
        return [
            move_to(y, 1) + "║" + move_to(y, right) + "║"
            for y in range(2, self._height + 2)
        ]

    def _border_bottom(self) -> list[str]:
        bottom = self._height + 2
        right = self._width + 2
        parts = [move_to(bottom, 1) + "╚"]
        parts.extend(move_to(bottom, x) + "═" for x in range(2, right))
        parts.append(move_to(bottom, right) + "╝")
        return parts

    def _glyph(self, glyph: Glyph) -> str:
        x, y = glyph.position
        color = BAND_COLORS[min(glyph.band, len(BAND_COLORS) - 1)]
        return (
            move_to(y + MARGIN[1], x + MARGIN[0])
            + f"{ESC}[{color}m"
            + glyph_char(glyph.index)
            + RESET
        )

    def frame(self, glyphs: Iterable[Glyph]) -> str:
        parts = [CLEAR]
        parts.extend(self._border_top())
        parts.extend(self._border_sides())
        for glyph in glyphs:
            if self.in_view(*glyph.position):
                parts.append(self._glyph(glyph))
        parts.extend(self._border_bottom())
        parts.append("\n")
        return "".join(parts)

    def draw(self, graph: EntityGraph) -> None:
        self._stream.write(self.frame(graph.display(len(BAND_COLORS))))
        self._stream.flush()
