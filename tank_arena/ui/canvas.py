"""Character-cell render targets."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Protocol, Tuple


class Palette(Enum):
    """Foreground colours a cell can be drawn with."""

    WHITE = "white"
    MAGENTA = "magenta"
    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"
    CYAN = "cyan"


class CellCanvas(Protocol):
    """Minimal drawing surface accepted by the frame renderer."""

    def clear(self) -> None: ...

    def set_cell(self, x: int, y: int, char: str, color: Palette) -> None: ...

    def flush(self) -> None: ...


class TextCanvas:
    """In-memory canvas, handy for tests and plain-text dumps."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.cells: Dict[Tuple[int, int], Tuple[str, Palette]] = {}
        self.frames = 0

    def clear(self) -> None:
        self.cells = {}

    def set_cell(self, x: int, y: int, char: str, color: Palette) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.cells[(x, y)] = (char, color)

    def flush(self) -> None:
        self.frames += 1

    def char_at(self, x: int, y: int) -> str:
        return self.cells.get((x, y), (" ", Palette.WHITE))[0]

    def color_at(self, x: int, y: int) -> Optional[Palette]:
        entry = self.cells.get((x, y))
        return entry[1] if entry else None

    def row(self, y: int) -> str:
        return "".join(self.char_at(x, y) for x in range(self.width))

    def rows(self) -> List[str]:
        return [self.row(y) for y in range(self.height)]

    def render(self) -> str:
        return "\n".join(row.rstrip() for row in self.rows())


__all__ = ["CellCanvas", "Palette", "TextCanvas"]
