from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .borders import Border, Cell, SIDES, Side
from .layout import CellLayout, iter_cells
from .render.ascii import ascii_maze

LayoutRows = Tuple[Tuple[CellLayout, ...], ...]


@dataclass(frozen=True)
class Maze:
    """Finished maze. Nothing here changes after the build returns it."""
    seed: int
    difficulty: int
    size_x: int
    size_y: int
    start: Cell
    layout: LayoutRows
    solution: Optional[Tuple[Cell, ...]] = None

    def cell(self, x: int, y: int) -> CellLayout:
        return self.layout[y][x]

    def _find(self, state: Border) -> Tuple[Cell, Side]:
        for cell, cl in iter_cells(self.layout):
            for side in SIDES:
                if cl.border_is(side, state):
                    return cell, side
        raise LookupError(f"maze has no {state.name}")

    def entrance(self) -> Tuple[Cell, Side]:
        return self._find(Border.ENTRANCE)

    def exit(self) -> Tuple[Cell, Side]:
        return self._find(Border.EXIT)

    def codes(self):
        """Rows of four-letter border codes (see CellLayout.code)."""
        return [[cl.code() for cl in row] for row in self.layout]

    def ascii(self, wall: str = "#", solution: Optional[str] = None):
        return ascii_maze(self, wall, solution)
