from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Tuple

from .borders import Border, Cell, SIDES, Side, boundary_sides, opposite, side_between

_FIELD = {
    Side.TOP: "top",
    Side.BOTTOM: "bottom",
    Side.LEFT: "left",
    Side.RIGHT: "right",
}

@dataclass(frozen=True)
class CellLayout:
    top: Border = Border.WALL
    bottom: Border = Border.WALL
    left: Border = Border.WALL
    right: Border = Border.WALL

    def border(self, side: Side) -> Border:
        return getattr(self, _FIELD[side])

    def border_is(self, side: Side, state: Border) -> bool:
        return self.border(side) is state

    def with_border(self, side: Side, state: Border) -> "CellLayout":
        return replace(self, **{_FIELD[side]: state})

    def code(self) -> str:
        """Four-letter code in TOP, BOTTOM, LEFT, RIGHT order, e.g. 'WOEW'."""
        return "".join(self.border(s).value for s in SIDES)

class LayoutGrid:
    """size_y x size_x cell layouts, all sides WALL until carved."""

    def __init__(self, size_x: int, size_y: int):
        self.size_x = size_x
        self.size_y = size_y
        self.rows: List[List[CellLayout]] = [
            [CellLayout() for _ in range(size_x)] for _ in range(size_y)
        ]

    def get(self, cell: Cell) -> CellLayout:
        x, y = cell
        return self.rows[y][x]

    def set_border(self, cell: Cell, side: Side, state: Border) -> None:
        x, y = cell
        self.rows[y][x] = self.rows[y][x].with_border(side, state)

    def open_between(self, a: Cell, b: Cell) -> None:
        side = side_between(a, b)
        self.set_border(a, side, Border.OPEN)
        self.set_border(b, opposite(side), Border.OPEN)

    def mark_boundary(self, cell: Cell, state: Border, taken: Optional[Side] = None) -> Side:
        """Put `state` on the first free boundary side of `cell`."""
        for side in boundary_sides(cell, self.size_x, self.size_y):
            if side is not taken:
                self.set_border(cell, side, state)
                return side
        raise RuntimeError(f"cell {cell} has no free boundary side for {state.name}")

    def freeze(self) -> Tuple[Tuple[CellLayout, ...], ...]:
        return tuple(tuple(row) for row in self.rows)

def iter_cells(layout: Tuple[Tuple[CellLayout, ...], ...]) -> Iterator[Tuple[Cell, CellLayout]]:
    for y, row in enumerate(layout):
        for x, cl in enumerate(row):
            yield (x, y), cl
