# Cell sides and the states a side can carry.

from enum import Enum
from typing import Tuple

Cell = Tuple[int, int]

class Side(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

class Border(Enum):
    WALL = "W"
    OPEN = "O"
    ENTRANCE = "E"
    EXIT = "X"

# Boundary search order for entrance/exit placement
SIDES = (Side.TOP, Side.BOTTOM, Side.LEFT, Side.RIGHT)

OPPOSITE = {
    Side.TOP: Side.BOTTOM,
    Side.BOTTOM: Side.TOP,
    Side.LEFT: Side.RIGHT,
    Side.RIGHT: Side.LEFT,
}

OFFSET = {
    Side.TOP: (0, -1),
    Side.BOTTOM: (0, 1),
    Side.LEFT: (-1, 0),
    Side.RIGHT: (1, 0),
}

def opposite(side: Side) -> Side:
    return OPPOSITE[side]

def side_between(a: Cell, b: Cell) -> Side:
    """Side of `a` that faces `b`. Cells must be 4-adjacent."""
    ax, ay = a
    bx, by = b
    if ax == bx and ay == by + 1:
        return Side.TOP
    if ax == bx and ay == by - 1:
        return Side.BOTTOM
    if ay == by and ax == bx + 1:
        return Side.LEFT
    if ay == by and ax == bx - 1:
        return Side.RIGHT
    raise ValueError(f"cells {a} and {b} are either the same or not adjacent")

def boundary_sides(cell: Cell, size_x: int, size_y: int) -> Tuple[Side, ...]:
    x, y = cell
    out = []
    for side in SIDES:
        dx, dy = OFFSET[side]
        nx, ny = x + dx, y + dy
        if not (0 <= nx < size_x and 0 <= ny < size_y):
            out.append(side)
    return tuple(out)
