from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence, Tuple, Union

Cell = Tuple[int, int]

# Neighbor scan order: Up, Down, Left, Right
NEIGHBOR_OFFSETS = ((0, -1), (0, 1), (-1, 0), (1, 0))

class Tag(Enum):
    UNCLAIMED = "unclaimed"
    RECLAIMABLE = "reclaimable"

@dataclass(frozen=True)
class Claimed:
    path: int

Occupancy = Union[Tag, Claimed]

@dataclass
class Grid:
    buf: list
    width: int
    height: int

    @classmethod
    def filled(cls, width: int, height: int, value) -> "Grid":
        return cls(buf=[value] * (width * height), width=width, height=height)

    def idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def on_boundary(self, x: int, y: int) -> bool:
        return x == 0 or x == self.width - 1 or y == 0 or y == self.height - 1

    def get(self, x: int, y: int):
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v) -> None:
        self.buf[self.idx(x, y)] = v

    def neighbors(self, x: int, y: int) -> Iterator[Cell]:
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield (nx, ny)

class PriorityMap(Grid):
    """Per-cell priority drawn once per build; read-only afterwards."""

    @classmethod
    def from_draws(cls, width: int, height: int, draws: Sequence[float]) -> "PriorityMap":
        if len(draws) != width * height:
            raise ValueError("expected one priority per cell")
        return cls(buf=list(draws), width=width, height=height)

    def set(self, x: int, y: int, v) -> None:
        raise TypeError("priority map is immutable")

class OccupancyMap(Grid):
    """
    Cell -> owning path. Transitions:
      UNCLAIMED -> Claimed(p)
      Claimed(root) -> RECLAIMABLE      (initial-path backtracking only)
      RECLAIMABLE -> UNCLAIMED          (once the initial path is final)
    """

    @classmethod
    def empty(cls, width: int, height: int) -> "OccupancyMap":
        return cls.filled(width, height, Tag.UNCLAIMED)

    def is_unclaimed(self, x: int, y: int) -> bool:
        return self.get(x, y) is Tag.UNCLAIMED

    def claim(self, cell: Cell, path: int) -> None:
        x, y = cell
        if not self.is_unclaimed(x, y):
            raise RuntimeError(f"cell {cell} already {self.get(x, y)}")
        self.set(x, y, Claimed(path))

    def mark_reclaimable(self, cell: Cell, root: int = 0) -> None:
        x, y = cell
        if self.get(x, y) != Claimed(root):
            raise RuntimeError(f"cell {cell} is not held by the root path")
        self.set(x, y, Tag.RECLAIMABLE)

    def release(self, cell: Cell) -> None:
        x, y = cell
        if self.get(x, y) is not Tag.RECLAIMABLE:
            raise RuntimeError(f"cell {cell} is not reclaimable")
        self.set(x, y, Tag.UNCLAIMED)

    def owner(self, x: int, y: int) -> Optional[int]:
        v = self.get(x, y)
        return v.path if isinstance(v, Claimed) else None

    def is_full(self) -> bool:
        return all(isinstance(v, Claimed) for v in self.buf)

    def unclaimed_count(self) -> int:
        return sum(1 for v in self.buf if not isinstance(v, Claimed))
