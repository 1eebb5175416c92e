# src/mazegen/mapgen/paths.py
# Path arena: paths live in one list and refer to their parent by index.

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

Cell = Tuple[int, int]

ROOT = 0

@dataclass
class Path:
    index: int
    level: int
    cells: List[Cell] = field(default_factory=list)
    parent: Optional[int] = None
    branch_index: Optional[int] = None  # parent cell this path grew from

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def head(self) -> Cell:
        return self.cells[0]

    @property
    def tail(self) -> Cell:
        return self.cells[-1]

    def append(self, cell: Cell) -> None:
        self.cells.append(cell)

    def pop(self) -> Cell:
        return self.cells.pop()

    @property
    def is_root(self) -> bool:
        return self.parent is None

@dataclass
class PathTree:
    paths: List[Path] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.paths)

    def __getitem__(self, index: int) -> Path:
        return self.paths[index]

    @property
    def root(self) -> Path:
        return self.paths[ROOT]

    def add_root(self, start: Cell) -> Path:
        if self.paths:
            raise RuntimeError("path tree already has a root")
        p = Path(index=ROOT, level=0, cells=[start])
        self.paths.append(p)
        return p

    def add_branch(self, parent: Path, at: int, start: Cell) -> Path:
        p = Path(
            index=len(self.paths),
            level=parent.level + 1,
            cells=[start],
            parent=parent.index,
            branch_index=at,
        )
        self.paths.append(p)
        return p

    def at_level(self, level: int) -> List[Path]:
        return [p for p in self.paths if p.level == level]

    def branch_cell(self, path: Path) -> Cell:
        if path.parent is None:
            raise ValueError("root path has no branch cell")
        return self.paths[path.parent].cells[path.branch_index]

    def max_level(self) -> int:
        return max((p.level for p in self.paths), default=0)
