from typing import Optional

from .config import (
    DEFAULT_DIFFICULTY, DEFAULT_SIZE, check_seed, check_size, random_seed, resolve_difficulty,
)
from .maze import Maze
from .mapgen.generator import build_maze, difficulty_bounds


class MazeBuilder:
    """
    Fluent options holder. Any setter drops the cached maze, so the next
    build() regenerates from the new settings.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = random_seed() if seed is None else check_seed(seed)
        self.size_x, self.size_y = DEFAULT_SIZE
        self.difficulty = int(DEFAULT_DIFFICULTY)
        self.record_solution = False
        self._maze: Optional[Maze] = None

    def set_seed(self, seed: int) -> "MazeBuilder":
        self.seed = check_seed(seed)
        self._maze = None
        return self

    def set_size(self, size_x: int, size_y: int) -> "MazeBuilder":
        check_size(size_x, size_y)
        self.size_x, self.size_y = size_x, size_y
        self._maze = None
        return self

    def set_difficulty(self, difficulty) -> "MazeBuilder":
        self.difficulty = resolve_difficulty(difficulty)
        self._maze = None
        return self

    def save_correct_path(self, save: bool = True) -> "MazeBuilder":
        self.record_solution = bool(save)
        self._maze = None
        return self

    @property
    def min_moves(self) -> int:
        return difficulty_bounds(self.difficulty, self.size_x, self.size_y)[0]

    @property
    def max_sub_path_moves(self) -> int:
        return difficulty_bounds(self.difficulty, self.size_x, self.size_y)[1]

    def build(self) -> Maze:
        if self._maze is None:
            self._maze = build_maze(
                self.seed,
                self.size_x,
                self.size_y,
                self.difficulty,
                record_solution=self.record_solution,
            )
        return self._maze
