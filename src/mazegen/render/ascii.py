from typing import List, Optional

from ..tiles import SOLUTION, WALL
from .blocks import block_grid


def ascii_maze(maze, wall: str = "#", solution: Optional[str] = None) -> List[List[str]]:
    """Character grid; the solution glyph is drawn only if one was recorded."""
    grid = block_grid(maze, show_solution=solution is not None)
    glyphs = {WALL: wall, SOLUTION: solution}
    return [[glyphs.get(t, " ") for t in row] for row in grid]


def ascii_text(maze, wall: str = "#", solution: Optional[str] = None) -> str:
    return "\n".join("".join(row) for row in ascii_maze(maze, wall, solution))
