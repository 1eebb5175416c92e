# src/mazegen/render/blocks.py
# Maze -> (2*size_y+1) x (2*size_x+1) block grid of tile ids.

from typing import List

from ..borders import Border, Side
from ..tiles import FLOOR, SOLUTION, WALL


def block_grid(maze, show_solution: bool = False) -> List[List[int]]:
    """
    Lattice corners are always WALL and cell (c, r) sits at (1+2r, 1+2c).
    The block between a cell and its right/bottom neighbor (or the outer
    edge) is WALL only while that side is still WALL. Top row and left
    column follow the same rule against the outer edge.
    """
    h, w = 2 * maze.size_y + 1, 2 * maze.size_x + 1
    out = [[FLOOR] * w for _ in range(h)]

    for r in range(0, h, 2):
        for c in range(0, w, 2):
            out[r][c] = WALL

    for row in range(maze.size_y):
        for col in range(maze.size_x):
            cl = maze.layout[row][col]
            cy, cx = 1 + 2 * row, 1 + 2 * col
            if row == 0 and cl.border_is(Side.TOP, Border.WALL):
                out[0][cx] = WALL
            if col == 0 and cl.border_is(Side.LEFT, Border.WALL):
                out[cy][0] = WALL
            if cl.border_is(Side.BOTTOM, Border.WALL):
                out[cy + 1][cx] = WALL
            if cl.border_is(Side.RIGHT, Border.WALL):
                out[cy][cx + 1] = WALL

    if show_solution and maze.solution:
        for x, y in maze.solution:
            out[1 + 2 * y][1 + 2 * x] = SOLUTION
    return out
