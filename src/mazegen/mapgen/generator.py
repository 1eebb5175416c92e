# src/mazegen/mapgen/generator.py
# Maze assembler: seed -> draws -> path tree -> carved layout -> Maze.

import logging
import math
from typing import Optional, Tuple

from ..config import FLAGS, check_seed, check_size, resolve_difficulty
from ..grid import OccupancyMap, PriorityMap
from ..maze import Maze
from ..rng import SeededRandom, draw_layout_sequence
from .carve import carve_layout
from .growth import build_initial_path, build_sub_paths
from .paths import PathTree

log = logging.getLogger(__name__)


def java_round(x: float) -> int:
    # Half-up, not Python's half-even.
    return int(math.floor(x + 0.5))


def difficulty_bounds(
    difficulty: int, size_x: int, size_y: int, original_curve: Optional[bool] = None
) -> Tuple[int, int]:
    """
    Return (min_moves, max_sub_path_moves).

    Main path share runs 10%..25% of the area and branch length 5%..25% as
    difficulty goes 1..10. With original_curve the scale is difficulty // 10,
    so only EXTREME moves off the easiest curve.
    """
    if original_curve is None:
        original_curve = FLAGS.original_difficulty_curve
    scale = (difficulty // 10) if original_curve else difficulty / 10
    area = size_x * size_y
    min_moves = java_round(area * (0.10 + scale * 0.15))
    max_sub = java_round(area * (0.05 + scale * 0.20))
    # One-cell roots cannot carry entrance and exit apart; branches must grow.
    return max(min_moves, min(2, area)), max(max_sub, 1)


def grow_tree(seed: int, size_x: int, size_y: int, min_moves: int, max_sub: int):
    """Run the draws and both growth phases. Returns (start, occupancy, tree)."""
    rng = SeededRandom.from_seed(seed)
    start, draws = draw_layout_sequence(rng, size_x, size_y)
    priorities = PriorityMap.from_draws(size_x, size_y, draws)
    occupancy = OccupancyMap.empty(size_x, size_y)

    tree = PathTree()
    build_initial_path(tree, start, occupancy, priorities, min_moves)
    build_sub_paths(tree, occupancy, priorities, max_sub)
    log.debug("paths=%d levels=%d", len(tree), tree.max_level() + 1)
    return start, occupancy, tree


def build_maze(
    seed: int,
    size_x: int = 16,
    size_y: int = 16,
    difficulty=5,
    record_solution: bool = False,
    original_curve: Optional[bool] = None,
) -> Maze:
    check_seed(seed)
    difficulty = resolve_difficulty(difficulty)
    check_size(size_x, size_y)
    min_moves, max_sub = difficulty_bounds(difficulty, size_x, size_y, original_curve)
    log.debug(
        "build seed=%d size=%dx%d difficulty=%d min_moves=%d max_sub=%d",
        seed, size_x, size_y, difficulty, min_moves, max_sub,
    )

    start, _, tree = grow_tree(seed, size_x, size_y, min_moves, max_sub)
    layout = carve_layout(tree, size_x, size_y)
    return Maze(
        seed=seed,
        difficulty=difficulty,
        size_x=size_x,
        size_y=size_y,
        start=start,
        layout=layout.freeze(),
        solution=tuple(tree.root.cells) if record_solution else None,
    )
