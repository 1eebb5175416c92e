# src/mazegen/mapgen/growth.py
# Path growth: the root path (DFS with backtracking) and the breadth-first
# sweep of bounded branches that claims the rest of the grid.

import logging
from typing import List, Optional

from ..grid import Cell, OccupancyMap, PriorityMap
from .paths import ROOT, Path, PathTree

log = logging.getLogger(__name__)


def greatest_adjacent(
    cell: Cell, occupancy: OccupancyMap, priorities: PriorityMap
) -> Optional[Cell]:
    """
    Unclaimed in-bounds neighbor with the strictly greatest priority,
    scanning Up, Down, Left, Right. On a tie the first one scanned wins.
    """
    best = None
    best_value = -1.0
    for nx, ny in occupancy.neighbors(*cell):
        if not occupancy.is_unclaimed(nx, ny):
            continue
        value = priorities.get(nx, ny)
        if value > best_value:
            best, best_value = (nx, ny), value
    return best


def must_continue(path: Path, occupancy: OccupancyMap, min_moves: int) -> bool:
    if len(path) < min_moves:
        return True
    return not occupancy.on_boundary(*path.tail)


def build_initial_path(
    tree: PathTree,
    start: Cell,
    occupancy: OccupancyMap,
    priorities: PriorityMap,
    min_moves: int,
) -> Path:
    root = tree.add_root(start)
    occupancy.claim(start, ROOT)
    backtracked: List[Cell] = []

    while must_continue(root, occupancy, min_moves):
        nxt = greatest_adjacent(root.tail, occupancy, priorities)
        if nxt is not None:
            occupancy.claim(nxt, ROOT)
            root.append(nxt)
            continue
        if len(root) == 1:
            raise RuntimeError(
                f"initial path backtracked to its start; min_moves={min_moves} unreachable"
            )
        dead = root.pop()
        occupancy.mark_reclaimable(dead, ROOT)
        backtracked.append(dead)

    for cell in backtracked:
        occupancy.release(cell)

    log.debug("root path: %d cells, %d backtracked", len(root), len(backtracked))
    return root


def grow_branch(
    path: Path, occupancy: OccupancyMap, priorities: PriorityMap, max_moves: int
) -> None:
    # No backtracking here: a stalled branch just stays short.
    while len(path) < max_moves:
        nxt = greatest_adjacent(path.tail, occupancy, priorities)
        if nxt is None:
            return
        occupancy.claim(nxt, path.index)
        path.append(nxt)


def sweep_path(
    tree: PathTree,
    parent: Path,
    occupancy: OccupancyMap,
    priorities: PriorityMap,
    max_sub_path_moves: int,
) -> int:
    """
    Walk `parent` cyclically, spawning one branch per cell visit that has an
    unclaimed neighbor, until a full lap finds nothing. Returns branches added.
    """
    spawned = 0
    i = 0
    misses = 0
    n = len(parent)
    while misses < n:
        start = greatest_adjacent(parent.cells[i], occupancy, priorities)
        if start is None:
            misses += 1
        else:
            misses = 0
            child = tree.add_branch(parent, i, start)
            occupancy.claim(start, child.index)
            grow_branch(child, occupancy, priorities, max_sub_path_moves)
            spawned += 1
        i = (i + 1) % n
    return spawned


def build_sub_paths(
    tree: PathTree,
    occupancy: OccupancyMap,
    priorities: PriorityMap,
    max_sub_path_moves: int,
) -> None:
    level = 0
    while not occupancy.is_full():
        current = tree.at_level(level)
        if not current:
            raise RuntimeError(
                f"no paths at level {level} but {occupancy.unclaimed_count()} cells unclaimed"
            )
        spawned = 0
        for path in current:
            if occupancy.is_full():
                break
            spawned += sweep_path(tree, path, occupancy, priorities, max_sub_path_moves)
        log.debug("level %d: %d paths swept, %d branches", level, len(current), spawned)
        level += 1
