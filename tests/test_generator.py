# tests/test_generator.py
import os
from collections import deque

import pytest

from mazegen.borders import Border, OFFSET, SIDES, Side, opposite
from mazegen.config import Difficulty, FLAGS
from mazegen.mapgen.generator import build_maze, difficulty_bounds, grow_tree, java_round
from mazegen.render.ascii import ascii_maze, ascii_text

CASES = [
    (0, 5, 5, 1), (1, 8, 6, 5), (42, 16, 16, 5), (-7, 10, 10, 10),
    (123456789, 1, 7, 8), (99, 7, 1, 3), (2015, 12, 4, 10), (5, 2, 2, 1),
]

def open_edges(maze):
    edges = []
    for y in range(maze.size_y):
        for x in range(maze.size_x):
            cl = maze.cell(x, y)
            if cl.border_is(Side.RIGHT, Border.OPEN):
                edges.append(((x, y), (x + 1, y)))
            if cl.border_is(Side.BOTTOM, Border.OPEN):
                edges.append(((x, y), (x, y + 1)))
    return edges

def boundary_marks(maze, state):
    out = []
    for y in range(maze.size_y):
        for x in range(maze.size_x):
            for side in SIDES:
                if maze.cell(x, y).border_is(side, state):
                    out.append(((x, y), side))
    return out

def is_outside(maze, cell, side):
    dx, dy = OFFSET[side]
    x, y = cell[0] + dx, cell[1] + dy
    return not (0 <= x < maze.size_x and 0 <= y < maze.size_y)

def test_java_round_is_half_up():
    assert java_round(0.5) == 1 and java_round(2.5) == 3 and java_round(2.49) == 2

def test_difficulty_bounds():
    assert difficulty_bounds(5, 16, 16, original_curve=False) == (45, 38)
    assert difficulty_bounds(5, 16, 16, original_curve=True) == (26, 13)
    assert difficulty_bounds(10, 16, 16, original_curve=False) == (64, 64)
    assert difficulty_bounds(10, 16, 16, original_curve=True) == (64, 64)
    assert difficulty_bounds(1, 1, 1) == (1, 1)
    assert difficulty_bounds(1, 3, 2)[0] == 2

def test_harder_means_longer_spine():
    spines = [difficulty_bounds(d, 20, 20, original_curve=False)[0] for d in range(1, 11)]
    assert spines == sorted(spines) and spines[0] < spines[-1]
    assert not FLAGS.original_difficulty_curve

def test_determinism():
    for seed, x, y, d in CASES:
        a = build_maze(seed, x, y, d, record_solution=True)
        b = build_maze(seed, x, y, d, record_solution=True)
        assert a == b, f"non-deterministic build for seed {seed}"
        assert a.start == b.start and a.start[1] == 0

def test_full_coverage_and_path_bounds():
    for seed, x, y, d in CASES:
        min_moves, max_sub = difficulty_bounds(d, x, y)
        _, occ, tree = grow_tree(seed, x, y, min_moves, max_sub)
        assert occ.is_full(), f"unclaimed cells left for seed {seed}"
        assert all(occ.owner(cx, cy) is not None for cy in range(y) for cx in range(x))
        assert len(tree.root) >= min(min_moves, x * y)
        for p in tree:
            for cx, cy in p.cells:
                assert occ.owner(cx, cy) == p.index
            if not p.is_root:
                assert len(p) <= max_sub

def test_spanning_tree():
    for seed, x, y, d in CASES:
        maze = build_maze(seed, x, y, d)
        edges = open_edges(maze)
        assert len(edges) == x * y - 1, f"cycle or gap for seed {seed}"
        adj = {}
        for a, b in edges:
            adj.setdefault(a, []).append(b)
            adj.setdefault(b, []).append(a)
        seen = {(0, 0)}
        frontier = deque([(0, 0)])
        while frontier:
            c = frontier.popleft()
            for n in adj.get(c, ()):
                if n not in seen:
                    seen.add(n)
                    frontier.append(n)
        assert len(seen) == x * y

def test_mirror_invariant():
    for seed, x, y, d in CASES:
        maze = build_maze(seed, x, y, d)
        for cy in range(y):
            for cx in range(x):
                for side in SIDES:
                    if not maze.cell(cx, cy).border_is(side, Border.OPEN):
                        continue
                    dx, dy = OFFSET[side]
                    assert maze.cell(cx + dx, cy + dy).border_is(opposite(side), Border.OPEN)

def test_single_entrance_and_exit_on_boundary():
    for seed, x, y, d in CASES:
        maze = build_maze(seed, x, y, d, record_solution=True)
        ents = boundary_marks(maze, Border.ENTRANCE)
        exits = boundary_marks(maze, Border.EXIT)
        assert len(ents) == 1 and len(exits) == 1
        (ecell, eside), (xcell, xside) = ents[0], exits[0]
        assert is_outside(maze, ecell, eside) and is_outside(maze, xcell, xside)
        assert ecell == maze.start == maze.solution[0] and eside is Side.TOP
        assert xcell == maze.solution[-1]
        assert maze.entrance() == ents[0] and maze.exit() == exits[0]

def test_solution_is_a_walk_through_open_sides():
    maze = build_maze(42, 16, 16, Difficulty.HARD, record_solution=True)
    for a, b in zip(maze.solution, maze.solution[1:]):
        assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
    assert len(set(maze.solution)) == len(maze.solution)
    assert build_maze(42, 16, 16, Difficulty.HARD).solution is None

# Captured render of seed 42, 5x5, EASY with the solution drawn as "."
EXPECTED_5X5_SEED42 = "\n".join([
    "# #########",
    "#. .      #",
    "# # #######",
    "# #. .    #",
    "# # # #####",
    "# # #.    #",
    "# # # #####",
    "# # #. . . ",
    "# # # ### #",
    "# # #   # #",
    "###########",
])

GOLDEN_DIR = os.path.join(os.path.dirname(__file__), "data", "golden")

def read_golden(name):
    with open(os.path.join(GOLDEN_DIR, name), encoding="utf-8") as f:
        return f.read().rstrip("\n")

def test_example_5x5_easy_seed_42():
    maze = build_maze(42, 5, 5, Difficulty.EASY, record_solution=True)
    rows = ascii_maze(maze, "#", ".")
    assert len(rows) == 11 and all(len(r) == 11 for r in rows)
    for r in range(0, 11, 2):
        for c in range(0, 11, 2):
            assert rows[r][c] == "#"
    text = ascii_text(maze, "#", ".")
    assert text == EXPECTED_5X5_SEED42, f"5x5 render drifted:\n{text}"
    assert maze.start == (0, 0)
    assert maze.solution == ((0, 0), (1, 0), (1, 1), (2, 1), (2, 2), (2, 3), (3, 3), (4, 3))
    # entrance gap sits above the first solution cell, exit gap beside the last
    (ex, ey) = maze.solution[0]
    assert ey == 0 and rows[0][1 + 2 * ex] == " "
    assert rows[1 + 2 * ey][1 + 2 * ex] == "."
    (xx, xy), xside = maze.exit()
    assert (xx, xy) == maze.solution[-1]
    dx, dy = OFFSET[xside]
    assert rows[1 + 2 * xy + dy][1 + 2 * xx + dx] == " "
    assert text.count(".") == len(maze.solution)

def test_golden_16x16_medium_original_curve():
    maze = build_maze(42, 16, 16, Difficulty.MEDIUM, record_solution=True, original_curve=True)
    assert difficulty_bounds(5, 16, 16, original_curve=True) == (26, 13)
    want = read_golden("seed42_16x16_medium_original.txt")
    got = ascii_text(maze, "#", ".")
    assert got == want, f"16x16 original-curve render drifted:\n{got}"
    assert maze.start == (11, 0) and len(maze.solution) == 48

def test_example_1x1():
    maze = build_maze(7, 1, 1, Difficulty.EASY, record_solution=True)
    cl = maze.cell(0, 0)
    assert cl.code() == "EXWW"
    assert maze.solution == ((0, 0),)
    assert ascii_text(maze, "#", ".") == "# #\n#.#\n# #"

def test_original_curve_builds():
    maze = build_maze(3, 12, 12, 7, original_curve=True)
    assert len(open_edges(maze)) == 143

@pytest.mark.parametrize("bad", [0, 11, -1, "impossible", True, 2.5])
def test_bad_difficulty_rejected(bad):
    with pytest.raises(ValueError):
        build_maze(1, 4, 4, bad)

@pytest.mark.parametrize("size", [(0, 4), (4, 0), (-2, 3)])
def test_bad_size_rejected(size):
    with pytest.raises(ValueError):
        build_maze(1, *size)

@pytest.mark.parametrize("seed", ["42", False, 3.0])
def test_bad_seed_rejected(seed):
    with pytest.raises(ValueError):
        build_maze(seed, 4, 4)
