# src/mazegen/mapgen/carve.py
# Turn a finished path tree into opened borders plus entrance and exit.

from ..borders import Border
from ..layout import LayoutGrid
from .paths import PathTree


def carve_layout(tree: PathTree, size_x: int, size_y: int) -> LayoutGrid:
    """
    Open a corridor between consecutive cells of every path, join each branch
    to the parent cell it grew from, and put ENTRANCE on the root's first cell
    and EXIT on its last cell (both on a boundary side).
    """
    layout = LayoutGrid(size_x, size_y)

    for path in tree:
        for a, b in zip(path.cells, path.cells[1:]):
            layout.open_between(a, b)
        if not path.is_root:
            layout.open_between(path.head, tree.branch_cell(path))

    root = tree.root
    entrance_side = layout.mark_boundary(root.head, Border.ENTRANCE)
    # A one-cell root (1x1 grid) needs the exit on a different side.
    taken = entrance_side if len(root) == 1 else None
    layout.mark_boundary(root.tail, Border.EXIT, taken=taken)
    return layout
