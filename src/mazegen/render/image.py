# Render a maze to PNG using Pillow.

import os
from PIL import Image, ImageDraw

from ..tiles import FLOOR, color_for
from .blocks import block_grid

def maze_image(maze, tile_size=8, show_solution=False, margin=0):
    grid = block_grid(maze, show_solution)
    h, w = len(grid), len(grid[0])
    canvas = Image.new("RGBA", (w * tile_size + 2 * margin, h * tile_size + 2 * margin),
                       color_for(FLOOR))
    draw = ImageDraw.Draw(canvas)
    for y, row in enumerate(grid):
        for x, tid in enumerate(row):
            if tid == FLOOR:
                continue
            x0 = margin + x * tile_size
            y0 = margin + y * tile_size
            draw.rectangle((x0, y0, x0 + tile_size - 1, y0 + tile_size - 1), fill=color_for(tid))
    return canvas

def render_png(maze, out_png, tile_size=8, show_solution=False, margin=0):
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    maze_image(maze, tile_size, show_solution, margin).save(out_png)
    return out_png
