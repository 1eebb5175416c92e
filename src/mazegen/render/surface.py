# src/mazegen/render/surface.py
from __future__ import annotations
import pygame
from functools import lru_cache
from typing import Tuple

from ..tiles import color_for
from .blocks import block_grid

@lru_cache(maxsize=64)
def tile_surface(tile_id: int, size: int) -> pygame.Surface:
    img = pygame.Surface((size, size), pygame.SRCALPHA)
    img.fill(color_for(tile_id))
    return img

def surface_size(maze, tile_size: int) -> Tuple[int, int]:
    return ((2 * maze.size_x + 1) * tile_size, (2 * maze.size_y + 1) * tile_size)

def draw_maze(maze, tile_size: int = 8, show_solution: bool = False,
              target: pygame.Surface = None) -> pygame.Surface:
    """
    Blit the block grid onto `target` (or a new surface of the right size).
    Works without a display, so it is safe to call headless.
    """
    if target is None:
        target = pygame.Surface(surface_size(maze, tile_size), pygame.SRCALPHA)
    for y, row in enumerate(block_grid(maze, show_solution)):
        for x, tid in enumerate(row):
            target.blit(tile_surface(tid, tile_size), (x * tile_size, y * tile_size))
    return target
