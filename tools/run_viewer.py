#!/usr/bin/env python3
# Minimal interactive maze viewer.
# - N: new random seed      - +/-: difficulty up/down
# - S: toggle solution      - Esc: quit
# - 60 Hz fixed loop

import argparse, logging
import pygame
from mazegen.builder import MazeBuilder
from mazegen.render.surface import draw_maze, surface_size

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--size", type=int, nargs=2, default=(16, 16), metavar=("X", "Y"))
    ap.add_argument("--difficulty", type=int, default=5, help="1..10")
    ap.add_argument("--tile", type=int, default=12, help="Block size in pixels")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    builder = MazeBuilder(seed=args.seed).set_size(*args.size)
    builder.set_difficulty(args.difficulty).save_correct_path(True)
    show_solution = False

    pygame.init()
    clock = pygame.time.Clock()
    maze = builder.build()
    screen = pygame.display.set_mode(surface_size(maze, args.tile))

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_n:
                    builder.set_seed(MazeBuilder().seed)
                elif ev.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    builder.set_difficulty(min(10, builder.difficulty + 1))
                elif ev.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    builder.set_difficulty(max(1, builder.difficulty - 1))
                elif ev.key == pygame.K_s:
                    show_solution = not show_solution

        maze = builder.build()
        screen.fill((0, 0, 0))
        draw_maze(maze, args.tile, show_solution, target=screen)
        pygame.display.set_caption(
            f"Maze Viewer - seed {maze.seed}  difficulty {maze.difficulty}  solution:{show_solution}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
