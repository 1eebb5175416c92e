#!/usr/bin/env python3
# Render generated mazes to PNGs using Pillow.

import argparse, logging, os
from mazegen.mapgen.generator import build_maze
from mazegen.render.image import render_png

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, required=True, help="First seed to render")
    ap.add_argument("--count", type=int, default=1, help="Number of consecutive seeds")
    ap.add_argument("--size", type=int, nargs=2, default=(16, 16), metavar=("X", "Y"))
    ap.add_argument("--difficulty", type=int, default=5, help="1..10")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=8, help="Block size in pixels")
    ap.add_argument("--solution", action="store_true", help="Paint the solution path")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    for seed in range(args.seed, args.seed + args.count):
        maze = build_maze(seed, *args.size, difficulty=args.difficulty,
                          record_solution=args.solution)
        png = os.path.join(args.outdir, f"maze_{seed}.png")
        render_png(maze, png, tile_size=args.tile, show_solution=args.solution)
    print(f"Wrote PNGs to {args.outdir}")

if __name__ == "__main__":
    main()
