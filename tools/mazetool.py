#!/usr/bin/env python3
import argparse, csv, logging
from mazegen.builder import MazeBuilder
from mazegen.config import Difficulty
from mazegen.render.ascii import ascii_text

def write_tsv(rows, path):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        for r in rows:
            w.writerow(r)

def make_builder(args):
    b = MazeBuilder(seed=args.seed)
    return b.set_size(*args.size).set_difficulty(args.difficulty).save_correct_path(args.solution)

def cmd_demo(args):
    maze = MazeBuilder().set_size(25, 25).set_difficulty(Difficulty.EASY).save_correct_path(True).build()
    print(ascii_text(maze, "#", "."))

def cmd_print(args):
    maze = make_builder(args).build()
    print(ascii_text(maze, args.wall, "." if args.solution else None))
    print(f"seed={maze.seed} size={maze.size_x}x{maze.size_y} difficulty={maze.difficulty}")

def cmd_emit(args):
    maze = make_builder(args).build()
    write_tsv(maze.codes(), args.out)
    print(f"Wrote {args.out}")

def add_maze_args(p):
    p.add_argument('--seed', type=int, default=None)
    p.add_argument('--size', type=int, nargs=2, default=(16, 16), metavar=('X', 'Y'))
    p.add_argument('--difficulty', type=str, default='5', help="1..10 or easy/medium/hard/extreme")
    p.add_argument('--solution', action='store_true')

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p0 = sub.add_parser('demo')
    p0.set_defaults(func=cmd_demo)
    p1 = sub.add_parser('print')
    add_maze_args(p1)
    p1.add_argument('--wall', type=str, default='#')
    p1.set_defaults(func=cmd_print)
    p2 = sub.add_parser('emit')
    add_maze_args(p2)
    p2.add_argument('--out', type=str, required=True)
    p2.set_defaults(func=cmd_emit)
    args = p.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    if hasattr(args, 'difficulty') and args.difficulty.isdigit():
        args.difficulty = int(args.difficulty)
    try:
        args.func(args)
    except ValueError as e:
        raise SystemExit(f"mazetool: {e}")

if __name__ == '__main__':
    main()
