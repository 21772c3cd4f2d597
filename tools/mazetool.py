#!/usr/bin/env python3
import argparse, os
from mazegen.config import DEFAULTS
from mazegen.grid import render
from mazegen.mapgen.generator import generate
from mazegen.render.image import save_png

def write_text(grid, path):
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(render(grid))

def cmd_emit(args):
    grid = generate(args.width, args.height, seed=args.seed)
    write_text(grid, args.out)
    if args.png:
        save_png(grid, args.png, cell_size=args.cell)
    print(f"Wrote {args.out}")

def cmd_batch(args):
    os.makedirs(args.outdir, exist_ok=True)
    for seed in range(args.first, args.first + args.count):
        grid = generate(args.width, args.height, seed=seed)
        base = os.path.join(args.outdir, f"{args.width}x{args.height}_{seed:06d}")
        write_text(grid, base + ".txt")
        if args.png:
            save_png(grid, base + ".png", cell_size=args.cell)
    print(f"Wrote {args.count} mazes to {args.outdir}")

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--width', type=int, default=DEFAULTS.width)
    p.add_argument('--height', type=int, default=DEFAULTS.height)
    p.add_argument('--cell', type=int, default=DEFAULTS.cell_size)
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--seed', type=int, default=None)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--png', type=str, default=None)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('batch')
    p2.add_argument('--first', type=int, default=1)
    p2.add_argument('--count', type=int, default=25)
    p2.add_argument('--outdir', type=str, required=True)
    p2.add_argument('--png', action='store_true')
    p2.set_defaults(func=cmd_batch)
    args = p.parse_args()
    args.func(args)

if __name__ == '__main__':
    main()
