# src/mazegen/cli.py
# `mazegen`: print a maze to stdout (10x10 unless told otherwise).

import argparse
import logging
import sys
from typing import List, Optional

from .config import DEFAULTS
from .grid import render
from .mapgen.generator import MazeBuilder

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="mazegen", description="Print a random loop-free maze.")
    ap.add_argument("--width", type=int, default=DEFAULTS.width, help="Rooms per row (>= 2)")
    ap.add_argument("--height", type=int, default=DEFAULTS.height, help="Rooms per column (>= 2)")
    ap.add_argument("--seed", type=int, default=DEFAULTS.seed, help="Fixed PRNG seed")
    ap.add_argument("--png", type=str, default=None, help="Also write the maze as a PNG here")
    ap.add_argument("--cell", type=int, default=DEFAULTS.cell_size, help="PNG pixels per cell")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return ap

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # InvalidDimensions is left to propagate.
    grid = MazeBuilder(args.width, args.height, seed=args.seed).generate_maze()
    sys.stdout.write(render(grid))

    if args.png:
        from .render.image import save_png  # Pillow only when asked for
        save_png(grid, args.png, cell_size=args.cell)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
