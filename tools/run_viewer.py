#!/usr/bin/env python3
# Minimal interactive maze viewer.
# - R: new maze (next seed)
# - Arrows: grow/shrink width (left/right) and height (up/down), min 2
# - S: save the current maze as PNG under out/png/
# - Esc: quit
# - 60 Hz fixed loop

import argparse, os
import pygame
from mazegen.config import DEFAULTS
from mazegen.mapgen.generator import generate
from mazegen.render.image import PATH_COLOR, WALL_COLOR, save_png
from mazegen.tiles import WALL

MAX_SIZE = 60

def draw_grid(screen, grid, tile):
    screen.fill(PATH_COLOR)
    for y, row in enumerate(grid.rows()):
        for x, sym in enumerate(row):
            if sym == WALL:
                pygame.draw.rect(screen, WALL_COLOR, pygame.Rect(x * tile, y * tile, tile, tile))

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--width", type=int, default=DEFAULTS.width)
    ap.add_argument("--height", type=int, default=DEFAULTS.height)
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--tile", type=int, default=DEFAULTS.cell_size, help="Pixels per grid cell")
    args = ap.parse_args()

    width, height, seed = args.width, args.height, args.seed

    pygame.init()
    grid = generate(width, height, seed=seed)
    screen = pygame.display.set_mode((grid.width * args.tile, grid.height * args.tile))
    clock = pygame.time.Clock()

    def reload():
        nonlocal grid, screen
        grid = generate(width, height, seed=seed)
        size = (grid.width * args.tile, grid.height * args.tile)
        if screen.get_size() != size:
            screen = pygame.display.set_mode(size)

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_r:
                    seed += 1
                    reload()
                elif ev.key == pygame.K_RIGHT:
                    width = min(MAX_SIZE, width + 1)
                    reload()
                elif ev.key == pygame.K_LEFT:
                    width = max(2, width - 1)
                    reload()
                elif ev.key == pygame.K_DOWN:
                    height = min(MAX_SIZE, height + 1)
                    reload()
                elif ev.key == pygame.K_UP:
                    height = max(2, height - 1)
                    reload()
                elif ev.key == pygame.K_s:
                    out = os.path.join("out", "png", f"{width}x{height}_{seed:06d}.png")
                    save_png(grid, out, cell_size=args.tile)
                    print(f"Wrote {out}")

        draw_grid(screen, grid, args.tile)
        pygame.display.set_caption(f"Maze Viewer - {width}x{height}  seed {seed}")
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
