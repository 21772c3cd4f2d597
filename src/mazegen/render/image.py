# src/mazegen/render/image.py
# Render a finished Grid to a Pillow image, one square block per symbol.

import os
from typing import Tuple

from PIL import Image, ImageDraw

from ..grid import Grid
from ..tiles import WALL

RGB = Tuple[int, int, int]

WALL_COLOR: RGB = (32, 32, 32)
PATH_COLOR: RGB = (240, 240, 240)

def to_image(
    grid: Grid,
    cell_size: int = 16,
    wall: RGB = WALL_COLOR,
    path: RGB = PATH_COLOR,
) -> Image.Image:
    if cell_size < 1:
        raise ValueError(f"cell_size must be >= 1, got {cell_size}")
    img = Image.new("RGB", (grid.width * cell_size, grid.height * cell_size), path)
    draw = ImageDraw.Draw(img)
    for y, row in enumerate(grid.rows()):
        for x, sym in enumerate(row):
            if sym == WALL:
                x0, y0 = x * cell_size, y * cell_size
                # rectangle() bounds are inclusive
                draw.rectangle((x0, y0, x0 + cell_size - 1, y0 + cell_size - 1), fill=wall)
    return img

def save_png(grid: Grid, out_png: str, cell_size: int = 16) -> None:
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    to_image(grid, cell_size=cell_size).save(out_png)
