# src/mazegen/mapgen/generator.py
# Maze builder: validate, carve a fresh working grid, frame it into a Grid.

import logging
from typing import Optional

from ..errors import check_dimensions
from ..grid import Grid
from ..rng import make_rng
from ..tiles import GENERATED_PATH
from .carve import EraseHook, generate_paths
from .working import WorkingGrid

logger = logging.getLogger(__name__)

class MazeBuilder:
    """
    Builds width x height mazes (logical rooms).
      - Dimensions are checked here, so a bad size fails before any work.
      - `rng` is any object with randrange(n); default is a PMRandom from
        `seed`, or from the wall clock when no seed is given.
      - Each generate_maze() carves a new working grid and continues the
        same random stream. Not safe to share across threads.
    """
    def __init__(
        self,
        width: int,
        height: int,
        seed: Optional[int] = None,
        rng=None,
        on_erase: Optional[EraseHook] = None,
    ):
        check_dimensions(width, height)
        if seed is not None and rng is not None:
            raise ValueError("pass either seed or rng, not both")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else make_rng(seed)
        self.on_erase = on_erase

    def generate_maze(self) -> Grid:
        work = WorkingGrid.for_maze(self.width, self.height)
        stats = generate_paths(work, self.rng, on_erase=self.on_erase)
        logger.debug(
            "maze %dx%d: walks=%d erasures=%d steps=%d carved=%d",
            self.width, self.height, stats.walks, stats.erasures, stats.steps,
            work.count(GENERATED_PATH),
        )
        return work.to_grid()

def generate(width: int, height: int, *, seed: Optional[int] = None, rng=None) -> Grid:
    return MazeBuilder(width, height, seed=seed, rng=rng).generate_maze()
