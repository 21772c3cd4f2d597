# src/mazegen/mapgen/carve.py
# Loop-erased random walk carving over the doubled working grid.
# A walk grows from an isolated room until its next step would touch either
# its own trunk (erase back to the start) or the finished tree (commit).

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from .working import WorkingGrid
from ..tiles import BUILDING_PATH, EMPTY, GENERATED_PATH

logger = logging.getLogger(__name__)

ROOT = 0

EraseHook = Callable[[List[int]], None]

@dataclass
class CarveStats:
    walks: int = 0
    erasures: int = 0
    steps: int = 0

def pick_next(work: WorkingGrid, cur: int, rng) -> int:
    """Uniform choice among cur's EMPTY neighbors (one draw even if there is one)."""
    candidates = [n for n in work.neighbors(cur) if work.cells[n] == EMPTY]
    return candidates[rng.randrange(len(candidates))]

def collision_index(work: WorkingGrid, index: int, excluded: int) -> Optional[int]:
    # First neighbor (up, down, left, right) already building or generated.
    for n in work.neighbors(index):
        if n != excluded and work.cells[n] in (BUILDING_PATH, GENERATED_PATH):
            return n
    return None

def generate_path(
    work: WorkingGrid,
    start: int,
    rng,
    on_erase: Optional[EraseHook] = None,
    stats: Optional[CarveStats] = None,
) -> None:
    """Run one walk from `start` until it attaches to the generated tree."""
    cells = work.cells
    path = [start]
    cells[start] = BUILDING_PATH
    while True:
        cur = path[-1]
        nxt = pick_next(work, cur, rng)
        if stats is not None:
            stats.steps += 1
        hit = collision_index(work, nxt, cur)

        if hit is None:
            path.append(nxt)
            cells[nxt] = BUILDING_PATH
        elif cells[hit] == BUILDING_PATH:
            # Looped back beside our own trunk: drop everything but the start.
            erased = []
            while len(path) >= 2:
                i = path.pop()
                cells[i] = EMPTY
                erased.append(i)
            logger.debug("loop erased start=%d cells=%d", start, len(erased))
            if stats is not None:
                stats.erasures += 1
            if on_erase is not None:
                on_erase(erased)
        else:
            committed = len(path) + 1
            while path:
                cells[path.pop()] = GENERATED_PATH
            cells[nxt] = GENERATED_PATH
            logger.debug("walk committed start=%d end=%d cells=%d", start, nxt, committed)
            return

def generate_paths(
    work: WorkingGrid,
    rng,
    on_erase: Optional[EraseHook] = None,
) -> CarveStats:
    """Seed the root, then launch walks from isolated cells until none are left."""
    stats = CarveStats()
    work.cells[ROOT] = GENERATED_PATH
    start = ROOT
    while True:
        # Nothing before the last start can become isolated again.
        start = work.next_start(start)
        if start is None:
            break
        generate_path(work, start, rng, on_erase=on_erase, stats=stats)
        stats.walks += 1
    return stats
