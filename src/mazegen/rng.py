import time
from dataclasses import dataclass
from typing import Optional

A = 16807
M = 0x7FFFFFFF  # 2^31-1

def pm_next(state: int) -> int:
    return (state * A) % M

def low16_magnitude(x32: int) -> int:
    # |low word read as signed 16-bit|: 0..32768
    w = x32 & 0xFFFF
    return 0x10000 - w if w & 0x8000 else w

def normalize_seed(seed: int) -> int:
    # Park–Miller state must stay in 1..M-1; 0 would repeat forever.
    s = seed % M
    return s if s else 1

def seed_from_clock() -> int:
    return normalize_seed(time.time_ns())

@dataclass
class PMRandom:
    """Minimal-standard Lehmer generator with a `random.Random`-style randrange."""
    state: int

    def __post_init__(self):
        self.state = normalize_seed(self.state)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def randrange(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"randrange() needs a positive bound, got {n}")
        # Close to uniform, not exact: 0 and 32768 each have one preimage, the
        # rest two, and % n adds modulo bias. Both are negligible for n <= 4.
        return low16_magnitude(self.next32()) % n

def make_rng(seed: Optional[int] = None) -> PMRandom:
    return PMRandom(seed_from_clock() if seed is None else seed)
