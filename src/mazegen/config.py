from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class MazeConfig:
    # Logical room counts; the rendered grid is (2*width+1) x (2*height+1).
    width: int = 10
    height: int = 10
    seed: Optional[int] = None   # None -> wall-clock seed
    cell_size: int = 16          # pixels per grid cell for image export

# Defaults shared by the CLI and tools/
DEFAULTS = MazeConfig()
