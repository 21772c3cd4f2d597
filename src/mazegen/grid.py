from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .tiles import WALL

def row_column_to_index(row: int, column: int, width: int) -> int:
    return row * width + column

def index_to_row(index: int, width: int) -> int:
    return index // width

def index_to_column(index: int, width: int) -> int:
    return index % width

@dataclass(frozen=True)
class Grid:
    """Finished maze: `height` rows of `width` symbols, stored row-major."""
    width: int
    height: int
    cells: Tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "cells", tuple(self.cells))
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"grid needs {self.width * self.height} cells, got {len(self.cells)}"
            )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> "Grid":
        height = len(rows)
        width = len(rows[0]) if height else 0
        if any(len(r) != width for r in rows):
            raise ValueError("rows must all have the same length")
        return cls(width=width, height=height, cells=tuple(c for r in rows for c in r))

    def idx(self, row: int, column: int) -> int:
        return row_column_to_index(row, column, self.width)

    def get(self, row: int, column: int) -> str:
        return self.cells[self.idx(row, column)]

    def is_wall(self, row: int, column: int) -> bool:
        return self.get(row, column) == WALL

    def rows(self) -> Iterable[Tuple[str, ...]]:
        for r in range(self.height):
            start = r * self.width
            yield self.cells[start:start + self.width]

    def as_matrix(self) -> List[List[str]]:
        return [list(r) for r in self.rows()]

    def render(self) -> str:
        # One line per row, symbols separated by a single space.
        return "".join(" ".join(r) + "\n" for r in self.rows())

    def __str__(self) -> str:
        return self.render()

def render(grid: Grid) -> str:
    return grid.render()
