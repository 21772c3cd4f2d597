# src/mazegen/mapgen/working.py
# Doubled-resolution carving grid.
#
# A logical width x height maze becomes (2*height-1) rows x (2*width-1) columns:
#   even row, even column  -> room
#   exactly one odd coord   -> connector between two adjacent rooms
#   both coords odd         -> BLOCK (inert, keeps diagonal rooms apart)

from dataclasses import dataclass
from typing import List, Optional

from ..grid import Grid, index_to_column, index_to_row, row_column_to_index
from ..tiles import BLOCK, EMPTY, WALL, symbol_for_state

@dataclass
class WorkingGrid:
    rows: int
    columns: int
    cells: List[int]

    @classmethod
    def for_maze(cls, width: int, height: int) -> "WorkingGrid":
        rows, columns = 2 * height - 1, 2 * width - 1
        cells = [EMPTY] * (rows * columns)
        for row in range(1, rows, 2):
            for column in range(1, columns, 2):
                cells[row_column_to_index(row, column, columns)] = BLOCK
        return cls(rows=rows, columns=columns, cells=cells)

    def __len__(self) -> int:
        return len(self.cells)

    def idx(self, row: int, column: int) -> int:
        return row_column_to_index(row, column, self.columns)

    def row_of(self, index: int) -> int:
        return index_to_row(index, self.columns)

    def column_of(self, index: int) -> int:
        return index_to_column(index, self.columns)

    def is_room(self, index: int) -> bool:
        return self.row_of(index) % 2 == 0 and self.column_of(index) % 2 == 0

    def neighbors(self, index: int) -> List[int]:
        """Up, down, left, right; out-of-bounds and BLOCK cells are skipped."""
        row, column = self.row_of(index), self.column_of(index)
        out = []
        for r, c in ((row - 1, column), (row + 1, column), (row, column - 1), (row, column + 1)):
            if 0 <= r < self.rows and 0 <= c < self.columns:
                n = self.idx(r, c)
                if self.cells[n] != BLOCK:
                    out.append(n)
        return out

    def is_isolated(self, index: int) -> bool:
        # EMPTY and not touching anything carved or under construction.
        cells = self.cells
        return cells[index] == EMPTY and all(cells[n] == EMPTY for n in self.neighbors(index))

    def next_start(self, begin: int = 0) -> Optional[int]:
        # Row-major scan; the first hit is always a room while the tree is well formed.
        for index in range(begin, len(self.cells)):
            if self.is_isolated(index):
                return index
        return None

    def count(self, state: int) -> int:
        return sum(1 for s in self.cells if s == state)

    def to_grid(self) -> Grid:
        """Map states to symbols and frame with a one-cell wall border."""
        border = [WALL] * (self.columns + 2)
        rows = [border]
        for r in range(self.rows):
            start = r * self.columns
            line = [symbol_for_state(s) for s in self.cells[start:start + self.columns]]
            rows.append([WALL] + line + [WALL])
        rows.append(border)
        return Grid.from_rows(rows)
