# Area: Game
"""
xox_coordinator._game.board — Game Board
========================================

Fixed-size grid of cells. Each cell is empty (``""``) or holds a
player's mark. A marked cell is never cleared or overwritten.

Coordinates: ``x`` is the column, ``y`` the row, both zero-based.
"""

from __future__ import annotations
from typing import Iterator, List, Sequence

from ..errors import CellOccupiedError, OutOfBoundsError, validate_mark

EMPTY = ""


class Board:
    """Width x height grid with win and draw detection."""

    def __init__(self, width: int = 3, height: int = 3):
        if width < 1 or height < 1:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._cells: List[List[str]] = [[EMPTY] * width for _ in range(height)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> "Board":
        """Rebuild a board from its serialized rows."""
        if not rows or not rows[0]:
            raise ValueError("Board rows must not be empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("Board rows must all have the same length")
        board = cls(width=width, height=len(rows))
        board._cells = [[cell or EMPTY for cell in row] for row in rows]
        return board

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> str:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return self._cells[y][x]

    def place_mark(self, x: int, y: int, mark: str) -> None:
        """
        Record ``mark`` at ``(x, y)``.

        Raises:
            OutOfBoundsError: If the coordinates are outside the grid
            CellOccupiedError: If the cell already holds a mark
        """
        validate_mark(mark)
        if self.cell(x, y) != EMPTY:
            raise CellOccupiedError(x, y)
        self._cells[y][x] = mark

    def has_winning_line(self) -> bool:
        """True iff a full row, column or diagonal holds one mark."""
        return any(self._is_winning(line) for line in self._lines())

    def is_full(self) -> bool:
        return self.empty_cells() == 0

    def empty_cells(self) -> int:
        return sum(row.count(EMPTY) for row in self._cells)

    def rows(self) -> List[List[str]]:
        """Copy of the grid, one list per row."""
        return [list(row) for row in self._cells]

    def _lines(self) -> Iterator[List[str]]:
        yield from (list(row) for row in self._cells)
        for x in range(self.width):
            yield [self._cells[y][x] for y in range(self.height)]
        # Diagonals only span the whole board when it is square
        if self.width == self.height:
            size = self.width
            yield [self._cells[i][i] for i in range(size)]
            yield [self._cells[i][size - 1 - i] for i in range(size)]

    @staticmethod
    def _is_winning(line: List[str]) -> bool:
        return line[0] != EMPTY and all(cell == line[0] for cell in line)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self.width}x{self.height}, rows={self._cells!r})"
