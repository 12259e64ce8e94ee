"""Square game board of (letter, owner) cells."""

from typing import List, Tuple
from pydantic import BaseModel, Field

from ..terms.letters import ScrabbleLetter
from .errors import BlockedSpaceError, PositionOutOfBoundsError
from .models import Cell, EMPTY_CELL, DEFAULT_BOARD_SIZE


class Board(BaseModel):
    """
    An N x N grid of cells stored as a flat list indexed by (x, y).

    Every cell starts as (EMPTY, None). Cells are only written through
    try_place and reset through clear.

    Attributes:
        size: Width and height of the board
        cells: Row-major cell storage, index y * size + x
    """

    size: int = Field(default=DEFAULT_BOARD_SIZE, ge=1)
    cells: List[Cell] = Field(default_factory=list)

    def model_post_init(self, __context) -> None:
        """Fill the grid with empty cells."""
        if not self.cells:
            self.cells = [EMPTY_CELL] * (self.size * self.size)

    def _index(self, pos: Tuple[int, int]) -> int:
        return pos[1] * self.size + pos[0]

    def is_out_of_bounds(self, pos: Tuple[int, int]) -> bool:
        """True if either coordinate is negative or >= size."""
        x, y = pos
        return x < 0 or y < 0 or x >= self.size or y >= self.size

    def is_empty(self, pos: Tuple[int, int]) -> bool:
        """True if the cell holds no tile. Out-of-bounds cells are never empty."""
        if self.is_out_of_bounds(pos):
            return False
        return self.cells[self._index(pos)].letter == ScrabbleLetter.EMPTY

    def try_place(self, player_id: int, letter: ScrabbleLetter, pos: Tuple[int, int]) -> None:
        """
        Put a tile on an empty cell and mark it as owned by `player_id`.

        Raises:
            BlockedSpaceError: If the cell is occupied or out of bounds
        """
        if not self.is_empty(pos):
            raise BlockedSpaceError()
        self.cells[self._index(pos)] = Cell(letter, player_id)

    def clear(self, pos: Tuple[int, int]) -> None:
        """Reset a cell to empty. Does nothing out of bounds."""
        if self.is_out_of_bounds(pos):
            return
        self.cells[self._index(pos)] = EMPTY_CELL

    def try_get(self, pos: Tuple[int, int]) -> Cell:
        """
        Read a cell.

        Raises:
            PositionOutOfBoundsError: If the position is off the board
        """
        if self.is_out_of_bounds(pos):
            raise PositionOutOfBoundsError(pos)
        return self.cells[self._index(pos)]

    def snapshot(self) -> List[Cell]:
        """Copy of the cell list."""
        return list(self.cells)

    def count_tiles(self) -> int:
        """Number of occupied cells."""
        return sum(1 for cell in self.cells if cell.letter != ScrabbleLetter.EMPTY)

    def render(self) -> str:
        """Render the board as rows of bracketed cells, one row per y."""
        lines = [
            ''.join(f"[{self.cells[y * self.size + x].letter.value}]" for x in range(self.size))
            for y in range(self.size)
        ]
        return '\n'.join(lines) + '\n'

    def __str__(self) -> str:
        return self.render()
