"""Board representation for the Tetris playfield."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .tetromino import Coordinate, Piece, PieceKind


# Dimensions of the standard Tetris board.
WIDTH = 10
HEIGHT = 20

Grid = NDArray[np.uint8]

# Mapping from ``PieceKind`` to the integer stored in the grid.  ``0`` is an
# empty cell.
PIECE_VALUES = {kind: i + 1 for i, kind in enumerate(PieceKind)}
VALUE_KINDS = {value: kind for kind, value in PIECE_VALUES.items()}


def create_empty_grid() -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((HEIGHT, WIDTH), dtype=np.uint8)


class Board:
    """Grid of settled tiles.

    The grid is indexed ``[y, x]`` with row ``0`` at the top.  Only cells inside
    the playfield are stored; anything above row ``0`` is implicit.
    """

    width: int = WIDTH
    height: int = HEIGHT

    def __init__(self) -> None:
        self.grid: Grid = create_empty_grid()

    def inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> Optional[PieceKind]:
        """Return the kind settled at ``(x, y)`` or ``None`` when empty.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if not self.inside(x, y):
            raise IndexError("Cell out of bounds")
        return VALUE_KINDS.get(int(self.grid[y, x]))

    def set_cell(self, x: int, y: int, kind: Optional[PieceKind]) -> None:
        """Settle ``kind`` at ``(x, y)``; ``None`` empties the cell.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if not self.inside(x, y):
            raise IndexError("Cell out of bounds")
        self.grid[y, x] = np.uint8(0 if kind is None else PIECE_VALUES[kind])

    def is_occupied(self, x: int, y: int) -> bool:
        """Return ``True`` if a settled tile sits at ``(x, y)``.

        Coordinates outside the grid hold no tiles and report ``False``; the
        collision resolver decides separately what walls and floor mean.
        """

        if self.inside(x, y):
            return bool(self.grid[y, x] != 0)
        return False

    def fill(self, cells: Iterable[Coordinate], kind: PieceKind) -> None:
        """Settle ``kind`` on every cell in ``cells``."""

        for x, y in cells:
            self.set_cell(x, y, kind)

    def lock_piece(self, piece: Piece) -> bool:
        """Write the piece's tiles into the grid.

        Tiles above the top edge are not stored.  Returns ``True`` when at least
        one tile was above the board, i.e. the piece came to rest overflowing
        the playfield.

        Raises:
            IndexError: If a tile lies beside or below the board.
        """

        coordinates = np.asarray(piece.tiles(), dtype=np.int16)
        xs, ys = coordinates.T
        if np.any(xs < 0) or np.any(xs >= self.width) or np.any(ys >= self.height):
            raise IndexError("Block out of bounds")

        visible = ys >= 0
        self.grid[ys[visible], xs[visible]] = np.uint8(PIECE_VALUES[piece.kind])
        return not bool(np.all(visible))

    def full_rows(self) -> List[int]:
        """Return the indices of completely filled rows, top to bottom."""

        return [int(row) for row in np.flatnonzero(np.all(self.grid != 0, axis=1))]

    def clear_full_rows(self) -> int:
        """Remove completed rows, let the rows above fall and return the count.

        Rows are walked from the bottom up with a running count of full rows
        seen so far; every other row moves down by that count.  Rows already
        visited are never read again, so the grid is compacted in place.
        """

        full = np.all(self.grid != 0, axis=1)
        removed = 0
        for row in range(self.height - 1, -1, -1):
            if full[row]:
                removed += 1
            elif removed:
                self.grid[row + removed] = self.grid[row]
        if removed:
            self.grid[:removed] = 0
        return removed

    def cells(self) -> Iterator[Tuple[int, int, PieceKind]]:
        """Yield ``(x, y, kind)`` for every settled tile."""

        for y, x in zip(*np.nonzero(self.grid)):
            yield int(x), int(y), VALUE_KINDS[int(self.grid[y, x])]

    def snapshot(self) -> Grid:
        """Return a copy of the grid that callers may keep or mutate."""

        return self.grid.copy()
