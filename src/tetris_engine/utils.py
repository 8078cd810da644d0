"""Utility helpers for the Tetris engine."""

from __future__ import annotations

from typing import List, Optional

from .board import Board, PIECE_VALUES
from .tetromino import Piece


BASE_GRAVITY_MS = 1000.0
MIN_GRAVITY_MS = 50.0


def gravity_interval_ms(
    level: int, base_ms: float = BASE_GRAVITY_MS, floor_ms: float = MIN_GRAVITY_MS
) -> float:
    """Return the automatic descend interval in milliseconds for ``level``.

    Level ``1`` uses ``base_ms``; every further level makes pieces fall 15%
    faster, never quicker than ``floor_ms``.
    """

    return max(floor_ms, base_ms * (0.85 ** max(0, level - 1)))


def render_grid(board: Board, active: Optional[Piece] = None) -> List[List[int]]:
    """Return a copy of the board grid with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without mutating the underlying board state (i.e. without locking the
    piece). Cells occupied by the active piece receive the mapped integer
    value for the piece's kind; tiles above the board are skipped.
    """

    grid = board.grid.tolist()
    if active is not None:
        for x, y in active.tiles():
            if board.inside(x, y):
                grid[y][x] = PIECE_VALUES[active.kind]
    return grid
