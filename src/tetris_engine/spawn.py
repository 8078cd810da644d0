"""Choosing, placing and gatekeeping newly spawned pieces."""

from __future__ import annotations

import random
from typing import Tuple

from .board import Board
from .collision import Collision, classify_piece
from .tetromino import ORIENTATIONS, Piece, PieceKind

# Row the spawn search starts from, well above the visible board.
SPAWN_START_Y = -5


def roll_preview(rng: random.Random) -> Piece:
    """Return a random kind at a random orientation, not yet positioned."""

    kind = rng.choice(list(PieceKind))
    return Piece(kind, rng.randrange(ORIENTATIONS))


def _visible(piece: Piece) -> bool:
    return any(y >= 0 for _, y in piece.tiles())


def spawn_origin(kind: PieceKind, orientation: int, board: Board) -> Tuple[int, int]:
    """Return the ``(x, y)`` origin a new piece appears at.

    The piece is centred horizontally and placed as low as possible while still
    completely above the board: one more descend step brings it into view.
    """

    piece = Piece(kind, orientation, board.width // 2 - 1, SPAWN_START_Y)
    while _visible(piece):
        piece = piece.moved(0, -1)
    while not _visible(piece.moved(0, 1)):
        piece = piece.moved(0, 1)
    return piece.x, piece.y


def place_for_spawn(preview: Piece, board: Board) -> Piece:
    x, y = spawn_origin(preview.kind, preview.orientation, board)
    return Piece(preview.kind, preview.orientation, x, y)


def is_spawn_blocked(piece: Piece, board: Board) -> bool:
    """Return ``True`` when ``piece`` cannot enter the board from its spawn.

    A spawned piece sits entirely above the board, where nothing is ever
    settled, so only the row it would descend into next can block it.
    """

    return classify_piece(piece.moved(0, 1), board) == Collision.FLOOR
