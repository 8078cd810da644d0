"""Classification of candidate piece placements against the board."""

from __future__ import annotations

from enum import Enum

from .board import Board
from .tetromino import Piece, PieceKind, tiles


class Collision(Enum):
    """Outcome of testing a placement."""

    NONE = "none"
    LEFT_WALL = "left_wall"
    RIGHT_WALL = "right_wall"
    FLOOR = "floor"


def classify(kind: PieceKind, orientation: int, x: int, y: int, board: Board) -> Collision:
    """Return how the placement of ``kind`` at ``(x, y)`` collides, if at all.

    A tile at or below the bottom edge, or on a settled cell, makes the result
    :attr:`Collision.FLOOR` regardless of what the other tiles do; landing wins
    over walls because it is the condition that locks a piece.  The floor rules
    therefore run over all four tiles before any wall rule, so a wall tile
    listed first never hides a tile at or below row ``height``.  Otherwise the
    first tile found left or right of the board decides the wall.  Rows above
    the board (negative ``y``) are free space.
    """

    cells = tiles(kind, orientation, x, y)
    for tx, ty in cells:
        if ty >= board.height or board.is_occupied(tx, ty):
            return Collision.FLOOR
    for tx, _ in cells:
        if tx < 0:
            return Collision.LEFT_WALL
        if tx >= board.width:
            return Collision.RIGHT_WALL
    return Collision.NONE


def classify_piece(piece: Piece, board: Board) -> Collision:
    return classify(piece.kind, piece.orientation, piece.x, piece.y, board)
