"""Tetromino definitions and tile projection.

Every piece kind is described by a :class:`Shape`: the side length of the
square the piece spins in and the four cells it covers at orientation ``0``.
Rotations are not stored.  :func:`tiles` derives the occupied board cells from
the shape, the orientation and the piece origin every time it is asked, so the
logical and drawn position of a piece can never drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

Coordinate = Tuple[int, int]  # (x, y)

ORIENTATIONS = 4


class PieceKind(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    L = "L"
    J = "J"
    O = "O"
    S = "S"
    Z = "Z"
    T = "T"


@dataclass(frozen=True)
class Shape:
    """Base geometry of a piece kind at orientation ``0``."""

    size: int
    offsets: Tuple[Coordinate, ...]

    def __post_init__(self) -> None:
        if len(self.offsets) != 4:
            raise ValueError(f"Shape needs exactly 4 cells, got {len(self.offsets)}")
        for x, y in self.offsets:
            if not (0 <= x < self.size and 0 <= y < self.size):
                raise ValueError(f"Offset {(x, y)} outside a {self.size}x{self.size} box")


SHAPES: Dict[PieceKind, Shape] = {
    PieceKind.I: Shape(4, ((0, 2), (1, 2), (2, 2), (3, 2))),
    PieceKind.L: Shape(3, ((1, 0), (1, 1), (1, 2), (2, 2))),
    PieceKind.J: Shape(3, ((1, 0), (1, 1), (1, 2), (0, 2))),
    PieceKind.O: Shape(2, ((0, 0), (1, 0), (0, 1), (1, 1))),
    PieceKind.S: Shape(3, ((0, 2), (1, 2), (1, 1), (2, 1))),
    PieceKind.Z: Shape(3, ((0, 1), (1, 1), (1, 2), (2, 2))),
    PieceKind.T: Shape(3, ((0, 1), (1, 1), (1, 0), (2, 1))),
}

# Colours handed to the presentation layer, one per kind.
PIECE_COLORS: Dict[PieceKind, Tuple[int, int, int]] = {
    PieceKind.I: (220, 50, 47),
    PieceKind.L: (128, 0, 128),
    PieceKind.J: (38, 139, 210),
    PieceKind.O: (255, 215, 0),
    PieceKind.S: (0, 200, 200),
    PieceKind.Z: (60, 180, 75),
    PieceKind.T: (128, 128, 128),
}


def tiles(kind: PieceKind, orientation: int, x: int, y: int) -> List[Coordinate]:
    """Return the four board cells covered by ``kind`` at the given placement.

    Parameters
    ----------
    kind:
        The :class:`PieceKind` to project.
    orientation:
        Quarter turns clockwise, ``0`` to ``3``.  Anything else raises
        :class:`ValueError`; callers are expected to wrap angles themselves.
    x, y:
        Board coordinates of the top-left corner of the shape's bounding
        square.  ``y`` may be negative while the piece is above the board.
    """

    shape = SHAPES[kind]
    edge = shape.size - 1
    if orientation == 0:
        return [(ox + x, oy + y) for ox, oy in shape.offsets]
    if orientation == 1:
        return [(edge - oy + x, ox + y) for ox, oy in shape.offsets]
    if orientation == 2:
        return [(edge - ox + x, edge - oy + y) for ox, oy in shape.offsets]
    if orientation == 3:
        return [(oy + x, edge - ox + y) for ox, oy in shape.offsets]
    raise ValueError(f"Wrong orientation: {orientation}")


@dataclass(frozen=True)
class Piece:
    """A piece kind placed on the board at an orientation."""

    kind: PieceKind
    orientation: int = 0
    x: int = 0
    y: int = 0

    def tiles(self) -> List[Coordinate]:
        """Return the global tile coordinates for this piece."""

        return tiles(self.kind, self.orientation, self.x, self.y)

    def moved(self, dx: int, dy: int) -> "Piece":
        return Piece(self.kind, self.orientation, self.x + dx, self.y + dy)

    def rotated(self, direction: int = 1) -> "Piece":
        """Return the piece turned by ``direction`` quarter turns clockwise."""

        return Piece(
            self.kind,
            (self.orientation + direction) % ORIENTATIONS,
            self.x,
            self.y,
        )

    @property
    def color(self) -> Tuple[int, int, int]:
        return PIECE_COLORS[self.kind]
