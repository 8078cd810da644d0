"""The falling piece and everything that happens to it.

:class:`PieceController` owns the board, the active and preview pieces and the
session counters.  Player and timer actions arrive as plain method calls.  A
move the board does not allow is simply refused and reported as ``False``;
only programming errors raise.

A descend step that finds the floor locks the piece, clears and scores full
rows and spawns the next piece before returning, so callers never observe a
half-finished board.  Each of these stages queues a :class:`GameEvent` for the
presentation layer to drain.
"""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, List, Optional

from .board import Board
from .collision import Collision, classify_piece
from .config import EngineConfig
from .game_state import GameState
from .scoring import LineClearResult
from .spawn import is_spawn_blocked, place_for_spawn, roll_preview
from .tetromino import Coordinate, Piece
from .utils import gravity_interval_ms


LOGGER = logging.getLogger(__name__)

# Sideways offsets tried, in order, when a rotation runs into a wall.
WALL_KICKS = {
    Collision.RIGHT_WALL: (-1, -2),
    Collision.LEFT_WALL: (1, 2),
}


class ControllerState(Enum):
    FALLING = "falling"
    GAME_OVER = "game_over"


class EventType(Enum):
    PIECE_SPAWNED = "piece_spawned"
    PIECE_LOCKED = "piece_locked"
    LINES_CLEARED = "lines_cleared"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameEvent:
    """Notification for the presentation layer."""

    type: EventType
    piece: Optional[Piece] = None
    count: int = 0


class PieceController:
    """State machine driving the active piece of one game."""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
        board: Optional[Board] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.board = board or Board()
        self.state = GameState(
            level=self.config.start_level,
            start_level=self.config.start_level,
            lines_per_level=self.config.lines_per_level,
        )
        self.active: Optional[Piece] = None
        self.visible = False
        self.preview: Piece = roll_preview(self.rng)
        self.last_clear = LineClearResult(0)
        self._events: Deque[GameEvent] = deque()

    # Queries ----------------------------------------------------------
    @property
    def status(self) -> ControllerState:
        if self.state.game_over:
            return ControllerState.GAME_OVER
        return ControllerState.FALLING

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    @property
    def descend_interval_ms(self) -> float:
        return gravity_interval_ms(
            self.state.level, self.config.descend_ms, self.config.min_descend_ms
        )

    def active_tiles(self) -> List[Coordinate]:
        if self.active is None or not self.visible:
            return []
        return self.active.tiles()

    def preview_tiles(self) -> List[Coordinate]:
        """Preview tiles relative to the top-left of its bounding square."""

        return self.preview.tiles()

    def drain_events(self) -> List[GameEvent]:
        """Return and forget every event queued since the last drain."""

        events = list(self._events)
        self._events.clear()
        return events

    # Lifecycle --------------------------------------------------------
    def reset(self, new_preview: bool = True) -> None:
        """Start a fresh game on an empty board.

        ``new_preview=False`` keeps the preview rolled when the controller was
        created, so the first game opens with it.
        """

        self.board = Board()
        self.state.reset_game()
        self.active = None
        self.visible = False
        if new_preview:
            self.preview = roll_preview(self.rng)
        self.last_clear = LineClearResult(0)
        self._events.clear()
        self.spawn()

    def spawn(self) -> bool:
        """Promote the preview to the active piece.

        Returns ``False`` and latches game over when the stack blocks the spawn
        point; nothing is placed in that case.
        """

        if self.game_over:
            return False
        piece = place_for_spawn(self.preview, self.board)
        self.preview = roll_preview(self.rng)
        if is_spawn_blocked(piece, self.board):
            self.active = None
            self.visible = False
            self._end_game("spawn blocked for %s at x=%d y=%d" % (piece.kind.value, piece.x, piece.y))
            return False
        self.active = piece
        self.visible = True
        LOGGER.debug("Spawned %s rotation=%d at x=%d y=%d", piece.kind.value, piece.orientation, piece.x, piece.y)
        self._events.append(GameEvent(EventType.PIECE_SPAWNED, piece=piece))
        return True

    # Actions ----------------------------------------------------------
    def move(self, dx: int) -> bool:
        """Shift the active piece sideways by ``dx`` columns if it fits."""

        if self.game_over or self.active is None:
            return False
        candidate = self.active.moved(dx, 0)
        if classify_piece(candidate, self.board) != Collision.NONE:
            return False
        self.active = candidate
        return True

    def rotate(self) -> bool:
        """Turn the active piece a quarter clockwise, kicking off walls.

        When the plain rotation hits a wall the piece is also tried one and then
        two columns away from that wall.  Anything else that blocks the rotation
        rejects it outright.
        """

        if self.game_over or self.active is None:
            return False
        rotated = self.active.rotated()
        outcome = classify_piece(rotated, self.board)
        if outcome == Collision.NONE:
            self.active = rotated
            return True
        for dx in WALL_KICKS.get(outcome, ()):
            candidate = rotated.moved(dx, 0)
            if classify_piece(candidate, self.board) == Collision.NONE:
                self.active = candidate
                return True
        return False

    def descend(self) -> bool:
        """Move the active piece one row down or lock it.

        Returns ``True`` when the step locked the piece.
        """

        if self.game_over or self.active is None:
            return False
        candidate = self.active.moved(0, 1)
        if classify_piece(candidate, self.board) == Collision.NONE:
            self.active = candidate
            return False
        self._lock(self.active)
        return True

    def hard_drop(self) -> int:
        """Drop the active piece until it locks and return the rows travelled."""

        rows = 0
        while not self.game_over and self.active is not None:
            if self.descend():
                break
            rows += 1
        return rows

    # Internal helpers -------------------------------------------------
    def _lock(self, piece: Piece) -> None:
        overflow = self.board.lock_piece(piece)
        self.active = None
        self.visible = False
        LOGGER.debug("Locked %s at x=%d y=%d", piece.kind.value, piece.x, piece.y)
        self._events.append(GameEvent(EventType.PIECE_LOCKED, piece=piece))

        result = self._clear_lines()
        self.state.piece_locked(result)

        if overflow:
            self._end_game("%s locked above the board" % piece.kind.value)
            return
        self.spawn()

    def _clear_lines(self) -> LineClearResult:
        rows = tuple(self.board.full_rows())
        count = self.board.clear_full_rows()
        points = self.state.award(count)
        self.last_clear = LineClearResult(count, rows, points)
        if count:
            LOGGER.info(
                "Cleared %d row(s) for %d points. Score: %d", count, points, self.state.score
            )
            self._events.append(GameEvent(EventType.LINES_CLEARED, count=count))
        return self.last_clear

    def _end_game(self, reason: str) -> None:
        self.state.game_over = True
        LOGGER.info("Game over: %s. Score: %d", reason, self.state.score)
        self._events.append(GameEvent(EventType.GAME_OVER))
