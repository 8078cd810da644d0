"""One game of Tetris driven by a clock and player input.

:class:`GameSession` is the object a front-end talks to.  Each call to
:meth:`GameSession.step` consumes the current time and the held controls, runs
whatever actions are due through the :class:`PieceController` and returns the
events raised along the way.  The session never reads a clock or a keyboard on
its own, so tests can drive it with plain numbers.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

import numpy as np

from .config import EngineConfig
from .controller import GameEvent, PieceController
from .input import Action, InputAdapter, InputFrame
from .tetromino import Coordinate, PIECE_COLORS


LOGGER = logging.getLogger(__name__)

_MOVES = {Action.MOVE_LEFT: -1, Action.MOVE_RIGHT: 1}


class GameSession:
    """Owns a controller and its input adapter for a single game."""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.controller = PieceController(self.config, rng=rng)
        self.input = InputAdapter(self.config.soft_drop_ms, self.config.lateral_repeat_ms)
        self.started = False

    def start(self, now_ms: float = 0.0) -> List[GameEvent]:
        """Begin a new game at ``now_ms`` and spawn the first piece."""

        self.input.reset(now_ms)
        self.controller.reset(new_preview=self.started)
        self.started = True
        LOGGER.info("Game started")
        return self.controller.drain_events()

    def step(self, now_ms: float, frame: InputFrame) -> List[GameEvent]:
        """Advance the game to ``now_ms`` with the controls in ``frame`` held."""

        events: List[GameEvent] = []
        if not self.started:
            events.extend(self.start(now_ms))
        if self.controller.game_over:
            events.extend(self.controller.drain_events())
            return events

        actions = self.input.poll(now_ms, frame, self.controller.descend_interval_ms)
        for action in actions:
            if action in _MOVES:
                if self.controller.move(_MOVES[action]):
                    self.input.lateral_accepted(now_ms)
            elif action is Action.ROTATE:
                self.controller.rotate()
            elif action is Action.DESCEND:
                self.controller.descend()
            elif action is Action.HARD_DROP:
                self.controller.hard_drop()
        events.extend(self.controller.drain_events())
        return events

    # Read-only views for renderers -----------------------------------
    @property
    def game_over(self) -> bool:
        return self.controller.game_over

    @property
    def score(self) -> int:
        return self.controller.state.score

    @property
    def level(self) -> int:
        return self.controller.state.level

    @property
    def lines(self) -> int:
        return self.controller.state.lines

    def board_snapshot(self) -> np.ndarray:
        return self.controller.board.snapshot()

    def active_view(self) -> Tuple[List[Coordinate], bool, Optional[Tuple[int, int, int]]]:
        """Return the active piece's tiles, visibility flag and colour."""

        active = self.controller.active
        if active is None:
            return [], False, None
        return active.tiles(), self.controller.visible, active.color

    def preview_view(self) -> Tuple[List[Coordinate], Tuple[int, int, int]]:
        preview = self.controller.preview
        return self.controller.preview_tiles(), PIECE_COLORS[preview.kind]
