"""Score, level and game-over bookkeeping for a session."""

from __future__ import annotations

from dataclasses import dataclass

from .scoring import LineClearResult, score_for_lines


@dataclass
class GameState:
    """Mutable counters for a Tetris game session."""

    level: int = 1
    score: int = 0
    lines: int = 0
    pieces: int = 0
    game_over: bool = False
    start_level: int = 1
    lines_per_level: int = 10

    def __post_init__(self) -> None:
        if self.level < self.start_level:
            self.level = self.start_level

    def award(self, cleared: int) -> int:
        """Add the points for ``cleared`` rows at the current level."""

        points = score_for_lines(cleared, self.level)
        self.score += points
        return points

    def piece_locked(self, result: LineClearResult) -> None:
        """Record a lock and advance the level from the cleared line total.

        The level only changes after the clear has been scored, so a clear is
        always paid at the level it was made on.
        """

        self.pieces += 1
        self.lines += result.count
        if self.lines_per_level > 0:
            self.level = max(
                self.level, self.start_level + self.lines // self.lines_per_level
            )

    def reset_game(self) -> None:
        """Reset every counter for a new game."""

        self.level = self.start_level
        self.score = 0
        self.lines = 0
        self.pieces = 0
        self.game_over = False
