"""Simple pygame front-end for the Tetris engine.

Everything here is presentation: the window polls the keyboard into an
:class:`~tetris_engine.input.InputFrame`, hands it to a
:class:`~tetris_engine.session.GameSession` together with pygame's millisecond
clock and draws whatever the session reports back.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

import pygame

from .board import Board, VALUE_KINDS
from .controller import EventType, GameEvent
from .input import InputFrame
from .session import GameSession
from .tetromino import PIECE_COLORS


LOGGER = logging.getLogger(__name__)

# Size of a single board cell in pixels
CELL_SIZE = 30
# Margin around the board and width of the preview panel, in pixels
MARGIN = 10
SIDE_PANEL_WIDTH = 200
# Frames per second to run the game loop at
FPS = 60

BACKGROUND = (51, 53, 66)
GRID_LINE = (50, 50, 50)

# Mapping from the integer stored in the board grid to a colour
CELL_COLORS = {0: (0, 0, 0)}
for value, kind in VALUE_KINDS.items():
    CELL_COLORS[value] = PIECE_COLORS[kind]


def frame_from_keys(pressed: Mapping[int, bool]) -> InputFrame:
    """Translate pygame's pressed-key table into an :class:`InputFrame`."""

    return InputFrame(
        left=bool(pressed[pygame.K_LEFT]),
        right=bool(pressed[pygame.K_RIGHT]),
        down=bool(pressed[pygame.K_DOWN]),
        up=bool(pressed[pygame.K_UP]),
        hard_drop=bool(pressed[pygame.K_SPACE]),
    )


def _cell_rect(x: int, y: int, left: int = MARGIN, top: int = MARGIN) -> pygame.Rect:
    return pygame.Rect(left + x * CELL_SIZE, top + y * CELL_SIZE, CELL_SIZE, CELL_SIZE)


def draw_board(screen: pygame.Surface, session: GameSession) -> None:
    """Render the settled tiles."""

    grid = session.board_snapshot()
    for y in range(Board.height):
        for x in range(Board.width):
            rect = _cell_rect(x, y)
            pygame.draw.rect(screen, CELL_COLORS[int(grid[y, x])], rect)
            pygame.draw.rect(screen, GRID_LINE, rect, 1)


def draw_active(screen: pygame.Surface, session: GameSession) -> None:
    """Render the falling piece; tiles above the board stay hidden."""

    tiles, visible, color = session.active_view()
    if not visible or color is None:
        return
    for x, y in tiles:
        if y < 0:
            continue
        rect = _cell_rect(x, y)
        pygame.draw.rect(screen, color, rect)
        pygame.draw.rect(screen, GRID_LINE, rect, 1)


def draw_side_panel(screen: pygame.Surface, session: GameSession, font: pygame.font.Font) -> None:
    left = 2 * MARGIN + Board.width * CELL_SIZE
    tiles, color = session.preview_view()
    for x, y in tiles:
        rect = _cell_rect(x, y, left=left + MARGIN, top=MARGIN * 4)
        pygame.draw.rect(screen, color, rect)
        pygame.draw.rect(screen, GRID_LINE, rect, 1)

    lines = [f"Score: {session.score}", f"Level: {session.level}", f"Lines: {session.lines}"]
    for i, text in enumerate(lines):
        surface = font.render(text, True, (255, 255, 255))
        screen.blit(surface, (left + MARGIN, MARGIN * 4 + 5 * CELL_SIZE + i * 30))


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font) -> None:
    surface = font.render("GAME OVER", True, (255, 80, 80))
    board_w = Board.width * CELL_SIZE
    board_h = Board.height * CELL_SIZE
    rect = surface.get_rect(center=(MARGIN + board_w // 2, MARGIN + board_h // 2))
    screen.blit(surface, rect)


class GameRunner:
    """Manage the window and the game loop with pause/resume controls."""

    def __init__(self, session: Optional[GameSession] = None) -> None:
        self.session = session or GameSession()
        self._running = False
        self._paused = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def paused(self) -> bool:
        return self._paused

    def toggle_pause(self) -> None:
        self._paused = not self._paused
        LOGGER.info("Paused" if self._paused else "Resumed")

    def _react(self, events: list[GameEvent]) -> None:
        for event in events:
            if event.type is EventType.LINES_CLEARED:
                LOGGER.debug("Line clear animation for %d row(s)", event.count)
            elif event.type is EventType.GAME_OVER:
                pygame.display.set_caption(f"Tetris - Game over - Score: {self.session.score}")

    def run(self) -> None:
        pygame.init()
        width = 3 * MARGIN + Board.width * CELL_SIZE + SIDE_PANEL_WIDTH
        height = 2 * MARGIN + Board.height * CELL_SIZE
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Tetris")
        font = pygame.font.Font(None, 32)
        clock = pygame.time.Clock()

        self.session.start(pygame.time.get_ticks())
        self._running = True
        while self._running:
            clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_p:
                    self.toggle_pause()

            if not self._paused:
                frame = frame_from_keys(pygame.key.get_pressed())
                self._react(self.session.step(pygame.time.get_ticks(), frame))

            screen.fill(BACKGROUND)
            draw_board(screen, self.session)
            draw_active(screen, self.session)
            draw_side_panel(screen, self.session, font)
            if self.session.game_over:
                draw_game_over(screen, font)
            else:
                pygame.display.set_caption(
                    f"Tetris - {'Paused - ' if self._paused else ''}Score: {self.session.score}"
                )
            pygame.display.flip()

        pygame.quit()
        LOGGER.info("Game stopped")


def main(session: Optional[GameSession] = None) -> None:
    GameRunner(session).run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
