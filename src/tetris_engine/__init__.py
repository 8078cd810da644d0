"""Rule engine for a falling-block puzzle game."""

from .board import Board
from .collision import Collision, classify, classify_piece
from .config import EngineConfig
from .controller import ControllerState, EventType, GameEvent, PieceController
from .game_state import GameState
from .input import Action, InputAdapter, InputFrame
from .scoring import LINE_SCORES, LineClearResult, score_for_lines
from .session import GameSession
from .spawn import is_spawn_blocked, roll_preview, spawn_origin
from .tetromino import SHAPES, Piece, PieceKind, Shape, tiles
from .utils import gravity_interval_ms, render_grid

__all__ = [
    "Action",
    "Board",
    "Collision",
    "ControllerState",
    "EngineConfig",
    "EventType",
    "GameEvent",
    "GameSession",
    "GameState",
    "InputAdapter",
    "InputFrame",
    "LINE_SCORES",
    "LineClearResult",
    "Piece",
    "PieceController",
    "PieceKind",
    "SHAPES",
    "Shape",
    "classify",
    "classify_piece",
    "gravity_interval_ms",
    "is_spawn_blocked",
    "render_grid",
    "roll_preview",
    "score_for_lines",
    "spawn_origin",
    "tiles",
]
