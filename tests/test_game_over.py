import random

from tetris_engine.board import Board
from tetris_engine.collision import Collision, classify_piece
from tetris_engine.config import EngineConfig
from tetris_engine.controller import EventType, PieceController
from tetris_engine.spawn import (
    SPAWN_START_Y,
    is_spawn_blocked,
    place_for_spawn,
    roll_preview,
    spawn_origin,
)
from tetris_engine.tetromino import Piece, PieceKind


def test_spawn_origin_is_centred_just_above_the_board():
    board = Board()
    assert spawn_origin(PieceKind.I, 0, board) == (4, -3)
    assert spawn_origin(PieceKind.I, 1, board) == (4, -4)
    assert spawn_origin(PieceKind.O, 0, board) == (4, -2)
    assert spawn_origin(PieceKind.T, 2, board) == (4, -3)


def test_every_spawn_is_one_step_from_view():
    board = Board()
    for kind in PieceKind:
        for orientation in range(4):
            piece = place_for_spawn(Piece(kind, orientation), board)
            assert piece.y >= SPAWN_START_Y
            assert max(y for _, y in piece.tiles()) == -1
            assert classify_piece(piece, board) == Collision.NONE


def test_roll_preview_covers_kinds_and_orientations():
    rng = random.Random(0)
    rolled = [roll_preview(rng) for _ in range(500)]
    assert {piece.kind for piece in rolled} == set(PieceKind)
    assert {piece.orientation for piece in rolled} == {0, 1, 2, 3}


def test_empty_board_never_blocks_spawn():
    board = Board()
    for kind in PieceKind:
        assert is_spawn_blocked(place_for_spawn(Piece(kind), board), board) is False


def test_stack_at_spawn_point_triggers_game_over():
    controller = PieceController(EngineConfig(seed=11))
    for row in range(0, 20):
        controller.board.fill(((x, row) for x in range(2, 9)), PieceKind.S)
    before = controller.board.snapshot()

    assert controller.spawn() is False

    assert controller.game_over is True
    assert controller.active is None
    assert controller.visible is False
    assert controller.active_tiles() == []
    assert (controller.board.grid == before).all()
    assert [event.type for event in controller.drain_events()] == [EventType.GAME_OVER]


def test_game_over_latch_is_permanent():
    controller = PieceController(EngineConfig(seed=11))
    controller.board.fill(((x, 0) for x in range(9)), PieceKind.S)
    controller.spawn()
    assert controller.game_over is True
    controller.board = Board()
    assert controller.spawn() is False
    assert controller.game_over is True


def test_reset_starts_a_new_game():
    controller = PieceController(EngineConfig(seed=11))
    controller.board.fill(((x, 0) for x in range(9)), PieceKind.S)
    controller.spawn()
    controller.state.score = 1200
    controller.reset()
    assert controller.game_over is False
    assert controller.state.score == 0
    assert not controller.board.grid.any()
    assert controller.visible is True


def test_only_the_entry_row_blocks_a_spawn():
    board = Board()
    piece = place_for_spawn(Piece(PieceKind.I, 0), board)
    assert piece == Piece(PieceKind.I, 0, 4, -3)
    board.set_cell(5, 1, PieceKind.Z)
    assert is_spawn_blocked(piece, board) is False
    board.set_cell(5, 0, PieceKind.Z)
    assert is_spawn_blocked(piece, board) is True
