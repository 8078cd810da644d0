import pytest

from tetris_engine.tetromino import SHAPES, Piece, PieceKind, Shape, tiles


@pytest.mark.parametrize("kind", list(PieceKind))
def test_every_orientation_projects_four_distinct_tiles(kind):
    for orientation in range(4):
        cells = tiles(kind, orientation, 3, 7)
        assert len(cells) == 4
        assert len(set(cells)) == 4


@pytest.mark.parametrize("kind", list(PieceKind))
def test_four_rotations_return_to_start(kind):
    for start in range(4):
        piece = Piece(kind, start, 2, -1)
        turned = piece
        for _ in range(4):
            turned = turned.rotated()
        assert turned.orientation == start
        assert sorted(turned.tiles()) == sorted(piece.tiles())


def test_o_piece_is_rotation_invariant():
    for x, y in [(0, 0), (4, -2), (8, 18)]:
        expected = sorted(tiles(PieceKind.O, 0, x, y))
        for orientation in range(1, 4):
            assert sorted(tiles(PieceKind.O, orientation, x, y)) == expected


def test_i_piece_spins_inside_its_box():
    assert tiles(PieceKind.I, 0, 0, 0) == [(0, 2), (1, 2), (2, 2), (3, 2)]
    assert tiles(PieceKind.I, 1, 0, 0) == [(1, 0), (1, 1), (1, 2), (1, 3)]
    assert tiles(PieceKind.I, 2, 0, 0) == [(3, 1), (2, 1), (1, 1), (0, 1)]
    assert tiles(PieceKind.I, 3, 0, 0) == [(2, 3), (2, 2), (2, 1), (2, 0)]


def test_origin_translates_tiles():
    base = tiles(PieceKind.T, 1, 0, 0)
    moved = tiles(PieceKind.T, 1, 5, -3)
    assert moved == [(x + 5, y - 3) for x, y in base]


def test_bad_orientation_fails_loudly():
    with pytest.raises(ValueError):
        tiles(PieceKind.L, 4, 0, 0)
    with pytest.raises(ValueError):
        tiles(PieceKind.L, -1, 0, 0)


def test_catalog_shapes_are_well_formed():
    assert set(SHAPES) == set(PieceKind)
    for shape in SHAPES.values():
        assert len(shape.offsets) == 4
        assert all(0 <= x < shape.size and 0 <= y < shape.size for x, y in shape.offsets)


def test_malformed_shape_is_rejected():
    with pytest.raises(ValueError):
        Shape(3, ((0, 0), (1, 0), (2, 0)))
    with pytest.raises(ValueError):
        Shape(2, ((0, 0), (1, 0), (2, 0), (1, 1)))


def test_piece_helpers_do_not_mutate():
    piece = Piece(PieceKind.S, 3, 4, 2)
    assert piece.moved(1, 1) == Piece(PieceKind.S, 3, 5, 3)
    assert piece.rotated() == Piece(PieceKind.S, 0, 4, 2)
    assert piece.rotated(-1) == Piece(PieceKind.S, 2, 4, 2)
    assert piece == Piece(PieceKind.S, 3, 4, 2)
