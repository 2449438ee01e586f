"""Tests for the piece model and in-place rotation"""
import pytest

from tetris_piece import PIECE_TYPES, Direction, Piece, Point


def rotate_cw(m):
    return [list(r) for r in zip(*m[::-1])]


def rotate_ccw(m):
    return [list(c) for c in zip(*m)][::-1]


def filled(piece):
    return sum(v for row in piece.shape for v in row)


@pytest.mark.parametrize("t", PIECE_TYPES)
def test_four_rotations_restore_shape(t):
    for direction in Direction:
        p = Piece.new(t)
        for _ in range(4):
            p.rotate(direction)
        assert p.shape == Piece.new(t).shape


@pytest.mark.parametrize("t", PIECE_TYPES)
def test_ring_rotation_matches_transpose(t):
    right, left = Piece.new(t), Piece.new(t)
    expected_right, expected_left = Piece.new(t).shape, Piece.new(t).shape
    for _ in range(3):
        right.rotate(Direction.RIGHT)
        left.rotate(Direction.LEFT)
        expected_right = rotate_cw(expected_right)
        expected_left = rotate_ccw(expected_left)
        assert right.shape == expected_right
        assert left.shape == expected_left
        assert filled(right) == filled(left) == 4


def test_rotation_on_asymmetric_matrices():
    # every cell distinct so a wrong swap cannot hide
    for n in (2, 3, 4, 5):
        m = [[r * n + c for c in range(n)] for r in range(n)]
        p = Piece("X", [row[:] for row in m], "red")
        p.rotate(Direction.RIGHT)
        assert p.shape == rotate_cw(m)
        p = Piece("X", [row[:] for row in m], "red")
        p.rotate(Direction.LEFT)
        assert p.shape == rotate_ccw(m)


def test_left_undoes_right():
    p = Piece.new("L")
    p.rotate(Direction.RIGHT)
    p.rotate(Direction.LEFT)
    assert p.shape == Piece.new("L").shape


def test_o_piece_rotates_to_itself():
    p = Piece.new("O")
    p.rotate(Direction.RIGHT)
    assert p.shape == [[1, 1], [1, 1]]


def test_each_point_is_row_major():
    assert list(Piece.new("T").each_point()) == [(0, 1), (1, 0), (1, 1), (1, 2)]
    assert list(Piece.new("I").each_point()) == [(1, 0), (1, 1), (1, 2), (1, 3)]


def test_sizes_and_colors():
    sizes = {t: Piece.new(t).size for t in PIECE_TYPES}
    assert sizes == {"I": 4, "J": 3, "L": 3, "O": 2, "S": 3, "T": 3, "Z": 3}
    assert len({Piece.new(t).color for t in PIECE_TYPES}) == 7


def test_copy_is_independent():
    p = Piece.new("S")
    q = p.copy()
    q.rotate(Direction.RIGHT)
    assert p.shape == Piece.new("S").shape
    assert q.shape != p.shape


def test_new_does_not_share_shape_table():
    p = Piece.new("J")
    p.shape[0][0] = 0
    assert Piece.new("J").shape[0][0] == 1


def test_point_offset():
    assert Point(3, 4).offset(-1, 2) == Point(2, 6)
