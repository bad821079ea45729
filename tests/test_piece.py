# tests/test_piece.py
from __future__ import annotations

import numpy as np
import pytest

from genetic_tetris.game.core.piece import Piece, PieceColor, all_pieces, random_piece


def test_four_rotations_restore_every_piece() -> None:
    for piece in all_pieces():
        original = piece.shape
        for _ in range(4):
            piece.rotate()
        assert piece.shape == original, piece.kind


def test_i_piece_rotates_to_vertical_column() -> None:
    piece = Piece.from_index(0)
    piece.rotate()
    assert sorted(piece.shape) == [(3, -1), (3, 0), (3, 1), (3, 2)]
    assert piece.x_bounds() == (3, 3)


def test_copy_is_independent_of_rotation() -> None:
    piece = Piece.from_index(6)
    clone = piece.copy()
    clone.rotate()
    assert piece.shape != clone.shape
    assert piece.shape == Piece.from_index(6).shape


def test_from_index_rejects_out_of_range() -> None:
    with pytest.raises(ValueError, match="out of range"):
        Piece.from_index(7)


def test_random_piece_uses_canonical_set() -> None:
    rng = np.random.default_rng(123)
    colors = {random_piece(rng).color for _ in range(200)}
    assert colors == {c for c in PieceColor if c != PieceColor.EMPTY}


def test_kind_names_follow_index_order() -> None:
    assert "".join(p.kind for p in all_pieces()) == "IJLOSTZ"


def test_rotation_truncates_fractional_coordinates_toward_zero() -> None:
    piece = Piece(color=PieceColor.TEAL, shape=((0, 0), (1, 0), (2, 0), (3, 0)), center=(0.5, 0.0))

    piece.rotate()
    # y' = x - 0.5: -0.5 -> 0 (floor would give -1), 0.5 -> 0, 1.5 -> 1, 2.5 -> 2
    assert piece.shape == ((0, 0), (0, 0), (0, 1), (0, 2))

    piece.rotate()
    # x' = 0.5 - y: -0.5 -> 0, -1.5 -> -1 (floor would give -2)
    assert piece.shape == ((0, 0), (0, 0), (0, 0), (-1, 0))


def test_fractional_center_does_not_survive_four_rotations() -> None:
    original = ((0, 0), (1, 0), (2, 0), (3, 0))
    piece = Piece(color=PieceColor.TEAL, shape=original, center=(0.5, 0.0))
    for _ in range(4):
        piece.rotate()
    assert piece.shape != original
