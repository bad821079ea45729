# tests/test_board.py
from __future__ import annotations

import pytest

from genetic_tetris.game.core.board import Board, calc_drop_pos, is_valid_move, lock_piece, propagate_lines
from genetic_tetris.game.core.piece import Piece
from genetic_tetris.game.core.types import Position


def test_valid_move_respects_walls() -> None:
    board = Board.empty(h=20, w=10)
    i_piece = Piece.from_index(0)
    assert is_valid_move(board, Position(3, 2), i_piece)
    assert is_valid_move(board, Position(6, 2), i_piece)
    assert not is_valid_move(board, Position(7, 2), i_piece)
    assert not is_valid_move(board, Position(-1, 2), i_piece)
    assert not is_valid_move(board, Position(3, 20), i_piece)


def test_valid_move_respects_locked_cells() -> None:
    board = Board.empty(h=20, w=10)
    board.grid[5, 4] = 1
    assert not is_valid_move(board, Position(3, 5), Piece.from_index(0))
    assert is_valid_move(board, Position(3, 4), Piece.from_index(0))


def test_drop_position_is_lowest_valid_row() -> None:
    board = Board.empty(h=20, w=10)
    board.grid[12, 5] = 2
    for piece in (Piece.from_index(i) for i in range(7)):
        drop = calc_drop_pos(board, Position(3, 2), piece)
        assert is_valid_move(board, drop, piece)
        assert not is_valid_move(board, drop.moved(dy=1), piece)
        assert drop.x == 3


def test_i_piece_lands_on_floor() -> None:
    board = Board.empty(h=20, w=10)
    assert calc_drop_pos(board, Position(3, 2), Piece.from_index(0)) == Position(3, 19)


def test_lock_piece_returns_copy_by_default() -> None:
    board = Board.empty(h=20, w=10)
    locked = lock_piece(board, Position(0, 19), Piece.from_index(0))
    assert int(board.grid.sum()) == 0
    assert locked.grid[19, :4].tolist() == [1, 1, 1, 1]


def test_lock_piece_in_place_writes_color() -> None:
    board = Board.empty(h=20, w=10)
    out = lock_piece(board, Position(0, 18), Piece.from_index(3), in_place=True)
    assert out is board
    assert int((board.grid == 4).sum()) == 4


def test_lock_piece_rejects_cells_outside_board() -> None:
    board = Board.empty(h=20, w=10)
    with pytest.raises(ValueError, match="outside"):
        lock_piece(board, Position(-1, 0), Piece.from_index(0))


def test_propagate_lines_clears_and_shifts() -> None:
    board = Board.empty(h=20, w=10)
    board.grid[19, 4:] = 2
    board.grid[18, 5] = 5
    board = lock_piece(board, Position(0, 19), Piece.from_index(0))

    out, cleared = propagate_lines(board)
    assert cleared == 1
    assert int(board.grid[19].min()) > 0
    assert int(out.grid[19, 5]) == 5
    assert int(out.grid.sum()) == 5


def test_clear_full_lines_keeps_array_identity() -> None:
    board = Board.empty(h=4, w=4)
    grid = board.grid
    board.grid[2:, :] = 1
    assert board.clear_full_lines() == 2
    assert board.grid is grid
    assert int(board.grid.sum()) == 0


def test_empty_board_rejects_bad_size() -> None:
    with pytest.raises(ValueError, match="invalid board size"):
        Board.empty(h=0, w=10)


def test_drop_from_invalid_start_is_unchanged() -> None:
    board = Board.empty(h=20, w=10)
    board.grid[2, 3] = 1
    assert calc_drop_pos(board, Position(3, 2), Piece.from_index(0)) == Position(3, 2)
