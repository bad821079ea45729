# src/genetic_tetris/game/core/board.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from genetic_tetris.game.core.constants import BOARD_HEIGHT, BOARD_WIDTH, EMPTY_CELL
from genetic_tetris.game.core.piece import Piece
from genetic_tetris.game.core.types import Position


@dataclass
class Board:
    h: int
    w: int
    grid: np.ndarray  # locked blocks only (0=empty, 1..7 piece colors)

    @classmethod
    def empty(cls, *, h: int = BOARD_HEIGHT, w: int = BOARD_WIDTH) -> "Board":
        if int(h) <= 0 or int(w) <= 0:
            raise ValueError(f"invalid board size (h={h}, w={w})")
        return cls(h=int(h), w=int(w), grid=np.zeros((int(h), int(w)), dtype=np.uint8))

    def copy(self) -> "Board":
        return Board(h=self.h, w=self.w, grid=self.grid.copy())

    def reset(self) -> None:
        self.grid.fill(EMPTY_CELL)

    def is_free(self, x: int, y: int) -> bool:
        return 0 <= x < self.w and 0 <= y < self.h and int(self.grid[y, x]) == EMPTY_CELL

    def clear_full_lines(self) -> int:
        """
        Remove every full row in place; rows above shift down and empty rows
        enter at the top. Returns the number of cleared rows.
        """
        full = np.all(self.grid != EMPTY_CELL, axis=1)
        cleared = int(full.sum())
        if cleared <= 0:
            return 0
        kept = self.grid[~full]
        self.grid[:cleared] = EMPTY_CELL
        self.grid[cleared:] = kept
        return cleared


def is_valid_move(board: Board, position: Position, piece: Piece) -> bool:
    for x, y in piece.cells(position):
        if not board.is_free(x, y):
            return False
    return True


def calc_drop_pos(board: Board, position: Position, piece: Piece) -> Position:
    """
    Hard-drop resolution: the lowest row reachable straight down from `position`.
    An invalid start position is returned unchanged.
    """
    if not is_valid_move(board, position, piece):
        return position
    pos = position
    while True:
        nxt = pos.moved(dy=1)
        if not is_valid_move(board, nxt, piece):
            return pos
        pos = nxt


def lock_piece(board: Board, position: Position, piece: Piece, *, in_place: bool = False) -> Board:
    """
    Write the piece color into its four cells.

    By default a copy is returned and `board` is left untouched, which is what
    the search relies on when scoring hypothetical placements.
    """
    out = board if in_place else board.copy()
    color = int(piece.color)
    for x, y in piece.cells(position):
        if not (0 <= x < out.w and 0 <= y < out.h):
            raise ValueError(f"cannot lock cell ({x}, {y}) outside a {out.w}x{out.h} board")
        out.grid[y, x] = color
    return out


def propagate_lines(board: Board) -> tuple[Board, int]:
    """Pure line clear. Returns (new_board, cleared); `board` is not mutated."""
    out = board.copy()
    cleared = out.clear_full_lines()
    return out, cleared


__all__ = [
    "Board",
    "calc_drop_pos",
    "is_valid_move",
    "lock_piece",
    "propagate_lines",
]
