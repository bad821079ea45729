# src/genetic_tetris/game/core/metrics.py
from __future__ import annotations

from typing import Callable, Sequence, Tuple

import numpy as np

from genetic_tetris.game.core.board import Board
from genetic_tetris.game.core.constants import EMPTY_CELL

Heuristic = Callable[[Board], float]


def surface_roughness(board: Board) -> float:
    """
    Sum of |top(c) - top(c+1)| over adjacent columns, where top(c) is the row
    index of the topmost occupied cell (board height for an empty column).
    """
    tops = _top_rows_from_occ(_occ_from_grid(board.grid))
    if tops.size <= 1:
        return 0.0
    return float(np.abs(np.diff(tops)).sum())


def height(board: Board) -> float:
    """Height (from the floor) of the highest occupied cell; 0 on an empty board."""
    rows = np.flatnonzero(_occ_from_grid(board.grid).any(axis=1))
    if rows.size == 0:
        return 0.0
    return float(board.h - int(rows[0]))


def line_completion(board: Board) -> float:
    """Number of fully occupied rows."""
    return float(_occ_from_grid(board.grid).all(axis=1).sum())


def ceiling_gaps(board: Board) -> float:
    """
    For every occupied cell, the run of empty cells directly beneath it until
    the next occupied cell or the floor; summed over the board.

    Each covered empty cell belongs to exactly one such run, so this equals
    the number of empty cells with an occupied cell somewhere above them.
    """
    occ = _occ_from_grid(board.grid)
    covered = np.maximum.accumulate(occ, axis=0)
    return float(np.sum((~occ) & covered))


HEURISTICS: Tuple[Heuristic, Heuristic, Heuristic, Heuristic] = (
    surface_roughness,
    height,
    line_completion,
    ceiling_gaps,
)
HEURISTIC_NAMES: Tuple[str, ...] = tuple(h.__name__ for h in HEURISTICS)
N_HEURISTICS: int = len(HEURISTICS)


def evaluate_board(board: Board) -> np.ndarray:
    return np.asarray([h(board) for h in HEURISTICS], dtype=np.float64)


def weighted_loss(weights: Sequence[float], board: Board) -> float:
    """Lower is better."""
    w = np.asarray(weights, dtype=np.float64)
    if w.shape != (N_HEURISTICS,):
        raise ValueError(f"expected {N_HEURISTICS} weights, got shape {w.shape}")
    return float(np.dot(w, evaluate_board(board)))


# -----------------------------------------------------------------------------
# Internals
# -----------------------------------------------------------------------------
def _occ_from_grid(grid: np.ndarray) -> np.ndarray:
    if grid.ndim != 2:
        raise ValueError(f"grid must be 2D, got shape={grid.shape}")
    return np.not_equal(grid, EMPTY_CELL)


def _top_rows_from_occ(occ: np.ndarray) -> np.ndarray:
    h, _w = occ.shape
    any_filled = occ.any(axis=0)
    # argmax returns 0 when all-false; those columns read as the board height
    first_filled = np.argmax(occ, axis=0)
    return np.where(any_filled, first_filled, h).astype(np.int64, copy=False)


__all__ = [
    "HEURISTICS",
    "HEURISTIC_NAMES",
    "Heuristic",
    "N_HEURISTICS",
    "ceiling_gaps",
    "evaluate_board",
    "height",
    "line_completion",
    "surface_roughness",
    "weighted_loss",
]
