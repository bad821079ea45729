# src/genetic_tetris/game/core/search.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from genetic_tetris.game.core.board import Board, calc_drop_pos, is_valid_move, lock_piece
from genetic_tetris.game.core.piece import Piece
from genetic_tetris.game.core.types import Action, Position

LossFn = Callable[[Board], float]

NUM_ROTATIONS: int = 4


@dataclass(frozen=True)
class Placement:
    """
    Best placement found by the search.

    rotation is the number of 90-degree turns applied to the active piece,
    position the start anchor on the current row, drop_position where the
    rotated piece lands, piece the rotated copy.
    """

    loss: float
    rotation: int
    position: Position
    drop_position: Position
    piece: Piece


def search_placements(board: Board, piece: Piece, position: Position, loss_fn: LossFn) -> Optional[Placement]:
    """
    Score every (rotation, column) placement reachable by a straight drop from
    the current row. Lowest loss wins; on ties the first one found is kept.

    Neither `board` nor `piece` is mutated.
    """
    rotated = piece.copy()
    best: Optional[Placement] = None

    for rotation in range(NUM_ROTATIONS):
        min_x, max_x = rotated.x_bounds()
        for x in range(-min_x, board.w - max_x):
            start = Position(x=x, y=position.y)
            if not is_valid_move(board, start, rotated):
                continue
            drop = calc_drop_pos(board, start, rotated)
            loss = float(loss_fn(lock_piece(board, drop, rotated)))
            if best is None or loss < best.loss:
                best = Placement(
                    loss=loss,
                    rotation=rotation,
                    position=start,
                    drop_position=drop,
                    piece=rotated.copy(),
                )
        if rotation < NUM_ROTATIONS - 1:
            rotated.rotate()

    return best


def action_toward(placement: Optional[Placement], position: Position) -> Optional[Action]:
    """
    One input step toward `placement`: rotate first, then shift one column.
    None means the piece is already aligned (or nothing fits).
    """
    if placement is None:
        return None
    if placement.rotation > 0:
        return Action.ROTATE
    if placement.position.x < position.x:
        return Action.LEFT
    if placement.position.x > position.x:
        return Action.RIGHT
    return None


def pick_move(board: Board, piece: Piece, position: Position, loss_fn: LossFn) -> Optional[Action]:
    return action_toward(search_placements(board, piece, position, loss_fn), position)


__all__ = [
    "LossFn",
    "NUM_ROTATIONS",
    "Placement",
    "action_toward",
    "pick_move",
    "search_placements",
]
