# src/genetic_tetris/game/core/game.py
from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional

import numpy as np

from genetic_tetris.game.core.board import Board, calc_drop_pos, is_valid_move, lock_piece
from genetic_tetris.game.core.constants import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    DROP_TICKS,
    LINE_CLEAR_BONUS,
    PLACEMENT_BONUS,
    REPEAT_TICKS,
    SPAWN_OFFSET,
)
from genetic_tetris.game.core.piece import Piece, random_piece
from genetic_tetris.game.core.types import Action, Position

# Input handling order within one tick
_KEY_ORDER = (Action.ROTATE, Action.LEFT, Action.RIGHT, Action.DOWN, Action.DROP)


class GameState:
    """
    Tick-driven game.

    Contracts:

      - board holds LOCKED cells only; the active piece lives in
        current_piece/pos and is never written to the board until it locks.
      - tick() is the only thing that advances time. Gravity runs every
        DROP_TICKS ticks; a piece that cannot fall on a gravity tick locks.
      - Keys act once per press: `held` remembers which keys are down so a
        key kept pressed across ticks does not repeat, except that LEFT/RIGHT
        (and DOWN outside gravity ticks) are released every REPEAT_TICKS.
      - reset() restores every field, so one instance can be reused for any
        number of games. The RNG is the only state carried across resets.
    """

    def __init__(
            self,
            *,
            width: int = BOARD_WIDTH,
            height: int = BOARD_HEIGHT,
            rng: Optional[np.random.Generator] = None,
            seed: Optional[int] = None,
    ) -> None:
        self.rng: np.random.Generator = rng if rng is not None else np.random.default_rng(seed)
        self.board = Board.empty(h=height, w=width)
        if self.board.w < 4:
            raise ValueError(f"width must be >= 4 to spawn pieces, got {self.board.w}")
        self.held: Dict[Action, bool] = {}
        self.reset()

    @property
    def spawn_position(self) -> Position:
        return Position(x=self.board.w // 2 - 2, y=SPAWN_OFFSET)

    def reset(self) -> None:
        self.board.reset()
        self.current_piece: Piece = random_piece(self.rng)
        self.next_piece: Piece = random_piece(self.rng)
        self.pos: Position = self.spawn_position
        self.ghost_pos: Position = calc_drop_pos(self.board, self.pos, self.current_piece)
        self.drop_count = 0
        self.sub_count = 0
        self.held.clear()
        self.score = 0
        self.lines = 0
        self.game_over = False

    # ---- simulation ------------------------------------------------------------------

    def tick(self, pressed: Iterable[Action] = ()) -> None:
        """Advance one tick with the given keys held down."""
        if self.game_over or not is_valid_move(self.board, self.pos, self.current_piece):
            self.game_over = True
            return

        self.drop_count += 1
        self.sub_count += 1

        per_drop = self.drop_count % DROP_TICKS == 0
        per_sub = self.sub_count % REPEAT_TICKS == 0

        if per_sub:
            self.held[Action.LEFT] = False
            self.held[Action.RIGHT] = False
            if not per_drop:
                self.held[Action.DOWN] = False

        if per_drop:
            self._gravity()
            if self.game_over:
                return

        keys = frozenset(pressed)
        handlers: Dict[Action, Callable[[], None]] = {
            Action.ROTATE: self.rotate_current_piece,
            Action.LEFT: lambda: self.move_current_piece(-1, 0),
            Action.RIGHT: lambda: self.move_current_piece(1, 0),
            Action.DOWN: lambda: self.move_current_piece(0, 1),
            Action.DROP: self.hard_drop,
        }
        for key in _KEY_ORDER:
            self._key_handler(key, key in keys, handlers[key])

        self.update_ghost_pos()

    def rotate_current_piece(self) -> None:
        rotated = self.current_piece.copy()
        rotated.rotate()
        if is_valid_move(self.board, self.pos, rotated):
            self.current_piece = rotated

    def move_current_piece(self, dx: int, dy: int) -> bool:
        nxt = self.pos.moved(dx=dx, dy=dy)
        if not is_valid_move(self.board, nxt, self.current_piece):
            return False
        self.pos = nxt
        return True

    def hard_drop(self) -> None:
        """Drop to the floor and fast-forward so the next tick is a gravity tick."""
        self.pos = calc_drop_pos(self.board, self.pos, self.current_piece)
        self.drop_count += DROP_TICKS - self.drop_count % DROP_TICKS - 1

    def update_ghost_pos(self) -> None:
        self.ghost_pos = calc_drop_pos(self.board, self.pos, self.current_piece)

    # ---- internals -------------------------------------------------------------------

    def _key_handler(self, key: Action, is_pressed: bool, handler: Callable[[], None]) -> None:
        if not is_pressed:
            self.held[key] = False
            return
        if self.held.get(key, False):
            return
        self.held[key] = True
        handler()
        self.sub_count = 0

    def _gravity(self) -> None:
        if self.move_current_piece(0, 1):
            return
        lock_piece(self.board, self.pos, self.current_piece, in_place=True)
        self._spawn()
        cleared = self.board.clear_full_lines()
        self.lines += cleared
        self.score += LINE_CLEAR_BONUS * cleared + PLACEMENT_BONUS
        if not is_valid_move(self.board, self.pos, self.current_piece):
            self.game_over = True

    def _spawn(self) -> None:
        self.current_piece = self.next_piece
        self.next_piece = random_piece(self.rng)
        self.pos = self.spawn_position


__all__ = ["GameState"]
