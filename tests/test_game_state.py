# tests/test_game_state.py
from __future__ import annotations

import numpy as np
import pytest

from genetic_tetris.game.core.board import calc_drop_pos
from genetic_tetris.game.core.constants import DROP_TICKS
from genetic_tetris.game.core.game import GameState
from genetic_tetris.game.core.piece import Piece
from genetic_tetris.game.core.types import Action, Position


def _state(seed: int = 0) -> GameState:
    return GameState(width=10, height=20, seed=seed)


def test_new_game_starts_at_spawn() -> None:
    state = _state()
    assert state.pos == Position(3, 2)
    assert state.score == 0
    assert state.game_over is False
    assert state.ghost_pos == calc_drop_pos(state.board, state.pos, state.current_piece)


def test_gravity_moves_piece_every_drop_interval() -> None:
    state = _state()
    for _ in range(DROP_TICKS - 1):
        state.tick()
    assert state.pos.y == 2
    state.tick()
    assert state.pos.y == 3


def test_piece_locks_after_full_interval_on_floor() -> None:
    state = _state()
    state.pos = calc_drop_pos(state.board, state.pos, state.current_piece)
    for _ in range(DROP_TICKS - 1):
        state.tick()
    assert state.score == 0
    assert int(np.count_nonzero(state.board.grid)) == 0

    state.tick()
    assert state.score == 1
    assert int(np.count_nonzero(state.board.grid)) == 4
    assert state.pos == state.spawn_position


def test_hard_drop_locks_on_next_tick() -> None:
    state = _state()
    upcoming = state.next_piece
    state.tick((Action.DROP,))
    assert state.drop_count == DROP_TICKS - 1
    assert state.score == 0

    state.tick()
    assert state.score == 1
    assert state.current_piece is upcoming
    assert int(np.count_nonzero(state.board.grid)) == 4


def test_held_key_acts_once_per_press() -> None:
    state = _state()
    state.tick((Action.LEFT,))
    assert state.pos.x == 2
    state.tick((Action.LEFT,))
    assert state.pos.x == 2
    state.tick()
    state.tick((Action.LEFT,))
    assert state.pos.x == 1


def test_held_sideways_key_repeats_after_release_interval() -> None:
    state = _state()
    state.tick((Action.RIGHT,))
    assert state.pos.x == 4
    # the press reset sub_count, so the forced release lands 24 ticks later
    for _ in range(23):
        state.tick((Action.RIGHT,))
    assert state.pos.x == 4
    state.tick((Action.RIGHT,))
    assert state.pos.x == 5


def test_down_moves_one_row() -> None:
    state = _state()
    state.tick((Action.DOWN,))
    assert state.pos == Position(3, 3)


def test_moves_into_walls_are_ignored() -> None:
    state = _state()
    state.current_piece = Piece.from_index(0)
    state.pos = Position(6, 2)
    assert state.move_current_piece(1, 0) is False
    assert state.pos == Position(6, 2)


def test_reset_restores_every_field() -> None:
    state = _state(seed=5)
    for _ in range(4):
        state.tick((Action.DROP,))
        state.tick()
    state.tick((Action.LEFT,))
    assert state.score > 0

    state.reset()
    assert state.score == 0
    assert state.lines == 0
    assert state.drop_count == 0
    assert state.sub_count == 0
    assert state.game_over is False
    assert state.held == {}
    assert int(np.count_nonzero(state.board.grid)) == 0
    assert state.pos == state.spawn_position
    assert state.ghost_pos == calc_drop_pos(state.board, state.pos, state.current_piece)


def test_invalid_position_ends_game() -> None:
    state = _state()
    state.board.grid[2:4, :] = 1
    state.tick()
    assert state.game_over is True

    drop_count = state.drop_count
    state.tick((Action.LEFT,))
    assert state.drop_count == drop_count


def test_blocked_spawn_ends_game_after_lock() -> None:
    state = _state()
    state.board.grid[4:, :9] = 1
    state.current_piece = Piece.from_index(3)
    state.next_piece = Piece.from_index(3)

    state.tick((Action.DROP,))
    state.tick()
    assert state.score == 1
    assert state.game_over is True


def test_line_clear_scores_hundred_plus_placement() -> None:
    state = _state()
    state.board.grid[19, 4:] = 2
    state.current_piece = Piece.from_index(0)
    state.pos = Position(0, 2)

    state.tick((Action.DROP,))
    state.tick()
    assert state.lines == 1
    assert state.score == 101
    assert int(np.count_nonzero(state.board.grid)) == 0


def test_narrow_board_is_rejected() -> None:
    with pytest.raises(ValueError, match="width"):
        GameState(width=3, height=20)
