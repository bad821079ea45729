# src/genetic_tetris/agents/random_agent.py
from __future__ import annotations

from typing import Optional

import numpy as np

from genetic_tetris.agents.base import Agent
from genetic_tetris.game.core.game import GameState
from genetic_tetris.game.core.types import Action

# no DROP: random pieces only land through gravity
RANDOM_ACTIONS: tuple[Action, ...] = (Action.LEFT, Action.RIGHT, Action.ROTATE, Action.DOWN)


class RandomAgent(Agent):
    def __init__(self, *, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def get_action(self, state: GameState) -> Optional[Action]:
        _ = state
        return RANDOM_ACTIONS[int(self.rng.integers(0, len(RANDOM_ACTIONS)))]


__all__ = ["RANDOM_ACTIONS", "RandomAgent"]
