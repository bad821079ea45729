# src/genetic_tetris/agents/heuristic_agent.py
from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from genetic_tetris.agents.base import Agent
from genetic_tetris.game.core.board import Board
from genetic_tetris.game.core.game import GameState
from genetic_tetris.game.core.metrics import N_HEURISTICS, weighted_loss
from genetic_tetris.game.core.search import pick_move
from genetic_tetris.game.core.types import Action
from planning_ga.policies import VectorParamPolicy


class HeuristicAgent(Agent, VectorParamPolicy):
    """
    One-piece greedy search scored by a weighted sum of board heuristics.

    Weight order follows HEURISTICS: roughness, height, full lines, gaps.
    Lower loss is better, so useful weights for full lines are negative.
    """

    def __init__(self, weights: Optional[Sequence[float]] = None) -> None:
        self.weights = np.zeros((N_HEURISTICS,), dtype=np.float64)
        if weights is not None:
            self.set_params(weights)

    @property
    def num_params(self) -> int:
        return N_HEURISTICS

    def get_params(self) -> Sequence[float]:
        return self.weights.tolist()

    def set_params(self, params: Sequence[float]) -> None:
        w = np.asarray(params, dtype=np.float64).reshape(-1)
        if w.shape != (N_HEURISTICS,):
            raise ValueError(f"HeuristicAgent expects {N_HEURISTICS} weights, got {w.shape[0]}")
        self.weights = w.copy()

    def loss_function(self, board: Board) -> float:
        return weighted_loss(self.weights, board)

    def get_action(self, state: GameState) -> Optional[Action]:
        return pick_move(state.board, state.current_piece, state.pos, self.loss_function)

    def __repr__(self) -> str:
        return f"HeuristicAgent(weights={self.weights.tolist()!r})"


__all__ = ["HeuristicAgent"]
