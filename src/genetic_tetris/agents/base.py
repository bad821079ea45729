# src/genetic_tetris/agents/base.py
from __future__ import annotations

from abc import abstractmethod
from typing import Optional

from genetic_tetris.game.core.game import GameState
from genetic_tetris.game.core.types import Action
from genetic_tetris.game.rendering.base import DrawConfig, NullRenderer, Renderer
from planning_ga.policies import PlanningPolicy

DEFAULT_ACTION: Action = Action.DROP


class Agent(PlanningPolicy):
    """
    Something that picks one input per step from the live game state.

    Returning None means "no preference"; the driver then hard-drops.
    The env handed to predict()/evaluate() is a GameState.
    """

    @abstractmethod
    def get_action(self, state: GameState) -> Optional[Action]:
        raise NotImplementedError

    def predict(self, *, env: GameState) -> Optional[Action]:
        return self.get_action(env)

    def evaluate(self, *, env: GameState, episodes: int, max_steps: int | None = None) -> float:
        return evaluate_agent(self, env, games=episodes, max_steps=max_steps)


def run_game(
    agent: Agent,
    state: GameState,
    *,
    renderer: Optional[Renderer] = None,
    draw: Optional[DrawConfig] = None,
    max_steps: Optional[int] = None,
) -> int:
    """
    Play until game over (or `max_steps` agent decisions) and return the score.

    Each step presses the chosen key for one tick and releases it for the
    next, so repeated choices of the same key register as separate presses.
    A game stopped by `max_steps` hard-drops its active piece unless the last
    step already locked one, so every capped game places at least one piece.
    The state is NOT reset here.
    """
    renderer = renderer if renderer is not None else NullRenderer()
    draw = draw if draw is not None else DrawConfig.all_frames()
    if max_steps is not None and int(max_steps) < 1:
        raise ValueError(f"max_steps must be >= 1, got {max_steps}")

    def _step(action: Action) -> bool:
        before = state.score
        state.tick((action,))
        state.tick(())
        if draw.should_render(state.drop_count):
            renderer.render(state)
        return state.score != before

    steps = 0
    locked = False
    while not state.game_over:
        if max_steps is not None and steps >= int(max_steps):
            if not locked:
                _step(DEFAULT_ACTION)
            break
        action = agent.get_action(state)
        locked = _step(action if action is not None else DEFAULT_ACTION)
        steps += 1

    return int(state.score)


def evaluate_agent(
    agent: Agent,
    state: GameState,
    games: int,
    max_steps: Optional[int] = None,
) -> float:
    """Mean score over `games` games, resetting `state` before and after each one."""
    if int(games) < 1:
        raise ValueError(f"games must be >= 1, got {games}")

    state.reset()
    total = 0
    for _ in range(int(games)):
        total += run_game(agent, state, draw=DrawConfig.no_frames(), max_steps=max_steps)
        state.reset()
    return float(total) / float(games)


__all__ = ["Agent", "DEFAULT_ACTION", "evaluate_agent", "run_game"]
