from .base import DEFAULT_ACTION, Agent, evaluate_agent, run_game
from .heuristic_agent import HeuristicAgent
from .random_agent import RANDOM_ACTIONS, RandomAgent

__all__ = [
    "Agent",
    "DEFAULT_ACTION",
    "HeuristicAgent",
    "RANDOM_ACTIONS",
    "RandomAgent",
    "evaluate_agent",
    "run_game",
]
