# src/genetic_tetris/__init__.py
from .agents import Agent, HeuristicAgent, RandomAgent, evaluate_agent, run_game
from .game.core import Action, GameState

__all__ = [
    "Action",
    "Agent",
    "GameState",
    "HeuristicAgent",
    "RandomAgent",
    "evaluate_agent",
    "run_game",
]
