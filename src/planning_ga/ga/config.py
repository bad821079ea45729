# src/planning_ga/ga/config.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GAConfig:
    population_size: int = 500
    selection_size: int = 50
    crossover_prob: float = 0.5
    mutation_rate: float = 0.15
    init_std: float = 100.0
    seed: int | None = None

    def validate(self) -> None:
        if int(self.population_size) < 1:
            raise ValueError("population_size must be >= 1")
        if int(self.selection_size) < 1:
            raise ValueError("selection_size must be >= 1")
        if not 0.0 <= float(self.crossover_prob) <= 1.0:
            raise ValueError("crossover_prob must be in [0, 1]")
        if not 0.0 <= float(self.mutation_rate) <= 1.0:
            raise ValueError("mutation_rate must be in [0, 1]")
        if float(self.init_std) <= 0.0:
            raise ValueError("init_std must be > 0")


@dataclass(frozen=True)
class GAFitnessConfig:
    games: int = 5
    max_steps: int | None = None

    def validate(self) -> None:
        if int(self.games) < 1:
            raise ValueError("games must be >= 1")
        if self.max_steps is not None and int(self.max_steps) < 1:
            raise ValueError("max_steps must be >= 1 (or None for unbounded games)")


__all__ = ["GAConfig", "GAFitnessConfig"]
