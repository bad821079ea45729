# src/planning_ga/ga/types.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GAStats:
    generation: int
    best_score: float
    mean_score: float
    best_index: int
    best_weights: list[float] | None = None


__all__ = ["GAStats"]
