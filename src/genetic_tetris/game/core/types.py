# src/genetic_tetris/game/core/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Action(Enum):
    LEFT = auto()
    RIGHT = auto()
    ROTATE = auto()
    DOWN = auto()
    DROP = auto()


@dataclass(frozen=True)
class Position:
    """Anchor of a piece in board coordinates: x = column, y = row (0 at the top)."""

    x: int
    y: int

    def moved(self, dx: int = 0, dy: int = 0) -> "Position":
        return Position(x=self.x + int(dx), y=self.y + int(dy))
