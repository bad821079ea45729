# src/genetic_tetris/game/core/constants.py
from __future__ import annotations

# Board / cell encoding
EMPTY_CELL: int = 0
BOARD_WIDTH: int = 10
BOARD_HEIGHT: int = 20

# Spawn row of the piece anchor (the column is derived from the board width)
SPAWN_OFFSET: int = 2

# Tick cadence: gravity every DROP_TICKS, key auto-repeat release every REPEAT_TICKS
DROP_TICKS: int = 144
REPEAT_TICKS: int = 24

# Scoring
LINE_CLEAR_BONUS: int = 100
PLACEMENT_BONUS: int = 1

NUM_PIECES: int = 7
