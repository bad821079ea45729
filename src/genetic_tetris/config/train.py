# src/genetic_tetris/config/train.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator

from genetic_tetris.config.base import ConfigBase
from genetic_tetris.game.core.constants import BOARD_HEIGHT, BOARD_WIDTH
from genetic_tetris.game.rendering.base import DrawConfig
from planning_ga.ga import GAConfig, GAFitnessConfig

DrawKind = Literal["all", "none", "every"]


class GAParams(ConfigBase):
    """
    Optimizer hyper-parameters.

    selection_size=None means population_size // 10 (at least 1).
    """

    generations: int = Field(default=3, ge=1)
    population_size: int = Field(default=500, ge=1)
    selection_size: Optional[int] = Field(default=None, ge=1)
    crossover_prob: float = Field(default=0.5, ge=0.0, le=1.0)
    mutation_rate: float = Field(default=0.15, ge=0.0, le=1.0)
    init_std: float = Field(default=100.0, gt=0.0)
    seed: Optional[int] = None

    @property
    def resolved_selection_size(self) -> int:
        if self.selection_size is not None:
            return int(self.selection_size)
        return max(1, int(self.population_size) // 10)

    def to_ga_config(self) -> GAConfig:
        return GAConfig(
            population_size=int(self.population_size),
            selection_size=self.resolved_selection_size,
            crossover_prob=float(self.crossover_prob),
            mutation_rate=float(self.mutation_rate),
            init_std=float(self.init_std),
            seed=self.seed,
        )


class FitnessParams(ConfigBase):
    games: int = Field(default=5, ge=1)
    max_steps: Optional[int] = Field(default=None, ge=1)
    board_width: int = Field(default=BOARD_WIDTH, ge=4)
    board_height: int = Field(default=BOARD_HEIGHT, ge=4)

    def to_fitness_config(self) -> GAFitnessConfig:
        return GAFitnessConfig(games=int(self.games), max_steps=self.max_steps)


class WatchParams(ConfigBase):
    """Post-training demo game."""

    enabled: bool = False
    draw: DrawKind = "all"
    draw_every: int = Field(default=1, ge=1)
    cell: int = Field(default=30, ge=4)
    fps: int = Field(default=0, ge=0)

    @field_validator("draw", mode="before")
    @classmethod
    def _draw_lower(cls, v: object) -> str:
        return str(v).strip().lower()

    def draw_config(self) -> DrawConfig:
        if self.draw == "none":
            return DrawConfig.no_frames()
        if self.draw == "every":
            return DrawConfig.every_n(int(self.draw_every))
        return DrawConfig.all_frames()


class TrainExperimentConfig(ConfigBase):
    log_level: str = "info"
    ga: GAParams = Field(default_factory=GAParams)
    fitness: FitnessParams = Field(default_factory=FitnessParams)
    watch: WatchParams = Field(default_factory=WatchParams)

    @field_validator("log_level", mode="before")
    @classmethod
    def _log_level_default(cls, v: object) -> str:
        if v is None:
            return "info"
        s = str(v).strip().lower()
        return s if s else "info"

    @model_validator(mode="after")
    def _selection_fits_population(self) -> "TrainExperimentConfig":
        if self.ga.resolved_selection_size > int(self.ga.population_size):
            raise ValueError(
                f"ga.selection_size ({self.ga.resolved_selection_size}) must not exceed "
                f"ga.population_size ({self.ga.population_size})"
            )
        return self


__all__ = ["DrawKind", "FitnessParams", "GAParams", "TrainExperimentConfig", "WatchParams"]
