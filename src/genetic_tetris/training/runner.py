# src/genetic_tetris/training/runner.py
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

import numpy as np
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)

from genetic_tetris.agents import Agent, HeuristicAgent, run_game
from genetic_tetris.config.train import FitnessParams, TrainExperimentConfig, WatchParams
from genetic_tetris.game.core.game import GameState
from genetic_tetris.game.core.metrics import HEURISTIC_NAMES
from genetic_tetris.game.rendering.base import NullRenderer, Renderer
from genetic_tetris.utils.logging import setup_logger
from planning_ga.callbacks import PlanningCallback
from planning_ga.ga import GAAlgorithm, GAConfig, GAFitnessConfig, GAStats

StateFactory = Callable[[], GameState]


@dataclass(frozen=True)
class TrainResult:
    """Best weights and mean score of the FINAL generation, plus per-generation stats."""

    weights: list[float]
    score: float
    stats: list[GAStats]


class GenerationLogCallback(PlanningCallback):
    """Logs `Generation {n} :: {best}` (1-based) when a generation finishes."""

    def __init__(self, logger: logging.Logger) -> None:
        super().__init__()
        self.logger = logger

    def on_event(self, *, event: str, **kwargs: Any) -> None:
        if event != "generation_end":
            return
        stats: GAStats = kwargs["stats"]
        self.logger.info("Generation %d :: %s", int(stats.generation) + 1, float(stats.best_score))


def train(
    games: int = 5,
    generations: int = 3,
    population_size: int = 500,
    selection_size: Optional[int] = None,
    mutation_rate: float = 0.15,
    *,
    crossover_prob: float = 0.5,
    init_std: float = 100.0,
    max_steps: Optional[int] = None,
    seed: Optional[int] = None,
    state_factory: Optional[StateFactory] = None,
    callback: PlanningCallback | list[PlanningCallback] | None = None,
    on_generation: Callable[[GAStats], None] | None = None,
    on_candidate: Callable[[int, float], None] | None = None,
) -> TrainResult:
    """
    Evolve HeuristicAgent weights.

    All candidates share one GameState built by `state_factory` (default: a
    standard board seeded from `seed`). Errors raised while building it
    propagate unchanged.
    """
    if selection_size is None:
        selection_size = max(1, int(population_size) // 10)

    return train_from_configs(
        ga_cfg=GAConfig(
            population_size=int(population_size),
            selection_size=int(selection_size),
            crossover_prob=float(crossover_prob),
            mutation_rate=float(mutation_rate),
            init_std=float(init_std),
            seed=seed,
        ),
        fitness_cfg=GAFitnessConfig(games=int(games), max_steps=max_steps),
        generations=int(generations),
        state_factory=state_factory,
        callback=callback,
        on_generation=on_generation,
        on_candidate=on_candidate,
    )


def train_from_configs(
    *,
    ga_cfg: GAConfig,
    fitness_cfg: GAFitnessConfig,
    generations: int,
    state_factory: Optional[StateFactory] = None,
    callback: PlanningCallback | list[PlanningCallback] | None = None,
    on_generation: Callable[[GAStats], None] | None = None,
    on_candidate: Callable[[int, float], None] | None = None,
) -> TrainResult:
    rng = np.random.default_rng(ga_cfg.seed)
    state = state_factory() if state_factory is not None else GameState(rng=rng)

    algo = GAAlgorithm(
        policy=HeuristicAgent(),
        env=state,
        cfg=ga_cfg,
        fitness_cfg=fitness_cfg,
        rng=rng,
    )
    stats = algo.learn(
        generations=int(generations),
        on_generation=on_generation,
        on_candidate=on_candidate,
        callback=callback,
    )
    return TrainResult(weights=algo.best_weights.tolist(), score=float(algo.best_score), stats=stats)


def make_renderer(*, fitness: FitnessParams, watch: WatchParams) -> Renderer:
    if not watch.enabled:
        return NullRenderer()
    # pygame is the optional `render` extra
    from genetic_tetris.game.rendering.pygame import PygameRenderer, WindowSpec

    return PygameRenderer(
        board_w=int(fitness.board_width),
        board_h=int(fitness.board_height),
        spec=WindowSpec(cell=int(watch.cell), fps=int(watch.fps)),
    )


def play_demo(
    agent: Agent,
    *,
    fitness: FitnessParams,
    watch: WatchParams,
    seed: Optional[int] = None,
    logger: logging.Logger,
    renderer: Optional[Renderer] = None,
) -> int:
    """Play one game on a fresh board and log the score. The renderer is closed afterwards."""
    state = GameState(width=int(fitness.board_width), height=int(fitness.board_height), seed=seed)
    renderer = renderer if renderer is not None else make_renderer(fitness=fitness, watch=watch)
    t0 = time.perf_counter()
    try:
        score = run_game(
            agent,
            state,
            renderer=renderer,
            draw=watch.draw_config(),
            max_steps=fitness.max_steps,
        )
    finally:
        close = getattr(renderer, "close", None)
        if callable(close):
            close()
    logger.info(
        "[play] score=%d lines=%d game_over=%s (%.2fs)",
        int(score),
        int(state.lines),
        bool(state.game_over),
        time.perf_counter() - t0,
    )
    return int(score)


def format_weights(weights: Sequence[float]) -> str:
    return ", ".join(f"{name}={float(w):.4f}" for name, w in zip(HEURISTIC_NAMES, weights))


def run_ga_experiment(cfg: TrainExperimentConfig, *, logger: Optional[logging.Logger] = None) -> TrainResult:
    logger = logger or setup_logger(name="genetic_tetris.ga", use_rich=True, level=str(cfg.log_level))

    ga = cfg.ga
    fitness = cfg.fitness
    selection_size = ga.resolved_selection_size
    logger.info(
        "[ga] games=%d generations=%d pop=%d selection=%d mutation=%.3f seed=%s",
        int(fitness.games),
        int(ga.generations),
        int(ga.population_size),
        int(selection_size),
        float(ga.mutation_rate),
        ga.seed,
    )

    rng = np.random.default_rng(ga.seed)

    def _state_factory() -> GameState:
        return GameState(width=int(fitness.board_width), height=int(fitness.board_height), rng=rng)

    generations = int(ga.generations)
    pop_size = int(ga.population_size)

    t0 = time.perf_counter()
    progress = Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        TimeRemainingColumn(),
    )
    with progress:
        gen_task = progress.add_task("GA generations", total=generations)
        cand_task = progress.add_task("Individuals", total=pop_size)
        current_gen = 0

        def _on_generation(stats: GAStats) -> None:
            progress.update(gen_task, advance=1, description=f"GA gen {int(stats.generation) + 1}")

        def _on_candidate(idx: int, score: float) -> None:
            nonlocal current_gen
            if idx == 0:
                current_gen += 1
                progress.update(
                    cand_task,
                    completed=0,
                    total=pop_size,
                    description=f"Individuals (gen {current_gen})",
                )
            _ = score
            progress.update(cand_task, advance=1)

        result = train_from_configs(
            ga_cfg=ga.to_ga_config(),
            fitness_cfg=fitness.to_fitness_config(),
            generations=generations,
            state_factory=_state_factory,
            callback=GenerationLogCallback(logger),
            on_generation=_on_generation,
            on_candidate=_on_candidate,
        )

    logger.info(f"[timing] training: {time.perf_counter() - t0:.2f}s")
    logger.info("[ga] weights: %s", format_weights(result.weights))
    logger.info("[ga] score: %s", float(result.score))

    play_demo(
        HeuristicAgent(result.weights),
        fitness=fitness,
        watch=cfg.watch,
        seed=ga.seed,
        logger=logger,
    )
    logger.info("[done]")
    return result


__all__ = [
    "GenerationLogCallback",
    "StateFactory",
    "TrainResult",
    "format_weights",
    "make_renderer",
    "play_demo",
    "run_ga_experiment",
    "train",
    "train_from_configs",
]
