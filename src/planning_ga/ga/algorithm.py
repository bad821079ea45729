# src/planning_ga/ga/algorithm.py
from __future__ import annotations

from typing import Any, Callable, Sequence

import numpy as np

from planning_ga.callbacks import PlanningCallback, wrap_callbacks
from planning_ga.ga.config import GAConfig, GAFitnessConfig
from planning_ga.ga.operators import (
    breed_population,
    generation_stats,
    init_population,
    reset_random_component,
)
from planning_ga.ga.types import GAStats
from planning_ga.policies import VectorParamPolicy


class GAAlgorithm:
    """
    Generational GA over flat weight vectors.

    Per generation: evaluate every candidate on `env`, record the generation's
    best, then (except on the final generation) breed the next population via
    roulette-wheel selection, uniform crossover and single-component nudges.

    best_weights/best_score always describe the MOST RECENT generation's best,
    not the best ever seen. There is no elitist carry-over.
    """

    def __init__(
        self,
        *,
        policy: VectorParamPolicy,
        env: Any,
        cfg: GAConfig | None = None,
        fitness_cfg: GAFitnessConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.policy = policy
        self.env = env
        self.cfg = cfg or GAConfig()
        self.fitness_cfg = fitness_cfg or GAFitnessConfig()
        self.cfg.validate()
        self.fitness_cfg.validate()

        self.rng = rng if rng is not None else np.random.default_rng(self.cfg.seed)
        self.population = init_population(cfg=self.cfg, num_params=policy.num_params, rng=self.rng)
        self.generation = 0
        self.stats: list[GAStats] = []
        self.best_weights = self.population[0].copy()
        self.best_score = 0.0

    def ask(self) -> np.ndarray:
        return self.population

    def tell(self, scores: Sequence[float], *, final: bool = False) -> GAStats:
        if len(scores) != self.population.shape[0]:
            raise ValueError("scores length must match population size")

        stats = generation_stats(population=self.population, scores=scores, generation=self.generation)
        self.best_score = float(stats.best_score)
        self.best_weights = self.population[int(stats.best_index)].copy()
        self.stats.append(stats)

        if not final:
            self.population = breed_population(
                cfg=self.cfg,
                population=self.population,
                scores=scores,
                rng=self.rng,
            )
        self.generation += 1
        return stats

    def evaluate_weights(self, *, weights: Sequence[float]) -> float:
        self.policy.set_params(weights)
        return float(
            self.policy.evaluate(
                env=self.env,
                episodes=int(self.fitness_cfg.games),
                max_steps=self.fitness_cfg.max_steps,
            )
        )

    def evaluate_population(
        self,
        *,
        on_candidate: Callable[[int, float], None] | None = None,
        callback: PlanningCallback | None = None,
    ) -> list[float]:
        scores: list[float] = []
        for i in range(self.population.shape[0]):
            weights = self.population[i].tolist()
            score = self.evaluate_weights(weights=weights)
            scores.append(score)
            if on_candidate is not None:
                on_candidate(i, score)
            if callback is not None:
                callback.on_event(
                    event="candidate",
                    generation=int(self.generation),
                    candidate_index=int(i),
                    score=float(score),
                    weights=weights,
                )
        return scores

    def learn(
        self,
        *,
        generations: int,
        on_generation: Callable[[GAStats], None] | None = None,
        on_candidate: Callable[[int, float], None] | None = None,
        callback: PlanningCallback | list[PlanningCallback] | None = None,
    ) -> list[GAStats]:
        if generations < 1:
            raise ValueError("generations must be >= 1")
        cb = wrap_callbacks(callback)
        if cb is not None:
            cb.init_callback(self)
            cb.on_start(
                generations=int(generations),
                population_size=int(self.population.shape[0]),
                ga_config=self.cfg,
                fitness_config=self.fitness_cfg,
            )
        for g in range(int(generations)):
            if cb is not None:
                cb.on_event(
                    event="generation_start",
                    generation=int(self.generation),
                    population=self.population,
                )
            scores = self.evaluate_population(on_candidate=on_candidate, callback=cb)
            stats = self.tell(scores, final=(g == int(generations) - 1))
            if on_generation is not None:
                on_generation(stats)
            if cb is not None:
                cb.on_event(
                    event="generation_end",
                    generation=int(stats.generation),
                    stats=stats,
                )
        if cb is not None:
            cb.on_end(
                stats=list(self.stats),
                best_score=float(self.best_score),
                best_weights=self.best_weights.tolist(),
            )
        return list(self.stats)


def hill_climb(
    *,
    policy: VectorParamPolicy,
    env: Any,
    weights: Sequence[float],
    iterations: int,
    fitness_cfg: GAFitnessConfig | None = None,
    rng: np.random.Generator | None = None,
    best_score: float = 0.0,
    init_std: float = 100.0,
) -> tuple[np.ndarray, float]:
    """
    Mutation-only training.

    Each iteration scores the current vector, keeps it if it beats `best_score`,
    then replaces one random component with a fresh Normal(0, init_std) draw.
    Mutations chain from the current vector, not from the best one. The policy
    is left holding the best vector found.
    """
    if iterations < 1:
        raise ValueError("iterations must be >= 1")
    fitness_cfg = fitness_cfg or GAFitnessConfig()
    fitness_cfg.validate()
    rng = rng if rng is not None else np.random.default_rng()

    current = np.array(weights, dtype=np.float64, copy=True)
    best_weights = current.copy()
    best = float(best_score)
    for _ in range(int(iterations)):
        policy.set_params(current.tolist())
        score = float(
            policy.evaluate(env=env, episodes=int(fitness_cfg.games), max_steps=fitness_cfg.max_steps)
        )
        if score > best:
            best = score
            best_weights = current.copy()
        current = reset_random_component(current, std=float(init_std), rng=rng)

    policy.set_params(best_weights.tolist())
    return best_weights, best


__all__ = ["GAAlgorithm", "hill_climb"]
