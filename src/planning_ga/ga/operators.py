# src/planning_ga/ga/operators.py
from __future__ import annotations

from typing import Sequence

import numpy as np

from planning_ga.ga.config import GAConfig
from planning_ga.ga.types import GAStats

# Cumulative shares this close to 1.0 count as a complete wheel.
_WHEEL_ATOL = 1e-9


def init_population(*, cfg: GAConfig, num_params: int, rng: np.random.Generator) -> np.ndarray:
    if num_params <= 0:
        raise ValueError("num_params must be >= 1")
    return rng.normal(loc=0.0, scale=float(cfg.init_std), size=(int(cfg.population_size), num_params))


def best_index(scores: Sequence[float]) -> int:
    """Index of the highest score; ties resolve to the LAST maximal entry."""
    arr = np.asarray(scores, dtype=np.float64)
    if arr.ndim != 1 or arr.size == 0:
        raise ValueError("scores must be a non-empty 1D sequence")
    return int(arr.size - 1 - int(np.argmax(arr[::-1])))


def normalize_fitness(scores: Sequence[float]) -> np.ndarray:
    arr = np.asarray(scores, dtype=np.float64)
    if arr.ndim != 1 or arr.size == 0:
        raise RuntimeError("cannot normalize an empty fitness array")
    if np.any(arr < 0.0):
        raise RuntimeError("fitness values must be non-negative for roulette-wheel selection")
    total = float(arr.sum())
    if total <= 0.0:
        raise RuntimeError("fitness values sum to zero; roulette wheel has no mass")
    return arr / total


def roulette_wheel(probs: Sequence[float], r: float) -> int:
    """
    Walk the cumulative distribution and return the first index whose
    cumulative share exceeds `r`.

    `probs` must be normalized. Anything else is a bug upstream and raises.
    """
    p = np.asarray(probs, dtype=np.float64)
    if p.ndim != 1 or p.size == 0:
        raise RuntimeError("roulette wheel called on an empty distribution")
    cum = np.cumsum(p)
    hits = np.flatnonzero(cum > float(r))
    if hits.size > 0:
        return int(hits[0])
    if abs(float(cum[-1]) - 1.0) <= _WHEEL_ATOL:
        # round-off: r landed in the sliver between cum[-1] and 1.0
        return int(np.flatnonzero(p > 0.0)[-1])
    raise RuntimeError("roulette wheel called on unnormalized probabilities")


def select_pool(*, probs: Sequence[float], size: int, rng: np.random.Generator) -> np.ndarray:
    """Fitness-proportional sampling with replacement. Returns candidate indices."""
    if int(size) < 1:
        raise ValueError("selection size must be >= 1")
    return np.asarray([roulette_wheel(probs, float(rng.random())) for _ in range(int(size))], dtype=np.int64)


def crossover(a: np.ndarray, b: np.ndarray, p: float, rng: np.random.Generator) -> np.ndarray:
    """Uniform crossover: each component comes from `a` with probability p, else from `b`."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != b.shape:
        raise ValueError(f"parent shape mismatch: {a.shape} vs {b.shape}")
    mask = rng.random(a.shape) < float(p)
    return np.where(mask, a, b)


def nudge_random_component(weights: np.ndarray, *, std: float, rng: np.random.Generator) -> np.ndarray:
    """Add Normal(0, std) / std to one uniformly chosen component (a unit-scale nudge)."""
    out = np.array(weights, dtype=np.float64, copy=True)
    idx = int(rng.integers(0, out.shape[0]))
    out[idx] += float(rng.normal(loc=0.0, scale=float(std))) / float(std)
    return out


def reset_random_component(weights: np.ndarray, *, std: float, rng: np.random.Generator) -> np.ndarray:
    """Replace one uniformly chosen component with a fresh Normal(0, std) sample."""
    out = np.array(weights, dtype=np.float64, copy=True)
    idx = int(rng.integers(0, out.shape[0]))
    out[idx] = float(rng.normal(loc=0.0, scale=float(std)))
    return out


def generation_stats(*, population: np.ndarray, scores: Sequence[float], generation: int) -> GAStats:
    if population.shape[0] != len(scores):
        raise ValueError("population and scores length mismatch")
    idx = best_index(scores)
    return GAStats(
        generation=int(generation),
        best_score=float(scores[idx]),
        mean_score=float(np.mean(np.asarray(scores, dtype=np.float64))),
        best_index=idx,
        best_weights=population[idx].tolist(),
    )


def breed_population(
    *,
    cfg: GAConfig,
    population: np.ndarray,
    scores: Sequence[float],
    rng: np.random.Generator,
) -> np.ndarray:
    """Roulette-wheel selection pool, then uniform crossover + optional nudge per slot."""
    if population.shape[0] != len(scores):
        raise ValueError("population and scores length mismatch")

    probs = normalize_fitness(scores)
    pool = population[select_pool(probs=probs, size=int(cfg.selection_size), rng=rng)]

    next_pop = np.empty_like(population)
    for i in range(population.shape[0]):
        ia = int(rng.integers(0, pool.shape[0]))
        ib = int(rng.integers(0, pool.shape[0]))
        child = crossover(pool[ia], pool[ib], float(cfg.crossover_prob), rng)
        if rng.random() < float(cfg.mutation_rate):
            child = nudge_random_component(child, std=float(cfg.init_std), rng=rng)
        next_pop[i] = child
    return next_pop


__all__ = [
    "best_index",
    "breed_population",
    "crossover",
    "generation_stats",
    "init_population",
    "normalize_fitness",
    "nudge_random_component",
    "reset_random_component",
    "roulette_wheel",
    "select_pool",
]
