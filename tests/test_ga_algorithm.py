# tests/test_ga_algorithm.py
from __future__ import annotations

from typing import Any, Sequence

import numpy as np
import pytest

from planning_ga.callbacks import PlanningCallback
from planning_ga.ga import GAAlgorithm, GAConfig, GAFitnessConfig, hill_climb
from planning_ga.policies import VectorParamPolicy


class _AbsSumPolicy(VectorParamPolicy):
    """Fitness = sum of |params|; no environment needed."""

    def __init__(self, n: int = 3) -> None:
        self.params = np.zeros(n)
        self.calls: list[tuple[int, int | None]] = []

    @property
    def num_params(self) -> int:
        return int(self.params.shape[0])

    def get_params(self) -> Sequence[float]:
        return self.params.tolist()

    def set_params(self, params: Sequence[float]) -> None:
        self.params = np.asarray(params, dtype=np.float64)

    def predict(self, *, env: Any) -> Any:
        return None

    def evaluate(self, *, env: Any, episodes: int, max_steps: int | None = None) -> float:
        self.calls.append((episodes, max_steps))
        return float(np.abs(self.params).sum())


class _ZeroPolicy(_AbsSumPolicy):
    def evaluate(self, *, env: Any, episodes: int, max_steps: int | None = None) -> float:
        return 0.0


class _Recorder(PlanningCallback):
    def __init__(self) -> None:
        super().__init__()
        self.events: list[str] = []

    def on_start(self, **kwargs: Any) -> None:
        self.events.append("start")

    def on_event(self, *, event: str, **kwargs: Any) -> None:
        self.events.append(event)

    def on_end(self, **kwargs: Any) -> None:
        self.events.append("end")


def test_single_candidate_single_generation_returns_itself() -> None:
    policy = _AbsSumPolicy()
    algo = GAAlgorithm(policy=policy, env=None, cfg=GAConfig(population_size=1, selection_size=1, seed=3))
    initial = algo.population[0].copy()

    stats = algo.learn(generations=1)
    assert len(stats) == 1
    assert np.array_equal(algo.best_weights, initial)
    assert algo.best_score == pytest.approx(float(np.abs(initial).sum()))


def test_final_generation_best_is_reported() -> None:
    policy = _AbsSumPolicy()
    algo = GAAlgorithm(policy=policy, env=None, cfg=GAConfig(population_size=6, selection_size=3, seed=0))
    stats = algo.learn(generations=3)

    assert [s.generation for s in stats] == [0, 1, 2]
    last = stats[-1]
    assert algo.best_score == last.best_score
    # no breeding after the final generation
    assert np.array_equal(algo.population[last.best_index], algo.best_weights)
    assert algo.best_score == pytest.approx(float(np.abs(algo.best_weights).sum()))


def test_fitness_uses_configured_games_and_step_cap() -> None:
    policy = _AbsSumPolicy()
    algo = GAAlgorithm(
        policy=policy,
        env=None,
        cfg=GAConfig(population_size=2, selection_size=1, seed=0),
        fitness_cfg=GAFitnessConfig(games=4, max_steps=50),
    )
    algo.learn(generations=1)
    assert policy.calls == [(4, 50), (4, 50)]


def test_callbacks_see_every_event() -> None:
    rec = _Recorder()
    algo = GAAlgorithm(policy=_AbsSumPolicy(), env=None, cfg=GAConfig(population_size=2, selection_size=1, seed=1))
    algo.learn(generations=2, callback=[rec])
    assert rec.events == [
        "start",
        "generation_start",
        "candidate",
        "candidate",
        "generation_end",
        "generation_start",
        "candidate",
        "candidate",
        "generation_end",
        "end",
    ]


def test_zero_fitness_cannot_breed() -> None:
    algo = GAAlgorithm(policy=_ZeroPolicy(), env=None, cfg=GAConfig(population_size=3, selection_size=1, seed=0))
    with pytest.raises(RuntimeError, match="sum to zero"):
        algo.learn(generations=2)


def test_learn_rejects_zero_generations() -> None:
    algo = GAAlgorithm(policy=_AbsSumPolicy(), env=None, cfg=GAConfig(population_size=2, selection_size=1))
    with pytest.raises(ValueError, match="generations"):
        algo.learn(generations=0)


def test_config_validation() -> None:
    with pytest.raises(ValueError, match="mutation_rate"):
        GAAlgorithm(policy=_AbsSumPolicy(), env=None, cfg=GAConfig(mutation_rate=1.5))
    with pytest.raises(ValueError, match="games"):
        GAAlgorithm(policy=_AbsSumPolicy(), env=None, fitness_cfg=GAFitnessConfig(games=0))


def test_tell_checks_score_count() -> None:
    algo = GAAlgorithm(policy=_AbsSumPolicy(), env=None, cfg=GAConfig(population_size=2, selection_size=1, seed=0))
    with pytest.raises(ValueError, match="population size"):
        algo.tell([1.0])


def test_hill_climb_keeps_best_vector() -> None:
    policy = _AbsSumPolicy(n=2)
    best_weights, best = hill_climb(
        policy=policy,
        env=None,
        weights=[5.0, 0.0],
        iterations=1,
        rng=np.random.default_rng(0),
    )
    assert best == 5.0
    assert best_weights.tolist() == [5.0, 0.0]
    assert policy.get_params() == [5.0, 0.0]


def test_hill_climb_never_gets_worse() -> None:
    policy = _AbsSumPolicy(n=4)
    _, best = hill_climb(
        policy=policy,
        env=None,
        weights=[1.0, 1.0, 1.0, 1.0],
        iterations=20,
        rng=np.random.default_rng(9),
    )
    assert best >= 4.0
