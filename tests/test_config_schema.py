# tests/test_config_schema.py
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from genetic_tetris.config.io import load_train_config
from genetic_tetris.config.train import FitnessParams, GAParams, TrainExperimentConfig, WatchParams


def test_defaults_match_reference_run() -> None:
    cfg = TrainExperimentConfig()
    assert cfg.fitness.games == 5
    assert cfg.ga.generations == 3
    assert cfg.ga.population_size == 500
    assert cfg.ga.resolved_selection_size == 50
    assert cfg.ga.mutation_rate == 0.15
    assert cfg.watch.enabled is False


def test_selection_defaults_to_tenth_of_population() -> None:
    assert GAParams(population_size=25).resolved_selection_size == 2
    assert GAParams(population_size=5).resolved_selection_size == 1
    assert GAParams(population_size=5, selection_size=3).to_ga_config().selection_size == 3


def test_rejects_unknown_keys() -> None:
    with pytest.raises(ValidationError, match="extra"):
        TrainExperimentConfig.model_validate({"ga": {"population": 10}})


def test_rejects_out_of_range_values() -> None:
    with pytest.raises(ValidationError):
        GAParams(mutation_rate=1.5)
    with pytest.raises(ValidationError):
        GAParams(population_size=0)
    with pytest.raises(ValidationError):
        FitnessParams(games=0)
    with pytest.raises(ValidationError):
        WatchParams(draw="sometimes")


def test_rejects_selection_larger_than_population() -> None:
    with pytest.raises(ValidationError, match="selection_size"):
        TrainExperimentConfig.model_validate({"ga": {"population_size": 4, "selection_size": 5}})


def test_configs_are_frozen() -> None:
    cfg = GAParams()
    with pytest.raises(ValidationError):
        cfg.population_size = 10  # type: ignore[misc]


def test_watch_draw_modes() -> None:
    assert WatchParams(draw="ALL").draw_config().mode == "all"
    assert WatchParams(draw="none").draw_config().should_render(0) is False
    every = WatchParams(draw="every", draw_every=3).draw_config()
    assert every.mode == "every_n"
    assert every.should_render(6) is True
    assert every.should_render(7) is False


def test_load_train_config_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "ga.yaml"
    path.write_text(
        "log_level: DEBUG\n"
        "ga:\n"
        "  population_size: 20\n"
        "  generations: 2\n"
        "fitness:\n"
        "  games: 1\n"
        "  max_steps: 40\n",
        encoding="utf-8",
    )
    cfg = load_train_config(path)
    assert cfg.log_level == "debug"
    assert cfg.ga.population_size == 20
    assert cfg.ga.resolved_selection_size == 2
    assert cfg.fitness.to_fitness_config().max_steps == 40


def test_bundled_config_is_valid() -> None:
    path = Path(__file__).resolve().parents[1] / "configs" / "ga.yaml"
    cfg = load_train_config(path)
    assert cfg == TrainExperimentConfig()
