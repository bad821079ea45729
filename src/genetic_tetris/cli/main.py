# src/genetic_tetris/cli/main.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, Sequence

from genetic_tetris.agents import Agent, HeuristicAgent, RandomAgent
from genetic_tetris.config.io import load_yaml
from genetic_tetris.config.train import FitnessParams, TrainExperimentConfig, WatchParams
from genetic_tetris.game.core.metrics import N_HEURISTICS
from genetic_tetris.training.runner import format_weights, play_demo, run_ga_experiment
from genetic_tetris.utils.logging import setup_logger

# roughness, height, full lines, gaps (lower loss is better)
DEFAULT_PLAY_WEIGHTS: tuple[float, ...] = (0.18, 0.51, -0.76, 0.36)


def _add_watch_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--watch", action="store_true", default=None, help="render the game with pygame")
    ap.add_argument("--draw", type=str, default=None, choices=["all", "none", "every"])
    ap.add_argument("--draw-every", dest="draw_every", type=int, default=None, help="with --draw every")
    ap.add_argument("--cell", type=int, default=None, help="cell size in pixels")
    ap.add_argument("--fps", type=int, default=None, help="render FPS cap (0 = uncapped)")


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="genetic-tetris",
        description="Evolve and run heuristic Tetris agents.",
        allow_abbrev=False,
    )
    sub = ap.add_subparsers(dest="command", required=True)

    tr = sub.add_parser("train", help="run the genetic optimizer, then play one game with the result")
    tr.add_argument("-cfg", "--config-file", dest="config_file", default=None, help="path to a YAML config file")
    tr.add_argument("--games", type=int, default=None, help="games per fitness evaluation")
    tr.add_argument("--generations", type=int, default=None)
    tr.add_argument("--population", type=int, default=None)
    tr.add_argument("--selection", type=int, default=None, help="selection pool size (default: population/10)")
    tr.add_argument("--mutation", type=float, default=None, help="mutation rate in [0, 1]")
    tr.add_argument("--max-steps", dest="max_steps", type=int, default=None, help="cap agent steps per game")
    tr.add_argument("--seed", type=int, default=None)
    tr.add_argument("--log-level", dest="log_level", type=str, default=None)
    _add_watch_args(tr)

    pl = sub.add_parser("play", help="play one game with a single agent")
    pl.add_argument("--agent", type=str, default="heuristic", choices=["random", "heuristic"])
    pl.add_argument("--weights", type=float, nargs=N_HEURISTICS, default=None, metavar="W")
    pl.add_argument("--max-steps", dest="max_steps", type=int, default=None)
    pl.add_argument("--seed", type=int, default=None)
    pl.add_argument("--log-level", dest="log_level", type=str, default="info")
    _add_watch_args(pl)

    return ap.parse_args(argv)


def _set_if_given(block: Dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        block[key] = value


def _watch_overrides(args: argparse.Namespace, block: Dict[str, Any]) -> None:
    _set_if_given(block, "enabled", args.watch)
    _set_if_given(block, "draw", args.draw)
    _set_if_given(block, "draw_every", args.draw_every)
    _set_if_given(block, "cell", args.cell)
    _set_if_given(block, "fps", args.fps)


def build_train_config(args: argparse.Namespace) -> TrainExperimentConfig:
    """YAML file (if any) first, then explicit command-line flags on top."""
    data: Dict[str, Any] = {}
    if args.config_file:
        p = Path(str(args.config_file)).expanduser().resolve()
        if not p.is_file():
            raise FileNotFoundError(f"--config-file not found: {p}")
        data = load_yaml(p)

    ga = dict(data.get("ga", {}) or {})
    fitness = dict(data.get("fitness", {}) or {})
    watch = dict(data.get("watch", {}) or {})

    _set_if_given(ga, "generations", args.generations)
    _set_if_given(ga, "population_size", args.population)
    _set_if_given(ga, "selection_size", args.selection)
    _set_if_given(ga, "mutation_rate", args.mutation)
    _set_if_given(ga, "seed", args.seed)
    _set_if_given(fitness, "games", args.games)
    _set_if_given(fitness, "max_steps", args.max_steps)
    _watch_overrides(args, watch)

    out = dict(data)
    out["ga"] = ga
    out["fitness"] = fitness
    out["watch"] = watch
    _set_if_given(out, "log_level", args.log_level)
    return TrainExperimentConfig.model_validate(out)


def _run_train(args: argparse.Namespace) -> int:
    logger = setup_logger(name="genetic_tetris.ga", use_rich=True, level=str(args.log_level or "info"))
    try:
        cfg = build_train_config(args)
        logger = setup_logger(name="genetic_tetris.ga", use_rich=True, level=str(cfg.log_level))
        run_ga_experiment(cfg, logger=logger)
    except Exception:
        logger.exception("[ga] training failed")
        raise
    return 0


def _run_play(args: argparse.Namespace) -> int:
    logger = setup_logger(name="genetic_tetris.play", use_rich=True, level=str(args.log_level))
    try:
        watch_block: Dict[str, Any] = {}
        _watch_overrides(args, watch_block)
        watch = WatchParams.model_validate(watch_block)
        fitness = FitnessParams(max_steps=args.max_steps)

        agent: Agent
        if args.agent == "random":
            agent = RandomAgent(seed=args.seed)
            logger.info("[play] agent=random")
        else:
            weights = args.weights if args.weights is not None else list(DEFAULT_PLAY_WEIGHTS)
            agent = HeuristicAgent(weights)
            logger.info("[play] agent=heuristic %s", format_weights(weights))

        play_demo(agent, fitness=fitness, watch=watch, seed=args.seed, logger=logger)
    except Exception:
        logger.exception("[play] game failed")
        raise
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.command == "train":
        return _run_train(args)
    return _run_play(args)


if __name__ == "__main__":
    raise SystemExit(main())
