# SPDX-License-Identifier: MIT
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from loguru import logger

from evosim.core.config import SimulationConfig, apply_overrides, load_config
from evosim.core.exceptions import ConfigurationError
from evosim.core.logger_setup import setup_logger
from evosim.core.simulation_backend import EvolutionBackend


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Headless neuroevolution simulator")
    parser.add_argument(
        "-g",
        "--generations",
        type=int,
        default=1,
        help="Number of generations to fast-forward (default: 1)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random source; omit for a fresh one every run",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a JSON file with config sections (world, brain, eye, sim, ga)",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="SECTION.KEY=VALUE",
        help="Override one config value, e.g. --set world.animals=100 (repeatable)",
    )
    parser.add_argument(
        "--stats-csv",
        type=str,
        help="Write per-generation fitness statistics to this CSV file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Also write logs to this file",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SimulationConfig:
    config = load_config(Path(args.config).expanduser()) if args.config else SimulationConfig()
    return apply_overrides(config, args.overrides).validate()


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(list(argv if argv is not None else sys.argv[1:]))
    setup_logger(args.log_level, Path(args.log_file) if args.log_file else None)

    try:
        config = build_config(args)
    except ConfigurationError as exc:
        logger.error("Invalid configuration: {}", exc)
        return 2

    backend = EvolutionBackend(config, seed=args.seed)
    logger.info(
        "Training {} generation(s): {} prey, {} predators, {} foods, topology {}",
        args.generations,
        config.world.animals,
        config.world.predators,
        config.world.foods,
        config.topology(),
    )
    for _ in range(args.generations):
        for statistics in backend.train(1):
            logger.info("\n{}", statistics)

    if args.stats_csv:
        path = Path(args.stats_csv).expanduser()
        backend.recorder.export_csv(path)
        logger.info("Wrote {} statistics rows to {}", backend.recorder.sample_count(), path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
