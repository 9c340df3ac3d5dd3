from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import Sequence

from . import evaluation
from .simulator import TRIAL_COUNT, SimulationConfig


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare contiguous memory placement strategies.")
    parser.add_argument("--trials", type=int, default=TRIAL_COUNT, help="Number of independent trials to average over.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for workload generation.")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics written to stderr.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        config = dataclasses.replace(SimulationConfig(), trials=args.trials)
    except ValueError as exc:
        raise SystemExit(f"partition-sim: error: {exc}") from exc

    outcome = evaluation.run_experiment(config, seed=args.seed)

    for name, average in outcome.averages.items():
        print(f"{name}: {average}")


if __name__ == "__main__":
    main()
