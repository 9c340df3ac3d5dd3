from __future__ import annotations

import logging
from dataclasses import dataclass, field
from random import Random
from typing import Sequence

from . import metrics
from .placement import STRATEGIES, StrategyFactory
from .process import ProcessRequest
from .simulator import Simulation, SimulationConfig, SimulationResult
from .workload import generate_stream

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ExperimentOutcome:
    trials: int
    totals: dict[str, int] = field(default_factory=dict)
    scores: dict[str, list[int]] = field(default_factory=dict)

    @property
    def averages(self) -> dict[str, int]:
        """Integer-truncated mean score per strategy."""

        if self.trials == 0:
            return {name: 0 for name in self.totals}
        return {name: total // self.trials for name, total in self.totals.items()}

    @property
    def statistics(self) -> dict[str, metrics.ScoreStatistics]:
        return {name: metrics.summarise(values) for name, values in self.scores.items()}

    def record(self, results: Sequence[SimulationResult]) -> None:
        for result in results:
            self.totals[result.strategy] = self.totals.get(result.strategy, 0) + result.total_time
            self.scores.setdefault(result.strategy, []).append(result.total_time)


def run_trial(
    factories: Sequence[tuple[str, StrategyFactory]],
    requests: Sequence[ProcessRequest],
    *,
    config: SimulationConfig | None = None,
) -> list[SimulationResult]:
    """Run every strategy against the same stream; the stream is reset after each run."""

    results: list[SimulationResult] = []
    for name, factory in factories:
        strategy = factory()
        result = Simulation(strategy=strategy, requests=requests, config=config).run()
        result.strategy = name
        results.append(result)
    return results


def run_experiment(
    config: SimulationConfig | None = None,
    *,
    seed: int | None = None,
    factories: Sequence[tuple[str, StrategyFactory]] = STRATEGIES,
) -> ExperimentOutcome:
    config = config or SimulationConfig()
    master = Random(seed)
    outcome = ExperimentOutcome(trials=config.trials, totals={name: 0 for name, _ in factories}, scores={name: [] for name, _ in factories})
    logger.info(
        "running %d trials of %d requests on %d memory units",
        config.trials,
        config.stream_length,
        config.memory_capacity,
    )
    for trial in range(config.trials):
        trial_rng = Random(master.getrandbits(64))
        requests = generate_stream(
            config.stream_length,
            rng=trial_rng,
            loops=config.demand_loops,
            ulimit=config.demand_ulimit,
        )
        results = run_trial(factories, requests, config=config)
        outcome.record(results)
        logger.debug("trial %d: %s", trial, ", ".join(f"{r.strategy}={r.total_time}" for r in results))
    for name, stats in outcome.statistics.items():
        logger.info(
            "%s: mean=%.2f min=%d p50=%.1f p90=%.1f max=%d",
            name,
            stats.mean,
            stats.minimum,
            stats.p50,
            stats.p90,
            stats.maximum,
        )
    return outcome
