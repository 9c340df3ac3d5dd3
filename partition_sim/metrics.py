from __future__ import annotations

from dataclasses import dataclass
from statistics import mean
from typing import Sequence


@dataclass(slots=True)
class ScoreStatistics:
    count: int
    total: int
    mean: float
    truncated_mean: int
    minimum: int
    maximum: int
    p50: float
    p90: float
    p99: float


def summarise(scores: Sequence[int]) -> ScoreStatistics:
    if not scores:
        return ScoreStatistics(
            count=0,
            total=0,
            mean=0.0,
            truncated_mean=0,
            minimum=0,
            maximum=0,
            p50=0.0,
            p90=0.0,
            p99=0.0,
        )
    total = sum(scores)
    return ScoreStatistics(
        count=len(scores),
        total=total,
        mean=mean(scores),
        truncated_mean=total // len(scores),
        minimum=min(scores),
        maximum=max(scores),
        p50=_percentile(scores, 50),
        p90=_percentile(scores, 90),
        p99=_percentile(scores, 99),
    )


def _percentile(values: Sequence[float], percentile: float) -> float:
    if not values:
        return 0.0
    sorted_values = sorted(values)
    k = (len(sorted_values) - 1) * percentile / 100
    f = int(k)
    c = min(f + 1, len(sorted_values) - 1)
    if f == c:
        return float(sorted_values[f])
    d0 = sorted_values[f] * (c - k)
    d1 = sorted_values[c] * (k - f)
    return d0 + d1
