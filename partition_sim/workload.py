from __future__ import annotations

from collections.abc import Iterable
from random import Random

from .process import ProcessRequest

RAND_MAX = 2**31 - 1


def uniform(rng: Random, lo: int, hi: int) -> int:
    """Draw an integer uniformly from ``[lo, hi]``.

    Raw draws come from ``[0, RAND_MAX]`` and are bucketed by integer
    division; draws past the last full bucket are rejected so every value
    in the range is equally likely.
    """

    if hi < lo:
        msg = "hi must not be smaller than lo"
        raise ValueError(msg)
    span = hi - lo + 1
    bucket = (RAND_MAX + 1) // span
    limit = span * bucket
    while True:
        raw = rng.getrandbits(31)
        if raw < limit:
            return raw // bucket + lo


def normal(rng: Random, loops: int = 4, ulimit: int = 4) -> int:
    """Sum of ``loops`` uniform draws over ``[0, ulimit]``, a rough bell curve."""

    if loops < 1:
        msg = "loops must be positive"
        raise ValueError(msg)
    return sum(uniform(rng, 0, ulimit) for _ in range(loops))


def generate_stream(
    count: int,
    *,
    seed: int | None = None,
    rng: Random | None = None,
    loops: int = 4,
    ulimit: int = 4,
) -> list[ProcessRequest]:
    if count < 0:
        msg = "count cannot be negative"
        raise ValueError(msg)
    if rng is None:
        rng = Random(seed)
    requests: list[ProcessRequest] = []
    for i in range(count):
        size = max(1, normal(rng, loops, ulimit))
        demand_time = max(1, normal(rng, loops, ulimit))
        requests.append(ProcessRequest.create(f"P{i}", size, demand_time))
    return requests


def from_demands(demands: Iterable[tuple[int, int]]) -> list[ProcessRequest]:
    return [ProcessRequest.create(f"D{idx}", size, demand_time) for idx, (size, demand_time) in enumerate(demands)]
