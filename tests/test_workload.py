from __future__ import annotations

from collections import Counter
from random import Random

import pytest

from partition_sim.workload import RAND_MAX, from_demands, generate_stream, normal, uniform


class ScriptedBits:
    """Stand-in random source replaying fixed raw draws."""

    def __init__(self, draws):
        self._draws = list(draws)

    def getrandbits(self, k):
        return self._draws.pop(0)


def test_uniform_covers_range_evenly():
    rng = Random(3)
    counts = Counter(uniform(rng, 2, 6) for _ in range(5000))
    assert set(counts) == {2, 3, 4, 5, 6}
    assert min(counts.values()) > 800


def test_uniform_rejects_the_biased_tail():
    rng = ScriptedBits([RAND_MAX, RAND_MAX - 1, 0])
    assert uniform(rng, 0, 4) == 0
    assert rng._draws == []


def test_uniform_never_exceeds_hi():
    bucket = (RAND_MAX + 1) // 5
    rng = ScriptedBits([5 * bucket - 1])
    assert uniform(rng, 0, 4) == 4


def test_uniform_degenerate_and_invalid_ranges():
    assert uniform(Random(0), 7, 7) == 7
    with pytest.raises(ValueError):
        uniform(Random(0), 5, 4)


def test_normal_stays_within_sum_of_bounds():
    rng = Random(11)
    values = [normal(rng, 4, 4) for _ in range(2000)]
    assert min(values) >= 0
    assert max(values) <= 16
    assert 7 < sum(values) / len(values) < 9


def test_generate_stream_clamps_to_one():
    requests = generate_stream(20, seed=1, ulimit=0)
    assert all(r.size == 1 and r.demand_time == 1 for r in requests)


def test_generate_stream_is_seeded():
    first = generate_stream(100, seed=42)
    second = generate_stream(100, seed=42)
    assert [(r.size, r.demand_time) for r in first] == [(r.size, r.demand_time) for r in second]
    assert [r.request_id for r in first[:3]] == ["P0", "P1", "P2"]
    assert all(1 <= r.size <= 16 and 1 <= r.demand_time <= 16 for r in first)
    assert all(r.remaining_time == r.demand_time for r in first)


def test_generate_stream_rejects_negative_count():
    with pytest.raises(ValueError):
        generate_stream(-1)


def test_from_demands():
    requests = from_demands([(6, 3), (4, 2)])
    assert [(r.request_id, r.size, r.demand_time) for r in requests] == [("D0", 6, 3), ("D1", 4, 2)]
