from __future__ import annotations

import pytest

from partition_sim.memory import FreeRun, MemoryModel


def test_new_memory_is_one_free_run():
    memory = MemoryModel(56)
    assert memory.capacity == len(memory) == 56
    assert memory.free_units == 56
    assert memory.free_runs() == [FreeRun(0, 56)]
    assert memory.owners() == set()


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        MemoryModel(0)


def test_free_runs_are_bounded_by_owners_and_array_end(fragmented_memory):
    assert fragmented_memory.free_runs() == [FreeRun(0, 5), FreeRun(6, 3), FreeRun(10, 8)]
    assert [run.end for run in fragmented_memory.free_runs()] == [5, 9, 18]


def test_occupy_stores_owner_in_every_unit():
    memory = MemoryModel(10)
    memory.occupy(7, 2, 4)
    assert [memory.owner(i) for i in range(10)] == [None, None, 7, 7, 7, 7, None, None, None, None]
    assert memory.used_units == 4
    assert list(memory.spans()) == [(7, 2, 4)]


@pytest.mark.parametrize(("start", "size"), [(3, 2), (0, 5), (8, 3), (-1, 1)])
def test_occupy_rejects_overlap_and_out_of_bounds(start, size):
    memory = MemoryModel(10)
    memory.occupy(1, 4, 2)
    with pytest.raises(ValueError):
        memory.occupy(2, start, size)


def test_release_frees_only_the_owner():
    memory = MemoryModel(8)
    memory.occupy(1, 0, 3)
    memory.occupy(2, 3, 3)
    with pytest.raises(ValueError):
        memory.release(1, 0, 4)
    memory.release(1, 0, 3)
    assert memory.free_runs() == [FreeRun(0, 3), FreeRun(6, 2)]
    assert memory.owners() == {2}


def test_adjacent_owners_form_separate_spans():
    memory = MemoryModel(6)
    memory.occupy(1, 0, 2)
    memory.occupy(2, 2, 3)
    assert list(memory.spans()) == [(1, 0, 2), (2, 2, 3)]
    memory.clear()
    assert memory.free_units == 6
