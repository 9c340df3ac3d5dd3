from __future__ import annotations

import pytest

from partition_sim.memory import MemoryModel


@pytest.fixture
def fragmented_memory() -> MemoryModel:
    """Free runs of lengths 5, 3 and 8 separated by single occupied units."""

    memory = MemoryModel(18)
    memory.occupy(100, 5, 1)
    memory.occupy(101, 9, 1)
    return memory
