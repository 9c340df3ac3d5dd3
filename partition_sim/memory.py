from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


class CapacityExceededError(ValueError):
    """Raised when a request can never fit in the whole memory."""


@dataclass(frozen=True, slots=True)
class FreeRun:
    """Maximal contiguous span of free memory units."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


class MemoryModel:
    """Fixed-capacity linear memory where each unit is free or owned by one request.

    Owners are integer handles, normally the request's index in its stream.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            msg = "capacity must be at least one unit"
            raise ValueError(msg)
        self._slots: list[int | None] = [None] * capacity

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def free_units(self) -> int:
        return sum(1 for slot in self._slots if slot is None)

    @property
    def used_units(self) -> int:
        return self.capacity - self.free_units

    def owner(self, index: int) -> int | None:
        return self._slots[index]

    def is_free(self, index: int) -> bool:
        return self._slots[index] is None

    def fits_at(self, start: int, size: int) -> bool:
        if start < 0 or size < 1 or start + size > self.capacity:
            return False
        return all(self._slots[i] is None for i in range(start, start + size))

    def free_runs(self) -> list[FreeRun]:
        runs: list[FreeRun] = []
        run_start: int | None = None
        for index, slot in enumerate(self._slots):
            if slot is None:
                if run_start is None:
                    run_start = index
            elif run_start is not None:
                runs.append(FreeRun(run_start, index - run_start))
                run_start = None
        if run_start is not None:
            runs.append(FreeRun(run_start, self.capacity - run_start))
        return runs

    def occupy(self, handle: int, start: int, size: int) -> None:
        if not self.fits_at(start, size):
            msg = f"cannot place {size} units at {start}: range is occupied or out of bounds"
            raise ValueError(msg)
        for i in range(start, start + size):
            self._slots[i] = handle

    def release(self, handle: int, start: int, size: int) -> None:
        if start < 0 or start + size > self.capacity:
            msg = f"range [{start}, {start + size}) is out of bounds"
            raise ValueError(msg)
        if any(self._slots[i] != handle for i in range(start, start + size)):
            msg = f"range [{start}, {start + size}) is not owned by {handle}"
            raise ValueError(msg)
        for i in range(start, start + size):
            self._slots[i] = None

    def owners(self) -> set[int]:
        return {slot for slot in self._slots if slot is not None}

    def spans(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(handle, start, length)`` for every contiguous owned span."""

        index = 0
        while index < self.capacity:
            handle = self._slots[index]
            if handle is None:
                index += 1
                continue
            start = index
            while index < self.capacity and self._slots[index] == handle:
                index += 1
            yield handle, start, index - start

    def clear(self) -> None:
        self._slots = [None] * self.capacity

    def __len__(self) -> int:
        return self.capacity

    def __repr__(self) -> str:
        cells = "".join("." if slot is None else "#" for slot in self._slots)
        return f"MemoryModel({cells})"
