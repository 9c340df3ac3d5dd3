from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from .memory import FreeRun, MemoryModel


class PlacementStrategy(ABC):
    """Abstract fit algorithm choosing where a request of a given size goes."""

    name: str = ""

    @abstractmethod
    def find(self, memory: MemoryModel, size: int) -> int | None:
        """Return the start index for ``size`` units, or None when nothing fits."""

    def on_placed(self, start: int) -> None:
        """Hook invoked after a request has been placed at ``start``."""

    def reset(self) -> None:
        """Forget any state carried between placements."""


def scan_from(memory: MemoryModel, start: int, size: int) -> int | None:
    """Find the first free window of ``size`` units at or after ``start``, wrapping to 0."""

    runs = memory.free_runs()
    for run in runs:
        lo = max(run.start, start)
        if run.end - lo >= size:
            return lo
    # A window that starts before ``start`` may run past it.
    for run in runs:
        if run.start >= start:
            break
        if run.length >= size:
            return run.start
    return None


class FirstFit(PlacementStrategy):
    name = "FirstFit"

    def find(self, memory: MemoryModel, size: int) -> int | None:
        return scan_from(memory, 0, size)


class NextFit(PlacementStrategy):
    """First-fit scan resuming where the previous placement started."""

    name = "NextFit"

    def __init__(self) -> None:
        self._last = 0

    def find(self, memory: MemoryModel, size: int) -> int | None:
        return scan_from(memory, self._last, size)

    def on_placed(self, start: int) -> None:
        self._last = start

    def reset(self) -> None:
        self._last = 0

    @property
    def last_position(self) -> int:
        return self._last


class BestFit(PlacementStrategy):
    """Smallest free run that still holds the request; earlier runs win ties."""

    name = "BestFit"

    def find(self, memory: MemoryModel, size: int) -> int | None:
        best: FreeRun | None = None
        for run in memory.free_runs():
            if run.length < size:
                continue
            if best is None or run.length < best.length:
                best = run
        return best.start if best is not None else None


class WorstFit(PlacementStrategy):
    """Largest free run that holds the request; earlier runs win ties."""

    name = "WorstFit"

    def find(self, memory: MemoryModel, size: int) -> int | None:
        worst: FreeRun | None = None
        for run in memory.free_runs():
            if run.length < size:
                continue
            if worst is None or run.length > worst.length:
                worst = run
        return worst.start if worst is not None else None


StrategyFactory = Callable[[], PlacementStrategy]

STRATEGIES: tuple[tuple[str, StrategyFactory], ...] = (
    (BestFit.name, BestFit),
    (FirstFit.name, FirstFit),
    (NextFit.name, NextFit),
    (WorstFit.name, WorstFit),
)


def strategy_by_name(name: str) -> PlacementStrategy:
    for candidate, factory in STRATEGIES:
        if candidate.lower() == name.lower():
            return factory()
    known = ", ".join(candidate for candidate, _ in STRATEGIES)
    msg = f"unknown placement strategy {name!r}; expected one of {known}"
    raise ValueError(msg)
