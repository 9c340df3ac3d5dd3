from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .memory import CapacityExceededError, MemoryModel
from .placement import PlacementStrategy
from .process import ProcessRequest, reset_stream

logger = logging.getLogger(__name__)

MEMORY_CAPACITY = 56
STREAM_LENGTH = 1000
TRIAL_COUNT = 1000
DEMAND_LOOPS = 4
DEMAND_ULIMIT = 4

Observer = Callable[[MemoryModel, Sequence[ProcessRequest], int], None]


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    memory_capacity: int = MEMORY_CAPACITY
    stream_length: int = STREAM_LENGTH
    trials: int = TRIAL_COUNT
    demand_loops: int = DEMAND_LOOPS
    demand_ulimit: int = DEMAND_ULIMIT

    def __post_init__(self) -> None:
        if self.memory_capacity < 1:
            msg = "memory_capacity must be at least one unit"
            raise ValueError(msg)
        if self.stream_length < 0:
            msg = "stream_length cannot be negative"
            raise ValueError(msg)
        if self.trials < 1:
            msg = "trials must be at least one"
            raise ValueError(msg)
        if self.demand_loops < 1:
            msg = "demand_loops must be at least one"
            raise ValueError(msg)
        if self.demand_ulimit < 0:
            msg = "demand_ulimit cannot be negative"
            raise ValueError(msg)


@dataclass(slots=True)
class SimulationResult:
    strategy: str
    total_time: int
    admission_ticks: int
    drain_time: int
    no_fit_count: int
    peak_units_used: int


class Simulation:
    """Tick-based admission and eviction of a request stream under one fit strategy.

    Each tick admits as many requests as fit, in stream order, then ages
    every resident request by one unit and frees those that finish. Once
    every request has been admitted the remaining residents are not
    simulated further: the longest remaining time among them is added to
    the tick count instead.
    """

    def __init__(
        self,
        strategy: PlacementStrategy,
        requests: Sequence[ProcessRequest],
        config: SimulationConfig | None = None,
        *,
        observer: Observer | None = None,
    ) -> None:
        self.strategy = strategy
        self.config = config or SimulationConfig()
        self.memory = MemoryModel(self.config.memory_capacity)
        self._requests = requests
        self._observer = observer
        self._cursor = 0
        self._ticks = 0
        self._no_fit = 0
        self._peak = 0
        self._resident: list[int] = []

    def run(self) -> SimulationResult:
        self._check_capacity()
        self.memory.clear()
        self.strategy.reset()
        self._cursor = 0
        self._ticks = 0
        self._no_fit = 0
        self._peak = 0
        self._resident = []
        try:
            while not self._all_admitted():
                self._admit_ready()
                self._notify()
                self._advance()
                self._notify()
            drain = self._drain_time()
            result = SimulationResult(
                strategy=self.strategy.name or type(self.strategy).__name__,
                total_time=self._ticks + drain,
                admission_ticks=self._ticks,
                drain_time=drain,
                no_fit_count=self._no_fit,
                peak_units_used=self._peak,
            )
        finally:
            reset_stream(self._requests)
            self.strategy.reset()
        logger.debug(
            "%s finished %d requests: total=%d ticks=%d drain=%d no_fit=%d peak=%d",
            result.strategy,
            len(self._requests),
            result.total_time,
            result.admission_ticks,
            result.drain_time,
            result.no_fit_count,
            result.peak_units_used,
        )
        return result

    def _check_capacity(self) -> None:
        capacity = self.config.memory_capacity
        for request in self._requests:
            if request.size > capacity:
                msg = f"request {request.request_id} needs {request.size} units but memory holds only {capacity}"
                raise CapacityExceededError(msg)

    def _all_admitted(self) -> bool:
        # Admission is strictly in stream order.
        return self._cursor >= len(self._requests)

    def _admit_ready(self) -> None:
        while self._cursor < len(self._requests):
            request = self._requests[self._cursor]
            start = self.strategy.find(self.memory, request.size)
            if start is None:
                self._no_fit += 1
                break
            self.memory.occupy(self._cursor, start, request.size)
            request.admit(start)
            self.strategy.on_placed(start)
            self._resident.append(self._cursor)
            self._cursor += 1
        self._peak = max(self._peak, self.memory.used_units)

    def _advance(self) -> None:
        finished = [handle for handle in self._resident if self._requests[handle].tick()]
        if finished:
            self._resident = [handle for handle in self._resident if not self._requests[handle].completed]
        for handle in finished:
            request = self._requests[handle]
            assert request.location is not None
            self.memory.release(handle, request.location, request.size)
        self._ticks += 1

    def _drain_time(self) -> int:
        return max((self._requests[handle].remaining_time for handle in self._resident), default=0)

    def _notify(self) -> None:
        if self._observer is not None:
            self._observer(self.memory, self._requests, self._ticks)

    @property
    def cursor(self) -> int:
        return self._cursor
