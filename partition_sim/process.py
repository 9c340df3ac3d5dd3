from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class RequestSpec:
    """Immutable memory request drawn by the workload generator."""

    request_id: str
    size: int
    demand_time: int

    def __post_init__(self) -> None:
        if self.size < 1:
            msg = "size must be at least one memory unit"
            raise ValueError(msg)
        if self.demand_time < 1:
            msg = "demand_time must be at least one tick"
            raise ValueError(msg)


@dataclass(slots=True)
class ProcessRequest:
    """Mutable scheduling state for a request during one strategy run."""

    spec: RequestSpec
    remaining_time: int = field(init=False, default=0)
    location: int | None = None
    completed: bool = False
    admitted: bool = False
    run_time: int = 0

    def __post_init__(self) -> None:
        self.remaining_time = self.spec.demand_time

    @classmethod
    def create(cls, request_id: str, size: int, demand_time: int) -> ProcessRequest:
        return cls(spec=RequestSpec(request_id=request_id, size=size, demand_time=demand_time))

    def admit(self, location: int) -> None:
        if self.admitted:
            msg = f"request {self.request_id} is already admitted"
            raise ValueError(msg)
        self.location = location
        self.admitted = True

    def tick(self) -> bool:
        """Consume one tick; return True when this tick completes the request."""

        if not self.admitted or self.completed:
            return False
        self.remaining_time -= 1
        self.run_time += 1
        if self.remaining_time == 0:
            self.completed = True
            return True
        return False

    def reset(self) -> None:
        self.remaining_time = self.spec.demand_time
        self.location = None
        self.completed = False
        self.admitted = False
        self.run_time = 0

    @property
    def request_id(self) -> str:
        return self.spec.request_id

    @property
    def size(self) -> int:
        return self.spec.size

    @property
    def demand_time(self) -> int:
        return self.spec.demand_time

    @property
    def resident(self) -> bool:
        return self.admitted and not self.completed

    @property
    def end(self) -> int | None:
        if self.location is None:
            return None
        return self.location + self.size


def reset_stream(requests: Iterable[ProcessRequest]) -> None:
    for request in requests:
        request.reset()
