"""Contiguous memory placement simulation: best, first, next and worst fit."""

from .process import ProcessRequest, RequestSpec
from .memory import CapacityExceededError, MemoryModel
from .simulator import Simulation, SimulationConfig, SimulationResult
from . import placement
from . import workload
from . import metrics
from . import evaluation

__all__ = [
	"ProcessRequest",
	"RequestSpec",
	"CapacityExceededError",
	"MemoryModel",
	"Simulation",
	"SimulationConfig",
	"SimulationResult",
	"placement",
	"workload",
	"metrics",
	"evaluation",
]
