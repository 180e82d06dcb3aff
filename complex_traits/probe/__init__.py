from .config import ProbeConfig, ProbeEvent, ProbeReport
from .exact import ExactReference
from .differential import DifferentialProbe

__all__ = [
	"ProbeConfig",
	"ProbeEvent",
	"ProbeReport",
	"ExactReference",
	"DifferentialProbe",
]
