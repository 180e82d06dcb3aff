"""
Probe configuration and typed containers for differential runs.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class ProbeConfig:
	"""
	Sampling budget and switches for DifferentialProbe.run.
	"""
	samples: int = 1000
	depth: int = 4
	seed: int = 20250928
	exact_audit: bool = True
	verbose: bool = False


@dataclass(frozen=True)
class ProbeEvent:
	"""
	Structured event recorded when a chain is skipped or disagrees.
	"""
	kind: str
	payload: Dict[str, object]


@dataclass
class ProbeReport:
	"""
	Counters accumulated across all sampled chains.
	"""
	chains: int = 0
	checked: int = 0
	skipped: int = 0
	mismatches: int = 0
	exact_checked: int = 0
	exact_mismatches: int = 0
	events: List[ProbeEvent] = field(default_factory=list)

	@property
	def ok(self) -> bool:
		return self.mismatches == 0 and self.exact_mismatches == 0

	def summary(self) -> Dict[str, int]:
		return {
			"chains": self.chains,
			"checked": self.checked,
			"skipped": self.skipped,
			"mismatches": self.mismatches,
			"exact_checked": self.exact_checked,
			"exact_mismatches": self.exact_mismatches,
		}
