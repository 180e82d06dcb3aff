from __future__ import annotations
from typing import Optional, Type
import numpy as np

from complex_traits.numeric.complex_value import Complex
from complex_traits.probe.config import ProbeConfig, ProbeEvent, ProbeReport
from complex_traits.probe.exact import ExactReference
from complex_traits.traits.base import ExpressionTraits
from complex_traits.traits.operations import BinaryOperation, UnaryOperation


class DifferentialProbe:
	"""
	Seeded differential probe over a traits class.

	Each sampled chain starts from a random operand and applies up to `depth`
	randomly chosen operations from the traits tables; binary steps take a fresh
	random operand on a random side. The actual operator and the reference model
	are carried side by side and must agree exactly after every step. A rejected
	predicate ends the chain as skipped; it is never a failure.
	"""

	def __init__(self, traits: Type[ExpressionTraits], config: ProbeConfig | None = None) -> None:
		"""Bind the traits under test and a (defaulted) configuration."""
		self.traits = traits
		if config is None:
			config = ProbeConfig()
		self.config = config
		self._exact: Optional[ExactReference] = None
		if bool(config.exact_audit) and traits.value_type is Complex:
			self._exact = ExactReference()

	def check_unary(self, op: UnaryOperation, x) -> bool:
		"""Return True iff actual and reference agree on `x`."""
		t = self.traits
		return t.matches(op.actual(x), op.reference(t.to_reference(x)))

	def check_binary(self, op: BinaryOperation, left, right) -> Optional[bool]:
		"""
		Return None when the predicate rejects the operands, otherwise whether
		actual and reference agree.
		"""
		if not op.is_valid(left, right):
			return None
		t = self.traits
		actual = op.actual(left, right)
		expected = op.reference(t.to_reference(left), t.to_reference(right))
		return t.matches(actual, expected)

	def _record_mismatch(self, report: ProbeReport, kind: str, op_name: str, operands, actual, expected) -> None:
		payload = {
			"op": op_name,
			"operands": [str(v) for v in operands],
			"actual": str(actual),
			"expected": str(expected),
		}
		report.events.append(ProbeEvent(kind, payload))
		if self.config.verbose:
			print(f"{kind}: {op_name}{tuple(payload['operands'])} -> {payload['actual']} != {payload['expected']}")

	def _audit(self, report: ProbeReport, op_name: str, actual, *operands) -> None:
		if self._exact is None:
			return
		report.exact_checked += 1
		if not self._exact.rounding_agrees(op_name, *operands):
			report.exact_mismatches += 1
			exact = self._exact.evaluate(op_name, *operands)
			self._record_mismatch(report, "exact_mismatch", op_name, operands, actual, exact)

	def _chain(self, rng: np.random.Generator, report: ProbeReport) -> None:
		t = self.traits
		depth = int(self.config.depth)
		n_unary = len(t.UNARY_OPERATIONS)
		n_total = n_unary + len(t.BINARY_OPERATIONS)
		if n_total == 0:
			return

		value = t.random_number(rng)
		ref = t.to_reference(value)
		for step in range(depth):
			k = int(rng.integers(0, n_total))
			if k < n_unary:
				uop = t.UNARY_OPERATIONS[k]
				actual = uop.actual(value)
				expected = uop.reference(ref)
				operands = (value,)
				name = uop.name
			else:
				bop = t.BINARY_OPERATIONS[k - n_unary]
				other = t.random_number(rng)
				if rng.random() < 0.5:
					left, right = value, other
					ref_left, ref_right = ref, t.to_reference(other)
				else:
					left, right = other, value
					ref_left, ref_right = t.to_reference(other), ref
				if not bop.is_valid(left, right):
					report.skipped += 1
					report.events.append(ProbeEvent("skipped", {"op": bop.name, "step": step, "operands": [str(left), str(right)]}))
					return
				actual = bop.actual(left, right)
				expected = bop.reference(ref_left, ref_right)
				operands = (left, right)
				name = bop.name

			report.checked += 1
			if not t.matches(actual, expected):
				report.mismatches += 1
				self._record_mismatch(report, "mismatch", name, operands, actual, expected)
				return
			if step == 0:
				self._audit(report, name, actual, *operands)
			value, ref = actual, expected

	def run(self) -> ProbeReport:
		"""
		Sample `config.samples` chains and return the accumulated report.
		"""
		report = ProbeReport()
		samples = int(self.config.samples)
		if samples <= 0 or int(self.config.depth) <= 0:
			return report
		rng = np.random.default_rng(int(self.config.seed))
		for _ in range(samples):
			report.chains += 1
			self._chain(rng, report)
		return report
