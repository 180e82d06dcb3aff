"""Exact-rational audit oracle for the Complex operation catalog (class-based).

Provides:
  • ExactReference.exact(value) -> (Rational, Rational)
  • ExactReference.evaluate(name, *operands) -> (Rational, Rational) | None
  • ExactReference.rounding_agrees(name, *operands) -> bool

Every float64 is a dyadic rational, so the components of an operand convert to
sympy Rationals without loss. The exact result is rounded back per component
with int/int true division, which is correctly rounded. For operands from
ComplexTraits.random_number each operation is exact or rounds once, so the
float result must equal the rounded exact result.
"""

from __future__ import annotations
from typing import Callable, Dict, Tuple
import math
import sympy as sp

from complex_traits.numeric.complex_value import Complex
from complex_traits.traits.complex_traits import ComplexTraits


ExactPair = Tuple[sp.Rational, sp.Rational]


class ExactReference:
	"""Evaluates operations on exact Gaussian rationals."""

	def __init__(self) -> None:
		"""Build the name → exact-evaluator table."""
		self._unary: Dict[str, Callable[[ExactPair], ExactPair]] = {
			"negate": self._negate,
			"conjugate": self._conjugate,
		}
		self._binary: Dict[str, Callable[[ExactPair, ExactPair], ExactPair | None]] = {
			"add": self._add,
			"subtract": self._subtract,
			"multiply": self._multiply,
			"divide": self._divide,
		}

	@staticmethod
	def exact(value: Complex) -> ExactPair:
		"""
		Return the exact rational components of a finite Complex.
		"""
		return sp.Rational(value.real), sp.Rational(value.imag)

	@staticmethod
	def _negate(x: ExactPair) -> ExactPair:
		return -x[0], -x[1]

	@staticmethod
	def _conjugate(x: ExactPair) -> ExactPair:
		return x[0], -x[1]

	@staticmethod
	def _add(x: ExactPair, y: ExactPair) -> ExactPair:
		return x[0] + y[0], x[1] + y[1]

	@staticmethod
	def _subtract(x: ExactPair, y: ExactPair) -> ExactPair:
		return x[0] - y[0], x[1] - y[1]

	@staticmethod
	def _multiply(x: ExactPair, y: ExactPair) -> ExactPair:
		a, b = x
		c, d = y
		return a * c - b * d, a * d + b * c

	@staticmethod
	def _divide(x: ExactPair, y: ExactPair) -> ExactPair | None:
		a, b = x
		c, d = y
		den = c * c + d * d
		if den == 0:
			return None
		return (a * c + b * d) / den, (b * c - a * d) / den

	@staticmethod
	def to_float(q: sp.Rational) -> float:
		"""
		Correctly rounded float64 nearest to the rational q.
		"""
		r = sp.Rational(q)
		return int(r.p) / int(r.q)

	def evaluate(self, name: str, *operands: Complex) -> ExactPair | None:
		"""
		Evaluate operation `name` exactly. Returns None for a zero divisor.
		Raises KeyError for names outside the catalog.
		"""
		pairs = [self.exact(v) for v in operands]
		if len(pairs) == 1:
			if name not in self._unary:
				raise KeyError(f"exact reference has no unary operation {name!r}")
			return self._unary[name](pairs[0])
		if len(pairs) == 2:
			if name not in self._binary:
				raise KeyError(f"exact reference has no binary operation {name!r}")
			return self._binary[name](pairs[0], pairs[1])
		raise KeyError(f"exact reference has no {len(pairs)}-ary operation {name!r}")

	def rounding_agrees(self, name: str, *operands: Complex) -> bool:
		"""
		Return True iff applying the float operation to `operands` gives the
		correctly rounded exact result in both components.
		"""
		for v in operands:
			if not (math.isfinite(v.real) and math.isfinite(v.imag)):
				return False
		exact = self.evaluate(name, *operands)
		if exact is None:
			return False
		if len(operands) == 1:
			actual = ComplexTraits.unary(name).actual(operands[0])
		else:
			actual = ComplexTraits.binary(name).actual(operands[0], operands[1])
		return actual.real == self.to_float(exact[0]) and actual.imag == self.to_float(exact[1])
