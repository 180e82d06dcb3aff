"""
Expression traits for Complex.

Operands are drawn with integer components in [-100, 100] so that several
chained operations stay far from overflow. The reference model is Python's
builtin `complex`; every binary predicate checks exactly the intermediates its
own operation computes, before the result is trusted.
"""

from __future__ import annotations
import operator
import numpy as np

from complex_traits.numeric.complex_value import Complex
from complex_traits.traits.base import ExpressionTraits, register_traits
from complex_traits.traits.operations import BinaryOperation, UnaryOperation


def reference_divide(left: complex, right: complex) -> complex:
	"""Divide via the conjugate: left · conj(right) scaled by 1 / |right|²."""
	den = right.real * right.real + right.imag * right.imag
	num = left * right.conjugate()
	return complex(num.real / den, num.imag / den)


def _cross_products(left: Complex, right: Complex) -> tuple[float, float, float, float]:
	rr = left.real * right.real
	ri = left.real * right.imag
	ir = left.imag * right.real
	ii = left.imag * right.imag
	return rr, ri, ir, ii


@register_traits
class ComplexTraits(ExpressionTraits[Complex]):
	"""Random generator, operation tables and overflow predicates for Complex."""

	value_type = Complex

	RANDOM_LOW: int = -100
	RANDOM_HIGH: int = 100

	@classmethod
	def random_number(cls, rng: np.random.Generator) -> Complex:
		re = int(rng.integers(cls.RANDOM_LOW, cls.RANDOM_HIGH, endpoint=True))
		im = int(rng.integers(cls.RANDOM_LOW, cls.RANDOM_HIGH, endpoint=True))
		return Complex(re, im)

	@classmethod
	def to_reference(cls, value: Complex) -> complex:
		return complex(value)

	@classmethod
	def matches(cls, actual: Complex, expected: complex) -> bool:
		return actual.real == expected.real and actual.imag == expected.imag

	@classmethod
	def check_additive(cls, left: Complex, right: Complex) -> bool:
		return cls.check_bounds(left.real + right.real) and cls.check_bounds(left.imag + right.imag)

	@classmethod
	def check_subtractive(cls, left: Complex, right: Complex) -> bool:
		return cls.check_bounds(left.real - right.real) and cls.check_bounds(left.imag - right.imag)

	@classmethod
	def check_multiplicative(cls, left: Complex, right: Complex) -> bool:
		"""
		All four cross products must be bounded on their own; an overflowed cross
		product invalidates the comparison even if the final sum looks finite.
		"""
		rr, ri, ir, ii = _cross_products(left, right)
		for v in (rr, ri, ir, ii):
			if not cls.check_bounds(v):
				return False
		return cls.check_bounds(rr - ii) and cls.check_bounds(ri + ir)

	@classmethod
	def check_divisible(cls, left: Complex, right: Complex) -> bool:
		"""
		Cross products, the numerator sums (rr + ii, ir - ri), a bounded strictly
		positive divisor norm, then the quotient components themselves.

		This does not reuse check_multiplicative: the product sums rr - ii and
		ri + ir are never formed by division, so the numerator sums division
		actually computes are bounded in their place.
		"""
		rr, ri, ir, ii = _cross_products(left, right)
		for v in (rr, ri, ir, ii):
			if not cls.check_bounds(v):
				return False
		num_re = rr + ii
		num_im = ir - ri
		if not (cls.check_bounds(num_re) and cls.check_bounds(num_im)):
			return False
		den = right.real * right.real + right.imag * right.imag
		if not cls.check_bounds(den) or not den > 0.0:
			return False
		return cls.check_bounds(num_re / den) and cls.check_bounds(num_im / den)


# Tables are filled after the class body so the predicates can be bound classmethods.
ComplexTraits.UNARY_OPERATIONS = (
	UnaryOperation("negate", "-", operator.neg, operator.neg),
	UnaryOperation("conjugate", "~", complex.conjugate, operator.invert),
)

ComplexTraits.BINARY_OPERATIONS = (
	BinaryOperation("add", "+", operator.add, operator.add, ComplexTraits.check_additive),
	BinaryOperation("subtract", "-", operator.sub, operator.sub, ComplexTraits.check_subtractive),
	BinaryOperation("multiply", "*", operator.mul, operator.mul, ComplexTraits.check_multiplicative),
	BinaryOperation("divide", "/", reference_divide, operator.truediv, ComplexTraits.check_divisible),
)
