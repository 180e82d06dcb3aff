"""
ExpressionTraits — generic per-type contract for randomized differential testing
-------------------------------------------------------------------------------
A traits class binds, for one numeric type T:

  • random_number(rng)   → a small-magnitude random operand
  • UNARY_OPERATIONS     → ordered tuple of UnaryOperation
  • BINARY_OPERATIONS    → ordered tuple of BinaryOperation (each with a predicate)
  • to_reference / matches → bridge into the reference domain and exact agreement

The shared overflow seam is `check_bounds`: a scalar passes iff it is finite and
at most `bound()` = finfo(SCALAR).max · BOUND_FRACTION in magnitude.

Traits classes are used as namespaces (classmethods only) and are registered per
value type with `@register_traits`; consumers look them up with `traits_for(T)`.
"""

from __future__ import annotations
from typing import Any, Dict, Generic, List, Tuple, Type, TypeVar
import math
import numpy as np

from complex_traits.traits.operations import BinaryOperation, UnaryOperation


T = TypeVar("T")


class ExpressionTraits(Generic[T]):
	"""Base contract; subclasses fill the tables and the random generator."""

	value_type: type = object

	SCALAR = np.float64
	BOUND_FRACTION: float = 2.0 ** -32

	UNARY_OPERATIONS: Tuple[UnaryOperation, ...] = ()
	BINARY_OPERATIONS: Tuple[BinaryOperation, ...] = ()

	@classmethod
	def bound(cls) -> float:
		"""Largest scalar magnitude accepted by check_bounds."""
		return float(np.finfo(cls.SCALAR).max) * float(cls.BOUND_FRACTION)

	@classmethod
	def check_bounds(cls, value) -> bool:
		"""
		Return True iff `value` is finite and far enough below the overflow
		threshold that chained checked operations stay exact-comparable.
		"""
		try:
			v = float(value)
		except OverflowError:
			return False
		if not math.isfinite(v):
			return False
		return abs(v) <= cls.bound()

	@classmethod
	def random_number(cls, rng: np.random.Generator) -> T:
		raise NotImplementedError(f"{cls.__name__}.random_number")

	@classmethod
	def to_reference(cls, value: T) -> Any:
		raise NotImplementedError(f"{cls.__name__}.to_reference")

	@classmethod
	def matches(cls, actual: T, expected: Any) -> bool:
		raise NotImplementedError(f"{cls.__name__}.matches")

	@classmethod
	def unary(cls, name: str) -> UnaryOperation:
		for op in cls.UNARY_OPERATIONS:
			if op.name == name:
				return op
		raise KeyError(f"{cls.__name__}: no unary operation named {name!r}")

	@classmethod
	def binary(cls, name: str) -> BinaryOperation:
		for op in cls.BINARY_OPERATIONS:
			if op.name == name:
				return op
		raise KeyError(f"{cls.__name__}: no binary operation named {name!r}")


_REGISTRY: Dict[type, Type[ExpressionTraits]] = {}


def register_traits(traits: Type[ExpressionTraits]) -> Type[ExpressionTraits]:
	"""Class decorator: make `traits` the lookup result for `traits.value_type`."""
	_REGISTRY[traits.value_type] = traits
	return traits


def traits_for(value_type: type) -> Type[ExpressionTraits]:
	"""Return the traits class registered for `value_type`."""
	try:
		return _REGISTRY[value_type]
	except KeyError:
		raise KeyError(f"no expression traits registered for {getattr(value_type, '__name__', value_type)!r}") from None


def registered_types() -> List[type]:
	return list(_REGISTRY.keys())
