"""
Operation descriptors: one immutable record per arithmetic capability of a type.

A descriptor pairs the type's own operator (`actual`) with an independent
implementation of the same semantics over the scalar reference domain
(`reference`). Binary descriptors also carry `is_valid(left, right)`, the
overflow predicate that decides whether the two may be compared exactly.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable


UnaryFn = Callable[[Any], Any]
BinaryFn = Callable[[Any, Any], Any]
BinaryPredicate = Callable[[Any, Any], bool]


@dataclass(frozen=True)
class UnaryOperation:
	"""
	Unary capability. Always valid: unary operations in a table must not be able
	to grow magnitudes (sign flips and the like).
	"""
	name: str
	symbol: str
	reference: UnaryFn
	actual: UnaryFn

	arity = 1

	def is_valid(self, operand) -> bool:
		return True

	def __call__(self, operand):
		return self.actual(operand)


@dataclass(frozen=True)
class BinaryOperation:
	"""
	Binary capability guarded by `is_valid`. Whenever `is_valid(left, right)` is
	True, `actual(left, right)` and `reference(left', right')` agree exactly.
	"""
	name: str
	symbol: str
	reference: BinaryFn
	actual: BinaryFn
	is_valid: BinaryPredicate

	arity = 2

	def __call__(self, left, right):
		return self.actual(left, right)
