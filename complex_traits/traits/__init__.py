"""
Expression traits (production package)

Public API re-export:
	ExpressionTraits       — generic base with check_bounds and table lookups
	UnaryOperation         — immutable unary descriptor (reference, actual)
	BinaryOperation        — immutable binary descriptor (reference, actual, is_valid)
	ComplexTraits          — instantiation for Complex
	register_traits, traits_for, registered_types — type-keyed registry
"""

from .operations import UnaryOperation, BinaryOperation
from .base import ExpressionTraits, register_traits, traits_for, registered_types
from .complex_traits import ComplexTraits, reference_divide

__all__ = [
	"UnaryOperation",
	"BinaryOperation",
	"ExpressionTraits",
	"register_traits",
	"traits_for",
	"registered_types",
	"ComplexTraits",
	"reference_divide",
]
