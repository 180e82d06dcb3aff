"""
Top-level re-exports: the Complex value type, its expression traits and the
differential probe that consumes them.
"""

from .numeric import Complex
from .traits import (
	ExpressionTraits, UnaryOperation, BinaryOperation, ComplexTraits,
	register_traits, traits_for, registered_types,
)
from .probe import DifferentialProbe, ExactReference, ProbeConfig, ProbeEvent, ProbeReport

check_bounds = ComplexTraits.check_bounds
random_number = ComplexTraits.random_number

__all__ = [
	"Complex",
	"ExpressionTraits", "UnaryOperation", "BinaryOperation", "ComplexTraits",
	"register_traits", "traits_for", "registered_types",
	"check_bounds", "random_number",
	"DifferentialProbe", "ExactReference", "ProbeConfig", "ProbeEvent", "ProbeReport",
]
