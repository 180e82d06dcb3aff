"""
Numeric value types.

Public API re-export:
	Complex  — float64 complex value with IEEE-754 division semantics
"""

from .complex_value import Complex

__all__ = ["Complex"]
