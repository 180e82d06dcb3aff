"""
Hypothesis profiles and shared strategies for the property tests.
"""

from __future__ import annotations

import os

from hypothesis import HealthCheck, settings
from hypothesis import strategies as st

from complex_traits import Complex, ComplexTraits


settings.register_profile(
	"default",
	max_examples=200,
	deadline=None,
	suppress_health_check=[HealthCheck.too_slow, HealthCheck.filter_too_much],
)

settings.register_profile(
	"ci",
	max_examples=1000,
	deadline=None,
	suppress_health_check=[HealthCheck.too_slow, HealthCheck.filter_too_much],
)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


# sqrt(bound) is about 2.05e149: products of components around it straddle the bound
_SQRT_BOUND = ComplexTraits.bound() ** 0.5


def finite_doubles() -> st.SearchStrategy[float]:
	"""Any finite double (subnormals included), mixed with magnitudes near the predicate edges."""
	return st.one_of(
		st.floats(allow_nan=False, allow_infinity=False),
		st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False),
		st.floats(min_value=_SQRT_BOUND / 4, max_value=_SQRT_BOUND * 4),
		st.floats(min_value=-_SQRT_BOUND * 4, max_value=-_SQRT_BOUND / 4),
		st.floats(min_value=ComplexTraits.bound() / 4, max_value=ComplexTraits.bound() * 4),
		st.floats(min_value=-ComplexTraits.bound() * 4, max_value=-ComplexTraits.bound() / 4),
	)


@st.composite
def complex_values(draw: st.DrawFn, elements: st.SearchStrategy[float] | None = None) -> Complex:
	"""Strategy for Complex with independently drawn components."""
	if elements is None:
		elements = finite_doubles()
	return Complex(draw(elements), draw(elements))
