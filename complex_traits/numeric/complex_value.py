"""
Complex value type (float64 components)
---------------------------------------
A plain pair of IEEE-754 doubles with standard complex arithmetic:

  • (a+bi) ± (c+di) = (a±c) + (b±d)i
  • (a+bi) · (c+di) = (ac − bd) + (ad + bc)i
  • (a+bi) / (c+di) = ((ac + bd) + (bc − ad)i) / (c² + d²)
  • −z negates both components, ~z negates the imaginary one (conjugate)

Real scalars (int/float) act component-wise in · and /, so Complex(5, -5) / 0
is (inf, -inf) and Complex() / 0 is (nan, nan). Division never raises: it runs
through numpy float64 division with divide/invalid warnings silenced.

Equality is exact component-wise equality; there is no tolerance.
"""

from __future__ import annotations
import math
import numpy as np


_REAL_TYPES = (int, float, np.integer, np.floating)


def _ieee_div(x: float, y: float) -> float:
	"""Return x / y with IEEE-754 semantics (±inf, nan) instead of ZeroDivisionError."""
	with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
		return float(np.float64(x) / np.float64(y))


def _format_component(v: float) -> str:
	"""Shortest round-trip decimal for v, with integral values printed without '.0'."""
	if math.isfinite(v) and v == math.floor(v) and abs(v) < 1e16:
		if v == 0.0 and math.copysign(1.0, v) < 0.0:
			return "-0"
		return str(int(v))
	return repr(v)


class Complex:
	"""Complex number with two float64 components; immutable by convention."""

	__slots__ = ("_real", "_imag")

	def __init__(self, real=0.0, imag=0.0) -> None:
		self._real = float(real)
		self._imag = float(imag)

	@staticmethod
	def _coerce(other) -> Complex | None:
		if isinstance(other, Complex):
			return other
		if isinstance(other, _REAL_TYPES):
			return Complex(other)
		return None

	@property
	def real(self) -> float:
		return self._real

	@property
	def imag(self) -> float:
		return self._imag

	def abs(self) -> float:
		"""
		Magnitude sqrt(re² + im²), scaled by the larger component so that squaring
		large-but-representable components cannot overflow.
		"""
		m = max(abs(self._real), abs(self._imag))
		if m == 0.0:
			return 0.0
		x = self._real / m
		y = self._imag / m
		return m * math.sqrt(x * x + y * y)

	def __abs__(self) -> float:
		return self.abs()

	def conjugate(self) -> Complex:
		return Complex(self._real, -self._imag)

	def __invert__(self) -> Complex:
		return self.conjugate()

	def __neg__(self) -> Complex:
		return Complex(-self._real, -self._imag)

	def __pos__(self) -> Complex:
		return self

	def __add__(self, other):
		o = Complex._coerce(other)
		if o is None:
			return NotImplemented
		return Complex(self._real + o._real, self._imag + o._imag)

	def __radd__(self, other):
		o = Complex._coerce(other)
		if o is None:
			return NotImplemented
		return o.__add__(self)

	def __sub__(self, other):
		o = Complex._coerce(other)
		if o is None:
			return NotImplemented
		return Complex(self._real - o._real, self._imag - o._imag)

	def __rsub__(self, other):
		o = Complex._coerce(other)
		if o is None:
			return NotImplemented
		return o.__sub__(self)

	def __mul__(self, other):
		if isinstance(other, _REAL_TYPES):
			s = float(other)
			return Complex(self._real * s, self._imag * s)
		if not isinstance(other, Complex):
			return NotImplemented
		a, b = self._real, self._imag
		c, d = other._real, other._imag
		return Complex(a * c - b * d, a * d + b * c)

	def __rmul__(self, other):
		if isinstance(other, _REAL_TYPES):
			s = float(other)
			return Complex(s * self._real, s * self._imag)
		return NotImplemented

	def __truediv__(self, other):
		if isinstance(other, _REAL_TYPES):
			s = float(other)
			return Complex(_ieee_div(self._real, s), _ieee_div(self._imag, s))
		if not isinstance(other, Complex):
			return NotImplemented
		a, b = self._real, self._imag
		c, d = other._real, other._imag
		den = c * c + d * d
		return Complex(_ieee_div(a * c + b * d, den), _ieee_div(b * c - a * d, den))

	def __rtruediv__(self, other):
		o = Complex._coerce(other)
		if o is None:
			return NotImplemented
		return o.__truediv__(self)

	def __eq__(self, other) -> bool:
		o = Complex._coerce(other)
		if o is None:
			return NotImplemented
		return self._real == o._real and self._imag == o._imag

	def __ne__(self, other) -> bool:
		o = Complex._coerce(other)
		if o is None:
			return NotImplemented
		return not (self._real == o._real and self._imag == o._imag)

	def __hash__(self) -> int:
		return hash(complex(self._real, self._imag))

	def __complex__(self) -> complex:
		return complex(self._real, self._imag)

	def str(self) -> str:
		"""Render as '(real,imag)' with no spaces, e.g. '(42,-43)'."""
		return "(" + _format_component(self._real) + "," + _format_component(self._imag) + ")"

	def __str__(self) -> str:
		return self.str()

	def __format__(self, spec: str) -> str:
		if spec:
			return format(self.str(), spec)
		return self.str()

	def __repr__(self) -> str:
		return f"Complex({self._real!r}, {self._imag!r})"

	def __reduce__(self):
		return (Complex, (self._real, self._imag))
