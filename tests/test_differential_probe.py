"""
Tests for the exact audit oracle and the seeded differential probe.
"""

import math

import pytest
import sympy as sp

from complex_traits import (
	Complex,
	ComplexTraits,
	DifferentialProbe,
	ExactReference,
	ProbeConfig,
	ProbeEvent,
	ProbeReport,
)
from complex_traits.traits import BinaryOperation


class TestExactReference:
	"""sympy exact-rational oracle"""

	def test_exact_components(self) -> None:
		re, im = ExactReference.exact(Complex(0.5, -3))
		assert re == sp.Rational(1, 2)
		assert im == -3

	def test_exact_keeps_binary_fraction(self) -> None:
		re, _ = ExactReference.exact(Complex(0.1))
		assert re != sp.Rational(1, 10)
		assert ExactReference.to_float(re) == 0.1

	def test_to_float_rounds_correctly(self) -> None:
		assert ExactReference.to_float(sp.Rational(1, 3)) == 1 / 3
		assert ExactReference.to_float(sp.Rational(95, 5631)) == 95 / 5631

	def test_evaluate_catalog(self) -> None:
		oracle = ExactReference()
		x = Complex(-2, 3)
		y = Complex(42, 123)
		assert oracle.evaluate("negate", x) == (2, -3)
		assert oracle.evaluate("conjugate", x) == (-2, -3)
		assert oracle.evaluate("add", x, y) == (40, 126)
		assert oracle.evaluate("subtract", x, y) == (-44, -120)
		assert oracle.evaluate("multiply", x, Complex(10, 20)) == (-80, -10)
		assert oracle.evaluate("divide", x, y) == (sp.Rational(95, 5631), sp.Rational(124, 5631))

	def test_zero_divisor_has_no_exact_result(self) -> None:
		oracle = ExactReference()
		assert oracle.evaluate("divide", Complex(1), Complex()) is None
		assert not oracle.rounding_agrees("divide", Complex(1), Complex())

	def test_unknown_operation(self) -> None:
		oracle = ExactReference()
		with pytest.raises(KeyError):
			oracle.evaluate("sqrt", Complex(1))
		with pytest.raises(KeyError):
			oracle.evaluate("power", Complex(1), Complex(2))

	def test_non_finite_operands_never_agree(self) -> None:
		oracle = ExactReference()
		assert not oracle.rounding_agrees("add", Complex(math.inf), Complex(1))

	@pytest.mark.parametrize("name", ["add", "subtract", "multiply", "divide"])
	def test_integer_domain_is_singly_rounded(self, name: str) -> None:
		oracle = ExactReference()
		assert oracle.rounding_agrees(name, Complex(-2, 3), Complex(42, 123))
		assert oracle.rounding_agrees(name, Complex(100, -100), Complex(-99, 7))

	def test_unary_agrees(self) -> None:
		oracle = ExactReference()
		assert oracle.rounding_agrees("negate", Complex(1.25, -7))
		assert oracle.rounding_agrees("conjugate", Complex(1.25, -7))


class TestCheckOperations:
	"""Single-operation checks"""

	def test_check_unary(self) -> None:
		probe = DifferentialProbe(ComplexTraits)
		for op in ComplexTraits.UNARY_OPERATIONS:
			assert probe.check_unary(op, Complex(3, -4))

	def test_check_binary(self) -> None:
		probe = DifferentialProbe(ComplexTraits)
		for op in ComplexTraits.BINARY_OPERATIONS:
			assert probe.check_binary(op, Complex(-2, 3), Complex(42, 123)) is True

	def test_rejected_operands_are_skipped(self) -> None:
		probe = DifferentialProbe(ComplexTraits)
		div = ComplexTraits.binary("divide")
		assert probe.check_binary(div, Complex(5, -5), Complex(0, 0)) is None

	def test_broken_operator_is_reported(self) -> None:
		probe = DifferentialProbe(ComplexTraits)
		broken = BinaryOperation(
			"multiply",
			"*",
			lambda a, b: a * b,
			lambda a, b: Complex(a.real * b.real + a.imag * b.imag, a.real * b.imag + a.imag * b.real),
			ComplexTraits.check_multiplicative,
		)
		assert probe.check_binary(broken, Complex(1, 2), Complex(3, 4)) is False


class TestRun:
	"""Chained seeded runs"""

	def test_default_run_is_clean(self) -> None:
		report = DifferentialProbe(ComplexTraits, ProbeConfig(samples=300, depth=5, seed=1)).run()
		assert isinstance(report, ProbeReport)
		assert report.ok
		assert report.chains == 300
		assert report.checked > 300
		assert report.mismatches == 0
		assert report.exact_checked > 0
		assert report.exact_mismatches == 0

	def test_deterministic(self) -> None:
		cfg = ProbeConfig(samples=100, depth=4, seed=42)
		a = DifferentialProbe(ComplexTraits, cfg).run().summary()
		b = DifferentialProbe(ComplexTraits, cfg).run().summary()
		assert a == b

	def test_empty_budget(self) -> None:
		report = DifferentialProbe(ComplexTraits, ProbeConfig(samples=0)).run()
		assert report.summary() == {
			"chains": 0,
			"checked": 0,
			"skipped": 0,
			"mismatches": 0,
			"exact_checked": 0,
			"exact_mismatches": 0,
		}
		assert DifferentialProbe(ComplexTraits, ProbeConfig(depth=0)).run().chains == 0

	def test_exact_audit_can_be_disabled(self) -> None:
		report = DifferentialProbe(ComplexTraits, ProbeConfig(samples=50, exact_audit=False)).run()
		assert report.exact_checked == 0

	def test_skips_are_recorded_as_events(self) -> None:
		class NoDivision(ComplexTraits):
			UNARY_OPERATIONS = ()
			BINARY_OPERATIONS = (
				BinaryOperation("divide", "/", ComplexTraits.binary("divide").reference, ComplexTraits.binary("divide").actual, lambda a, b: False),
			)

		report = DifferentialProbe(NoDivision, ProbeConfig(samples=10, depth=3)).run()
		assert report.skipped == 10
		assert report.checked == 0
		assert all(e.kind == "skipped" for e in report.events)
		assert report.ok

	def test_mismatch_is_recorded(self, capsys) -> None:
		class Broken(ComplexTraits):
			UNARY_OPERATIONS = ()
			BINARY_OPERATIONS = (
				BinaryOperation("add", "+", lambda a, b: a + b + 1, lambda a, b: a + b, lambda a, b: True),
			)

		report = DifferentialProbe(Broken, ProbeConfig(samples=5, depth=2, exact_audit=False, verbose=True)).run()
		assert report.mismatches == 5
		assert not report.ok
		assert isinstance(report.events[0], ProbeEvent)
		assert report.events[0].kind == "mismatch"
		assert report.events[0].payload["op"] == "add"
		assert "mismatch: add" in capsys.readouterr().out
