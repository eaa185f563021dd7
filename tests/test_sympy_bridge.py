"""Tests for conversion between MathJSON expressions and SymPy."""

import math
from decimal import Decimal
from fractions import Fraction

import pytest
import sympy as sp

from mathjson import (
	UnsupportedConversionError, parse, to_sympy, from_sympy,
	NumberLiteral, SymbolLiteral, StringLiteral, FunctionCall,
)

X = sp.Symbol("x")
Y = sp.Symbol("y")


class TestToSympy:

	def test_add(self):
		assert to_sympy(parse('["Add", 1, "x"]')) == X + 1

	def test_nested(self):
		assert to_sympy(parse('["Multiply", ["Add", 1, 2], 3]')) == 9

	@pytest.mark.parametrize("text,expected", [
		('["Subtract", "x", "y"]', X - Y),
		('["Divide", "x", 2]', X / 2),
		('["Power", "x", 2]', X ** 2),
		('["Negate", "x"]', -X),
		('["Sqrt", "x"]', sp.sqrt(X)),
		('["Sin", "x"]', sp.sin(X)),
		('["Exp", "x"]', sp.exp(X)),
		('["Ln", "x"]', sp.log(X)),
		('["Log", "x"]', sp.log(X)),
		('["Log", "x", 2]', sp.log(X, 2)),
		('["Equal", "x", 1]', sp.Eq(X, 1)),
		('["Less", "x", "y"]', sp.Lt(X, Y)),
		('["Abs", "x"]', sp.Abs(X)),
	])
	def test_operators(self, text, expected):
		assert to_sympy(parse(text)) == expected

	def test_constants(self):
		assert to_sympy(SymbolLiteral("Pi")) is sp.pi
		assert to_sympy(SymbolLiteral("ExponentialE")) is sp.E
		assert to_sympy(SymbolLiteral("ImaginaryUnit")) is sp.I

	def test_backtick_symbol(self):
		assert to_sympy(SymbolLiteral("`long name`")) == sp.Symbol("long name")

	def test_numbers(self):
		assert to_sympy(NumberLiteral(Fraction(1, 3))) == sp.Rational(1, 3)
		assert to_sympy(NumberLiteral(7)) == sp.Integer(7)
		assert to_sympy(NumberLiteral(math.inf)) == sp.oo
		assert to_sympy(NumberLiteral(-math.inf)) == -sp.oo
		assert to_sympy(NumberLiteral(math.nan)) is sp.nan

	def test_decimal(self):
		assert isinstance(to_sympy(NumberLiteral(Decimal("1e400"))), sp.Float)

	def test_string_rejected(self):
		with pytest.raises(UnsupportedConversionError):
			to_sympy(StringLiteral("text"))

	def test_unknown_operator(self):
		with pytest.raises(UnsupportedConversionError, match="Unknown operator: Frobnicate"):
			to_sympy(parse('["Frobnicate", 1]'))

	def test_zero_arguments(self):
		with pytest.raises(UnsupportedConversionError, match="at least one argument"):
			to_sympy(parse('["Random"]'))

	@pytest.mark.parametrize("text", ['["Sin", 1, 2]', '["Divide", 1]', '["Negate", 1, 2]', '["Log", 1, 2, 3]'])
	def test_wrong_arity(self, text):
		with pytest.raises(UnsupportedConversionError, match="does not support"):
			to_sympy(parse(text))

	def test_empty_symbol(self):
		with pytest.raises(UnsupportedConversionError):
			to_sympy(SymbolLiteral(""))

	def test_is_value_error(self):
		with pytest.raises(ValueError):
			to_sympy(StringLiteral("s"))


class TestFromSympy:

	def test_symbol(self):
		assert from_sympy(X) == SymbolLiteral("x")

	def test_function(self):
		assert from_sympy(sp.sin(X)) == FunctionCall("Sin", (SymbolLiteral("x"),))

	def test_negation(self):
		assert from_sympy(-X) == FunctionCall("Negate", (SymbolLiteral("x"),))

	def test_sqrt(self):
		assert from_sympy(sp.sqrt(X)) == FunctionCall("Sqrt", (SymbolLiteral("x"),))

	def test_add_arguments(self):
		e = from_sympy(X + 1)
		assert e.operator == "Add"
		assert set(e.arguments) == {SymbolLiteral("x"), NumberLiteral(1)}

	def test_numbers(self):
		assert from_sympy(sp.Integer(5)) == NumberLiteral(5)
		assert from_sympy(sp.Rational(1, 3)).value == Fraction(1, 3)
		assert from_sympy(sp.Float(2.5)).value == 2.5
		assert from_sympy(sp.oo).value == math.inf
		assert from_sympy(-sp.oo).value == -math.inf
		assert from_sympy(sp.nan).is_nan()

	def test_plain_python_numbers(self):
		assert from_sympy(3) == NumberLiteral(3)
		assert from_sympy(Fraction(2, 3)).value == Fraction(2, 3)

	def test_constants(self):
		assert from_sympy(sp.pi) == SymbolLiteral("Pi")
		assert from_sympy(sp.E) == SymbolLiteral("ExponentialE")
		assert from_sympy(sp.zoo) == SymbolLiteral("ComplexInfinity")

	def test_relation(self):
		assert from_sympy(sp.Eq(X, 1)).operator == "Equal"
		assert from_sympy(sp.Ge(X, 1)).operator == "GreaterEqual"

	def test_undefined_function_is_capitalized(self):
		f = sp.Function("foo")
		assert from_sympy(f(X)).operator == "Foo"

	@pytest.mark.parametrize("obj", [True, "x", [1, 2], sp.Integral(X, X)])
	def test_unsupported(self, obj):
		with pytest.raises(UnsupportedConversionError):
			from_sympy(obj)


class TestRoundTrip:

	@pytest.mark.parametrize("text", [
		'["Add", "x", 1]',
		'["Sin", ["Multiply", 2, "x"]]',
		'["Power", "x", "y"]',
		'["Equal", "x", "y"]',
		'["Exp", ["Negate", "x"]]',
	])
	def test_sympy_round_trip(self, text):
		s = to_sympy(parse(text))
		assert to_sympy(from_sympy(s)) == s
