"""SymPy bridge: MathJSON expression trees to SymPy objects and back.

Provides:
  • SympyBridge.to_sympy(expr): numbers, symbols and supported operator heads -> SymPy.
  • SympyBridge.from_sympy(obj): SymPy (or plain Python numbers) -> MathJSON expression.

Both directions are pure functions of their input; symbols are created by name on
every call, which SymPy treats as equal. Anything without a counterpart raises
UnsupportedConversionError.

Module-level functions proxy to SympyBridge methods for compatibility.
"""

from __future__ import annotations
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Dict, List
import math

import sympy as sp
from sympy.core.relational import Relational

from mathjson.core.errors import UnsupportedConversionError
from mathjson.core.expr import Expression, NumberLiteral, SymbolLiteral, StringLiteral, FunctionCall


_CONSTANTS: Dict[str, sp.Basic] = {
	"Pi": sp.pi,
	"ExponentialE": sp.E,
	"ImaginaryUnit": sp.I,
	"ComplexInfinity": sp.zoo,
}

_UNARY: Dict[str, Callable[[sp.Basic], sp.Basic]] = {
	"Sqrt": sp.sqrt, "Abs": sp.Abs, "Exp": sp.exp, "Ln": sp.log,
	"Log10": lambda x: sp.log(x, 10), "Log2": lambda x: sp.log(x, 2),
	"Sin": sp.sin, "Cos": sp.cos, "Tan": sp.tan, "Cot": sp.cot, "Sec": sp.sec, "Csc": sp.csc,
	"Arcsin": sp.asin, "Arccos": sp.acos, "Arctan": sp.atan,
	"Sinh": sp.sinh, "Cosh": sp.cosh, "Tanh": sp.tanh,
	"Arcsinh": sp.asinh, "Arccosh": sp.acosh, "Arctanh": sp.atanh,
	"Floor": sp.floor, "Ceil": sp.ceiling, "Factorial": sp.factorial,
	"Not": sp.Not,
}

_BINARY: Dict[str, Callable[[sp.Basic, sp.Basic], sp.Basic]] = {
	"Subtract": lambda a, b: a - b,
	"Divide": lambda a, b: a / b,
	"Power": lambda a, b: a ** b,
	"Root": lambda a, n: sp.root(a, n),
	"Equal": sp.Eq, "NotEqual": sp.Ne,
	"Less": sp.Lt, "Greater": sp.Gt,
	"LessEqual": sp.Le, "GreaterEqual": sp.Ge,
}

_VARIADIC: Dict[str, Callable[..., sp.Basic]] = {
	"Add": sp.Add, "Multiply": sp.Mul, "And": sp.And, "Or": sp.Or,
}

_REVERSE_FUNCTIONS: Dict[Any, str] = {
	sp.sin: "Sin", sp.cos: "Cos", sp.tan: "Tan", sp.cot: "Cot", sp.sec: "Sec", sp.csc: "Csc",
	sp.asin: "Arcsin", sp.acos: "Arccos", sp.atan: "Arctan",
	sp.sinh: "Sinh", sp.cosh: "Cosh", sp.tanh: "Tanh",
	sp.asinh: "Arcsinh", sp.acosh: "Arccosh", sp.atanh: "Arctanh",
	sp.exp: "Exp", sp.log: "Ln", sp.Abs: "Abs",
	sp.floor: "Floor", sp.ceiling: "Ceil", sp.factorial: "Factorial",
}

_REVERSE_RELATIONS: Dict[Any, str] = {
	sp.Eq: "Equal", sp.Ne: "NotEqual",
	sp.StrictLessThan: "Less", sp.StrictGreaterThan: "Greater",
	sp.LessThan: "LessEqual", sp.GreaterThan: "GreaterEqual",
}


class SympyBridge:
	"""Namespace for MathJSON <-> SymPy conversion."""

	@staticmethod
	def _number_to_sympy(expr: NumberLiteral) -> sp.Basic:
		v = expr.value
		if expr.is_nan():
			return sp.nan
		if isinstance(v, Fraction):
			return sp.Rational(v.numerator, v.denominator)
		if isinstance(v, int):
			return sp.Integer(v)
		if isinstance(v, float):
			if math.isinf(v):
				return sp.oo if v > 0 else -sp.oo
			return sp.Float(v)
		if isinstance(v, Decimal):
			if v.is_infinite():
				return sp.oo if v > 0 else -sp.oo
			text = str(v)
			digits = len(v.as_tuple().digits)
			return sp.Float(text, max(15, digits))
		raise UnsupportedConversionError(f"Unsupported number value: {v!r}")

	@staticmethod
	def _symbol_to_sympy(expr: SymbolLiteral) -> sp.Basic:
		name = expr.name
		if name in _CONSTANTS:
			return _CONSTANTS[name]
		if len(name) >= 2 and name.startswith("`") and name.endswith("`"):
			name = name[1:-1]
		if name == "":
			raise UnsupportedConversionError("Empty symbol name cannot be converted to SymPy")
		return sp.Symbol(name)

	@staticmethod
	def _function_to_sympy(expr: FunctionCall) -> sp.Basic:
		op = expr.operator
		args: List[sp.Basic] = []
		for a in expr.arguments:
			args.append(SympyBridge.to_sympy(a))
		n = len(args)

		if n == 0:
			raise UnsupportedConversionError(f"Operator {op} requires at least one argument")

		if op == "Negate":
			if n != 1:
				raise UnsupportedConversionError(f"Operator Negate does not support {n} arguments")
			return -args[0]

		if op == "Log":
			if n == 1:
				return sp.log(args[0])
			if n == 2:
				return sp.log(args[0], args[1])
			raise UnsupportedConversionError(f"Operator Log does not support {n} arguments")

		if op in _VARIADIC:
			return _VARIADIC[op](*args)

		if op in _UNARY:
			if n != 1:
				raise UnsupportedConversionError(f"Operator {op} does not support {n} arguments")
			return _UNARY[op](args[0])

		if op in _BINARY:
			if n != 2:
				raise UnsupportedConversionError(f"Operator {op} does not support {n} arguments")
			return _BINARY[op](args[0], args[1])

		raise UnsupportedConversionError(f"Unknown operator: {op}")

	@staticmethod
	def to_sympy(expr: Expression) -> sp.Basic:
		"""Convert a MathJSON expression to a SymPy object."""
		if isinstance(expr, NumberLiteral):
			return SympyBridge._number_to_sympy(expr)
		if isinstance(expr, SymbolLiteral):
			return SympyBridge._symbol_to_sympy(expr)
		if isinstance(expr, StringLiteral):
			raise UnsupportedConversionError("StringLiteral cannot be converted to SymPy")
		if isinstance(expr, FunctionCall):
			return SympyBridge._function_to_sympy(expr)
		raise UnsupportedConversionError(f"Not a MathJSON expression: {type(expr).__name__}")

	@staticmethod
	def _number_from_sympy(e: sp.Basic) -> NumberLiteral:
		if e is sp.nan:
			return NumberLiteral(math.nan)
		if e is sp.oo:
			return NumberLiteral(math.inf)
		if e is sp.S.NegativeInfinity:
			return NumberLiteral(-math.inf)
		if e.is_Integer:
			return NumberLiteral(int(e))
		if e.is_Rational:
			return NumberLiteral(Fraction(int(e.p), int(e.q)))
		if e.is_Float:
			return NumberLiteral(float(e))
		raise UnsupportedConversionError(f"Unsupported SymPy number: {e!r}")

	@staticmethod
	def _call(op: str, args) -> FunctionCall:
		out = []
		for a in args:
			out.append(SympyBridge.from_sympy(a))
		return FunctionCall(op, tuple(out))

	@staticmethod
	def from_sympy(obj: Any) -> Expression:
		"""Convert a SymPy object (or a plain int / float / Fraction) to a MathJSON expression."""
		if isinstance(obj, bool):
			raise UnsupportedConversionError("bool cannot be converted to a MathJSON number")
		if isinstance(obj, (int, float, Fraction)):
			return NumberLiteral(obj)
		if not isinstance(obj, sp.Basic):
			raise UnsupportedConversionError(f"Unsupported object: {type(obj).__name__}")

		e = obj
		if e is sp.zoo:
			return SymbolLiteral("ComplexInfinity")
		for name, const in _CONSTANTS.items():
			if e is const:
				return SymbolLiteral(name)
		if e.is_Number:
			return SympyBridge._number_from_sympy(e)
		if isinstance(e, sp.Symbol):
			return SymbolLiteral(e.name)

		if isinstance(e, sp.Add):
			return SympyBridge._call("Add", e.args)
		if isinstance(e, sp.Mul):
			if len(e.args) == 2 and e.args[0] == sp.S.NegativeOne:
				return SympyBridge._call("Negate", (e.args[1],))
			return SympyBridge._call("Multiply", e.args)
		if isinstance(e, sp.Pow):
			base, expo = e.as_base_exp()
			if expo == sp.Rational(1, 2):
				return SympyBridge._call("Sqrt", (base,))
			return SympyBridge._call("Power", (base, expo))

		if isinstance(e, Relational):
			op = _REVERSE_RELATIONS.get(e.func)
			if op is None:
				raise UnsupportedConversionError(f"Unsupported relation: {e.func.__name__}")
			return SympyBridge._call(op, e.args)
		if isinstance(e, sp.And):
			return SympyBridge._call("And", e.args)
		if isinstance(e, sp.Or):
			return SympyBridge._call("Or", e.args)
		if isinstance(e, sp.Not):
			return SympyBridge._call("Not", e.args)

		if isinstance(e, sp.Function):
			op = _REVERSE_FUNCTIONS.get(e.func)
			if op is None:
				fname = e.func.__name__
				op = fname[:1].upper() + fname[1:]
			return SympyBridge._call(op, e.args)

		raise UnsupportedConversionError(f"Unsupported SymPy expression: {type(e).__name__}")



def to_sympy(expr: Expression) -> sp.Basic:
	"""Proxy to SympyBridge.to_sympy."""
	return SympyBridge.to_sympy(expr)

def from_sympy(obj: Any) -> Expression:
	"""Proxy to SympyBridge.from_sympy."""
	return SympyBridge.from_sympy(obj)
