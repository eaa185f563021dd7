"""Numeric canonicalization between MathJSON number text and Python numeric values.

Provides:
  • NumericCanonicalizer.parse_text(text) -> (value, NumberKind): special values, repeating
    decimals, then integer / float / Decimal in that order.
  • NumericCanonicalizer.parse_repeating_decimal(text) -> Fraction, integer arithmetic only.
  • NumericCanonicalizer.format_value(value) -> str: the canonical text of a value.
  • NumericCanonicalizer.rational_to_repeating(r) -> str: long division with cycle detection.
  • NumericCanonicalizer.kind_of(value) -> NumberKind

Module-level functions proxy to NumericCanonicalizer methods.
"""

from __future__ import annotations
from decimal import Decimal, InvalidOperation
from enum import Enum
from fractions import Fraction
from typing import Dict, List, Tuple
import logging
import math
import re

from mathjson.core.errors import MathJSONParseError
from mathjson.core.expr import NumberValue

logger = logging.getLogger(__name__)

_REPEATING_RE = re.compile(r"^(-?)([0-9]*)\.?([0-9]*)\(([0-9]+)\)$")
_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")
_DECIMAL_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")


class NumberKind(Enum):
	"""Canonical kind of a MathJSON number."""
	INTEGER = "integer"
	FLOAT = "float"
	DECIMAL = "decimal"
	RATIONAL = "rational"
	NAN = "nan"
	INFINITY = "infinity"


class NumericCanonicalizer:
	"""Stateless two-way mapping between number values and their MathJSON text."""

	NAN_TEXT = "NaN"
	POS_INF_TEXT = "+Infinity"
	NEG_INF_TEXT = "-Infinity"

	@staticmethod
	def kind_of(value: NumberValue) -> NumberKind:
		"""Classify a value into its canonical kind."""
		if isinstance(value, Fraction):
			return NumberKind.RATIONAL
		if isinstance(value, Decimal):
			if value.is_nan():
				return NumberKind.NAN
			if value.is_infinite():
				return NumberKind.INFINITY
			return NumberKind.DECIMAL
		if isinstance(value, float):
			if math.isnan(value):
				return NumberKind.NAN
			if math.isinf(value):
				return NumberKind.INFINITY
			return NumberKind.FLOAT
		if isinstance(value, int):
			return NumberKind.INTEGER
		raise TypeError(f"not a MathJSON number value: {type(value).__name__}")

	@staticmethod
	def parse_repeating_decimal(text: str) -> Fraction:
		"""
		Parse "[-]I[.N](R)" into an exact Fraction.

		  value = I + (N + R / (10^len(R) - 1)) / 10^len(N)

		Every step is integer or Fraction arithmetic; the result is in lowest terms.
		"""
		m = _REPEATING_RE.match(text)
		if m is None:
			raise MathJSONParseError(f"Invalid repeating decimal format: {text}")
		sign, int_digits, non_rep, rep = m.groups()

		int_val = int(int_digits) if int_digits else 0
		non_rep_val = int(non_rep) if non_rep else 0
		rep_val = int(rep)

		repeating_fraction = Fraction(rep_val, 10 ** len(rep) - 1)
		decimal_fraction = (non_rep_val + repeating_fraction) / (10 ** len(non_rep))
		result = int_val + decimal_fraction
		if sign == "-":
			result = -result
		return result

	@staticmethod
	def _parse_integer(text: str):
		if _INTEGER_RE.match(text) is None:
			return None
		return int(text)

	@staticmethod
	def try_float(text: str):
		"""Float parse; overflow to infinity or underflow of a non-zero mantissa counts as failure."""
		if _DECIMAL_RE.match(text) is None:
			return None
		val = float(text)
		if math.isinf(val):
			logger.debug("float overflow for %r, falling back to Decimal", text)
			return None
		if val == 0.0:
			mantissa = re.split(r"[eE]", text)[0]
			if any(ch in "123456789" for ch in mantissa):
				logger.debug("float underflow for %r, falling back to Decimal", text)
				return None
		return val

	@staticmethod
	def _parse_decimal(text: str):
		if _DECIMAL_RE.match(text) is None:
			return None
		try:
			return Decimal(text)
		except InvalidOperation:
			return None

	@staticmethod
	def parse_text(text: str) -> Tuple[NumberValue, NumberKind]:
		"""
		Map the text of a {"num": ...} object to (value, kind).

		Order: NaN / ±Infinity, repeating decimal (text contains both parentheses),
		integer, float, Decimal. Failure of every step raises MathJSONParseError.
		"""
		if not isinstance(text, str):
			raise MathJSONParseError(f"'num' value must be a string, got: {type(text).__name__}")

		if text == "NaN":
			return math.nan, NumberKind.NAN
		if text == "+Infinity" or text == "Infinity":
			return math.inf, NumberKind.INFINITY
		if text == "-Infinity":
			return -math.inf, NumberKind.INFINITY

		if "(" in text and ")" in text:
			return NumericCanonicalizer.parse_repeating_decimal(text), NumberKind.RATIONAL

		i = NumericCanonicalizer._parse_integer(text)
		if i is not None:
			return i, NumberKind.INTEGER
		f = NumericCanonicalizer.try_float(text)
		if f is not None:
			return f, NumberKind.FLOAT
		d = NumericCanonicalizer._parse_decimal(text)
		if d is not None:
			return d, NumberKind.DECIMAL

		raise MathJSONParseError(f"Cannot parse numeric value: {text}")

	@staticmethod
	def rational_to_repeating(r: Fraction) -> str:
		"""
		Render a Fraction as a terminating or repeating decimal.

		  Fraction(1, 2)  -> "0.5"
		  Fraction(1, 3)  -> "0.(3)"
		  Fraction(37, 30) -> "1.2(3)"
		  Fraction(-4, 3) -> "-1.(3)"

		Long division records the digit position at which each remainder first
		appeared; a recurring remainder closes the cycle.
		"""
		r = Fraction(r)
		n = r.numerator
		d = r.denominator
		if d == 1:
			return str(n)

		sign = "-" if n < 0 else ""
		n = abs(n)
		int_part, remainder = divmod(n, d)

		digits: List[str] = []
		seen: Dict[int, int] = {}
		while remainder != 0 and remainder not in seen:
			seen[remainder] = len(digits)
			remainder *= 10
			digit, remainder = divmod(remainder, d)
			digits.append(str(digit))

		if remainder == 0:
			return f"{sign}{int_part}.{''.join(digits)}"

		start = seen[remainder]
		non_repeating = "".join(digits[:start])
		repeating = "".join(digits[start:])
		if non_repeating:
			return f"{sign}{int_part}.{non_repeating}({repeating})"
		return f"{sign}{int_part}.({repeating})"

	@staticmethod
	def format_value(value: NumberValue) -> str:
		"""Canonical {"num": ...} text for a value (ignores any raw text)."""
		kind = NumericCanonicalizer.kind_of(value)
		if kind is NumberKind.NAN:
			return NumericCanonicalizer.NAN_TEXT
		if kind is NumberKind.INFINITY:
			if value > 0:
				return NumericCanonicalizer.POS_INF_TEXT
			return NumericCanonicalizer.NEG_INF_TEXT
		if kind is NumberKind.RATIONAL:
			return NumericCanonicalizer.rational_to_repeating(value)
		if kind is NumberKind.FLOAT:
			return repr(value)
		return str(value)

	@staticmethod
	def needs_object_form(value: NumberValue) -> bool:
		"""True for values that have no lossless native JSON number form."""
		kind = NumericCanonicalizer.kind_of(value)
		return kind in (NumberKind.NAN, NumberKind.INFINITY, NumberKind.RATIONAL, NumberKind.DECIMAL)



def kind_of(value: NumberValue) -> NumberKind:
	"""Proxy to NumericCanonicalizer.kind_of."""
	return NumericCanonicalizer.kind_of(value)

def parse_number_text(text: str) -> Tuple[NumberValue, NumberKind]:
	"""Proxy to NumericCanonicalizer.parse_text."""
	return NumericCanonicalizer.parse_text(text)

def parse_repeating_decimal(text: str) -> Fraction:
	"""Proxy to NumericCanonicalizer.parse_repeating_decimal."""
	return NumericCanonicalizer.parse_repeating_decimal(text)

def rational_to_repeating(r: Fraction) -> str:
	"""Proxy to NumericCanonicalizer.rational_to_repeating."""
	return NumericCanonicalizer.rational_to_repeating(r)

def format_number(value: NumberValue) -> str:
	"""Proxy to NumericCanonicalizer.format_value."""
	return NumericCanonicalizer.format_value(value)
