"""
MathJSON expression model: four immutable variants forming a strict tree.

  • NumberLiteral(value, raw=None, metadata=None)   value ∈ {int, float, Decimal, Fraction}
  • SymbolLiteral(name, metadata=None)              name normalized to Unicode NFC
  • StringLiteral(value, metadata=None)
  • FunctionCall(operator, arguments=(), metadata=None)

Equality is structural and ignores metadata (and `raw` for numbers). NaN equals NaN.
Metadata is either None or a non-empty read-only mapping restricted to METADATA_KEYS.

Module-level helpers:
  • metadata(expr)                     -> Optional[Mapping]
  • with_metadata(expr, key, value)    -> new expression with the key merged in
  • with_metadata(expr, mapping)       -> new expression with metadata replaced
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Union
import logging
import math
import unicodedata

import numpy as np

from mathjson.config import METADATA_KEYS

logger = logging.getLogger(__name__)

NumberValue = Union[int, float, Decimal, Fraction]
Metadata = Optional[Mapping[str, Any]]

_NAN_HASH = hash("mathjson:NaN")
_MISSING = object()


class ExpressionType(Enum):
	"""Tag of an expression variant."""
	NUMBER = "number"
	SYMBOL = "symbol"
	STRING = "string"
	FUNCTION = "function"


def _freeze_metadata(meta: Optional[Mapping[str, Any]]) -> Metadata:
	"""Keep recognized keys only; an empty result is stored as None."""
	if meta is None:
		return None
	if not isinstance(meta, Mapping):
		raise TypeError(f"metadata must be a mapping, got {type(meta).__name__}")
	kept = {}
	for k, v in meta.items():
		if k in METADATA_KEYS:
			kept[k] = v
		else:
			logger.debug("dropping unrecognized metadata key %r", k)
	if not kept:
		return None
	return MappingProxyType(kept)


def _is_nan(v: NumberValue) -> bool:
	if isinstance(v, float):
		return math.isnan(v)
	if isinstance(v, Decimal):
		return v.is_nan()
	return False


def _coerce_number(value: Any) -> NumberValue:
	if isinstance(value, (bool, np.bool_)):
		raise TypeError("NumberLiteral value cannot be a bool")
	if isinstance(value, np.integer):
		return int(value)
	if isinstance(value, np.floating):
		return float(value)
	if isinstance(value, (int, float, Decimal, Fraction)):
		return value
	raise TypeError(f"NumberLiteral value must be int, float, Decimal or Fraction, got {type(value).__name__}")


class _ExpressionBase:
	"""Shared behaviour of the four variants."""

	kind: ExpressionType


@dataclass(frozen=True, eq=False)
class NumberLiteral(_ExpressionBase):
	"""A number, optionally with the exact author-supplied text it was read from."""
	value: NumberValue
	raw: Optional[str] = None
	metadata: Metadata = field(default=None)

	kind = ExpressionType.NUMBER

	def __post_init__(self) -> None:
		object.__setattr__(self, "value", _coerce_number(self.value))
		if self.raw is not None and not isinstance(self.raw, str):
			raise TypeError(f"raw must be a string, got {type(self.raw).__name__}")
		object.__setattr__(self, "metadata", _freeze_metadata(self.metadata))

	def is_nan(self) -> bool:
		return _is_nan(self.value)

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, NumberLiteral):
			return NotImplemented
		a_nan = self.is_nan()
		b_nan = other.is_nan()
		if a_nan or b_nan:
			return a_nan and b_nan
		return self.value == other.value

	def __hash__(self) -> int:
		if self.is_nan():
			return _NAN_HASH
		return hash(self.value)


@dataclass(frozen=True, eq=False)
class SymbolLiteral(_ExpressionBase):
	"""A variable, constant or wildcard name; stored in NFC form."""
	name: str
	metadata: Metadata = field(default=None)

	kind = ExpressionType.SYMBOL

	def __post_init__(self) -> None:
		if not isinstance(self.name, str):
			raise TypeError(f"symbol name must be a string, got {type(self.name).__name__}")
		object.__setattr__(self, "name", unicodedata.normalize("NFC", self.name))
		object.__setattr__(self, "metadata", _freeze_metadata(self.metadata))

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, SymbolLiteral):
			return NotImplemented
		return self.name == other.name

	def __hash__(self) -> int:
		return hash((ExpressionType.SYMBOL, self.name))


@dataclass(frozen=True, eq=False)
class StringLiteral(_ExpressionBase):
	"""A string literal."""
	value: str
	metadata: Metadata = field(default=None)

	kind = ExpressionType.STRING

	def __post_init__(self) -> None:
		if not isinstance(self.value, str):
			raise TypeError(f"string value must be a string, got {type(self.value).__name__}")
		object.__setattr__(self, "metadata", _freeze_metadata(self.metadata))

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, StringLiteral):
			return NotImplemented
		return self.value == other.value

	def __hash__(self) -> int:
		return hash((ExpressionType.STRING, self.value))


@dataclass(frozen=True, eq=False)
class FunctionCall(_ExpressionBase):
	"""An operator applied to an ordered tuple of argument expressions."""
	operator: str
	arguments: Tuple["Expression", ...] = ()
	metadata: Metadata = field(default=None)

	kind = ExpressionType.FUNCTION

	def __post_init__(self) -> None:
		if not isinstance(self.operator, str):
			raise TypeError(f"operator must be a string, got {type(self.operator).__name__}")
		args = tuple(self.arguments)
		for a in args:
			if not isinstance(a, _ExpressionBase):
				raise TypeError(f"function arguments must be expressions, got {type(a).__name__}")
		object.__setattr__(self, "arguments", args)
		object.__setattr__(self, "metadata", _freeze_metadata(self.metadata))
		# children are built first, so their hashes are already cached
		object.__setattr__(self, "_hash", hash((ExpressionType.FUNCTION, self.operator, args)))

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, FunctionCall):
			return NotImplemented
		pairs = [(self, other)]
		while pairs:
			a, b = pairs.pop()
			if isinstance(a, FunctionCall) and isinstance(b, FunctionCall):
				if a is b:
					continue
				if a._hash != b._hash or a.operator != b.operator or len(a.arguments) != len(b.arguments):
					return False
				pairs.extend(zip(a.arguments, b.arguments))
			elif a != b:
				return False
		return True

	def __hash__(self) -> int:
		return self._hash


Expression = Union[NumberLiteral, SymbolLiteral, StringLiteral, FunctionCall]


def is_expression(obj: object) -> bool:
	return isinstance(obj, _ExpressionBase)


def metadata(expr: Expression) -> Metadata:
	"""Return the metadata mapping of an expression, or None."""
	if not is_expression(expr):
		raise TypeError(f"expected an expression, got {type(expr).__name__}")
	return expr.metadata


def with_metadata(expr: Expression, key_or_mapping: Union[str, Mapping[str, Any]], value: Any = _MISSING) -> Expression:
	"""
	Return a copy of `expr` with updated metadata; the original is untouched.

	with_metadata(expr, "wikidata", "Q167") merges one key into the existing metadata.
	with_metadata(expr, {"comment": "..."}) replaces the metadata wholesale.
	"""
	if not is_expression(expr):
		raise TypeError(f"expected an expression, got {type(expr).__name__}")
	if value is _MISSING:
		if isinstance(key_or_mapping, str):
			raise TypeError("with_metadata(expr, key, value) requires a value")
		return replace(expr, metadata=key_or_mapping)
	if not isinstance(key_or_mapping, str):
		raise TypeError("metadata key must be a string")
	merged = dict(expr.metadata or {})
	merged[key_or_mapping] = value
	return replace(expr, metadata=merged)
