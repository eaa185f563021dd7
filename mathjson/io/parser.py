"""
MathJSON parser: JSON text -> expression tree.

Dispatch on the outer JSON shape:
  number  -> NumberLiteral (int, float, or Decimal when out of float range; no raw)
  string  -> StringLiteral when wrapped in single quotes, else SymbolLiteral
  array   -> FunctionCall [operator, *arguments]
  object  -> exactly one of {"num", "sym", "str", "fn"} plus optional metadata keys

Both the JSON decode and the tree build run on explicit stacks, so document depth is
limited by memory rather than by the interpreter's recursion limit.

Every failure surfaces as MathJSONParseError.
"""

from __future__ import annotations
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple, Union
import json
import logging

from mathjson.config import DISCRIMINATOR_KEYS, METADATA_KEYS
from mathjson.core.errors import MathJSONParseError
from mathjson.core.expr import Expression, NumberLiteral, SymbolLiteral, StringLiteral, FunctionCall
from mathjson.io.reader import read_json
from mathjson.numeric.canonical import NumericCanonicalizer

logger = logging.getLogger(__name__)


def _parse_float_literal(text: str) -> Union[float, Decimal]:
	"""Bare JSON float literal; out-of-range literals keep their exact Decimal value."""
	val = NumericCanonicalizer.try_float(text)
	if val is None:
		return Decimal(text)
	return val


class _Call:
	"""Pending FunctionCall: built once its `count` arguments are on the result stack."""
	__slots__ = ("operator", "count", "metadata")

	def __init__(self, operator: str, count: int, metadata: Optional[Dict[str, Any]]) -> None:
		self.operator = operator
		self.count = count
		self.metadata = metadata


class MathJSONParser:
	"""Stateless MathJSON reader."""

	def __init__(self) -> None:
		"""Initialize the parser (no state is kept between calls)."""

	def _load_json(self, text: Union[str, bytes, bytearray]) -> Any:
		if not isinstance(text, (str, bytes, bytearray)):
			raise MathJSONParseError(f"Input must be a string, got: {type(text).__name__}")
		try:
			return read_json(text, parse_float=_parse_float_literal)
		except json.JSONDecodeError as e:
			raise MathJSONParseError(f"Invalid JSON: {e.msg}", e.pos) from e
		except UnicodeDecodeError as e:
			raise MathJSONParseError(f"Invalid JSON: {e.reason}", e.start) from e

	def parse(self, text: Union[str, bytes, bytearray]) -> Expression:
		"""Parse a complete MathJSON document into an expression tree."""
		return self.parse_value(self._load_json(text))

	def parse_value(self, value: Any) -> Expression:
		"""
		Convert an already-decoded JSON value into an expression.

		Work items are decoded JSON values or _Call markers. A value is either a leaf,
		pushed straight onto `results`, or a function, which pushes its marker followed by
		its arguments in reverse so they are converted left to right. A marker pops its
		arguments off `results` and pushes the finished FunctionCall.
		"""
		work: List[Any] = [value]
		results: List[Expression] = []
		while work:
			item = work.pop()
			if isinstance(item, _Call):
				start = len(results) - item.count
				args = tuple(results[start:])
				del results[start:]
				results.append(FunctionCall(item.operator, args, metadata=item.metadata))
				continue
			leaf, call = self._classify(item)
			if call is None:
				results.append(leaf)
				continue
			marker, args = call
			work.append(marker)
			work.extend(reversed(args))
		return results[0]

	def _classify(self, value: Any) -> Tuple[Optional[Expression], Optional[Tuple[_Call, List[Any]]]]:
		"""Return (leaf, None) for a leaf value, or (None, (marker, raw_arguments)) for a function."""
		if isinstance(value, bool) or value is None:
			raise MathJSONParseError(f"Unsupported JSON value type: {json.dumps(value)}")
		if isinstance(value, (int, float, Decimal)):
			return NumberLiteral(value), None
		if isinstance(value, str):
			return self._parse_string_or_symbol(value), None
		if isinstance(value, list):
			return None, self._function_header(value, None)
		if isinstance(value, dict):
			return self._parse_object(value)
		raise MathJSONParseError(f"Unsupported JSON value type: {type(value).__name__}")

	def _parse_string_or_symbol(self, value: str) -> Expression:
		if len(value) >= 2 and value.startswith("'") and value.endswith("'"):
			return StringLiteral(value[1:-1])
		return SymbolLiteral(value)

	def _function_header(self, arr: List[Any], meta: Optional[Dict[str, Any]]) -> Tuple[_Call, List[Any]]:
		if len(arr) == 0:
			raise MathJSONParseError("Function expression array cannot be empty")
		op = arr[0]
		if not isinstance(op, str):
			shown = type(op).__name__ if isinstance(op, (list, dict)) else json.dumps(op)
			raise MathJSONParseError(f"Function operator must be a string, got: {shown}")
		return _Call(op, len(arr) - 1, meta), arr[1:]

	def _extract_metadata(self, obj: Dict[str, Any]) -> Optional[Dict[str, Any]]:
		"""Collect recognized metadata keys in document order; unknown keys are ignored."""
		meta: Dict[str, Any] = {}
		for k, v in obj.items():
			if k in DISCRIMINATOR_KEYS:
				continue
			if k in METADATA_KEYS:
				meta[k] = v
			else:
				logger.debug("ignoring unrecognized key %r in MathJSON object", k)
		if not meta:
			return None
		return meta

	def _parse_object(self, obj: Dict[str, Any]):
		present = [k for k in DISCRIMINATOR_KEYS if k in obj]
		if len(present) != 1:
			raise MathJSONParseError("Unknown object format. Expected exactly one of 'num', 'sym', 'str', or 'fn' key")
		key = present[0]
		body = obj[key]
		meta = self._extract_metadata(obj)

		if key == "num":
			if not isinstance(body, str):
				raise MathJSONParseError(f"'num' value must be a string, got: {type(body).__name__}")
			value, _kind = NumericCanonicalizer.parse_text(body)
			return NumberLiteral(value, raw=body, metadata=meta), None

		if key == "sym":
			if not isinstance(body, str):
				raise MathJSONParseError(f"'sym' value must be a string, got: {type(body).__name__}")
			return SymbolLiteral(body, metadata=meta), None

		if key == "str":
			if not isinstance(body, str):
				raise MathJSONParseError(f"'str' value must be a string, got: {type(body).__name__}")
			return StringLiteral(body, metadata=meta), None

		if not isinstance(body, list):
			raise MathJSONParseError(f"'fn' value must be an array, got: {type(body).__name__}")
		return None, self._function_header(body, meta)


_DEFAULT_PARSER = MathJSONParser()


def parse(text: Union[str, bytes, bytearray]) -> Expression:
	"""Proxy to MathJSONParser.parse."""
	return _DEFAULT_PARSER.parse(text)
