"""
Stack-based JSON decoding for MathJSON documents of any nesting depth.

Strings and numbers are scanned with the json module's own scanners (scanstring, NUMBER_RE);
arrays and objects are assembled on an explicit stack instead of by recursion. Failures are
raised as json.JSONDecodeError carrying the json module's messages and character positions.

Only strict JSON is accepted: the NaN / Infinity / -Infinity extensions are "Expecting value".
"""

from __future__ import annotations
from typing import Any, Callable, List, Tuple
import json
from json.decoder import JSONDecodeError, WHITESPACE, scanstring
from json.scanner import NUMBER_RE


def _skip(s: str, idx: int) -> int:
	return WHITESPACE.match(s, idx).end()


class JSONReader:
	"""Strict JSON reader; `parse_float` receives the text of every number with a fraction or exponent."""

	def __init__(self, parse_float: Callable[[str], Any] = float) -> None:
		self.parse_float = parse_float

	def _scalar(self, s: str, idx: int) -> Tuple[Any, int]:
		ch = s[idx:idx + 1]
		if ch == '"':
			return scanstring(s, idx + 1, True)
		if ch == "n" and s.startswith("null", idx):
			return None, idx + 4
		if ch == "t" and s.startswith("true", idx):
			return True, idx + 4
		if ch == "f" and s.startswith("false", idx):
			return False, idx + 5
		m = NUMBER_RE.match(s, idx)
		if m is None:
			raise JSONDecodeError("Expecting value", s, idx)
		integer, frac, exp = m.groups()
		if frac or exp:
			return self.parse_float(integer + (frac or "") + (exp or "")), m.end()
		return int(integer), m.end()

	@staticmethod
	def _key(s: str, idx: int) -> Tuple[str, int]:
		idx = _skip(s, idx)
		if s[idx:idx + 1] != '"':
			raise JSONDecodeError("Expecting property name enclosed in double quotes", s, idx)
		key, idx = scanstring(s, idx + 1, True)
		idx = _skip(s, idx)
		if s[idx:idx + 1] != ":":
			raise JSONDecodeError("Expecting ':' delimiter", s, idx)
		return key, idx + 1

	def decode(self, s: str) -> Any:
		"""
		Decode a complete document.

		Each open container is a stack frame [container, key]; key is None for arrays and
		the pending property name for objects. A finished value is attached to the top frame,
		which is then either continued (",") or closed ("]" / "}") and becomes the next value.
		"""
		stack: List[list] = []
		idx = 0
		while True:
			idx = _skip(s, idx)
			ch = s[idx:idx + 1]
			if ch == "[":
				idx = _skip(s, idx + 1)
				if s[idx:idx + 1] != "]":
					stack.append([[], None])
					continue
				value, idx = [], idx + 1
			elif ch == "{":
				idx = _skip(s, idx + 1)
				if s[idx:idx + 1] != "}":
					key, idx = self._key(s, idx)
					stack.append([{}, key])
					continue
				value, idx = {}, idx + 1
			else:
				value, idx = self._scalar(s, idx)

			while True:
				idx = _skip(s, idx)
				if not stack:
					if idx != len(s):
						raise JSONDecodeError("Extra data", s, idx)
					return value
				frame = stack[-1]
				container, key = frame
				ch = s[idx:idx + 1]
				if key is None:
					container.append(value)
					close = "]"
				else:
					container[key] = value
					close = "}"
				if ch == ",":
					if key is not None:
						frame[1], idx = self._key(s, idx + 1)
					else:
						idx += 1
					break
				if ch == close:
					stack.pop()
					value, idx = container, idx + 1
					continue
				raise JSONDecodeError("Expecting ',' delimiter", s, idx)


def read_json(text: Any, parse_float: Callable[[str], Any] = float) -> Any:
	"""Decode str, bytes or bytearray JSON text (bytes use the json module's encoding detection)."""
	if isinstance(text, (bytes, bytearray)):
		text = bytes(text).decode(json.detect_encoding(text), "surrogatepass")
	return JSONReader(parse_float).decode(text)
