"""Exception types raised by the parser, the SymPy bridge and the operator registry."""

from __future__ import annotations
from typing import Optional


class MathJSONParseError(ValueError):
	"""Malformed MathJSON input: bad JSON, wrong shape, or unparsable number text."""

	def __init__(self, message: str, position: Optional[int] = None) -> None:
		self.message = message
		self.position = position
		super().__init__(self.__str__())

	def __str__(self) -> str:
		if self.position is not None:
			return f"{self.message} at position {self.position}"
		return self.message


class UnsupportedConversionError(ValueError):
	"""An expression (or SymPy object) has no counterpart on the other side of the bridge."""


class RegistryLoadError(ValueError):
	"""Operator records could not be turned into a registry."""

	def __init__(self, source: str, details: str) -> None:
		self.source = source
		self.details = details
		super().__init__(f"Failed to load operator registry from {source}: {details}")
