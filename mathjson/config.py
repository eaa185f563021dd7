"""
Generation options and the fixed key sets of the MathJSON object forms.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


METADATA_KEYS: Tuple[str, ...] = ("wikidata", "comment", "latex", "documentation", "sourceUrl")

DISCRIMINATOR_KEYS: Tuple[str, ...] = ("num", "sym", "str", "fn")


@dataclass(frozen=True)
class GenerateOptions:
	"""
	Output knobs for the generator.

	compact       : prefer native JSON numbers and strings when nothing forces the object form
	pretty        : multi-line indented output instead of minimal JSON
	indent        : indentation width used when pretty is set
	ensure_ascii  : escape non-ASCII text as \\uXXXX
	"""
	compact: bool = True
	pretty: bool = False
	indent: int = 4
	ensure_ascii: bool = False

	def separators(self) -> Tuple[str, str]:
		if self.pretty:
			return (",", ": ")
		return (",", ":")
