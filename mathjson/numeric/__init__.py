"""
Numeric canonicalization for MathJSON number text.

Public API re-export:
	NumericCanonicalizer: special values, repeating decimals, integer/float/Decimal fallbacks
	NumberKind: canonical kind of a number value
"""

from .canonical import (
	NumberKind, NumericCanonicalizer,
	kind_of, parse_number_text, parse_repeating_decimal, rational_to_repeating, format_number,
)

__all__ = [
	"NumberKind", "NumericCanonicalizer",
	"kind_of", "parse_number_text", "parse_repeating_decimal", "rational_to_repeating", "format_number",
]
