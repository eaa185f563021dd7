"""
MathJSON for Python: parse, generate and validate MathJSON expression trees.

Top-level re-exports of the public API:

	parse(text)                          -> Expression
	generate(expr, compact=True, pretty=False, options=None) -> str
	validate(expr, strict=False, registry=None)             -> ValidationResult
	metadata(expr), with_metadata(expr, key, value), with_metadata(expr, mapping)
	to_sympy(expr), from_sympy(obj)
"""

import logging

from .config import GenerateOptions, METADATA_KEYS, DISCRIMINATOR_KEYS
from .core import (
	MathJSONParseError, UnsupportedConversionError, RegistryLoadError,
	ExpressionType, Expression, NumberValue,
	NumberLiteral, SymbolLiteral, StringLiteral, FunctionCall,
	is_expression, metadata, with_metadata,
)
from .numeric import NumberKind, NumericCanonicalizer
from .io import MathJSONParser, MathJSONGenerator, SympyBridge, parse, generate, to_sympy, from_sympy
from .registry import (
	OperatorCategory, OperatorInfo, OperatorRegistry,
	default_registry, is_known_operator, get_category, get_numeric_function,
)
from .validation import ExpressionValidator, ValidationResult, validate

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
	"GenerateOptions", "METADATA_KEYS", "DISCRIMINATOR_KEYS",
	"MathJSONParseError", "UnsupportedConversionError", "RegistryLoadError",
	"ExpressionType", "Expression", "NumberValue",
	"NumberLiteral", "SymbolLiteral", "StringLiteral", "FunctionCall",
	"is_expression", "metadata", "with_metadata",
	"NumberKind", "NumericCanonicalizer",
	"MathJSONParser", "MathJSONGenerator", "SympyBridge",
	"parse", "generate", "to_sympy", "from_sympy",
	"OperatorCategory", "OperatorInfo", "OperatorRegistry",
	"default_registry", "is_known_operator", "get_category", "get_numeric_function",
	"ExpressionValidator", "ValidationResult", "validate",
]
