from .errors import MathJSONParseError, UnsupportedConversionError, RegistryLoadError
from .expr import (
	ExpressionType, Expression, NumberValue,
	NumberLiteral, SymbolLiteral, StringLiteral, FunctionCall,
	is_expression, metadata, with_metadata,
)

__all__ = [
	"MathJSONParseError", "UnsupportedConversionError", "RegistryLoadError",
	"ExpressionType", "Expression", "NumberValue",
	"NumberLiteral", "SymbolLiteral", "StringLiteral", "FunctionCall",
	"is_expression", "metadata", "with_metadata",
]
