from .operators import (
	OperatorCategory, OperatorInfo, OperatorRegistry,
	default_registry, is_known_operator, get_category, get_numeric_function,
)

__all__ = [
	"OperatorCategory", "OperatorInfo", "OperatorRegistry",
	"default_registry", "is_known_operator", "get_category", "get_numeric_function",
]
