from .validator import ExpressionValidator, ValidationResult, OperatorLookup, validate

__all__ = ["ExpressionValidator", "ValidationResult", "OperatorLookup", "validate"]
