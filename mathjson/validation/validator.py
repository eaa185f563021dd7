"""
Structural and strict-mode validation of MathJSON expression trees.

The validator never raises for an expression and never stops at the first problem:
it walks the whole tree and returns every error message it found.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple
import logging

from mathjson.core.expr import Expression, NumberLiteral, SymbolLiteral, StringLiteral, FunctionCall
from mathjson.registry.operators import default_registry

logger = logging.getLogger(__name__)


class OperatorLookup(Protocol):
	def is_known_operator(self, name: str) -> bool: ...


@dataclass(frozen=True)
class ValidationResult:
	valid: bool
	errors: List[str] = field(default_factory=list)

	def __bool__(self) -> bool:
		return self.valid


class ExpressionValidator:
	"""Tree checker; strict mode consults the operator registry it was given."""

	def __init__(self, registry: Optional[OperatorLookup] = None) -> None:
		self._registry = registry if registry is not None else default_registry()

	@staticmethod
	def _is_identifier(name: str) -> bool:
		"""Letters, digits and underscores only, starting with a letter."""
		if not name[0].isalpha():
			return False
		for ch in name[1:]:
			if not (ch.isalpha() or ch in "0123456789" or ch == "_"):
				return False
		return True

	def _check_symbol_name(self, name: str, errors: List[str]) -> None:
		if len(name) >= 2 and name.startswith("`") and name.endswith("`"):
			return
		if name.startswith("_"):
			if name == "_":
				errors.append("Wildcard symbol '_' must have a name after the underscore")
			return
		if not self._is_identifier(name):
			errors.append(f"Invalid symbol name: '{name}'. Must start with a letter and contain only letters, digits and underscores")

	def _visit(self, expr: Expression, strict: bool, errors: List[str]) -> None:
		"""
		Pre-order walk over an explicit work list of (expression, after_arguments) pairs.

		A call pushes its own operator check behind its arguments, so argument errors are
		reported before the unknown-operator error of the call that contains them.
		"""
		work: List[Tuple[object, bool]] = [(expr, False)]
		while work:
			node, after_arguments = work.pop()
			if after_arguments:
				op = node.operator
				if op != "" and not self._registry.is_known_operator(op):
					errors.append(f"Unknown operator: {op}")
				continue
			if isinstance(node, (NumberLiteral, StringLiteral)):
				continue
			if isinstance(node, SymbolLiteral):
				if node.name == "":
					errors.append("Symbol name cannot be empty")
				elif strict:
					self._check_symbol_name(node.name, errors)
				continue
			if isinstance(node, FunctionCall):
				if node.operator == "":
					errors.append("Function operator cannot be empty")
				if strict:
					work.append((node, True))
				for a in reversed(node.arguments):
					work.append((a, False))
				continue
			errors.append(f"Not a MathJSON expression: {type(node).__name__}")

	def validate(self, expr: Expression, strict: bool = False) -> ValidationResult:
		"""Validate a tree; strict adds symbol-name and operator-name checks."""
		errors: List[str] = []
		self._visit(expr, strict, errors)
		if errors:
			logger.debug("validation found %d error(s) (strict=%s)", len(errors), strict)
		return ValidationResult(len(errors) == 0, errors)


def validate(expr: Expression, strict: bool = False, registry: Optional[OperatorLookup] = None) -> ValidationResult:
	"""Proxy to ExpressionValidator(registry).validate."""
	return ExpressionValidator(registry).validate(expr, strict=strict)
