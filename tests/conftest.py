"""Shared fixtures for the MathJSON tests."""

import pytest

from mathjson import FunctionCall, NumberLiteral, SymbolLiteral, OperatorRegistry, OperatorInfo, OperatorCategory


@pytest.fixture
def add_expr():
	return FunctionCall("Add", (NumberLiteral(1), NumberLiteral(2)))


@pytest.fixture
def nested_expr():
	inner = FunctionCall("Add", (NumberLiteral(1), NumberLiteral(2)))
	return FunctionCall("Multiply", (inner, NumberLiteral(3)))


@pytest.fixture
def small_registry():
	return OperatorRegistry([
		OperatorInfo("Add", OperatorCategory.ARITHMETIC, "variadic"),
		OperatorInfo("Sin", OperatorCategory.TRIGONOMETRIC, 1),
	])


@pytest.fixture
def x():
	return SymbolLiteral("x")
