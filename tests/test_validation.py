"""Tests for structural and strict-mode validation."""

import pytest

from mathjson import (
	ExpressionValidator, ValidationResult, validate, parse,
	NumberLiteral, SymbolLiteral, StringLiteral, FunctionCall,
)
from tests.cases import DEEP, sin_chain


class TestStructural:

	def test_valid_tree(self, nested_expr):
		r = validate(nested_expr)
		assert r.valid
		assert r.errors == []
		assert bool(r)

	def test_leaves_always_valid(self):
		assert validate(NumberLiteral(1)).valid
		assert validate(StringLiteral("")).valid

	def test_empty_symbol(self):
		r = validate(SymbolLiteral(""))
		assert not r.valid
		assert r.errors == ["Symbol name cannot be empty"]

	def test_empty_operator(self):
		r = validate(FunctionCall("", (NumberLiteral(1),)))
		assert r.errors == ["Function operator cannot be empty"]

	def test_unknown_operator_allowed_when_not_strict(self):
		assert validate(parse('["UnknownOp", 1]')).valid

	def test_bad_symbol_name_allowed_when_not_strict(self):
		assert validate(SymbolLiteral("1abc")).valid

	def test_errors_from_nested_arguments(self):
		e = FunctionCall("Add", (SymbolLiteral(""), FunctionCall("Sin", (SymbolLiteral(""),))))
		r = validate(e)
		assert r.errors == ["Symbol name cannot be empty", "Symbol name cannot be empty"]


class TestStrict:

	def test_random_valid_in_both_modes(self):
		e = parse('["Random"]')
		assert validate(e).valid
		assert validate(e, strict=True).valid

	def test_unknown_operator(self):
		r = validate(parse('["UnknownOp", 1]'), strict=True)
		assert not r.valid
		assert r.errors == ["Unknown operator: UnknownOp"]

	def test_all_errors_accumulated(self):
		r = validate(parse('["Add", ["X", 1], ["Y", 2]]'), strict=True)
		assert not r.valid
		assert len(r.errors) == 2
		assert any("X" in m for m in r.errors)
		assert any("Y" in m for m in r.errors)

	def test_arguments_reported_before_operator(self):
		r = validate(parse('["Foo", "1x"]'), strict=True)
		assert r.errors[0].startswith("Invalid symbol name: '1x'")
		assert r.errors[1] == "Unknown operator: Foo"

	def test_alias_is_known(self):
		assert validate(parse('["Ceiling", 1.5]'), strict=True).valid

	def test_empty_operator_reported_once(self):
		r = validate(FunctionCall("", ()), strict=True)
		assert r.errors == ["Function operator cannot be empty"]

	@pytest.mark.parametrize("name", ["x", "Pi", "x1", "alpha_2", "α", "ExponentialE"])
	def test_valid_names(self, name):
		assert validate(SymbolLiteral(name), strict=True).valid

	@pytest.mark.parametrize("name", ["1abc", "a-b", "x y", "a.b", "$"])
	def test_invalid_names(self, name):
		r = validate(SymbolLiteral(name), strict=True)
		assert not r.valid
		assert r.errors[0].startswith(f"Invalid symbol name: '{name}'")

	@pytest.mark.parametrize("name", ["`x y`", "`1abc`", "``"])
	def test_backtick_names(self, name):
		assert validate(SymbolLiteral(name), strict=True).valid

	def test_lone_backtick_is_invalid(self):
		assert not validate(SymbolLiteral("`"), strict=True).valid

	@pytest.mark.parametrize("name", ["_x", "_1", "__", "_a-b"])
	def test_named_wildcards(self, name):
		assert validate(SymbolLiteral(name), strict=True).valid

	def test_bare_wildcard(self):
		r = validate(SymbolLiteral("_"), strict=True)
		assert r.errors == ["Wildcard symbol '_' must have a name after the underscore"]

	def test_wildcard_ok_when_not_strict(self):
		assert validate(SymbolLiteral("_")).valid

	def test_empty_symbol_strict_single_error(self):
		assert validate(SymbolLiteral(""), strict=True).errors == ["Symbol name cannot be empty"]


class TestRegistryInjection:

	def test_custom_registry(self, small_registry):
		v = ExpressionValidator(small_registry)
		assert v.validate(parse('["Sin", "x"]'), strict=True).valid
		r = v.validate(parse('["Cos", "x"]'), strict=True)
		assert r.errors == ["Unknown operator: Cos"]

	def test_registry_through_module_function(self, small_registry):
		r = validate(parse('["Multiply", 1, 2]'), strict=True, registry=small_registry)
		assert not r.valid

	def test_duck_typed_registry(self):
		class Everything:
			def is_known_operator(self, name):
				return True

		assert validate(parse('["Anything", 1]'), strict=True, registry=Everything()).valid


class TestResult:

	def test_frozen(self):
		r = ValidationResult(True, [])
		with pytest.raises(AttributeError):
			r.valid = False

	def test_falsy_when_invalid(self):
		assert not ValidationResult(False, ["e"])


class TestDeepTrees:

	def test_valid(self):
		e = sin_chain(DEEP)
		assert validate(e).valid
		assert validate(e, strict=True).valid

	def test_errors_collected_at_depth(self):
		e = sin_chain(DEEP, SymbolLiteral(""))
		assert validate(e).errors == ["Symbol name cannot be empty"]

	def test_unknown_operators_inner_first(self):
		e = FunctionCall("Outer", (sin_chain(DEEP, FunctionCall("Inner", (SymbolLiteral("1x"),))),))
		r = validate(e, strict=True)
		assert r.errors[0].startswith("Invalid symbol name: '1x'")
		assert r.errors[1:] == ["Unknown operator: Inner", "Unknown operator: Outer"]
