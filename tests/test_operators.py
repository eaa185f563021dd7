"""Tests for the standard-library operator registry."""

import numpy as np
import pytest

from mathjson import (
	OperatorCategory, OperatorInfo, OperatorRegistry, RegistryLoadError,
	default_registry, is_known_operator, get_category, get_numeric_function,
)


class TestDefaultRegistry:

	@pytest.mark.parametrize("name", ["Add", "Sin", "Random", "Derivative", "Integrate", "Union", "Equal", "And"])
	def test_known(self, name):
		assert is_known_operator(name)

	@pytest.mark.parametrize("name", ["UnknownOp", "", "add", "X"])
	def test_unknown(self, name):
		assert not is_known_operator(name)

	@pytest.mark.parametrize("name,category", [
		("Add", OperatorCategory.ARITHMETIC),
		("Sin", OperatorCategory.TRIGONOMETRIC),
		("Log", OperatorCategory.LOGARITHMIC),
		("Less", OperatorCategory.COMPARISON),
		("Not", OperatorCategory.LOGICAL),
		("Union", OperatorCategory.SET),
		("Derivative", OperatorCategory.CALCULUS),
		("Nope", OperatorCategory.UNKNOWN),
	])
	def test_category(self, name, category):
		assert get_category(name) is category

	def test_cached(self):
		assert default_registry() is default_registry()

	def test_aliases(self):
		reg = default_registry()
		assert reg.is_known_operator("Ceiling")
		assert reg.get_info("Ceiling").name == "Ceil"
		assert reg.get_category("Asin") is OperatorCategory.TRIGONOMETRIC

	def test_info_fields(self):
		info = default_registry().get_info("Subtract")
		assert info.arity == 2
		assert info.description

	def test_membership_and_size(self):
		reg = default_registry()
		assert "Add" in reg
		assert 42 not in reg
		assert len(reg) == len(reg.names())
		assert list(reg.names()) == sorted(reg.names())


class TestNumericFunctions:

	def test_ufuncs(self):
		assert get_numeric_function("Add") is np.add
		assert get_numeric_function("Sin")(0.0) == 0.0

	def test_alias_resolves_to_function(self):
		assert get_numeric_function("Ceiling") is np.ceil

	def test_vectorized(self):
		f = get_numeric_function("Multiply")
		assert np.array_equal(f(np.array([1, 2]), np.array([3, 4])), np.array([3, 8]))

	def test_missing(self):
		assert get_numeric_function("Derivative") is None
		assert get_numeric_function("Unknown") is None


class TestFromRecords:

	def test_builds(self):
		reg = OperatorRegistry.from_records([
			{"name": "Foo", "category": "CORE", "arity": 1, "aliases": ["Bar"]},
		], {"Foo": np.abs})
		assert reg.is_known_operator("Bar")
		assert reg.get_numeric_function("Bar") is np.abs
		assert reg.get_info("Foo").aliases == ("Bar",)

	def test_unknown_category(self):
		with pytest.raises(RegistryLoadError, match="Unknown category 'WEIRD'"):
			OperatorRegistry.from_records([{"name": "Foo", "category": "WEIRD"}], source="ops.json")

	def test_source_in_message(self):
		with pytest.raises(RegistryLoadError) as exc:
			OperatorRegistry.from_records([{"category": "CORE"}], source="ops.json")
		assert exc.value.source == "ops.json"
		assert "ops.json" in str(exc.value)

	def test_missing_category(self):
		with pytest.raises(RegistryLoadError, match="no category"):
			OperatorRegistry.from_records([{"name": "Foo"}])

	def test_function_for_unknown_operator(self):
		with pytest.raises(RegistryLoadError, match="Unknown operator 'Baz'"):
			OperatorRegistry.from_records([{"name": "Foo", "category": "CORE"}], {"Baz": np.abs})

	def test_is_value_error(self):
		with pytest.raises(ValueError):
			OperatorRegistry.from_records([{"name": "", "category": "CORE"}])


class TestDirectConstruction:

	def test_small(self, small_registry):
		assert small_registry.is_known_operator("Add")
		assert not small_registry.is_known_operator("Multiply")
		assert small_registry.get_numeric_function("Add") is None

	def test_info_is_frozen(self):
		info = OperatorInfo("A", OperatorCategory.CORE)
		with pytest.raises(AttributeError):
			info.name = "B"
