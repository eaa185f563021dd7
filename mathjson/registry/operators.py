"""
MathJSON standard-library operator registry.

Class: OperatorRegistry
-----------------------
An immutable lookup table built once and shared read-only:

  • is_known_operator(name) -> bool          (the only query the validator makes)
  • get_category(name)      -> OperatorCategory, UNKNOWN for unrecognized names
  • get_info(name)          -> OperatorInfo | None
  • get_numeric_function(name) -> NumPy callable | None

Aliases resolve to the operator they name. The numeric functions are data for
downstream evaluators; nothing in this package evaluates expressions.

Public API
----------
- OperatorRegistry.from_records(records, numeric_functions=None)
- default_registry()  (built lazily on first use, then cached)
- is_known_operator / get_category / get_numeric_function proxies over the default registry
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple, Union

import numpy as np

from mathjson.core.errors import RegistryLoadError


class OperatorCategory(Enum):
	"""Operator families of the MathJSON standard library."""
	ARITHMETIC = "ARITHMETIC"
	TRIGONOMETRIC = "TRIGONOMETRIC"
	LOGARITHMIC = "LOGARITHMIC"
	COMPARISON = "COMPARISON"
	LOGICAL = "LOGICAL"
	SET = "SET"
	CALCULUS = "CALCULUS"
	UNKNOWN = "UNKNOWN"
	COLLECTIONS = "COLLECTIONS"
	COMPLEX = "COMPLEX"
	SPECIAL_FUNCTIONS = "SPECIAL_FUNCTIONS"
	STATISTICS = "STATISTICS"
	LINEAR_ALGEBRA = "LINEAR_ALGEBRA"
	COMBINATORICS = "COMBINATORICS"
	NUMBER_THEORY = "NUMBER_THEORY"
	CORE = "CORE"
	CONTROL_STRUCTURES = "CONTROL_STRUCTURES"
	FUNCTIONS = "FUNCTIONS"
	STRINGS = "STRINGS"
	UNITS = "UNITS"


Arity = Union[int, str, None]


@dataclass(frozen=True)
class OperatorInfo:
	"""
	One registry entry.

	Fields
	------
	name         : canonical operator name
	category     : OperatorCategory
	arity        : fixed argument count, a descriptive string ("variadic", "1-2"), or None
	description  : short human-readable summary
	aliases      : alternative names resolving to this operator
	"""
	name: str
	category: OperatorCategory
	arity: Arity = None
	description: Optional[str] = None
	aliases: Tuple[str, ...] = ()


class OperatorRegistry:
	"""Read-only operator table."""

	def __init__(self, operators: Iterable[OperatorInfo], numeric_functions: Optional[Mapping[str, Callable[..., Any]]] = None) -> None:
		table: Dict[str, OperatorInfo] = {}
		alias_map: Dict[str, str] = {}
		for info in operators:
			table[info.name] = info
			for a in info.aliases:
				alias_map[a] = info.name
		funcs: Dict[str, Callable[..., Any]] = {}
		for k, fn in (numeric_functions or {}).items():
			if k in table and fn is not None:
				funcs[k] = fn
		self._operators = MappingProxyType(table)
		self._aliases = MappingProxyType(alias_map)
		self._functions = MappingProxyType(funcs)

	@staticmethod
	def from_records(records: Iterable[Mapping[str, Any]], numeric_functions: Optional[Mapping[str, Callable[..., Any]]] = None, source: str = "<records>") -> "OperatorRegistry":
		"""
		Build a registry from plain dict records:
		  {"name": "Add", "category": "ARITHMETIC", "arity": "variadic", "description": ..., "aliases": [...]}
		"""
		infos = []
		for rec in records:
			name = rec.get("name")
			cat = rec.get("category")
			if not isinstance(name, str) or not name:
				raise RegistryLoadError(source, f"operator record without a name: {dict(rec)!r}")
			if not isinstance(cat, str):
				raise RegistryLoadError(source, f"operator '{name}' has no category")
			try:
				category = OperatorCategory[cat]
			except KeyError:
				raise RegistryLoadError(source, f"Unknown category '{cat}' for operator '{name}'") from None
			aliases = tuple(str(a) for a in (rec.get("aliases") or ()))
			infos.append(OperatorInfo(name, category, rec.get("arity"), rec.get("description"), aliases))
		if numeric_functions:
			known = {i.name for i in infos}
			for k in numeric_functions:
				if k not in known:
					raise RegistryLoadError(source, f"Unknown operator '{k}' in numeric function mapping")
		return OperatorRegistry(infos, numeric_functions)

	def _resolve(self, name: str) -> Optional[str]:
		if name in self._operators:
			return name
		return self._aliases.get(name)

	def is_known_operator(self, name: str) -> bool:
		return self._resolve(name) is not None

	def get_info(self, name: str) -> Optional[OperatorInfo]:
		key = self._resolve(name)
		if key is None:
			return None
		return self._operators[key]

	def get_category(self, name: str) -> OperatorCategory:
		info = self.get_info(name)
		if info is None:
			return OperatorCategory.UNKNOWN
		return info.category

	def get_numeric_function(self, name: str) -> Optional[Callable[..., Any]]:
		key = self._resolve(name)
		if key is None:
			return None
		return self._functions.get(key)

	def names(self) -> Tuple[str, ...]:
		return tuple(sorted(self._operators))

	def __contains__(self, name: object) -> bool:
		return isinstance(name, str) and self.is_known_operator(name)

	def __len__(self) -> int:
		return len(self._operators)


_STANDARD_LIBRARY: Dict[str, Tuple[Tuple[str, Arity, str], ...]] = {
	"ARITHMETIC": (
		("Add", "variadic", "Sum of the arguments"),
		("Subtract", 2, "Difference of two values"),
		("Multiply", "variadic", "Product of the arguments"),
		("Divide", 2, "Quotient of two values"),
		("Power", 2, "Base raised to an exponent"),
		("Negate", 1, "Additive inverse"),
		("Sqrt", 1, "Principal square root"),
		("Root", 2, "n-th root"),
		("Abs", 1, "Absolute value"),
		("Square", 1, "Value multiplied by itself"),
		("Sign", 1, "Sign of a real value"),
		("Floor", 1, "Largest integer not greater than the value"),
		("Ceil", 1, "Smallest integer not less than the value"),
		("Round", 1, "Nearest integer"),
		("Min", "variadic", "Smallest argument"),
		("Max", "variadic", "Largest argument"),
		("Rational", "1-2", "Exact rational number"),
		("Half", 1, "Half of the value"),
		("Random", "0-2", "Pseudo-random number"),
	),
	"TRIGONOMETRIC": (
		("Sin", 1, "Sine"),
		("Cos", 1, "Cosine"),
		("Tan", 1, "Tangent"),
		("Cot", 1, "Cotangent"),
		("Sec", 1, "Secant"),
		("Csc", 1, "Cosecant"),
		("Arcsin", 1, "Inverse sine"),
		("Arccos", 1, "Inverse cosine"),
		("Arctan", "1-2", "Inverse tangent"),
		("Sinh", 1, "Hyperbolic sine"),
		("Cosh", 1, "Hyperbolic cosine"),
		("Tanh", 1, "Hyperbolic tangent"),
		("Arcsinh", 1, "Inverse hyperbolic sine"),
		("Arccosh", 1, "Inverse hyperbolic cosine"),
		("Arctanh", 1, "Inverse hyperbolic tangent"),
	),
	"LOGARITHMIC": (
		("Exp", 1, "Natural exponential"),
		("Ln", 1, "Natural logarithm"),
		("Log", "1-2", "Logarithm, natural or to a given base"),
		("Log10", 1, "Base-10 logarithm"),
		("Log2", 1, "Base-2 logarithm"),
	),
	"COMPARISON": (
		("Equal", 2, "Equality"),
		("NotEqual", 2, "Inequality"),
		("Less", 2, "Strictly less than"),
		("Greater", 2, "Strictly greater than"),
		("LessEqual", 2, "Less than or equal"),
		("GreaterEqual", 2, "Greater than or equal"),
	),
	"LOGICAL": (
		("And", "variadic", "Logical conjunction"),
		("Or", "variadic", "Logical disjunction"),
		("Not", 1, "Logical negation"),
		("Nand", 2, "Negated conjunction"),
		("Nor", 2, "Negated disjunction"),
		("Xor", 2, "Exclusive disjunction"),
		("Implies", 2, "Material implication"),
		("Equivalent", 2, "Logical equivalence"),
	),
	"SET": (
		("Union", "variadic", "Set union"),
		("Intersection", "variadic", "Set intersection"),
		("SetMinus", 2, "Set difference"),
		("Element", 2, "Set membership"),
		("NotElement", 2, "Negated set membership"),
		("Subset", 2, "Proper subset"),
		("SubsetEqual", 2, "Subset"),
		("Superset", 2, "Proper superset"),
		("SupersetEqual", 2, "Superset"),
	),
	"CALCULUS": (
		("Derivative", "1-2", "Derivative of a function"),
		("D", "variadic", "Partial derivative"),
		("Integrate", "variadic", "Integral"),
		("Limit", 2, "Limit of a function"),
	),
	"COLLECTIONS": (
		("List", "variadic", "Ordered collection"),
		("Range", "1-3", "Integer range"),
		("Length", 1, "Number of elements"),
		("First", 1, "First element"),
		("Rest", 1, "All but the first element"),
		("Most", 1, "All but the last element"),
		("Take", 2, "Leading elements"),
		("Drop", 2, "Collection without its leading elements"),
		("Sum", "variadic", "Sum over a range"),
		("Product", "variadic", "Product over a range"),
	),
	"COMPLEX": (
		("Real", 1, "Real part"),
		("Imaginary", 1, "Imaginary part"),
		("Conjugate", 1, "Complex conjugate"),
		("Argument", 1, "Complex argument"),
	),
	"SPECIAL_FUNCTIONS": (
		("Gamma", 1, "Gamma function"),
		("Erf", 1, "Error function"),
	),
	"STATISTICS": (
		("Mean", "variadic", "Arithmetic mean"),
		("Median", "variadic", "Median"),
		("Variance", "variadic", "Variance"),
		("StandardDeviation", "variadic", "Standard deviation"),
	),
	"COMBINATORICS": (
		("Factorial", 1, "Factorial"),
		("Binomial", 2, "Binomial coefficient"),
	),
	"NUMBER_THEORY": (
		("GCD", "variadic", "Greatest common divisor"),
		("LCM", "variadic", "Least common multiple"),
		("Mod", 2, "Remainder of a division"),
	),
	"CORE": (
		("Sequence", "variadic", "Sequence of expressions"),
		("Hold", 1, "Expression kept unevaluated"),
		("Error", "variadic", "Error marker"),
	),
	"CONTROL_STRUCTURES": (
		("If", 3, "Conditional"),
	),
	"FUNCTIONS": (
		("Function", "variadic", "Anonymous function"),
	),
	"STRINGS": (
		("String", "variadic", "String concatenation"),
	),
}

_ALIASES: Dict[str, Tuple[str, ...]] = {
	"Ceil": ("Ceiling",),
	"Arcsin": ("Asin",),
	"Arccos": ("Acos",),
	"Arctan": ("Atan",),
}

_NUMERIC_FUNCTIONS: Dict[str, Callable[..., Any]] = {
	"Add": np.add,
	"Subtract": np.subtract,
	"Multiply": np.multiply,
	"Divide": np.true_divide,
	"Power": np.power,
	"Negate": np.negative,
	"Sqrt": np.sqrt,
	"Abs": np.abs,
	"Square": np.square,
	"Sign": np.sign,
	"Floor": np.floor,
	"Ceil": np.ceil,
	"Round": np.round,
	"Min": np.minimum,
	"Max": np.maximum,
	"Sin": np.sin,
	"Cos": np.cos,
	"Tan": np.tan,
	"Arcsin": np.arcsin,
	"Arccos": np.arccos,
	"Arctan": np.arctan,
	"Sinh": np.sinh,
	"Cosh": np.cosh,
	"Tanh": np.tanh,
	"Arcsinh": np.arcsinh,
	"Arccosh": np.arccosh,
	"Arctanh": np.arctanh,
	"Exp": np.exp,
	"Ln": np.log,
	"Log": np.log,
	"Log10": np.log10,
	"Log2": np.log2,
	"Equal": np.equal,
	"NotEqual": np.not_equal,
	"Less": np.less,
	"Greater": np.greater,
	"LessEqual": np.less_equal,
	"GreaterEqual": np.greater_equal,
	"And": np.logical_and,
	"Or": np.logical_or,
	"Not": np.logical_not,
	"Xor": np.logical_xor,
	"Real": np.real,
	"Imaginary": np.imag,
	"Conjugate": np.conjugate,
	"Argument": np.angle,
	"GCD": np.gcd,
	"LCM": np.lcm,
	"Mod": np.mod,
	"Mean": np.mean,
	"Median": np.median,
	"Variance": np.var,
	"StandardDeviation": np.std,
}


def _standard_records() -> Iterable[Dict[str, Any]]:
	for cat, entries in _STANDARD_LIBRARY.items():
		for name, arity, desc in entries:
			yield {
				"name": name,
				"category": cat,
				"arity": arity,
				"description": desc,
				"aliases": list(_ALIASES.get(name, ())),
			}


@lru_cache(maxsize=None)
def default_registry() -> OperatorRegistry:
	"""The built-in standard-library registry, built once and shared."""
	return OperatorRegistry.from_records(_standard_records(), _NUMERIC_FUNCTIONS, source="<standard library>")



def is_known_operator(name: str) -> bool:
	"""Proxy to default_registry().is_known_operator."""
	return default_registry().is_known_operator(name)

def get_category(name: str) -> OperatorCategory:
	"""Proxy to default_registry().get_category."""
	return default_registry().get_category(name)

def get_numeric_function(name: str) -> Optional[Callable[..., Any]]:
	"""Proxy to default_registry().get_numeric_function."""
	return default_registry().get_numeric_function(name)
