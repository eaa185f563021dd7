"""Shared sample documents and tree builders for the MathJSON tests."""

from mathjson import FunctionCall, SymbolLiteral


ADD_1_2 = '["Add", 1, 2]'
NESTED = '["Multiply",["Add",1,2],3]'
PI_WITH_METADATA = '{"sym": "Pi", "wikidata": "Q167", "comment": "pi constant", "latex": "\\\\pi"}'

REPEATING_CASES = [
	("0.(3)", 1, 3),
	("1.(3)", 4, 3),
	("0.(142857)", 1, 7),
	("1.2(3)", 37, 30),
	("-0.(6)", -2, 3),
	("0.1(6)", 1, 6),
]

DEEP = 5000


def sin_chain(depth, leaf=None):
	"""["Sin", ["Sin", ... leaf]] nested `depth` times, built bottom-up."""
	e = leaf if leaf is not None else SymbolLiteral("x")
	for _ in range(depth):
		e = FunctionCall("Sin", (e,))
	return e


def sin_chain_text(depth, leaf='"x"'):
	return '["Sin",' * depth + leaf + "]" * depth
