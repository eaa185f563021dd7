"""
MathJSON generator: expression tree -> JSON text.

Leaves are lowered to plain JSON values and serialized with the json module; function
calls are laid out on an explicit work stack, so trees of any depth are generatable.
The lowering decides compact versus object form:

  NumberLiteral  object form when NaN/±Infinity, rational, Decimal, raw text or metadata;
                 otherwise the native JSON number (compact) or {"num": text} (not compact)
  SymbolLiteral  "name" or {"sym": name, ...metadata}; always the object form when the
                 bare name is wrapped in single quotes and would read back as a string
  StringLiteral  "'value'" or {"str": value, ...metadata}
  FunctionCall   [operator, *args], wrapped as {"fn": [...], ...metadata} when metadata is present

`pretty` only changes the layout of the serialized text, never the chosen forms. The
layout matches json.dumps with the same indent and separators.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import json

from mathjson.config import GenerateOptions
from mathjson.core.expr import Expression, NumberLiteral, SymbolLiteral, StringLiteral, FunctionCall, is_expression
from mathjson.numeric.canonical import NumericCanonicalizer


def _reads_as_string(name: str) -> bool:
	return len(name) >= 2 and name.startswith("'") and name.endswith("'")


class MathJSONGenerator:
	"""Serializer holding an immutable GenerateOptions."""

	def __init__(self, options: Optional[GenerateOptions] = None) -> None:
		self.options = options or GenerateOptions()

	def _with_metadata(self, obj: Dict[str, Any], meta) -> Dict[str, Any]:
		if meta:
			for k, v in meta.items():
				obj[k] = v
		return obj

	def _number(self, expr: NumberLiteral, compact: bool) -> Any:
		value = expr.value
		if expr.raw is not None:
			return self._with_metadata({"num": expr.raw}, expr.metadata)
		if NumericCanonicalizer.needs_object_form(value) or expr.metadata:
			return self._with_metadata({"num": NumericCanonicalizer.format_value(value)}, expr.metadata)
		if compact:
			return value
		return {"num": NumericCanonicalizer.format_value(value)}

	def _symbol(self, expr: SymbolLiteral, compact: bool) -> Any:
		if expr.metadata or not compact or _reads_as_string(expr.name):
			return self._with_metadata({"sym": expr.name}, expr.metadata)
		return expr.name

	def _string(self, expr: StringLiteral, compact: bool) -> Any:
		if expr.metadata or not compact:
			return self._with_metadata({"str": expr.value}, expr.metadata)
		return "'" + expr.value + "'"

	def _leaf(self, expr: Expression, compact: bool) -> Any:
		if isinstance(expr, NumberLiteral):
			return self._number(expr, compact)
		if isinstance(expr, SymbolLiteral):
			return self._symbol(expr, compact)
		if isinstance(expr, StringLiteral):
			return self._string(expr, compact)
		raise TypeError(f"expected an expression, got {type(expr).__name__}")

	def to_json_value(self, expr: Expression, compact: Optional[bool] = None) -> Any:
		"""Lower an expression to a JSON-serializable value (post-order, no recursion)."""
		if compact is None:
			compact = self.options.compact
		results: List[Any] = []
		work: List[Any] = [(expr, False)]
		while work:
			node, ready = work.pop()
			if not isinstance(node, FunctionCall):
				results.append(self._leaf(node, compact))
				continue
			if not ready:
				work.append((node, True))
				for a in reversed(node.arguments):
					work.append((a, False))
				continue
			start = len(results) - len(node.arguments)
			arr = [node.operator] + results[start:]
			del results[start:]
			if node.metadata:
				results.append(self._with_metadata({"fn": arr}, node.metadata))
			else:
				results.append(arr)
		return results[0]

	def _dumps(self, value: Any, depth: int) -> str:
		"""Serialize a leaf value as if it sat `depth` containers deep in a json.dumps document."""
		opts = self.options
		indent = opts.indent if opts.pretty else None
		text = json.dumps(value, ensure_ascii=opts.ensure_ascii, indent=indent, separators=opts.separators(), default=str)
		if opts.pretty and depth:
			text = text.replace("\n", "\n" + " " * (opts.indent * depth))
		return text

	def _newline(self, depth: int) -> str:
		if not self.options.pretty:
			return ""
		return "\n" + " " * (self.options.indent * depth)

	def _function_pieces(self, expr: FunctionCall, depth: int) -> List[Any]:
		"""Text pieces and (expression, depth) items for one call, in output order."""
		item_sep, key_sep = self.options.separators()
		if expr.metadata:
			inner = depth + 1
			pieces: List[Any] = ["{", self._newline(inner), self._dumps("fn", inner), key_sep]
		else:
			inner = depth
			pieces = []
		pieces += ["[", self._newline(inner + 1), self._dumps(expr.operator, inner + 1)]
		for a in expr.arguments:
			pieces += [item_sep, self._newline(inner + 1), (a, inner + 1)]
		pieces += [self._newline(inner), "]"]
		if expr.metadata:
			for k, v in expr.metadata.items():
				pieces += [item_sep, self._newline(inner), self._dumps(k, inner), key_sep, self._dumps(v, inner)]
			pieces += [self._newline(depth), "}"]
		return pieces

	def generate(self, expr: Expression) -> str:
		"""Serialize an expression to MathJSON text."""
		if not is_expression(expr):
			raise TypeError(f"expected an expression, got {type(expr).__name__}")
		compact = self.options.compact
		out: List[str] = []
		work: List[Any] = [(expr, 0)]
		while work:
			item = work.pop()
			if isinstance(item, str):
				out.append(item)
				continue
			node, depth = item
			if isinstance(node, FunctionCall):
				work.extend(reversed(self._function_pieces(node, depth)))
			else:
				out.append(self._dumps(self._leaf(node, compact), depth))
		return "".join(out)



def generate(expr: Expression, compact: bool = True, pretty: bool = False, options: Optional[GenerateOptions] = None) -> str:
	"""
	Serialize an expression; keyword flags build GenerateOptions unless `options` is given.
	"""
	if options is None:
		options = GenerateOptions(compact=compact, pretty=pretty)
	return MathJSONGenerator(options).generate(expr)
