from .parser import MathJSONParser, parse
from .generator import MathJSONGenerator, generate
from .sympy_bridge import SympyBridge, to_sympy, from_sympy

__all__ = [
	"MathJSONParser", "parse",
	"MathJSONGenerator", "generate",
	"SympyBridge", "to_sympy", "from_sympy",
]
