"""
exprcalc

Parser for arithmetic expressions: numbers, parenthesized argument lists,
prefix and infix operators, and built-in unary and binary functions. The
result is a syntax tree annotated with source positions, together with
every syntax error found.

Architecture:
    exprcalc/
    ├── lexer/           # Cursor, token tables and classification
    ├── parser/          # Grammar, precedence rotation and tree nodes
    └── calculator.py    # Parse-then-evaluate orchestration
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .parser import Parser, ParserConfig, ParseResult, SyntaxTree, parse_string
from .calculator import Calculator, ComputeResult, Evaluator

__all__ = [
    # Core classes
    "Parser",
    "ParserConfig",
    "ParseResult",
    "SyntaxTree",
    "parse_string",
    "Calculator",
    "ComputeResult",
    "Evaluator",

    # Version info
    "__version__",
    "__license__",
]
