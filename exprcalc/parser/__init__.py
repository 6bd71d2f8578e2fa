"""
Expression Parser Package

Recursive descent parser for arithmetic expressions. Produces syntax trees
annotated with source spans, and reports every syntax error it can find
instead of stopping at the first.

Key Features:
- Precedence restored by rotating infix nodes after each parse
- Left-associative chains of equal rank
- Error recovery by skipping offending characters
- Bounded nesting depth
"""

from .ast_nodes import NodeType, SourceSpan, SyntaxTreeNode
from .parser import Parser, ParserConfig, ParseResult, SyntaxTree, parse_string
from .errors import SyntaxTreeError, ParserInvariantError, PARSER_ERROR_CODES

__all__ = [
    # Core parser
    "Parser",
    "ParserConfig",
    "ParseResult",
    "SyntaxTree",
    "parse_string",

    # Tree nodes
    "NodeType",
    "SourceSpan",
    "SyntaxTreeNode",

    # Error handling
    "SyntaxTreeError",
    "ParserInvariantError",
    "PARSER_ERROR_CODES",
]
