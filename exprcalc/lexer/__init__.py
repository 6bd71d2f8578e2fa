"""
Expression Lexer Package

Lexical layer of the expression parser. There is no separate tokenizing
pass: the grammar drives a cursor over the text and classifies the input
on demand.

Key Features:
- Line/column tracking over multi-line input
- First-match-wins classification against a fixed pattern order
- Unicode × and ÷ operators
- Operator rank and canonical name tables
"""

from .tokens import (
    Token, TokenType, SourceLocation, OPERATORS, OPERATOR_RANKS, OPERATOR_FUNCTIONS,
    BINARY_FUNCTIONS, UNARY_FUNCTIONS,
)
from .cursor import Cursor
from .classifier import TokenClassifier
from .errors import Diagnostic, LexerError

__all__ = [
    "Cursor",
    "TokenClassifier",
    "Token",
    "TokenType",
    "SourceLocation",
    "OPERATORS",
    "OPERATOR_RANKS",
    "OPERATOR_FUNCTIONS",
    "BINARY_FUNCTIONS",
    "UNARY_FUNCTIONS",
    "Diagnostic",
    "LexerError",
]
