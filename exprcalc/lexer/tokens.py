"""
Token definitions for the expression lexer.

This module defines the lexical surface of arithmetic expressions:
- Numbers (digits with optional underscores, fraction and unsigned exponent)
- Parentheses and the argument separator
- Prefix, infix and postfix operators (ASCII and the Unicode × and ÷)
- Binary and unary built-in function names

It also holds the operator tables used by the parser.
"""

import re
from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, Pattern, Tuple


class TokenType(Enum):
    """
    Enumeration of the token classes an expression can contain.

    Declaration order matters: it is the order in which the classifier
    tries the patterns at the start of an expression.
    """

    NUMBER = auto()                 # 42, 1_000.5, 6.02e23
    LEFT_PAREN = auto()             # (
    SEPARATOR = auto()              # ,
    PREFIX_OP = auto()              # + -
    INFIX_OP = auto()               # + - * × / ÷ % ^ **
    POSTFIX_OP = auto()             # ! (declared, not parsed yet)
    BINARY_FUNCTION = auto()        # atan2, hypot, min, ...
    UNARY_FUNCTION = auto()         # sqrt, log, cos, ...


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the expression text.

    Used for error reporting and for node spans.
    """
    line: int
    column: int
    offset: int  # Character offset from start of the text

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    A classified lexeme at a given location.

    The lexeme is the exact text the pattern matched; consuming the token
    means advancing the cursor by ``len(lexeme)``.
    """
    type: TokenType
    lexeme: str
    location: SourceLocation

    def __str__(self) -> str:
        return f"{self.type.name}({self.lexeme!r})"

    @property
    def is_function(self) -> bool:
        """Check if this token names a built-in function."""
        return self.type in (TokenType.BINARY_FUNCTION, TokenType.UNARY_FUNCTION)


# Built-in functions taking two arguments
BINARY_FUNCTIONS: Tuple[str, ...] = (
    "rootn", "dim", "atan2", "gammaInc", "beta", "jn", "yn", "agm", "hypot",
    "fmod", "remainder", "min", "max",
)

# Built-in functions taking one argument
UNARY_FUNCTIONS: Tuple[str, ...] = (
    "sqr", "sqrt", "recSqrt", "cbrt", "neg", "abs",
    "log", "ln", "log2", "log10", "log1p", "exp", "exp2", "exp10", "expm1",
    "cos", "sin", "tan", "sec", "csc", "cot", "acos", "asin", "atan",
    "cosh", "sinh", "tanh", "sech", "csch", "coth", "acosh", "asinh", "atanh",
    "fac", "factorial", "eint", "li2", "gamma", "lngamma", "digamma", "zeta",
    "erf", "erfc", "j0", "j1", "y0", "y1",
    "rint", "rintCeil", "rintFloor", "rintRound", "rintRoundeven", "rintTrunc",
    "frac",
)

# Operator symbols in rank order. A symbol's rank is its index here: when
# two infix operators meet, the one with the higher rank binds tighter.
# If you add an operator, add its pattern below and its name in OPERATOR_FUNCTIONS.
OPERATORS: Tuple[str, ...] = ("+", "-", "*", "×", "/", "÷", "%", "^", "**", "!")

OPERATOR_RANKS: Dict[str, int] = {symbol: rank for rank, symbol in enumerate(OPERATORS)}

OPERATOR_FUNCTIONS: Dict[str, str] = {
    "+": "add",
    "-": "sub",
    "*": "mul",
    "×": "mul",
    "/": "div",
    "÷": "div",
    "%": "remainder",
    "^": "pow",
    "**": "pow",
    "!": "fac",
}


def _keyword_pattern(keywords: Tuple[str, ...]) -> Pattern[str]:
    return re.compile(r"(?:%s)\b" % "|".join(re.escape(keyword) for keyword in keywords))


# Lexical patterns, anchored at the cursor by re.match
TOKEN_PATTERNS: Dict[TokenType, Pattern[str]] = {
    TokenType.NUMBER: re.compile(r"[0-9_]+(?:\.[0-9_]+)?(?:[eE][0-9_]+)?"),
    TokenType.LEFT_PAREN: re.compile(r"\("),
    TokenType.SEPARATOR: re.compile(r","),
    TokenType.PREFIX_OP: re.compile(r"[+\-]"),
    TokenType.INFIX_OP: re.compile(r"\*\*|[+\-*×/÷%^]"),
    TokenType.POSTFIX_OP: re.compile(r"!"),
    TokenType.BINARY_FUNCTION: _keyword_pattern(BINARY_FUNCTIONS),
    TokenType.UNARY_FUNCTION: _keyword_pattern(UNARY_FUNCTIONS),
}

# Token classes that may start an expression, in the order they are tried
EXPRESSION_START_TOKENS: Tuple[TokenType, ...] = (
    TokenType.NUMBER,
    TokenType.LEFT_PAREN,
    TokenType.SEPARATOR,
    TokenType.PREFIX_OP,
    TokenType.BINARY_FUNCTION,
    TokenType.UNARY_FUNCTION,
)

WHITESPACE_CHARS = " \t\n"
