"""
Error handling for the expression parser.

User-input problems are recorded as SyntaxTreeError values and parsing
continues. Parser defects raise ParserInvariantError and are never
recorded as diagnostics.
"""

from typing import Optional
from dataclasses import dataclass

from ..lexer.tokens import SourceLocation
from ..lexer.errors import Diagnostic


INVALID_EXPRESSION = "Invalid expression"
INVALID_PAREN_CHARACTER = "Invalid character in parenthesized expression"
TRAILING_CHARACTERS = "Trailing characters"
NESTING_TOO_DEEP = "Expression nested too deeply"

# Parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": INVALID_EXPRESSION,
    "P002": INVALID_PAREN_CHARACTER,
    "P003": TRAILING_CHARACTERS,
    "P004": NESTING_TOO_DEEP,
}

_CODE_FROM_MESSAGE = {message: code for code, message in PARSER_ERROR_CODES.items()}


@dataclass(frozen=True)
class SyntaxTreeError:
    """
    A recoverable syntax error found while building the tree.

    Rendered as ``line:column: message``.
    """
    message: str
    location: SourceLocation
    code: Optional[str] = None

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    @property
    def diagnostic(self) -> Diagnostic:
        return Diagnostic(self.message, self.location, "error", self.code)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: {self.message}"


class ParserInvariantError(Exception):
    """
    Exception raised when the parser reaches a state its own grammar
    should make impossible.

    Indicates a defect in the parser, not in the input.
    """

    def __init__(self, message: str, location: SourceLocation, code: Optional[str] = None):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


def create_syntax_error(message: str, location: SourceLocation) -> SyntaxTreeError:
    """Create a diagnostic from one of the known parser messages."""
    return SyntaxTreeError(message, location, _CODE_FROM_MESSAGE.get(message))


def create_paren_start_error(found: str, location: SourceLocation) -> ParserInvariantError:
    """Create the fault for a parenthesized list that does not start with '('."""
    return ParserInvariantError(
        message=f"Parenthesized expression does not start with '(' (found {found!r})",
        location=location,
        code="I001",
    )


def create_unknown_operator_error(symbol: str, location: SourceLocation) -> ParserInvariantError:
    """Create the fault for an infix symbol missing from the operator table."""
    return ParserInvariantError(
        message=f"Invalid operator type {symbol!r}",
        location=location,
        code="I002",
    )


def create_unhandled_token_error(token_name: str, location: SourceLocation) -> ParserInvariantError:
    """Create the fault for a classified token the grammar has no rule for."""
    return ParserInvariantError(
        message=f"No grammar rule for token {token_name}",
        location=location,
        code="I003",
    )
