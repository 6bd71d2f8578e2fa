"""
Error handling shared by the lexer and the parser.

Provides the diagnostic record used when reporting problems with a
source location, and the fault raised when the cursor is misused.
"""

from typing import Optional
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass(frozen=True)
class Diagnostic:
    """Base record for diagnostics (errors, warnings)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None

    def __str__(self) -> str:
        result = f"{self.severity.upper()}: {self.message}\n"
        result += f"  --> {self.location}\n"
        if self.code:
            result += f"  code: {self.code}\n"
        return result


class LexerError(Exception):
    """
    Exception raised when the cursor is asked to do something impossible.

    This is a programming error in the caller, never a problem with the
    user's input.
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


LEXER_ERROR_CODES = {
    "L001": "Cursor advanced past end of input",
}


def create_cursor_overrun_error(requested: int, available: int,
                                location: SourceLocation) -> LexerError:
    """Create the fault for advancing beyond the remaining input."""
    return LexerError(
        message=f"Cannot advance {requested} characters, only {available} remain",
        location=location,
        code="L001",
    )
