"""
Read position over an immutable expression text.

Tracks the character offset together with the line and column so that
every node and diagnostic can point back into the source.
"""

from .tokens import SourceLocation, WHITESPACE_CHARS
from .errors import create_cursor_overrun_error


class Cursor:
    """
    Character cursor with line/column tracking.

    Lines and columns are 1-based; offsets are 0-based.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1

    def peek(self, count: int = 1) -> str:
        """Return the next ``count`` characters without consuming them."""
        return self.source[self.pos:self.pos + count]

    def remaining(self) -> str:
        """Return all unconsumed text."""
        return self.source[self.pos:]

    def advance(self, count: int = 1):
        """
        Consume ``count`` characters, updating line and column.

        Raises:
            LexerError: If fewer than ``count`` characters remain
        """
        available = len(self.source) - self.pos
        if count > available:
            raise create_cursor_overrun_error(count, available, self.location())

        for char in self.source[self.pos:self.pos + count]:
            if char == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
        self.pos += count

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def skip_whitespace(self):
        """Skip spaces, tabs and newlines."""
        while not self.at_end() and self.source[self.pos] in WHITESPACE_CHARS:
            self.advance()

    def location(self) -> SourceLocation:
        """Snapshot of the current position."""
        return SourceLocation(self.line, self.column, self.pos)

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, line={self.line}, column={self.column})"
