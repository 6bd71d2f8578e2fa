"""
Token classification at the cursor.

The grammar never tokenizes ahead: at each point where an expression may
start it asks the classifier which alternative applies, and after a
primary expression it asks whether an infix operator follows.
"""

from typing import Optional, Tuple

from .tokens import Token, TokenType, TOKEN_PATTERNS, EXPRESSION_START_TOKENS
from .cursor import Cursor


class TokenClassifier:
    """
    First-match-wins classifier over the expression-start patterns.

    The order of ``token_types`` is significant: ``-`` is a prefix
    operator at the start of an expression and is never seen as infix there.
    """

    def __init__(self, token_types: Tuple[TokenType, ...] = EXPRESSION_START_TOKENS):
        self.token_types = token_types

    def classify(self, cursor: Cursor) -> Optional[Token]:
        """
        Classify the text at the cursor.

        Returns:
            The first matching token, or None when no pattern applies
        """
        rest = cursor.remaining()
        for token_type in self.token_types:
            match = TOKEN_PATTERNS[token_type].match(rest)
            if match:
                return Token(token_type, match.group(0), cursor.location())
        return None

    def match_infix(self, cursor: Cursor) -> Optional[Token]:
        """Return the infix operator token at the cursor, if any."""
        match = TOKEN_PATTERNS[TokenType.INFIX_OP].match(cursor.remaining())
        if match is None:
            return None
        return Token(TokenType.INFIX_OP, match.group(0), cursor.location())
