"""
Recursive descent parser for arithmetic expressions.

The grammar has no precedence parameter: the right operand of an infix
operator is parsed by an unrestricted recursive call, and the resulting
node is then rotated so that operators of higher rank bind tighter.
Syntax errors are collected and parsing continues past them.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

from ..lexer.tokens import Token, TokenType, OPERATOR_FUNCTIONS, OPERATOR_RANKS
from ..lexer.cursor import Cursor
from ..lexer.classifier import TokenClassifier
from .ast_nodes import NodeType, Number, SourceSpan, SyntaxTreeNode
from .errors import (
    SyntaxTreeError, create_syntax_error, create_paren_start_error,
    create_unknown_operator_error, create_unhandled_token_error,
    INVALID_EXPRESSION, INVALID_PAREN_CHARACTER, TRAILING_CHARACTERS, NESTING_TOO_DEEP,
)

logger = logging.getLogger(__name__)


@dataclass
class ParserConfig:
    """Configuration parameters for the expression parser"""

    # Nested expressions allowed before parsing is abandoned. Each level
    # costs a few interpreter frames, so keep this well under the
    # recursion limit.
    max_depth: int = 128

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")


def parse_number_literal(lexeme: str) -> Number:
    """
    Convert a number lexeme to its value.

    Grouping underscores are ignored. Integers stay int; a fraction or
    exponent gives a float, as does an integer too long for int(), which
    becomes inf. A lexeme made only of underscores is 0, and one with no
    usable digits (``_e_``) is NaN.
    """
    digits = lexeme.replace('_', '')
    if not digits:
        return 0
    if '.' not in digits and 'e' not in digits and 'E' not in digits:
        try:
            return int(digits)
        except ValueError:
            # Past the interpreter's integer string conversion limit
            pass
    try:
        return float(digits)
    except ValueError:
        return math.nan


class SyntaxTree:
    """
    One parse session over an expression text.

    Parsing happens on construction. Afterwards ``root`` holds the tree and
    ``errors`` every diagnostic found, in source order.
    """

    def __init__(self, text: str, config: Optional[ParserConfig] = None):
        self.text = text
        self.config = config or ParserConfig()
        self.cursor = Cursor(text)
        self.classifier = TokenClassifier()
        self.errors: List[SyntaxTreeError] = []
        self._depth = 0
        self._abandoned = False

        self.root = self._parse_root()

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def __str__(self) -> str:
        return str(self.root)

    def _parse_root(self) -> SyntaxTreeNode:
        expr = self._parse_expression()
        self.cursor.skip_whitespace()
        if not self.cursor.at_end():
            self._add_error(TRAILING_CHARACTERS)
        return expr

    def _parse_expression(self) -> SyntaxTreeNode:
        """Parse one expression, including any infix continuation."""
        if self._depth >= self.config.max_depth:
            return self._abandon()

        self._depth += 1
        try:
            return self._parse_expression_at_depth()
        finally:
            self._depth -= 1

    def _parse_expression_at_depth(self) -> SyntaxTreeNode:
        self.cursor.skip_whitespace()

        token = self.classifier.classify(self.cursor)
        if token is None:
            node = self._parse_invalid()
        elif token.type is TokenType.NUMBER:
            node = self._parse_number(token)
        elif token.type is TokenType.LEFT_PAREN:
            node = self._parse_paren()
        elif token.type is TokenType.SEPARATOR:
            # End of the expression; the enclosing list consumes the comma
            node = self._close_node(self._new_node(NodeType.EXPRESSION))
        elif token.type is TokenType.PREFIX_OP:
            node = self._parse_prefix(token)
        elif token.is_function:
            node = self._parse_function(token)
        else:
            raise create_unhandled_token_error(token.type.name, token.location)

        # Infix operators
        self.cursor.skip_whitespace()
        operator_token = self.classifier.match_infix(self.cursor)
        if operator_token is not None:
            node = self._parse_infix(node, operator_token)

        # Postfix operators are declared in the token tables but not parsed.

        return node

    # Expression of the form "12.5"
    def _parse_number(self, token: Token) -> SyntaxTreeNode:
        node = self._new_node(NodeType.NUMBER)
        self.cursor.advance(len(token.lexeme))
        node.number = parse_number_literal(token.lexeme)
        return self._close_node(node)

    # Expression of the form "(…, …)"
    def _parse_paren(self) -> SyntaxTreeNode:
        node = self._new_node(NodeType.PAREN)

        if self.cursor.peek() != '(':
            raise create_paren_start_error(self.cursor.peek(), self.cursor.location())
        self.cursor.advance()
        self.cursor.skip_whitespace()

        while True:
            if self.cursor.at_end():
                # Unclosed list, unless the input was already given up on
                if not self._abandoned:
                    self._add_error(INVALID_PAREN_CHARACTER)
                break

            node.children.append(self._parse_expression())
            self.cursor.skip_whitespace()

            char = self.cursor.peek()
            if char == ',':
                self.cursor.advance()
                self.cursor.skip_whitespace()
            elif char == ')':
                self.cursor.advance()
                break
            elif char:
                self._add_error(INVALID_PAREN_CHARACTER)
                self.cursor.advance()

        return self._close_node(node)

    # Expression of the form "-…"
    def _parse_prefix(self, token: Token) -> SyntaxTreeNode:
        node = self._new_node(NodeType.PREFIX_OP)
        node.symbol = token.lexeme
        node.operator = OPERATOR_FUNCTIONS[token.lexeme]
        self.cursor.advance(len(token.lexeme))

        operand = self._parse_expression()
        node.children = [operand]
        return self._close_node(node, operand)

    # Expression of the form "atan2(…, …)" or "sqrt(…)"
    def _parse_function(self, token: Token) -> SyntaxTreeNode:
        if token.type is TokenType.BINARY_FUNCTION:
            node = self._new_node(NodeType.BINARY_FUNCTION)
        else:
            node = self._new_node(NodeType.UNARY_FUNCTION)
        node.operator = token.lexeme
        self.cursor.advance(len(token.lexeme))
        self.cursor.skip_whitespace()

        # Argument count is checked by whoever evaluates the tree
        if self.cursor.peek() == '(':
            arguments = self._parse_paren()
        else:
            self._add_error(INVALID_EXPRESSION)
            arguments = self._close_node(self._new_node(NodeType.EXPRESSION))

        node.children = [arguments]
        return self._close_node(node, arguments)

    # Expression of the form "… + …"
    def _parse_infix(self, first_operand: SyntaxTreeNode, token: Token) -> SyntaxTreeNode:
        operator = OPERATOR_FUNCTIONS.get(token.lexeme)
        if operator is None or token.lexeme not in OPERATOR_RANKS:
            raise create_unknown_operator_error(token.lexeme, token.location)

        node = SyntaxTreeNode(NodeType.INFIX_OP, SourceSpan(first_operand.span.start, token.location))
        node.symbol = token.lexeme
        node.operator = operator
        self.cursor.advance(len(token.lexeme))

        second_operand = self._parse_expression()
        node.children = [first_operand, second_operand]
        self._close_node(node, second_operand)

        return self._rotate(node)

    def _rotate(self, node: SyntaxTreeNode) -> SyntaxTreeNode:
        """
        Restore precedence on a freshly built infix node.

        The right operand came from an unrestricted recursive parse, so it
        may be an infix node that should have bound looser than this one:
            [first <op1> [second[0] <op2> second[1]]]
          → [[first <op1> second[0]] <op2> second[1]]
        Equal ranks rotate too, which makes chains left-associative. The
        lowered node is rotated again in case second[0] is itself infix.
        """
        first_operand, second_operand = node.children
        if not second_operand.is_infix:
            return node
        if OPERATOR_RANKS[node.symbol] < OPERATOR_RANKS[second_operand.symbol]:
            return node

        node.children = [first_operand, second_operand.children[0]]
        self._close_node(node, second_operand.children[0])
        second_operand.children[0] = self._rotate(node)

        second_operand.start_along(first_operand)
        self._refresh_text(second_operand)
        return second_operand

    def _parse_invalid(self) -> SyntaxTreeNode:
        node = self._new_node(NodeType.EXPRESSION)
        self._add_error(INVALID_EXPRESSION)
        if not self.cursor.at_end():
            self.cursor.advance()
        return self._close_node(node)

    def _abandon(self) -> SyntaxTreeNode:
        """Give up on input nested beyond ``max_depth``, consuming the rest."""
        node = self._new_node(NodeType.EXPRESSION)
        if not self._abandoned:
            self._add_error(NESTING_TOO_DEEP)
            logger.debug("Nesting limit of %d reached at %s", self.config.max_depth,
                         self.cursor.location())
        self._abandoned = True
        self.cursor.advance(len(self.cursor.remaining()))
        return self._close_node(node)

    def _new_node(self, node_type: NodeType) -> SyntaxTreeNode:
        location = self.cursor.location()
        return SyntaxTreeNode(node_type, SourceSpan(location, location))

    def _close_node(self, node: SyntaxTreeNode,
                    last: Optional[SyntaxTreeNode] = None) -> SyntaxTreeNode:
        """End the node at the cursor, or where ``last`` ends."""
        end = last.span.end if last is not None else self.cursor.location()
        node.span = SourceSpan(node.span.start, end)
        self._refresh_text(node)
        return node

    def _refresh_text(self, node: SyntaxTreeNode):
        node.text = self.text[node.start:node.end]

    def _add_error(self, message: str):
        self.errors.append(create_syntax_error(message, self.cursor.location()))


@dataclass
class ParseResult:
    """Tree and diagnostics produced by one parse."""
    tree: SyntaxTree
    errors: List[SyntaxTreeError]

    @property
    def root(self) -> SyntaxTreeNode:
        return self.tree.root

    def has_errors(self) -> bool:
        return len(self.errors) > 0


class Parser:
    """
    Expression parser.

    Stateless between calls: every ``parse`` builds a fresh SyntaxTree.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()

    def parse(self, text: str) -> ParseResult:
        """
        Parse an expression.

        Returns:
            ParseResult with the best-effort tree and all syntax errors

        Raises:
            ParserInvariantError: If the parser itself is inconsistent
        """
        logger.debug("Parsing expression of %d characters", len(text))
        tree = SyntaxTree(text, self.config)
        if tree.has_errors():
            logger.debug("Parse finished with %d error(s)", len(tree.errors))
        return ParseResult(tree, tree.errors)


def parse_string(text: str, config: Optional[ParserConfig] = None) -> ParseResult:
    """
    Convenience function to parse an expression string.

    Args:
        text: Expression text
        config: Parser configuration, defaults apply when omitted

    Returns:
        ParseResult with tree and errors
    """
    return Parser(config).parse(text)
