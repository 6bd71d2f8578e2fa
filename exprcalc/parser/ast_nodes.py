"""
Syntax tree node definitions for arithmetic expressions.

A single node class tagged with a NodeType covers every variant. Each
node carries its source span, the exact text it was built from, its
ordered children, and either a numeric value or an operator name.
"""

import json
from typing import Iterator, List, Optional, Union
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import SourceLocation


Number = Union[int, float]


class NodeType(Enum):
    """Enumeration of all syntax tree node types."""

    EXPRESSION = "expr"             # Malformed input or empty placeholder
    NUMBER = "number"
    PAREN = "paren"
    PREFIX_OP = "prefixOp"
    INFIX_OP = "infixOp"
    BINARY_FUNCTION = "binFunc"
    UNARY_FUNCTION = "unaFunc"


@dataclass
class SourceSpan:
    """Represents a span of the expression text (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        return f"{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"

    def contains(self, other: 'SourceSpan') -> bool:
        """Check if another span lies entirely within this one."""
        return self.start.offset <= other.start.offset and other.end.offset <= self.end.offset


class SyntaxTreeNode:
    """
    A node of the expression syntax tree.

    ``number`` is set only on NUMBER nodes. ``operator`` holds the canonical
    operator name (``"add"``, ``"pow"``...) on PREFIX_OP and INFIX_OP nodes,
    and the function keyword on function nodes. ``symbol`` keeps the operator
    as written (``"×"``, ``"**"``), which decides its rank.
    """

    def __init__(self, node_type: NodeType, span: SourceSpan, text: str = "",
                 children: Optional[List['SyntaxTreeNode']] = None):
        self.node_type = node_type
        self.span = span
        self.text = text
        self.children: List['SyntaxTreeNode'] = children if children is not None else []
        self.operator: Optional[str] = None
        self.symbol: Optional[str] = None
        self.number: Optional[Number] = None

    @property
    def start(self) -> int:
        return self.span.start.offset

    @property
    def end(self) -> int:
        return self.span.end.offset

    @property
    def start_line(self) -> int:
        return self.span.start.line

    @property
    def start_column(self) -> int:
        return self.span.start.column

    @property
    def end_line(self) -> int:
        return self.span.end.line

    @property
    def end_column(self) -> int:
        return self.span.end.column

    @property
    def is_infix(self) -> bool:
        return self.node_type is NodeType.INFIX_OP

    def start_along(self, node: 'SyntaxTreeNode'):
        """Make this node start where another node starts."""
        self.span = SourceSpan(node.span.start, self.span.end)

    def end_along(self, node: 'SyntaxTreeNode'):
        """Make this node end where another node ends."""
        self.span = SourceSpan(self.span.start, node.span.end)

    def walk(self) -> Iterator['SyntaxTreeNode']:
        """Yield this node and all descendants, depth-first, pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def info(self) -> str:
        """Variant-specific payload as shown in tree dumps."""
        if self.node_type is NodeType.NUMBER:
            return f"{self.number} "
        if self.node_type in (NodeType.PREFIX_OP, NodeType.INFIX_OP,
                              NodeType.BINARY_FUNCTION, NodeType.UNARY_FUNCTION):
            return f"{self.operator} "
        return ""

    def __str__(self) -> str:
        text = json.dumps(self.text, ensure_ascii=False)
        current = f"{self.span} {self.node_type.value} {self.info()}{text}"
        lines = [current]
        for child in self.children:
            lines.extend(f"  {line}" for line in str(child).split("\n"))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"SyntaxTreeNode({self.node_type.name}, span={self.span}, text={self.text!r})"
