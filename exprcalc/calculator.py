"""
Parse-then-evaluate orchestration.

The evaluator is a collaborator: it receives a syntax tree that parsed
without errors and returns a result or its own errors. The default
Evaluator performs no numeric work.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from .parser.parser import Parser, SyntaxTree

logger = logging.getLogger(__name__)


@dataclass
class ComputeResult:
    """Outcome of computing an expression."""
    result: Any
    tree: SyntaxTree
    errors: List[Any] = field(default_factory=list)

    def has_errors(self) -> bool:
        return len(self.errors) > 0


class Evaluator:
    """
    Evaluation boundary.

    Subclasses override ``evaluate`` to compute a value from the tree.
    """

    def evaluate(self, tree: SyntaxTree) -> ComputeResult:
        return ComputeResult(result=None, tree=tree, errors=[])


class Calculator:
    """Parses an expression and hands the tree to an evaluator."""

    def __init__(self, parser: Optional[Parser] = None, evaluator: Optional[Evaluator] = None):
        self.parser = parser or Parser()
        self.evaluator = evaluator or Evaluator()

    def compute(self, text: str) -> ComputeResult:
        syntax = self.parser.parse(text)
        if syntax.has_errors():
            logger.debug("Skipping evaluation, %d syntax error(s)", len(syntax.errors))
            return ComputeResult(result=None, tree=syntax.tree, errors=list(syntax.errors))
        return self.evaluator.evaluate(syntax.tree)
