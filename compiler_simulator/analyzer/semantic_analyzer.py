"""
Semantic analyzer for the Compiler Simulator.

Walks the rendering tree produced by the tree builder once, depth-first,
and applies two checks:

- an ``Identifier`` whose name is not in the symbol table is an error
  (``Undefined variable: <name>``);
- a ``/`` whose right operand is the numeric literal ``0`` is a warning
  (``Division by zero``).

Nothing in the tree declares names, so the table only ever contains what the
caller put there beforehand.

Author: xwest
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ..lexer.languages import Language
from ..parser.ast_nodes import ASTNodeType, SyntaxTree
from .symbol_table import SymbolTable
from .errors import (
    SemanticError, SemanticWarning, create_undefined_variable_error,
    create_division_by_zero_warning
)

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Results of semantic analysis; ``success`` iff there are no errors."""
    success: bool
    errors: List[SemanticError] = field(default_factory=list)
    warnings: List[SemanticWarning] = field(default_factory=list)

    def has_errors(self) -> bool:
        """Check if analysis found any errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if analysis found any warnings."""
        return len(self.warnings) > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "errors": [error.to_dict() for error in self.errors],
            "warnings": [warning.to_dict() for warning in self.warnings],
        }


class SemanticAnalyzer:
    """
    Single-pass checker over a ``SyntaxTree``.

    Every node is visited exactly once; nodes other than identifiers and
    binary expressions are inert.
    """

    def __init__(self, language: Union[Language, str], symbols: Optional[SymbolTable] = None):
        self.language = Language.from_tag(language)
        self.symbol_table = symbols if symbols is not None else SymbolTable()
        self.errors: List[SemanticError] = []
        self.warnings: List[SemanticWarning] = []

    def analyze(self, tree: SyntaxTree) -> AnalysisResult:
        """
        Perform semantic analysis on a tree.

        Args:
            tree: Root of the rendering tree (normally a ``Program``)

        Returns:
            AnalysisResult containing any errors/warnings
        """
        self.errors = []
        self.warnings = []

        # Explicit stack: long left-associative chains nest deeply
        stack = [tree]
        visited = 0
        while stack:
            node = stack.pop()
            visited += 1
            self._check_node(node)
            stack.extend(reversed(node.children))

        logger.debug(
            "Analyzed %d %s nodes: %d errors, %d warnings",
            visited, self.language.value, len(self.errors), len(self.warnings)
        )
        return AnalysisResult(
            success=not self.errors,
            errors=list(self.errors),
            warnings=list(self.warnings),
        )

    def _check_node(self, node: SyntaxTree):
        if node.name == ASTNodeType.IDENTIFIER.value:
            self._check_identifier(node)
        elif node.name == ASTNodeType.BINARY_EXPRESSION.value:
            self._check_binary_expression(node)

    def _check_identifier(self, node: SyntaxTree):
        name = node.attributes.get("value")
        if not name:
            return
        if name not in self.symbol_table:
            self.errors.append(create_undefined_variable_error(
                name, node.location, self.symbol_table.get_similar_names(name)
            ))

    def _check_binary_expression(self, node: SyntaxTree):
        if node.attributes.get("operator") != "/" or len(node.children) < 2:
            return

        divisor = node.children[1]
        if divisor.name == ASTNodeType.NUMERIC_LITERAL.value and divisor.attributes.get("value") == "0":
            self.warnings.append(create_division_by_zero_warning(node.location))


def analyze(
    tree: SyntaxTree,
    language: Union[Language, str],
    symbols: Optional[SymbolTable] = None
) -> AnalysisResult:
    """
    Convenience function to analyze a tree.

    Args:
        tree: Tree from ``build_tree``
        language: Language member or tag (unknown tags raise ``ConfigError``)
        symbols: Pre-populated symbol table; empty if omitted
    """
    return SemanticAnalyzer(language, symbols).analyze(tree)
