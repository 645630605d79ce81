"""
Compiler Simulator Parser Package

Two independent consumers of the token sequence:

- ``Parser`` validates the tokens against the shared grammar and reports
  every problem as a diagnostic.
- ``TreeBuilder`` re-derives an expression tree and always returns one,
  projected onto the ``SyntaxTree`` rendering shape.

Author: xwest
"""

from .parser import Parser, ParseResult, parse
from .tree_builder import TreeBuilder, build_tree
from .ast_nodes import (
    ASTNode, ASTNodeType, Program, Expression, BinaryExpression, NumericLiteral,
    Identifier, ErrorNode, SyntaxTree, to_syntax_tree
)
from .errors import END_OF_INPUT, PARSER_ERROR_CODES

__all__ = [
    "Parser",
    "ParseResult",
    "parse",
    "TreeBuilder",
    "build_tree",
    "ASTNode",
    "ASTNodeType",
    "Program",
    "Expression",
    "BinaryExpression",
    "NumericLiteral",
    "Identifier",
    "ErrorNode",
    "SyntaxTree",
    "to_syntax_tree",
    "END_OF_INPUT",
    "PARSER_ERROR_CODES",
]
