"""
Tree builder - derives an expression tree from tokens

Runs independently of the validating parser over the expression grammar
only, and always produces a tree: a factor it cannot make sense of becomes an
``Error`` leaf, and a missing ')' is tolerated. Every step consumes at least
one token or returns, so the walk terminates on any input.

Author: xwest
"""

import logging
from typing import List, Optional, Union

from ..lexer.tokens import Token, TokenType
from ..lexer.languages import Language, LanguageRegistry, DEFAULT_REGISTRY
from .ast_nodes import (
    Program, Expression, BinaryExpression, NumericLiteral, Identifier, ErrorNode,
    SyntaxTree, to_syntax_tree
)
from .errors import END_OF_INPUT
from .parser import ADDITIVE_OPERATORS, MULTIPLICATIVE_OPERATORS, end_of_input_location

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Builds the typed expression AST for one token sequence."""

    def __init__(
        self,
        tokens: List[Token],
        language: Union[Language, str],
        registry: Optional[LanguageRegistry] = None
    ):
        registry = registry if registry is not None else DEFAULT_REGISTRY
        self.profile = registry.get(language)
        # Layout and comments carry no expression structure
        self.tokens = [
            token for token in tokens
            if not token.is_layout and token.type is not TokenType.COMMENT
        ]
        self.current = 0
        self.eof_location = end_of_input_location(self.tokens)

    def build(self) -> Program:
        """Build the ``Program`` node; always succeeds."""
        self.current = 0
        location = self.tokens[0].location if self.tokens else self.eof_location
        program = Program(self._expression(), location=location)
        logger.debug("Built %s expression tree from %d tokens", self.profile.name, len(self.tokens))
        return program

    def _expression(self) -> Expression:
        left = self._term()
        while self._check_operator(ADDITIVE_OPERATORS):
            operator = self._advance()
            left = BinaryExpression(operator.text, left, self._term(), location=operator.location)
        return left

    def _term(self) -> Expression:
        left = self._factor()
        while self._check_operator(MULTIPLICATIVE_OPERATORS):
            operator = self._advance()
            left = BinaryExpression(operator.text, left, self._factor(), location=operator.location)
        return left

    def _factor(self) -> Expression:
        token = self._peek()
        if token is None:
            return ErrorNode(END_OF_INPUT, location=self.eof_location)

        if token.type is TokenType.NUMBER:
            self._advance()
            return NumericLiteral(token.text, location=token.location)

        if token.type is TokenType.IDENTIFIER:
            self._advance()
            return Identifier(token.text, location=token.location)

        if token.text == '(':
            self._advance()
            inner = self._expression()
            next_token = self._peek()
            if next_token is not None and next_token.text == ')':
                self._advance()
            return inner

        self._advance()
        return ErrorNode(token.text, location=token.location)

    def _check_operator(self, operators) -> bool:
        token = self._peek()
        return token is not None and token.type is TokenType.OPERATOR and token.text in operators

    def _advance(self) -> Optional[Token]:
        token = self._peek()
        if token is not None:
            self.current += 1
        return token

    def _peek(self) -> Optional[Token]:
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return None


def build_tree(
    tokens: List[Token],
    language: Union[Language, str],
    registry: Optional[LanguageRegistry] = None
) -> SyntaxTree:
    """
    Build the rendering tree for a token sequence.

    Never fails on malformed input; unknown languages raise ``ConfigError``.
    """
    return to_syntax_tree(TreeBuilder(tokens, language, registry).build())
