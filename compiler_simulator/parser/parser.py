"""
Compiler Simulator Parser - validates a token sequence against one grammar

A recursive-descent validator shared by every language:

    expression := term (('+'|'-') term)*
    term       := factor (('*'|'/') factor)*
    factor     := NUMBER | IDENTIFIER | '(' expression ')'
    function   := introducer IDENTIFIER '(' params? ')' [':'] [body]

Exactly one top-level construct is attempted. Malformed input never raises:
each unmet expectation becomes a ``Diagnostic`` and parsing carries on, so the
caller always receives the full list in one pass.

Author: xwest
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic
from ..lexer.languages import Language, LanguageRegistry, DEFAULT_REGISTRY
from .errors import (
    create_syntax_diagnostic, create_invalid_factor_error,
    create_unclosed_paren_error, create_unexpected_trailing_token_error
)

logger = logging.getLogger(__name__)

ADDITIVE_OPERATORS = ('+', '-')
MULTIPLICATIVE_OPERATORS = ('*', '/')


@dataclass
class ParseResult:
    """Outcome of one parse: success iff no diagnostics were recorded."""
    success: bool
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def errors(self) -> List[Diagnostic]:
        return self.diagnostics

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "errors": [diagnostic.to_dict() for diagnostic in self.diagnostics],
        }


def end_of_input_location(tokens: List[Token]) -> SourceLocation:
    """Position just past the last token (1:1 for an empty sequence)."""
    if not tokens:
        return SourceLocation(1, 1)
    return tokens[-1].end_location


class Parser:
    """
    Recursive-descent validator over a token sequence.

    Comments are trivia here: COMMENT tokens are dropped on construction so
    ``keep_comments`` output can be fed in unchanged.
    """

    def __init__(
        self,
        tokens: List[Token],
        language: Union[Language, str],
        registry: Optional[LanguageRegistry] = None
    ):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer
            language: Language member or tag; unknown tags raise ``ConfigError``
            registry: Profile registry the function introducers come from
        """
        registry = registry if registry is not None else DEFAULT_REGISTRY
        self.profile = registry.get(language)
        self.tokens = [token for token in tokens if token.type is not TokenType.COMMENT]
        self.current = 0
        self.diagnostics: List[Diagnostic] = []
        self.eof_location = end_of_input_location(self.tokens)

    def parse(self) -> ParseResult:
        """Validate the whole token sequence."""
        self.current = 0
        self.diagnostics = []

        if self._check_introducer():
            self._parse_function()
        else:
            self._parse_expression()

        # Trailing line breaks are not leftovers
        while self._check_type(TokenType.NEWLINE):
            self._advance()

        if not self._is_at_end() and not self.diagnostics:
            self.diagnostics.append(create_unexpected_trailing_token_error(self._peek()))

        logger.debug(
            "Parsed %d %s tokens with %d diagnostics",
            len(self.tokens), self.profile.name, len(self.diagnostics)
        )
        return ParseResult(success=not self.diagnostics, diagnostics=list(self.diagnostics))

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _parse_expression(self):
        self._parse_term()
        while self._check_operator(ADDITIVE_OPERATORS):
            self._advance()
            self._parse_term()

    def _parse_term(self):
        self._parse_factor()
        while self._check_operator(MULTIPLICATIVE_OPERATORS):
            self._advance()
            self._parse_factor()

    def _parse_factor(self):
        if self._match_type(TokenType.NUMBER) or self._match_type(TokenType.IDENTIFIER):
            return

        if self._match_text('('):
            self._parse_expression()
            if not self._match_text(')'):
                self.diagnostics.append(create_unclosed_paren_error(self._peek(), self.eof_location))
            return

        self.diagnostics.append(create_invalid_factor_error(self._peek(), self.eof_location))
        # Skip the offending token so the parse keeps moving
        self._advance()

    # ------------------------------------------------------------------
    # Function declarations
    # ------------------------------------------------------------------

    def _parse_function(self):
        self._advance()  # introducer

        if not self._match_type(TokenType.IDENTIFIER):
            self._error("Expected function name (identifier)", "identifier", code="P005")

        if not self._match_text('('):
            self._error("Expected '(' after function name", "(", code="P005")

        self._parse_parameters()

        if not self._match_text(')'):
            self._error("Expected ')' after parameters", ")", code="P005")

        if self.profile.uses_indentation:
            if not self._match_text(':'):
                self._error("Expected ':' after function declaration", ":", code="P005")
                return
            self._parse_indented_body()
        elif self._check_text('{'):
            self._parse_brace_body()

    def _parse_parameters(self):
        while not self._is_at_end() and not self._check_text(')'):
            if not self._match_type(TokenType.IDENTIFIER):
                self._error("Expected parameter name", "identifier", code="P005")
                break

            if self._check_text(','):
                self._advance()
            elif not self._check_text(')'):
                self._error("Expected ',' or ')' after parameter", ", or )", code="P005")
                break

    def _parse_brace_body(self):
        """Shallow body: skip to '}', parsing only return expressions."""
        self._advance()  # '{'

        while not self._is_at_end() and not self._check_text('}'):
            self._parse_body_token()

        if not self._match_text('}'):
            self._error("Expected '}' at end of function body", "}", code="P006")

    def _parse_indented_body(self):
        """
        Shallow body after ':'. Either the rest of the header line, or a
        NEWLINE INDENT block. Nested blocks are tracked by depth, so the block
        ends when its own indentation is closed (or at end of input).
        """
        if self._is_at_end():
            return

        if not self._check_type(TokenType.NEWLINE):
            while not self._is_at_end() and not self._check_type(TokenType.NEWLINE):
                self._parse_body_token()
            return

        while self._check_type(TokenType.NEWLINE):
            self._advance()

        # Header followed only by line breaks: no body
        if self._is_at_end():
            return

        if not self._check_type(TokenType.INDENT):
            self._error(
                "Expected an indented block after function declaration", "INDENT", code="P006"
            )
            return

        body_width = len(self._advance().text)
        depth = 1
        while not self._is_at_end():
            if self._check_type(TokenType.INDENT):
                depth += 1
                self._advance()
            elif self._check_type(TokenType.DEDENT):
                depth -= 1
                # One DEDENT may close several levels at once
                if depth == 0 or len(self._advance().text) < body_width:
                    return
            else:
                self._parse_body_token()

    def _parse_body_token(self):
        if self._check_type(TokenType.KEYWORD) and self._check_text('return'):
            self._advance()
            self._parse_expression()
            self._match_text(';')
        else:
            self._advance()

    def _check_introducer(self) -> bool:
        token = self._peek()
        return (
            token is not None
            and token.type is TokenType.KEYWORD
            and token.text in self.profile.function_introducers
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _error(self, message: str, expected: str, code: str = "P002"):
        self.diagnostics.append(
            create_syntax_diagnostic(message, expected, self._peek(), self.eof_location, code=code)
        )

    def _match_type(self, token_type: TokenType) -> bool:
        """Check if current token matches type and consume if so."""
        if self._check_type(token_type):
            self._advance()
            return True
        return False

    def _match_text(self, text: str) -> bool:
        """Check if current token has the given text and consume if so."""
        if self._check_text(text):
            self._advance()
            return True
        return False

    def _check_type(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        if self._is_at_end():
            return False
        return self._peek().type is token_type

    def _check_text(self, text: str) -> bool:
        if self._is_at_end():
            return False
        return self._peek().text == text

    def _check_operator(self, operators) -> bool:
        return self._check_type(TokenType.OPERATOR) and self._peek().text in operators

    def _advance(self) -> Optional[Token]:
        """Consume and return current token."""
        token = self._peek()
        if not self._is_at_end():
            self.current += 1
        return token

    def _is_at_end(self) -> bool:
        """Check if we've reached the end of tokens."""
        return self.current >= len(self.tokens)

    def _peek(self) -> Optional[Token]:
        """Return current token without consuming (None past the end)."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return None


def parse(
    tokens: List[Token],
    language: Union[Language, str],
    registry: Optional[LanguageRegistry] = None
) -> ParseResult:
    """
    Convenience function to validate a token sequence.

    Args:
        tokens: Tokens produced by ``tokenize``
        language: Language member or tag
        registry: Profile registry (defaults to ``DEFAULT_REGISTRY``)

    Returns:
        ParseResult with every diagnostic found

    Raises:
        ConfigError: If the language is not supported
    """
    return Parser(tokens, language, registry).parse()
