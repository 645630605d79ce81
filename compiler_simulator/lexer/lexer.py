"""
Compiler Simulator Lexer - turns source text into tokens

One scanner serves all five languages; everything language-specific comes
from the ``LanguageProfile`` handed in by the caller. At each position the
rules are tried in a fixed order (comments/whitespace, strings, numbers,
operators longest-first, punctuation, identifiers, directives) and the first
one that matches wins. Nothing is skipped silently: a character no rule
accepts is a ``LexerError``.

For indentation-sensitive languages the line breaks and the leading
whitespace of each non-blank line are kept, and a post-pass turns the
whitespace runs into INDENT/DEDENT markers.

Author: xwest
"""

import logging
from typing import List, Optional, Union

from .tokens import Token, TokenType, SourceLocation
from .languages import Language, LanguageProfile, LanguageRegistry, DEFAULT_REGISTRY
from .errors import (
    create_invalid_character_error, create_unterminated_string_error,
    create_unterminated_comment_error
)

logger = logging.getLogger(__name__)

# Horizontal whitespace; newlines are handled separately
WHITESPACE = ' \t\r\f\v'


class Lexer:
    """
    Lexical analyzer for one source text in one language.

    Instances are single-use and hold no state beyond the scan itself, so
    concurrent lexers over different inputs never interfere.
    """

    def __init__(
        self,
        source: str,
        language: Union[Language, str],
        registry: Optional[LanguageRegistry] = None,
        keep_comments: bool = False
    ):
        """
        Initialize the lexer.

        Args:
            source: Source code string
            language: Language member or tag; unknown tags raise ``ConfigError``
            registry: Profile registry to read the rules from
            keep_comments: Emit COMMENT tokens instead of dropping comments
        """
        registry = registry if registry is not None else DEFAULT_REGISTRY
        self.profile: LanguageProfile = registry.get(language)
        self.source = source
        self.keep_comments = keep_comments
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

        # True once the current line produced a token (directives must lead)
        self._line_has_content = False
        self._at_line_start = True

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            Tokens in source order (no EOF token)

        Raises:
            LexerError: If a character cannot be scanned
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []
        self._line_has_content = False
        self._at_line_start = True

        indentation = self.profile.uses_indentation

        while self.pos < len(self.source):
            char = self.source[self.pos]

            if char == '\n':
                if indentation:
                    self._emit(TokenType.NEWLINE, 1)
                else:
                    self._advance()
                self._line_has_content = False
                self._at_line_start = True
                continue

            if indentation and self._at_line_start:
                self._scan_leading_whitespace()
                continue

            if char in WHITESPACE:
                self._advance()
                continue

            if self._skip_comment():
                continue

            token = self._next_token()
            self.tokens.append(token)
            self._line_has_content = True

        if indentation:
            self.tokens = apply_indentation(self.tokens)

        logger.debug(
            "Tokenized %d characters of %s into %d tokens",
            len(self.source), self.profile.name, len(self.tokens)
        )
        return self.tokens

    def _next_token(self) -> Token:
        """Scan one content token starting at the current position."""
        profile = self.profile
        source = self.source
        char = source[self.pos]

        # String and char literals
        for rule in profile.strings:
            if source.startswith(rule.quote, self.pos):
                return self._tokenize_quoted(rule.quote, rule.multiline, TokenType.STRING)
        if profile.char_quote and char == profile.char_quote:
            return self._tokenize_quoted(profile.char_quote, False, TokenType.CHAR)

        # Numbers
        match = profile.number_pattern.match(source, self.pos)
        if match:
            return self._emit_token(TokenType.NUMBER, len(match.group(0)))

        # Operators, longest first
        for operator in profile.operators:
            if source.startswith(operator, self.pos):
                return self._emit_token(TokenType.OPERATOR, len(operator))

        if char in profile.punctuation:
            return self._emit_token(TokenType.PUNCTUATION, 1)

        # Identifiers, reclassified as keyword / builtin
        match = profile.identifier_pattern.match(source, self.pos)
        if match:
            word = match.group(0)
            if word in profile.keywords:
                token_type = TokenType.KEYWORD
            elif word in profile.builtins:
                token_type = TokenType.BUILTIN
            else:
                token_type = TokenType.IDENTIFIER
            return self._emit_token(token_type, len(word))

        # Language-specific leading form: #include, @Override
        if profile.directive_pattern is not None:
            match = profile.directive_pattern.match(source, self.pos)
            if match and not (profile.directive_line_initial and self._line_has_content):
                token_type = TokenType.DIRECTIVE if profile.directive_line_initial else TokenType.ANNOTATION
                return self._emit_token(token_type, len(match.group(0)))

        raise create_invalid_character_error(char, self._location(), profile.name)

    def _tokenize_quoted(self, quote: str, multiline: bool, token_type: TokenType) -> Token:
        """Scan a quoted literal; backslash escapes the next character."""
        start = self._location()
        source = self.source
        i = self.pos + len(quote)

        while True:
            if i >= len(source):
                raise create_unterminated_string_error(quote, start)
            if source.startswith(quote, i):
                i += len(quote)
                break
            if source[i] == '\\':
                i += 2
                continue
            if source[i] == '\n' and not multiline:
                raise create_unterminated_string_error(quote, start)
            i += 1

        return self._emit_token(token_type, i - self.pos)

    def _skip_comment(self) -> bool:
        """Skip (or emit) a comment at the current position."""
        profile = self.profile
        source = self.source

        if source.startswith(profile.line_comment, self.pos):
            end = source.find('\n', self.pos)
            if end == -1:
                end = len(source)
            self._consume_comment(end - self.pos)
            return True

        if profile.block_comment is not None:
            opener, closer = profile.block_comment
            if source.startswith(opener, self.pos):
                end = source.find(closer, self.pos + len(opener))
                if end == -1:
                    raise create_unterminated_comment_error(opener, self._location())
                self._consume_comment(end + len(closer) - self.pos)
                return True

        return False

    def _consume_comment(self, length: int):
        if self.keep_comments:
            self.tokens.append(self._emit_token(TokenType.COMMENT, length))
        else:
            self._advance_by(length)

    def _scan_leading_whitespace(self):
        """
        Keep the indentation run of a non-blank line as a provisional
        INDENT token; ``apply_indentation`` resolves it later.

        Blank and comment-only lines leave nothing behind so they cannot
        change the indentation level.
        """
        source = self.source
        end = self.pos
        while end < len(source) and source[end] in ' \t':
            end += 1

        blank = (
            end >= len(source)
            or source[end] in '\r\n'
            or source.startswith(self.profile.line_comment, end)
        )
        self._at_line_start = False
        if blank:
            self._advance_by(end - self.pos)
            return

        self.tokens.append(self._emit_token(TokenType.INDENT, end - self.pos))

    def _emit(self, token_type: TokenType, length: int):
        self.tokens.append(self._emit_token(token_type, length))

    def _emit_token(self, token_type: TokenType, length: int) -> Token:
        """Build a token from the next ``length`` characters and advance."""
        token = Token(token_type, self.source[self.pos:self.pos + length], self.line, self.column)
        self._advance_by(length)
        return token

    def _location(self) -> SourceLocation:
        return SourceLocation(self.line, self.column)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            self._advance()


def apply_indentation(tokens: List[Token]) -> List[Token]:
    """
    Turn provisional leading-whitespace tokens into INDENT/DEDENT markers.

    Each run is compared against the previous indentation length only:
    longer emits INDENT, shorter emits DEDENT, equal emits nothing. There is
    no stack of levels, so a drop across several levels yields one DEDENT and
    mixed tabs/spaces are not detected.
    """
    result: List[Token] = []
    current = 0

    for token in tokens:
        if token.type is not TokenType.INDENT:
            result.append(token)
            continue

        width = len(token.text)
        if width > current:
            result.append(token)
        elif width < current:
            result.append(Token(TokenType.DEDENT, token.text, token.line, token.column))
        current = width

    return result


def tokenize(
    source: str,
    language: Union[Language, str],
    registry: Optional[LanguageRegistry] = None,
    keep_comments: bool = False
) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        language: Language member or tag
        registry: Profile registry (defaults to ``DEFAULT_REGISTRY``)
        keep_comments: Emit COMMENT tokens instead of dropping comments

    Returns:
        List of tokens

    Raises:
        ConfigError: If the language is not supported
        LexerError: If the source cannot be scanned
    """
    return Lexer(source, language, registry, keep_comments).tokenize()
