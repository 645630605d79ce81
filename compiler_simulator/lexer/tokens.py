"""
Token definitions for the Compiler Simulator lexer.

Tokens are deliberately coarse: every language shares the same small set of
lexical categories so that the later stages can work on any of them. The
concrete keyword/operator tables live in ``languages.py``.

Author: xwest
"""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict


class TokenType(Enum):
    """
    Lexical categories produced by the tokenizer.

    The values are the names used on the wire (``Token.to_dict``), which is
    why they are lowercase strings rather than ``auto()``.
    """

    # Words
    KEYWORD = "keyword"             # if, def, function, int
    BUILTIN = "builtIn"             # print, console, printf
    IDENTIFIER = "identifier"       # anything else word-shaped

    # Literals
    NUMBER = "number"               # 42, 0x2A, 1.5e3, 10L
    STRING = "string"               # "hello", '''doc''', `tmpl`
    CHAR = "char"                   # 'a' (C, C++, Java)

    # Symbols
    OPERATOR = "operator"           # +, +=, **=, ->
    PUNCTUATION = "punctuation"     # ( ) { } [ ] ; , . :

    # Language-specific leading forms
    DIRECTIVE = "preprocessor"      # #include (C, C++)
    ANNOTATION = "annotation"       # @Override (Java)

    # Trivia (only kept on request / for indentation-sensitive languages)
    COMMENT = "comment"
    NEWLINE = "newline"
    INDENT = "indent"
    DEDENT = "dedent"


# Tokens that only describe layout, never content
LAYOUT_TOKENS = frozenset({TokenType.NEWLINE, TokenType.INDENT, TokenType.DEDENT})


@dataclass(frozen=True)
class SourceLocation:
    """A 1-based line/column position in the source text."""
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """
    A single lexical token.

    ``text`` is always the exact slice of source the token was scanned from,
    so positions and lexemes can be mapped back onto the input.
    """
    type: TokenType
    text: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.type.name}({self.text!r})"

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(self.line, self.column)

    @property
    def end_location(self) -> SourceLocation:
        """Position just past the last character of this token."""
        newlines = self.text.count("\n")
        if newlines:
            return SourceLocation(self.line + newlines, len(self.text) - self.text.rfind("\n"))
        return SourceLocation(self.line, self.column + len(self.text))

    @property
    def is_layout(self) -> bool:
        return self.type in LAYOUT_TOKENS

    def to_dict(self) -> Dict[str, Any]:
        """Serialize in the ``{type, value, line, col}`` shape."""
        return {
            "type": self.type.value,
            "value": self.text,
            "line": self.line,
            "col": self.column,
        }
