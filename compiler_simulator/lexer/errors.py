"""
Error handling for the Compiler Simulator lexer.

Holds the shared ``Diagnostic`` record used by every stage, plus the two
fatal conditions of the front-end: an unsupported language tag and an
unscannable character.

Author: xwest
"""

from typing import Optional, List, Dict, Any
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """One problem found by a stage (error, warning, info)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    # Only set by the parser: what it wanted and what it got instead
    expected: Optional[str] = None
    found: Optional[str] = None

    @property
    def line(self) -> Optional[int]:
        return self.location.line if self.location else None

    @property
    def column(self) -> Optional[int]:
        return self.location.column if self.location else None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"message": self.message, "severity": self.severity}
        if self.location is not None:
            result["line"] = self.location.line
            result["col"] = self.location.column
        if self.expected is not None:
            result["expected"] = self.expected
        if self.found is not None:
            result["found"] = self.found
        if self.code:
            result["code"] = self.code
        return result

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class CompilerSimulatorError(Exception):
    """
    Base class for the fatal errors of the front-end.

    Carries a ``Diagnostic`` so callers can report it the same way as
    the non-fatal problems collected by the parser and analyzer.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class ConfigError(CompilerSimulatorError):
    """Raised before any work when the language tag is not supported."""


class LexerError(CompilerSimulatorError):
    """Raised when the tokenizer hits a character no rule can scan."""

    @property
    def line(self) -> int:
        return self.diagnostic.location.line

    @property
    def column(self) -> int:
        return self.diagnostic.location.column


ERROR_CODES = {
    "C001": "Unsupported language",
    "C002": "Missing language profile",
    "L001": "Invalid character",
    "L002": "Unterminated string literal",
    "L003": "Unterminated block comment",
}


def create_unsupported_language_error(tag: Any, supported: List[str]) -> ConfigError:
    """Create an error for a language tag outside the closed set."""
    return ConfigError(
        message=f"Unsupported language: {tag}",
        code="C001",
        help_text=f"Supported languages are: {', '.join(supported)}.",
        suggestions=[f"Use one of: {', '.join(supported)}"]
    )


def create_missing_profile_error(language: str) -> ConfigError:
    """Create an error for a registry that lacks a language profile."""
    return ConfigError(
        message=f"No lexical profile registered for language: {language}",
        code="C002",
        help_text="Every supported language needs a profile in the registry."
    )


def create_invalid_character_error(char: str, location: SourceLocation, language: str) -> LexerError:
    """Create an error for a character that starts no token."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in {language} source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Invalid character: '{char}'",
        location=location,
        code="L001",
        help_text=help_text
    )


def create_unterminated_string_error(quote: str, location: SourceLocation) -> LexerError:
    """Create an error for a string literal that never closes."""
    return LexerError(
        message="Unterminated string literal",
        location=location,
        code="L002",
        help_text=f"String literals must be closed with a matching {quote} quote.",
        suggestions=[f"Add a closing {quote} quote", "Check for unescaped quotes in the string"]
    )


def create_unterminated_comment_error(opener: str, location: SourceLocation) -> LexerError:
    """Create an error for a block comment that never closes."""
    return LexerError(
        message="Unterminated block comment",
        location=location,
        code="L003",
        help_text=f"The comment opened with '{opener}' runs to the end of the input."
    )
