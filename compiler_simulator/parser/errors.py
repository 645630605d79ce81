"""
Diagnostics for the Compiler Simulator parser.

The parser never raises for malformed input; every unmet expectation is
recorded as a ``Diagnostic`` carrying what was expected and what was found.
The helpers below build those records with consistent messages and codes.

Author: xwest
"""

from typing import Optional

from ..lexer.tokens import Token, SourceLocation
from ..lexer.errors import Diagnostic

END_OF_INPUT = "end of input"


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P002": "Expected token not found",
    "P003": "Invalid factor",
    "P004": "Unclosed delimiter",
    "P005": "Malformed function signature",
    "P006": "Unclosed function body",
    "P007": "Trailing tokens",
}

_HELP = {
    ")": "Add a closing parenthesis ')'",
    "}": "Add a closing brace '}'",
    ":": "Add a colon ':' after the function header",
    "(": "Add an opening parenthesis '(' before the parameters",
}


def create_syntax_diagnostic(
    message: str,
    expected: str,
    found: Optional[Token],
    eof_location: SourceLocation,
    code: str = "P002"
) -> Diagnostic:
    """
    Create a diagnostic for an unmet expectation.

    Args:
        message: Human readable description
        expected: Description of the acceptable tokens
        found: The offending token, or None at end of input
        eof_location: Position reported when input is exhausted
        code: Parser error code
    """
    suggestion = _HELP.get(expected)
    return Diagnostic(
        message=message,
        location=found.location if found is not None else eof_location,
        severity="error",
        code=code,
        help_text=f"Expected {expected}, found {found.text if found is not None else END_OF_INPUT}.",
        suggestions=[suggestion] if suggestion else None,
        expected=expected,
        found=found.text if found is not None else END_OF_INPUT,
    )


def create_invalid_factor_error(found: Optional[Token], eof_location: SourceLocation) -> Diagnostic:
    """Create an error for a factor that is not a number, identifier or group."""
    return create_syntax_diagnostic(
        "Expected number, identifier, or '('",
        "number, identifier, or (",
        found,
        eof_location,
        code="P003",
    )


def create_unclosed_paren_error(found: Optional[Token], eof_location: SourceLocation) -> Diagnostic:
    """Create an error for a parenthesised expression missing its ')'."""
    return create_syntax_diagnostic(
        "Expected ')' after expression", ")", found, eof_location, code="P004"
    )


def create_unexpected_trailing_token_error(found: Token) -> Diagnostic:
    """Create an error for tokens left over after the top-level construct."""
    return create_syntax_diagnostic(
        "Unexpected token at the end", END_OF_INPUT, found, found.location, code="P007"
    )
