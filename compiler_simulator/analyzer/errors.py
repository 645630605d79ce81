"""
Semantic analysis diagnostics for the Compiler Simulator.

Semantic problems never stop the pipeline: the analyzer collects them as
``SemanticError`` / ``SemanticWarning`` records and hands them back in the
``AnalysisResult``.

Author: xwest
"""

from typing import Optional, List, Dict, Any

from ..lexer.tokens import SourceLocation
from ..lexer.errors import Diagnostic


class SemanticError:
    """
    A semantic error found during analysis.

    Contains detailed diagnostic information for error reporting;
    ``variable`` names the identifier involved, if any.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        variable: Optional[str] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.message = message
        self.variable = variable
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def severity(self) -> str:
        return self.diagnostic.severity

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.diagnostic.location

    def to_dict(self) -> Dict[str, Any]:
        result = self.diagnostic.to_dict()
        if self.variable is not None:
            result["variable"] = self.variable
        return result

    def __str__(self) -> str:
        return str(self.diagnostic)


class SemanticWarning(SemanticError):
    """
    Represents a semantic warning that doesn't affect success.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        variable: Optional[str] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message, location, variable, code, help_text, suggestions)
        self.diagnostic.severity = "warning"


# Semantic error codes for categorization
SEMANTIC_ERROR_CODES = {
    "S010": "Undefined variable",
    "S072": "Division by zero",
}


def create_undefined_variable_error(
    name: str,
    location: Optional[SourceLocation] = None,
    similar_names: Optional[List[str]] = None
) -> SemanticError:
    """Create an error for an identifier that is not in the symbol table."""
    suggestions = []
    if similar_names:
        suggestions.extend([f"Did you mean '{similar}'?" for similar in similar_names[:3]])
    suggestions.append(f"Declare '{name}' before using it")

    return SemanticError(
        message=f"Undefined variable: {name}",
        location=location,
        variable=name,
        code="S010",
        help_text=f"The variable '{name}' has not been declared.",
        suggestions=suggestions
    )


def create_division_by_zero_warning(location: Optional[SourceLocation] = None) -> SemanticWarning:
    """Create a warning for a division whose divisor is the literal 0."""
    return SemanticWarning(
        message="Division by zero",
        location=location,
        code="S072",
        help_text="The right operand of '/' is the literal 0."
    )
