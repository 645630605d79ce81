"""
Compiler Simulator Semantic Analyzer Package

Checks a built tree for use of undeclared variables and for division by a
literal zero.

Author: xwest
"""

from .semantic_analyzer import SemanticAnalyzer, AnalysisResult, analyze
from .symbol_table import SymbolTable, Symbol, SymbolKind
from .errors import (
    SemanticError, SemanticWarning, SEMANTIC_ERROR_CODES,
    create_undefined_variable_error, create_division_by_zero_warning
)

__all__ = [
    "SemanticAnalyzer",
    "AnalysisResult",
    "analyze",
    "SymbolTable",
    "Symbol",
    "SymbolKind",
    "SemanticError",
    "SemanticWarning",
    "SEMANTIC_ERROR_CODES",
    "create_undefined_variable_error",
    "create_division_by_zero_warning",
]
