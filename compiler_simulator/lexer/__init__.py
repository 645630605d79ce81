"""
Compiler Simulator Lexer Package

Tokenizes source text for JavaScript, Python, C, C++ and Java using one
scanner driven by per-language rule tables.

Key Features:
- Maximal-munch operator scanning (longest operator first)
- Keyword / builtin-name reclassification of identifiers
- INDENT/DEDENT markers for indentation-sensitive languages
- Exact line/column for every token
- Fatal errors for unknown languages and unscannable characters

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .languages import (
    Language, LanguageProfile, LanguageRegistry, DEFAULT_REGISTRY, build_default_registry
)
from .lexer import Lexer, tokenize, apply_indentation
from .errors import Diagnostic, CompilerSimulatorError, ConfigError, LexerError

__all__ = [
    "Lexer",
    "tokenize",
    "apply_indentation",
    "Token",
    "TokenType",
    "SourceLocation",
    "Language",
    "LanguageProfile",
    "LanguageRegistry",
    "DEFAULT_REGISTRY",
    "build_default_registry",
    "Diagnostic",
    "CompilerSimulatorError",
    "ConfigError",
    "LexerError",
]
