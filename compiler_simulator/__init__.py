"""
Compiler Simulator Package

An educational front-end that shows the first stages of compilation on small
snippets of JavaScript, Python, C, C++ and Java.

Architecture:
    compiler_simulator/
    ├── lexer/           # Language profiles and tokenization
    ├── parser/          # Grammar validation and tree building
    ├── analyzer/        # Semantic checks over the built tree
    ├── config.py        # Pipeline options
    ├── pipeline.py      # Stage orchestration and compilation records
    └── __main__.py      # Command-line front-end

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import (
    Lexer, tokenize, Token, TokenType, Language, LanguageProfile, LanguageRegistry,
    DEFAULT_REGISTRY, Diagnostic, CompilerSimulatorError, ConfigError, LexerError
)
from .parser import Parser, ParseResult, parse, TreeBuilder, build_tree, SyntaxTree
from .analyzer import SemanticAnalyzer, AnalysisResult, analyze, SymbolTable
from .config import CompilerConfig
from .pipeline import CompilationRecord, Stage, run_pipeline

__all__ = [
    # Stages
    "Lexer",
    "tokenize",
    "Parser",
    "parse",
    "TreeBuilder",
    "build_tree",
    "SemanticAnalyzer",
    "analyze",

    # Data
    "Token",
    "TokenType",
    "Language",
    "LanguageProfile",
    "LanguageRegistry",
    "DEFAULT_REGISTRY",
    "ParseResult",
    "SyntaxTree",
    "AnalysisResult",
    "SymbolTable",
    "Diagnostic",

    # Errors
    "CompilerSimulatorError",
    "ConfigError",
    "LexerError",

    # Pipeline
    "CompilerConfig",
    "CompilationRecord",
    "Stage",
    "run_pipeline",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
