"""
Stage orchestration for the Compiler Simulator.

Runs tokenizer, parser, tree builder and semantic analyzer in order and
collects everything into one ``CompilationRecord``. The stages themselves
never look at each other's results; gating (stopping after a failed parse)
happens only here.

Author: xwest
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .config import CompilerConfig
from .lexer import Language, LanguageRegistry, LexerError, Token, tokenize
from .parser import SyntaxTree, build_tree, parse
from .analyzer import SymbolTable, analyze

logger = logging.getLogger(__name__)


class Stage(Enum):
    """Where a pipeline run stopped; ``COMPLETE`` means every stage passed."""
    TOKENIZATION = "tokenization"
    PARSING = "parsing"
    AST_GENERATION = "ast_generation"
    SEMANTIC_ANALYSIS = "semantic_analysis"
    COMPLETE = "complete"


_ORDER = [Stage.TOKENIZATION, Stage.PARSING, Stage.AST_GENERATION, Stage.SEMANTIC_ANALYSIS]


@dataclass
class CompilationRecord:
    """
    Everything one run produced.

    ``errors`` and ``warnings`` hold the records of whichever stages ran
    (lexer/parser ``Diagnostic`` objects, ``SemanticError`` and
    ``SemanticWarning``); each offers ``to_dict()``.
    """
    code: str
    language: Language
    stage: Stage
    success: bool
    tokens: List[Token] = field(default_factory=list)
    tree: Optional[SyntaxTree] = None
    errors: List[Any] = field(default_factory=list)
    warnings: List[Any] = field(default_factory=list)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready mapping of the record."""
        return {
            "code": self.code,
            "language": self.language.value,
            "tokens": [token.to_dict() for token in self.tokens],
            "tree": self.tree.to_dict() if self.tree is not None else None,
            "success": self.success,
            "errors": [error.to_dict() for error in self.errors],
            "warnings": [warning.to_dict() for warning in self.warnings],
            "stage": self.stage.value,
            "timestamp": self.timestamp.isoformat(),
        }


def run_pipeline(
    source: str,
    language: Optional[Union[Language, str]] = None,
    config: Optional[CompilerConfig] = None,
    stop_after: Stage = Stage.SEMANTIC_ANALYSIS,
    registry: Optional[LanguageRegistry] = None
) -> CompilationRecord:
    """
    Run the front-end stages over one source text.

    Args:
        source: Source code string
        language: Language member or tag; ``config.default_language`` if None
        config: Pipeline options (defaults to ``CompilerConfig()``)
        stop_after: Last stage to run; the record's stage is that stage on
            success, or ``COMPLETE`` when semantic analysis passes
        registry: Profile registry (defaults to ``DEFAULT_REGISTRY``)

    Returns:
        CompilationRecord

    Raises:
        ConfigError: If the language is not supported
    """
    config = config if config is not None else CompilerConfig()
    language = Language.from_tag(language if language is not None else config.default_language)
    if stop_after is Stage.COMPLETE:
        stop_after = Stage.SEMANTIC_ANALYSIS
    last = _ORDER.index(stop_after)

    record = CompilationRecord(code=source, language=language, stage=Stage.TOKENIZATION, success=False)
    logger.debug("Compiling %d characters of %s", len(source), language.value)

    try:
        record.tokens = tokenize(source, language, registry, keep_comments=config.keep_comments)
    except LexerError as e:
        logger.info("Tokenization failed: %s", e.message)
        record.errors = [e.diagnostic]
        return record

    if last == 0:
        record.success = True
        return record

    parse_result = parse(record.tokens, language, registry)
    record.errors = list(parse_result.diagnostics)
    record.stage = Stage.PARSING
    if not parse_result.success:
        logger.info("Parsing failed with %d errors", len(parse_result.diagnostics))
        if config.gate_on_parse_errors or last == 1:
            return record
    elif last == 1:
        record.success = True
        return record

    record.tree = build_tree(record.tokens, language, registry)
    if last == 2:
        if parse_result.success:
            record.stage = Stage.AST_GENERATION
        record.success = parse_result.success
        return record

    symbols = SymbolTable(config.predeclared)
    analysis = analyze(record.tree, language, symbols)
    record.errors.extend(analysis.errors)
    record.warnings = list(analysis.warnings)
    record.success = parse_result.success and analysis.success

    if not parse_result.success:
        record.stage = Stage.PARSING
    elif analysis.success:
        record.stage = Stage.COMPLETE
    else:
        record.stage = Stage.SEMANTIC_ANALYSIS

    logger.debug(
        "Finished at stage %s with %d errors and %d warnings",
        record.stage.value, len(record.errors), len(record.warnings)
    )
    return record
