#!/usr/bin/env python3
"""
Compiler Simulator command-line front-end
=========================================

Runs the front-end stages over a file (or standard input) and prints what
each stage produced.

Usage:
    python -m compiler_simulator [FILE|-] -l LANG [options]

Options:
    --stage STAGE    Last stage to run: tokens, parse, tree, analyze, all
    --json           Output the compilation record as JSON
    --keep-comments  Keep comments as COMMENT tokens
    --no-gate        Build and analyze the tree even if parsing failed
    --declare NAME   Predeclare a variable (repeatable)
    --verbose        Debug logging on stderr
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import CompilerConfig
from .lexer import ConfigError, Language
from .pipeline import CompilationRecord, Stage, run_pipeline

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

STAGES = {
    "tokens": Stage.TOKENIZATION,
    "parse": Stage.PARSING,
    "tree": Stage.AST_GENERATION,
    "analyze": Stage.SEMANTIC_ANALYSIS,
    "all": Stage.SEMANTIC_ANALYSIS,
}


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compiler_simulator",
        description="Show tokens, syntax diagnostics, syntax tree and semantic checks for a snippet",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m compiler_simulator snippet.js                   # Run every stage
    echo "1 + 2 * 3" | python -m compiler_simulator -l python --stage tree
    python -m compiler_simulator prog.c -l c --json           # Full record as JSON
    python -m compiler_simulator calc.py -l python --declare x --declare y
        """
    )
    parser.add_argument('file', nargs='?', default='-',
                        help='Source file to compile ("-" or omitted reads standard input)')
    parser.add_argument('-l', '--language', default=None,
                        help='Source language: ' + ', '.join(language.value for language in Language)
                        + ' (default: javascript)')
    parser.add_argument('--stage', choices=sorted(STAGES), default='all',
                        help='Last stage to run (default: all)')
    parser.add_argument('--json', action='store_true',
                        help='Output the compilation record in JSON format')
    parser.add_argument('--keep-comments', action='store_true',
                        help='Emit comments as COMMENT tokens')
    parser.add_argument('--no-gate', action='store_true',
                        help='Still build and analyze the tree when parsing fails')
    parser.add_argument('--declare', action='append', default=None, metavar='NAME',
                        help='Name to predeclare in the symbol table (repeatable)')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool):
    """Attach a stderr handler to the package logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("compiler_simulator")
    package_logger.handlers = [handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def read_source(path: str) -> str:
    if path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as handle:
        return handle.read()


def format_record(record: CompilationRecord) -> str:
    """Human-readable rendering of a compilation record."""
    lines = [f"Language: {record.language.value}"]

    if record.tokens:
        lines.append(f"\nTokens ({len(record.tokens)}):")
        for token in record.tokens:
            lines.append(f"  {token.line}:{token.column}\t{token.type.value}\t{token.text!r}")

    if record.tree is not None:
        lines.append("\nSyntax tree:")
        lines.extend("  " + line for line in record.tree.pretty().splitlines())

    if record.errors:
        lines.append(f"\nErrors ({len(record.errors)}):")
        lines.extend(str(error).rstrip() for error in record.errors)

    if record.warnings:
        lines.append(f"\nWarnings ({len(record.warnings)}):")
        lines.extend(str(warning).rstrip() for warning in record.warnings)

    status = "succeeded" if record.success else "failed"
    lines.append(f"\nStage: {record.stage.value} ({status})")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    args = build_argument_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        source = read_source(args.file)
    except OSError as e:
        print(f"error: cannot read {args.file}: {e.strerror or e}", file=sys.stderr)
        return 2
    logger.debug("Read %d characters from %s", len(source), args.file)

    try:
        config = CompilerConfig(
            keep_comments=args.keep_comments,
            gate_on_parse_errors=not args.no_gate,
            predeclared=tuple(args.declare or ()),
        )
        record = run_pipeline(source, args.language, config, stop_after=STAGES[args.stage])
    except ConfigError as e:
        print(str(e).rstrip(), file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(record.to_dict(), indent=2))
    else:
        print(format_record(record))

    return 0 if record.success else 1


if __name__ == "__main__":
    sys.exit(main())
