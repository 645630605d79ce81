"""
Pipeline configuration for the Compiler Simulator.

Author: xwest
"""

from dataclasses import dataclass, field
from typing import Tuple

from .lexer.languages import Language


@dataclass(frozen=True)
class CompilerConfig:
    """
    Options for ``run_pipeline``.

    Attributes:
        keep_comments: Emit COMMENT tokens instead of dropping comments
        gate_on_parse_errors: Stop after a failed parse instead of still
            building and analyzing the tree
        predeclared: Names seeded into the symbol table before analysis
        default_language: Language used when the caller gives none
    """
    keep_comments: bool = False
    gate_on_parse_errors: bool = True
    predeclared: Tuple[str, ...] = field(default_factory=tuple)
    default_language: str = Language.JAVASCRIPT.value

    def __post_init__(self):
        # Fail early on a bad default rather than at first use
        Language.from_tag(self.default_language)
        object.__setattr__(self, "predeclared", tuple(self.predeclared))
