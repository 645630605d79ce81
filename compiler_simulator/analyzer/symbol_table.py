"""
Symbol table for Compiler Simulator semantic analysis.

A single flat namespace: no nested scopes, no types. Names are declared by
the caller (for example from ``CompilerConfig.predeclared``); the analyzer
itself only looks them up.

Author: xwest
"""

from typing import Dict, Iterable, Iterator, List, Optional
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import SourceLocation


class SymbolKind(Enum):
    """Types of symbols in the symbol table."""
    VARIABLE = "variable"
    FUNCTION = "function"
    PARAMETER = "parameter"


@dataclass
class Symbol:
    """Represents a declared name."""
    name: str
    kind: SymbolKind = SymbolKind.VARIABLE
    location: Optional[SourceLocation] = None

    def __str__(self) -> str:
        return f"{self.name} ({self.kind.value})"


def levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate edit distance between two strings."""
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


class SymbolTable:
    """Flat mapping from declared names to their ``Symbol`` records."""

    def __init__(self, names: Optional[Iterable[str]] = None):
        self.symbols: Dict[str, Symbol] = {}
        for name in names or ():
            self.declare(name)

    def declare(
        self,
        name: str,
        kind: SymbolKind = SymbolKind.VARIABLE,
        location: Optional[SourceLocation] = None
    ) -> Symbol:
        """Declare a name; a later declaration replaces an earlier one."""
        symbol = Symbol(name, kind, location)
        self.symbols[name] = symbol
        return symbol

    def lookup(self, name: str) -> Optional[Symbol]:
        return self.symbols.get(name)

    def get_similar_names(self, name: str, max_distance: int = 2) -> List[str]:
        """Get declared names close to ``name`` (for error suggestions)."""
        similar_names = []
        for symbol_name in self.symbols:
            distance = levenshtein_distance(name.lower(), symbol_name.lower())
            if distance <= max_distance:
                similar_names.append((symbol_name, distance))

        similar_names.sort(key=lambda x: x[1])
        return [similar for similar, _ in similar_names[:5]]

    def __contains__(self, name: object) -> bool:
        return name in self.symbols

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)
