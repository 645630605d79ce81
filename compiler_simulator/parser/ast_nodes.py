"""
Syntax tree definitions for the Compiler Simulator.

Two layers live here:

- a small typed AST (``Program``, ``BinaryExpression``, ``NumericLiteral``,
  ``Identifier``, ``ErrorNode``) built by the tree builder, and
- the generic ``SyntaxTree`` rendering projection ({name, attributes,
  children}) produced from it by ``to_syntax_tree``. The semantic analyzer
  and any visualizer work on the projection.

Author: xwest
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from ..lexer.tokens import SourceLocation


class ASTNodeType(Enum):
    """Node tags; the values double as ``SyntaxTree.name``."""
    PROGRAM = "Program"
    BINARY_EXPRESSION = "BinaryExpression"
    NUMERIC_LITERAL = "NumericLiteral"
    IDENTIFIER = "Identifier"
    ERROR = "Error"


class ASTNode(ABC):
    """Base class for all typed AST nodes."""

    node_type: ASTNodeType

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass


class Expression(ASTNode):
    """Base class for expression nodes."""
    pass


@dataclass
class Program(ASTNode):
    """Root node; holds exactly one top-level expression."""
    expression: Expression
    location: Optional[SourceLocation] = field(default=None, compare=False)

    node_type = ASTNodeType.PROGRAM

    def children(self) -> List[ASTNode]:
        return [self.expression]


@dataclass
class BinaryExpression(Expression):
    """Binary operation; ``operator`` is the raw operator text."""
    operator: str
    left: Expression
    right: Expression
    location: Optional[SourceLocation] = field(default=None, compare=False)

    node_type = ASTNodeType.BINARY_EXPRESSION

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]


@dataclass
class NumericLiteral(Expression):
    """Number literal; ``value`` keeps the raw lexeme (``'0x1F'``, ``'2.5f'``)."""
    value: str
    location: Optional[SourceLocation] = field(default=None, compare=False)

    node_type = ASTNodeType.NUMERIC_LITERAL

    def children(self) -> List[ASTNode]:
        return []


@dataclass
class Identifier(Expression):
    """Reference to a name."""
    name: str
    location: Optional[SourceLocation] = field(default=None, compare=False)

    node_type = ASTNodeType.IDENTIFIER

    def children(self) -> List[ASTNode]:
        return []


@dataclass
class ErrorNode(Expression):
    """Placeholder for a factor that could not be built; ``found`` is what was there."""
    found: str
    location: Optional[SourceLocation] = field(default=None, compare=False)

    node_type = ASTNodeType.ERROR

    def children(self) -> List[ASTNode]:
        return []


# ============================================================================
# Rendering projection
# ============================================================================

@dataclass
class SyntaxTree:
    """
    Presentation-oriented tree node.

    ``attributes`` only ever holds scalars. ``location`` is carried along for
    diagnostics but ignored by equality, so trees compare structurally.

    Long left-associative chains nest as deep as they are long, so the
    traversals below use explicit stacks instead of recursion.
    """
    name: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    children: List['SyntaxTree'] = field(default_factory=list)
    location: Optional[SourceLocation] = field(default=None, compare=False)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def walk(self) -> Iterator['SyntaxTree']:
        """Yield every node, depth-first, parents before children."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to plain dicts. Leaves have no ``children`` key, which is
        the shape tree visualizers expect.
        """
        root: Dict[str, Any] = {}
        stack = [(self, root)]
        while stack:
            node, result = stack.pop()
            result["name"] = node.name
            result["attributes"] = dict(node.attributes)
            if node.children:
                result["children"] = [{} for _ in node.children]
                stack.extend(zip(node.children, result["children"]))
        return root

    def pretty(self, indent: str = "  ") -> str:
        """Render as an indented outline, one node per line."""
        lines: List[str] = []
        stack = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            attrs = ", ".join(f"{key}={value!r}" for key, value in node.attributes.items())
            lines.append(f"{indent * depth}{node.name}" + (f" ({attrs})" if attrs else ""))
            stack.extend((child, depth + 1) for child in reversed(node.children))
        return "\n".join(lines)


def _project(node: ASTNode, children: List[SyntaxTree]) -> SyntaxTree:
    if isinstance(node, Program):
        return SyntaxTree(node.node_type.value, {}, children, node.location)
    elif isinstance(node, BinaryExpression):
        return SyntaxTree(node.node_type.value, {"operator": node.operator}, children, node.location)
    elif isinstance(node, NumericLiteral):
        return SyntaxTree(node.node_type.value, {"value": node.value}, children, node.location)
    elif isinstance(node, Identifier):
        return SyntaxTree(node.node_type.value, {"value": node.name}, children, node.location)
    elif isinstance(node, ErrorNode):
        return SyntaxTree(node.node_type.value, {"value": node.found}, children, node.location)

    raise TypeError(f"Cannot project {type(node).__name__} onto a syntax tree")


def to_syntax_tree(node: ASTNode) -> SyntaxTree:
    """Project a typed AST node (and its subtree) onto the rendering tree."""
    # Post-order: children are projected before their parent
    done: List[SyntaxTree] = []
    stack = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if not isinstance(current, ASTNode):
            raise TypeError(f"Cannot project {type(current).__name__} onto a syntax tree")
        kids = current.children()
        if not expanded and kids:
            stack.append((current, True))
            stack.extend((child, False) for child in reversed(kids))
            continue
        children = done[len(done) - len(kids):]
        del done[len(done) - len(kids):]
        done.append(_project(current, children))
    return done[0]
