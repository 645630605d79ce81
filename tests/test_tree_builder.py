"""
Test suite for the Compiler Simulator tree builder.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from compiler_simulator.lexer import tokenize, Language
from compiler_simulator.parser import (
    SyntaxTree, TreeBuilder, build_tree, Program, BinaryExpression,
    NumericLiteral, Identifier, ErrorNode, to_syntax_tree, END_OF_INPUT
)


def leaf(name: str, value: str) -> SyntaxTree:
    return SyntaxTree(name, {"value": value})


def binary(operator: str, left: SyntaxTree, right: SyntaxTree) -> SyntaxTree:
    return SyntaxTree("BinaryExpression", {"operator": operator}, [left, right])


def program(child: SyntaxTree) -> SyntaxTree:
    return SyntaxTree("Program", {}, [child])


class TestTreeBuilder(unittest.TestCase):
    """Expression trees built from tokens."""

    def _build(self, code: str, language: str = "javascript") -> SyntaxTree:
        return build_tree(tokenize(code, language), language)

    def test_precedence_and_grouping(self):
        tree = self._build("2*(3+4)")
        expected = program(binary(
            "*",
            leaf("NumericLiteral", "2"),
            binary("+", leaf("NumericLiteral", "3"), leaf("NumericLiteral", "4")),
        ))
        self.assertEqual(tree, expected)

    def test_term_binds_tighter(self):
        tree = self._build("1 + 2 * 3")
        expected = program(binary(
            "+",
            leaf("NumericLiteral", "1"),
            binary("*", leaf("NumericLiteral", "2"), leaf("NumericLiteral", "3")),
        ))
        self.assertEqual(tree, expected)

    def test_left_associative(self):
        tree = self._build("a - b - 3")
        expected = program(binary(
            "-",
            binary("-", leaf("Identifier", "a"), leaf("Identifier", "b")),
            leaf("NumericLiteral", "3"),
        ))
        self.assertEqual(tree, expected)

    def test_raw_literal_text_is_kept(self):
        tree = self._build("0x1F / 2.5f", "c")
        divide = tree.children[0]
        self.assertEqual(divide.children[0].attributes["value"], "0x1F")
        self.assertEqual(divide.children[1].attributes["value"], "2.5f")

    def test_missing_operand_becomes_error_leaf(self):
        tree = self._build("1 +")
        expected = program(binary("+", leaf("NumericLiteral", "1"), leaf("Error", END_OF_INPUT)))
        self.assertEqual(tree, expected)

    def test_empty_input(self):
        self.assertEqual(self._build(""), program(leaf("Error", END_OF_INPUT)))

    def test_unexpected_token_consumed_once(self):
        tree = self._build("1 * * 2")
        expected = program(binary("*", leaf("NumericLiteral", "1"), leaf("Error", "*")))
        self.assertEqual(tree, expected)

    def test_missing_close_paren_tolerated(self):
        tree = self._build("(1 + 2")
        expected = program(binary("+", leaf("NumericLiteral", "1"), leaf("NumericLiteral", "2")))
        self.assertEqual(tree, expected)

    def test_trailing_tokens_ignored(self):
        self.assertEqual(self._build("1 2"), program(leaf("NumericLiteral", "1")))

    def test_python_layout_tokens_ignored(self):
        tree = self._build("(x +\n    1)\n", "python")
        expected = program(binary("+", leaf("Identifier", "x"), leaf("NumericLiteral", "1")))
        self.assertEqual(tree, expected)

    def test_identical_tokens_give_identical_trees(self):
        for language in Language:
            tokens = tokenize("(a + 1) * b / 0", language)
            self.assertEqual(build_tree(tokens, language), build_tree(tokens, language))

    def test_locations(self):
        tree = self._build("x\n  + 1")
        plus = tree.children[0]
        self.assertEqual((plus.location.line, plus.location.column), (2, 3))
        self.assertEqual((plus.children[1].location.line, plus.children[1].location.column), (2, 5))

    def test_always_terminates(self):
        tree = self._build(") ( * / + -" * 100)
        self.assertEqual(tree.name, "Program")
        self.assertEqual(len(tree.children), 1)

    def test_typed_ast(self):
        ast = TreeBuilder(tokenize("a / 0", "java"), "java").build()
        self.assertIsInstance(ast, Program)
        self.assertIsInstance(ast.expression, BinaryExpression)
        self.assertEqual(ast.expression.right, NumericLiteral("0"))
        self.assertEqual(ast.expression.left, Identifier("a"))
        self.assertEqual(ast.children(), [ast.expression])


class TestSyntaxTree(unittest.TestCase):
    """The rendering projection."""

    def test_to_dict_omits_children_of_leaves(self):
        tree = build_tree(tokenize("1 + x", "javascript"), "javascript")
        self.assertEqual(tree.to_dict(), {
            "name": "Program",
            "attributes": {},
            "children": [{
                "name": "BinaryExpression",
                "attributes": {"operator": "+"},
                "children": [
                    {"name": "NumericLiteral", "attributes": {"value": "1"}},
                    {"name": "Identifier", "attributes": {"value": "x"}},
                ],
            }],
        })

    def test_walk_is_preorder(self):
        tree = build_tree(tokenize("1 + x", "javascript"), "javascript")
        self.assertEqual(
            [node.name for node in tree.walk()],
            ["Program", "BinaryExpression", "NumericLiteral", "Identifier"]
        )

    def test_pretty(self):
        tree = build_tree(tokenize("1 / 0", "c"), "c")
        self.assertEqual(tree.pretty(), "\n".join([
            "Program",
            "  BinaryExpression (operator='/')",
            "    NumericLiteral (value='1')",
            "    NumericLiteral (value='0')",
        ]))

    def test_error_node_projection(self):
        self.assertEqual(to_syntax_tree(ErrorNode("?")), leaf("Error", "?"))

    def test_projection_rejects_foreign_objects(self):
        with self.assertRaises(TypeError):
            to_syntax_tree("not a node")


if __name__ == '__main__':
    unittest.main()
