"""
Test suite for the Compiler Simulator tokenizer and language profiles.

Tests cover:
- Language tag resolution and registry completeness
- Per-language literals, operators, keywords and builtin names
- Exact line/column positions
- Comments, directives and annotations
- Python INDENT/DEDENT markers
- Fatal lexer errors

Author: xwest
"""

import re
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from compiler_simulator.lexer import (
    Lexer, tokenize, Token, TokenType, Language, LanguageRegistry,
    DEFAULT_REGISTRY, ConfigError, LexerError
)
from compiler_simulator.lexer.languages import PYTHON, JAVASCRIPT


class TestLanguages(unittest.TestCase):
    """Language tags and the profile registry."""

    def test_from_tag_accepts_values_and_names(self):
        self.assertIs(Language.from_tag("python"), Language.PYTHON)
        self.assertIs(Language.from_tag("Python"), Language.PYTHON)
        self.assertIs(Language.from_tag("CPP"), Language.CPP)
        self.assertIs(Language.from_tag(Language.JAVA), Language.JAVA)

    def test_from_tag_rejects_unknown_language(self):
        with self.assertRaises(ConfigError) as context:
            Language.from_tag("rust")
        self.assertEqual(context.exception.diagnostic.code, "C001")
        self.assertIn("Unsupported language: rust", context.exception.message)

    def test_default_registry_covers_every_language(self):
        self.assertEqual(len(DEFAULT_REGISTRY), len(Language))
        for language in Language:
            self.assertIn(language, DEFAULT_REGISTRY)
            self.assertIs(DEFAULT_REGISTRY.get(language).language, language)

    def test_registry_requires_all_profiles(self):
        with self.assertRaises(ConfigError) as context:
            LanguageRegistry([PYTHON, JAVASCRIPT])
        self.assertEqual(context.exception.diagnostic.code, "C002")

    def test_operators_sorted_longest_first(self):
        for language in Language:
            lengths = [len(op) for op in DEFAULT_REGISTRY.get(language).operators]
            self.assertEqual(lengths, sorted(lengths, reverse=True))

    def test_tokenize_unknown_language_fails_before_scanning(self):
        with self.assertRaises(ConfigError):
            tokenize("\u00a4 not scannable anyway", "cobol")


class TestTokenizer(unittest.TestCase):
    """Scanning rules shared by all languages."""

    def _types(self, tokens):
        return [token.type for token in tokens]

    def _texts(self, tokens):
        return [token.text for token in tokens]

    def test_whitespace_only_yields_no_tokens(self):
        for language in ("javascript", "c", "cpp", "java"):
            self.assertEqual(tokenize("  \t \n\n   ", language), [])

    def test_whitespace_only_python_yields_only_newlines(self):
        tokens = tokenize("   \n  ", "python")
        self.assertEqual(self._types(tokens), [TokenType.NEWLINE])

    def test_empty_source(self):
        self.assertEqual(tokenize("", "javascript"), [])

    def test_compound_assignment_is_one_operator(self):
        tokens = tokenize("a+=1", "javascript")
        self.assertEqual(self._texts(tokens), ["a", "+=", "1"])
        self.assertEqual(
            self._types(tokens),
            [TokenType.IDENTIFIER, TokenType.OPERATOR, TokenType.NUMBER]
        )

    def test_longest_operator_wins(self):
        tokens = tokenize("x **= 2", "javascript")
        self.assertEqual(self._texts(tokens), ["x", "**=", "2"])

        tokens = tokenize("a === b", "javascript")
        self.assertEqual(tokens[1].text, "===")

        tokens = tokenize("x >>>= 1", "java")
        self.assertEqual(tokens[1].text, ">>>=")

    def test_positions(self):
        tokens = tokenize("let x = 10;\nconsole.log(x)", "javascript")
        positions = [(token.text, token.line, token.column) for token in tokens]
        self.assertEqual(positions, [
            ("let", 1, 1), ("x", 1, 5), ("=", 1, 7), ("10", 1, 9), (";", 1, 11),
            ("console", 2, 1), (".", 2, 8), ("log", 2, 9), ("(", 2, 12),
            ("x", 2, 13), (")", 2, 14),
        ])

    def test_token_texts_reproduce_source(self):
        source = "total = (0x1F + count) * 2\n  / (rate - 1)"
        for language in Language:
            tokens = tokenize(source, language)
            joined = "".join(token.text for token in tokens if not token.is_layout)
            self.assertEqual(joined, re.sub(r"\s", "", source), language.value)

    def test_keyword_builtin_identifier_classification(self):
        tokens = tokenize("def print value", "python")
        self.assertEqual(
            self._types(tokens),
            [TokenType.KEYWORD, TokenType.BUILTIN, TokenType.IDENTIFIER]
        )

        tokens = tokenize("int printf total", "c")
        self.assertEqual(
            self._types(tokens),
            [TokenType.KEYWORD, TokenType.BUILTIN, TokenType.IDENTIFIER]
        )

    def test_keyword_takes_precedence_over_builtin(self):
        # Java lists String as both
        tokens = tokenize("String", "java")
        self.assertEqual(tokens[0].type, TokenType.KEYWORD)

    def test_dollar_identifiers(self):
        tokens = tokenize("$el + _x1", "javascript")
        self.assertEqual(tokens[0].type, TokenType.IDENTIFIER)
        self.assertEqual(tokens[0].text, "$el")

        with self.assertRaises(LexerError):
            tokenize("$el", "python")

    def test_token_to_dict(self):
        token = tokenize("let", "javascript")[0]
        self.assertEqual(token.to_dict(), {"type": "keyword", "value": "let", "line": 1, "col": 1})

    def test_token_end_location(self):
        token = Token(TokenType.STRING, "`a\nbc`", 1, 5)
        self.assertEqual((token.end_location.line, token.end_location.column), (2, 4))


class TestLiterals(unittest.TestCase):
    """Strings, characters and numbers."""

    def test_string_with_escaped_quote(self):
        tokens = tokenize('"he said \\"hi\\""', "javascript")
        self.assertEqual(len(tokens), 1)
        self.assertEqual(tokens[0].type, TokenType.STRING)

    def test_unterminated_string(self):
        with self.assertRaises(LexerError) as context:
            tokenize('a = "abc', "javascript")
        error = context.exception
        self.assertEqual(error.message, "Unterminated string literal")
        self.assertEqual((error.line, error.column), (1, 5))
        self.assertEqual(error.diagnostic.code, "L002")

    def test_single_line_string_cannot_span_lines(self):
        with self.assertRaises(LexerError):
            tokenize('"abc\ndef"', "c")

    def test_template_literal_spans_lines(self):
        tokens = tokenize("`a\nb` + 1", "javascript")
        self.assertEqual(tokens[0].type, TokenType.STRING)
        self.assertEqual(tokens[0].text, "`a\nb`")
        self.assertEqual((tokens[1].line, tokens[1].column), (2, 4))

    def test_python_triple_quoted_string(self):
        tokens = tokenize('"""doc\nstring""" x', "python")
        self.assertEqual(tokens[0].type, TokenType.STRING)
        self.assertEqual(tokens[0].text, '"""doc\nstring"""')
        self.assertEqual(tokens[1].text, "x")

    def test_char_literal(self):
        for language in ("c", "cpp", "java"):
            tokens = tokenize("'a'", language)
            self.assertEqual(tokens[0].type, TokenType.CHAR)

        tokens = tokenize("'a'", "javascript")
        self.assertEqual(tokens[0].type, TokenType.STRING)

    def test_script_number_forms(self):
        tokens = tokenize("0x1F 0o17 0b101 1.5e3 .5", "javascript")
        self.assertEqual([token.text for token in tokens], ["0x1F", "0o17", "0b101", "1.5e3", ".5"])
        self.assertTrue(all(token.type is TokenType.NUMBER for token in tokens))

    def test_c_number_suffixes(self):
        tokens = tokenize("10L 2.5f 0x1F 017", "c")
        self.assertEqual([token.text for token in tokens], ["10L", "2.5f", "0x1F", "017"])

        tokens = tokenize("2.5d", "c")
        self.assertEqual([token.text for token in tokens], ["2.5", "d"])

    def test_java_number_suffixes(self):
        tokens = tokenize("3.0d 7L 1.5F", "java")
        self.assertEqual([token.text for token in tokens], ["3.0d", "7L", "1.5F"])


class TestCommentsAndDirectives(unittest.TestCase):
    """Comment handling and language-specific leading forms."""

    def test_line_comment_dropped(self):
        tokens = tokenize("1 // note\n+ 2", "javascript")
        self.assertEqual([token.text for token in tokens], ["1", "+", "2"])

    def test_keep_comments(self):
        tokens = tokenize("1 // note\n+ 2", "javascript", keep_comments=True)
        self.assertEqual(tokens[1].type, TokenType.COMMENT)
        self.assertEqual(tokens[1].text, "// note")
        self.assertEqual((tokens[1].line, tokens[1].column), (1, 3))

    def test_block_comment_positions(self):
        tokens = tokenize("/* a\n b */ x", "c")
        self.assertEqual(len(tokens), 1)
        self.assertEqual((tokens[0].line, tokens[0].column), (2, 7))

    def test_unterminated_block_comment(self):
        with self.assertRaises(LexerError) as context:
            tokenize("x /* never closed", "java")
        self.assertEqual(context.exception.diagnostic.code, "L003")

    def test_python_hash_comment(self):
        tokens = tokenize("x # comment", "python")
        self.assertEqual([token.text for token in tokens], ["x"])

    def test_preprocessor_directive(self):
        tokens = tokenize("#include <stdio.h>", "c")
        self.assertEqual(tokens[0].type, TokenType.DIRECTIVE)
        self.assertEqual(tokens[0].text, "#include")
        self.assertEqual(tokens[0].to_dict()["type"], "preprocessor")

    def test_directive_must_start_the_line(self):
        tokens = tokenize("x\n  #define Y", "cpp")
        self.assertEqual(tokens[1].type, TokenType.DIRECTIVE)

        with self.assertRaises(LexerError) as context:
            tokenize("x #define Y", "cpp")
        self.assertEqual((context.exception.line, context.exception.column), (1, 3))

    def test_java_annotation(self):
        tokens = tokenize("@Override", "java")
        self.assertEqual(tokens[0].type, TokenType.ANNOTATION)
        self.assertEqual(tokens[0].text, "@Override")


class TestIndentation(unittest.TestCase):
    """INDENT/DEDENT markers for Python."""

    def _types(self, source):
        return [token.type for token in tokenize(source, "python")]

    def test_indent_and_dedent(self):
        tokens = tokenize("if x:\n    y\nz", "python")
        self.assertEqual([token.type for token in tokens], [
            TokenType.KEYWORD, TokenType.IDENTIFIER, TokenType.PUNCTUATION,
            TokenType.NEWLINE, TokenType.INDENT, TokenType.IDENTIFIER,
            TokenType.NEWLINE, TokenType.DEDENT, TokenType.IDENTIFIER,
        ])
        indent = tokens[4]
        self.assertEqual((indent.text, indent.line, indent.column), ("    ", 2, 1))

    def test_single_dedent_across_levels(self):
        types = self._types("a\n  b\n    c\nd")
        self.assertEqual(types.count(TokenType.INDENT), 2)
        self.assertEqual(types.count(TokenType.DEDENT), 1)

    def test_blank_and_comment_lines_do_not_change_level(self):
        self.assertEqual(self._types("a:\n    b\n\n    # note\n    c"), [
            TokenType.IDENTIFIER, TokenType.PUNCTUATION, TokenType.NEWLINE,
            TokenType.INDENT, TokenType.IDENTIFIER, TokenType.NEWLINE,
            TokenType.NEWLINE, TokenType.NEWLINE, TokenType.IDENTIFIER,
        ])

    def test_no_closing_dedent_at_end(self):
        types = self._types("a:\n    b")
        self.assertEqual(types[-1], TokenType.IDENTIFIER)
        self.assertNotIn(TokenType.DEDENT, types)

    def test_other_languages_have_no_layout_tokens(self):
        tokens = tokenize("a\n    b\nc", "javascript")
        self.assertFalse(any(token.is_layout for token in tokens))


class TestLexerErrors(unittest.TestCase):
    """Unscannable characters."""

    def test_invalid_character_position(self):
        with self.assertRaises(LexerError) as context:
            tokenize("a\n  # b", "javascript")
        error = context.exception
        self.assertEqual((error.line, error.column), (2, 3))
        self.assertEqual(error.diagnostic.code, "L001")
        self.assertEqual(error.message, "Invalid character: '#'")

    def test_lexer_instance_is_reusable(self):
        lexer = Lexer("1 + 2", Language.C)
        first = lexer.tokenize()
        second = lexer.tokenize()
        self.assertEqual(first, second)


if __name__ == '__main__':
    unittest.main()
