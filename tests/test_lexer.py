"""
Test suite for the Lox lexer and the shared diagnostic sink.

Author: xwest
"""

import io
import unittest
import sys
import os
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.lexer.lexer import Lexer, tokenize_file
from lox.lexer.tokens import Token, TokenType
from lox.lexer.errors import Diagnostic, ErrorReporter


class TestLexer(unittest.TestCase):
    """Test cases for tokenization."""

    def setUp(self):
        """Set up test fixtures."""
        self.stderr = io.StringIO()
        self.reporter = ErrorReporter(self.stderr)

    def _types(self, source: str):
        return [token.type for token in Lexer(source, self.reporter).tokenize()]

    def test_operators(self):
        self.assertEqual(self._types("( ) - + * / ! != = == < <= > >="), [
            TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN,
            TokenType.MINUS, TokenType.PLUS, TokenType.STAR, TokenType.SLASH,
            TokenType.BANG, TokenType.BANG_EQUAL,
            TokenType.EQUAL, TokenType.EQUAL_EQUAL,
            TokenType.LESS, TokenType.LESS_EQUAL,
            TokenType.GREATER, TokenType.GREATER_EQUAL,
            TokenType.EOF,
        ])

    def test_numbers(self):
        tokens = Lexer("123 45.67", self.reporter).tokenize()

        self.assertEqual(tokens[0], Token(TokenType.NUMBER, "123", 123.0, 1))
        self.assertEqual(tokens[1], Token(TokenType.NUMBER, "45.67", 45.67, 1))

    def test_trailing_dot_is_not_part_of_number(self):
        self.assertEqual(self._types("1."), [TokenType.NUMBER, TokenType.DOT, TokenType.EOF])

    def test_string(self):
        tokens = Lexer('"hi there"', self.reporter).tokenize()

        self.assertEqual(tokens[0].type, TokenType.STRING)
        self.assertEqual(tokens[0].lexeme, '"hi there"')
        self.assertEqual(tokens[0].literal, "hi there")

    def test_multiline_string_advances_line(self):
        tokens = Lexer('"a\nb" 1', self.reporter).tokenize()

        self.assertEqual(tokens[0].literal, "a\nb")
        self.assertEqual(tokens[1].line, 2)

    def test_keywords_and_identifiers(self):
        self.assertEqual(self._types("true false nil var foo_1"), [
            TokenType.TRUE, TokenType.FALSE, TokenType.NIL, TokenType.VAR,
            TokenType.IDENTIFIER, TokenType.EOF,
        ])

    def test_comments_and_lines(self):
        tokens = Lexer("1 // one\n2\n", self.reporter).tokenize()

        self.assertEqual([t.type for t in tokens],
                         [TokenType.NUMBER, TokenType.NUMBER, TokenType.EOF])
        self.assertEqual(tokens[1].line, 2)
        self.assertEqual(tokens[2].line, 3)

    def test_empty_source(self):
        tokens = Lexer("", self.reporter).tokenize()
        self.assertEqual(tokens, [Token(TokenType.EOF, "", None, 1)])

    def test_unexpected_character(self):
        types = self._types("1 @ 2")

        self.assertEqual(types, [TokenType.NUMBER, TokenType.NUMBER, TokenType.EOF])
        self.assertTrue(self.reporter.had_error)
        self.assertEqual(self.stderr.getvalue(), "[line 1] Error: Unexpected character.\n")
        self.assertEqual(self.reporter.diagnostics[0].code, "L001")

    def test_unterminated_string(self):
        types = self._types('1\n"abc')

        self.assertEqual(types, [TokenType.NUMBER, TokenType.EOF])
        self.assertEqual(self.stderr.getvalue(), "[line 2] Error: Unterminated string.\n")

    def test_tokenize_file(self):
        with tempfile.NamedTemporaryFile("w", suffix=".lox", delete=False) as f:
            f.write("1 + 2")
            path = f.name

        try:
            tokens = tokenize_file(path, self.reporter)
        finally:
            os.unlink(path)

        self.assertEqual(len(tokens), 4)


class TestErrorReporter(unittest.TestCase):
    """Test cases for the diagnostic sink."""

    def setUp(self):
        """Set up test fixtures."""
        self.stderr = io.StringIO()
        self.reporter = ErrorReporter(self.stderr)

    def test_report_format(self):
        self.reporter.report(3, " at 'x'", "Bad thing.")

        self.assertEqual(self.stderr.getvalue(), "[line 3] Error at 'x': Bad thing.\n")
        self.assertTrue(self.reporter.had_error)

    def test_error_at_token(self):
        self.reporter.error(Token(TokenType.PLUS, "+", None, 4), "Nope.")
        self.reporter.error(Token(TokenType.EOF, "", None, 5), "Nope.")

        self.assertEqual(self.stderr.getvalue().splitlines(), [
            "[line 4] Error at '+': Nope.",
            "[line 5] Error at end: Nope.",
        ])

    def test_flag_is_sticky_until_reset(self):
        self.assertFalse(self.reporter.had_error)

        self.reporter.error_at_line(1, "First.")
        self.assertTrue(self.reporter.had_error)

        self.reporter.reset()
        self.assertFalse(self.reporter.had_error)
        self.assertEqual(self.reporter.diagnostics, [])

    def test_diagnostic_str(self):
        self.assertEqual(str(Diagnostic(2, "", "Oops.")), "[line 2] Error: Oops.")


if __name__ == "__main__":
    unittest.main()
