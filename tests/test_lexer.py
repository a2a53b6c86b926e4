"""
Test suite for the tallyscan tokenizer.

Tests cover:
- Token classification and lexemes
- End-anchored line/column tracking
- Fail-fast error reporting
"""

import unittest
import sys
import os

import pytest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from tallyscan.lexer import Tokenizer, Token, TokenKind, format_token, tokenize_string
from tallyscan.lexer.errors import UNRECOGNIZED_SYMBOL, UNEXPECTED_CHARACTER
from tallyscan.scan import DEFAULT_INPUT


class TestTokenizer(unittest.TestCase):
    """Test cases for successful tokenization."""

    def setUp(self):
        self.tokenizer = Tokenizer()

    def _tokens(self, text):
        outcome = self.tokenizer.tokenize(text)
        self.assertTrue(outcome.is_ok(), f"Unexpected error: {outcome!r}")
        return outcome.unwrap_ok()

    def _kinds_and_lexemes(self, text):
        return [(t.kind, t.lexeme) for t in self._tokens(text)]

    def test_empty_input(self):
        """Empty input yields only the end-of-input token."""
        tokens = self._tokens("")
        self.assertEqual(tokens, [Token(TokenKind.END_OF_INPUT, "", 1, 1)])

    def test_whitespace_only(self):
        tokens = self._tokens(" \t\r\n  ")
        self.assertEqual(len(tokens), 1)
        self.assertEqual(tokens[0].kind, TokenKind.END_OF_INPUT)
        self.assertEqual((tokens[0].line, tokens[0].column), (2, 3))

    def test_classification(self):
        self.assertEqual(self._kinds_and_lexemes("mul(12,3)"), [
            (TokenKind.IDENTIFIER, "mul"),
            (TokenKind.PUNCTUATION, "("),
            (TokenKind.NUMBER_LITERAL, "12"),
            (TokenKind.PUNCTUATION, ","),
            (TokenKind.NUMBER_LITERAL, "3"),
            (TokenKind.PUNCTUATION, ")"),
            (TokenKind.END_OF_INPUT, ""),
        ])

    def test_identifier_with_underscores_and_digits(self):
        self.assertEqual(self._kinds_and_lexemes("_do_not_mul2 x"), [
            (TokenKind.IDENTIFIER, "_do_not_mul2"),
            (TokenKind.IDENTIFIER, "x"),
            (TokenKind.END_OF_INPUT, ""),
        ])

    def test_digits_then_letters_split(self):
        """A number stops at the first non-digit; no suffixes or decimals."""
        self.assertEqual(self._kinds_and_lexemes("12ab3.5"), [
            (TokenKind.NUMBER_LITERAL, "12"),
            (TokenKind.IDENTIFIER, "ab3"),
            (TokenKind.PUNCTUATION, "."),
            (TokenKind.NUMBER_LITERAL, "5"),
            (TokenKind.END_OF_INPUT, ""),
        ])

    def test_every_operator(self):
        tokens = self._tokens("+-*/%&|^~@:$?#><!")[:-1]
        self.assertEqual(len(tokens), 17)
        self.assertTrue(all(t.kind is TokenKind.OPERATOR for t in tokens))

    def test_every_punctuation(self):
        tokens = self._tokens(";,'.(){}[]\"")[:-1]
        self.assertEqual([t.lexeme for t in tokens], list(";,'.(){}[]\""))
        self.assertTrue(all(t.kind is TokenKind.PUNCTUATION for t in tokens))

    def test_positions_are_end_anchored(self):
        tokens = self._tokens("ab\ncd")
        ab, cd, end = tokens

        self.assertEqual((ab.lexeme, ab.line, ab.column), ("ab", 1, 1))
        # Cursor sits at line 2 column 3 when "cd" is emitted
        self.assertEqual((cd.lexeme, cd.line, cd.column), ("cd", 2, 3 - len("cd")))
        self.assertEqual((end.line, end.column), (2, 3))

    def test_columns_follow_cursor(self):
        tokens = self._tokens("  mul (7")
        self.assertEqual([(t.lexeme, t.column) for t in tokens],
                         [("mul", 3), ("(", 7), ("7", 8), ("", 9)])

    def test_default_sample_tokenizes(self):
        tokens = self._tokens(DEFAULT_INPUT)
        self.assertEqual(tokens[0], Token(TokenKind.IDENTIFIER, "xmul", 1, 1))
        self.assertEqual(tokens[-1].kind, TokenKind.END_OF_INPUT)

    def test_tokenize_is_repeatable(self):
        text = "do()\nmul(2,3)\tdon't()"
        self.assertEqual(self._tokens(text), self._tokens(text))
        self.assertEqual(Tokenizer().tokenize(text), Tokenizer().tokenize(text))

    def test_format_token(self):
        token = Token(TokenKind.NUMBER_LITERAL, "42", 3, 7)
        self.assertEqual(format_token(token), 'Token(NumberLiteral, "42", 3, 7)')

    def test_tokenize_string(self):
        self.assertEqual(tokenize_string("a"), Tokenizer().tokenize("a"))


class TestTokenizerErrors(unittest.TestCase):
    """Test cases for scan failures."""

    def setUp(self):
        self.tokenizer = Tokenizer()

    def _error(self, text):
        outcome = self.tokenizer.tokenize(text)
        self.assertTrue(outcome.is_err(), f"Expected an error: {outcome!r}")
        return outcome.unwrap_err()

    def test_unrecognized_symbol(self):
        error = self._error("mul(1,2)=3")
        self.assertEqual(error.code, UNRECOGNIZED_SYMBOL)
        self.assertEqual(error.message, "Unrecognized character: =")
        self.assertEqual((error.line, error.column), (1, 9))

    def test_unexpected_character(self):
        error = self._error("ab\n c\x01d")
        self.assertEqual(error.code, UNEXPECTED_CHARACTER)
        self.assertEqual(error.message, "Unexpected character: '\\x01'")
        self.assertEqual((error.line, error.column), (2, 3))

    def test_non_ascii_is_unexpected(self):
        error = self._error("café")
        self.assertEqual(error.code, UNEXPECTED_CHARACTER)
        self.assertEqual((error.line, error.column), (1, 4))

    def test_first_error_wins(self):
        error = self._error("ok \\ then `")
        self.assertEqual(error.message, "Unrecognized character: \\")
        self.assertEqual(error.column, 4)

    def test_error_renders_as_diagnostic(self):
        error = self._error("=")
        self.assertEqual(str(error), "ERROR[T001]: Unrecognized character: =\n  --> 1:1")

    def test_tokenizer_reusable_after_error(self):
        self._error("=")
        outcome = self.tokenizer.tokenize("x")
        self.assertEqual(outcome.unwrap_ok()[0], Token(TokenKind.IDENTIFIER, "x", 1, 1))


@pytest.mark.parametrize("text", [
    "",
    "xmul(2,4)%&mul[3,7]",
    "do()\n  don't()\r\n\tmul ( 11 , 8 )",
    "a1_ 22 {}[]\"'",
])
def test_lexemes_rebuild_input_without_whitespace(text):
    tokens = Tokenizer().tokenize(text).unwrap_ok()
    rebuilt = "".join(t.lexeme for t in tokens if not t.is_end)
    assert rebuilt == "".join(text.split())


@pytest.mark.parametrize("text", ["", "x", "1 2 3", "do()mul(2,3)"])
def test_single_trailing_end_token(text):
    tokens = Tokenizer().tokenize(text).unwrap_ok()
    ends = [t for t in tokens if t.kind is TokenKind.END_OF_INPUT]
    assert ends == [tokens[-1]]
    assert tokens[-1].lexeme == ""


if __name__ == '__main__':
    unittest.main()
