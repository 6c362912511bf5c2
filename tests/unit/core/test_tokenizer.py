"""
Test cases for the jsonbonsai tokenizer.

Tests focus on lexeme accuracy, positions and the lexical error taxonomy.
"""

import unittest

from jsonbonsai.core.tokenizer import Lexer, Position, Token, TokenType, tokenize
from jsonbonsai.security.exceptions import (
    LexError,
    UnexpectedCharacterError,
    UnknownKeywordError,
    UnterminatedStringError,
)


class TestTokenizerAccuracy(unittest.TestCase):
    """Test tokenizer accuracy for valid input."""

    def _types(self, text):
        return [t.type for t in tokenize(text)]

    def test_string_tokenization(self):
        """A quoted string yields one STRING token without the quotes."""
        tokens = tokenize('"hello"')
        self.assertEqual(len(tokens), 1)
        self.assertEqual(tokens[0].type, TokenType.STRING)
        self.assertEqual(tokens[0].text, "hello")

    def test_empty_string(self):
        tokens = tokenize('""')
        self.assertEqual(tokens[0].type, TokenType.STRING)
        self.assertEqual(tokens[0].text, "")

    def test_escape_sequences_pass_through(self):
        """Backslash sequences are kept verbatim, not decoded."""
        tokens = tokenize(r'"line1\nline2"')
        self.assertEqual(tokens[0].text, r"line1\nline2")

        tokens = tokenize(r'"tab\t and A"')
        self.assertEqual(tokens[0].text, r"tab\t and A")

    def test_string_keeps_inner_whitespace_and_punctuation(self):
        tokens = tokenize('"a b\t{c}: [d],"')
        self.assertEqual(len(tokens), 1)
        self.assertEqual(tokens[0].text, "a b\t{c}: [d],")

    def test_number_tokenization(self):
        """Numbers are the maximal run of digits and decimal points."""
        test_cases = [
            ("0", "0"),
            ("123", "123"),
            ("78.90", "78.90"),
            ("3.", "3."),
            ("1.2.3", "1.2.3"),
        ]

        for input_num, expected_text in test_cases:
            with self.subTest(input_num=input_num):
                tokens = tokenize(input_num)
                self.assertEqual(len(tokens), 1)
                self.assertEqual(tokens[0].type, TokenType.NUMBER)
                self.assertEqual(tokens[0].text, expected_text)

    def test_number_stops_at_exponent(self):
        """Exponents are not part of the number lexeme."""
        with self.assertRaises(UnknownKeywordError) as cm:
            tokenize("1e5")
        self.assertEqual(cm.exception.word, "e")

    def test_keyword_tokenization(self):
        """Test boolean and null keyword tokenization."""
        keywords = [
            ("true", TokenType.TRUE),
            ("false", TokenType.FALSE),
            ("null", TokenType.NULL),
        ]

        for keyword, expected_type in keywords:
            with self.subTest(keyword=keyword):
                tokens = tokenize(keyword)
                self.assertEqual(tokens[0].type, expected_type)
                self.assertEqual(tokens[0].text, keyword)

    def test_structural_tokenization(self):
        """Test structural character tokenization."""
        tokens = tokenize("{}[],:")
        expected_types = [
            TokenType.OPEN_OBJECT, TokenType.CLOSE_OBJECT,
            TokenType.OPEN_ARRAY, TokenType.CLOSE_ARRAY,
            TokenType.COMMA, TokenType.COLON,
        ]

        self.assertEqual([t.type for t in tokens], expected_types)
        self.assertEqual([t.text for t in tokens], list("{}[],:"))

    def test_whitespace_only_input(self):
        """Whitespace never produces tokens."""
        for text in ["", " ", "\t\n\r ", "\n\n\n"]:
            with self.subTest(text=text):
                self.assertEqual(tokenize(text), [])

    def test_object_with_array(self):
        tokens = tokenize('{"a": 1, "b": [true, false, null]}')
        self.assertEqual(len(tokens), 15)
        self.assertEqual(tokens[-1].type, TokenType.CLOSE_OBJECT)
        self.assertEqual(
            [t.type for t in tokens],
            [
                TokenType.OPEN_OBJECT,
                TokenType.STRING, TokenType.COLON, TokenType.NUMBER, TokenType.COMMA,
                TokenType.STRING, TokenType.COLON, TokenType.OPEN_ARRAY,
                TokenType.TRUE, TokenType.COMMA, TokenType.FALSE, TokenType.COMMA,
                TokenType.NULL, TokenType.CLOSE_ARRAY,
                TokenType.CLOSE_OBJECT,
            ],
        )

    def test_nested_brackets(self):
        self.assertEqual(
            self._types("[[[]]]"),
            [TokenType.OPEN_ARRAY] * 3 + [TokenType.CLOSE_ARRAY] * 3,
        )

    def test_adjacent_tokens_without_whitespace(self):
        tokens = tokenize('["x",1,true]')
        self.assertEqual([t.text for t in tokens], ["[", "x", ",", "1", ",", "true", "]"])

    def test_tokenize_is_idempotent(self):
        text = '{"k": [1.5, "v", null], "k": {}}'
        self.assertEqual(tokenize(text), tokenize(text))


class TestTokenPositions(unittest.TestCase):
    """Test source positions attached to tokens."""

    def test_positions_on_one_line(self):
        tokens = tokenize('{"a": 1}')
        self.assertEqual(tokens[0].position, Position(1, 1, 0))
        self.assertEqual(tokens[1].position, Position(1, 2, 1))
        self.assertEqual(tokens[2].position, Position(1, 5, 4))
        self.assertEqual(tokens[3].position, Position(1, 7, 6))

    def test_positions_across_lines(self):
        tokens = tokenize('[\n  1,\n  2\n]')
        self.assertEqual(tokens[1].position, Position(2, 3, 4))
        self.assertEqual(tokens[3].position, Position(3, 3, 9))
        self.assertEqual(tokens[4].position, Position(4, 1, 11))

    def test_newline_inside_string_advances_line(self):
        tokens = tokenize('"a\nb" 1')
        self.assertEqual(tokens[1].position.line, 2)

    def test_tokens_compare_by_value(self):
        token = Token(TokenType.COMMA, ",")
        self.assertIsNone(token.position)
        self.assertEqual(token, Token(TokenType.COMMA, ","))


class TestLexicalErrors(unittest.TestCase):
    """Test the lexical error taxonomy."""

    def test_unterminated_string(self):
        with self.assertRaises(UnterminatedStringError) as cm:
            tokenize('{"key": "value')
        self.assertEqual(cm.exception.position, Position(1, 9, 8))

    def test_lone_quote(self):
        with self.assertRaises(UnterminatedStringError):
            tokenize('"')

    def test_unknown_keyword(self):
        with self.assertRaises(UnknownKeywordError) as cm:
            tokenize('{"a": tru}')
        self.assertEqual(cm.exception.word, "tru")
        self.assertEqual(cm.exception.position.column, 7)

    def test_keyword_case_sensitive(self):
        for word in ["True", "NULL", "False"]:
            with self.subTest(word=word):
                with self.assertRaises(UnknownKeywordError) as cm:
                    tokenize(word)
                self.assertEqual(cm.exception.word, word)

    def test_keyword_is_maximal_run(self):
        with self.assertRaises(UnknownKeywordError) as cm:
            tokenize("nullx")
        self.assertEqual(cm.exception.word, "nullx")

    def test_unexpected_character(self):
        test_cases = ["-1", "'single'", "// comment", "@", "+2", "{\"a\": .5}"]

        for text in test_cases:
            with self.subTest(text=text):
                with self.assertRaises(UnexpectedCharacterError):
                    tokenize(text)

    def test_unexpected_character_details(self):
        with self.assertRaises(UnexpectedCharacterError) as cm:
            tokenize("[1,\n -2]")
        self.assertEqual(cm.exception.char, "-")
        self.assertEqual(cm.exception.position, Position(2, 2, 5))

    def test_lex_errors_share_base_class(self):
        for text in ['"open', "nope", "#"]:
            with self.subTest(text=text):
                with self.assertRaises(LexError):
                    tokenize(text)

    def test_first_error_wins(self):
        """Tokenization stops at the first error even if later input is also bad."""
        with self.assertRaises(UnknownKeywordError):
            tokenize('[nope, #, "open')


class TestLexerInput(unittest.TestCase):
    """Test the Lexer class directly."""

    def test_lexer_accepts_any_character_iterable(self):
        chunks = iter(['{"a"', ": ", "[1, 2]}"])
        chars = (char for chunk in chunks for char in chunk)
        tokens = Lexer(chars).get_all_tokens()
        self.assertEqual(tokens, tokenize('{"a": [1, 2]}'))

    def test_tokenize_is_lazy(self):
        """The generator yields valid tokens before reaching a later error."""
        stream = Lexer("[1, @]").tokenize()
        self.assertEqual(next(stream).type, TokenType.OPEN_ARRAY)
        self.assertEqual(next(stream).type, TokenType.NUMBER)
        self.assertEqual(next(stream).type, TokenType.COMMA)
        with self.assertRaises(UnexpectedCharacterError):
            next(stream)


if __name__ == "__main__":
    unittest.main()
