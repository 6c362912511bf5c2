"""
Lexer for jsonbonsai - tokenizes input strings for parsing.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from ..security.exceptions import (
    JsonBonsaiError,
    UnexpectedCharacterError,
    UnknownKeywordError,
    UnterminatedStringError,
)
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .constants import (
    ASCII_DIGITS,
    ASCII_LETTERS,
    DECIMAL_POINT,
    STRING_QUOTE,
    WHITESPACE_CHARS,
    get_keyword_token_map,
    get_structural_token_map,
)
from .lookahead import LookAhead


class TokenType(Enum):
    """Token types for JSON parsing."""

    OPEN_OBJECT = "OPEN_OBJECT"
    CLOSE_OBJECT = "CLOSE_OBJECT"
    OPEN_ARRAY = "OPEN_ARRAY"
    CLOSE_ARRAY = "CLOSE_ARRAY"
    COLON = "COLON"
    COMMA = "COMMA"

    STRING = "STRING"
    NUMBER = "NUMBER"
    TRUE = "TRUE"
    FALSE = "FALSE"
    NULL = "NULL"


@dataclass(frozen=True)
class Position:
    """Position in source text (line and column, plus character offset)."""

    line: int
    column: int
    offset: int = 0


class Token(NamedTuple):
    """Token with type, lexeme text and position information."""

    type: TokenType
    text: str
    position: Optional[Position] = None


class Lexer:
    """Lexical analyzer for JSON input.

    Reads characters through a one-character lookahead, so the input can be
    any iterable of characters, not only a fully materialized string.
    """

    def __init__(
        self, text: Iterable[str], validator: Optional[LimitValidator] = None
    ) -> None:
        self._chars: LookAhead[str] = LookAhead(text)
        self.validator = validator
        self.line = 1
        self.column = 1
        self.offset = 0

    def current_position(self) -> Position:
        """Get current position in the text."""
        return Position(self.line, self.column, self.offset)

    def peek(self) -> str:
        """Peek at the next character without consuming it ("" at the end)."""
        char = self._chars.peek()
        return "" if char is None else char

    def advance(self) -> str:
        """Consume and return the next character."""
        char = next(self._chars, "")
        if not char:
            return char

        self.offset += 1
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def skip_whitespace(self) -> None:
        """Skip whitespace characters (space, tab, newline, carriage return)."""
        while self.peek() in WHITESPACE_CHARS:
            self.advance()

    def read_string(self) -> str:
        """Read a double-quoted string verbatim, without escape decoding."""
        start = self.current_position()
        self.advance()

        chars = []
        while True:
            char = self.peek()
            if not char:
                raise UnterminatedStringError(start)
            if char == STRING_QUOTE:
                self.advance()
                break
            chars.append(self.advance())

        result = "".join(chars)
        if self.validator:
            self.validator.validate_string_length(result, f"line {start.line}")
        return result

    def read_number(self) -> str:
        """Read a numeric literal: the maximal run of digits and decimal points.

        Signs and exponents are not part of the lexeme. A run such as "1.2.3"
        is returned as-is and rejected later when it is converted to a float.
        """
        start = self.current_position()
        chars = []
        while self.peek() in ASCII_DIGITS or self.peek() == DECIMAL_POINT:
            chars.append(self.advance())

        result = "".join(chars)
        if self.validator:
            self.validator.validate_number_length(result, f"line {start.line}")
        return result

    def read_keyword(self) -> str:
        """Read the maximal run of alphabetic characters."""
        chars = []
        while self.peek().isalpha():
            chars.append(self.advance())
        return "".join(chars)

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the input text into a sequence of tokens."""
        structural = get_structural_token_map()
        keywords = get_keyword_token_map()

        while True:
            self.skip_whitespace()

            char = self.peek()
            if not char:
                return

            pos = self.current_position()

            if char in structural:
                yield Token(structural[char], self.advance(), pos)
            elif char == STRING_QUOTE:
                yield Token(TokenType.STRING, self.read_string(), pos)
            elif char in ASCII_DIGITS:
                yield Token(TokenType.NUMBER, self.read_number(), pos)
            elif char in ASCII_LETTERS:
                word = self.read_keyword()
                if word not in keywords:
                    raise UnknownKeywordError(word, pos)
                yield Token(keywords[word], word, pos)
            else:
                raise UnexpectedCharacterError(char, pos)

    def get_all_tokens(self) -> list[Token]:
        """Get all tokens as a list."""
        return list(self.tokenize())


def tokenize(text: str, config: Optional[ParseConfig] = None) -> list[Token]:
    """
    Convert JSON text into a list of tokens.

    Tokenization is all-or-nothing: the first lexical error is raised and no
    partial token list is returned.

    Args:
        text: The JSON text to scan
        config: Optional ParseConfig for limits and logging

    Returns:
        Tokens in document order

    Raises:
        LexError: If the text contains an invalid character, an unterminated
            string or an unknown keyword
        SecurityError: If configured limits are exceeded
    """
    config = config or ParseConfig()
    validator = LimitValidator(config.limits) if config.limits else None

    try:
        if validator:
            validator.validate_input_size(text)
        tokens = Lexer(text, validator).get_all_tokens()
    except JsonBonsaiError as e:
        if config.logger:
            config.logger.debug("Tokenization failed: %s", e.message)
        raise

    if config.logger:
        config.logger.debug(
            "Tokenized %d characters into %d tokens", len(text), len(tokens)
        )
    return tokens
