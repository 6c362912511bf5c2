"""
Common constants and mappings used across the jsonbonsai library.
"""

# Import here to avoid circular imports
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tokenizer import TokenType

# Characters skipped between tokens
WHITESPACE_CHARS = frozenset(" \t\n\r")

# First characters of number and keyword lexemes
ASCII_DIGITS = frozenset("0123456789")
ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")

STRING_QUOTE = '"'
DECIMAL_POINT = "."

KEYWORDS = ("true", "false", "null")


def get_structural_token_map() -> dict[str, "TokenType"]:
    """Get the mapping of structural characters to TokenType enums."""
    # Import here to avoid circular imports
    from .tokenizer import TokenType  # pylint: disable=import-outside-toplevel

    return {
        "{": TokenType.OPEN_OBJECT,
        "}": TokenType.CLOSE_OBJECT,
        "[": TokenType.OPEN_ARRAY,
        "]": TokenType.CLOSE_ARRAY,
        ":": TokenType.COLON,
        ",": TokenType.COMMA,
    }


def get_keyword_token_map() -> dict[str, "TokenType"]:
    """Get the mapping of keyword spellings to TokenType enums."""
    from .tokenizer import TokenType  # pylint: disable=import-outside-toplevel

    return {
        "true": TokenType.TRUE,
        "false": TokenType.FALSE,
        "null": TokenType.NULL,
    }
