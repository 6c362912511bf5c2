"""
jsonbonsai - A small, strict JSON front end that grows text into trees.

jsonbonsai works in two stages: a tokenizer turns raw text into a flat list
of typed tokens, and a recursive-descent tree builder turns those tokens into
a tree of JSON values. Both stages are strict: the first error is raised as a
typed exception and nothing is repaired or skipped.

Key Features:
- Tokens carry their exact lexeme and source position
- Trees keep object members in order, duplicate keys included
- One exception class per failure, split into lexical and syntax errors
- Error messages with line/column, a source snippet and suggestions
- Optional limits on input size, string/number length and nesting depth

Quick Start:
    import jsonbonsai
    tree = jsonbonsai.parse('{"a": 1, "b": [true, false, null]}')
    tree.get("a")      # JsonNumber(value=1.0)
    tree.to_python()   # {'a': 1.0, 'b': [True, False, None]}

    # The two stages separately
    tokens = jsonbonsai.tokenize('[1, 2]')
    tree = jsonbonsai.build(tokens)

Supported grammar is deliberately minimal: numbers are unsigned decimals
without exponents, and string contents are kept verbatim (no escape decoding).
"""

from .core.engine import Parser, build, load, parse
from .core.nodes import (
    JsonArray,
    JsonFalse,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonTrue,
    NodeType,
    TreeValue,
)
from .core.tokenizer import Lexer, Position, Token, TokenType, tokenize
from .security.exceptions import (
    ExpectedColonError,
    ExpectedCommaOrCloseArrayError,
    ExpectedCommaOrCloseObjectError,
    ExpectedStringKeyError,
    InvalidNumberError,
    JsonBonsaiError,
    LexError,
    ParseError,
    SecurityError,
    TrailingCommaError,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
    UnknownKeywordError,
    UnterminatedStringError,
)
from .utils.config import ErrorReporting, ParseConfig, ParseLimits

__version__ = "0.1.0"
__author__ = "jsonbonsai contributors"

__all__ = [
    # Entry points
    "tokenize", "build", "parse", "load",
    # Stages
    "Lexer", "Parser",
    # Tokens
    "Token", "TokenType", "Position",
    # Tree values
    "TreeValue", "NodeType", "JsonObject", "JsonArray", "JsonString",
    "JsonNumber", "JsonTrue", "JsonFalse", "JsonNull",
    # Configuration classes
    "ParseConfig", "ParseLimits", "ErrorReporting",
    # Exception classes
    "JsonBonsaiError", "LexError", "ParseError", "SecurityError",
    "UnexpectedCharacterError", "UnterminatedStringError", "UnknownKeywordError",
    "UnexpectedEndOfInputError", "UnexpectedTokenError", "ExpectedStringKeyError",
    "ExpectedColonError", "ExpectedCommaOrCloseObjectError",
    "ExpectedCommaOrCloseArrayError", "TrailingCommaError", "InvalidNumberError",
]
