"""
jsonbonsai Core Parsing Engine.

This module provides the tokenizer, the tree builder and the tree value types.
"""

from .engine import Parser, build, load, parse
from .nodes import (
    JsonArray, JsonFalse, JsonNull, JsonNumber, JsonObject, JsonString, JsonTrue,
    NodeType, TreeValue,
)
from .tokenizer import Lexer, Position, Token, TokenType, tokenize

__all__ = [
    'parse', 'build', 'load', 'tokenize', 'Parser',
    'Lexer', 'Token', 'TokenType', 'Position',
    'TreeValue', 'NodeType', 'JsonObject', 'JsonArray', 'JsonString',
    'JsonNumber', 'JsonTrue', 'JsonFalse', 'JsonNull',
]
