"""
Base parser functionality: leaf conversion and structure tracking.
"""

from typing import Optional

from ..security.exceptions import InvalidNumberError, ParseError
from ..security.limits import LimitValidator
from .nodes import JsonFalse, JsonNull, JsonNumber, JsonString, JsonTrue, TreeValue
from .tokenizer import Token, TokenType


class BaseParserMixin:
    """Common parsing functionality for tree builders."""

    def parse_number_token(self, token: Token) -> JsonNumber:
        """Parse a number token into a float leaf."""
        try:
            return JsonNumber(float(token.text))
        except ValueError:
            raise InvalidNumberError(token) from None

    def parse_leaf_token(self, token: Token) -> TreeValue:
        """Map a single string, number or keyword token to its leaf value."""
        if token.type == TokenType.STRING:
            return JsonString(token.text)
        if token.type == TokenType.NUMBER:
            return self.parse_number_token(token)
        if token.type == TokenType.TRUE:
            return JsonTrue()
        if token.type == TokenType.FALSE:
            return JsonFalse()
        if token.type == TokenType.NULL:
            return JsonNull()
        raise ParseError(f"Token {token.type.value} is not a leaf value", token)

    def validate_and_enter_structure(self, validator: Optional[LimitValidator]) -> None:
        """Validate and enter a structure if validator exists."""
        if validator:
            validator.enter_structure()

    def validate_and_exit_structure(self, validator: Optional[LimitValidator]) -> None:
        """Validate and exit a structure if validator exists."""
        if validator:
            validator.exit_structure()
