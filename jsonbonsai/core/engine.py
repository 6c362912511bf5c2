"""
Parser for jsonbonsai - builds a tree of JSON values from tokens.

The grammar is classic JSON, parsed by recursive descent with one token of
lookahead:

    value  := object | array | string | number | true | false | null
    object := '{' (member (',' member)*)? '}'
    member := string ':' value
    array  := '[' (value (',' value)*)? ']'

Each rule is one method, so recursion depth equals document nesting depth.
Without a configured nesting limit a pathological document can exhaust the
interpreter stack; the resulting RecursionError is not caught here.
"""

from collections.abc import Iterable
from typing import Optional, TextIO, Union

from ..security.exceptions import (
    ErrorReporter,
    ExpectedColonError,
    ExpectedCommaOrCloseArrayError,
    ExpectedCommaOrCloseObjectError,
    ExpectedStringKeyError,
    JsonBonsaiError,
    ParseError,
    TrailingCommaError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
)
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .lookahead import LookAhead
from .nodes import JsonArray, JsonObject, TreeValue
from .parser_base import BaseParserMixin
from .tokenizer import Token, TokenType, tokenize

LEAF_TOKEN_TYPES = frozenset(
    {
        TokenType.STRING,
        TokenType.NUMBER,
        TokenType.TRUE,
        TokenType.FALSE,
        TokenType.NULL,
    }
)


class Parser(BaseParserMixin):
    """JSON tree builder that converts tokens into TreeValue nodes."""

    def __init__(
        self, tokens: Iterable[Token], config: Optional[ParseConfig] = None
    ):
        self.tokens: LookAhead[Token] = LookAhead(tokens)
        self.config = config or ParseConfig()

        # Optional validator, only when limits are configured
        self.validator = (
            LimitValidator(self.config.limits) if self.config.limits else None
        )

    def current_token(self) -> Optional[Token]:
        """Get the next token without consuming it, or None at the end."""
        return self.tokens.peek()

    def advance(self, expected: str) -> Token:
        """Consume and return the next token; running out is an error."""
        token = next(self.tokens, None)
        if token is None:
            raise UnexpectedEndOfInputError(expected)
        return token

    def at_end(self) -> bool:
        """True when every token has been consumed."""
        return self.tokens.at_end()

    def expect_end(self) -> None:
        """Reject tokens left over after a complete value."""
        leftover = self.current_token()
        if leftover is not None:
            raise UnexpectedTokenError(leftover, "end of input")

    def parse(self) -> TreeValue:
        """Parse one complete JSON value from the token stream.

        Tokens after the value are left unconsumed; rejecting them is the
        caller's decision (see expect_end).
        """
        return self.parse_value()

    def parse_value(self) -> TreeValue:
        """Parse a JSON value (object, array, string, number, true, false, null)."""
        token = self.current_token()
        if token is None:
            raise UnexpectedEndOfInputError("a value")

        if token.type == TokenType.OPEN_OBJECT:
            return self.parse_object()

        if token.type == TokenType.OPEN_ARRAY:
            return self.parse_array()

        if token.type in LEAF_TOKEN_TYPES:
            return self.parse_leaf_token(self.advance("a value"))

        raise UnexpectedTokenError(token)

    def parse_object(self) -> JsonObject:
        """Parse a JSON object into ordered (key, value) members."""
        self._expect_opening(TokenType.OPEN_OBJECT)
        self.validate_and_enter_structure(self.validator)

        members: list[tuple[str, TreeValue]] = []

        if self._peek_type("a string key or '}'") == TokenType.CLOSE_OBJECT:
            self.advance("'}'")
            self.validate_and_exit_structure(self.validator)
            return JsonObject(members)

        while True:
            key = self._parse_object_key()
            self._expect_colon()
            members.append((key, self.parse_value()))

            if not self._should_continue(
                TokenType.CLOSE_OBJECT, "object", ExpectedCommaOrCloseObjectError
            ):
                break

        self.advance("'}'")
        self.validate_and_exit_structure(self.validator)
        return JsonObject(members)

    def parse_array(self) -> JsonArray:
        """Parse a JSON array."""
        self._expect_opening(TokenType.OPEN_ARRAY)
        self.validate_and_enter_structure(self.validator)

        items: list[TreeValue] = []

        if self._peek_type("a value or ']'") == TokenType.CLOSE_ARRAY:
            self.advance("']'")
            self.validate_and_exit_structure(self.validator)
            return JsonArray(items)

        while True:
            items.append(self.parse_value())

            if not self._should_continue(
                TokenType.CLOSE_ARRAY, "array", ExpectedCommaOrCloseArrayError
            ):
                break

        self.advance("']'")
        self.validate_and_exit_structure(self.validator)
        return JsonArray(items)

    def _peek_type(self, expected: str) -> TokenType:
        token = self.current_token()
        if token is None:
            raise UnexpectedEndOfInputError(expected)
        return token.type

    def _expect_opening(self, token_type: TokenType) -> None:
        token = self.advance("a value")
        if token.type != token_type:
            raise UnexpectedTokenError(token)

    def _parse_object_key(self) -> str:
        """Parse an object key and return it."""
        token = self.advance("a string key")
        if token.type != TokenType.STRING:
            raise ExpectedStringKeyError(token)
        return token.text

    def _expect_colon(self) -> None:
        """Expect and consume a colon token."""
        token = self.advance("':'")
        if token.type != TokenType.COLON:
            raise ExpectedColonError(token)

    def _should_continue(
        self,
        closer: TokenType,
        container: str,
        separator_error: type[ParseError],
    ) -> bool:
        """Handle the separator after an entry. Returns True if another entry follows."""
        closer_text = "}" if closer == TokenType.CLOSE_OBJECT else "]"
        token_type = self._peek_type(f"',' or '{closer_text}'")

        if token_type == TokenType.COMMA:
            comma = self.advance("','")
            following = self.current_token()
            if following is not None and following.type == closer:
                raise TrailingCommaError(comma, container)
            return True

        if token_type == closer:
            return False

        raise separator_error(self.current_token())


def _run_parser(parser: Parser, strict: bool = False) -> TreeValue:
    """Run a parser to completion, logging the outcome when a logger is set."""
    logger = parser.config.logger
    try:
        tree = parser.parse()
        if strict:
            parser.expect_end()
    except JsonBonsaiError as e:
        if logger:
            logger.debug("Tree building failed: %s", e.message)
        raise

    if logger:
        logger.debug(
            "Built %s tree from %d tokens", tree.node_type.value, parser.tokens.consumed
        )
    return tree


def build(tokens: Iterable[Token], config: Optional[ParseConfig] = None) -> TreeValue:
    """
    Build a tree value from a token sequence.

    The grammar is applied once. Tokens following a complete value are neither
    required nor rejected; use parse(..., strict=True) or Parser.expect_end()
    to insist on a single document.

    Args:
        tokens: Tokens in document order, as returned by tokenize()
        config: Optional ParseConfig for limits and logging

    Returns:
        The root TreeValue

    Raises:
        ParseError: If the tokens do not form a JSON value
        SecurityError: If the configured nesting limit is exceeded
    """
    return _run_parser(Parser(tokens, config))


def parse(
    text: Union[str, bytes, bytearray],
    config: Optional[ParseConfig] = None,
    *,
    strict: bool = False,
) -> TreeValue:
    """
    Parse JSON text into a tree value (tokenize, then build).

    Args:
        text: The JSON text; bytes are decoded as UTF-8
        config: Optional ParseConfig for limits, error context and logging
        strict: If True, reject any tokens after the first complete value

    Returns:
        The root TreeValue

    Raises:
        LexError: If tokenization fails
        ParseError: If tree building fails
        SecurityError: If configured limits are exceeded
    """
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("utf-8")

    config = config or ParseConfig()

    try:
        tokens = tokenize(text, config)
        return _run_parser(Parser(tokens, config), strict)
    except JsonBonsaiError as e:
        if config.include_context:
            ErrorReporter(text, config.max_error_context).attach_context(e)
        raise


def load(
    fp: TextIO, config: Optional[ParseConfig] = None, *, strict: bool = False
) -> TreeValue:
    """
    Parse JSON from a file-like object.

    Same as parse() but reads the whole of fp first.
    """
    return parse(fp.read(), config, strict=strict)
