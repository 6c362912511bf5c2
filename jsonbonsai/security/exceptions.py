"""
Exception hierarchy and error reporting for jsonbonsai.

Errors fall into two disjoint families by stage: LexError for the tokenizer
and ParseError for the tree builder. SecurityError is raised only when
configured limits are exceeded. Every error is fatal to the call that raised
it; nothing here attempts recovery.
"""

import difflib
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..core.constants import KEYWORDS

if TYPE_CHECKING:
    from ..core.tokenizer import Position, Token


@dataclass
class ErrorContext:
    """Source snippet around the location of an error."""

    text: str
    position: "Position"
    context_before: str
    context_after: str
    error_char: str
    line_text: str
    column_indicator: str


class JsonBonsaiError(Exception):
    """Base exception for every jsonbonsai failure."""

    def __init__(
        self,
        message: str,
        position: Optional["Position"] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(message)

    def __str__(self) -> str:
        return self._format_message()

    def _format_message(self) -> str:
        parts = [self.message]

        if self.position:
            parts[0] += f" at line {self.position.line}, column {self.position.column}"

        if self.context:
            snippet = self.context.context_before + self.context.context_after
            parts.append(f"Context: {snippet}")
            parts.append(" " * len("Context: ") + self.context.column_indicator)

        if self.suggestions:
            parts.append("Suggestions:")
            parts.extend(f"  - {suggestion}" for suggestion in self.suggestions)

        return "\n".join(parts)


class LexError(JsonBonsaiError):
    """The tokenizer met input it cannot turn into a token."""


class UnexpectedCharacterError(LexError):
    """A character that cannot start any token."""

    def __init__(self, char: str, position: Optional["Position"] = None):
        self.char = char
        super().__init__(
            f"Unexpected character {char!r}",
            position,
            suggestions=ErrorSuggestionEngine.suggest_for_unexpected_character(char),
        )


class UnterminatedStringError(LexError):
    """End of input reached before the closing double quote."""

    def __init__(self, position: Optional["Position"] = None):
        super().__init__(
            "Unterminated string",
            position,
            suggestions=ErrorSuggestionEngine.suggest_for_unterminated_string(),
        )


class UnknownKeywordError(LexError):
    """A bare word other than true, false or null."""

    def __init__(self, word: str, position: Optional["Position"] = None):
        self.word = word
        super().__init__(
            f"Unknown keyword {word!r}",
            position,
            suggestions=ErrorSuggestionEngine.suggest_for_unknown_keyword(word),
        )


class ParseError(JsonBonsaiError):
    """The token sequence does not follow the JSON grammar."""

    def __init__(
        self,
        message: str,
        token: Optional["Token"] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.token = token
        super().__init__(
            message,
            token.position if token is not None else None,
            suggestions=suggestions,
        )


def _describe(token: "Token") -> str:
    return f"{token.type.value} {token.text!r}"


class UnexpectedEndOfInputError(ParseError):
    """The token sequence ended while a value or delimiter was still expected."""

    def __init__(self, expected: Optional[str] = None):
        self.expected = expected
        message = "Unexpected end of input"
        if expected:
            message += f", expected {expected}"
        super().__init__(
            message,
            suggestions=ErrorSuggestionEngine.suggest_for_end_of_input(expected),
        )


class UnexpectedTokenError(ParseError):
    """A token that cannot start a value, or a leftover token in strict mode."""

    def __init__(self, token: "Token", expected: str = "a value"):
        super().__init__(
            f"Unexpected token {_describe(token)}, expected {expected}",
            token,
            ErrorSuggestionEngine.suggest_for_unexpected_token(token.text),
        )


class ExpectedStringKeyError(ParseError):
    """An object member that does not start with a string key."""

    def __init__(self, token: "Token"):
        super().__init__(
            f"Expected string key, found {_describe(token)}",
            token,
            [
                "Object keys must be double-quoted strings",
                "Check for a stray comma or a missing key",
            ],
        )


class ExpectedColonError(ParseError):
    """An object key that is not followed by a colon."""

    def __init__(self, token: "Token"):
        super().__init__(
            f"Expected ':' after key, found {_describe(token)}",
            token,
            [
                "Object keys must be followed by a colon",
                "Check for missing colon after key",
            ],
        )


class ExpectedCommaOrCloseObjectError(ParseError):
    """A member followed by something other than ',' or '}'."""

    def __init__(self, token: "Token"):
        super().__init__(
            f"Expected ',' or '}}' in object, found {_describe(token)}",
            token,
            ErrorSuggestionEngine.suggest_for_missing_separator("object"),
        )


class ExpectedCommaOrCloseArrayError(ParseError):
    """An element followed by something other than ',' or ']'."""

    def __init__(self, token: "Token"):
        super().__init__(
            f"Expected ',' or ']' in array, found {_describe(token)}",
            token,
            ErrorSuggestionEngine.suggest_for_missing_separator("array"),
        )


class TrailingCommaError(ParseError):
    """A comma immediately followed by the closing delimiter."""

    def __init__(self, token: "Token", container: str):
        self.container = container
        super().__init__(
            f"Trailing comma in {container}",
            token,
            ErrorSuggestionEngine.suggest_for_trailing_comma(container),
        )


class InvalidNumberError(ParseError):
    """A number lexeme that does not parse as a float."""

    def __init__(self, token: "Token"):
        super().__init__(
            f"Invalid number {token.text!r}",
            token,
            ["Numbers may contain at most one decimal point"],
        )


class SecurityError(JsonBonsaiError):
    """A configured parsing limit was exceeded."""


class ErrorSuggestionEngine:
    """Generates helpful suggestions for common JSON errors."""

    @staticmethod
    def suggest_for_unexpected_character(char: str) -> list[str]:
        """Suggestions for a character that cannot start a token."""
        if char == "'":
            return ["Use double quotes for strings"]
        if char in "-+":
            return ["Signed numbers are not supported; only unsigned decimals"]
        if char == "/":
            return ["Comments are not allowed in JSON"]
        return [f"Remove or quote the character {char!r}"]

    @staticmethod
    def suggest_for_unterminated_string() -> list[str]:
        """Suggestions for a string missing its closing quote."""
        return ["Add the closing double quote"]

    @staticmethod
    def suggest_for_unknown_keyword(word: str) -> list[str]:
        """Suggestions for a bare word that is not a keyword."""
        matches = difflib.get_close_matches(word.lower(), KEYWORDS, n=1)
        if matches:
            return [f"Did you mean '{matches[0]}'?"]
        return ["Quote the word to make it a string"]

    @staticmethod
    def suggest_for_end_of_input(expected: Optional[str]) -> list[str]:
        """Suggestions for input that stops too early."""
        if expected in ("'}'", "',' or '}'"):
            return ["Add the missing '}' to close the object"]
        if expected in ("']'", "',' or ']'"):
            return ["Add the missing ']' to close the array"]
        return ["The input is incomplete"]

    @staticmethod
    def suggest_for_unexpected_token(text: str) -> list[str]:
        """Suggestions for a token in value position that is not a value."""
        if text in ",]}":
            return ["Check for a missing value or an extra delimiter"]
        return ["Values must be objects, arrays, strings, numbers, true, false or null"]

    @staticmethod
    def suggest_for_missing_separator(container: str) -> list[str]:
        """Suggestions for two members or elements without a comma between them."""
        closer = "}" if container == "object" else "]"
        return [f"Separate {container} entries with ',' or close with '{closer}'"]

    @staticmethod
    def suggest_for_trailing_comma(container: str) -> list[str]:
        """Suggestions for a comma right before the closing delimiter."""
        closer = "}" if container == "object" else "]"
        return [f"Remove the comma before '{closer}'"]


class ErrorReporter:
    """Attaches source context to errors raised while parsing a known text."""

    def __init__(self, text: str, max_context: int = 50):
        self.text = text
        self.max_context = max_context

    def position_at(self, offset: int) -> "Position":
        """Compute the line/column position of a character offset."""
        # Import here to avoid circular imports
        from ..core.tokenizer import Position  # pylint: disable=import-outside-toplevel

        offset = max(0, min(offset, len(self.text)))
        line = self.text.count("\n", 0, offset) + 1
        line_start = self.text.rfind("\n", 0, offset) + 1
        return Position(line, offset - line_start + 1, offset)

    def create_context(self, position: "Position") -> ErrorContext:
        """Build the snippet around an error position."""
        offset = position.offset
        line_start = self.text.rfind("\n", 0, offset) + 1
        line_end = self.text.find("\n", offset)
        if line_end == -1:
            line_end = len(self.text)

        half = self.max_context // 2
        context_before = self.text[max(line_start, offset - half) : offset]
        context_after = self.text[offset : min(line_end, offset + half)]
        error_char = self.text[offset] if offset < len(self.text) else ""

        return ErrorContext(
            text=self.text,
            position=position,
            context_before=context_before,
            context_after=context_after,
            error_char=error_char,
            line_text=self.text[line_start:line_end],
            column_indicator=" " * len(context_before) + "^",
        )

    def attach_context(self, error: JsonBonsaiError) -> JsonBonsaiError:
        """Fill in position and context on an error raised for this text."""
        if error.position is None and isinstance(error, UnexpectedEndOfInputError):
            error.position = self.position_at(len(self.text))
        if error.position is not None and error.context is None:
            error.context = self.create_context(error.position)
        return error
