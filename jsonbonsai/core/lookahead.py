"""
One-item lookahead over any iterable.

Both the lexer (over characters) and the parser (over tokens) read their
input through this cursor, so neither keeps an integer index into its source.
"""

from collections.abc import Iterable, Iterator
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class LookAhead(Generic[T]):
    """Iterator with a single slot of pushback for peeking."""

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iter: Iterator[T] = iter(iterable)
        self._buf: list[T] = []
        self.consumed = 0

    def __iter__(self) -> "LookAhead[T]":
        return self

    def __next__(self) -> T:
        if self._buf:
            item = self._buf.pop()
        else:
            item = next(self._iter)
        self.consumed += 1
        return item

    def peek(self) -> Optional[T]:
        """Return the next item without consuming it, or None at the end."""
        if not self._buf:
            try:
                self._buf.append(next(self._iter))
            except StopIteration:
                return None
        return self._buf[-1]

    def at_end(self) -> bool:
        """True once every item has been consumed."""
        return self.peek() is None
