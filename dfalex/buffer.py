"""Ring buffer and the character filter that decides what enters it."""

from __future__ import annotations

from typing import Any

DEFAULT_SIZE = 5


class BufferFullError(Exception):
    """Raised when pushing onto a full buffer."""


class BufferEmptyError(Exception):
    """Raised when popping from an empty buffer."""


class CircularBuffer:
    """Fixed-size ring buffer that keeps one slot free to tell full from empty."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 2:
            raise ValueError("a circular buffer needs at least two slots")
        self._slots: list[Any] = [None] * size
        self._head = 0
        self._tail = 0

    @property
    def capacity(self) -> int:
        """How many values the buffer holds when full."""
        return len(self._slots) - 1

    def __len__(self) -> int:
        return (self._tail - self._head) % len(self._slots)

    def is_empty(self) -> bool:
        return self._head == self._tail

    def is_full(self) -> bool:
        return (self._tail + 1) % len(self._slots) == self._head

    def push(self, value: Any) -> None:
        """Append a value at the tail."""
        if self.is_full():
            raise BufferFullError("buffer is full")
        self._slots[self._tail] = value
        self._tail = (self._tail + 1) % len(self._slots)

    def pop(self) -> Any:
        """Remove and return the value at the head."""
        if self.is_empty():
            raise BufferEmptyError("buffer is empty")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % len(self._slots)
        return value

    def drain(self) -> list[Any]:
        """Remove every value, returning them oldest first."""
        values = []
        while not self.is_empty():
            values.append(self.pop())
        return values


class SourceFilter:
    """Drops comments, quotes, newlines and surplus spaces from a character stream.

    ``#`` starts a comment that runs to the end of the line; three double
    quotes in a row open or close a block comment.  Double quotes themselves
    are always dropped.  Newlines are always dropped.  Spaces are all dropped
    unless ``keep_single_space`` is set, in which case only the first of a
    run of spaces is kept.
    """

    def __init__(self, keep_single_space: bool = False) -> None:
        self.keep_single_space = keep_single_space
        self._line_comment = False
        self._block_comment = False
        self._quotes = 0
        self._spaces = 0

    def feed(self, char: str) -> str | None:
        """Return ``char`` if it passes the filter, otherwise ``None``."""
        if char == "#":
            self._line_comment = True

        if char == '"':
            self._quotes += 1
            if self._quotes == 3:
                self._block_comment = not self._block_comment
                self._quotes = 0
            return None
        self._quotes = 0

        if self._block_comment:
            return None

        if self._line_comment:
            if char == "\n":
                self._line_comment = False
            return None

        if char == "\n":
            return None

        if not self.keep_single_space:
            return None if char == " " else char

        self._spaces = self._spaces + 1 if char == " " else 0
        return None if self._spaces > 1 else char