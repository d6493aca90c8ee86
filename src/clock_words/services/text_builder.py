"""Bounded text builder - string accumulator with a hard length limit."""

from typing import List


class BoundedTextBuilder:
    """
    Collects text pieces without ever exceeding a fixed size.

    capacity follows C buffer conventions: it includes the slot for the
    terminator, so at most capacity - 1 characters are held. A piece that
    only partly fits is cut off at the limit.
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._max_chars = max(capacity - 1, 0)
        self._parts: List[str] = []
        self._length = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def remaining(self) -> int:
        """Characters that can still be appended."""
        return self._max_chars - self._length

    @property
    def is_full(self) -> bool:
        return self.remaining <= 0

    @property
    def text(self) -> str:
        return "".join(self._parts)

    def append(self, piece: str) -> int:
        """Append as much of piece as fits. Returns the number of characters written."""
        if not piece or self.is_full:
            return 0
        chunk = piece[: self.remaining]
        self._parts.append(chunk)
        self._length += len(chunk)
        return len(chunk)

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self.text
