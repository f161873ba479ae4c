"""Ordered collector for word boundary offsets."""

from typing import Iterator, List


class BreakCollector:
    """Stack of absolute break offsets, pushed in increasing order."""

    def __init__(self):
        self._breaks: List[int] = []

    def push(self, offset: int) -> None:
        self._breaks.append(offset)

    def peek(self) -> int:
        """Last pushed offset. Raises IndexError when empty."""
        if not self._breaks:
            raise IndexError("peek from an empty BreakCollector")
        return self._breaks[-1]

    def pop(self) -> int:
        """Remove and return the last pushed offset. Raises IndexError when empty."""
        if not self._breaks:
            raise IndexError("pop from an empty BreakCollector")
        return self._breaks.pop()

    def to_list(self) -> List[int]:
        return list(self._breaks)

    def __len__(self) -> int:
        return len(self._breaks)

    def __iter__(self) -> Iterator[int]:
        return iter(self._breaks)

    def __repr__(self) -> str:
        return f"BreakCollector({self._breaks!r})"
