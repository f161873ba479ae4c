"""Immutable code point sets stored as inversion lists."""

from typing import Iterable, Iterator, List, Tuple, Union

import numpy as np


class CharacterSet:
    """
    Frozen set of code points.

    Stored as a sorted array of range boundaries: even entries open a range,
    odd entries close it (exclusive). A code point is a member when the number
    of boundaries at or below it is odd.
    """

    def __init__(self, bounds: Union[np.ndarray, List[int]]):
        bounds = np.array(bounds, dtype=np.int64)
        if bounds.ndim != 1 or bounds.size % 2:
            raise ValueError("Inversion list must have an even number of boundaries")
        if bounds.size and np.any(np.diff(bounds) <= 0):
            raise ValueError("Inversion list boundaries must be strictly increasing")
        bounds.flags.writeable = False
        self._bounds = bounds

    @classmethod
    def from_ranges(cls, ranges: Iterable[Tuple[int, int]]) -> "CharacterSet":
        """
        Build a set from inclusive (lo, hi) code point ranges.

        Overlapping and adjacent ranges are merged.
        """
        merged: List[List[int]] = []
        for lo, hi in sorted(ranges):
            if lo > hi:
                raise ValueError(f"Empty range: {lo:#x}..{hi:#x}")
            if merged and lo <= merged[-1][1] + 1:
                merged[-1][1] = max(merged[-1][1], hi)
            else:
                merged.append([lo, hi])

        bounds: List[int] = []
        for lo, hi in merged:
            bounds.extend((lo, hi + 1))
        return cls(bounds)

    @classmethod
    def from_codepoints(cls, codepoints: Iterable[int]) -> "CharacterSet":
        """Build a set from individual code points."""
        return cls.from_ranges((cp, cp) for cp in codepoints)

    def contains(self, cp: int) -> bool:
        """Membership test for a single code point."""
        return bool(np.searchsorted(self._bounds, cp, side="right") & 1)

    def __contains__(self, item: Union[int, str]) -> bool:
        if isinstance(item, str):
            if len(item) != 1:
                return False
            item = ord(item)
        return self.contains(item)

    def mask(self, codepoints: np.ndarray) -> np.ndarray:
        """
        Vectorized membership test.

        Args:
            codepoints: Array of code points of any integer dtype

        Returns:
            np.ndarray: Boolean array of the same shape
        """
        codepoints = np.asarray(codepoints, dtype=np.int64)
        return (np.searchsorted(self._bounds, codepoints, side="right") & 1).astype(bool)

    def ranges(self) -> List[Tuple[int, int]]:
        """Inclusive (lo, hi) ranges in ascending order."""
        return [(int(lo), int(hi) - 1) for lo, hi in self._bounds.reshape(-1, 2)]

    def codepoints(self) -> Iterator[int]:
        for lo, hi in self.ranges():
            yield from range(lo, hi + 1)

    def union(self, other: "CharacterSet") -> "CharacterSet":
        return CharacterSet.from_ranges(self.ranges() + other.ranges())

    def intersection(self, other: "CharacterSet") -> "CharacterSet":
        result: List[Tuple[int, int]] = []
        for lo, hi in self.ranges():
            for olo, ohi in other.ranges():
                if olo > hi:
                    break
                start, end = max(lo, olo), min(hi, ohi)
                if start <= end:
                    result.append((start, end))
        return CharacterSet.from_ranges(result)

    def __len__(self) -> int:
        return int(np.sum(self._bounds[1::2] - self._bounds[0::2]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharacterSet):
            return NotImplemented
        return np.array_equal(self._bounds, other._bounds)

    def __hash__(self) -> int:
        return hash(self._bounds.tobytes())

    def __repr__(self) -> str:
        spans = ", ".join(f"{lo:04X}..{hi:04X}" if lo != hi else f"{lo:04X}"
                          for lo, hi in self.ranges()[:4])
        more = ", ..." if len(self._bounds) > 8 else ""
        return f"CharacterSet([{spans}{more}])"
