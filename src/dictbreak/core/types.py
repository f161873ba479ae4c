"""Data types and result structures for dictbreak operations."""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class DictionaryMatch:
    """Result of one dictionary query at a text position."""
    lengths: Tuple[int, ...] = ()   # word lengths in code points, ascending
    prefix: int = 0                 # longest run of code points shared with any dictionary word

    @property
    def count(self) -> int:
        """Number of dictionary words found."""
        return len(self.lengths)


@dataclass
class SegmentationResult:
    """Words and boundaries produced for one text."""
    text: str
    segments: List[str]
    boundaries: List[int] = field(default_factory=list)  # absolute offsets between segments
    words_found: int = 0                                  # words reported by the engine

    @property
    def segment_count(self) -> int:
        """Number of segments, including passed-through spans."""
        return len(self.segments)
