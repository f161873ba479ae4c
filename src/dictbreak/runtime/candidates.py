"""Candidate word slots used by the bounded lookahead search."""

from typing import Optional, Tuple

from ..core.abc import DictionaryMatcher
from ..core.cursor import TextCursor


class CandidateSlot:
    """
    Dictionary words that start at one text offset.

    Candidates are tried from longest to shortest. The cursor is parked at
    the end of the candidate currently selected so that the next slot can be
    queried from there.
    """

    def __init__(self):
        self.offset = -1
        self.lengths: Tuple[int, ...] = ()
        self.prefix = 0
        self.current = -1
        self.mark: Optional[int] = None

    def candidates(self, cursor: TextCursor, dictionary: DictionaryMatcher, range_end: int) -> int:
        """
        Query the dictionary at the cursor position.

        Words that would run past range_end are not candidates. On return the
        cursor is at the end of the longest candidate, or back at the query
        offset when there is none.

        Returns:
            int: Number of candidates found
        """
        start = cursor.index
        match = dictionary.matches(cursor, range_end - start)

        self.offset = start
        self.lengths = tuple(match.lengths)
        self.prefix = match.prefix
        self.current = len(self.lengths) - 1
        self.mark = None

        if self.lengths:
            cursor.set_index(start + self.lengths[-1])
        else:
            cursor.set_index(start)
        return len(self.lengths)

    def mark_current(self) -> None:
        """Mark the selected candidate as the tentative answer."""
        self.mark = self.current

    def accept_marked(self, cursor: TextCursor) -> int:
        """
        Commit the marked candidate, or the longest one if none was marked.

        Returns:
            int: Length of the accepted word; the cursor is left at its end
        """
        if not self.lengths:
            cursor.set_index(self.offset)
            return 0
        chosen = self.mark if self.mark is not None else len(self.lengths) - 1
        cursor.set_index(self.offset + self.lengths[chosen])
        return self.lengths[chosen]

    def back_up(self, cursor: TextCursor) -> bool:
        """
        Select the next shorter candidate.

        Returns:
            bool: False when no shorter candidate remains; otherwise True with
            the cursor moved to the end of the newly selected candidate
        """
        if self.current > 0:
            self.current -= 1
            cursor.set_index(self.offset + self.lengths[self.current])
            return True
        return False

    def longest_prefix(self) -> int:
        """Code points of the text shared with some dictionary word at this offset."""
        return self.prefix


class CandidateRing:
    """
    Fixed ring of candidate slots with an explicit rotation index.

    ring[0] holds the word in progress, ring[1] and ring[2] the words that
    may follow it. rotate() is called once per word found.
    """

    def __init__(self, size: int = 3):
        if size < 1:
            raise ValueError("CandidateRing needs at least one slot")
        self._slots = tuple(CandidateSlot() for _ in range(size))
        self._head = 0

    def __getitem__(self, depth: int) -> CandidateSlot:
        return self._slots[(self._head + depth) % len(self._slots)]

    def rotate(self) -> None:
        self._head = (self._head + 1) % len(self._slots)

    def __len__(self) -> int:
        return len(self._slots)
