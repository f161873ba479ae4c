"""Test candidate slots and the lookahead ring."""

import pytest

from dictbreak.core.cursor import TextCursor
from dictbreak.dictionary.trie import TrieDictionaryMatcher
from dictbreak.runtime.candidates import CandidateRing, CandidateSlot


@pytest.fixture
def dictionary():
    return TrieDictionaryMatcher(["ab", "abc", "abcd", "x"])


class TestCandidateSlot:
    """Test candidate queries and selection."""

    def test_candidates_park_cursor_at_longest(self, dictionary):
        cursor = TextCursor("abcdx")
        slot = CandidateSlot()

        assert slot.candidates(cursor, dictionary, 5) == 3
        assert slot.offset == 0
        assert slot.lengths == (2, 3, 4)
        assert slot.prefix == 4
        assert cursor.index == 4

    def test_range_end_truncates(self, dictionary):
        cursor = TextCursor("abcdx")
        slot = CandidateSlot()

        assert slot.candidates(cursor, dictionary, 3) == 2
        assert slot.lengths == (2, 3)
        assert cursor.index == 3

    def test_no_candidates(self, dictionary):
        cursor = TextCursor("zab")
        slot = CandidateSlot()

        assert slot.candidates(cursor, dictionary, 3) == 0
        assert cursor.index == 0
        assert slot.accept_marked(cursor) == 0
        assert cursor.index == 0

    def test_back_up_walks_shorter(self, dictionary):
        cursor = TextCursor("abcdx")
        slot = CandidateSlot()
        slot.candidates(cursor, dictionary, 5)

        assert slot.back_up(cursor)
        assert cursor.index == 3
        assert slot.back_up(cursor)
        assert cursor.index == 2
        assert not slot.back_up(cursor)
        assert cursor.index == 2

    def test_accept_defaults_to_longest(self, dictionary):
        cursor = TextCursor("abcdx")
        slot = CandidateSlot()
        slot.candidates(cursor, dictionary, 5)
        slot.back_up(cursor)

        assert slot.accept_marked(cursor) == 4
        assert cursor.index == 4

    def test_accept_marked(self, dictionary):
        cursor = TextCursor("abcdx")
        slot = CandidateSlot()
        slot.candidates(cursor, dictionary, 5)
        slot.back_up(cursor)
        slot.mark_current()
        slot.back_up(cursor)

        assert slot.accept_marked(cursor) == 3
        assert cursor.index == 3

    def test_requery_clears_mark(self, dictionary):
        cursor = TextCursor("abcdx")
        slot = CandidateSlot()
        slot.candidates(cursor, dictionary, 5)
        slot.back_up(cursor)
        slot.mark_current()

        cursor.set_index(0)
        slot.candidates(cursor, dictionary, 5)

        assert slot.mark is None
        assert slot.accept_marked(cursor) == 4

    def test_longest_prefix(self, dictionary):
        cursor = TextCursor("abq")
        slot = CandidateSlot()

        assert slot.candidates(cursor, dictionary, 3) == 1
        assert slot.longest_prefix() == 2

    def test_query_from_offset(self, dictionary):
        cursor = TextCursor("xabc", 1)
        slot = CandidateSlot()

        assert slot.candidates(cursor, dictionary, 4) == 2
        assert slot.offset == 1
        assert cursor.index == 4


class TestCandidateRing:
    """Test ring rotation."""

    def test_rotation(self):
        ring = CandidateRing(3)
        first, second, third = ring[0], ring[1], ring[2]

        assert ring[3] is first
        ring.rotate()

        assert ring[0] is second
        assert ring[1] is third
        assert ring[2] is first

    def test_slots_are_distinct(self):
        ring = CandidateRing()

        assert len(ring) == 3
        assert len({id(ring[i]) for i in range(3)}) == 3

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            CandidateRing(0)
