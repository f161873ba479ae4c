"""Dictionary break engine for Burmese (Myanmar script)."""

import unicodedata
from typing import Optional

from ..config.schema import SegmenterConfig, Thresholds
from ..core.abc import DictionaryMatcher, Logger, Meter
from ..core.breaks import BreakCollector
from ..core.charset import CharacterSet
from ..core.cursor import TextCursor
from ..dictionary.loader import load_dictionary_for
from .candidates import CandidateRing, CandidateSlot
from .engine import DictionaryBreakEngine

# How many words in a row are "good enough"
BURMESE_LOOKAHEAD = 3

# Script=Myanmar (Myanmar, Myanmar Extended-B, Myanmar Extended-A blocks)
MYANMAR_SCRIPT_SET = CharacterSet.from_ranges([
    (0x1000, 0x109F),
    (0xA9E0, 0xA9FE),
    (0xAA60, 0xAA7F),
])

# Line_Break=SA within the Myanmar blocks; digits (NU) and punctuation (BA, AL) are excluded
MYANMAR_LINE_BREAK_SA = CharacterSet.from_ranges([
    (0x1000, 0x103F),
    (0x1050, 0x108F),
    (0x109A, 0x109F),
    (0xA9E0, 0xA9EF),
    (0xA9FA, 0xA9FE),
    (0xAA60, 0xAA7F),
])

# Basic consonants and independent vowels
BEGIN_WORD_SET = CharacterSet.from_ranges([(0x1000, 0x102A)])

END_WORD_SET = MYANMAR_SCRIPT_SET.intersection(MYANMAR_LINE_BREAK_SA)

# Combining marks never start a word; U+0020 is treated the same way
MARK_SET = CharacterSet.from_codepoints(
    [cp for cp in END_WORD_SET.codepoints() if unicodedata.category(chr(cp)).startswith("M")]
    + [0x0020]
)


class BurmeseBreakEngine(DictionaryBreakEngine):
    """
    Burmese word segmentation by dictionary lookup with bounded lookahead.

    At each position the longest dictionary words are tried first; when more
    than one fits, up to two following words are looked up to pick the
    candidate that starts the longest chain. Text the dictionary does not
    know is absorbed by a resynchronization scan that stops at the next
    plausible word start.
    """

    script = "Mymr"

    def __init__(self, dictionary: Optional[DictionaryMatcher] = None, *,
                 config: Optional[SegmenterConfig] = None,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize the engine.

        Args:
            dictionary: Dictionary matcher; loaded from config when None
            config: Validated configuration (thresholds and dictionary sources)
            logger: Optional structured logger
            meter: Optional metrics collector

        Raises:
            DictionaryLoadError: If no dictionary was given and loading it failed
        """
        super().__init__(characters=END_WORD_SET, logger=logger, meter=meter)

        thresholds = config.thresholds if config else Thresholds()
        self.root_combine_threshold = thresholds.root_combine
        self.prefix_combine_threshold = thresholds.prefix_combine
        self.min_word = thresholds.min_word

        self.begin_word_set = BEGIN_WORD_SET
        self.end_word_set = END_WORD_SET
        self.mark_set = MARK_SET

        if dictionary is None:
            dictionary = load_dictionary_for(self.script, config, logger=logger)
        self.dictionary = dictionary

    def handles(self, c: int) -> bool:
        return MYANMAR_SCRIPT_SET.contains(c)

    def divide_range(self, cursor: TextCursor, range_start: int, range_end: int,
                     found_breaks: BreakCollector) -> int:
        """
        Divide [range_start, range_end) into words.

        Breaks are pushed in increasing order. No break is pushed at
        range_end itself, nor in front of a combining mark.

        Args:
            cursor: Cursor over the whole text; left at range_end
            range_start: First offset of the range
            range_end: Offset one past the range
            found_breaks: Collector receiving absolute break offsets

        Returns:
            int: Number of words found
        """
        if range_end - range_start < self.min_word:
            cursor.set_index(range_end)
            return 0  # Not enough characters for a word

        words_found = 0
        pushed = 0
        resyncs = 0
        ring = CandidateRing(BURMESE_LOOKAHEAD)

        cursor.set_index(range_start)
        while cursor.index < range_end:
            current = cursor.index
            word_length = 0

            candidates = ring[0].candidates(cursor, self.dictionary, range_end)

            if candidates == 1:
                word_length = ring[0].accept_marked(cursor)
                words_found += 1
                ring.rotate()
            elif candidates > 1:
                self._select_candidate(cursor, ring, range_end)
                word_length = ring[0].accept_marked(cursor)
                words_found += 1
                ring.rotate()

            # The cursor is at the end of the word just found. A short word
            # followed by a non-word absorbs the non-word up to the next
            # plausible word start.
            if cursor.index < range_end and word_length < self.root_combine_threshold:
                if (ring[0].candidates(cursor, self.dictionary, range_end) <= 0 and
                        (word_length == 0 or
                         ring[0].longest_prefix() < self.prefix_combine_threshold)):
                    chars = self._resynchronize(cursor, ring[1], current + word_length, range_end)
                    resyncs += 1

                    if word_length <= 0:
                        words_found += 1
                        ring.rotate()

                    word_length += chars
                else:
                    cursor.set_index(current + word_length)

            # Never stop before a combining mark
            while cursor.index < range_end and self.mark_set.contains(cursor.current()):
                cursor.next()
                word_length += 1

            if word_length > 0:
                found_breaks.push(current + word_length)
                pushed += 1

        # The boundary at range_end belongs to the caller
        if pushed and found_breaks.peek() >= range_end:
            found_breaks.pop()
            words_found -= 1

        if self.meter:
            self.meter.inc("dictbreak.words_found", words_found, script=self.script)
            self.meter.inc("dictbreak.resync_scans", resyncs, script=self.script)
            self.meter.observe("dictbreak.range_length", range_end - range_start, script=self.script)

        return words_found

    def _select_candidate(self, cursor: TextCursor, ring: CandidateRing, range_end: int) -> None:
        """
        Mark the candidate of ring[0] that starts the longest word chain.

        Candidates are tried longest first. The first one followed by two more
        dictionary words wins outright; otherwise the last one seen to be
        followed by any dictionary word stays marked. With no chain at all,
        nothing is marked and the longest candidate is accepted.
        """
        first, second, third = ring[0], ring[1], ring[2]

        if cursor.index >= range_end:
            return

        while True:
            if second.candidates(cursor, self.dictionary, range_end) > 0:
                # Followed by another dictionary word
                first.mark_current()

                if cursor.index >= range_end:
                    return

                while True:
                    if third.candidates(cursor, self.dictionary, range_end) > 0:
                        first.mark_current()
                        return
                    if not second.back_up(cursor):
                        break

            if not first.back_up(cursor):
                return

    def _resynchronize(self, cursor: TextCursor, probe: CandidateSlot,
                       start: int, range_end: int) -> int:
        """
        Scan forward from start for a plausible word boundary.

        A position qualifies when the previous code point can end a word, the
        next can begin one, and a dictionary word starts there. Without such a
        position the scan runs to range_end.

        Returns:
            int: Number of code points passed over; the cursor is left after them
        """
        cursor.set_index(start)
        remaining = range_end - start
        pc = cursor.current()
        chars = 0

        while True:
            uc = cursor.next()
            chars += 1
            remaining -= 1
            if remaining <= 0:
                break
            if self.end_word_set.contains(pc) and self.begin_word_set.contains(uc):
                # Maybe. See if it's in the dictionary.
                found = probe.candidates(cursor, self.dictionary, range_end)
                cursor.set_index(start + chars)
                if found > 0:
                    break
            pc = uc

        return chars
