"""Word segmenter built on a dictionary break engine."""

from typing import List, Optional

from ..core.abc import BreakEngine, Logger
from ..core.breaks import BreakCollector
from ..core.cursor import TextCursor
from ..core.types import SegmentationResult


class WordSegmenter:
    """
    Splits text into words using one dictionary break engine.

    Runs of characters the engine divides are split into words. Everything
    else (spaces, punctuation, digits, other scripts) is passed through
    unchanged as single segments.
    """

    def __init__(self, engine: BreakEngine, keep_whitespace: bool = True,
                 logger: Optional[Logger] = None):
        """
        Initialize segmenter.

        Args:
            engine: Break engine for the script being segmented
            keep_whitespace: Keep pure-whitespace segments in the output
            logger: Optional structured logger
        """
        self.engine = engine
        self.keep_whitespace = keep_whitespace
        self.log = logger

    def boundaries(self, text: str) -> SegmentationResult:
        """
        Find segment boundaries in text.

        Args:
            text: Input text

        Returns:
            SegmentationResult: Segments, interior boundary offsets and word count
        """
        cursor = TextCursor(text)
        characters = self.engine.characters
        inside = characters.mask(cursor.codepoints)
        end = len(text)

        bounds = [0]
        words_found = 0
        pos = 0
        while pos < end:
            if inside[pos]:
                breaks = BreakCollector()
                cursor.set_index(pos)
                words_found += self.engine.find_breaks(cursor, pos, end, breaks)
                bounds.extend(breaks)
                pos = cursor.index
            else:
                while pos < end and not inside[pos]:
                    pos += 1
            bounds.append(pos)

        segments = [text[a:b] for a, b in zip(bounds, bounds[1:])]
        if not self.keep_whitespace:
            segments = [s for s in segments if s.strip()]

        if self.log:
            self.log.info("text_segmented", script=self.engine.script, text_length=end,
                          segments=len(segments), words_found=words_found)

        return SegmentationResult(
            text=text,
            segments=segments,
            boundaries=bounds[1:-1],
            words_found=words_found,
        )

    def segment(self, text: str) -> List[str]:
        """
        Segment text into words.

        Args:
            text: Input text to segment

        Returns:
            List[str]: Segments in text order
        """
        if not text:
            return []
        return self.boundaries(text).segments
