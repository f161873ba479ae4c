"""Base class for dictionary break engines."""

from typing import Optional

from ..core.abc import Logger, Meter
from ..core.breaks import BreakCollector
from ..core.charset import CharacterSet
from ..core.cursor import TextCursor


class DictionaryBreakEngine:
    """
    Divides runs of one script into words with the help of a dictionary.

    Engines are identified by their script tag: any two engines for the same
    script are interchangeable and compare equal.
    """

    script: str = ""

    def __init__(self, *, characters: CharacterSet,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize the engine.

        Args:
            characters: Code points that may appear inside a dictionary run
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.characters = characters
        self.log = logger
        self.meter = meter

    def handles(self, c: int) -> bool:
        """Whether the code point belongs to the script this engine divides."""
        raise NotImplementedError

    def find_breaks(self, cursor: TextCursor, start_pos: int, end_pos: int,
                    found_breaks: BreakCollector) -> int:
        """
        Divide the run of engine characters that starts at start_pos.

        The run starts at start_pos wherever the cursor is, and extends while
        code points belong to self.characters, up to end_pos. On return the
        cursor is at the end of the run.

        Returns:
            int: Number of words found in the run
        """
        window = cursor.codepoints[start_pos:end_pos]
        outside = (~self.characters.mask(window)).nonzero()[0]
        range_end = start_pos + (int(outside[0]) if outside.size else window.size)

        words = self.divide_range(cursor, start_pos, range_end, found_breaks)
        cursor.set_index(range_end)
        return words

    def divide_range(self, cursor: TextCursor, range_start: int, range_end: int,
                     found_breaks: BreakCollector) -> int:
        """Divide [range_start, range_end) into words; return the number found."""
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DictionaryBreakEngine):
            return NotImplemented
        return self.script == other.script

    def __hash__(self) -> int:
        return hash(self.script)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(script={self.script!r})"
