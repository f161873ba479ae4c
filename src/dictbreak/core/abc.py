"""Protocol interfaces for dependency injection from the host application."""

from typing import Protocol, List, Any, TYPE_CHECKING

from .types import DictionaryMatch

if TYPE_CHECKING:
    from .breaks import BreakCollector
    from .charset import CharacterSet
    from .cursor import TextCursor


class DictionaryMatcher(Protocol):
    """Injected dictionary lookup. Implement with a trie, a hash set, a DAWG, etc."""

    def matches(self, cursor: "TextCursor", max_length: int, limit: int = 20) -> DictionaryMatch:
        """
        Find the dictionary words that start at the cursor position.

        Args:
            cursor: Text cursor positioned at the first code point of the candidate word
            max_length: Maximum word length in code points (words running past it are ignored)
            limit: Maximum number of word lengths to report

        Returns:
            DictionaryMatch: Ascending word lengths and the longest shared prefix.
            The cursor may be left anywhere; callers reposition it.
        """
        ...


class BreakEngine(Protocol):
    """A dictionary break engine for a single script."""

    script: str
    characters: "CharacterSet"

    def handles(self, c: int) -> bool:
        """Whether the code point belongs to the script this engine divides."""
        ...

    def find_breaks(self, cursor: "TextCursor", start_pos: int, end_pos: int,
                    found_breaks: "BreakCollector") -> int:
        """Divide the run of handled characters starting at start_pos; return words found."""
        ...

    def divide_range(self, cursor: "TextCursor", range_start: int, range_end: int,
                     found_breaks: "BreakCollector") -> int:
        """Divide [range_start, range_end) into words; return words found."""
        ...


class Segmenter(Protocol):
    """Text segmenter surface used by host applications."""

    def segment(self, text: str) -> List[str]:
        """
        Segment text into word-sized units.

        Args:
            text: Input text to segment

        Returns:
            List[str]: List of text segments
        """
        ...


class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...


class Meter(Protocol):
    """Optional metrics collection interface."""

    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...

    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
