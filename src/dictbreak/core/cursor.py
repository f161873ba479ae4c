"""Position-addressable cursor over the code points of a text."""

import numpy as np

DONE = -1


class TextCursor:
    """
    Bidirectional cursor over a text, addressed by code point offset.

    The cursor owns a uint32 buffer of the text's code points so that
    character classification can also be done on whole slices at once.
    """

    DONE = DONE

    def __init__(self, text: str, index: int = 0):
        self.text = text
        self.codepoints = np.frombuffer(text.encode("utf-32-le", "surrogatepass"), dtype="<u4")
        self._index = 0
        self.set_index(index)

    @property
    def index(self) -> int:
        """Current absolute offset."""
        return self._index

    @property
    def end_index(self) -> int:
        """Offset one past the last code point."""
        return len(self.text)

    def set_index(self, index: int) -> int:
        """Move to an absolute offset and return the code point there."""
        if index < 0 or index > len(self.text):
            raise IndexError(f"Cursor index {index} outside text of length {len(self.text)}")
        self._index = index
        return self.current()

    def current(self) -> int:
        """Code point at the cursor, or DONE at the end of the text."""
        if self._index >= len(self.text):
            return DONE
        return ord(self.text[self._index])

    def next(self) -> int:
        """Advance one code point and return the new current code point."""
        if self._index < len(self.text):
            self._index += 1
        return self.current()

    def __len__(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        return f"TextCursor(index={self._index}, length={len(self.text)})"
