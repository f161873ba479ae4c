"""Code point trie implementing the DictionaryMatcher protocol."""

from dataclasses import dataclass, field
from typing import Dict, Iterable

from ..core.cursor import TextCursor, DONE
from ..core.types import DictionaryMatch

# Most word lengths a single query reports
POSSIBLE_WORD_LIST_MAX = 20


@dataclass
class _TrieNode:
    children: Dict[int, "_TrieNode"] = field(default_factory=dict)
    is_word: bool = False


class TrieDictionaryMatcher:
    """
    In-memory dictionary keyed by code point.

    Built once from a word list and never modified afterwards, so one
    instance can be shared by segmentations running on different threads.
    """

    def __init__(self, words: Iterable[str] = ()):
        self._root = _TrieNode()
        self._word_count = 0
        for word in words:
            self._insert(word)

    @property
    def word_count(self) -> int:
        return self._word_count

    def _insert(self, word: str) -> None:
        if not word:
            return
        node = self._root
        for ch in word:
            node = node.children.setdefault(ord(ch), _TrieNode())
        if not node.is_word:
            node.is_word = True
            self._word_count += 1

    def matches(self, cursor: TextCursor, max_length: int,
                limit: int = POSSIBLE_WORD_LIST_MAX) -> DictionaryMatch:
        """
        Walk the trie from the cursor position.

        Args:
            cursor: Cursor at the first code point of the candidate word
            max_length: Maximum number of code points to consume
            limit: Maximum number of word lengths to report

        Returns:
            DictionaryMatch: Ascending word lengths, and the number of code points
            consumed along a valid dictionary prefix. The cursor is left after
            that prefix.

        The first mismatching code point is not part of the prefix, so a
        prefix_combine threshold is one code point stricter than in matchers
        that count it.
        """
        node = self._root
        lengths = []
        prefix = 0

        while prefix < max_length:
            cp = cursor.current()
            if cp == DONE:
                break
            node = node.children.get(cp)
            if node is None:
                break
            prefix += 1
            cursor.next()
            if node.is_word and len(lengths) < limit:
                lengths.append(prefix)
            if not node.children:
                break

        return DictionaryMatch(lengths=tuple(lengths), prefix=prefix)

    def __contains__(self, word: str) -> bool:
        node = self._root
        for ch in word:
            node = node.children.get(ord(ch))
            if node is None:
                return False
        return node.is_word and bool(word)

    def __len__(self) -> int:
        return self._word_count
