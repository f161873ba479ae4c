"""Dictionary word list loading."""

from pathlib import Path
from typing import List, Optional, Union

from ..config.schema import SegmenterConfig
from ..core.abc import Logger
from .trie import TrieDictionaryMatcher


class DictionaryLoadError(Exception):
    """Exception raised when a dictionary is missing or malformed."""
    pass


def load_word_list(path: Union[str, Path], comment_prefix: str = "#") -> List[str]:
    """
    Read a word list file.

    One word per line, UTF-8. Blank lines and lines starting with the comment
    prefix are skipped. Anything after a tab (a frequency or value column) is
    ignored.

    Args:
        path: Word list file
        comment_prefix: Marker for comment lines

    Returns:
        List[str]: Words in file order

    Raises:
        DictionaryLoadError: If the file is missing, unreadable or contains no words
    """
    path = Path(path)

    if not path.exists():
        raise DictionaryLoadError(f"Dictionary file not found: {path}")

    words = []
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith(comment_prefix):
                    continue
                word = line.split("\t", 1)[0].strip()
                if word:
                    words.append(word)
    except UnicodeDecodeError as e:
        raise DictionaryLoadError(f"Dictionary file {path} is not valid UTF-8: {e}")
    except OSError as e:
        raise DictionaryLoadError(f"Cannot read dictionary file {path}: {e}")

    if not words:
        raise DictionaryLoadError(f"Dictionary file {path} contains no words")

    return words


def load_dictionary(path: Union[str, Path], comment_prefix: str = "#",
                    logger: Optional[Logger] = None) -> TrieDictionaryMatcher:
    """Load a word list file into a trie matcher."""
    words = load_word_list(path, comment_prefix=comment_prefix)
    matcher = TrieDictionaryMatcher(words)
    if logger:
        logger.info("dictionary_loaded", path=str(path), words=matcher.word_count)
    return matcher


def load_dictionary_for(script_tag: str, config: Optional[SegmenterConfig],
                        logger: Optional[Logger] = None) -> TrieDictionaryMatcher:
    """
    Load the dictionary configured for a script.

    Args:
        script_tag: ISO 15924 script tag, e.g. 'Mymr'
        config: Validated configuration listing dictionary sources
        logger: Optional structured logger

    Returns:
        TrieDictionaryMatcher: Dictionary for the script

    Raises:
        DictionaryLoadError: If no dictionary is configured for the script or it cannot be loaded
    """
    source = config.dictionary_for(script_tag) if config else None
    if source is None:
        raise DictionaryLoadError(f"No dictionary configured for script '{script_tag}'")

    return load_dictionary(source.path, comment_prefix=source.comment_prefix, logger=logger)
