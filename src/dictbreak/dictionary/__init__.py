"""
dictbreak Dictionary Package

Dictionary matchers and word list loaders. Engines take any object that
follows the DictionaryMatcher protocol; the trie here is the bundled one.
"""

from .trie import TrieDictionaryMatcher
from .loader import DictionaryLoadError, load_dictionary, load_dictionary_for, load_word_list

__all__ = [
    'TrieDictionaryMatcher',
    'DictionaryLoadError',
    'load_dictionary',
    'load_dictionary_for',
    'load_word_list',
]
