"""Test configuration and fixtures."""

import pytest

from dictbreak.config.loader import load_config_from_string
from dictbreak.dictionary.trie import TrieDictionaryMatcher
from dictbreak.runtime.burmese import BurmeseBreakEngine


@pytest.fixture
def sample_config_yaml():
    """Provide a sample configuration YAML for testing."""
    return """
version: 1
thresholds:
  root_combine: 3
  prefix_combine: 3
  min_word: 2
dictionaries:
  - script: Mymr
    path: words.txt
"""


@pytest.fixture
def sample_config(sample_config_yaml):
    """Provide a loaded configuration object for testing."""
    return load_config_from_string(sample_config_yaml)


@pytest.fixture
def temp_dictionary_file(tmp_path):
    """Provide a temporary Burmese word list."""
    path = tmp_path / "words.txt"
    path.write_text(
        "# test words\n"
        "\u1019\u103c\u1014\u103a\u1019\u102c\n"              # Myanmar
        "\u1014\u102d\u102f\u1004\u103a\u1004\u1036\t42\n"    # country
        "\n"
        "\u1005\u102c\n",                                        # letter
        encoding="utf-8",
    )
    return path


@pytest.fixture
def temp_config_file(tmp_path, sample_config_yaml, temp_dictionary_file):
    """Provide a configuration file next to the temporary word list."""
    path = tmp_path / "config.yaml"
    path.write_text(sample_config_yaml, encoding="utf-8")
    return path


@pytest.fixture
def make_engine():
    """Build a Burmese engine over an in-memory word list."""
    def _make(words, **kwargs):
        return BurmeseBreakEngine(TrieDictionaryMatcher(words), **kwargs)
    return _make


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Simple meter for testing that accumulates counters and observations."""

    def __init__(self):
        self.counters = {}
        self.observations = []

    def inc(self, name: str, amount: int = 1, **tags: str):
        self.counters[name] = self.counters.get(name, 0) + amount

    def observe(self, name: str, value: float, **tags: str):
        self.observations.append((name, value))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()
