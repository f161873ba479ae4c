"""Test word segmentation over mixed text."""

from pathlib import Path

import pytest

from dictbreak.config.loader import load_config
from dictbreak.core.types import SegmentationResult
from dictbreak.runtime.burmese import BurmeseBreakEngine
from dictbreak.segmenters.word import WordSegmenter

EXAMPLE_CONFIG = Path(__file__).parent.parent / "examples" / "burmese" / "config.yaml"

MYANMAR = "\u1019\u103c\u1014\u103a\u1019\u102c"
COUNTRY = "\u1014\u102d\u102f\u1004\u103a\u1004\u1036"
YANGON = "\u101b\u1014\u103a\u1000\u102f\u1014\u103a"
CITY = "\u1019\u103c\u102d\u102f\u1037"
AT = "\u1019\u103e\u102c"
LIVE = "\u1014\u1031"
FINAL = "\u101e\u100a\u103a"
SAYA = "\u1006\u101b\u102c"
GOOD = "\u1000\u1031\u102c\u1004\u103a\u1038"
SECTION = "\u104a"


@pytest.fixture(scope="module")
def segmenter():
    engine = BurmeseBreakEngine(config=load_config(EXAMPLE_CONFIG))
    return WordSegmenter(engine)


class TestWordSegmenter:
    """Test segmenting text with the example dictionary."""

    def test_two_words(self, segmenter):
        assert segmenter.segment(MYANMAR + COUNTRY) == [MYANMAR, COUNTRY]

    def test_sentence(self, segmenter):
        text = YANGON + CITY + AT + LIVE + FINAL

        result = segmenter.boundaries(text)

        assert result.segments == [YANGON, CITY, AT, LIVE, FINAL]
        assert result.boundaries == [7, 12, 15, 17]
        assert result.words_found == 4
        assert result.segment_count == 5

    def test_spaces_and_punctuation_pass_through(self, segmenter):
        text = SAYA + GOOD + " " + MYANMAR + SECTION

        assert segmenter.segment(text) == [SAYA, GOOD, " ", MYANMAR, SECTION]

    def test_other_scripts_pass_through(self, segmenter):
        text = "Hello, " + MYANMAR + COUNTRY + " 2024"

        assert segmenter.segment(text) == ["Hello, ", MYANMAR, COUNTRY, " 2024"]

    def test_drop_whitespace(self, segmenter):
        dropping = WordSegmenter(segmenter.engine, keep_whitespace=False)

        assert dropping.segment(MYANMAR + " " + COUNTRY) == [MYANMAR, COUNTRY]

    def test_unknown_run_kept_whole(self, segmenter):
        unknown = "\u1000\u1001\u1002"

        assert segmenter.segment(unknown) == [unknown]

    def test_empty_text(self, segmenter):
        assert segmenter.segment("") == []

        result = segmenter.boundaries("")
        assert isinstance(result, SegmentationResult)
        assert result.segments == []
        assert result.boundaries == []

    @pytest.mark.parametrize("text", [
        MYANMAR + COUNTRY,
        "abc " + YANGON + CITY + "!! " + SAYA,
        " " + SECTION + GOOD + "\u1041\u1042" + AT + LIVE,
        "\u1000\u102c\u102c " + FINAL,
    ])
    def test_segments_rejoin(self, segmenter, text):
        result = segmenter.boundaries(text)

        assert "".join(result.segments) == text
        assert all(result.segments)
        assert result.boundaries == sorted(set(result.boundaries))
        assert all(0 < b < len(text) for b in result.boundaries)

    def test_logs_segmentation(self, segmenter, test_logger):
        logged = WordSegmenter(segmenter.engine, logger=test_logger)

        logged.segment(MYANMAR + COUNTRY + " " + AT)

        assert test_logger.messages == [
            ("info", "text_segmented",
             {"script": "Mymr", "text_length": 17, "segments": 4, "words_found": 1}),
        ]

    def test_lone_surrogate_does_not_crash(self, segmenter):
        text = "\ud800" + MYANMAR + COUNTRY

        segments = segmenter.segment(text)

        assert segments == ["\ud800", MYANMAR, COUNTRY]
