"""Test end-to-end sentence segmentation."""

import pytest

from pragmaticseg import segment
from pragmaticseg.core.markers import MARKERS
from pragmaticseg.core.rules import RuleApplicationError
from pragmaticseg.core.types import Rule
from pragmaticseg.languages import EnglishProcessor, UnsupportedLanguageError, get_processor
from pragmaticseg.segmenters.sentence import PragmaticSegmenter, default_segmenter


class TestPragmaticSegmenter:
    """Test the full protection and splitting pipeline."""

    def test_decimal_number_stays_in_one_sentence(self, segmenter):
        assert segmenter.segment("The value is 3.14 today.") == ["The value is 3.14 today."]

    def test_quotation_periods_do_not_split(self, segmenter):
        result = segmenter.segment('He said, "Stop. Go." Then left.')
        assert result == ['He said, "Stop. Go."', "Then left."]

    def test_pm_followed_by_capital(self, segmenter):
        result = segmenter.segment("He arrived at 5 P.M. Then he left.")
        assert result == ["He arrived at 5 P.M.", "Then he left."]

    def test_ellipsis_before_capital(self, segmenter):
        assert segmenter.segment("Wait... Really?") == ["Wait...", "Really?"]

    def test_spaced_ellipsis_at_end_of_text(self, segmenter):
        assert segmenter.segment("I wonder. . .") == ["I wonder. . ."]
        assert segmenter.segment("She trailed off . . .") == ["She trailed off . . ."]

    def test_spaced_ellipsis_before_capital(self, segmenter):
        assert segmenter.segment("Wait. . . Really?") == ["Wait. . .", "Really?"]

    def test_ellipsis_mid_sentence(self, segmenter):
        result = segmenter.segment("I was... thinking about it. Then I left.")
        assert result == ["I was... thinking about it.", "Then I left."]

    def test_numbered_list(self, segmenter):
        result = segmenter.segment("1. First item\n2. Second item")
        assert result == ["1. First item", "2. Second item"]

    def test_title_abbreviation(self, segmenter):
        result = segmenter.segment("Mr. Smith went to Washington. He arrived on Monday.")
        assert result == ["Mr. Smith went to Washington.", "He arrived on Monday."]

    def test_dotted_abbreviation_at_sentence_end(self, segmenter):
        result = segmenter.segment("He moved to the U.S. The move was hard.")
        assert result == ["He moved to the U.S.", "The move was hard."]

    def test_possessive_abbreviation(self, segmenter):
        result = segmenter.segment("Apple Inc.'s shares rose. Investors cheered.")
        assert result == ["Apple Inc.'s shares rose.", "Investors cheered."]

    def test_email_address(self, segmenter):
        result = segmenter.segment("Contact john.doe@example.com for info. Thanks!")
        assert result == ["Contact john.doe@example.com for info.", "Thanks!"]

    def test_parenthetical_periods(self, segmenter):
        result = segmenter.segment("I saw it (it was huge. really huge.) yesterday.")
        assert result == ["I saw it (it was huge. really huge.) yesterday."]

    def test_text_without_punctuation(self, segmenter):
        assert segmenter.segment("Hello world") == ["Hello world"]

    def test_blank_text(self, segmenter):
        assert segmenter.segment("") == []
        assert segmenter.segment("   ") == []

    def test_no_markers_in_output(self, segmenter):
        """Test that every marker is restored on mixed input."""
        text = (
            "Dr. Jones (a.k.a. \"Indy\") paid $3.50 at 9 a.m. on Jan. 5... "
            "Then she yelled \"Run! Now?\" and left. Is it 'done.' yet?! "
            "«Oui. Non!» 「はい。」 Visit www.example.org. . . . ok"
        )
        for sentence in segmenter.segment(text):
            for marker in MARKERS:
                assert marker not in sentence

    def test_sentences_come_from_input(self, segmenter):
        """Test that each sentence is a substring of the input."""
        text = "First one. Second one! Third one? Fourth one... Fifth one."
        sentences = segmenter.segment(text)
        assert len(sentences) == 5
        for sentence in sentences:
            assert sentence in text

    def test_min_length(self):
        segmenter = PragmaticSegmenter(min_length=4)
        assert segmenter.segment("Go. Stop now.") == ["Stop now."]

    def test_extra_abbreviations(self):
        text = "The Smith bros. and friends came."
        assert PragmaticSegmenter().segment(text) == ["The Smith bros.", "and friends came."]

        segmenter = PragmaticSegmenter(abbreviations=["bros"])
        assert segmenter.segment(text) == [text]

    def test_extra_rules_by_stage(self):
        rule = Rule.compile(r"§(\.)\s?\d", "∯", name="section_sign")
        segmenter = PragmaticSegmenter(extra_rules={"numbers": [rule]})
        assert segmenter.segment("See §. 12 for more.") == ["See §. 12 for more."]


class TestLogging:
    """Test injected logger and meter."""

    def test_segment_logs_info(self, test_logger):
        segmenter = PragmaticSegmenter(logger=test_logger)
        segmenter.segment("One. Two.")

        level, msg, kv = test_logger.messages[-1]
        assert level == "info"
        assert msg == "segmented"
        assert kv["sentences"] == 2
        assert kv["language"] == "en"

    def test_reserved_marker_in_input_warns(self, test_logger):
        segmenter = PragmaticSegmenter(logger=test_logger)
        segmenter.segment("Price∯ is high.")

        warnings = [m for m in test_logger.messages if m[0] == "warn"]
        assert warnings
        assert warnings[0][1] == "reserved_marker_in_input"
        assert "∯" in warnings[0][2]["markers"]

    def test_meter_counts(self, test_meter):
        segmenter = PragmaticSegmenter(meter=test_meter)
        segmenter.segment("One. Two. Three.")

        assert test_meter.counters["pragmaticseg.texts"] == 1
        assert test_meter.counters["pragmaticseg.sentences"] == 3
        assert test_meter.observations[0][:2] == ("pragmaticseg.sentences_per_text", 3.0)

    def test_malformed_rule_is_logged_and_raised(self, test_logger):
        bad = Rule.compile(r"(a)", "aa", name="grows")
        segmenter = PragmaticSegmenter(extra_rules={"numbers": [bad]}, logger=test_logger)

        with pytest.raises(RuleApplicationError):
            segmenter.segment("a cat sat.")

        level, msg, kv = test_logger.messages[-1]
        assert level == "error"
        assert msg == "rule_application_failed"
        assert kv["rule"] == "grows"


class TestLanguageSelection:
    """Test the language factory."""

    def test_aliases(self):
        assert PragmaticSegmenter("English").language == "en"
        assert PragmaticSegmenter("en-US").language == "en"

    def test_unsupported_language(self):
        with pytest.raises(UnsupportedLanguageError, match="Unsupported language"):
            PragmaticSegmenter("xx")

    def test_get_processor(self):
        processor = get_processor("en")
        assert isinstance(processor, EnglishProcessor)
        assert processor.process("One. Two.") == ["One.", "Two."]

    def test_from_config(self, sample_config):
        segmenter = PragmaticSegmenter.from_config(sample_config)
        assert segmenter.language == "en"
        assert segmenter.min_length == 2
        assert segmenter.segment("See §. 12 and eq. 4 here. Done.") == ["See §. 12 and eq. 4 here.", "Done."]

    def test_module_level_segment(self):
        assert segment("Hello. World.") == ["Hello.", "World."]

    def test_default_segmenter_is_shared(self):
        assert default_segmenter("en") is default_segmenter("en")
        assert segment("One. Two.", language="English") == ["One.", "Two."]
