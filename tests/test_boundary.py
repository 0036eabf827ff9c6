"""Test sentence boundary splitting of protected text."""

import pytest

from pragmaticseg.segmenters.boundary import BoundarySplitter


@pytest.fixture
def splitter():
    return BoundarySplitter()


class TestBoundarySplitter:
    """Test splitting and marker restoration."""

    def test_simple_split(self, splitter):
        assert splitter.split("Hello world. How are you?") == ["Hello world.", "How are you?"]

    def test_trailing_text_without_terminator(self, splitter):
        assert splitter.split("Hello world") == ["Hello world"]

    def test_newlines_are_boundaries(self, splitter):
        assert splitter.split("First line\nSecond line") == ["First line", "Second line"]

    def test_windows_line_endings(self, splitter):
        assert splitter.split("One.\r\nTwo.") == ["One.", "Two."]

    def test_markers_are_restored(self, splitter):
        assert splitter.split("The value is 3∯14 today.") == ["The value is 3.14 today."]

    def test_quotation_followed_by_capital_is_split_after_quote(self, splitter):
        result = splitter.split('He said, "Stop∯ Go∯" Then left.')
        assert result == ['He said, "Stop. Go."', "Then left."]

    def test_continuous_punctuation_keeps_last_terminator(self, splitter):
        assert splitter.split("Hello!!! How are you?") == ["Hello!!!", "How are you?"]

    def test_double_punctuation(self, splitter):
        assert splitter.split("Really?! Yes.") == ["Really?!", "Yes."]

    def test_exclamation_before_lowercase_word(self, splitter):
        assert splitter.split("Wow! that is big.") == ["Wow! that is big."]

    def test_exclamation_word(self, splitter):
        assert splitter.split("I searched Yahoo! for it.") == ["I searched Yahoo! for it."]

    def test_parens_between_quotes_become_hard_breaks(self, splitter):
        result = splitter.split('"Go∯" (He was angry∯) "Now∯"')
        assert result == ['"Go."', "(He was angry.)", '"Now."']

    def test_min_length_drops_short_sentences(self):
        splitter = BoundarySplitter(min_length=5)
        assert splitter.split("Hi. Hello there.") == ["Hello there."]

    def test_lone_terminator_is_kept(self, splitter):
        """Test that a segment made only of a terminator is not dropped."""
        assert splitter.split(".") == ["."]
        assert splitter.split("Hi. ?") == ["Hi.", "?"]

    def test_blank_text(self, splitter):
        assert splitter.split("   \n  ") == []
