# DEPENDENCIES
import pytest
from utils.text_processor import TextProcessor


class TestSegment:
    @pytest.mark.parametrize("text", ["", None, "   ", "...!!! ???  . ", "!?!?"])
    def test_blank_or_punctuation_only_text_yields_nothing(self, text):
        assert TextProcessor.segment(text) == []


    def test_splits_on_terminator_runs_and_filters_short_pieces(self):
        text  = "First sentence is long enough here. Short. Another sentence that is long enough!"
        units = TextProcessor.segment(text)

        assert [unit.text for unit in units] == ["First sentence is long enough here", "Another sentence that is long enough"]
        assert [unit.index for unit in units] == [0, 1]


    def test_length_threshold_is_strict(self):
        assert TextProcessor.segment("a" * 20 + ".") == []
        assert len(TextProcessor.segment("a" * 21 + ".")) == 1


    def test_offsets_point_back_into_source(self):
        text  = "The buyer pays on delivery of goods!! The seller ships within two weeks?"
        units = TextProcessor.segment(text)

        previous_end = 0

        for unit in units:
            assert text[unit.start:unit.end] == unit.raw
            assert unit.raw.strip() == unit.text
            assert unit.start >= previous_end
            previous_end = unit.end


    def test_no_abbreviation_handling(self):
        units = TextProcessor.segment("The payment of U.S. dollars is due within thirty days of invoice.", min_length = 0)

        assert [unit.text for unit in units] == ["The payment of U", "S", "dollars is due within thirty days of invoice"]


def test_extract_sentences_returns_trimmed_strings():
    assert TextProcessor.extract_sentences("  Alpha beta gamma delta epsilon zeta.  Eta theta iota kappa lambda mu.") == ["Alpha beta gamma delta epsilon zeta", "Eta theta iota kappa lambda mu"]


def test_count_words():
    assert TextProcessor.count_words("  one two\nthree\tfour ") == 4
    assert TextProcessor.count_words("") == 0
    assert TextProcessor.count_words(None) == 0


def test_truncate_only_marks_cut_text():
    assert TextProcessor.truncate("x" * 100, 100) == "x" * 100
    assert TextProcessor.truncate("x" * 101, 100) == "x" * 100 + "..."


def test_matches_groups_requires_every_group():
    assert TextProcessor.matches_groups("a service agreement", (('service',), ('agreement',)))
    assert not TextProcessor.matches_groups("a service contract", (('service',), ('agreement',)))
    assert TextProcessor.matches_groups("a rental", (('lease', 'rental'),))
