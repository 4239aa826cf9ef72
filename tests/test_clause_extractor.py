# DEPENDENCIES
import pytest
from services.clause_extractor import ClauseExtractor


@pytest.fixture
def extractor() -> ClauseExtractor:
    return ClauseExtractor()


def test_marker_phrase_starts_new_block(extractor):
    text   = ("The supplier delivers goods every month to the buyer. "
              "Section two covers the payment of all invoices. "
              "The buyer pays within thirty days of delivery.")
    blocks = extractor.extract_blocks(text)

    assert [block.text for block in blocks] == ["The supplier delivers goods every month to the buyer",
                                                "Section two covers the payment of all invoices. The buyer pays within thirty days of delivery",
                                               ]
    assert [block.index for block in blocks] == [0, 1]
    assert text[blocks[1].start:blocks[1].end].strip().startswith("Section two")
    assert blocks[1].raw == text[blocks[1].start:blocks[1].end]


def test_marker_on_first_sentence_does_not_flush_empty_buffer(extractor):
    blocks = extractor.extract_blocks("This agreement covers the lease of the premises. The tenant pays rent monthly in advance.")

    assert len(blocks) == 1


def test_buffer_is_flushed_past_hard_cap(extractor):
    sentence = "a" * 100
    blocks   = extractor.extract_blocks(f"{sentence}. " * 4)

    assert [block.text for block in blocks] == [". ".join([sentence] * 3), sentence]


def test_short_blocks_are_dropped_and_reindexed(extractor):
    text   = "This is twenty five chars. Section one is a considerably longer sentence here."
    blocks = extractor.extract_blocks(text)

    assert [block.text for block in blocks] == ["Section one is a considerably longer sentence here"]
    assert blocks[0].index == 0


def test_text_without_markers_becomes_single_block(extractor, plain_text):
    blocks = extractor.extract_blocks(plain_text)

    assert [block.text for block in blocks] == ["The weather was pleasant and sunny all afternoon. We walked along the river until dinner time"]


@pytest.mark.parametrize("text", ["", None, "Tiny. Bits. Only."])
def test_nothing_to_extract(extractor, text):
    assert extractor.extract_blocks(text) == []


def test_every_block_is_longer_than_clause_threshold(extractor, flow_text, scenario_text):
    for text in (flow_text, scenario_text):
        assert all(len(block.text) > 30 for block in extractor.extract_blocks(text))


def test_clause_ids_are_one_based():
    assert ClauseExtractor.clause_id(0) == "clause_1"
    assert ClauseExtractor.clause_id(9) == "clause_10"


def test_is_clause_start_is_case_insensitive(extractor):
    assert extractor.is_clause_start("NOTWITHSTANDING anything to the contrary")
    assert extractor.is_clause_start("In the event of default")
    assert not extractor.is_clause_start("The section below applies")
