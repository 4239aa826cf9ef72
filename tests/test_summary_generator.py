# DEPENDENCIES
import pytest
from utils.text_processor import TextProcessor
from utils.validators import InputTooShortError
from services.summary_generator import SummaryGenerator


LEGAL_TEXT = ("The weather today is cold. "
              "The parties agree that payment is due under this agreement. "
              "Birds were singing loudly in the trees nearby. "
              "The final sentence of this note mentions nothing important at all.")


@pytest.fixture
def summarizer() -> SummaryGenerator:
    return SummaryGenerator()


def test_short_text_is_rejected_before_scoring(summarizer, monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("sentence scoring must not run")

    monkeypatch.setattr(summarizer, "score_sentence", fail)

    with pytest.raises(InputTooShortError) as error:
        summarizer.summarize("Too short to summarize.")

    assert error.value.minimum == 50
    assert error.value.length == len("Too short to summarize.")


def test_extractive_summary(summarizer):
    result = summarizer.summarize(LEGAL_TEXT)

    assert result.summary == ("This appears to be a legal document. "
                              "The parties agree that payment is due under this agreement. "
                              "The final sentence of this note mentions nothing important at all.")
    assert result.key_points == ["This appears to be a legal document",
                                 "The parties agree that payment is due under this agreement",
                                 "The final sentence of this note mentions nothing important at all",
                                ]
    assert result.word_count == len(LEGAL_TEXT.split())
    assert result.compression_ratio == pytest.approx(len(result.summary.split()) / len(LEGAL_TEXT.split()))
    assert result.method == "extractive"
    assert result.document_type == "a legal document"


def test_selected_sentences_keep_document_order(summarizer):
    sentences = [f"Sentence number {i} talks about the payment terms of the contract" for i in range(12)]
    text      = ". ".join(sentences) + "."
    summary   = summarizer.summarize(text).summary
    body      = summary[len("This appears to be a legal document. "):]
    picked    = body.rstrip('.').split(". ")

    assert len(picked) == 4
    assert all(sentence in sentences for sentence in picked)
    assert picked == sorted(picked, key = sentences.index)


def test_selection_is_capped_at_five(summarizer):
    sentences = [f"Clause {i} of the agreement sets out the payment terms" for i in range(40)]
    summary, _ = summarizer.generate_summary(". ".join(sentences) + ".")

    assert summary.count("Clause ") == 5


def test_no_prefix_without_legal_keywords(summarizer):
    result = summarizer.summarize("The weather today is cold and grey. Birds were singing loudly in the trees nearby.")

    # first and last sentence tie; the earlier one wins
    assert result.summary == "The weather today is cold and grey."
    assert result.document_type is None


def test_text_without_sentences(summarizer):
    result = summarizer.summarize("Hi. " * 20)

    assert result.summary == SummaryGenerator.UNABLE_TO_SUMMARIZE
    assert result.key_points == ["Unable to generate summary from the provided text"]


@pytest.mark.parametrize("text, document_type", [("This employment contract covers the employee", "an employment agreement"),
                                                 ("This Service Agreement is made today", "a service agreement"),
                                                 ("The rental of the flat", "a lease agreement"),
                                                 ("A licensing deal", "a licensing agreement"),
                                                 ("A joint venture between two firms", "a partnership agreement"),
                                                 ("A simple letter", "a legal document"),
                                                ])
def test_identify_document_type(text, document_type):
    assert SummaryGenerator.identify_document_type(text) == document_type


def test_key_points_fallback(summarizer):
    assert summarizer.extract_key_points("Short. Tiny.") == ["Summary generated successfully"]


def test_keyword_scoring_counts_each_keyword_once(summarizer):
    once  = TextProcessor.segment("alpha beta gamma delta payment epsilon zeta")[0]
    twice = TextProcessor.segment("alpha payment gamma delta payment epsilon zeta")[0]

    assert summarizer.score_sentence(once, 3) == summarizer.score_sentence(twice, 3) == 2 + 3
