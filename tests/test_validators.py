# DEPENDENCIES
import pytest
from utils.validators import TextValidator
from utils.validators import InputTooShortError


@pytest.mark.parametrize("text, validation_type", [(None, "empty"),
                                                   ("   ", "empty"),
                                                   ("Too short.", "too_short"),
                                                   ("x" * 50, "valid"),
                                                  ])
def test_validate_text(text, validation_type):
    is_valid, actual_type, message = TextValidator.validate_text(text)

    assert actual_type == validation_type
    assert is_valid == (validation_type == "valid")
    assert message


def test_validate_text_too_long():
    assert TextValidator.validate_text("x" * 11, min_length = 1, max_length = 10)[1] == "too_long"


def test_require_min_length():
    assert TextValidator.require_min_length("x" * 50) == "x" * 50

    with pytest.raises(InputTooShortError) as error:
        TextValidator.require_min_length("short", operation = "summarization")

    assert (error.value.length, error.value.minimum, error.value.operation) == (5, 50, "summarization")
    assert "summarization" in str(error.value)


def test_require_min_length_treats_none_as_empty():
    with pytest.raises(InputTooShortError):
        TextValidator.require_min_length(None)


def test_sanitize_text():
    assert TextValidator.sanitize_text("  What\x00 is\n\n the   fee? ") == "What is the fee?"
    assert TextValidator.sanitize_text("<script>alert(1)</script>Who pays?") == "Who pays?"
    assert TextValidator.sanitize_text("javascript:void onclick=run") == "void run"
    assert TextValidator.sanitize_text(None) == ""


def test_validation_report():
    report = TextValidator.get_validation_report("line one\nline two " + "x" * 40)

    assert report["is_valid"] is True
    assert report["text_statistics"]["line_count"] == 2
    assert report["text_statistics"]["word_count"] == 5
    assert report["warnings"] == []


def test_validation_report_warnings():
    unsafe     = TextValidator.get_validation_report("Visit javascript:alert(1) before signing this agreement today.")
    repetitive = TextValidator.get_validation_report("fee " * 101)

    assert unsafe["warnings"] == ["Text contains potentially unsafe content"]
    assert repetitive["warnings"] == ["Text appears to be very repetitive"]


def test_collect_warnings_needs_enough_words():
    # 100 identical words is not yet repetitive
    assert TextValidator.collect_warnings("fee " * 100) == []
    assert TextValidator.collect_warnings(None) == []
