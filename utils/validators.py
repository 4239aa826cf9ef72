# DEPENDENCIES
import re
import sys
from typing import Any
from typing import Dict
from typing import List
from typing import Tuple
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from config.settings import settings


class InputTooShortError(ValueError):
    """
    Raised when a document is below the minimum length for analysis or summarization
    """
    def __init__(self, length: int, minimum: int, operation: str = "analysis"):
        self.length    = length
        self.minimum   = minimum
        self.operation = operation

        super().__init__(f"Text too short for meaningful {operation} ({length} chars, minimum {minimum})")


class TextValidator:
    """
    Validate caller-supplied text before it reaches the engine
    """
    SCRIPT_PATTERN     = re.compile(r'<script[^>]*>[\s\S]*?</script>', re.IGNORECASE)
    JAVASCRIPT_PATTERN = re.compile(r'javascript:', re.IGNORECASE)
    HANDLER_PATTERN    = re.compile(r'on\w+\s*=', re.IGNORECASE)

    # Non-fatal content checks
    UNSAFE_MARKERS              = ('<script>', 'javascript:')
    REPETITION_MIN_WORDS        = 100
    REPETITION_MIN_UNIQUE_RATIO = 0.1


    @staticmethod
    def validate_text(text: Any, min_length: Optional[int] = None, max_length: Optional[int] = None) -> Tuple[bool, str, str]:
        """
        Length and emptiness validation

        Arguments:
        ----------
            text       { str } : Text to validate

            min_length { int } : Minimum length override (defaults to settings.MIN_TEXT_LENGTH)

            max_length { int } : Maximum length override (defaults to settings.MAX_TEXT_LENGTH)

        Returns:
        --------
               { tuple }       : (is_valid, validation_type, message) tuple
        """
        min_length = settings.MIN_TEXT_LENGTH if min_length is None else min_length
        max_length = settings.MAX_TEXT_LENGTH if max_length is None else max_length

        if not isinstance(text, str):
            return (False, "empty", "No text provided")

        if (len(text.strip()) == 0):
            return (False, "empty", "Text cannot be empty")

        if (len(text) < min_length):
            return (False, "too_short", f"Text too short ({len(text)} chars, minimum {min_length})")

        if (len(text) > max_length):
            return (False, "too_long", f"Text too long ({len(text)} chars, maximum {max_length})")

        return (True, "valid", "OK")


    @staticmethod
    def require_min_length(text: Optional[str], min_length: Optional[int] = None, operation: str = "analysis") -> str:
        """
        Return text unchanged or raise InputTooShortError
        """
        min_length = settings.MIN_TEXT_LENGTH if min_length is None else min_length
        text       = text or ""

        if (len(text) < min_length):
            raise InputTooShortError(length    = len(text),
                                     minimum   = min_length,
                                     operation = operation,
                                    )

        return text


    @staticmethod
    def sanitize_text(text: Optional[str]) -> str:
        """
        Strip null bytes, collapse whitespace and remove inline script fragments
        """
        if not text:
            return ""

        text = text.replace('\x00', '')
        text = re.sub(r'\s+', ' ', text).strip()
        text = TextValidator.SCRIPT_PATTERN.sub('', text)
        text = TextValidator.JAVASCRIPT_PATTERN.sub('', text)
        text = TextValidator.HANDLER_PATTERN.sub('', text)

        return text


    @staticmethod
    def collect_warnings(text: Optional[str]) -> List[str]:
        """
        Non-fatal findings about otherwise acceptable text

        Arguments:
        ----------
            text { str } : Text to inspect

        Returns:
        --------
              { list }   : Warning messages, empty when nothing looks suspicious
        """
        if not text:
            return list()

        warnings = list()

        if any(marker in text for marker in TextValidator.UNSAFE_MARKERS):
            warnings.append("Text contains potentially unsafe content")

        words = text.split()

        if ((len(words) > TextValidator.REPETITION_MIN_WORDS) and (len(set(words)) / len(words) < TextValidator.REPETITION_MIN_UNIQUE_RATIO)):
            warnings.append("Text appears to be very repetitive")

        return warnings


    @staticmethod
    def get_validation_report(text: str) -> Dict[str, Any]:
        """
        Get validation verdict together with warnings and basic text statistics
        """
        is_valid, validation_type, message = TextValidator.validate_text(text)
        text                               = text if isinstance(text, str) else ""

        return {"is_valid"        : is_valid,
                "validation_type" : validation_type,
                "message"         : message,
                "warnings"        : TextValidator.collect_warnings(text) if is_valid else list(),
                "text_statistics" : {"length"     : len(text),
                                     "word_count" : len(text.split()),
                                     "line_count" : len(text.split('\n')) if text else 0,
                                    },
               }
