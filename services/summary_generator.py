# DEPENDENCIES
import re
import sys
import math
from typing import List
from typing import Tuple
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_info
from config.settings import settings
from utils.text_processor import TextUnit
from utils.logger import LegalLensLogger
from utils.validators import TextValidator
from utils.text_processor import TextProcessor
from services.data_models import SummaryResult
from config.legal_patterns import LegalPatterns


class SummaryGenerator:
    """
    Rule-based extractive summary generator

    Sentences are scored by legal keyword presence, position and length; the
    best ones are kept in document order and prefixed with a document-type guess
    """
    UNABLE_TO_SUMMARIZE = "Unable to generate summary from the provided text."
    DEFAULT_KEY_POINT   = "Summary generated successfully"
    METHOD              = "extractive"

    KEYWORD_SCORE       = 2
    POSITION_SCORE      = 3
    LENGTH_SCORE        = 1
    LENGTH_WINDOW       = (50, 200)   # exclusive bounds of the preferred sentence length


    def __init__(self, keywords: Tuple[str, ...] = LegalPatterns.SUMMARY_KEYWORDS, max_sentences: Optional[int] = None, ratio: Optional[float] = None,
                 min_sentence_length: Optional[int] = None, min_text_length: Optional[int] = None):
        """
        Initialize the summary generator

        Arguments:
        ----------
            keywords            { tuple } : Lowercase legal keywords used for scoring

            max_sentences       { int }   : Upper bound on selected sentences (defaults to settings.SUMMARY_MAX_SENTENCES)

            ratio               { float } : Fraction of sentences to keep (defaults to settings.SUMMARY_RATIO)

            min_sentence_length { int }   : Sentence threshold (defaults to settings.MIN_SENTENCE_LENGTH)

            min_text_length     { int }   : Shortest accepted document (defaults to settings.MIN_TEXT_LENGTH)
        """
        self.keywords            = tuple(keywords)
        self.max_sentences       = settings.SUMMARY_MAX_SENTENCES if max_sentences is None else max_sentences
        self.ratio               = settings.SUMMARY_RATIO if ratio is None else ratio
        self.min_sentence_length = settings.MIN_SENTENCE_LENGTH if min_sentence_length is None else min_sentence_length
        self.min_text_length     = settings.MIN_TEXT_LENGTH if min_text_length is None else min_text_length


    @LegalLensLogger.log_execution_time("summarize")
    def summarize(self, text: str) -> SummaryResult:
        """
        Generate an extractive summary with derived statistics

        Arguments:
        ----------
            text { str } : Document text, at least min_text_length characters

        Raises:
        -------
            InputTooShortError : Text is below the minimum length; nothing is scored

        Returns:
        --------
            { SummaryResult }  : Summary, key points, word count and compression ratio
        """
        TextValidator.require_min_length(text, self.min_text_length, operation = "summarization")

        summary, document_type = self.generate_summary(text)
        word_count             = TextProcessor.count_words(text)
        summary_words          = TextProcessor.count_words(summary)
        compression_ratio      = (summary_words / word_count) if word_count else 0.0

        log_info("Extractive summary generated",
                 word_count        = word_count,
                 summary_words     = summary_words,
                 compression_ratio = round(compression_ratio, 4),
                 document_type     = document_type,
                )

        return SummaryResult(summary           = summary,
                             key_points        = self.extract_key_points(summary),
                             word_count        = word_count,
                             compression_ratio = compression_ratio,
                             method            = self.METHOD,
                             document_type     = document_type,
                            )


    def generate_summary(self, text: str) -> Tuple[str, Optional[str]]:
        """
        Build the summary string

        Returns:
        --------
            { tuple } : (summary, document type or None when no legal keyword occurs)
        """
        sentences = TextProcessor.segment(text, min_length = self.min_sentence_length)

        if not sentences:
            return (self.UNABLE_TO_SUMMARIZE, None)

        selected      = self.select_sentences(sentences)
        summary       = ". ".join(sentence.text for sentence in selected)
        document_type = None

        if self.has_legal_terms(text):
            document_type = self.identify_document_type(text)
            summary       = f"This appears to be {document_type}. {summary}"

        if not summary.endswith('.'):
            summary += '.'

        return (summary, document_type)


    def score_sentence(self, sentence: TextUnit, total: int) -> int:
        """
        Keyword, position and length score of one sentence
        """
        lowered = sentence.raw.lower()
        score   = sum(self.KEYWORD_SCORE for keyword in self.keywords if keyword in lowered)

        if (sentence.index == 0) or (sentence.index == total - 1):
            score += self.POSITION_SCORE

        low, high = self.LENGTH_WINDOW

        if (low < len(sentence.raw) < high):
            score += self.LENGTH_SCORE

        return score


    def select_sentences(self, sentences: List[TextUnit]) -> List[TextUnit]:
        """
        Top-K sentences by score (stable on ties), returned in document order
        """
        count  = min(self.max_sentences, math.ceil(len(sentences) * self.ratio))
        scored = [(self.score_sentence(sentence, len(sentences)), sentence) for sentence in sentences]
        ranked = sorted(scored, key = lambda item: item[0], reverse = True)[:count]

        return sorted((sentence for _, sentence in ranked), key = lambda sentence: sentence.index)


    def has_legal_terms(self, text: str) -> bool:
        return TextProcessor.contains_any(text.lower(), self.keywords)


    @staticmethod
    def identify_document_type(text: str) -> str:
        """
        Guess the document type from ordered substring checks
        """
        lowered = text.lower()

        for groups, document_type in LegalPatterns.DOCUMENT_TYPES:
            if TextProcessor.matches_groups(lowered, groups):
                return document_type

        return LegalPatterns.DEFAULT_DOCUMENT_TYPE


    def extract_key_points(self, summary: str, limit: int = 3) -> List[str]:
        """
        First sentences of the summary, used as bullet points
        """
        pieces     = [piece.strip() for piece in re.split(r'[.!?]+', summary)]
        key_points = [piece for piece in pieces if (len(piece) > 10)][:limit]

        return key_points or [self.DEFAULT_KEY_POINT]
