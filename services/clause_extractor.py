# DEPENDENCIES
import sys
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
from utils.text_processor import TextProcessor
from config.legal_patterns import LegalPatterns


class ClauseExtractor:
    """
    Groups segmented sentences into clause-like blocks

    Process:
    1. Segment into sentences longer than the sentence threshold
    2. Accumulate sentences into a buffer joined by ". "
    3. Flush the buffer when a sentence opens with a structural marker phrase
    4. Flush the buffer once it grows past the hard cap
    5. Drop blocks that are not longer than the clause threshold
    """
    JOINER = ". "


    def __init__(self, min_sentence_length: Optional[int] = None, min_clause_length: Optional[int] = None, max_buffer_length: Optional[int] = None,
                 start_markers: Tuple[str, ...] = LegalPatterns.CLAUSE_START_MARKERS):
        """
        Initialize clause extractor

        Arguments:
        ----------
            min_sentence_length { int }  : Sentence threshold (defaults to settings.MIN_SENTENCE_LENGTH)

            min_clause_length   { int }  : Blocks must be strictly longer than this (defaults to settings.MIN_CLAUSE_LENGTH)

            max_buffer_length   { int }  : Buffer is flushed once longer than this (defaults to settings.MAX_CLAUSE_BUFFER)

            start_markers      { tuple } : Lowercase phrases that open a new clause
        """
        self.min_sentence_length = settings.MIN_SENTENCE_LENGTH if min_sentence_length is None else min_sentence_length
        self.min_clause_length   = settings.MIN_CLAUSE_LENGTH if min_clause_length is None else min_clause_length
        self.max_buffer_length   = settings.MAX_CLAUSE_BUFFER if max_buffer_length is None else max_buffer_length
        self.start_markers       = tuple(start_markers)


    @staticmethod
    def clause_id(index: int) -> str:
        """
        Stable external id of the clause at 0-based position index
        """
        return f"clause_{index + 1}"


    def is_clause_start(self, sentence: str) -> bool:
        """
        True if the sentence opens with one of the structural marker phrases
        """
        lowered = sentence.lower()

        return any(lowered.startswith(marker) for marker in self.start_markers)


    @LegalLensLogger.log_execution_time("extract_clause_blocks")
    def extract_blocks(self, text: Optional[str]) -> List[TextUnit]:
        """
        Extract ordered clause blocks from document text

        Arguments:
        ----------
            text { str } : Full document text

        Returns:
        --------
              { list }   : TextUnit blocks; offsets span from the first to the last grouped sentence
        """
        sentences = TextProcessor.segment(text, min_length = self.min_sentence_length)
        buffered  = list()
        blocks    = list()

        for sentence in sentences:
            if self.is_clause_start(sentence.text) and buffered:
                blocks.append(self._flush(text, buffered))
                buffered = list()

            buffered.append(sentence)

            if (len(self._join(buffered)) > self.max_buffer_length):
                blocks.append(self._flush(text, buffered))
                buffered = list()

        if buffered:
            blocks.append(self._flush(text, buffered))

        kept   = [block for block in blocks if (len(block.text) > self.min_clause_length)]
        result = [TextUnit(raw   = block.raw,
                           text  = block.text,
                           start = block.start,
                           end   = block.end,
                           index = position,
                          ) for position, block in enumerate(kept)]

        log_info("Clause blocks extracted",
                 sentences = len(sentences),
                 blocks    = len(blocks),
                 kept      = len(result),
                )

        return result


    def _join(self, sentences: List[TextUnit]) -> str:
        return self.JOINER.join(sentence.text for sentence in sentences)


    def _flush(self, text: str, sentences: List[TextUnit]) -> TextUnit:
        start = sentences[0].start
        end   = sentences[-1].end

        return TextUnit(raw   = text[start:end],
                        text  = self._join(sentences).strip(),
                        start = start,
                        end   = end,
                        index = 0,
                       )
