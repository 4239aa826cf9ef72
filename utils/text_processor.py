# DEPENDENCIES
import re
from typing import List
from typing import Optional
from dataclasses import dataclass


# Runs of sentence terminators; everything between two runs is a candidate sentence
SENTENCE_BODY_PATTERN = re.compile(r'[^.!?]+')


@dataclass(frozen = True)
class TextUnit:
    """
    Contiguous span of source text (a sentence or a clause block)
    """
    raw   : str   # untrimmed span as it appears in the source
    text  : str   # trimmed span
    start : int   # offset of raw[0] in the source
    end   : int   # offset one past the last character of raw
    index : int   # 0-based ordinal within one segmentation pass


    def __len__(self) -> int:
        return len(self.text)


class TextProcessor:
    """
    Text processing and normalization utilities

    Segmentation is intentionally naive: text is cut on runs of '.', '!' and '?'
    with no abbreviation handling, so downstream scoring stays reproducible
    """
    @staticmethod
    def segment(text: Optional[str], min_length: int = 20) -> List[TextUnit]:
        """
        Split text into sentence units with source offsets

        Arguments:
        ----------
            text       { str } : Input text (None or empty yields no units)

            min_length { int } : A unit is kept only if its trimmed length is strictly greater than this

        Returns:
        --------
                { list }       : Ordered list of TextUnit objects
        """
        if not text:
            return []

        units = list()

        for match in SENTENCE_BODY_PATTERN.finditer(text):
            raw     = match.group(0)
            trimmed = raw.strip()

            if (len(trimmed) > min_length):
                units.append(TextUnit(raw   = raw,
                                      text  = trimmed,
                                      start = match.start(),
                                      end   = match.end(),
                                      index = len(units),
                                     ))

        return units


    @staticmethod
    def extract_sentences(text: Optional[str], min_length: int = 20) -> List[str]:
        """
        Extract trimmed sentences from text (basic method)

        Arguments:
        ----------
            text       { str } : Input text

            min_length { int } : Sentences must be strictly longer than this (after trimming)

        Returns:
        --------
                { list }       : List of sentences
        """
        return [unit.text for unit in TextProcessor.segment(text, min_length = min_length)]


    @staticmethod
    def count_words(text: Optional[str]) -> int:
        """
        Count whitespace-separated tokens in text
        """
        if not text:
            return 0

        return len(text.split())


    @staticmethod
    def truncate(text: str, max_length: int, marker: str = "...") -> str:
        """
        Cut text to max_length characters, appending marker only when something was cut
        """
        if (len(text) <= max_length):
            return text

        return text[:max_length] + marker


    @staticmethod
    def contains_any(text: str, terms) -> bool:
        """
        True if any of the substrings occurs in text
        """
        return any(term in text for term in terms)


    @staticmethod
    def matches_groups(text: str, groups) -> bool:
        """
        True if every group has at least one substring present in text

        Arguments:
        ----------
            text   { str }  : Lowercased text

            groups { list } : Sequence of substring groups, e.g. (('service',), ('agreement',))
        """
        return all(TextProcessor.contains_any(text, group) for group in groups)
