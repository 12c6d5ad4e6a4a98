"""
Post-filtering of grouped paragraphs.

Drops paragraphs unlikely to carry retrievable content: fragments that are
too short, page numbers and punctuation debris, and extraction artefacts such
as dotted leaders or ruler lines. Paragraphs are only kept or dropped, never
split or merged.
"""

import re
from typing import Iterable, Iterator, Optional
import logging

logger = logging.getLogger(__name__)


class ParagraphFilter:
    """
    Noise filter for paragraphs.

    A paragraph (after trimming) is dropped when, checked in order:
    - it is shorter than ``min_length`` characters
    - it consists only of digits, whitespace and non-word symbols
    - one character repeats more than ``max_repeated_chars`` extra times in a row
    """

    REASON_TOO_SHORT = "too_short"
    REASON_NO_WORDS = "numeric_or_symbols"
    REASON_REPEATED = "repeated_chars"

    SYMBOLS_ONLY_PATTERN = re.compile(r'[\d\s\W]+')

    def __init__(self, min_length: int = 10, max_repeated_chars: int = 10):
        """
        Initialize paragraph filter.

        Args:
            min_length: Minimum paragraph length to keep
            max_repeated_chars: Longest allowed run of one character, minus one
                (the default 10 drops runs of 11 or more)
        """
        self.min_length = min_length
        self.max_repeated_chars = max_repeated_chars
        self._repeated_pattern = re.compile(r'(.)\1{%d,}' % max_repeated_chars)

    def drop_reason(self, paragraph: str) -> Optional[str]:
        """
        Explain why a paragraph would be dropped.

        Args:
            paragraph: Paragraph text

        Returns:
            Reason code, or None if the paragraph is kept
        """
        text = paragraph.strip()

        if len(text) < self.min_length:
            return self.REASON_TOO_SHORT

        if self.SYMBOLS_ONLY_PATTERN.fullmatch(text):
            return self.REASON_NO_WORDS

        if self._repeated_pattern.search(text):
            return self.REASON_REPEATED

        return None

    def keep(self, paragraph: str) -> bool:
        return self.drop_reason(paragraph) is None

    def apply(self, paragraphs: Iterable[str]) -> Iterator[str]:
        """
        Lazily filter paragraphs, preserving order.

        Args:
            paragraphs: Grouped paragraphs

        Yields:
            Trimmed paragraphs that pass every rule
        """
        for paragraph in paragraphs:
            reason = self.drop_reason(paragraph)
            if reason is not None:
                logger.debug("Dropped paragraph (%s): %r", reason, paragraph[:60])
                continue
            yield paragraph.strip()
