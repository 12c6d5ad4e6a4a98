"""
Paragraph segmentation for extracted document text.

Turns one raw text blob into an ordered list of clean paragraphs in three
stateless stages:
- normalize    (TextNormalizer)
- group lines  (boundary heuristics, one accumulator)
- post-filter  (ParagraphFilter)
"""

from typing import Iterable, Iterator, List, Optional, Tuple
import logging

from ..config import SegmenterConfig
from .boundaries import (
    DEFAULT_LONG_LINE_MIN,
    DEFAULT_SHORT_LINE_MAX,
    ends_with_terminator,
    is_continuation,
    is_new_paragraph,
)
from .filters import ParagraphFilter
from .normalizer import TextNormalizer

logger = logging.getLogger(__name__)


def _with_neighbours(
    lines: Iterable[str]
) -> Iterator[Tuple[Optional[str], str, Optional[str]]]:
    """Yield (previous, line, next) triples with one line of look-ahead."""
    iterator = iter(lines)
    previous = None
    line = next(iterator, None)
    while line is not None:
        following = next(iterator, None)
        yield previous, line, following
        previous, line = line, following


class ParagraphSegmenter:
    """
    Segments document text into paragraphs.

    Handles:
    - Blank-line paragraph separation
    - Sentence-terminated paragraphs (ASCII and CJK punctuation)
    - List items and numbered / CJK chapter headings
    - Short heading lines following long body lines
    - Soft-wrapped lines joined back into one paragraph
    - Noise removal (page numbers, ruler lines, tiny fragments)

    Never fails on string input; empty text gives an empty list.
    """

    def __init__(
        self,
        short_line_max: int = DEFAULT_SHORT_LINE_MAX,
        long_line_min: int = DEFAULT_LONG_LINE_MIN,
        min_paragraph_length: int = 10,
        max_repeated_chars: int = 10,
        normalizer: Optional[TextNormalizer] = None
    ):
        """
        Initialize segmenter.

        Args:
            short_line_max: Heading heuristic, current line shorter than this
            long_line_min: Heading heuristic, previous line longer than this
            min_paragraph_length: Paragraphs shorter than this are dropped
            max_repeated_chars: A character followed by this many repeats marks noise
            normalizer: Text normalizer (default: TextNormalizer())
        """
        self.short_line_max = short_line_max
        self.long_line_min = long_line_min
        self.normalizer = normalizer or TextNormalizer()
        self.paragraph_filter = ParagraphFilter(
            min_length=min_paragraph_length,
            max_repeated_chars=max_repeated_chars
        )

        logger.info(
            f"Initialized ParagraphSegmenter (short<{short_line_max}, long>{long_line_min}, "
            f"min_length={min_paragraph_length})"
        )

    @classmethod
    def from_config(cls, config: SegmenterConfig) -> "ParagraphSegmenter":
        return cls(
            short_line_max=config.short_line_max,
            long_line_min=config.long_line_min,
            min_paragraph_length=config.min_paragraph_length,
            max_repeated_chars=config.max_repeated_chars,
            normalizer=TextNormalizer.from_config(config.normalizer)
        )

    def normalize(self, text: Optional[str]) -> str:
        return self.normalizer.normalize(text)

    def group_lines(self, normalized_text: str) -> Iterator[str]:
        """
        Reassemble lines into paragraphs (no filtering).

        Single forward pass with one accumulator. A paragraph is emitted on a
        blank line, on a boundary trigger (see ``is_new_paragraph``), when a
        soft-wrapped line is followed by a structural marker, or when a
        sentence-ending line follows a paragraph opened by a trigger. A
        sentence-ending line only completes a run of soft-wrapped lines.

        Args:
            normalized_text: Output of ``normalize``

        Yields:
            Paragraphs in document order
        """
        current = ""
        # True while `current` was opened or extended as a soft-wrapped run,
        # False when a boundary trigger opened it (heading, list item, ...)
        wrapping = False

        for previous, raw_line, following in _with_neighbours(normalized_text.split('\n')):
            line = raw_line.strip()

            if not line:
                if current:
                    yield current
                    current = ""
                wrapping = False
                continue

            if is_new_paragraph(
                current, line, previous, self.short_line_max, self.long_line_min
            ):
                if current:
                    yield current
                current = line
                wrapping = False
            elif not current:
                current = line
                wrapping = True
            elif is_continuation(line, following) or (wrapping and ends_with_terminator(line)):
                current = f"{current} {line}"
                wrapping = True
            else:
                # terminated line after a heading, or a wrapped line right
                # before a structural marker: starts its own paragraph
                yield current
                current = line
                wrapping = True

        if current:
            yield current

    def iter_paragraphs(self, text: Optional[str]) -> Iterator[str]:
        """
        Lazily segment text into filtered paragraphs.

        Args:
            text: Raw document text

        Yields:
            Clean paragraphs in document order
        """
        normalized = self.normalize(text)
        if not normalized:
            return
        yield from self.paragraph_filter.apply(self.group_lines(normalized))

    def segment(self, text: Optional[str]) -> List[str]:
        """
        Segment text into filtered paragraphs.

        Args:
            text: Raw document text

        Returns:
            List of paragraphs (possibly empty)
        """
        paragraphs = list(self.iter_paragraphs(text))
        logger.info(f"Segmented {len(text or '')} chars into {len(paragraphs)} paragraphs")
        return paragraphs


def detect_paragraphs(
    text: Optional[str],
    short_line_max: int = DEFAULT_SHORT_LINE_MAX,
    long_line_min: int = DEFAULT_LONG_LINE_MIN,
    min_paragraph_length: int = 10
) -> List[str]:
    """
    Convenience function to segment one text into paragraphs.

    Args:
        text: Raw document text
        short_line_max: Heading heuristic threshold (current line)
        long_line_min: Heading heuristic threshold (previous line)
        min_paragraph_length: Minimum paragraph length to keep

    Returns:
        List of paragraphs

    Example:
        >>> detect_paragraphs("First paragraph here.\\n\\nSecond paragraph here.")
        ['First paragraph here.', 'Second paragraph here.']
    """
    segmenter = ParagraphSegmenter(
        short_line_max=short_line_max,
        long_line_min=long_line_min,
        min_paragraph_length=min_paragraph_length
    )
    return segmenter.segment(text)
