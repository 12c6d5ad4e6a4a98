"""
Paragraph boundary heuristics.

Each rule used by the line grouper is a small pure predicate so it can be
tested and tuned on its own:

- ends_with_terminator          - text ends a sentence (ASCII or full-width)
- starts_with_list_marker       - digit / bullet at line start
- is_short_after_long           - short line right after a long one (heading)
- starts_with_structural_marker - CJK chapter heading or numbered item
- is_new_paragraph              - any of the four triggers above
- is_continuation               - soft-wrapped line that joins the next one
"""

import re
from typing import Optional

# ASCII and full-width CJK sentence terminators
SENTENCE_TERMINATORS = frozenset(".!?:;。！？：；")

LIST_MARKER_PATTERN = re.compile(r'^[0-9•\-*]')

STRUCTURAL_MARKER_PATTERN = re.compile(
    r'^(?:第[一二三四五六七八九十百千万]+[章节篇]|[0-9]+[.、])'
)

DEFAULT_SHORT_LINE_MAX = 20
DEFAULT_LONG_LINE_MIN = 40


def ends_with_terminator(text: str) -> bool:
    """True if the last character of ``text`` closes a sentence."""
    return bool(text) and text[-1] in SENTENCE_TERMINATORS


def starts_with_list_marker(line: str) -> bool:
    """True if the line opens with a digit or a bullet (``•``, ``-``, ``*``)."""
    return LIST_MARKER_PATTERN.match(line) is not None


def starts_with_structural_marker(line: Optional[str]) -> bool:
    """
    True if the line opens a new logical unit.

    Matches CJK chapter/section headings (``第三章``, ``第十二节``, ``第一篇``)
    and numbered items (``12.`` or ``12、``).
    """
    if not line:
        return False
    return STRUCTURAL_MARKER_PATTERN.match(line.strip()) is not None


def is_short_after_long(
    line: str,
    previous_line: Optional[str],
    short_max: int = DEFAULT_SHORT_LINE_MAX,
    long_min: int = DEFAULT_LONG_LINE_MIN,
) -> bool:
    """
    Heading heuristic: a short line directly after a long one.

    Args:
        line: Current (trimmed) line
        previous_line: Immediately preceding raw line, None for the first line
        short_max: Current line must be shorter than this
        long_min: Previous line must be longer than this

    Returns:
        True if the line looks like a header breaking the text flow
    """
    if previous_line is None:
        return False
    return len(line) < short_max and len(previous_line) > long_min


def is_new_paragraph(
    current: str,
    line: str,
    previous_line: Optional[str],
    short_max: int = DEFAULT_SHORT_LINE_MAX,
    long_min: int = DEFAULT_LONG_LINE_MIN,
) -> bool:
    """
    Decide whether a non-blank line must start a new paragraph.

    Args:
        current: Paragraph accumulated so far (may be empty)
        line: Current (trimmed, non-blank) line
        previous_line: Immediately preceding raw line, None for the first line
        short_max: Heading heuristic threshold for the current line
        long_min: Heading heuristic threshold for the previous line

    Returns:
        True if any boundary trigger fires
    """
    return (
        (bool(current) and ends_with_terminator(current))
        or starts_with_list_marker(line)
        or is_short_after_long(line, previous_line, short_max, long_min)
        or starts_with_structural_marker(line)
    )


def is_continuation(line: str, next_line: Optional[str]) -> bool:
    """
    True if the line is a soft wrap that the following line continues.

    The line must not close a sentence, and the following line (if any)
    must not open a structural unit.
    """
    return not ends_with_terminator(line) and not starts_with_structural_marker(next_line)
