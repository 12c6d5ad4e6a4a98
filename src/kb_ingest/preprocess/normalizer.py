"""
Text normalization utilities.

Reduces encoding/whitespace noise in PDF-extracted text before it is
split into lines:
- Line-ending unification
- Blank-line run capping
- Horizontal whitespace collapsing
- Optional Unicode / invisible character cleanup
"""

import re
import unicodedata
from typing import Optional
import logging

from ..config import NormalizerConfig

logger = logging.getLogger(__name__)


class TextNormalizer:
    """
    Text normalizer for PDF-extracted text.

    The default pipeline is total and idempotent:
    - CRLF and lone CR become LF
    - 3+ consecutive newlines become exactly 2
    - runs of spaces/tabs become a single space
    - the whole text is trimmed
    """

    LINE_ENDING_PATTERN = re.compile(r'\r\n?')
    BLANK_RUN_PATTERN = re.compile(r'\n{3,}')
    HORIZONTAL_WS_PATTERN = re.compile(r'[ \t]+')

    INVISIBLE_CHARS = [
        '\u200b',  # Zero-width space
        '\u200c',  # Zero-width non-joiner
        '\u200d',  # Zero-width joiner
        '\ufeff',  # Zero-width no-break space (BOM)
        '\u00ad',  # Soft hyphen
    ]

    def __init__(
        self,
        normalize_unicode: bool = False,
        remove_invisible: bool = False
    ):
        """
        Initialize text normalizer.

        Args:
            normalize_unicode: Apply Unicode NFC normalization first
            remove_invisible: Strip zero-width characters and soft hyphens
        """
        self.normalize_unicode = normalize_unicode
        self.remove_invisible = remove_invisible

    @classmethod
    def from_config(cls, config: NormalizerConfig) -> "TextNormalizer":
        return cls(
            normalize_unicode=config.normalize_unicode,
            remove_invisible=config.remove_invisible
        )

    def normalize(self, text: Optional[str]) -> str:
        """
        Normalize text.

        Args:
            text: Input text (None is treated as empty)

        Returns:
            Normalized text
        """
        if not text:
            return ""

        if self.normalize_unicode:
            text = unicodedata.normalize('NFC', text)

        if self.remove_invisible:
            text = self._remove_invisible_chars(text)

        text = self.LINE_ENDING_PATTERN.sub('\n', text)
        text = self.BLANK_RUN_PATTERN.sub('\n\n', text)
        text = self.HORIZONTAL_WS_PATTERN.sub(' ', text)

        return text.strip()

    def _remove_invisible_chars(self, text: str) -> str:
        """Remove zero-width and other invisible characters."""
        for char in self.INVISIBLE_CHARS:
            text = text.replace(char, '')
        return text


def normalize_text(
    text: Optional[str],
    normalize_unicode: bool = False,
    remove_invisible: bool = False
) -> str:
    """
    Convenience function for text normalization.

    Args:
        text: Input text
        normalize_unicode: Apply Unicode NFC normalization
        remove_invisible: Strip invisible characters

    Returns:
        Normalized text

    Example:
        >>> normalize_text("first  line\\r\\n\\r\\n\\r\\n\\tsecond")
        'first line\\n\\n second'
    """
    normalizer = TextNormalizer(
        normalize_unicode=normalize_unicode,
        remove_invisible=remove_invisible
    )
    return normalizer.normalize(text)
