"""Text preprocessing: normalization and paragraph segmentation."""

from .normalizer import TextNormalizer, normalize_text
from .filters import ParagraphFilter
from .segmenter import ParagraphSegmenter, detect_paragraphs

__all__ = [
    "TextNormalizer",
    "normalize_text",
    "ParagraphFilter",
    "ParagraphSegmenter",
    "detect_paragraphs",
]
