"""
kb-ingest

Paragraph segmentation of PDF-extracted text for a retrieval knowledge
base: normalization, heuristic boundary detection and noise filtering,
plus a thin pipeline that hands the paragraphs to an external store.
"""

__version__ = "0.1.0"

# Core models - convenient imports
from .models import (
    ExtractedText,
    DocumentMetadata,
    Document,
    IngestResult,
)

# Segmentation
from .preprocess import TextNormalizer, ParagraphSegmenter, normalize_text, detect_paragraphs

# I/O utilities
from .io import PDFLoader, PDFLoadError, load_pdf

__all__ = [
    # Models
    "ExtractedText",
    "DocumentMetadata",
    "Document",
    "IngestResult",
    # Segmentation
    "TextNormalizer",
    "ParagraphSegmenter",
    "normalize_text",
    "detect_paragraphs",
    # I/O
    "PDFLoader",
    "PDFLoadError",
    "load_pdf",
]
