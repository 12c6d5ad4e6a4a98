"""I/O utilities for kb-ingest."""

from .pdf_loader import PDFLoader, PDFLoadError, load_pdf

__all__ = [
    "PDFLoader",
    "PDFLoadError",
    "load_pdf",
]
