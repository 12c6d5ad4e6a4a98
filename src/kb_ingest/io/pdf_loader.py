"""
PDF text extraction.

Uses PyMuPDF (fitz) to pull the plain text of every page plus the page
count. The text is returned raw; cleanup and paragraph detection happen in
kb_ingest.preprocess.
"""

from pathlib import Path
from typing import List, Union
import logging

import fitz  # PyMuPDF

from ..models import ExtractedText

logger = logging.getLogger(__name__)


class PDFLoadError(Exception):
    """Exception raised when PDF loading fails."""
    pass


class PDFLoader:
    """
    PDF text extractor.

    Produces one ExtractedText per document: page texts joined with a
    newline, the page count, and the file name as source.
    """

    def __init__(self, sort_blocks: bool = False):
        """
        Initialize PDF loader.

        Args:
            sort_blocks: Ask PyMuPDF to sort text blocks into reading order
                         (top-left to bottom-right) instead of content-stream order.
        """
        self.sort_blocks = sort_blocks

        logger.info(f"Initialized PDFLoader (sort_blocks={sort_blocks})")

    def load(self, pdf_path: Union[str, Path]) -> ExtractedText:
        """
        Load PDF and extract its text.

        Args:
            pdf_path: Path to PDF file

        Returns:
            ExtractedText with the full text and page count

        Raises:
            PDFLoadError: If PDF cannot be loaded or processed
        """
        pdf_path = Path(pdf_path)

        if not pdf_path.exists():
            raise PDFLoadError(f"PDF file not found: {pdf_path}")

        logger.info(f"Loading PDF: {pdf_path}")

        try:
            doc = fitz.open(pdf_path)
        except Exception as e:
            raise PDFLoadError(f"Failed to open PDF: {e}") from e

        return self._extract_document(doc, pdf_path.name)

    def load_from_bytes(
        self,
        pdf_bytes: bytes,
        filename: str = "document.pdf",
    ) -> ExtractedText:
        """
        Load PDF from bytes (e.g. an uploaded file).

        Args:
            pdf_bytes: PDF file bytes
            filename: Filename used as the source identifier

        Returns:
            ExtractedText with the full text and page count
        """
        logger.info(f"Loading PDF from bytes: {filename}")

        if not pdf_bytes:
            raise PDFLoadError(f"Empty PDF payload: {filename}")

        try:
            doc = fitz.open(stream=pdf_bytes, filetype="pdf")
        except Exception as e:
            raise PDFLoadError(f"Failed to open PDF from bytes: {e}") from e

        return self._extract_document(doc, filename)

    def _extract_document(self, doc, source: str) -> ExtractedText:
        """
        Extract text from an opened document and close it.

        Args:
            doc: PyMuPDF document object
            source: Source identifier stored on the result

        Returns:
            ExtractedText
        """
        page_texts: List[str] = []

        try:
            num_pages = len(doc)
            for page_num in range(num_pages):
                page = doc[page_num]
                page_texts.append(page.get_text("text", sort=self.sort_blocks))
        except Exception as e:
            raise PDFLoadError(f"Failed to extract text from {source}: {e}") from e
        finally:
            doc.close()

        text = "\n".join(page_texts)
        logger.info(f"Extracted {len(text)} chars from {num_pages} pages ({source})")

        return ExtractedText(text=text, page_count=num_pages, source=source)

    def get_page_count(self, pdf_path: Union[str, Path]) -> int:
        """
        Get number of pages in PDF without full extraction.

        Args:
            pdf_path: Path to PDF file

        Returns:
            Number of pages

        Raises:
            PDFLoadError: If PDF cannot be opened
        """
        try:
            doc = fitz.open(pdf_path)
        except Exception as e:
            raise PDFLoadError(f"Failed to get page count: {e}") from e

        try:
            return len(doc)
        finally:
            doc.close()

    def extract_page_text(self, pdf_path: Union[str, Path], page_num: int) -> str:
        """
        Extract raw text from a single page.

        Args:
            pdf_path: Path to PDF file
            page_num: Page number (1-indexed)

        Returns:
            Text content of the page
        """
        try:
            doc = fitz.open(pdf_path)
        except Exception as e:
            raise PDFLoadError(f"Failed to extract page {page_num}: {e}") from e

        try:
            if page_num < 1 or page_num > len(doc):
                raise PDFLoadError(
                    f"Invalid page number {page_num} (PDF has {len(doc)} pages)"
                )
            page = doc[page_num - 1]  # Convert to 0-indexed
            return page.get_text("text", sort=self.sort_blocks)
        finally:
            doc.close()


def load_pdf(
    pdf_path: Union[str, Path],
    sort_blocks: bool = False,
) -> ExtractedText:
    """
    Convenience function to load a PDF and extract its text.

    Args:
        pdf_path: Path to PDF file
        sort_blocks: Sort text blocks into reading order

    Returns:
        ExtractedText
    """
    loader = PDFLoader(sort_blocks=sort_blocks)
    return loader.load(pdf_path)
