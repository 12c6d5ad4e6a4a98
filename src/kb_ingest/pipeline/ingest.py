from pathlib import Path
from typing import List, Optional, Protocol, Union
import logging

from ..config import Config
from ..io.pdf_loader import PDFLoader, PDFLoadError
from ..models import Document, ExtractedText, IngestResult
from ..preprocess.segmenter import ParagraphSegmenter
from .documents import build_documents

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    """Exception raised when a document cannot be ingested."""
    pass


class DocumentStore(Protocol):
    """
    External document store (embeddings + vector index live behind it).

    Receives documents in paragraph order and returns one identifier per
    document, in the same order.
    """

    def add_documents(self, documents: List[Document]) -> List[str]:
        ...


class IngestionPipeline:
    """
    High-level orchestrator.

    - extract text from PDF (PDFLoader)
    - segment it into paragraphs (ParagraphSegmenter)
    - attach positional metadata
    - hand documents to the injected store

    The store is constructed by the caller and passed in; the pipeline keeps
    no global client state.
    """

    def __init__(
        self,
        store: DocumentStore,
        segmenter: Optional[ParagraphSegmenter] = None,
        loader: Optional[PDFLoader] = None,
        config: Optional[Config] = None,
    ):
        self.config = config or Config()
        self.store = store
        self.segmenter = segmenter or ParagraphSegmenter.from_config(self.config.segmenter)
        self.loader = loader or PDFLoader(sort_blocks=self.config.pdf.sort_blocks)

    def prepare_text(
        self,
        text: str,
        source: Optional[str] = None,
        page_count: Optional[int] = None,
    ) -> List[Document]:
        """Segment text and build documents without storing them."""
        paragraphs = self.segmenter.segment(text)
        return build_documents(paragraphs, source=source, page_count=page_count)

    def ingest_text(
        self,
        text: str,
        source: Optional[str] = None,
        page_count: Optional[int] = None,
    ) -> IngestResult:
        """
        Segment text and store its paragraphs.

        Zero paragraphs is a valid outcome: nothing is stored and an empty
        result is returned.

        Raises:
            IngestionError: If the store rejects the documents
        """
        documents = self.prepare_text(text, source=source, page_count=page_count)

        if not documents:
            logger.warning("No paragraphs found in %s, nothing stored", source or "<text>")
            return IngestResult(source=source, paragraphs=0, document_ids=[])

        try:
            ids = self.store.add_documents(documents)
        except Exception as e:
            raise IngestionError(f"Failed to ingest {source or '<text>'}: {e}") from e

        if len(ids) != len(documents):
            raise IngestionError(
                f"Failed to ingest {source or '<text>'}: store returned "
                f"{len(ids)} ids for {len(documents)} documents"
            )

        logger.info("Stored %d paragraphs from %s", len(ids), source or "<text>")
        return IngestResult(source=source, paragraphs=len(documents), document_ids=list(ids))

    def ingest_extracted(self, extracted: ExtractedText) -> IngestResult:
        return self.ingest_text(
            extracted.text,
            source=extracted.source,
            page_count=extracted.page_count,
        )

    def ingest_pdf(self, pdf_path: Union[str, Path]) -> IngestResult:
        """
        Extract, segment and store one PDF file.

        Raises:
            IngestionError: If the PDF cannot be read or the store fails
        """
        pdf_path = Path(pdf_path)
        try:
            extracted = self.loader.load(pdf_path)
        except PDFLoadError as e:
            raise IngestionError(f"Failed to ingest {pdf_path.name}: {e}") from e

        return self.ingest_extracted(extracted)

    def ingest_pdf_bytes(self, pdf_bytes: bytes, filename: str) -> IngestResult:
        """
        Extract, segment and store an in-memory PDF (e.g. an upload).

        Raises:
            IngestionError: If the PDF cannot be read or the store fails
        """
        try:
            extracted = self.loader.load_from_bytes(pdf_bytes, filename=filename)
        except PDFLoadError as e:
            raise IngestionError(f"Failed to ingest {filename}: {e}") from e

        return self.ingest_extracted(extracted)
