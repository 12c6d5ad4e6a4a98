"""Attach positional metadata to segmented paragraphs."""

from typing import List, Optional, Sequence

from ..models import Document, DocumentMetadata


def build_documents(
    paragraphs: Sequence[str],
    source: Optional[str] = None,
    page_count: Optional[int] = None,
) -> List[Document]:
    """
    Wrap paragraphs into store-ready documents.

    Args:
        paragraphs: Ordered paragraphs from the segmenter
        source: Source filename or identifier (passed through)
        page_count: Page count of the source (passed through)

    Returns:
        One Document per paragraph, indexed by position; ids are left for the store
    """
    total = len(paragraphs)
    return [
        Document(
            content=content,
            metadata=DocumentMetadata(
                source=source,
                paragraph_index=index,
                page_count=page_count,
                total_paragraphs=total,
            ),
        )
        for index, content in enumerate(paragraphs)
    ]
