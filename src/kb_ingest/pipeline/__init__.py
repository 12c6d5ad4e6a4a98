"""Ingestion components: document building and the store-facing pipeline."""

from .documents import build_documents
from .ingest import DocumentStore, IngestionError, IngestionPipeline

__all__ = [
    "build_documents",
    "DocumentStore",
    "IngestionError",
    "IngestionPipeline",
]
