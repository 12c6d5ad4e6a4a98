"""
Core data models for kb-ingest.

All models use Pydantic for validation and JSON serialization.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


# ============================================================================
# Extraction Models
# ============================================================================

class ExtractedText(BaseModel):
    """Full text of one source document, as produced by the PDF loader."""

    text: str = Field(..., description="Extracted text (raw, not normalized)")
    page_count: int = Field(0, ge=0, description="Number of pages in the source")
    source: Optional[str] = Field(None, description="Source filename or identifier")

    model_config = {
        "json_schema_extra": {
            "example": {
                "text": "Chapter 1\nIntroduction to the handbook...",
                "page_count": 12,
                "source": "handbook.pdf",
            }
        }
    }


# ============================================================================
# Document Models
# ============================================================================

class DocumentMetadata(BaseModel):
    """Positional metadata attached to a paragraph before storage."""

    source: Optional[str] = Field(None, description="Source filename or identifier")
    paragraph_index: int = Field(..., ge=0, description="Zero-based position of the paragraph")
    page_count: Optional[int] = Field(None, ge=0, description="Page count of the source document")
    total_paragraphs: int = Field(..., ge=1, description="Number of paragraphs in the source")

    model_config = {
        "json_schema_extra": {
            "example": {
                "source": "handbook.pdf",
                "paragraph_index": 3,
                "page_count": 12,
                "total_paragraphs": 48,
            }
        }
    }

    @field_validator("total_paragraphs")
    @classmethod
    def validate_index_in_range(cls, total: int, info):
        index = info.data.get("paragraph_index")
        if index is not None and index >= total:
            raise ValueError("paragraph_index must be < total_paragraphs")
        return total


class Document(BaseModel):
    """A paragraph ready to be handed to the document store."""

    id: Optional[str] = Field(None, description="Identifier assigned by the store")
    content: str = Field(..., description="Paragraph text")
    metadata: DocumentMetadata

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Document content must not be empty")
        return v


class IngestResult(BaseModel):
    """Summary of one ingestion run."""

    source: Optional[str] = Field(None, description="Source filename or identifier")
    paragraphs: int = Field(..., ge=0, description="Number of paragraphs stored")
    document_ids: List[str] = Field(default_factory=list, description="Identifiers returned by the store")

    model_config = {
        "json_schema_extra": {
            "example": {
                "source": "handbook.pdf",
                "paragraphs": 2,
                "document_ids": ["5f0c...", "9a1e..."],
            }
        }
    }
