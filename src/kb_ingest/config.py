"""Configuration models."""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class NormalizerConfig(BaseModel):
    """Optional extra cleanup applied before whitespace normalization."""

    normalize_unicode: bool = Field(False, description="Apply Unicode NFC normalization")
    remove_invisible: bool = Field(False, description="Strip zero-width and soft-hyphen characters")


class SegmenterConfig(BaseModel):
    """Paragraph segmentation heuristics."""

    short_line_max: int = Field(20, ge=1, description="Lines shorter than this may be headings")
    long_line_min: int = Field(40, ge=0, description="Previous line must be longer than this for the heading rule")
    min_paragraph_length: int = Field(10, ge=0, description="Paragraphs shorter than this are dropped")
    max_repeated_chars: int = Field(
        10, ge=1, description="A character repeated more than this many extra times marks noise"
    )
    normalizer: NormalizerConfig = Field(default_factory=NormalizerConfig)

    model_config = {
        "json_schema_extra": {
            "example": {
                "short_line_max": 20,
                "long_line_min": 40,
                "min_paragraph_length": 10,
                "max_repeated_chars": 10,
                "normalizer": {"normalize_unicode": False, "remove_invisible": False}
            }
        }
    }


class PDFConfig(BaseModel):
    """PDF text extraction configuration."""

    sort_blocks: bool = Field(False, description="Sort text blocks into reading order")


class Config(BaseSettings):
    """Main application configuration."""

    segmenter: SegmenterConfig = Field(default_factory=SegmenterConfig)
    pdf: PDFConfig = Field(default_factory=PDFConfig)

    output_dir: str = Field("output", description="Output directory for results")

    model_config = {
        "env_prefix": "KB_",
        "env_nested_delimiter": "__",
        "json_schema_extra": {
            "example": {
                "segmenter": {"min_paragraph_length": 10},
                "pdf": {"sort_blocks": False},
                "output_dir": "output"
            }
        }
    }
