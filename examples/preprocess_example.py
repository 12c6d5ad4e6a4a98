"""
Example usage of text preprocessing (normalization and paragraph detection).

Demonstrates:
- Normalizing noisy extracted text
- Segmenting it into paragraphs
- Attaching positional metadata
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from kb_ingest.io import load_pdf
from kb_ingest.pipeline import build_documents
from kb_ingest.preprocess import ParagraphSegmenter, normalize_text


RAW_TEXT = (
    "Employee Handbook\r\n"
    "\r\n\r\n\r\n"
    "This handbook describes the policies   that apply to every\tmember\r\n"
    "of staff, including contractors working on site.\r\n"
    "1. Working hours are agreed with the team lead.\r\n"
    "2. Remote work requires prior approval.\r\n"
    "\r\n"
    "第一章 总则\r\n"
    "本手册适用于公司全体员工，包括试用期员工和实习生。\r\n"
    "\r\n"
    "- 12 -\r\n"
    "..............................\r\n"
)


def example_normalization():
    """Example of text normalization."""
    print("=" * 60)
    print("TEXT NORMALIZATION EXAMPLE")
    print("=" * 60)

    print("\nRAW TEXT:")
    print(repr(RAW_TEXT))

    normalized = normalize_text(RAW_TEXT)

    print("\nNORMALIZED TEXT:")
    print(repr(normalized))


def example_segmentation():
    """Example of paragraph segmentation."""
    print("\n" + "=" * 60)
    print("PARAGRAPH SEGMENTATION EXAMPLE")
    print("=" * 60)

    segmenter = ParagraphSegmenter()
    paragraphs = segmenter.segment(RAW_TEXT)

    print(f"\nOutput: {len(paragraphs)} paragraphs")
    for doc in build_documents(paragraphs, source="handbook.txt"):
        meta = doc.metadata
        print(f"  [{meta.paragraph_index + 1}/{meta.total_paragraphs}] {doc.content}")


def example_with_real_pdf():
    """Example with real PDF (if available)."""
    print("\n" + "=" * 60)
    print("PDF EXAMPLE")
    print("=" * 60)

    test_pdf = Path(__file__).parent.parent / "tests" / "fixtures" / "tiny.pdf"

    if not test_pdf.exists():
        print("\nNo test PDF found, skipping...")
        return

    extracted = load_pdf(test_pdf)
    print(f"\nLoaded {extracted.source}: {extracted.page_count} pages")

    paragraphs = ParagraphSegmenter().segment(extracted.text)
    print(f"  Segmented into {len(paragraphs)} paragraphs")
    for i, paragraph in enumerate(paragraphs[:3], 1):
        print(f"  {i}. {paragraph[:100]}")


def main():
    """Run all examples."""
    example_normalization()
    example_segmentation()
    example_with_real_pdf()


if __name__ == "__main__":
    main()
