"""
Script to segment a PDF or text file into knowledge-base paragraphs.

Usage:
    python scripts/segment_document.py --input path/to/handbook.pdf
    python scripts/segment_document.py --input notes.txt --output out.json --min-length 20
"""

import argparse
import sys
from pathlib import Path
import json

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from kb_ingest.config import Config
from kb_ingest.io import PDFLoader, PDFLoadError
from kb_ingest.models import ExtractedText
from kb_ingest.pipeline import build_documents
from kb_ingest.preprocess import ParagraphSegmenter
from kb_ingest.utils import setup_logging


def load_input(input_path: Path, config: Config) -> ExtractedText:
    """Read a PDF through PyMuPDF, anything else as UTF-8 text."""
    if input_path.suffix.lower() == ".pdf":
        loader = PDFLoader(sort_blocks=config.pdf.sort_blocks)
        return loader.load(input_path)

    text = input_path.read_text(encoding="utf-8")
    return ExtractedText(text=text, page_count=0, source=input_path.name)


def main():
    parser = argparse.ArgumentParser(
        description="Segment a document into paragraphs"
    )
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Path to input PDF or text file"
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Path to output JSON (default: <output_dir>/<input_name>_paragraphs.json)"
    )
    parser.add_argument(
        "--min-length",
        type=int,
        help="Minimum paragraph length (overrides KB_SEGMENTER__MIN_PARAGRAPH_LENGTH)"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write logs to this file (e.g. output/segment.log)"
    )

    args = parser.parse_args()

    setup_logging(level=args.log_level, log_file=args.log_file)

    if not args.input.exists():
        print(f"Error: input file not found: {args.input}")
        sys.exit(1)

    config = Config()
    if args.min_length is not None:
        config.segmenter.min_paragraph_length = args.min_length

    try:
        extracted = load_input(args.input, config)
    except PDFLoadError as e:
        print(f"Error: {e}")
        sys.exit(1)

    segmenter = ParagraphSegmenter.from_config(config.segmenter)
    paragraphs = segmenter.segment(extracted.text)
    documents = build_documents(
        paragraphs,
        source=extracted.source,
        page_count=extracted.page_count or None,
    )

    if args.output:
        output_path = args.output
    else:
        output_dir = Path(config.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path = output_dir / f"{args.input.stem}_paragraphs.json"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps([doc.model_dump() for doc in documents], indent=2, ensure_ascii=False),
        encoding="utf-8",
    )

    print("-" * 60)
    print(f"  Source: {extracted.source}")
    print(f"  Pages: {extracted.page_count}")
    print(f"  Paragraphs: {len(documents)}")
    for doc in documents[:5]:
        preview = doc.content[:70] + ("..." if len(doc.content) > 70 else "")
        print(f"    [{doc.metadata.paragraph_index}] {preview}")
    if len(documents) > 5:
        print(f"    ... {len(documents) - 5} more")
    print(f"\nOutput saved to: {output_path}")


if __name__ == "__main__":
    main()
