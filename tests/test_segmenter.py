"""Tests for paragraph segmenter."""

import types

import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from kb_ingest.config import SegmenterConfig, NormalizerConfig
from kb_ingest.preprocess import ParagraphSegmenter, detect_paragraphs


@pytest.fixture
def segmenter():
    return ParagraphSegmenter()


class TestSegmenterInit:
    """Tests for ParagraphSegmenter construction."""

    def test_initialization(self):
        """Test default thresholds."""
        segmenter = ParagraphSegmenter()
        assert segmenter.short_line_max == 20
        assert segmenter.long_line_min == 40
        assert segmenter.paragraph_filter.min_length == 10
        assert segmenter.paragraph_filter.max_repeated_chars == 10

    def test_from_config(self):
        """Test building from SegmenterConfig."""
        config = SegmenterConfig(
            short_line_max=15,
            long_line_min=60,
            min_paragraph_length=25,
            normalizer=NormalizerConfig(remove_invisible=True),
        )
        segmenter = ParagraphSegmenter.from_config(config)

        assert segmenter.short_line_max == 15
        assert segmenter.long_line_min == 60
        assert segmenter.paragraph_filter.min_length == 25
        assert segmenter.normalizer.remove_invisible is True


class TestLineGrouping:
    """Tests for the grouping stage (no filtering)."""

    def test_blank_line_boundary(self, segmenter):
        """Test blank line separates paragraphs."""
        assert list(segmenter.group_lines("A.\n\nB.")) == ["A.", "B."]

    def test_blank_lines_never_content(self, segmenter):
        """Test leading/trailing/repeated blank lines emit nothing."""
        assert list(segmenter.group_lines("\n\nOne\n\n\n\nTwo\n\n")) == ["One", "Two"]

    def test_empty_text(self, segmenter):
        assert list(segmenter.group_lines("")) == []

    def test_terminated_line_starts_new_paragraph(self, segmenter):
        """Test sentence-ending accumulator triggers a boundary."""
        text = "First sentence ends here.\nSecond sentence starts anew."
        assert list(segmenter.group_lines(text)) == [
            "First sentence ends here.",
            "Second sentence starts anew.",
        ]

    def test_cjk_terminator(self, segmenter):
        """Test full-width terminators act like ASCII ones."""
        text = "这是第一句话。\n这是第二句话！"
        assert list(segmenter.group_lines(text)) == ["这是第一句话。", "这是第二句话！"]

    def test_soft_wrap_joined(self, segmenter):
        """Test unterminated lines are joined with one space."""
        text = "a sentence that is\nwrapped over\nthree lines"
        assert list(segmenter.group_lines(text)) == [
            "a sentence that is wrapped over three lines"
        ]

    def test_bullet_lines(self, segmenter):
        """Test each bullet starts a paragraph."""
        text = "• first bullet\n• second bullet\n- third bullet\n* fourth bullet"
        assert list(segmenter.group_lines(text)) == [
            "• first bullet",
            "• second bullet",
            "- third bullet",
            "* fourth bullet",
        ]

    def test_short_line_after_long_line(self, segmenter):
        """Test the heading heuristic keeps the heading on its own."""
        text = (
            "This line is deliberately longer than forty characters total\n"
            "Short heading\n"
            "More body text follows here after the heading."
        )
        assert list(segmenter.group_lines(text)) == [
            "This line is deliberately longer than forty characters total",
            "Short heading",
            "More body text follows here after the heading.",
        ]

    def test_chapter_heading(self, segmenter):
        """Test CJK chapter heading is split from the text around it."""
        text = "这是前言部分的内容介绍了本文件的背景\n第一章 总则\n本章规定了适用范围和基本原则。"
        assert list(segmenter.group_lines(text)) == [
            "这是前言部分的内容介绍了本文件的背景",
            "第一章 总则",
            "本章规定了适用范围和基本原则。",
        ]

    def test_terminated_line_after_heading_not_joined(self, segmenter):
        """Test a sentence line never completes a trigger-opened paragraph."""
        assert list(segmenter.group_lines("第一章 总则\n本章规定了适用范围和基本原则。")) == [
            "第一章 总则",
            "本章规定了适用范围和基本原则。",
        ]
        assert list(segmenter.group_lines("- bullet without stop\nNext sentence is complete.")) == [
            "- bullet without stop",
            "Next sentence is complete.",
        ]

    def test_terminated_line_completes_wrapped_run(self, segmenter):
        """Test a sentence line still closes soft-wrapped lines before it."""
        text = "Intro sentence.\nthe wrapped part\ngoes on\nand ends here."
        assert list(segmenter.group_lines(text)) == [
            "Intro sentence.",
            "the wrapped part goes on and ends here.",
        ]

    def test_unterminated_line_after_heading_continues(self, segmenter):
        """Test soft-wrap joining still applies after a heading."""
        text = "第一章 总则\n本章规定了适用范围\n和基本原则。"
        assert list(segmenter.group_lines(text)) == [
            "第一章 总则 本章规定了适用范围 和基本原则。",
        ]

    def test_line_before_structural_marker_stands_alone(self, segmenter):
        """Test a wrapped line followed by a marker is not joined."""
        text = (
            "The scope of this policy covers\n"
            "all regional offices\n"
            "第二章 Definitions used below"
        )
        assert list(segmenter.group_lines(text)) == [
            "The scope of this policy covers",
            "all regional offices",
            "第二章 Definitions used below",
        ]

    def test_no_heuristic_fires(self, segmenter):
        """Test text without breaks stays one paragraph."""
        lines = ["word " * 5 + "and more words here"] * 4
        result = list(segmenter.group_lines("\n".join(lines)))
        assert len(result) == 1

    def test_custom_heading_thresholds(self):
        """Test thresholds are tunable."""
        text = "a body line of thirty characters\nShort title"
        assert list(ParagraphSegmenter().group_lines(text)) == [
            "a body line of thirty characters Short title"
        ]
        assert list(ParagraphSegmenter(long_line_min=25).group_lines(text)) == [
            "a body line of thirty characters",
            "Short title",
        ]


class TestSegment:
    """Tests for the full normalize -> group -> filter pipeline."""

    def test_continuation_joining(self, segmenter):
        """Test a soft-wrapped sentence becomes one paragraph."""
        text = "This is a long line that continues\nonto the next line without punctuation."
        assert segmenter.segment(text) == [
            "This is a long line that continues onto the next line without punctuation."
        ]

    def test_list_marker_boundary(self, segmenter):
        """Test numbered items are split out."""
        text = "Intro text.\n1. First item\n2. Second item"
        assert segmenter.segment(text) == ["Intro text.", "1. First item", "2. Second item"]

    def test_short_paragraphs_filtered(self, segmenter):
        """Test grouping output is filtered for length."""
        assert segmenter.segment("A.\n\nB.") == []

    def test_noise_filtering(self, segmenter):
        """Test page numbers and ruler lines are dropped."""
        text = "This is a valid paragraph with enough length.\n\n42\n\n----------------"
        assert segmenter.segment(text) == ["This is a valid paragraph with enough length."]

    def test_dotted_leader_dropped(self, segmenter):
        """Test table-of-contents leaders are treated as noise."""
        text = "Introduction ............... 5\n\nThe introduction explains the purpose."
        assert segmenter.segment(text) == ["The introduction explains the purpose."]

    @pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n", "\r\n \r\n", None])
    def test_empty_input(self, segmenter, text):
        """Test empty or whitespace-only input yields no paragraphs."""
        assert segmenter.segment(text) == []

    def test_normalization_applied(self, segmenter):
        """Test mixed line endings and whitespace runs are cleaned."""
        text = "Paragraph   one\r\ncontinues here.\r\n\r\n\r\n\r\nParagraph\ttwo is here."
        assert segmenter.segment(text) == [
            "Paragraph one continues here.",
            "Paragraph two is here.",
        ]

    def test_order_and_content_preserved(self, segmenter):
        """Test no words are lost or reordered for clean input."""
        text = (
            "The first paragraph talks about onboarding\n"
            "and the documents new staff must sign.\n"
            "\n"
            "Security training is mandatory for everyone.\n"
            "1. Complete the online module.\n"
            "2. Pass the final quiz with 80 percent.\n"
            "\n"
            "第一章 总则与适用范围说明\n"
            "本手册适用于公司全体员工，包括实习生。"
        )
        paragraphs = segmenter.segment(text)

        assert " ".join(paragraphs).split() == text.split()
        assert paragraphs[0].startswith("The first paragraph")
        assert paragraphs[-1].endswith("包括实习生。")

    def test_paragraphs_trimmed_and_non_empty(self, segmenter):
        text = "  Leading spaces on this line.  \n\n\t Tabbed paragraph content here. "
        for paragraph in segmenter.segment(text):
            assert paragraph
            assert paragraph == paragraph.strip()

    def test_iter_paragraphs_is_lazy(self, segmenter):
        """Test the streaming variant yields the same result."""
        text = "First paragraph here.\n\nSecond paragraph here."
        iterator = segmenter.iter_paragraphs(text)

        assert isinstance(iterator, types.GeneratorType)
        assert next(iterator) == "First paragraph here."
        assert list(iterator) == ["Second paragraph here."]

    def test_min_length_configurable(self):
        """Test shorter paragraphs survive a lower minimum."""
        segmenter = ParagraphSegmenter(min_paragraph_length=2)
        assert segmenter.segment("A.\n\nB.") == ["A.", "B."]

    def test_repeated_run_configurable(self):
        text = "Signature: xxxxxx of the applicant"
        assert ParagraphSegmenter().segment(text) == [text]
        assert ParagraphSegmenter(max_repeated_chars=4).segment(text) == []


class TestConvenienceFunction:
    """Tests for detect_paragraphs convenience function."""

    def test_detect_paragraphs(self):
        result = detect_paragraphs("First paragraph here.\n\nSecond paragraph here.")
        assert result == ["First paragraph here.", "Second paragraph here."]

    def test_detect_paragraphs_options(self):
        assert detect_paragraphs("Short.\n\nTiny.") == []
        assert detect_paragraphs("Short.\n\nTiny.", min_paragraph_length=5) == ["Short.", "Tiny."]
