"""Tests for the Segmenter component."""

import pytest

from csstokens import Normalizer, Segmenter
from csstokens.pipeline.normalizer import NormalizedStylesheet
from csstokens.pipeline.segmenter import SegmentedStylesheet


def _segment(css: str) -> SegmentedStylesheet:
    """Helper to normalize and segment CSS."""
    normalizer = Normalizer()
    segmenter = Segmenter()
    return segmenter.segment(normalizer.normalize(css))


def _texts(result: SegmentedStylesheet) -> list[str]:
    return [line.text for line in result.lines]


class TestLogicalLines:
    """Logical line boundary tests."""

    def test_one_line_per_construct(self) -> None:
        result = _segment("a { color: red; margin: 0; }")

        assert _texts(result) == ["a {", "color: red;", "margin: 0;", "}"]

    def test_grouped_selectors_joined(self) -> None:
        """Selectors wrapped over several lines form one logical line."""
        result = _segment("h1, h2, h3 { margin: 0; }")

        assert _texts(result)[0] == "h1,h2,h3 {"

    def test_value_list_joined(self) -> None:
        """Wrapped value lists form one logical line."""
        result = _segment("a { transition: opacity 1s, color 2s; }")

        assert _texts(result)[1] == "transition: opacity 1s,color 2s;"

    def test_statement_at_rule(self) -> None:
        result = _segment('@charset "utf-8";')

        assert _texts(result) == ['@charset "utf-8";']

    def test_indentation_removed(self) -> None:
        """Nested constructs lose their indentation."""
        result = _segment("@media print { a { color: black; } }")

        assert _texts(result) == ["@media print {", "a {", "color: black;", "}", "}"]


class TestLineNumbering:
    """Logical line index tests."""

    def test_indices_contiguous(self) -> None:
        """Blank lines between rules do not consume an index."""
        result = _segment("a {}\n\n\nb {}")

        assert [line.index for line in result.lines] == [0, 1, 2, 3]
        assert [line.line_number for line in result.lines] == [1, 2, 3, 4]

    def test_empty_stylesheet(self) -> None:
        result = _segment("")

        assert result.lines == ()

    def test_pre_normalized_text(self) -> None:
        """The segmenter works on any text following the canonical layout."""
        segmenter = Segmenter()
        normalized = NormalizedStylesheet(
            text="ul,\nol {\n    list-style: none;\n}\n",
            lines=("ul,", "ol {", "    list-style: none;", "}"),
        )

        result = segmenter.segment(normalized)

        assert _texts(result) == ["ul,ol {", "list-style: none;", "}"]

    def test_only_text_is_read(self) -> None:
        """Segmentation depends on the normalized text alone."""
        segmenter = Segmenter()
        normalized = NormalizedStylesheet(text="a {\n  color: red;\n}\n", lines=())

        result = segmenter.segment(normalized)

        assert _texts(result) == ["a {", "color: red;", "}"]


class TestLogicalLineDataclass:
    """Tests for the LogicalLine dataclass."""

    def test_immutable(self) -> None:
        result = _segment("a {}")

        with pytest.raises(AttributeError):
            result.lines[0].text = "b {"  # type: ignore[misc]
