"""Tests for logical line patterns."""

from csstokens.patterns import (
    is_charset_line,
    is_closing_brace_line,
    is_declaration_line,
    is_font_face_line,
    is_keyframe_selector_line,
    is_keyframes_line,
    is_media_query_line,
    is_selector_line,
    is_supports_line,
    match_declaration,
)


class TestBlockPatterns:
    """Closing brace detection."""

    def test_lone_brace(self) -> None:
        assert is_closing_brace_line("}") is True

    def test_brace_with_content(self) -> None:
        assert is_closing_brace_line("a {}") is False
        assert is_closing_brace_line("}}") is False


class TestAtRulePatterns:
    """At-rule detection."""

    def test_media(self) -> None:
        assert is_media_query_line("@media screen {") is True
        assert is_media_query_line("@media screen") is False

    def test_keyframes(self) -> None:
        assert is_keyframes_line("@keyframes spin {") is True
        assert is_keyframes_line("@-moz-keyframes spin {") is True
        assert is_keyframes_line("@keyframes spin") is False

    def test_font_face(self) -> None:
        assert is_font_face_line("@font-face {") is True
        assert is_font_face_line("@font-face") is False

    def test_charset(self) -> None:
        assert is_charset_line('@charset "utf-8";') is True
        assert is_charset_line('@charset "utf-8"') is False

    def test_supports(self) -> None:
        assert is_supports_line("@supports (display: grid) {") is True
        assert is_supports_line("@supports {") is True
        assert is_supports_line("@supports") is False


class TestDeclarationPatterns:
    """Declaration detection."""

    def test_simple(self) -> None:
        assert is_declaration_line("color: red;") is True

    def test_requires_semicolon(self) -> None:
        assert is_declaration_line("color: red") is False

    def test_too_short(self) -> None:
        """A lone semicolon is not a declaration."""
        assert is_declaration_line(";") is False

    def test_match_spans_to_last_semicolon(self) -> None:
        match = match_declaration("margin: 0; padding: 0; trailing")

        assert match is not None
        assert match.group(0) == "margin: 0; padding: 0;"


class TestSelectorPatterns:
    """Selector detection."""

    def test_keyframe_keywords(self) -> None:
        assert is_keyframe_selector_line("from {") is True
        assert is_keyframe_selector_line("to {") is True
        assert is_keyframe_selector_line("100% {") is True

    def test_keyframe_rejects_non_keywords(self) -> None:
        assert is_keyframe_selector_line(".from {") is False
        assert is_keyframe_selector_line("fromage {") is False
        assert is_keyframe_selector_line("1000% {") is False
        assert is_keyframe_selector_line("0%,100% {") is False

    def test_selector(self) -> None:
        assert is_selector_line("a.link {") is True
        assert is_selector_line("h1,") is True

    def test_selector_needs_brace_or_comma(self) -> None:
        assert is_selector_line("a.link") is False
        assert is_selector_line("{") is False
