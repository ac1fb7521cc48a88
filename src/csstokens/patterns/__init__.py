"""Pattern databases for CSS logical line classification."""

from csstokens.patterns.at_rules import (
    is_charset_line,
    is_font_face_line,
    is_keyframes_line,
    is_media_query_line,
    is_supports_line,
)
from csstokens.patterns.blocks import is_closing_brace_line
from csstokens.patterns.declarations import is_declaration_line, match_declaration
from csstokens.patterns.selectors import is_keyframe_selector_line, is_selector_line

__all__ = [
    "is_charset_line",
    "is_closing_brace_line",
    "is_declaration_line",
    "is_font_face_line",
    "is_keyframe_selector_line",
    "is_keyframes_line",
    "is_media_query_line",
    "is_selector_line",
    "is_supports_line",
    "match_declaration",
]
