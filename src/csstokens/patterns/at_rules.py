"""At-rule line detection.

Block at-rules must end with the `{` that opens their block. @charset is a
statement and ends with `;` instead.
"""

import re

# @media (min-width: 300px) {
_MEDIA_QUERY_PATTERN = re.compile(r"^@media.+\{$")

# @keyframes bounce {  (vendor-prefixed forms included)
_KEYFRAMES_PATTERN = re.compile(r"^@(-[a-z]+-)?keyframes.+\{$")

# @font-face {
_FONT_FACE_PATTERN = re.compile(r"^@font-face.+\{$")

# @charset "UTF-8";
_CHARSET_PATTERN = re.compile(r"^@charset.*;$")

# @supports (display: flex) {
_SUPPORTS_PATTERN = re.compile(r"^@supports.+\{$")


def is_media_query_line(line: str) -> bool:
    """Check if a logical line opens a @media block."""
    return _MEDIA_QUERY_PATTERN.match(line) is not None


def is_keyframes_line(line: str) -> bool:
    """Check if a logical line opens a @keyframes block."""
    return _KEYFRAMES_PATTERN.match(line) is not None


def is_font_face_line(line: str) -> bool:
    """Check if a logical line opens a @font-face block."""
    return _FONT_FACE_PATTERN.match(line) is not None


def is_charset_line(line: str) -> bool:
    """Check if a logical line is a @charset statement."""
    return _CHARSET_PATTERN.match(line) is not None


def is_supports_line(line: str) -> bool:
    """Check if a logical line opens a @supports block."""
    return _SUPPORTS_PATTERN.match(line) is not None
