"""Selector line detection.

Keyframe selectors are anchored at the start of the line, so a class
selector such as `.from {` or `.to {` is never taken for the `from`/`to`
keyframe keywords and falls through to the generic selector pattern.
"""

import re

# from {, to {, 0% { .. 100% {
_KEYFRAME_SELECTOR_PATTERN = re.compile(r"^from\s+\{|^to\s+\{|^\d{1,3}%\s+\{")

# a.link {, or a grouped selector continued with a comma: h1,
_SELECTOR_PATTERN = re.compile(r".+\{|.+,")


def is_keyframe_selector_line(line: str) -> bool:
    """Check if a logical line opens a single keyframe selector block.

    Comma-separated lists of keyframe selectors (`0%,50% {`) do not match
    and are classified as generic selectors.

    Args:
        line: A single logical line.

    Returns:
        True if the line is `from {`, `to {` or a single percentage.
    """
    return _KEYFRAME_SELECTOR_PATTERN.match(line) is not None


def is_selector_line(line: str) -> bool:
    """Check if a logical line opens a rule block or continues a selector group."""
    return _SELECTOR_PATTERN.search(line) is not None
