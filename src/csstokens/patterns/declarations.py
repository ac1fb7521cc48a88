"""Declaration line detection."""

import re

# At least two characters ahead of a terminating semicolon, e.g.
# `background-color: rgba(0, 0, 0, .1);`
_DECLARATION_PATTERN = re.compile(r".\S*[^\n]+\s*;")


def match_declaration(line: str) -> re.Match[str] | None:
    """Find the declaration within a logical line.

    The match runs from the first character of the line through its last
    semicolon.

    Args:
        line: A single logical line.

    Returns:
        The match, or None if the line holds no declaration.
    """
    return _DECLARATION_PATTERN.search(line)


def is_declaration_line(line: str) -> bool:
    """Check if a logical line holds a declaration."""
    return match_declaration(line) is not None
