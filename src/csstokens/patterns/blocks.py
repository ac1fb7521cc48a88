"""Block delimiter detection."""

import re

_CLOSING_BRACE_PATTERN = re.compile(r"^\}$")


def is_closing_brace_line(line: str) -> bool:
    """Check if a logical line is a lone closing brace, i.e. `}`."""
    return _CLOSING_BRACE_PATTERN.match(line) is not None
