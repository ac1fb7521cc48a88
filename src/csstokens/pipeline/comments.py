"""Comment stripping ahead of normalization."""

import re

# Non-greedy so adjacent comments are removed separately
_COMMENT_PATTERN = re.compile(r"/\*[\s\S]*?\*/")


def strip_comments(css: str) -> str:
    """Remove all `/* ... */` comments from CSS text.

    Newlines inside a removed comment are kept so that line numbers reported
    for the remaining text still match the caller's source.

    Args:
        css: Raw CSS text.

    Returns:
        CSS text without comments.
    """
    return _COMMENT_PATTERN.sub(lambda match: "\n" * match.group(0).count("\n"), css)
