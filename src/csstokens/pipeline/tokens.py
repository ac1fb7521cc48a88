"""Token model shared by the tokenizer pipeline.

Token kinds:
- BRACE_OPEN: `{` opening a selector or at-rule block
- BRACE_CLOSE: `}` closing a block
- MEDIA_QUERY: `@media (min-width: 300px)`
- KEYFRAME: `@keyframes bounce`
- KEYFRAME_SELECTOR: `from`, `to`, `0%` .. `100%`
- FONT_FACE: `@font-face`
- CHARSET: `@charset "utf-8";`
- SUPPORTS: `@supports (display: flex)`
- DECLARATION: `color: red;`
- SELECTOR: `a.link`, `h1,h2`
"""

from dataclasses import dataclass
from typing import Literal

TokenKind = Literal[
    "BRACE_OPEN",
    "BRACE_CLOSE",
    "MEDIA_QUERY",
    "KEYFRAME",
    "KEYFRAME_SELECTOR",
    "FONT_FACE",
    "CHARSET",
    "SUPPORTS",
    "DECLARATION",
    "SELECTOR",
]

TOKEN_KINDS: tuple[TokenKind, ...] = (
    "BRACE_OPEN",
    "BRACE_CLOSE",
    "MEDIA_QUERY",
    "KEYFRAME",
    "KEYFRAME_SELECTOR",
    "FONT_FACE",
    "CHARSET",
    "SUPPORTS",
    "DECLARATION",
    "SELECTOR",
)


@dataclass(frozen=True, slots=True)
class Position:
    """Source location of a token.

    Attributes:
        line: 1-based logical line number.
        column: 1-based column of `{` within its logical line.
            Only set for BRACE_OPEN tokens.
    """

    line: int
    column: int | None = None

    def as_tuple(self) -> tuple[int, ...]:
        """Return `(line,)` or `(line, column)`."""
        if self.column is None:
            return (self.line,)
        return (self.line, self.column)


@dataclass(frozen=True, slots=True)
class Token:
    """A single classified CSS construct.

    Attributes:
        kind: One of TOKEN_KINDS.
        text: Canonical text of the construct (selector, at-rule prelude,
            full declaration, or the brace character).
        position: Where the construct appears in the normalized source.
    """

    kind: TokenKind
    text: str
    position: Position

    @property
    def line(self) -> int:
        """Logical line number of the token."""
        return self.position.line

    def as_tuple(self) -> tuple[TokenKind, str, tuple[int, ...]]:
        """Return the token as a `(kind, text, position)` triple."""
        return (self.kind, self.text, self.position.as_tuple())
