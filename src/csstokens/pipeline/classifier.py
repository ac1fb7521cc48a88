"""Classification of logical lines into tokens.

Each logical line is matched against an ordered cascade of rules; the first
matching rule builds the line's tokens:
1. Closing brace
2. @media, @keyframes, @font-face, @charset, @supports
3. Declaration
4. Keyframe selector (from, to, single percentage)
5. Generic selector
Lines matching no rule produce no tokens.

Order matters: at-rule preludes can look like declarations, and keyframe
selectors also satisfy the generic selector pattern.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

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
from csstokens.pipeline.segmenter import LogicalLine
from csstokens.pipeline.tokens import Position, Token, TokenKind

logger = logging.getLogger(__name__)

# Trailing opening brace and the whitespace before it
_TRAILING_BRACE = re.compile(r"\s*\{$")

# Whitespace around the commas of a selector group
_COMMA_SPACING = re.compile(r"\s*,\s*")

_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class ClassificationRule:
    """One step of the classification cascade.

    Attributes:
        name: Short name used in debug logging.
        matches: Predicate over the logical line text.
        build: Builds the tokens for a matching line.
    """

    name: str
    matches: Callable[[str], bool]
    build: Callable[[LogicalLine], tuple[Token, ...]]


def opening_brace(line: LogicalLine) -> Token:
    """Synthesize the BRACE_OPEN token for a construct that opens a block.

    The column is the 1-based offset of the first `{` in the logical line,
    or 0 when the line carries no brace.
    """
    return Token(
        kind="BRACE_OPEN",
        text="{",
        position=Position(line=line.line_number, column=line.text.find("{") + 1),
    )


def _closing_brace(line: LogicalLine) -> tuple[Token, ...]:
    return (Token(kind="BRACE_CLOSE", text="}", position=Position(line=line.line_number)),)


def _block_at_rule(kind: TokenKind) -> Callable[[LogicalLine], tuple[Token, ...]]:
    """Build tokens for an at-rule that opens a block: the rule, then its brace."""

    def build(line: LogicalLine) -> tuple[Token, ...]:
        return (
            Token(kind=kind, text=_TRAILING_BRACE.sub("", line.text), position=Position(line=line.line_number)),
            opening_brace(line),
        )

    return build


def _charset(line: LogicalLine) -> tuple[Token, ...]:
    # Statement at-rule: no block, so no brace
    return (Token(kind="CHARSET", text=line.text, position=Position(line=line.line_number)),)


def _declaration(line: LogicalLine) -> tuple[Token, ...]:
    match = match_declaration(line.text)
    if match is None:
        return ()
    return (Token(kind="DECLARATION", text=match.group(0), position=Position(line=line.line_number)),)


def _keyframe_selector(line: LogicalLine) -> tuple[Token, ...]:
    return (
        Token(
            kind="KEYFRAME_SELECTOR",
            text=_TRAILING_BRACE.sub("", line.text),
            position=Position(line=line.line_number),
        ),
        opening_brace(line),
    )


def _selector(line: LogicalLine) -> tuple[Token, ...]:
    text = _TRAILING_BRACE.sub("", line.text)
    text = _COMMA_SPACING.sub(",", text)
    text = _WHITESPACE_RUN.sub(" ", text).strip()
    return (
        Token(kind="SELECTOR", text=text, position=Position(line=line.line_number)),
        opening_brace(line),
    )


RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule("closing-brace", is_closing_brace_line, _closing_brace),
    ClassificationRule("media-query", is_media_query_line, _block_at_rule("MEDIA_QUERY")),
    ClassificationRule("keyframes", is_keyframes_line, _block_at_rule("KEYFRAME")),
    ClassificationRule("font-face", is_font_face_line, _block_at_rule("FONT_FACE")),
    ClassificationRule("charset", is_charset_line, _charset),
    ClassificationRule("supports", is_supports_line, _block_at_rule("SUPPORTS")),
    ClassificationRule("declaration", is_declaration_line, _declaration),
    ClassificationRule("keyframe-selector", is_keyframe_selector_line, _keyframe_selector),
    ClassificationRule("selector", is_selector_line, _selector),
)


class Classifier:
    """Turns logical lines into tokens using an ordered rule cascade."""

    def __init__(self, rules: tuple[ClassificationRule, ...] = RULES) -> None:
        """Initialize the classifier.

        Args:
            rules: Cascade to evaluate, highest priority first.
        """
        self._rules = rules

    def classify(self, line: LogicalLine) -> tuple[Token, ...]:
        """Classify one logical line.

        Args:
            line: A logical line from the Segmenter.

        Returns:
            The tokens for the line: one for closing braces, declarations
            and @charset, two (construct, then BRACE_OPEN) for block
            openers, none when no rule matches.
        """
        for rule in self._rules:
            if rule.matches(line.text):
                return rule.build(line)

        logger.debug("Dropping unclassified line %d: %r", line.line_number, line.text)
        return ()
