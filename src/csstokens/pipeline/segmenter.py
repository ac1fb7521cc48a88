"""Segmentation of normalized CSS into logical lines.

A logical line is the text up to and including a line-terminal `{`, `;`
or `}`. Constructs that the normalizer wrapped over several physical lines
(grouped selectors, comma-separated value lists) become one logical line.
"""

import logging
import re
from dataclasses import dataclass

from csstokens.pipeline.normalizer import NormalizedStylesheet

logger = logging.getLogger(__name__)

# Zero-width boundary right after a `{`, `;` or `}` that ends a physical line
_LOGICAL_LINE_BOUNDARY = re.compile(r"(?<=[{;}])$", re.MULTILINE)

# A newline and the indentation that follows it
_LINE_BREAK = re.compile(r"\n\s*")


@dataclass(frozen=True, slots=True)
class LogicalLine:
    """One classifiable unit of CSS.

    Attributes:
        text: Line text with embedded line breaks removed.
        index: Zero-based position among non-blank logical lines.
    """

    text: str
    index: int

    @property
    def line_number(self) -> int:
        """1-based line number used in token positions."""
        return self.index + 1


@dataclass(frozen=True, slots=True)
class SegmentedStylesheet:
    """Result of segmentation.

    Attributes:
        lines: Logical lines in source order.
    """

    lines: tuple[LogicalLine, ...]


class Segmenter:
    """Splits normalized CSS into logical lines.

    Blank chunks are discarded before numbering, so blank source lines never
    consume a line number.
    """

    def segment(self, normalized: NormalizedStylesheet) -> SegmentedStylesheet:
        """Split normalized CSS into logical lines.

        Args:
            normalized: Output from the Normalizer component.

        Returns:
            SegmentedStylesheet with contiguous, zero-based line indices.
        """
        lines: list[LogicalLine] = []

        for chunk in _LOGICAL_LINE_BOUNDARY.split(normalized.text):
            text = _LINE_BREAK.sub("", chunk).strip()
            if not text:
                continue
            lines.append(LogicalLine(text=text, index=len(lines)))

        logger.debug("Segmented %d physical lines into %d logical lines", normalized.text.count("\n"), len(lines))
        return SegmentedStylesheet(lines=tuple(lines))
