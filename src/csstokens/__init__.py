"""csstokens - Convert CSS source into a flat stream of typed tokens."""

from csstokens.exceptions import FormatError, TokenizationError
from csstokens.pipeline import (
    RULES,
    ClassificationRule,
    Classifier,
    LogicalLine,
    NormalizedStylesheet,
    Normalizer,
    Position,
    Ruleset,
    RulesetGrouper,
    SegmentedStylesheet,
    Segmenter,
    StylesheetNormalizer,
    TOKEN_KINDS,
    Token,
    TokenKind,
    strip_comments,
)
from csstokens.tokenizer import CSSTokenizer, TokenStream, tokenize

__version__ = "0.1.0"

__all__ = [
    "ClassificationRule",
    "Classifier",
    "CSSTokenizer",
    "FormatError",
    "LogicalLine",
    "NormalizedStylesheet",
    "Normalizer",
    "Position",
    "RULES",
    "Ruleset",
    "RulesetGrouper",
    "SegmentedStylesheet",
    "Segmenter",
    "StylesheetNormalizer",
    "strip_comments",
    "Token",
    "TOKEN_KINDS",
    "TokenKind",
    "TokenizationError",
    "TokenStream",
    "tokenize",
]
