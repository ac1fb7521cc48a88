"""Pipeline components for CSS tokenization."""

from csstokens.pipeline.classifier import RULES, ClassificationRule, Classifier
from csstokens.pipeline.comments import strip_comments
from csstokens.pipeline.grouping import Ruleset, RulesetGrouper
from csstokens.pipeline.normalizer import NormalizedStylesheet, Normalizer, StylesheetNormalizer
from csstokens.pipeline.segmenter import LogicalLine, SegmentedStylesheet, Segmenter
from csstokens.pipeline.tokens import TOKEN_KINDS, Position, Token, TokenKind

__all__ = [
    "ClassificationRule",
    "Classifier",
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
]
