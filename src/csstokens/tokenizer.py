"""CSSTokenizer - Main public interface for CSS tokenization.

Provides two tokenization methods:
- tokenize(): Strict tokenization, raises FormatError on invalid CSS
- tokenize_safe(): Safe tokenization, returns None on failure
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from csstokens.exceptions import TokenizationError
from csstokens.pipeline.classifier import Classifier
from csstokens.pipeline.comments import strip_comments
from csstokens.pipeline.grouping import Ruleset, RulesetGrouper
from csstokens.pipeline.normalizer import Normalizer, StylesheetNormalizer
from csstokens.pipeline.segmenter import Segmenter
from csstokens.pipeline.tokens import TOKEN_KINDS, Token, TokenKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TokenStream:
    """Ordered tokens of one tokenization run, with filtered views.

    Attributes:
        tokens: All tokens in source order.
    """

    tokens: tuple[Token, ...]

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def of_kind(self, kind: TokenKind) -> tuple[Token, ...]:
        """Tokens of a single kind, in source order.

        Raises:
            ValueError: If kind is not one of TOKEN_KINDS.
        """
        if kind not in TOKEN_KINDS:
            raise ValueError(f"Unknown token kind: {kind!r}")
        return tuple(token for token in self.tokens if token.kind == kind)

    def selectors(self) -> tuple[Token, ...]:
        return self.of_kind("SELECTOR")

    def declarations(self) -> tuple[Token, ...]:
        return self.of_kind("DECLARATION")

    def media_queries(self) -> tuple[Token, ...]:
        return self.of_kind("MEDIA_QUERY")

    def rulesets(self) -> tuple[Ruleset, ...]:
        """Selectors grouped with their declarations, one per closed selector block."""
        return RulesetGrouper().group(self.tokens)

    def rulesets_as_dicts(self) -> list[dict[str, str | list[str]]]:
        """Rulesets as plain dicts (`declarations` omitted when empty)."""
        return [ruleset.as_dict() for ruleset in self.rulesets()]


class CSSTokenizer:
    """Main class for turning CSS source into a flat token stream.

    The tokenization pipeline:
    1. Strip comments
    2. Normalize (validate, re-emit in canonical layout)
    3. Segment into logical lines
    4. Classify each logical line into zero, one or two tokens
    5. Flatten into one ordered stream

    Example:
        tokenizer = CSSTokenizer()

        # Strict tokenization (raises FormatError on invalid CSS)
        stream = tokenizer.tokenize(css_text)

        # Safe tokenization (returns None on failure)
        stream = tokenizer.tokenize_safe(css_text)
    """

    def __init__(
        self,
        *,
        normalizer: StylesheetNormalizer | None = None,
        strip_comments: bool = True,
    ) -> None:
        """Initialize the tokenizer.

        Args:
            normalizer: Normalizer to validate and canonicalize input.
                Defaults to the tinycss2-based Normalizer.
            strip_comments: If True, remove comments before normalizing.
        """
        self._normalizer: StylesheetNormalizer = normalizer if normalizer is not None else Normalizer()
        self._segmenter = Segmenter()
        self._classifier = Classifier()
        self._strip_comments = strip_comments

    def tokenize(self, css: str) -> TokenStream:
        """Tokenize CSS source.

        Args:
            css: Raw CSS text.

        Returns:
            TokenStream with all tokens in source order.

        Raises:
            FormatError: If the CSS is not syntactically valid.
        """
        # Step 1: Strip comments
        if self._strip_comments:
            css = strip_comments(css)

        # Step 2: Normalize
        normalized = self._normalizer.normalize(css)

        # Step 3: Segment
        segmented = self._segmenter.segment(normalized)

        # Step 4: Classify and flatten
        tokens: list[Token] = []
        for line in segmented.lines:
            tokens.extend(self._classifier.classify(line))

        logger.debug("Tokenized %d logical lines into %d tokens", len(segmented.lines), len(tokens))
        return TokenStream(tokens=tuple(tokens))

    def tokenize_safe(self, css: str) -> TokenStream | None:
        """Tokenize CSS source, returning None on failure.

        Args:
            css: Raw CSS text.

        Returns:
            TokenStream, or None if the CSS was rejected.
        """
        try:
            return self.tokenize(css)
        except TokenizationError as exc:
            logger.error("Tokenization failed: %s", exc)
            return None


_default_tokenizer = CSSTokenizer()


def tokenize(css: str) -> TokenStream:
    """Tokenize CSS source with the default CSSTokenizer.

    Raises:
        FormatError: If the CSS is not syntactically valid.
    """
    return _default_tokenizer.tokenize(css)
