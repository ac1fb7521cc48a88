"""Grouping of a flat token stream into rulesets.

Walks the stream once, tracking the current selector and its declarations:
- SELECTOR sets the current selector
- DECLARATION joins the current ruleset, if a selector is set
- BRACE_CLOSE emits the current ruleset, if a selector is set, and resets
All other tokens are ignored, so declarations under keyframe selectors or
directly inside at-rules are not grouped.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from csstokens.pipeline.tokens import Token


@dataclass(frozen=True, slots=True)
class Ruleset:
    """A selector with its declarations.

    Attributes:
        selector: Selector text as tokenized.
        declarations: Declaration texts in source order.
    """

    selector: str
    declarations: tuple[str, ...]

    def as_dict(self) -> dict[str, str | list[str]]:
        """Return a plain dict, omitting `declarations` when there are none."""
        result: dict[str, str | list[str]] = {"selector": self.selector}
        if self.declarations:
            result["declarations"] = list(self.declarations)
        return result


@dataclass(slots=True)
class _GroupingState:
    selector: str | None = None
    declarations: list[str] = field(default_factory=list)


class RulesetGrouper:
    """Groups tokens into Ruleset records, one per closed selector block."""

    def group(self, tokens: Iterable[Token]) -> tuple[Ruleset, ...]:
        """Group a token stream into rulesets.

        Args:
            tokens: Tokens in source order.

        Returns:
            Rulesets in the order their blocks close.
        """
        rulesets: list[Ruleset] = []
        state = _GroupingState()

        for token in tokens:
            if token.kind == "SELECTOR":
                state.selector = token.text
            elif token.kind == "DECLARATION":
                if state.selector is not None:
                    state.declarations.append(token.text)
            elif token.kind == "BRACE_CLOSE":
                if state.selector is not None:
                    rulesets.append(Ruleset(selector=state.selector, declarations=tuple(state.declarations)))
                    state = _GroupingState()

        return tuple(rulesets)
