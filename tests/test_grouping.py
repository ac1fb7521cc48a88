"""Tests for the RulesetGrouper component."""

import pytest

from csstokens import Position, Ruleset, RulesetGrouper, Token, tokenize


def _token(kind: str, text: str, line: int) -> Token:
    return Token(kind=kind, text=text, position=Position(line=line))  # type: ignore[arg-type]


class TestRulesetGrouper:
    """Grouping a flat token stream into rulesets."""

    def test_single_ruleset(self) -> None:
        tokens = [
            _token("SELECTOR", "a", 1),
            Token(kind="BRACE_OPEN", text="{", position=Position(line=1, column=3)),
            _token("DECLARATION", "color: red;", 2),
            _token("BRACE_CLOSE", "}", 3),
        ]

        assert RulesetGrouper().group(tokens) == (Ruleset(selector="a", declarations=("color: red;",)),)

    def test_declarations_without_selector_ignored(self) -> None:
        """Declarations directly inside an at-rule are not grouped."""
        tokens = [
            _token("FONT_FACE", "@font-face", 1),
            _token("DECLARATION", "font-family: X;", 2),
            _token("BRACE_CLOSE", "}", 3),
        ]

        assert RulesetGrouper().group(tokens) == ()

    def test_closing_at_rule_block_emits_nothing(self) -> None:
        """The brace closing a media block does not emit a ruleset."""
        stream = tokenize("@media print { a { color: black; } }")

        assert stream.rulesets() == (Ruleset(selector="a", declarations=("color: black;",)),)

    def test_keyframe_selector_not_grouped(self) -> None:
        stream = tokenize("@keyframes spin { from { opacity: 0; } }")

        assert stream.rulesets() == ()

    def test_empty_rule(self) -> None:
        stream = tokenize("a {}")

        assert stream.rulesets() == (Ruleset(selector="a", declarations=()),)

    def test_emitted_in_closing_order(self) -> None:
        stream = tokenize("a { margin: 0; }\nb { padding: 0; }")

        assert [ruleset.selector for ruleset in stream.rulesets()] == ["a", "b"]

    def test_empty_stream(self) -> None:
        assert RulesetGrouper().group([]) == ()


class TestRulesetDataclass:
    """Tests for the Ruleset dataclass."""

    def test_as_dict(self) -> None:
        ruleset = Ruleset(selector="a", declarations=("color: red;", "margin: 0;"))

        assert ruleset.as_dict() == {"selector": "a", "declarations": ["color: red;", "margin: 0;"]}

    def test_as_dict_omits_empty_declarations(self) -> None:
        assert Ruleset(selector="a", declarations=()).as_dict() == {"selector": "a"}

    def test_immutable(self) -> None:
        ruleset = Ruleset(selector="a", declarations=())

        with pytest.raises(AttributeError):
            ruleset.selector = "b"  # type: ignore[misc]
