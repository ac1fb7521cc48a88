"""CSS normalization ahead of segmentation.

Handles:
- Line ending normalization
- Syntax validation (unbalanced braces, unterminated strings, tinycss2 parse errors)
- Re-emission in a canonical layout, one construct start per line
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

import tinycss2
from tinycss2.ast import AtRule, Declaration, Node, QualifiedRule
from tinycss2.serializer import serialize_identifier

from csstokens.exceptions import FormatError

logger = logging.getLogger(__name__)

# At-rules whose block holds declarations
_DECLARATION_BLOCK_AT_RULES = frozenset(
    {
        "font-face",
        "page",
        "counter-style",
        "property",
        "font-palette-values",
        "viewport",
    }
)

# At-rules whose block holds nested rules
_RULE_BLOCK_AT_RULES = frozenset(
    {
        "media",
        "supports",
        "document",
        "layer",
        "container",
        "scope",
    }
)


@dataclass(frozen=True, slots=True)
class NormalizedStylesheet:
    """Result of normalizing a stylesheet.

    Attributes:
        text: Canonically formatted CSS, newline-terminated (empty if the
            input held no constructs).
        lines: Physical lines of `text` (without line endings).
    """

    text: str
    lines: tuple[str, ...]


class StylesheetNormalizer(Protocol):
    """Anything that can validate and canonicalize CSS for segmentation."""

    def normalize(self, css: str) -> NormalizedStylesheet: ...


class Normalizer:
    """Validates CSS and re-emits it in a canonical layout.

    The layout guarantees consumed by the segmenter:
    1. Every selector, at-rule and declaration starts a fresh line
    2. `{` ends the line of the construct it opens, `}` stands alone
    3. Every declaration ends with `;` at the end of a line
    4. Grouped selectors and top-level value lists are wrapped one item
       per line, each wrapped item ending with `,`
    """

    def __init__(self, *, indent_width: int = 2) -> None:
        """Initialize the normalizer.

        Args:
            indent_width: Number of spaces per nesting level.
        """
        if indent_width < 1:
            raise ValueError(f"indent_width must be positive, got {indent_width}")
        self._indent = " " * indent_width

    def normalize(self, css: str) -> NormalizedStylesheet:
        """Normalize CSS text.

        Args:
            css: CSS text, usually with comments already stripped.

        Returns:
            NormalizedStylesheet with the canonical text and its lines.

        Raises:
            FormatError: If the CSS is not syntactically valid.
        """
        css = css.replace("\r\n", "\n").replace("\r", "\n")

        _check_structure(css)

        rules = tinycss2.parse_stylesheet(css, skip_comments=True, skip_whitespace=True)
        writer = _LayoutWriter(css, self._indent)
        writer.write_stylesheet(rules)

        text = "\n".join(writer.lines)
        if text:
            text += "\n"

        logger.debug("Normalized %d top-level constructs into %d lines", len(rules), text.count("\n"))
        return NormalizedStylesheet(text=text, lines=tuple(text.splitlines()))


class _LayoutWriter:
    """Accumulates canonical output lines for one normalization run."""

    def __init__(self, source: str, indent: str) -> None:
        self._source = source
        self._indent = indent
        self.lines: list[str] = []

    def write_stylesheet(self, rules: Sequence[Node]) -> None:
        for index, rule in enumerate(rules):
            if index:
                self.lines.append("")
            self._write_rule(rule, 0)

    def _write_rule(self, rule: Node, depth: int, *, keyframes: bool = False) -> None:
        if isinstance(rule, QualifiedRule):
            self._write_qualified_rule(rule, depth, keyframes=keyframes)
        elif isinstance(rule, AtRule):
            self._write_at_rule(rule, depth)
        else:
            raise self._rejected(rule, "Expected a rule")

    def _write_qualified_rule(self, rule: QualifiedRule, depth: int, *, keyframes: bool = False) -> None:
        pad = self._indent * depth
        selectors = [self._render(group) for group in _split_on_commas(rule.prelude)]
        if keyframes:
            # from, to and percentages are case-insensitive keywords
            selectors = [selector.lower() for selector in selectors]
        if not all(selectors):
            raise _invalid(self._source, "Empty selector", rule.source_line, rule.source_column)

        self.lines.append(pad + (",\n" + pad).join(selectors) + " {")
        self._write_declarations(
            tinycss2.parse_declaration_list(rule.content, skip_comments=True, skip_whitespace=True),
            depth + 1,
        )
        self.lines.append(pad + "}")

    def _write_at_rule(self, rule: AtRule, depth: int) -> None:
        pad = self._indent * depth
        header = "@" + serialize_identifier(rule.lower_at_keyword)
        prelude = self._render(rule.prelude, prelude=True)
        if prelude:
            header += " " + prelude

        if rule.content is None:
            # Statement at-rule (@charset, @import, @namespace)
            self.lines.append(pad + header + ";")
            return

        self.lines.append(pad + header + " {")
        if _holds_rules(rule):
            for nested in tinycss2.parse_rule_list(rule.content, skip_comments=True, skip_whitespace=True):
                self._write_rule(nested, depth + 1, keyframes=rule.lower_at_keyword.endswith("keyframes"))
        else:
            self._write_declarations(
                tinycss2.parse_declaration_list(rule.content, skip_comments=True, skip_whitespace=True),
                depth + 1,
            )
        self.lines.append(pad + "}")

    def _write_declarations(self, nodes: Iterable[Node], depth: int) -> None:
        for node in nodes:
            if isinstance(node, Declaration):
                self._write_declaration(node, depth)
            elif isinstance(node, AtRule):
                self._write_at_rule(node, depth)
            else:
                raise self._rejected(node, "Expected a declaration")

    def _write_declaration(self, declaration: Declaration, depth: int) -> None:
        pad = self._indent * depth
        items = [self._render(group) for group in _split_on_commas(declaration.value)]
        value = (",\n" + pad + self._indent).join(items)
        if not value and not declaration.name.startswith("--"):
            raise _invalid(
                self._source,
                f"Missing value for property '{declaration.name}'",
                declaration.source_line,
                declaration.source_column,
            )

        important = " !important" if declaration.important else ""
        separator = ": " if value else ":"
        self.lines.append(f"{pad}{declaration.name}{separator}{value}{important};")

    def _render(self, nodes: Iterable[Node], *, prelude: bool = False, nested: bool = False) -> str:
        """Serialize component values with canonical spacing.

        Whitespace runs collapse to one space and are dropped at both ends.
        Commas are followed by one space. Inside the parentheses of an
        at-rule prelude, colons are followed by one space too.
        """
        pieces: list[str] = []
        space = False

        for node in nodes:
            if node.type in ("whitespace", "comment"):
                space = bool(pieces)
                continue
            if node.type == "error":
                raise self._rejected(node, "Invalid token")

            if node.type == "literal" and (node.value == "," or (prelude and nested and node.value == ":")):
                pieces.append(node.value)
                space = True
                continue

            if space:
                pieces.append(" ")
            space = False
            pieces.append(self._render_node(node, prelude=prelude))

        return "".join(pieces)

    def _render_node(self, node: Node, *, prelude: bool) -> str:
        if node.type == "function":
            return f"{serialize_identifier(node.name)}({self._render(node.arguments)})"
        if node.type == "() block":
            return f"({self._render(node.content, prelude=prelude, nested=True)})"
        if node.type == "[] block":
            return f"[{self._render(node.content)}]"
        if node.type == "{} block":
            return f"{{{self._render(node.content)}}}"
        return node.serialize()

    def _rejected(self, node: Node, fallback: str) -> FormatError:
        reason = node.message if node.type == "error" else f"{fallback}, got {node.type}"
        return _invalid(self._source, reason, node.source_line, node.source_column)


def _holds_rules(rule: AtRule) -> bool:
    """Whether an at-rule block contains nested rules rather than declarations."""
    name = rule.lower_at_keyword
    if name in _DECLARATION_BLOCK_AT_RULES:
        return False
    if name in _RULE_BLOCK_AT_RULES or name.endswith("keyframes"):
        return True
    return any(node.type == "{} block" for node in rule.content or ())


def _split_on_commas(nodes: Iterable[Node]) -> list[list[Node]]:
    """Split component values at top-level commas."""
    groups: list[list[Node]] = [[]]
    for node in nodes:
        if node.type == "literal" and node.value == ",":
            groups.append([])
        else:
            groups[-1].append(node)
    return groups


def _check_structure(css: str) -> None:
    """Reject unbalanced braces, unterminated strings and unterminated comments.

    tinycss2 silently closes blocks left open at end of input, so balance is
    verified on the raw text before parsing.

    Raises:
        FormatError: On the first structural problem found.
    """
    open_braces: list[int] = []
    quote: str | None = None
    quote_start = 0
    comment_start: int | None = None

    index = 0
    length = len(css)
    while index < length:
        char = css[index]

        if comment_start is not None:
            if css.startswith("*/", index):
                comment_start = None
                index += 1
        elif quote is not None:
            if char == "\\":
                index += 1
            elif char == quote:
                quote = None
            elif char == "\n":
                raise _invalid_at(css, "Unterminated string", quote_start)
        elif css.startswith("/*", index):
            comment_start = index
            index += 1
        elif char in "\"'":
            quote = char
            quote_start = index
        elif char == "\\":
            index += 1
        elif char == "{":
            open_braces.append(index)
        elif char == "}":
            if not open_braces:
                raise _invalid_at(css, "Unexpected '}'", index)
            open_braces.pop()

        index += 1

    if comment_start is not None:
        raise _invalid_at(css, "Unterminated comment", comment_start)
    if quote is not None:
        raise _invalid_at(css, "Unterminated string", quote_start)
    if open_braces:
        raise _invalid_at(css, "Unclosed block, expected '}'", open_braces[-1])


def _invalid_at(source: str, reason: str, offset: int) -> FormatError:
    line = source.count("\n", 0, offset) + 1
    column = offset - source.rfind("\n", 0, offset)
    return _invalid(source, reason, line, column)


def _invalid(source: str, reason: str, line: int | None, column: int | None) -> FormatError:
    logger.warning("Invalid CSS found: %s (line %s, column %s)", reason, line, column)
    return FormatError(reason=reason, line=line, column=column, context=_code_frame(source, line, column))


def _code_frame(source: str, line: int | None, column: int | None) -> str:
    """Render the offending source line with a caret under the column."""
    lines = source.split("\n")
    if line is None or not 1 <= line <= len(lines):
        return ""

    gutter = f"{line} | "
    frame = gutter + lines[line - 1]
    if column:
        frame += "\n" + " " * (len(gutter) + column - 1) + "^"
    return frame
