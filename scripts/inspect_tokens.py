#!/usr/bin/env python
"""Inspect how a stylesheet moves through the tokenizer pipeline.

Usage:
    python scripts/inspect_tokens.py styles.css                     # Token table
    python scripts/inspect_tokens.py styles.css --stage normalized  # Canonical CSS
    python scripts/inspect_tokens.py styles.css --stage lines       # Logical lines
    python scripts/inspect_tokens.py styles.css --kind SELECTOR     # One token kind
    python scripts/inspect_tokens.py styles.css --rulesets --json   # Grouped rulesets
    cat styles.css | python scripts/inspect_tokens.py -
"""

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from csstokens.exceptions import FormatError
from csstokens.pipeline.comments import strip_comments
from csstokens.pipeline.normalizer import Normalizer
from csstokens.pipeline.segmenter import Segmenter
from csstokens.pipeline.tokens import TOKEN_KINDS, Token
from csstokens.tokenizer import CSSTokenizer


def read_source(path: str) -> str:
    """Read CSS from a file path, or stdin for '-'."""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def print_token_table(tokens: tuple[Token, ...]) -> None:
    """Print tokens as an aligned table."""
    print(f"  {'Line':>4} {'Col':>4}  {'Kind':<18}  Text")
    print(f"  {'-'*4} {'-'*4}  {'-'*18}  {'-'*50}")

    for token in tokens:
        column = "" if token.position.column is None else str(token.position.column)
        text_preview = token.text[:50] + "..." if len(token.text) > 50 else token.text
        print(f"  {token.line:>4} {column:>4}  {token.kind:<18}  {text_preview}")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("path", help="CSS file to inspect, or - for stdin")
    parser.add_argument(
        "--stage",
        choices=("normalized", "lines", "tokens"),
        default="tokens",
        help="Pipeline stage to show",
    )
    parser.add_argument("--kind", choices=TOKEN_KINDS, help="Only show tokens of this kind")
    parser.add_argument("--rulesets", action="store_true", help="Show grouped rulesets instead of tokens")
    parser.add_argument("--json", action="store_true", help="Emit JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    css = read_source(args.path)

    try:
        if args.stage == "normalized":
            print(Normalizer().normalize(strip_comments(css)).text, end="")
            return 0

        if args.stage == "lines":
            normalized = Normalizer().normalize(strip_comments(css))
            for line in Segmenter().segment(normalized).lines:
                print(f"{line.line_number:>4}  {line.text}")
            return 0

        stream = CSSTokenizer().tokenize(css)
    except FormatError as exc:
        print(f"Invalid CSS: {exc}", file=sys.stderr)
        if exc.context:
            print(exc.context, file=sys.stderr)
        return 1

    if args.rulesets:
        rulesets = stream.rulesets_as_dicts()
        if args.json:
            print(json.dumps(rulesets, indent=2, ensure_ascii=False))
        else:
            for ruleset in rulesets:
                print(ruleset["selector"])
                for declaration in ruleset.get("declarations", []):
                    print(f"    {declaration}")
        return 0

    tokens = stream.of_kind(args.kind) if args.kind else stream.tokens
    if args.json:
        print(json.dumps([token.as_tuple() for token in tokens], ensure_ascii=False))
    else:
        print_token_table(tokens)
        print()
        print(f"{len(tokens)} tokens")
    return 0


if __name__ == "__main__":
    sys.exit(main())
