"""Exceptions for csstokens tokenization."""

from dataclasses import dataclass


class TokenizationError(Exception):
    """Base exception for all tokenization errors."""

    pass


@dataclass
class FormatError(TokenizationError):
    """CSS input was rejected as syntactically invalid.

    Raised by the normalizer before any token is produced, so a failed
    tokenization never yields a partial token stream.

    Attributes:
        reason: Human-readable description of the problem.
        line: 1-based source line of the problem, if known.
        column: 1-based source column of the problem, if known.
        context: Code frame showing the offending source line and a caret.
    """

    reason: str
    line: int | None = None
    column: int | None = None
    context: str = ""

    def __str__(self) -> str:
        if self.line is None:
            return self.reason
        if self.column is None:
            return f"{self.reason} (line {self.line})"
        return f"{self.reason} (line {self.line}, column {self.column})"
