"""Common error and source span utilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .token import TokenType


#where a token starts or where the lexer cursor stood when an error fired
@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Line and column, both counted from 1; tabs count per the lexer tab width."""

    line: int
    column: int

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.line}:{self.column}"


#first and one-past-last position of a token or a grammar production
@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source range covered by a token or node; errors report only ``start``."""

    start: SourceLocation
    end: SourceLocation

    @classmethod
    def at(cls, location: SourceLocation) -> "SourceSpan":
        """Zero-width span used for lexer errors and the EOF token."""

        return cls(start=location, end=location)

    def merge(self, other: "SourceSpan") -> "SourceSpan":
        """Grow this span to include ``other``, e.g. a keyword plus its closing brace."""

        if (self.start.line, self.start.column) <= (other.start.line, other.start.column):
            start = self.start
        else:
            start = other.start

        if (self.end.line, self.end.column) >= (other.end.line, other.end.column):
            end = self.end
        else:
            end = other.end
        return SourceSpan(start=start, end=end)

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.start}-{self.end}"


#the CLI catches this one type and reports it on stderr
class MinigoError(Exception):
    """Base class for minigo errors.

    ``message`` is the bare diagnostic; ``str(error)`` appends the start
    position of ``span`` in the ``at Line: L, Column: C`` form used by the
    token dump.
    """

    def __init__(self, message: str, span: Optional[SourceSpan] = None) -> None:
        self.message = message
        self.span = span
        super().__init__(self._render())

    @property
    def line(self) -> Optional[int]:
        return self.span.start.line if self.span is not None else None

    @property
    def column(self) -> Optional[int]:
        return self.span.start.column if self.span is not None else None

    def _render(self) -> str:
        if self.span is None:
            return self.message
        start = self.span.start
        return f"{self.message} at Line: {start.line}, Column: {start.column}"


# Lexical errors -----------------------------------------------------------------


#scanning stops at the first of these; no partial token is kept
class LexError(MinigoError):
    """A number or string literal that cannot be completed."""

    def __init__(self, message: str, span: SourceSpan) -> None:
        super().__init__(message, span)


class MalformedFloatLiteral(LexError):
    """A decimal point was not followed by any fractional digits."""

    def __init__(self, span: SourceSpan) -> None:
        super().__init__("malformed float literal", span)


class UnterminatedStringLiteral(LexError):
    """End of input was reached before the closing quote."""

    def __init__(self, span: SourceSpan) -> None:
        super().__init__("unterminated string literal", span)


# Syntax and symbol errors -------------------------------------------------------


#grammar and symbol-table failures; the first one aborts the whole parse
class ParseError(MinigoError):
    """Carries the position of the offending token when one is known."""


#a statement started with a token no production accepts
class UnexpectedToken(ParseError):
    pass


#a production required a specific token kind that was not there
class MissingExpectedToken(ParseError):
    def __init__(self, expected: "TokenType", message: str, span: SourceSpan) -> None:
        super().__init__(message, span)
        self.expected = expected


#variables live in a single flat namespace so a second declaration is fatal
class DuplicateSymbol(ParseError):
    def __init__(self, name: str, span: Optional[SourceSpan] = None) -> None:
        super().__init__(f"variable '{name}' is already defined", span)
        self.name = name


class UndefinedSymbol(ParseError):
    def __init__(self, name: str, span: Optional[SourceSpan] = None) -> None:
        super().__init__(f"variable '{name}' is not defined", span)
        self.name = name


# Source loading errors ----------------------------------------------------------


#the reader rejects inputs before they ever reach the lexer
class SourceError(MinigoError):
    """Raised when a source file cannot be supplied to the front end."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class SourceNotFoundError(SourceError):
    def __init__(self, path: str) -> None:
        super().__init__(f"source file not found: expected it at '{path}'", path)


class EmptySourceError(SourceError):
    def __init__(self, path: str) -> None:
        super().__init__(f"empty source file: {path}", path)
