"""Token definitions for the minigo language subset."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Final

from .errors import SourceSpan


#enumerates every lexical category produced by the lexer
class TokenType(Enum):
    # Keywords
    VAR = auto()
    FUNC = auto()
    IF = auto()
    ELSE = auto()
    FOR = auto()
    RETURN = auto()
    RANGE = auto()
    LEN = auto()
    PRINT = auto()

    # Primitive type names
    INT = auto()
    FLOAT32 = auto()
    STRING = auto()
    BOOL = auto()

    # Boolean literals
    TRUE = auto()
    FALSE = auto()

    # Arithmetic operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    PERCENT = auto()

    # Comparison operators
    EQUAL_EQUAL = auto()
    BANG_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()

    # Logical operators
    AND_AND = auto()
    OR_OR = auto()

    # Assignment, increment and decrement
    EQUAL = auto()
    COLON_EQUAL = auto()
    PLUS_PLUS = auto()
    MINUS_MINUS = auto()

    # Delimiters
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    COMMA = auto()
    SEMICOLON = auto()
    COLON = auto()
    DOT = auto()

    # Literals and identifiers
    IDENTIFIER = auto()
    INTEGER = auto()
    FLOAT = auto()
    STRING_LITERAL = auto()

    EOF = auto()
    UNKNOWN = auto()

    @property
    def text(self) -> str:
        """Canonical surface text of this token type."""

        return CANONICAL_TEXT[self]


#one canonical spelling per token type, used for default lexemes and diagnostics
CANONICAL_TEXT: Final[dict[TokenType, str]] = {
    TokenType.VAR: "var",
    TokenType.FUNC: "func",
    TokenType.IF: "if",
    TokenType.ELSE: "else",
    TokenType.FOR: "for",
    TokenType.RETURN: "return",
    TokenType.RANGE: "range",
    TokenType.LEN: "len",
    TokenType.PRINT: "fmt.Print",
    TokenType.INT: "int",
    TokenType.FLOAT32: "float32",
    TokenType.STRING: "string",
    TokenType.BOOL: "bool",
    TokenType.TRUE: "true",
    TokenType.FALSE: "false",
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.STAR: "*",
    TokenType.SLASH: "/",
    TokenType.PERCENT: "%",
    TokenType.EQUAL_EQUAL: "==",
    TokenType.BANG_EQUAL: "!=",
    TokenType.LESS: "<",
    TokenType.LESS_EQUAL: "<=",
    TokenType.GREATER: ">",
    TokenType.GREATER_EQUAL: ">=",
    TokenType.AND_AND: "&&",
    TokenType.OR_OR: "||",
    TokenType.EQUAL: "=",
    TokenType.COLON_EQUAL: ":=",
    TokenType.PLUS_PLUS: "++",
    TokenType.MINUS_MINUS: "--",
    TokenType.LEFT_PAREN: "(",
    TokenType.RIGHT_PAREN: ")",
    TokenType.LEFT_BRACE: "{",
    TokenType.RIGHT_BRACE: "}",
    TokenType.LEFT_BRACKET: "[",
    TokenType.RIGHT_BRACKET: "]",
    TokenType.COMMA: ",",
    TokenType.SEMICOLON: ";",
    TokenType.COLON: ":",
    TokenType.DOT: ".",
    TokenType.IDENTIFIER: "identifier",
    TokenType.INTEGER: "integer",
    TokenType.FLOAT: "float",
    TokenType.STRING_LITERAL: '"',
    TokenType.EOF: "",
    TokenType.UNKNOWN: "unknown",
}

TEXT_TO_TYPE: Final[dict[str, TokenType]] = {text: kind for kind, text in CANONICAL_TEXT.items()}

KEYWORD_TYPES: Final[frozenset[TokenType]] = frozenset(
    {
        TokenType.VAR,
        TokenType.FUNC,
        TokenType.IF,
        TokenType.ELSE,
        TokenType.FOR,
        TokenType.RETURN,
        TokenType.RANGE,
        TokenType.LEN,
        TokenType.PRINT,
    }
)

PRIMITIVE_TYPES: Final[frozenset[TokenType]] = frozenset(
    {TokenType.INT, TokenType.FLOAT32, TokenType.STRING, TokenType.BOOL}
)

BOOLEAN_LITERALS: Final[frozenset[TokenType]] = frozenset({TokenType.TRUE, TokenType.FALSE})

#words the lexer resolves by exact match after scanning a full identifier run;
#`fmt.Print` is excluded since an identifier run never contains a dot
KEYWORDS: Final[dict[str, TokenType]] = {
    CANONICAL_TEXT[kind]: kind
    for kind in KEYWORD_TYPES | PRIMITIVE_TYPES | BOOLEAN_LITERALS
    if kind is not TokenType.PRINT
}

#the package/function pair the lexer folds into a single PRINT token
PRINT_PACKAGE: Final[str] = "fmt"
PRINT_FUNCTION: Final[str] = "Print"


#encapsulates the lexeme string, token kind and span
@dataclass(frozen=True, slots=True)
class Token:
    type: TokenType
    lexeme: str
    span: SourceSpan

    @property
    def line(self) -> int:
        return self.span.start.line

    @property
    def column(self) -> int:
        return self.span.start.column

    def __str__(self) -> str:
        return f"[{self.type.name}] '{self.lexeme}' at Line: {self.line}, Column: {self.column}"

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Token({self.type}, {self.lexeme!r}, {self.span})"
