"""Lexical analysis for the minigo language subset."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final, List, Optional

from .errors import MalformedFloatLiteral, SourceLocation, SourceSpan, UnterminatedStringLiteral
from .token import KEYWORDS, PRINT_FUNCTION, PRINT_PACKAGE, TEXT_TO_TYPE, Token, TokenType

logger = logging.getLogger(__name__)

#characters that stand for a token on their own
SINGLE_CHAR_TOKENS: Final[dict[str, TokenType]] = {char: TEXT_TO_TYPE[char] for char in "(){}[],;.*/%"}

#first char -> (second char, two-char type, type when the second char is absent)
#a missing fallback means the lone first char is not a token of the language
TWO_CHAR_TOKENS: Final[dict[str, tuple[str, TokenType, Optional[TokenType]]]] = {
    "=": ("=", TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "!": ("=", TokenType.BANG_EQUAL, None),
    "<": ("=", TokenType.LESS_EQUAL, TokenType.LESS),
    ">": ("=", TokenType.GREATER_EQUAL, TokenType.GREATER),
    "&": ("&", TokenType.AND_AND, None),
    "|": ("|", TokenType.OR_OR, None),
    ":": ("=", TokenType.COLON_EQUAL, TokenType.COLON),
    "+": ("+", TokenType.PLUS_PLUS, TokenType.PLUS),
    "-": ("-", TokenType.MINUS_MINUS, TokenType.MINUS),
}

WHITESPACE: Final[str] = " \r\t\n\f\v"


#transforms raw characters into a stream of tokens consumed by the parser
@dataclass(slots=True)
class Lexer:
    """Single forward scan over ``source``.

    Every consumed character advances the column by one, except a tab which
    advances it by ``tab_width`` and a newline which starts a new line at
    column 1. Tokens are positioned at their first character.
    """

    source: str
    tab_width: int = 1
    _length: int = field(init=False)
    _index: int = field(init=False, default=0)
    _line: int = field(init=False, default=1)
    _column: int = field(init=False, default=1)

    def __post_init__(self) -> None:
        if self.tab_width < 1:
            raise ValueError("tab_width must be at least 1")
        self._length = len(self.source)
        self._index = 0
        self._line = 1
        self._column = 1

    def lex(self) -> List[Token]:
        tokens: List[Token] = []
        while not self._is_at_end():
            self._skip_whitespace()
            if self._is_at_end():
                break

            start_loc = self._current_location()
            start_index = self._index
            char = self._advance()

            if char.isalpha() or char == "_":
                token = self._identifier(start_loc, start_index)
                if token is not None:
                    tokens.append(token)
                continue

            if char.isdecimal():
                tokens.append(self._number(start_loc, start_index))
                continue

            if char == '"':
                tokens.append(self._string(start_loc))
                continue

            tokens.append(self._operator(char, start_loc, start_index))

        eof_loc = self._current_location()
        tokens.append(Token(TokenType.EOF, TokenType.EOF.text, SourceSpan.at(eof_loc)))
        return tokens

    # Internal helpers -------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._index >= self._length

    def _current_location(self) -> SourceLocation:
        return SourceLocation(line=self._line, column=self._column)

    def _advance(self) -> str:
        char = self.source[self._index]
        self._index += 1
        if char == "\n":
            self._line += 1
            self._column = 1
        elif char == "\t":
            self._column += self.tab_width
        else:
            self._column += 1
        return char

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self._index]

    def _match(self, expected: str) -> bool:
        if self._is_at_end():
            return False
        if self.source[self._index] != expected:
            return False
        self._advance()
        return True

    def _skip_whitespace(self) -> None:
        while not self._is_at_end() and self._peek() in WHITESPACE:
            self._advance()

    def _read_while_alnum(self, allow_underscore: bool) -> None:
        while True:
            char = self._peek()
            if char.isalpha() or char.isdecimal() or (allow_underscore and char == "_"):
                self._advance()
            else:
                break

    def _read_digits(self) -> str:
        start_index = self._index
        while self._peek().isdecimal():
            self._advance()
        return self.source[start_index:self._index]

    def _make_token(self, token_type: TokenType, lexeme: str, start: SourceLocation) -> Token:
        end = self._current_location()
        return Token(token_type, lexeme, SourceSpan(start=start, end=end))

    #maximal munch: the whole run is classified, so `variable` never yields `var`
    def _identifier(self, start: SourceLocation, start_index: int) -> Optional[Token]:
        self._read_while_alnum(allow_underscore=True)
        lexeme = self.source[start_index:self._index]
        if lexeme == PRINT_PACKAGE and self._peek() == ".":
            return self._builtin_call(start, start_index)
        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)
        return self._make_token(token_type, lexeme, start)

    #folds `fmt.Print` into one token; any other `fmt.<name>` is consumed and dropped
    def _builtin_call(self, start: SourceLocation, start_index: int) -> Optional[Token]:
        self._advance()  # consume '.'
        name_index = self._index
        self._read_while_alnum(allow_underscore=False)
        if self.source[name_index:self._index] == PRINT_FUNCTION:
            return self._make_token(TokenType.PRINT, TokenType.PRINT.text, start)
        logger.warning(
            "dropped unsupported builtin %r at Line: %d, Column: %d",
            self.source[start_index:self._index],
            start.line,
            start.column,
        )
        return None

    #the decimal point is not kept: `123.45` yields the lexeme `12345`
    def _number(self, start: SourceLocation, start_index: int) -> Token:
        integer_part = self.source[start_index:self._index] + self._read_digits()
        if self._peek() != ".":
            return self._make_token(TokenType.INTEGER, integer_part, start)
        self._advance()
        fractional_part = self._read_digits()
        if not fractional_part:
            raise MalformedFloatLiteral(SourceSpan.at(self._current_location()))
        return self._make_token(TokenType.FLOAT, integer_part + fractional_part, start)

    #string contents are taken verbatim; there are no escape sequences
    def _string(self, start: SourceLocation) -> Token:
        content_index = self._index
        while not self._is_at_end() and self._peek() != '"':
            self._advance()
        if self._is_at_end():
            raise UnterminatedStringLiteral(SourceSpan.at(self._current_location()))
        content = self.source[content_index:self._index]
        self._advance()  # closing quote
        return self._make_token(TokenType.STRING_LITERAL, content, start)

    def _operator(self, char: str, start: SourceLocation, start_index: int) -> Token:
        single = SINGLE_CHAR_TOKENS.get(char)
        if single is not None:
            return self._make_token(single, char, start)

        pair = TWO_CHAR_TOKENS.get(char)
        if pair is not None:
            second, double, fallback = pair
            if self._match(second):
                return self._make_token(double, self.source[start_index:self._index], start)
            if fallback is not None:
                return self._make_token(fallback, char, start)

        return self._make_token(TokenType.UNKNOWN, char, start)


#convenience wrapper for callers that do not need a Lexer instance
def scan(source: str, tab_width: int = 1) -> List[Token]:
    return Lexer(source, tab_width=tab_width).lex()
