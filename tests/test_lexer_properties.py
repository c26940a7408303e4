"""Property-based checks of lexer invariants."""
from hypothesis import given
from hypothesis import strategies as st

from minigo.lexer import scan
from minigo.token import KEYWORDS, TokenType

#no digits or quotes, so scanning cannot raise
SAFE_ALPHABET = "abfmtPrin_ =!<>&|:+-(){}[],;.*/%@\n\t"

identifiers = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,15}", fullmatch=True).filter(
    lambda text: text not in KEYWORDS
)


@given(st.text(alphabet=" \t\r\n"))
def test_whitespace_scans_to_eof_only(source: str) -> None:
    tokens = scan(source)
    assert [token.type for token in tokens] == [TokenType.EOF]


@given(identifiers)
def test_non_keyword_words_are_single_identifiers(word: str) -> None:
    tokens = scan(word)
    assert [(token.type, token.lexeme) for token in tokens] == [
        (TokenType.IDENTIFIER, word),
        (TokenType.EOF, ""),
    ]


@given(st.from_regex(r"[0-9]{1,20}", fullmatch=True))
def test_digit_runs_are_integers(digits: str) -> None:
    tokens = scan(digits)
    assert [(token.type, token.lexeme) for token in tokens] == [
        (TokenType.INTEGER, digits),
        (TokenType.EOF, ""),
    ]


@given(st.from_regex(r"[0-9]{1,8}", fullmatch=True), st.from_regex(r"[0-9]{1,8}", fullmatch=True))
def test_floats_keep_all_digits(whole: str, fraction: str) -> None:
    tokens = scan(f"{whole}.{fraction}")
    assert (tokens[0].type, tokens[0].lexeme) == (TokenType.FLOAT, whole + fraction)


#exactly one sentinel, always last
@given(st.text(alphabet=SAFE_ALPHABET, max_size=80))
def test_stream_ends_with_single_eof(source: str) -> None:
    tokens = scan(source)
    assert tokens[-1].type is TokenType.EOF
    assert sum(token.type is TokenType.EOF for token in tokens) == 1


#each identifier on its own line sits at column 1 of that line
@given(st.lists(identifiers, min_size=1, max_size=10))
def test_lines_are_counted_per_newline(words: list[str]) -> None:
    tokens = scan("\n".join(words))[:-1]
    assert [(token.line, token.column) for token in tokens] == [
        (index + 1, 1) for index in range(len(words))
    ]
