"""minigo: lexer and recognizer for a small Go-like language subset."""

#makes package exports explicit for downstream imports
from . import ast, cli, errors, lexer, parser, source, symbols, token

__all__ = [
    "ast",
    "cli",
    "errors",
    "lexer",
    "parser",
    "source",
    "symbols",
    "token",
]
