"""Command-line entry point for minigo."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .errors import MinigoError
from .lexer import Lexer
from .parser import Parser
from .source import read_source
from .symbols import SymbolTable
from .token import Token

logger = logging.getLogger(__name__)


#lexes a source file honoring the shared `--tab-width` option
def scan_file(args: argparse.Namespace) -> List[Token]:
    source = read_source(args.source)
    return Lexer(source, tab_width=args.tab_width).lex()


#handles the `minigo tokens` subcommand
def cmd_tokens(args: argparse.Namespace) -> int:
    for token in scan_file(args):
        print(token)
    return 0


#handles the `minigo parse` subcommand, printing the final symbol table
def cmd_parse(args: argparse.Namespace) -> int:
    tokens = scan_file(args)
    symbols = SymbolTable()
    Parser(tokens, symbols).parse()
    logger.info("parsed %s: %d variable(s) declared", args.source, len(symbols))
    for symbol in symbols:
        if symbol.value is None:
            print(f"{symbol.name}: {symbol.type}")
        else:
            print(f"{symbol.name}: {symbol.type} = {symbol.value}")
    return 0


#stderr logging; DEBUG exposes the parser's trace lines
def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


#configures the CLI surface across tokens/parse
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minigo", description="minigo front-end tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="log parser trace lines")
    parser.add_argument(
        "--tab-width",
        type=int,
        default=1,
        help="columns a tab character advances (default: 1)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_tokens = subparsers.add_parser("tokens", help="dump the token stream of a source file")
    p_tokens.add_argument("source", help="path to source file")
    p_tokens.set_defaults(func=cmd_tokens)

    p_parse = subparsers.add_parser("parse", help="validate a source file and print its symbol table")
    p_parse.add_argument("source", help="path to source file")
    p_parse.set_defaults(func=cmd_parse)

    return parser


#entry point used by both console script and module execution
def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.tab_width < 1:
        parser.error("--tab-width must be at least 1")
    configure_logging(args.verbose)
    try:
        return args.func(args)
    except MinigoError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
