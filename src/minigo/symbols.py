"""Flat symbol table populated by variable declarations."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Iterator, Optional

from .errors import DuplicateSymbol, SourceSpan, UndefinedSymbol

logger = logging.getLogger(__name__)


#the literal categories a declaration may be initialized with
class LiteralKind(Enum):
    INTEGER = auto()
    FLOAT = auto()
    STRING = auto()
    BOOLEAN = auto()


#tagged literal value; `text` is the token lexeme as scanned
@dataclass(frozen=True, slots=True)
class Literal:
    kind: LiteralKind
    text: str

    def __str__(self) -> str:
        return self.text


#one declared variable; `value` is None when the declaration has no initializer
@dataclass(frozen=True, slots=True)
class Symbol:
    name: str
    type: str
    value: Optional[Literal] = None


class SymbolTable:
    """Maps variable names to their declared type and optional literal value.

    There is a single namespace: block statements declare into the same table
    as the top level. Entries are never updated or removed.
    """

    def __init__(self) -> None:
        self._symbols: Dict[str, Symbol] = {}

    def add_variable(
        self,
        name: str,
        type_name: str,
        value: Optional[Literal] = None,
        span: Optional[SourceSpan] = None,
    ) -> Symbol:
        if name in self._symbols:
            raise DuplicateSymbol(name, span)
        symbol = Symbol(name=name, type=type_name, value=value)
        self._symbols[name] = symbol
        logger.debug("Added variable to symbol table: Name = %s, Type = %s, Value = %s", name, type_name, value)
        return symbol

    def get_variable(self, name: str, span: Optional[SourceSpan] = None) -> Symbol:
        symbol = self._symbols.get(name)
        if symbol is None:
            raise UndefinedSymbol(name, span)
        return symbol

    def contains(self, name: str) -> bool:
        return name in self._symbols

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    #declaration order
    def __iter__(self) -> Iterator[Symbol]:
        return iter(list(self._symbols.values()))
