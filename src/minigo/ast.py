"""Recognition tree nodes emitted by the minigo parser.

The tree mirrors the grammar one node per production. It is passive data:
nothing in the package evaluates it, but it gives a later evaluator a
structure to walk instead of re-parsing tokens.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .errors import SourceSpan
from .symbols import Literal
from .token import Token


#notes that every node tracks a span for diagnostics
@dataclass(slots=True)
class Node:
    span: SourceSpan


#represents the root of the parsed file containing top-level statements
@dataclass(slots=True)
class Program(Node):
    statements: List["Stmt"] = field(default_factory=list)


# Expressions ------------------------------------------------------------------


#a single identifier or literal token; the grammar has no compound expressions
@dataclass(slots=True)
class Member(Node):
    token: Token

    @property
    def text(self) -> str:
        return self.token.lexeme


#`left op right` with exactly one comparison operator
@dataclass(slots=True)
class Comparison(Node):
    left: Member
    operator: Token
    right: Member


#comparisons chained left to right by `&&`/`||`
@dataclass(slots=True)
class Condition(Node):
    first: Comparison
    rest: List[tuple[Token, Comparison]] = field(default_factory=list)


# Statements -------------------------------------------------------------------


#common base for all statements allowing polymorphic handling
@dataclass(slots=True)
class Stmt(Node):
    pass


#`var name type (= literal)?`
@dataclass(slots=True)
class VarDecl(Stmt):
    name: str
    name_span: SourceSpan
    type_name: str
    value: Optional[Literal] = None


#bodies are plain statement lists; they do not open a scope
@dataclass(slots=True)
class IfStmt(Stmt):
    condition: Condition
    then_body: List[Stmt] = field(default_factory=list)
    else_body: Optional[List[Stmt]] = None


#`for item := range items { ... }`
@dataclass(slots=True)
class ForRangeStmt(Stmt):
    variable: str
    iterable: str
    body: List[Stmt] = field(default_factory=list)


#`for ; init ; condition ; post { ... }`
@dataclass(slots=True)
class ForClauseStmt(Stmt):
    init: Member
    condition: Condition
    post: Member
    body: List[Stmt] = field(default_factory=list)


#`receiver.method(args)`; the folded `fmt.Print` builtin uses receiver `fmt`
@dataclass(slots=True)
class CallStmt(Stmt):
    receiver: str
    method: str
    arguments: List[Member] = field(default_factory=list)
