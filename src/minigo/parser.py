"""Recursive-descent recognizer for minigo token streams."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Collection, Final, List, Optional

from . import ast
from .errors import MissingExpectedToken, SourceSpan, UnexpectedToken
from .symbols import Literal, LiteralKind, SymbolTable
from .token import PRIMITIVE_TYPES, PRINT_FUNCTION, PRINT_PACKAGE, Token, TokenType

logger = logging.getLogger(__name__)

LITERAL_KINDS: Final[dict[TokenType, LiteralKind]] = {
    TokenType.INTEGER: LiteralKind.INTEGER,
    TokenType.FLOAT: LiteralKind.FLOAT,
    TokenType.STRING_LITERAL: LiteralKind.STRING,
    TokenType.TRUE: LiteralKind.BOOLEAN,
    TokenType.FALSE: LiteralKind.BOOLEAN,
}

COMPARISON_OPERATORS: Final[tuple[TokenType, ...]] = (
    TokenType.EQUAL_EQUAL,
    TokenType.BANG_EQUAL,
    TokenType.LESS,
    TokenType.LESS_EQUAL,
    TokenType.GREATER,
    TokenType.GREATER_EQUAL,
)

LOGICAL_OPERATORS: Final[tuple[TokenType, ...]] = (TokenType.AND_AND, TokenType.OR_OR)

MEMBER_TYPES: Final[tuple[TokenType, ...]] = (
    TokenType.IDENTIFIER,
    TokenType.INTEGER,
    TokenType.FLOAT,
    TokenType.STRING_LITERAL,
)


#one method per grammar production, no backtracking
@dataclass(slots=True)
class Parser:
    """Validates a token stream and records declared variables.

    The first violated production raises and aborts the parse; symbols added
    before that point stay in ``symbols``. Passing an existing table lets
    several parses share one namespace.
    """

    tokens: List[Token]
    symbols: SymbolTable = field(default_factory=SymbolTable)
    _current: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        if not self.tokens or self.tokens[-1].type is not TokenType.EOF:
            raise ValueError("token stream must be terminated by an EOF token")
        self._current = 0

    def parse(self) -> ast.Program:
        statements: List[ast.Stmt] = []
        while not self._is_at_end():
            statements.append(self._statement())
        program_span = self._span_from_nodes(statements)
        return ast.Program(span=program_span, statements=statements)

    # Statements ----------------------------------------------------------------

    #the leading token alone picks the production
    def _statement(self) -> ast.Stmt:
        if self._match(TokenType.VAR):
            return self._var_decl()
        if self._match(TokenType.IF):
            return self._if_stmt()
        if self._match(TokenType.FOR):
            return self._for_stmt()
        if self._match(TokenType.PRINT):
            return self._print_call()
        if self._check(TokenType.IDENTIFIER):
            return self._call_stmt()
        token = self._peek()
        raise UnexpectedToken(f"unexpected token {self._describe(token)}", token.span)

    #declares into the shared table as soon as the declaration is recognized
    def _var_decl(self) -> ast.VarDecl:
        keyword = self._previous()
        name_token = self._consume(TokenType.IDENTIFIER, "expected identifier after 'var'")
        type_token = self._consume_any(
            PRIMITIVE_TYPES,
            TokenType.INT,
            f"expected type after variable name '{name_token.lexeme}'",
        )
        value: Optional[Literal] = None
        end_token = type_token
        if self._match(TokenType.EQUAL):
            end_token = self._consume_any(LITERAL_KINDS, TokenType.INTEGER, "expected value after '='")
            value = Literal(kind=LITERAL_KINDS[end_token.type], text=end_token.lexeme)

        self.symbols.add_variable(name_token.lexeme, type_token.lexeme, value, span=name_token.span)
        logger.debug(
            "Parsed variable: Name = %s, Type = %s, Value = %s",
            name_token.lexeme,
            type_token.lexeme,
            value,
        )
        return ast.VarDecl(
            span=keyword.span.merge(end_token.span),
            name=name_token.lexeme,
            name_span=name_token.span,
            type_name=type_token.lexeme,
            value=value,
        )

    def _if_stmt(self) -> ast.IfStmt:
        keyword = self._previous()
        logger.debug("Parsing 'if' statement")
        condition = self._condition()
        then_body, close_brace = self._block("after condition", "after 'if' block")
        span = keyword.span.merge(close_brace.span)
        else_body = None
        if self._match(TokenType.ELSE):
            logger.debug("Parsing 'else' block")
            else_body, close_brace = self._block("after 'else'", "after 'else' block")
            span = span.merge(close_brace.span)
        logger.debug("Finished parsing 'if' statement")
        return ast.IfStmt(span=span, condition=condition, then_body=then_body, else_body=else_body)

    #two shapes: `for x := range xs` and `for ; init ; cond ; post`
    def _for_stmt(self) -> ast.Stmt:
        keyword = self._previous()
        logger.debug("Parsing 'for' statement")
        if self._match(TokenType.IDENTIFIER):
            variable = self._previous()
            self._consume(TokenType.COLON_EQUAL, "expected ':=' after identifier in 'for' range")
            self._consume(TokenType.RANGE, "expected 'range' after ':=' in 'for' range")
            iterable = self._consume(
                TokenType.IDENTIFIER, "expected iterable identifier after 'range' in 'for' range"
            )
            body, close_brace = self._block("after 'for' range", "after 'for' block")
            stmt: ast.Stmt = ast.ForRangeStmt(
                span=keyword.span.merge(close_brace.span),
                variable=variable.lexeme,
                iterable=iterable.lexeme,
                body=body,
            )
        elif self._match(TokenType.SEMICOLON):
            init = self._expression()
            self._consume(TokenType.SEMICOLON, "expected ';' after initialization in 'for'")
            condition = self._condition()
            self._consume(TokenType.SEMICOLON, "expected ';' after condition in 'for'")
            post = self._expression()
            body, close_brace = self._block("after 'for' clauses", "after 'for' block")
            stmt = ast.ForClauseStmt(
                span=keyword.span.merge(close_brace.span),
                init=init,
                condition=condition,
                post=post,
                body=body,
            )
        else:
            token = self._peek()
            raise UnexpectedToken(f"invalid 'for' statement near {self._describe(token)}", token.span)
        logger.debug("Finished parsing 'for' statement")
        return stmt

    #method-style call on an identifier receiver, e.g. `x.Y(1, z)`
    def _call_stmt(self) -> ast.CallStmt:
        receiver = self._advance()
        self._consume(TokenType.DOT, f"expected '.' after identifier '{receiver.lexeme}'")
        method = self._consume(TokenType.IDENTIFIER, "expected method name after '.'")
        self._consume(TokenType.LEFT_PAREN, f"expected '(' after method name '{method.lexeme}'")
        arguments, right_paren = self._arguments()
        logger.debug("Parsed function call: %s.%s", receiver.lexeme, method.lexeme)
        return ast.CallStmt(
            span=receiver.span.merge(right_paren.span),
            receiver=receiver.lexeme,
            method=method.lexeme,
            arguments=arguments,
        )

    #the lexer already folded `fmt.Print` into one token
    def _print_call(self) -> ast.CallStmt:
        keyword = self._previous()
        self._consume(TokenType.LEFT_PAREN, f"expected '(' after '{keyword.lexeme}'")
        arguments, right_paren = self._arguments()
        logger.debug("Parsed function call: %s.%s", PRINT_PACKAGE, PRINT_FUNCTION)
        return ast.CallStmt(
            span=keyword.span.merge(right_paren.span),
            receiver=PRINT_PACKAGE,
            method=PRINT_FUNCTION,
            arguments=arguments,
        )

    #`{ statement* }`, with no new scope for the statements inside
    def _block(self, opening: str, closing: str) -> tuple[List[ast.Stmt], Token]:
        self._consume(TokenType.LEFT_BRACE, f"expected '{{' {opening}")
        statements: List[ast.Stmt] = []
        while not self._check(TokenType.RIGHT_BRACE) and not self._is_at_end():
            statements.append(self._statement())
        close_brace = self._consume(TokenType.RIGHT_BRACE, f"expected '}}' {closing}")
        return statements, close_brace

    def _arguments(self) -> tuple[List[ast.Member], Token]:
        arguments: List[ast.Member] = []
        if not self._check(TokenType.RIGHT_PAREN):
            while True:
                arguments.append(self._expression())
                if not self._match(TokenType.COMMA):
                    break
        right_paren = self._consume(TokenType.RIGHT_PAREN, "expected ')' after function arguments")
        return arguments, right_paren

    # Conditions and expressions ------------------------------------------------

    def _condition(self) -> ast.Condition:
        first = self._comparison()
        condition = ast.Condition(span=first.span, first=first)
        while self._match(*LOGICAL_OPERATORS):
            operator = self._previous()
            logger.debug("Parsed logical operator: %s", operator.lexeme)
            comparison = self._comparison()
            condition.rest.append((operator, comparison))
            condition.span = condition.span.merge(comparison.span)
        return condition

    #a bare member is not a condition: exactly one comparator is required
    def _comparison(self) -> ast.Comparison:
        left = self._member()
        if not self._match(*COMPARISON_OPERATORS):
            token = self._peek()
            raise MissingExpectedToken(
                TokenType.EQUAL_EQUAL,
                f"expected comparison operator, found {self._describe(token)}",
                token.span,
            )
        operator = self._previous()
        logger.debug("Parsed comparison operator: %s", operator.lexeme)
        right = self._member()
        return ast.Comparison(span=left.span.merge(right.span), left=left, operator=operator, right=right)

    def _member(self) -> ast.Member:
        token = self._consume_any(MEMBER_TYPES, TokenType.IDENTIFIER, "expected identifier or value")
        logger.debug("Parsed arithmetic member: %s", token.lexeme)
        return ast.Member(span=token.span, token=token)

    def _expression(self) -> ast.Member:
        token = self._consume_any(MEMBER_TYPES, TokenType.IDENTIFIER, "expected expression")
        logger.debug("Parsed expression: %s", token.lexeme)
        return ast.Member(span=token.span, token=token)

    # Utilities ----------------------------------------------------------------

    #consumes the next token if it is any of `types`; used for optional clauses
    def _match(self, *types: TokenType) -> bool:
        for token_type in types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    #a required token; its absence is a MissingExpectedToken naming the kind
    def _consume(self, token_type: TokenType, message: str) -> Token:
        if self._check(token_type):
            return self._advance()
        token = self._peek()
        raise MissingExpectedToken(token_type, f"{message}, found {self._describe(token)}", token.span)

    #like `_consume` for a group of acceptable kinds; `expected` names the group in errors
    def _consume_any(self, token_types: Collection[TokenType], expected: TokenType, message: str) -> Token:
        if not self._is_at_end() and self._peek().type in token_types:
            return self._advance()
        token = self._peek()
        raise MissingExpectedToken(expected, f"{message}, found {self._describe(token)}", token.span)

    #EOF never matches, so block loops stop at end of input
    def _check(self, token_type: TokenType) -> bool:
        if self._is_at_end():
            return False
        return self._peek().type is token_type

    #never steps past the EOF sentinel
    def _advance(self) -> Token:
        if not self._is_at_end():
            self._current += 1
        return self._previous()

    #the lexer always appends exactly one EOF, checked in __post_init__
    def _is_at_end(self) -> bool:
        return self._peek().type is TokenType.EOF

    #the single token of lookahead
    def _peek(self) -> Token:
        return self.tokens[self._current]

    #last consumed token, e.g. the keyword a production was dispatched on
    def _previous(self) -> Token:
        return self.tokens[self._current - 1]

    @staticmethod
    def _describe(token: Token) -> str:
        if token.type is TokenType.EOF:
            return "end of input"
        return f"'{token.lexeme}'"

    #an empty program spans just the EOF token
    def _span_from_nodes(self, nodes: List[ast.Stmt]) -> SourceSpan:
        if not nodes:
            eof = self.tokens[-1]
            return eof.span
        span = nodes[0].span
        for node in nodes[1:]:
            span = span.merge(node.span)
        return span
