import pytest

from minigo.errors import DuplicateSymbol, SourceLocation, SourceSpan, UndefinedSymbol
from minigo.symbols import Literal, LiteralKind, Symbol, SymbolTable


#add/get/contains cover the whole table surface
def test_add_and_get_variable() -> None:
    table = SymbolTable()
    symbol = table.add_variable("x", "int", Literal(LiteralKind.INTEGER, "10"))
    assert symbol == Symbol("x", "int", Literal(LiteralKind.INTEGER, "10"))
    assert table.get_variable("x") is symbol
    assert table.contains("x")
    assert "x" in table
    assert not table.contains("y")


def test_duplicate_add_is_rejected_and_keeps_original() -> None:
    table = SymbolTable()
    table.add_variable("x", "int")
    with pytest.raises(DuplicateSymbol) as excinfo:
        table.add_variable("x", "string", Literal(LiteralKind.STRING, "s"))
    assert excinfo.value.name == "x"
    assert excinfo.value.span is None
    assert str(excinfo.value) == "variable 'x' is already defined"
    assert table.get_variable("x").type == "int"


def test_undefined_lookup_carries_position() -> None:
    span = SourceSpan.at(SourceLocation(line=3, column=9))
    with pytest.raises(UndefinedSymbol) as excinfo:
        SymbolTable().get_variable("missing", span)
    assert excinfo.value.name == "missing"
    assert str(excinfo.value) == "variable 'missing' is not defined at Line: 3, Column: 9"


#iteration follows declaration order
def test_iteration_order_and_len() -> None:
    table = SymbolTable()
    for name in ("b", "a", "c"):
        table.add_variable(name, "bool")
    assert len(table) == 3
    assert [symbol.name for symbol in table] == ["b", "a", "c"]


def test_literal_renders_as_its_text() -> None:
    assert str(Literal(LiteralKind.FLOAT, "314")) == "314"
