import pytest

from protoscheme.lexer import IdentifiersTable, Token


def test_token_order():
    assert [Token(number).name for number in range(12)] == [
        "ENDOFFILE",
        "BOOLEAN",
        "IDENTIFIER",
        "STRING",
        "NUMBER",
        "QUOTE",
        "DOT",
        "CHARACTER",
        "OPENVBRACKET",
        "OPENBITVBRACKET",
        "OPENBRACKET",
        "CLOSEBRACKET",
    ]
    assert Token(0) is Token.ENDOFFILE


def test_numbers_start_at_one():
    table = IdentifiersTable()
    assert table.insert("define") == 1


def test_numbers_increase_by_one():
    table = IdentifiersTable()
    numbers = [table.insert(name) for name in ("a", "b", "c")]
    assert numbers == [numbers[0], numbers[0] + 1, numbers[0] + 2]


def test_round_trip():
    table = IdentifiersTable()
    names = ["lambda", "x", "lambda", "car"]
    numbers = [table.insert(name) for name in names]
    assert [table.get_identifier(number) for number in numbers] == names
    assert len(set(numbers)) == len(names)
    assert len(table) == len(names)


def test_unknown_number_raises():
    table = IdentifiersTable()
    table.insert("x")
    with pytest.raises(KeyError):
        table.get_identifier(0)
    with pytest.raises(KeyError):
        table.get_identifier(2)