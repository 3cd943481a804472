import pytest

from ll1kit.first import first_sets
from ll1kit.follow import follow_sets
from ll1kit.grammar import parse_grammar
from ll1kit.table import build_table, format_table, parse_table

EXPRESSIONS = """\
<E> -> <T> <E'>
<E'> -> + <T> <E'> | $
<T> -> <F> <T'>
<T'> -> * <F> <T'> | $
<F> -> ( <E> ) | id
"""


@pytest.fixture
def grammar():
    return parse_grammar(EXPRESSIONS)


@pytest.fixture
def table(grammar):
    first = first_sets(grammar)
    return build_table(grammar, first, follow_sets(grammar, first))


def test_leading_terminal_selects_alternative(table):
    assert table["F"]["("] == ("(", "E", ")")
    assert table["F"]["id"] == ("id",)
    assert table["E'"]["+"] == ("+", "T", "E'")


def test_leading_nonterminal_uses_first_of_rule(table):
    assert table["E"]["("] == ("T", "E'")
    assert table["E"]["id"] == ("T", "E'")


def test_empty_alternative_goes_under_follow(grammar, table):
    first = first_sets(grammar)
    follow = follow_sets(grammar, first)
    for lookahead in follow["T'"]:
        if lookahead != "*":
            assert table["T'"][lookahead] == ("$",)


def test_every_entry_is_an_alternative_of_its_rule(grammar, table):
    for nonterminal, row in table.items():
        for alternative in row.values():
            assert alternative in grammar.productions[nonterminal]


def test_missing_sets_give_only_terminal_entries():
    grammar = parse_grammar("<S> -> a <S> | b\n")
    result = build_table(grammar, {}, {})
    assert result == {"S": {"a": ("a", "S"), "b": ("b",)}}


def test_format_writes_epsilon_as_blank():
    assert format_table({"E'": {")": ("$",)}}) == "E' )  \n"


def test_format_writes_symbols_with_trailing_space():
    assert format_table({"E": {"id": ("T", "E'")}}) == "E id T E' \n"


def test_round_trip_drops_epsilon(table):
    expected = {
        nonterminal: {
            lookahead: tuple(s for s in alternative if s != "$")
            for lookahead, alternative in row.items()
        }
        for nonterminal, row in table.items()
    }
    assert parse_table(format_table(table)) == expected


def test_parse_table_skips_blank_lines():
    assert parse_table("\nS a a S\n\n") == {"S": {"a": ("a", "S")}}


def test_parse_table_later_line_overwrites():
    assert parse_table("S a x\nS a y\n") == {"S": {"a": ("y",)}}