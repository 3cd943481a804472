import pytest

from ll1kit.grammar import (
    EPSILON,
    Grammar,
    format_sets,
    load_grammar,
    parse_grammar,
    parse_sets,
    split_symbols,
)

EXPR = """<E> -> <T> <E'>
<E'> -> + <T> <E'> | $
<T> -> <F> <T'>
<T'> -> * <F> <T'> | $
<F> -> ( <E> ) | id
"""


@pytest.fixture
def expr():
    return parse_grammar(EXPR)


def test_split_symbols_mixed_word():
    assert split_symbols("a1+<B>c") == [
        ("a1", False),
        ("+", False),
        ("B", True),
        ("c", False),
    ]


def test_split_symbols_digit_is_single_char():
    assert split_symbols("1x") == [("1", False), ("x", False)]


def test_split_symbols_unterminated_bracket():
    assert split_symbols("<A") == [("A", True)]


def test_nonterminals(expr):
    assert expr.nonterminals == {"E", "E'", "T", "T'", "F"}


def test_terminals(expr):
    assert expr.terminals == {"+", "$", "*", "(", ")", "id"}


def test_start_symbol(expr):
    assert expr.start == "E"


def test_productions(expr):
    assert expr.productions["E'"] == [("+", "T", "E'"), ("$",)]
    assert expr.productions["F"] == [("(", "E", ")"), ("id",)]


def test_membership(expr):
    assert expr.is_terminal("id")
    assert not expr.is_terminal("E")
    assert expr.is_nonterminal("T'")
    assert not expr.is_nonterminal("+")


def test_epsilon_is_terminal(expr):
    assert expr.is_terminal(EPSILON)


def test_later_rule_replaces_earlier():
    grammar = parse_grammar("<S> -> a\n<S> -> b\n")
    assert grammar.productions == {"S": [("b",)]}


def test_blank_lines_ignored():
    grammar = parse_grammar("\n<S> -> a\n\n")
    assert grammar.start == "S"
    assert list(grammar.productions) == ["S"]


def test_trailing_alternative_is_empty():
    grammar = parse_grammar("<S> -> a |\n")
    assert grammar.productions["S"] == [("a",), ()]


def test_load_grammar(tmp_path):
    path = tmp_path / "Grammer.txt"
    path.write_text(EXPR)
    assert load_grammar(path) == parse_grammar(EXPR)


def test_load_grammar_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_grammar(tmp_path / "missing.txt")


def test_empty_grammar():
    assert parse_grammar("") == Grammar()


def test_format_sets():
    assert format_sets({"E": ["(", "id"], "T": []}) == "E ( id\nT\n"


def test_parse_sets_skips_blank_lines():
    assert parse_sets("E ( id\n\nT\n") == {"E": ["(", "id"], "T": []}


def test_sets_round_trip():
    sets = {"E": ["(", "id"], "E'": ["+", "$"], "F": ["id"]}
    assert parse_sets(format_sets(sets)) == sets