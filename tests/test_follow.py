import pytest

from ll1kit.first import first_sets
from ll1kit.follow import follow_sets, next_elements
from ll1kit.grammar import format_sets, parse_grammar, parse_sets

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
def follow(grammar):
    return follow_sets(grammar, first_sets(grammar))


def test_next_elements_records_following_symbol_and_owner(grammar):
    elements = next_elements(grammar)
    assert elements["E"] == [(")", "F")]
    assert ("E'", "E") in elements["T"]
    assert ("E'", "E'") in elements["T"]


def test_next_elements_marks_end_of_alternative_with_none(grammar):
    elements = next_elements(grammar)
    assert elements["E'"] == [(None, "E"), (None, "E'")]


def test_next_elements_skips_terminals(grammar):
    elements = next_elements(grammar)
    assert set(elements) <= grammar.nonterminals
    assert "id" not in elements


def test_follow_of_expression_grammar(follow):
    as_sets = {name: set(members) for name, members in follow.items()}
    assert as_sets == {
        "E": {"$", ")"},
        "E'": {"$", ")"},
        "T": {"+", "$", ")"},
        "T'": {"+", "$", ")"},
        "F": {"*", "+", "$", ")"},
    }


def test_start_symbol_begins_with_end_marker(follow):
    assert follow["E"][0] == "$"


def test_keys_follow_rule_order(grammar, follow):
    assert list(follow) == list(grammar.productions)


def test_sets_have_no_duplicates(follow):
    for members in follow.values():
        assert len(members) == len(set(members))


def test_terminal_after_nonterminal_is_in_follow():
    grammar = parse_grammar("<S> -> <A> x\n<A> -> y\n")
    result = follow_sets(grammar, first_sets(grammar))
    assert result["A"] == ["x"]
    assert result["S"] == ["$"]


def test_nullable_successor_passes_owner_follow():
    text = "<S> -> <A> <B>\n<A> -> a\n<B> -> b | $\n"
    grammar = parse_grammar(text)
    result = follow_sets(grammar, first_sets(grammar))
    assert set(result["A"]) == {"b", "$"}
    assert result["B"] == ["$"]


def test_epsilon_from_first_is_not_copied_directly():
    text = "<S> -> <A> <B> c\n<A> -> a\n<B> -> b | $\n"
    grammar = parse_grammar(text)
    first = {"S": ["a"], "A": ["a"], "B": ["b", "$"]}
    result = follow_sets(grammar, first)
    assert "b" in result["A"]
    assert result["A"].count("$") == 0 or "$" in result["S"]


def test_empty_grammar_has_no_follow_sets():
    assert follow_sets(parse_grammar(""), {}) == {}


def test_round_trip_through_set_format(follow):
    assert parse_sets(format_sets(follow)) == follow