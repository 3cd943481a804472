"""FIRST sets of grammar symbols."""

from __future__ import annotations

from .grammar import EPSILON, Grammar


def _add(result: list[str], symbols: list[str]) -> bool:
    """Add the non-empty symbols to ``result``; tell whether ``$`` was among them."""
    nullable = False
    for symbol in symbols:
        if symbol == EPSILON:
            nullable = True
        elif symbol not in result:
            result.append(symbol)
    return nullable


def _first(grammar: Grammar, symbol: str, active: frozenset[str]) -> list[str]:
    if grammar.is_terminal(symbol):
        return [symbol]
    result: list[str] = []
    if not grammar.is_nonterminal(symbol) or symbol not in grammar.productions:
        return result
    if symbol in active:
        raise ValueError(f"left recursion through {symbol!r}")
    active = active | {symbol}

    for alternative in grammar.productions[symbol]:
        nullable = True
        for part in alternative:
            nullable = _add(result, _first(grammar, part, active))
            if not nullable:
                break
        if nullable and EPSILON not in result:
            result.append(EPSILON)
    return result


def first_of(grammar: Grammar, symbol: str) -> list[str]:
    """FIRST set of one symbol, in discovery order; ``$`` marks that it can be empty.

    Unknown symbols have an empty FIRST set. Left recursion raises ValueError.
    """
    return _first(grammar, symbol, frozenset())


def first_sets(grammar: Grammar) -> dict[str, list[str]]:
    """For each rule, the FIRST sets of the leading symbol of each alternative, joined.

    Entries are concatenated per alternative, so a symbol may appear more than
    once. An empty alternative contributes ``$``.
    """
    sets: dict[str, list[str]] = {}
    for lhs, alternatives in grammar.productions.items():
        members: list[str] = []
        for alternative in alternatives:
            if alternative:
                members.extend(first_of(grammar, alternative[0]))
            else:
                members.append(EPSILON)
        sets[lhs] = members
    return sets