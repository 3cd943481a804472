"""FOLLOW sets of the nonterminals of a grammar."""

from __future__ import annotations

from collections.abc import Iterable

from .grammar import EPSILON, Grammar

END_MARKER = "$"


def next_elements(grammar: Grammar) -> dict[str, list[tuple[str | None, str]]]:
    """For each nonterminal, what follows each of its occurrences.

    Every occurrence of a nonterminal in a rule gives a pair
    ``(following, owner)``: the symbol right after it, or ``None`` when it
    ends the alternative, and the nonterminal whose rule holds it.
    """
    elements: dict[str, list[tuple[str | None, str]]] = {}
    for lhs, alternatives in grammar.productions.items():
        for alternative in alternatives:
            followers: list[str | None] = [*alternative[1:], None]
            for symbol, following in zip(alternative, followers):
                if grammar.is_nonterminal(symbol):
                    elements.setdefault(symbol, []).append((following, lhs))
    return elements


def follow_sets(
    grammar: Grammar, first: dict[str, list[str]]
) -> dict[str, list[str]]:
    """FOLLOW set of every rule's nonterminal, in discovery order.

    ``first`` maps nonterminals to their FIRST sets, ``$`` marking that a
    nonterminal can derive the empty string. The start symbol's set begins
    with the end marker ``$``. Sets grow until nothing changes.
    """
    if grammar.start is None:
        return {}

    follow: dict[str, list[str]] = {lhs: [] for lhs in grammar.productions}
    follow[grammar.start] = [END_MARKER]
    elements = next_elements(grammar)

    changed = True
    while changed:
        changed = False
        for lhs in grammar.productions:
            result = list(follow[lhs])
            seen = set(result)

            def extend(symbols: Iterable[str]) -> None:
                for symbol in symbols:
                    if symbol not in seen:
                        result.append(symbol)
                        seen.add(symbol)

            for following, owner in elements.get(lhs, []):
                if following is None:
                    extend(follow.get(owner, []))
                elif grammar.is_terminal(following):
                    extend([following])
                else:
                    members = first.get(following, [])
                    extend(m for m in members if m != EPSILON)
                    if EPSILON in members:
                        extend(follow.get(owner, []))

            if result != follow[lhs]:
                follow[lhs] = result
                changed = True
    return follow