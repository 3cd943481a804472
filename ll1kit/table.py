"""Predictive (LL(1)) parse tables: building, writing and reading them."""

from __future__ import annotations

from .grammar import EPSILON, Grammar

ParseTable = dict[str, dict[str, tuple[str, ...]]]


def build_table(
    grammar: Grammar,
    first: dict[str, list[str]],
    follow: dict[str, list[str]],
) -> ParseTable:
    """Build the table mapping ``(nonterminal, lookahead)`` to an alternative.

    An alternative is entered under its leading terminal; when it leads with a
    symbol that has a FIRST set, it is entered under every non-empty member of
    the FIRST set of the rule's own nonterminal. Alternatives that reduce to
    ``$`` are entered under the nonterminal's FOLLOW set. Later entries
    overwrite earlier ones.
    """
    table: ParseTable = {}
    for lhs, alternatives in grammar.productions.items():
        for alternative in alternatives:
            nullable = False
            for symbol in alternative:
                nullable = False
                if symbol in first:
                    for lookahead in first.get(lhs, []):
                        if lookahead != EPSILON:
                            table.setdefault(lhs, {})[lookahead] = alternative
                        else:
                            nullable = True
                elif symbol != EPSILON:
                    table.setdefault(lhs, {})[symbol] = alternative
                else:
                    nullable = True
                if not nullable:
                    break
            if nullable:
                for lookahead in follow.get(lhs, []):
                    table.setdefault(lhs, {})[lookahead] = alternative
    return table


def format_table(table: ParseTable) -> str:
    """Write a table as lines of ``nonterminal lookahead symbol ...``.

    The empty-string symbol ``$`` is written as a blank.
    """
    lines: list[str] = []
    for nonterminal, row in table.items():
        for lookahead, alternative in row.items():
            body = "".join(
                " " if symbol == EPSILON else symbol + " " for symbol in alternative
            )
            lines.append(f"{nonterminal} {lookahead} {body}\n")
    return "".join(lines)


def parse_table(text: str) -> ParseTable:
    """Read a table written by :func:`format_table`; blank lines are skipped."""
    table: ParseTable = {}
    for line in text.splitlines():
        words = line.split()
        if not words:
            continue
        nonterminal = words[0]
        lookahead = words[1] if len(words) > 1 else ""
        table.setdefault(nonterminal, {})[lookahead] = tuple(words[2:])
    return table