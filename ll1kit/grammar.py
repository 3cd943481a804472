"""Context-free grammar text format: reading grammars and symbol-set files.

A grammar file holds one rule per line::

    <E> -> <T> <E'>
    <E'> -> + <T> <E'> | $

Names in angle brackets are nonterminals. Any other run of letters and digits
that starts with a letter is one terminal, and every other character is a
terminal on its own. ``$`` stands for the empty string.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

EPSILON = "$"
ARROW = "->"
ALTERNATIVE = "|"

_BRACKETED = re.compile(r"<([^>]*)(?:>|$)")


def _is_alpha(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _strip_brackets(text: str) -> str:
    return text.replace("<", "").replace(">", "")


@dataclass
class Grammar:
    """A grammar: its symbols, its rules and its start symbol."""

    nonterminals: frozenset[str] = frozenset()
    terminals: frozenset[str] = frozenset()
    productions: dict[str, list[tuple[str, ...]]] = field(default_factory=dict)
    start: str | None = None

    def is_terminal(self, symbol: str) -> bool:
        return symbol in self.terminals

    def is_nonterminal(self, symbol: str) -> bool:
        return symbol in self.nonterminals


def split_symbols(word: str) -> list[tuple[str, bool]]:
    """Split one whitespace-free word into ``(symbol, bracketed)`` pairs.

    Bracketed pieces are nonterminal names with the brackets removed.
    """
    pieces: list[tuple[str, bool]] = []
    i, n = 0, len(word)
    while i < n:
        char = word[i]
        if char == "<":
            close = word.find(">", i + 1)
            if close == -1:
                inner, i = word[i + 1:], n
            else:
                inner, i = word[i + 1:close], close + 1
            pieces.append((_strip_brackets(inner), True))
        elif _is_alpha(char):
            end = i
            while end < n and _is_alnum(word[end]):
                end += 1
            pieces.append((word[i:end], False))
            i = end
        else:
            pieces.append((char, False))
            i += 1
    return pieces


def _line_terminals(words: list[str]) -> set[str]:
    found: set[str] = set()
    for word in words:
        if word in (ARROW, ALTERNATIVE):
            continue
        if word.startswith("<") and word.endswith(">"):
            continue
        found.update(text for text, bracketed in split_symbols(word) if not bracketed)
    return found


def _alternatives(words: list[str]) -> list[tuple[str, ...]]:
    alternatives: list[tuple[str, ...]] = []
    current: list[str] = []
    for word in words:
        if word in (ARROW, ALTERNATIVE):
            if current:
                alternatives.append(tuple(current))
            current = []
            continue
        current.extend(text for text, _ in split_symbols(word))
    alternatives.append(tuple(current))
    return alternatives


def parse_grammar(text: str) -> Grammar:
    """Parse grammar text. A later rule for the same nonterminal replaces an earlier one."""
    nonterminals: set[str] = set()
    terminals: set[str] = set()
    productions: dict[str, list[tuple[str, ...]]] = {}
    start: str | None = None

    for line in text.splitlines():
        nonterminals.update(match.group(1) for match in _BRACKETED.finditer(line))
        words = line.split()
        terminals.update(_line_terminals(words))
        if not words:
            continue
        lhs = _strip_brackets(words[0])
        if start is None:
            start = lhs
        productions[lhs] = _alternatives(words[2:])

    return Grammar(
        nonterminals=frozenset(nonterminals),
        terminals=frozenset(terminals),
        productions=productions,
        start=start,
    )


def load_grammar(path: str | Path) -> Grammar:
    """Read and parse a grammar file."""
    return parse_grammar(Path(path).read_text())


def parse_sets(text: str) -> dict[str, list[str]]:
    """Parse lines of ``name symbol symbol ...`` into a mapping."""
    sets: dict[str, list[str]] = {}
    for line in text.splitlines():
        words = line.split()
        if words:
            name, *members = words
            sets[name] = members
    return sets


def format_sets(sets: dict[str, list[str]]) -> str:
    """Write a mapping as lines of ``name symbol symbol ...``."""
    return "".join(
        " ".join([name, *members]) + "\n" for name, members in sets.items()
    )