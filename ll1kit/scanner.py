"""Finite-automaton scanner that turns text into a list of token names.

The scanner is described by four text files: the automaton (states, start
state, final states, error state), the transitions, the token names emitted
on entering a state with an input class, and the keywords.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

ARROW = "->"

_LEXEME = re.compile(r"[A-Za-z0-9]+|.", re.DOTALL)
_CLASSES = (
    (re.compile(r"[a-z]+"), "[a-z]"),
    (re.compile(r"[A-Z]+"), "[A-Z]"),
    (re.compile(r"[0-9]+"), "[0-9]"),
    (re.compile(r"[a-zA-Z]+"), "[a-zA-Z]"),
)


class ScannerFormatError(ValueError):
    """A scanner description file is malformed."""


@dataclass(frozen=True)
class Automaton:
    """States of the scanner's automaton, in file order."""

    states: tuple[str, ...]
    start: str
    finals: frozenset[str]
    error: str


def _split_fields(line: str, separator: str) -> list[str]:
    parts = line.split(separator)
    if parts[-1] == "":
        parts.pop()
    return parts


def parse_automaton(text: str) -> Automaton:
    """Parse the automaton file: states, start, finals, error state, one per line."""
    lines = text.splitlines()
    if len(lines) < 4:
        raise ScannerFormatError("automaton needs at least four lines")
    return Automaton(
        states=tuple(_split_fields(lines[0], ",")),
        start=lines[1],
        finals=frozenset(_split_fields(lines[2], ",")),
        error=lines[3],
    )


def _groups(text: str, size: int) -> list[list[str]]:
    words = text.split()
    whole = len(words) - len(words) % size
    return [words[i:i + size] for i in range(0, whole, size)]


def parse_transitions(text: str) -> dict[str, dict[str, str]]:
    """Parse ``from symbol -> to`` entries; entries without the arrow are skipped."""
    transitions: dict[str, dict[str, str]] = {}
    for source, symbol, arrow, target in _groups(text, 4):
        if arrow != ARROW:
            continue
        transitions.setdefault(source, {})[symbol] = target
    return transitions


def parse_token_map(text: str) -> dict[str, dict[str, str]]:
    """Parse ``state symbol token`` entries into ``state -> symbol -> token``."""
    tokens: dict[str, dict[str, str]] = {}
    for state, symbol, token in _groups(text, 3):
        tokens.setdefault(state, {})[symbol] = token
    return tokens


def parse_keywords(text: str) -> frozenset[str]:
    """Parse whitespace-separated keywords."""
    return frozenset(text.split())


def classify(lexeme: str) -> str:
    """Map a lexeme to its input class, or return it unchanged if it has none."""
    for pattern, name in _CLASSES:
        if pattern.fullmatch(lexeme):
            return name
    return lexeme


@dataclass
class Scanner:
    """A scanner built from its automaton, transitions, token names and keywords."""

    automaton: Automaton
    transitions: dict[str, dict[str, str]] = field(default_factory=dict)
    tokens: dict[str, dict[str, str]] = field(default_factory=dict)
    keywords: frozenset[str] = frozenset()

    def tokenize(self, text: str) -> list[str]:
        """Return the token names of ``text``.

        Lines are joined without separators and ``|`` splits lexemes apart.
        A lexeme is a run of ASCII letters and digits or a single character;
        a blank is read as the word ``space``. Each lexeme takes the first
        state, in automaton order, that has a transition on its class; the
        state reached decides the token unless the lexeme is a keyword.
        Lexemes with no transition are dropped. Raises ValueError if the last
        state reached is not final.
        """
        joined = "".join(text.splitlines())
        state = self.automaton.start
        found: list[str] = []
        for piece in joined.split("|"):
            for match in _LEXEME.finditer(piece):
                lexeme = "space" if match.group() == " " else match.group()
                symbol = classify(lexeme)
                for candidate in self.automaton.states:
                    target = self.transitions.get(candidate, {}).get(symbol)
                    if target is None:
                        continue
                    state = target
                    if lexeme in self.keywords:
                        found.append(lexeme)
                    else:
                        found.append(self.tokens.get(target, {}).get(symbol, ""))
                    break
        if state not in self.automaton.finals:
            raise ValueError(f"input ends in non-final state {state!r}")
        return found


def load_scanner(
    automaton_path: str | Path,
    transition_path: str | Path,
    tokens_path: str | Path,
    keywords_path: str | Path,
) -> Scanner:
    """Read the four scanner description files."""
    return Scanner(
        automaton=parse_automaton(Path(automaton_path).read_text()),
        transitions=parse_transitions(Path(transition_path).read_text()),
        tokens=parse_token_map(Path(tokens_path).read_text()),
        keywords=parse_keywords(Path(keywords_path).read_text()),
    )