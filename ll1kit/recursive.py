"""Hand-written recursive-descent recognisers for two small languages."""

from __future__ import annotations

from collections.abc import Iterable


class ParseError(ValueError):
    """The token sequence breaks the grammar at a point that cannot be skipped."""


class _Cursor:
    def __init__(self, tokens: Iterable[str]) -> None:
        self.tokens = list(tokens)
        self.position = 0

    @property
    def current(self) -> str:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return ""

    @property
    def at_end(self) -> bool:
        return self.position == len(self.tokens)

    def advance(self) -> None:
        self.position += 1


def accepts_b_then_as(tokens: Iterable[str]) -> bool:
    """Recognise ``S -> b A``, ``A -> a A | empty`` over ``b_Token``/``a_Token``."""
    cursor = _Cursor(tokens)
    if cursor.current != "b_Token":
        return False
    cursor.advance()
    while cursor.current == "a_Token":
        cursor.advance()
    return cursor.at_end


def _expression(cursor: _Cursor) -> None:
    _term(cursor)
    while cursor.current in ("+", "-"):
        cursor.advance()
        _term(cursor)


def _term(cursor: _Cursor) -> None:
    _factor(cursor)
    while cursor.current in ("*", "/"):
        cursor.advance()
        _factor(cursor)


def _factor(cursor: _Cursor) -> None:
    if cursor.current == "id":
        cursor.advance()
    elif cursor.current == "(":
        cursor.advance()
        _expression(cursor)
        if cursor.current != ")":
            raise ParseError("the ) not found")
        cursor.advance()
    else:
        raise ParseError("not id or (")


def parse_expression(tokens: Iterable[str]) -> bool:
    """Recognise arithmetic expressions over ``id``, ``+ - * /`` and parentheses.

    Returns whether all tokens form one expression; a factor that is neither
    ``id`` nor a parenthesised expression raises ParseError.
    """
    cursor = _Cursor(tokens)
    _expression(cursor)
    return cursor.at_end