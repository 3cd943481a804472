"""Table-driven LL(1) parsing of a token sequence."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping, Sequence

from .grammar import EPSILON, Grammar

END_MARKER = "$"


def parse(
    grammar: Grammar,
    table: Mapping[str, Mapping[str, Sequence[str]]],
    tokens: Iterable[str],
) -> bool:
    """Tell whether ``tokens`` derive from the grammar's start symbol.

    The parse stack starts as the end marker ``$`` under the start symbol and
    the input gets ``$`` appended. Terminals on the stack must match the
    current token; other symbols are expanded through ``table``. Empty-string
    symbols in table entries are not pushed. The end marker on the stack is
    matched only when ``$`` is a terminal of the grammar.
    """
    if grammar.start is None:
        return False

    stack: list[str] = [END_MARKER, grammar.start]
    remaining = deque([*tokens, END_MARKER])

    while stack and remaining:
        top = stack[-1]
        current = remaining[0]
        if grammar.is_terminal(top):
            if top != current:
                return False
            stack.pop()
            remaining.popleft()
            continue
        alternative = table.get(top, {}).get(current)
        if alternative is None:
            return False
        stack.pop()
        stack.extend(symbol for symbol in reversed(alternative) if symbol != EPSILON)
    return True