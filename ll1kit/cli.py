"""Command line: scan the input, build the LL(1) table and parse the tokens."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .first import first_sets
from .follow import follow_sets
from .grammar import format_sets, load_grammar, parse_sets
from .ll1 import parse
from .scanner import ScannerFormatError, load_scanner
from .table import build_table, format_table, parse_table

INPUT = "input.txt"
OUTPUT = "output.txt"
AUTOMATON = "automaton.txt"
TRANSITION = "transition.txt"
TOKENS = "tokens.txt"
KEYWORDS = "keywords.txt"
GRAMMAR = "Grammer.txt"
FIRST = "First.txt"
FOLLOW = "Follow.txt"
TABLE = "Table.txt"


def _scan(base: Path) -> None:
    scanner = load_scanner(
        base / AUTOMATON, base / TRANSITION, base / TOKENS, base / KEYWORDS
    )
    text = (base / INPUT).read_text()
    try:
        scanned = "".join(token + "\n" for token in scanner.tokenize(text))
    except ScannerFormatError:
        raise
    except ValueError:
        scanned = "Error"
    (base / OUTPUT).write_text(scanned)


def _run(base: Path) -> bool:
    _scan(base)
    grammar = load_grammar(base / GRAMMAR)

    (base / FIRST).write_text(format_sets(first_sets(grammar)))
    first = parse_sets((base / FIRST).read_text())

    (base / FOLLOW).write_text(format_sets(follow_sets(grammar, first)))
    follow = parse_sets((base / FOLLOW).read_text())

    (base / TABLE).write_text(format_table(build_table(grammar, first, follow)))
    table = parse_table((base / TABLE).read_text())

    tokens = (base / OUTPUT).read_text().splitlines()
    return parse(grammar, table, tokens)


def main(argv: list[str] | None = None) -> int:
    """Run the whole pipeline in a directory and print Accepted or Rejected."""
    parser = argparse.ArgumentParser(
        prog="ll1kit",
        description="Scan input.txt, build FIRST, FOLLOW and the parse table "
        "from Grammer.txt, then parse the scanned tokens.",
    )
    parser.add_argument(
        "directory", nargs="?", default=".", help="directory holding the files"
    )
    args = parser.parse_args(argv)

    try:
        accepted = _run(Path(args.directory))
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print("Accepted" if accepted else "Rejected")
    return 0


if __name__ == "__main__":
    sys.exit(main())