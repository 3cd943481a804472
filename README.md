# ll1kit

A small compiler-front-end toolkit. It has:

- a table-driven **scanner** (`ll1kit.scanner`) that turns text into a list
  of token names, driven by an automaton, a transition table, a token map and
  a keyword list;
- an **LL(1) toolkit** that reads a grammar (`ll1kit.grammar`), computes
  FIRST sets (`ll1kit.first`) and FOLLOW sets (`ll1kit.follow`), builds a
  predictive parse table (`ll1kit.table`) and runs a table-driven parser over
  a token list (`ll1kit.ll1`);
- two hand-written **recursive-descent recognisers** for small fixed
  languages (`ll1kit.recursive`);
- a command, `ll1kit`, that runs the whole pipeline over files in a directory
  (`ll1kit.cli`).

It has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Grammar files

One rule per line. Nonterminals are written in angle brackets, alternatives
are separated by `|`, and `$` stands for the empty string:

```
<E> -> <T> <X>
<X> -> + <T> <X> | $
<T> -> <F> <Y>
<Y> -> * <F> <Y> | $
<F> -> ( <E> ) | id
```

The left-hand side of the first line is the start symbol. Inside a `Grammar`
the brackets are dropped, so the nonterminal `<E>` is known as `E`. Outside
brackets, a run of ASCII letters and digits that starts with a letter is one
terminal, and every other character is a terminal on its own. A later rule for
the same nonterminal replaces an earlier one.

`parse_grammar(text)` and `load_grammar(path)` return a `Grammar` with
`nonterminals`, `terminals`, `productions` (nonterminal to a list of
alternatives, each a tuple of symbols) and `start`, plus `is_terminal` and
`is_nonterminal`. `split_symbols(word)` shows how one word is cut into
symbols.

## Using the library

```python
from ll1kit.grammar import load_grammar, format_sets
from ll1kit.first import first_sets
from ll1kit.follow import follow_sets
from ll1kit.table import build_table, format_table
from ll1kit.ll1 import parse

grammar = load_grammar("Grammer.txt")
first = first_sets(grammar)
follow = follow_sets(grammar, first)
table = build_table(grammar, first, follow)

print(format_sets(first))
print(format_sets(follow))
print(format_table(table))

print(parse(grammar, table, ["id", "+", "id", "*", "id"]))
```

What each step does:

- `first_of(grammar, symbol)` gives the FIRST set of one symbol in the order
  found, with `$` when the symbol can derive the empty string. Unknown symbols
  give an empty list; left recursion raises `ValueError`.
- `first_sets(grammar)` gives, for each rule, the FIRST sets of the leading
  symbol of each alternative joined together, so a symbol may appear more than
  once; an empty alternative contributes `$`.
- `next_elements(grammar)` lists, for each nonterminal, every occurrence as
  `(following symbol or None, owning nonterminal)`.
- `follow_sets(grammar, first)` computes FOLLOW sets by repeating until
  nothing changes; the start symbol's set begins with the end marker `$`.
- `build_table(grammar, first, follow)` maps each nonterminal and lookahead to
  an alternative. An alternative that leads with a terminal is entered under
  that terminal; one that leads with a symbol that has a FIRST set is entered
  under the non-empty members of the FIRST set of the rule's own nonterminal;
  alternatives that reduce to `$` are entered under the FOLLOW set. Later
  entries overwrite earlier ones.
- `parse(grammar, table, tokens)` returns `True` or `False`. The stack starts
  as `$` under the start symbol and `$` is appended to the input; `$` symbols
  in table entries are not pushed.

`format_sets`/`parse_sets` and `format_table`/`parse_table` write and read the
plain-text forms (`name symbol ...` and `nonterminal lookahead symbol ...`),
so sets and tables written out earlier can be loaded back.

### Scanner

```python
from ll1kit.scanner import load_scanner

scanner = load_scanner("automaton.txt", "transition.txt", "tokens.txt", "keywords.txt")
tokens = scanner.tokenize("b|a|a")
```

- `automaton.txt` – four lines: the comma-separated states, the start state,
  the comma-separated final states and the error state (`parse_automaton`,
  giving an `Automaton`);
- `transition.txt` – entries `from symbol -> to`; entries without the arrow
  are skipped (`parse_transitions`);
- `tokens.txt` – entries `state symbol token-name` (`parse_token_map`);
- `keywords.txt` – whitespace-separated keywords, which are emitted as
  themselves (`parse_keywords`).

`Scanner.tokenize(text)` joins the lines, splits on `|`, and reads each piece
as runs of ASCII letters and digits or single characters; a blank becomes the
word `space`. `classify(lexeme)` reduces whole words to the classes `[a-z]`,
`[A-Z]`, `[0-9]` or `[a-zA-Z]`. Each lexeme takes the first state, in
automaton order, with a transition on its class; lexemes with no transition
are dropped. If the last state reached is not final, `tokenize` raises
`ValueError`. An automaton file with fewer than four lines raises
`ScannerFormatError`.

### Recursive-descent recognisers

In `ll1kit.recursive`, `accepts_b_then_as(tokens)` recognises one `b_Token`
followed by any number of `a_Token`s, and `parse_expression(tokens)`
recognises arithmetic expressions over `id`, `+`, `-`, `*`, `/` and
parentheses. `parse_expression` returns whether all tokens were consumed and
raises `ParseError` when a factor is neither `id` nor a parenthesised
expression, or a `)` is missing.

## Command line

```
ll1kit [directory]
```

The directory (the current one by default) must hold `input.txt`,
`automaton.txt`, `transition.txt`, `tokens.txt`, `keywords.txt` and
`Grammer.txt`. The command scans `input.txt` into `output.txt`, one token per
line (or the single word `Error` if the scan ends in a non-final state),
writes the FIRST sets to `First.txt`, the FOLLOW sets to `Follow.txt` and the
parse table to `Table.txt`, then parses the scanned tokens with the table read
back from `Table.txt` and prints `Accepted` or `Rejected`. A missing file or a
malformed description prints `error: ...` to standard error and exits with
status 1.

## What it does not do

The table builder does not report LL(1) conflicts; a later entry silently
replaces an earlier one. The parsers only accept or reject: they give no
position of the error, no parse tree and no error recovery.