# lispy-lexer

A small lexer for a Lisp-like language, plus two helper tools: a random
program generator for building test fixtures and a benchmark runner that
times the lexer on them.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Tokens

The lexer (`lispy_lexer.lexer`) recognises:

| Input                        | Token type          |
|------------------------------|---------------------|
| `(` / `)`                    | `LPAREN` / `RPAREN` |
| `*`                          | `MULTIPLY`          |
| `+` / `-` not before a digit | `PLUS` / `MINUS`    |
| `123`, `-123`, `+123`        | `INTEGER`           |
| `3.14`, `-3.14`, `+3.14`     | `FLOAT`             |
| `dog`, `x1`                  | `STRING` (symbols)  |
| `"hello world"`              | `STRING_LITERAL`    |

Spaces, tabs, newlines and carriage returns separate tokens. Any other
character raises `UnknownTokenError`; a string literal without a closing
quote raises `UnterminatedStringLiteralError`. Both derive from
`LexerError`, which carries the `position` of the offending input.

Each `Token` has a `type` (a `TokenType`), the exact `text` it covers
(string literals keep their quotes) and the `position` where it starts.

## Library use

```python
from lispy_lexer.lexer import Lexer, TokenType, tokenize

for tok in tokenize("(* 5 (+ 2 5))"):
    print(tok.type, tok.text)

lexer = Lexer('(dog "cat")')
current = lexer.next_token()
while current.type is not TokenType.EOF:
    print(current)
    current = lexer.next_token()
```

`next_token()` returns an `EOF` token once the input is used up. A `Lexer`
can also be iterated directly; iteration stops at the end of input and does
not yield the `EOF` token. `tokenize(text)` returns that list.

## Generating fixtures

```
lispy-fixturegen small.lisp 10
lispy-fixturegen large.lisp 1000
```

The second argument is the size in kilobytes: forms, one per line, are
generated until their text reaches at least that many KiB. A missing
argument or a size that is not a positive integer prints an error and
exits with status 1.

From code, `lispy_lexer.fixturegen` offers `generate_program(size_in_kb, rng)`
and `write_fixture(path, size_in_kb, rng)`; pass a `random.Random` instance
for reproducible output. `FixtureGenerator` produces single forms, atoms,
lists, numbers, symbols and string literals.

## Benchmarking

```
lispy-lexer-bench small.lisp large.lisp
lispy-lexer-bench --samples 100 small.lisp
```

Each fixture is lexed `--samples` times (1024 by default) and the average,
minimum, maximum and standard deviation of the run times are printed. With
no fixture arguments, `./benchmark/fixtures/small.lisp`, `medium.lisp` and
`large.lisp` are used. Lexer errors met during a run are skipped over; a
fixture that cannot be read is reported on standard error.

From code, `lispy_lexer.benchmark` offers `benchmark_lexer(path, samples)`,
which returns the measured durations, `summarize(measures)`, which returns a
`BenchmarkStats`, and `format_report(name, measures)`.

## What it does not do

The package only splits text into tokens. It has no parser and no
evaluator: it does not build expressions from the tokens or run programs.