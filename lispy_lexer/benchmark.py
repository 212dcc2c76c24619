"""Timing of the lexer over fixture files, with a summary report."""

from __future__ import annotations

import argparse
import math
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from lispy_lexer.lexer import Lexer, LexerError, TokenType

DEFAULT_SAMPLES = 1024
DEFAULT_FIXTURES = (
    "./benchmark/fixtures/small.lisp",
    "./benchmark/fixtures/medium.lisp",
    "./benchmark/fixtures/large.lisp",
)
_RULE = "-" * 50


@dataclass(frozen=True)
class BenchmarkStats:
    """Summary of a set of timings, in seconds."""

    samples: int
    average: float
    minimum: float
    maximum: float
    stddev: float


def load_fixture(path: str | Path) -> str:
    """Read a fixture file whole."""
    return Path(path).read_text()


def stddev(measures: Sequence[float], average: float) -> float:
    """Population standard deviation of ``measures`` around ``average``."""
    if not measures:
        return 0.0
    return math.sqrt(sum((m - average) ** 2 for m in measures) / len(measures))


def summarize(measures: Sequence[float]) -> BenchmarkStats:
    """Compute the statistics of a non-empty set of timings."""
    if not measures:
        raise ValueError("no measures to summarize")
    average = sum(measures) / len(measures)
    return BenchmarkStats(
        samples=len(measures),
        average=average,
        minimum=min(measures),
        maximum=max(measures),
        stddev=stddev(measures, average),
    )


def format_report(name: str, measures: Sequence[float]) -> str:
    """Render the report for one benchmark; empty when there are no measures."""
    if not name or not measures:
        return ""
    stats = summarize(measures)
    lines = [
        _RULE,
        f"Benchmarking {name}...",
        f"Number of samples: {stats.samples}",
        f"Benchmark: {name}",
        f"Average: {stats.average:.6f} seconds",
        f"Minimum: {stats.minimum:.6f} seconds",
        f"Maximum: {stats.maximum:.6f} seconds",
        f"Standard Deviation: {stats.stddev:.6f} seconds",
    ]
    return "\n".join(lines) + "\n"


def _lex_to_end(text: str) -> None:
    lexer = Lexer(text)
    while True:
        try:
            token = lexer.next_token()
        except LexerError:
            continue
        if token.type is TokenType.EOF:
            return


def benchmark_lexer(path: str | Path, samples: int = DEFAULT_SAMPLES) -> list[float]:
    """Lex the fixture at ``path`` ``samples`` times; return each run's duration."""
    text = load_fixture(path)
    measures = []
    for _ in range(samples):
        start = time.perf_counter()
        _lex_to_end(text)
        measures.append(time.perf_counter() - start)
    return measures


def main(argv: Sequence[str] | None = None) -> int:
    """Run the lexer benchmark over the given fixtures, or the default ones."""
    parser = argparse.ArgumentParser(description="Benchmark the lexer.")
    parser.add_argument("fixtures", nargs="*", default=list(DEFAULT_FIXTURES))
    parser.add_argument("--samples", type=int, default=DEFAULT_SAMPLES)
    args = parser.parse_args(argv)

    print("Lexer Benchmark")
    for path in args.fixtures:
        try:
            measures = benchmark_lexer(path, args.samples)
        except OSError as exc:
            print(f"Error loading fixture: {exc}", file=sys.stderr)
            continue
        sys.stdout.write(format_report(path, measures))
    print("Lexer Benchmark Complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())