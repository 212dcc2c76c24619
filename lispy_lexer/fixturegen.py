"""Random program generator for lexer benchmark fixtures."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence
from pathlib import Path

KB = 1024
_DIGITS = "0123456789"
_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_VISIBLE = (
    "!#$%&'()*+,-./0123456789:;<=>?@"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_`"
    "abcdefghijklmnopqrstuvwxyz{|}~"
)


class FixtureGenerator:
    """Generates random forms of the language's grammar."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def _coin(self) -> bool:
        return self.rng.randrange(2) == 1

    def _digits(self) -> str:
        out = [self.rng.choice(_DIGITS)]
        while self.rng.randrange(100) >= 50:
            out.append(self.rng.choice(_DIGITS))
        return "".join(out)

    def _sign(self) -> str:
        return "-" if self._coin() else "+"

    def form(self) -> str:
        """An atom or a list, with equal chance."""
        return self.list() if self._coin() else self.atom()

    def atom(self) -> str:
        """A number, a symbol or a string, with equal chance."""
        choice = self.rng.randrange(3)
        if choice == 0:
            return self.number()
        if choice == 1:
            return self.symbol()
        return self.string()

    def list(self) -> str:
        """Parentheses around nothing or around one form."""
        inner = self.form() if self._coin() else ""
        return f"({inner})"

    def number(self) -> str:
        """An integer or a float, with equal chance."""
        return self.float() if self._coin() else self.integer()

    def integer(self) -> str:
        """Digits, signed half of the time."""
        if self.rng.randrange(100) >= 50:
            return self._sign() + self._digits()
        return self._digits()

    def float(self) -> str:
        """A signed number with a decimal point."""
        return f"{self._sign()}{self._digits()}.{self._digits()}"

    def symbol(self) -> str:
        """A letter followed by letters and digits."""
        out = [self.rng.choice(_LETTERS)]
        while True:
            choice = self.rng.randrange(3)
            if choice == 0:
                return "".join(out)
            out.append(self.rng.choice(_LETTERS if choice == 1 else _DIGITS))

    def string(self) -> str:
        """A double-quoted run of visible characters."""
        out = []
        while self._coin():
            out.append(self.rng.choice(_VISIBLE))
        return '"' + "".join(out) + '"'


def generate_program(size_in_kb: int, rng: random.Random | None = None) -> str:
    """Generate newline-separated forms until at least ``size_in_kb`` KiB of form text."""
    if size_in_kb <= 0:
        raise ValueError("size must be a positive integer")
    generator = FixtureGenerator(rng)
    target = size_in_kb * KB
    parts = []
    length = 0
    while length < target:
        form = generator.form()
        parts.append(form + "\n")
        length += len(form)
    return "".join(parts)


def write_fixture(path: str | Path, size_in_kb: int, rng: random.Random | None = None) -> int:
    """Write a generated program to ``path``; return the number of characters written."""
    text = generate_program(size_in_kb, rng)
    with open(path, "w") as handle:
        handle.write(text)
    return len(text)


def _parse_size(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command line: <filepath> <size (in kb)>."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("[ERROR]: Usage: fixturegen <filepath> <size (in kb)>", file=sys.stderr)
        return 1
    path, size_text = args
    size_in_kb = _parse_size(size_text)
    if size_in_kb <= 0:
        print("[ERROR]: Size must be a positive integer.", file=sys.stderr)
        return 1
    try:
        write_fixture(path, size_in_kb)
    except OSError as exc:
        print(f"open: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())