"""Tokenizer for a small Lisp-like language."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

_WHITESPACE = frozenset(" \t\n\r")
_SINGLE_CHAR_TOKENS = {"(": "LPAREN", ")": "RPAREN", "*": "MULTIPLY"}


class TokenType(enum.Enum):
    """Kinds of token the lexer produces."""

    EOF = enum.auto()
    INTEGER = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    STRING = enum.auto()
    MULTIPLY = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STRING_LITERAL = enum.auto()
    FLOAT = enum.auto()


@dataclass(frozen=True)
class Token:
    """A token: its kind, the exact text it covers and where that text starts."""

    type: TokenType
    text: str
    position: int


class LexerError(Exception):
    """Raised when the input cannot be tokenized."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.position = position


class UnknownTokenError(LexerError):
    """Raised for a character that starts no token."""

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"unknown token {char!r}", position)
        self.char = char


class UnterminatedStringLiteralError(LexerError):
    """Raised when a string literal runs to the end of the input."""

    def __init__(self, position: int) -> None:
        super().__init__("unterminated string literal", position)


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_alpha(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z"


def _is_alnum(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c)


class Lexer:
    """Produces tokens from a piece of source text, one at a time."""

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError("lexer input must be a str")
        self._text = text
        self._pos = 0

    @property
    def position(self) -> int:
        """Offset of the next character to be read."""
        return self._pos

    def _char_at(self, index: int) -> str:
        return self._text[index] if index < len(self._text) else ""

    def _scan_while(self, index: int, predicate) -> int:
        while index < len(self._text) and predicate(self._text[index]):
            index += 1
        return index

    def _number(self, start: int, digits_from: int) -> Token:
        end = self._scan_while(digits_from, _is_digit)
        kind = TokenType.INTEGER
        if self._char_at(end) == ".":
            kind = TokenType.FLOAT
            end = self._scan_while(end + 1, _is_digit)
        self._pos = end
        return Token(kind, self._text[start:end], start)

    def next_token(self) -> Token:
        """Return the next token; at the end of the input return an EOF token.

        Raises UnknownTokenError (after stepping past the offending character)
        or UnterminatedStringLiteralError (after moving to the end of input).
        """
        text = self._text
        pos = self._scan_while(self._pos, lambda ch: ch in _WHITESPACE)
        self._pos = pos
        if pos >= len(text):
            return Token(TokenType.EOF, "", pos)

        c = text[pos]
        if _is_digit(c):
            return self._number(pos, pos)
        if _is_alpha(c):
            end = self._scan_while(pos + 1, _is_alnum)
            self._pos = end
            return Token(TokenType.STRING, text[pos:end], pos)
        if c in _SINGLE_CHAR_TOKENS:
            self._pos = pos + 1
            return Token(TokenType[_SINGLE_CHAR_TOKENS[c]], c, pos)
        if c in "+-":
            if _is_digit(self._char_at(pos + 1)):
                return self._number(pos, pos + 1)
            self._pos = pos + 1
            kind = TokenType.PLUS if c == "+" else TokenType.MINUS
            return Token(kind, c, pos)
        if c == '"':
            close = text.find('"', pos + 1)
            if close == -1:
                self._pos = len(text)
                raise UnterminatedStringLiteralError(pos)
            self._pos = close + 1
            return Token(TokenType.STRING_LITERAL, text[pos:close + 1], pos)

        self._pos = pos + 1
        raise UnknownTokenError(c, pos)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, the EOF token."""
        while True:
            token = self.next_token()
            if token.type is TokenType.EOF:
                return
            yield token


def tokenize(text: str) -> list[Token]:
    """Return every token of ``text``, without the trailing EOF token."""
    return list(Lexer(text))