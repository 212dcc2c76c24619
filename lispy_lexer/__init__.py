"""Lexer for a small Lisp-like language, with fixture generation and benchmarking tools."""

__version__ = "0.1.0"
__all__ = ["lexer", "benchmark", "fixturegen"]