import random
import re

import pytest

from lispy_lexer.fixturegen import FixtureGenerator, generate_program, main, write_fixture
from lispy_lexer.lexer import TokenType, tokenize

SEEDS = range(40)


def _gen(seed):
    return FixtureGenerator(random.Random(seed))


def _full_match(pattern, text):
    match = re.fullmatch(pattern, text)
    return match.group(0) if match else None


@pytest.mark.parametrize("seed", SEEDS)
def test_integer_shape(seed):
    text = _gen(seed).integer()
    assert _full_match(r"[+-]?[0-9]+", text) == text
    tokens = tokenize(text)
    assert [(t.type, t.text) for t in tokens] == [(TokenType.INTEGER, text)]


@pytest.mark.parametrize("seed", SEEDS)
def test_float_shape(seed):
    text = _gen(seed).float()
    assert _full_match(r"[+-][0-9]+\.[0-9]+", text) == text
    tokens = tokenize(text)
    assert [(t.type, t.text) for t in tokens] == [(TokenType.FLOAT, text)]


@pytest.mark.parametrize("seed", SEEDS)
def test_symbol_shape(seed):
    text = _gen(seed).symbol()
    assert _full_match(r"[A-Za-z][A-Za-z0-9]*", text) == text
    tokens = tokenize(text)
    assert [(t.type, t.text) for t in tokens] == [(TokenType.STRING, text)]


@pytest.mark.parametrize("seed", SEEDS)
def test_string_shape(seed):
    text = _gen(seed).string()
    assert _full_match(r'"[^" ]*"', text) == text
    tokens = tokenize(text)
    assert [(t.type, t.text) for t in tokens] == [(TokenType.STRING_LITERAL, text)]


@pytest.mark.parametrize("seed", SEEDS)
def test_list_is_parenthesised(seed):
    text = _gen(seed).list()
    assert text.startswith("(") and text.endswith(")")


@pytest.mark.parametrize("seed", SEEDS)
def test_number_lexes_as_one_token(seed):
    text = _gen(seed).number()
    tokens = tokenize(text)
    assert len(tokens) == 1
    assert tokens[0].type in (TokenType.INTEGER, TokenType.FLOAT)
    assert tokens[0].text == text


@pytest.mark.parametrize("seed", SEEDS)
def test_atom_lexes_as_one_token(seed):
    tokens = tokenize(_gen(seed).atom())
    assert len(tokens) == 1


def test_program_reaches_size_and_lexes():
    text = generate_program(1, random.Random(7))
    assert text.endswith("\n")
    assert len(text) >= 1024
    tokens = tokenize(text)
    lparens = sum(t.type is TokenType.LPAREN for t in tokens)
    rparens = sum(t.type is TokenType.RPAREN for t in tokens)
    assert lparens == rparens


def test_program_is_deterministic_for_a_seed():
    first = generate_program(1, random.Random(3))
    second = generate_program(1, random.Random(3))
    assert len(first) >= 1024
    assert first.endswith("\n")
    assert first == second
    first_tokens = [(t.type, t.text) for t in tokenize(first)]
    second_tokens = [(t.type, t.text) for t in tokenize(second)]
    assert len(first_tokens) > 0
    assert first_tokens == second_tokens


@pytest.mark.parametrize("size", [0, -2])
def test_program_rejects_non_positive_size(size):
    with pytest.raises(ValueError):
        generate_program(size)


def test_write_fixture(tmp_path):
    path = tmp_path / "out.lisp"
    written = write_fixture(path, 1, random.Random(1))
    assert path.read_text() == generate_program(1, random.Random(1))
    assert written == len(path.read_text())


def test_main_wrong_argument_count(capsys):
    assert main(["only-one"]) == 1
    assert "Usage" in capsys.readouterr().err


@pytest.mark.parametrize("size", ["0", "abc", "-5"])
def test_main_bad_size(tmp_path, capsys, size):
    assert main([str(tmp_path / "x.lisp"), size]) == 1
    assert "Size must be a positive integer." in capsys.readouterr().err
    assert not (tmp_path / "x.lisp").exists()


def test_main_writes_file(tmp_path):
    path = tmp_path / "x.lisp"
    assert main([str(path), "1"]) == 0
    assert len(path.read_text()) >= 1024


def test_main_unwritable_path(tmp_path):
    assert main([str(tmp_path / "missing" / "x.lisp"), "1"]) == 1