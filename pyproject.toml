[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lispy-lexer"
version = "0.1.0"
description = "A small lexer for a Lisp-like language, with a fixture generator and benchmark tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["lisp", "lexer", "tokenizer", "s-expression", "benchmark"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lispy-lexer-bench = "lispy_lexer.benchmark:main"
lispy-fixturegen = "lispy_lexer.fixturegen:main"

[tool.hatch.build.targets.wheel]
packages = ["lispy_lexer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
