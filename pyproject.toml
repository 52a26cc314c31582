[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rotten"
version = "0.1.0"
description = "Lexer, expression parser and interactive prompt for the rotten scripting language"
requires-python = ">=3.10"
keywords = ["interpreter", "lexer", "parser", "repl", "language"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rotten = "rotten.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rotten"]

[tool.pytest.ini_options]
addopts = "-ra"
