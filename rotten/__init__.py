"""Lexer, expression parser, syntax tree nodes and command line for the rotten language."""

__version__ = "0.1.0"

__all__ = ["__version__"]