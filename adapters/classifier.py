"""
classifier.py - character/token classification shared by the converter and
the evaluator. Pure, total functions: any string is accepted, nothing raises.
"""
from __future__ import annotations

OPERATORS = frozenset("+-*/^")
FUNCTIONS = frozenset("sc")  # s = sin, c = cos

_PRIORITY: dict[str, int] = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def is_operator(ch: str) -> bool:
    return ch in OPERATORS


def is_function(ch: str) -> bool:
    return ch in FUNCTIONS


def priority(op: str) -> int:
    """Binding rank of `op`; 0 for anything that is not an operator."""
    return _PRIORITY.get(op, 0)


def is_number(token: str) -> bool:
    return token.isascii() and token.isdecimal()


def is_identifier(token: str) -> bool:
    return token.isascii() and token.isalpha()
