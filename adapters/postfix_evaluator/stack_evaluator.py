"""
Adapter: StackEvaluator
Implements the PostfixEvaluator port - one value stack, one variable table.

Token handling, in order:
  s / c        - function: pop 1, push sin/cos
  digits       - number literal
  letters      - variable; first occurrence asks the provider, later ones
                 reuse the cached value (the table lives for one call only)
  + - * / ^    - operator: pop b, pop a, push a OP b
  anything else is a malformed postfix sequence

sin/cos of an infinite operand and a non-finite final result are
ArithmeticDomainError; intermediate infinities are allowed (1 / inf == 0).
"""
from __future__ import annotations

import logging
import math
from typing import Callable

from adapters.classifier import is_function, is_identifier, is_number, is_operator
from contracts import PostfixSequence
from errors import (
    ArithmeticDomainError,
    DivisionByZeroError,
    MalformedPostfixError,
    PostfixDefect,
    UnknownFunctionError,
    UnknownOperatorError,
)
from ports.postfix_evaluator import PostfixInput
from ports.variable_provider import VariableProvider

logger = logging.getLogger("rpncalc.evaluator")


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZeroError()
    return a / b


def _power(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except (ValueError, OverflowError) as exc:
        raise ArithmeticDomainError(f"{a} ^ {b}: {exc}") from exc


_OP_FUNCS: dict[str, Callable[[float, float], float]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
    "^": _power,
}

_FUNCTIONS: dict[str, Callable[[float], float]] = {
    "s": math.sin,
    "c": math.cos,
}


def apply_operator(op: str, a: float, b: float) -> float:
    fn = _OP_FUNCS.get(op)
    if fn is None:
        raise UnknownOperatorError(op)
    return fn(a, b)


def apply_function(func: str, a: float) -> float:
    fn = _FUNCTIONS.get(func)
    if fn is None:
        raise UnknownFunctionError(func)
    try:
        return fn(a)
    except ValueError as exc:
        raise ArithmeticDomainError(f"{func}({a}): {exc}") from exc


def _token_texts(postfix: PostfixInput) -> list[str]:
    if isinstance(postfix, PostfixSequence):
        return postfix.texts()
    if isinstance(postfix, str):
        return postfix.split()
    return list(postfix)


class StackEvaluator:
    """Evaluates postfix sequences to float."""

    def evaluate(self, postfix: PostfixInput, provider: VariableProvider) -> float:
        stack: list[float] = []
        variables: dict[str, float] = {}

        for token in _token_texts(postfix):
            if is_function(token):
                if len(stack) < 1:
                    raise MalformedPostfixError(
                        f"Insufficient operands for function {token!r}",
                        PostfixDefect.INSUFFICIENT_OPERANDS,
                    )
                stack.append(apply_function(token, stack.pop()))

            elif is_number(token):
                stack.append(float(token))

            elif is_identifier(token):
                if token not in variables:
                    variables[token] = float(provider.request(token))
                    logger.debug("Resolved %s = %r", token, variables[token])
                stack.append(variables[token])

            elif is_operator(token):
                if len(stack) < 2:
                    raise MalformedPostfixError(
                        f"Insufficient operands for operator {token!r}",
                        PostfixDefect.INSUFFICIENT_OPERANDS,
                    )
                b = stack.pop()
                a = stack.pop()
                stack.append(apply_operator(token, a, b))

            else:
                raise MalformedPostfixError(
                    f"Unrecognized token in postfix sequence: {token!r}",
                    PostfixDefect.UNRECOGNIZED_TOKEN,
                )

        if not stack:
            raise MalformedPostfixError("Empty postfix sequence", PostfixDefect.EMPTY)
        if len(stack) > 1:
            raise MalformedPostfixError(
                f"Too many operands: {len(stack)} values left on the stack",
                PostfixDefect.TOO_MANY_OPERANDS,
            )
        if not math.isfinite(stack[0]):
            raise ArithmeticDomainError(f"Result is not a finite number: {stack[0]!r}")

        logger.debug("evaluate -> %r (%d variables)", stack[0], len(variables))
        return stack[0]
