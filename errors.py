"""
errors.py - error taxonomy for rpncalc.

Every failure of the converter, the evaluator or a variable provider is a
CalculatorError subclass with a stable `kind` and numeric `code`, so callers
can branch on the kind instead of parsing message text.

Codes:
  1xxx - infix expression (conversion)
  2xxx - postfix sequence (evaluation)
  3xxx - variable providers
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    MALFORMED_EXPRESSION = "malformed_expression"
    INVALID_CHARACTER = "invalid_character"
    MALFORMED_POSTFIX = "malformed_postfix"
    DIVISION_BY_ZERO = "division_by_zero"
    UNKNOWN_OPERATOR = "unknown_operator"
    UNKNOWN_FUNCTION = "unknown_function"
    DOMAIN_ERROR = "domain_error"
    UNBOUND_VARIABLE = "unbound_variable"
    VARIABLE_SOURCE = "variable_source"


class PostfixDefect(str, Enum):
    INSUFFICIENT_OPERANDS = "insufficient_operands"
    TOO_MANY_OPERANDS = "too_many_operands"
    UNRECOGNIZED_TOKEN = "unrecognized_token"
    EMPTY = "empty"


class CalculatorError(Exception):
    kind: ErrorKind
    code: str

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# ─────────────────────────── Conversion ──────────────────────────────────

class MalformedExpressionError(CalculatorError):
    """Unbalanced parentheses in the infix expression."""
    kind = ErrorKind.MALFORMED_EXPRESSION
    code = "1001"


class InvalidCharacterError(CalculatorError):
    kind = ErrorKind.INVALID_CHARACTER
    code = "1002"

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"Invalid character {char!r} at position {position}")
        self.char = char
        self.position = position


# ─────────────────────────── Evaluation ──────────────────────────────────

class MalformedPostfixError(CalculatorError):
    kind = ErrorKind.MALFORMED_POSTFIX
    code = "2001"

    def __init__(self, message: str, defect: PostfixDefect) -> None:
        super().__init__(message)
        self.defect = defect


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    kind = ErrorKind.DIVISION_BY_ZERO
    code = "2002"

    def __init__(self, message: str = "Division by zero") -> None:
        super().__init__(message)


class UnknownOperatorError(CalculatorError):
    kind = ErrorKind.UNKNOWN_OPERATOR
    code = "2003"

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Unknown operator: {symbol!r}")
        self.symbol = symbol


class UnknownFunctionError(CalculatorError):
    kind = ErrorKind.UNKNOWN_FUNCTION
    code = "2004"

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Unknown function: {symbol!r}")
        self.symbol = symbol


class ArithmeticDomainError(CalculatorError):
    """math.pow outside its domain, e.g. a negative base with a fractional exponent."""
    kind = ErrorKind.DOMAIN_ERROR
    code = "2005"


# ─────────────────────────── Variable providers ──────────────────────────

class UnboundVariableError(CalculatorError):
    kind = ErrorKind.UNBOUND_VARIABLE
    code = "3001"

    def __init__(self, name: str) -> None:
        super().__init__(f"No value for variable {name!r}")
        self.name = name


class VariableSourceError(CalculatorError):
    kind = ErrorKind.VARIABLE_SOURCE
    code = "3002"

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Value source failed for variable {name!r}: {reason}")
        self.name = name
        self.reason = reason
