"""
contracts.py - Single source of truth for rpncalc data types.
Modules import token, postfix and outcome models only from here.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from errors import CalculatorError, ErrorKind

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Tokens ──────────────────────────────────────

class TokenKind(str, Enum):
    NUMBER = "number"          # run of digits, e.g. "42"
    IDENTIFIER = "identifier"  # run of letters/digits, treated as a variable name
    OPERATOR = "operator"      # + - * / ^
    FUNCTION = "function"      # s (sin), c (cos)
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class Token(BaseModel):
    kind: TokenKind
    text: str

    model_config = {"frozen": True}


# ─────────────────────────── Postfix ─────────────────────────────────────

class PostfixSequence(BaseModel):
    """Tokens in Reverse Polish order. str() gives the space separated form."""
    tokens: list[Token] = Field(default_factory=list)

    def texts(self) -> list[str]:
        return [t.text for t in self.tokens]

    def __str__(self) -> str:
        return " ".join(self.texts())

    def __len__(self) -> int:
        return len(self.tokens)


# ─────────────────────────── Outcome ─────────────────────────────────────

class ErrorInfo(BaseModel):
    kind: ErrorKind
    code: str
    message: str

    @classmethod
    def from_exception(cls, exc: CalculatorError) -> "ErrorInfo":
        return cls(kind=exc.kind, code=exc.code, message=exc.message)


class CalculationOutcome(BaseModel):
    """Tagged success/failure of one calculation."""
    ok: bool
    value: Optional[float] = None
    postfix: Optional[str] = None   # None if conversion itself failed
    error: Optional[ErrorInfo] = None

    @classmethod
    def success(cls, value: float, postfix: str) -> "CalculationOutcome":
        return cls(ok=True, value=value, postfix=postfix)

    @classmethod
    def failure(
        cls,
        exc: CalculatorError,
        postfix: Optional[str] = None,
    ) -> "CalculationOutcome":
        return cls(ok=False, postfix=postfix, error=ErrorInfo.from_exception(exc))
