"""
schemas.py - FastAPI request/response models.
Kept apart from contracts.py so the API can evolve independently.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

from contracts import Token
from errors import ErrorKind


# ─────────────────────────── /postfix ────────────────────────────

class PostfixRequest(BaseModel):
    expression: str


class PostfixResponse(BaseModel):
    expression: str
    postfix: str
    tokens: list[Token]


# ─────────────────────────── /evaluate, /calculate ───────────────

class EvaluateRequest(BaseModel):
    postfix: str
    variables: dict[str, float] = Field(default_factory=dict)


class CalculateRequest(BaseModel):
    expression: str
    variables: dict[str, float] = Field(default_factory=dict)


# ─────────────────────────── errors / health ─────────────────────

class ErrorResponse(BaseModel):
    kind: ErrorKind
    code: str
    detail: str


class HealthResponse(BaseModel):
    status: str
    version: str
