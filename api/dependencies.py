"""
dependencies.py - FastAPI dependency injection.
Each dependency returns its adapter from Request.app.state.
"""
from __future__ import annotations

from typing import Optional

from fastapi import Request

from adapters.postfix_converter.shunting_yard_converter import ShuntingYardConverter
from adapters.postfix_evaluator.stack_evaluator import StackEvaluator
from adapters.variable_provider import HttpVariableProvider
from config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_converter(request: Request) -> ShuntingYardConverter:
    return request.app.state.converter


def get_evaluator(request: Request) -> StackEvaluator:
    return request.app.state.evaluator


def get_value_source(request: Request) -> Optional[HttpVariableProvider]:
    return request.app.state.value_source
