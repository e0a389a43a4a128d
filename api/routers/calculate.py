"""
Router: POST /evaluate, POST /calculate

Both return a CalculationOutcome: calculation errors are reported as
ok=false with the error kind, never as an HTTP error.
Variables missing from the request go to the configured value source.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from adapters.postfix_converter.shunting_yard_converter import ShuntingYardConverter
from adapters.postfix_evaluator.stack_evaluator import StackEvaluator
from adapters.variable_provider import HttpVariableProvider, MappingVariableProvider
from api.dependencies import get_converter, get_evaluator, get_settings, get_value_source
from api.routers.postfix import check_expression_length
from api.schemas import CalculateRequest, EvaluateRequest
from calculator import Calculator
from config import Settings
from contracts import CalculationOutcome
from errors import CalculatorError

router = APIRouter(tags=["calculate"])


@router.post("/evaluate", response_model=CalculationOutcome)
async def evaluate(
    body: EvaluateRequest,
    evaluator: StackEvaluator = Depends(get_evaluator),
    value_source: Optional[HttpVariableProvider] = Depends(get_value_source),
    settings: Settings = Depends(get_settings),
) -> CalculationOutcome:
    check_expression_length(body.postfix, settings)
    provider = MappingVariableProvider(body.variables, fallback=value_source)
    try:
        value = evaluator.evaluate(body.postfix, provider)
    except CalculatorError as exc:
        return CalculationOutcome.failure(exc, postfix=body.postfix)
    return CalculationOutcome.success(value, " ".join(body.postfix.split()))


@router.post("/calculate", response_model=CalculationOutcome)
async def calculate(
    body: CalculateRequest,
    converter: ShuntingYardConverter = Depends(get_converter),
    evaluator: StackEvaluator = Depends(get_evaluator),
    value_source: Optional[HttpVariableProvider] = Depends(get_value_source),
    settings: Settings = Depends(get_settings),
) -> CalculationOutcome:
    check_expression_length(body.expression, settings)
    calc = Calculator(body.expression, converter=converter, evaluator=evaluator)
    provider = MappingVariableProvider(body.variables, fallback=value_source)
    return calc.try_calculate(provider)
