"""
calculator.py - Calculator facade: expression -> postfix -> value.

Errors from either stage propagate unchanged from calculate();
try_calculate() folds them into a CalculationOutcome instead.
"""
from __future__ import annotations

import logging
from typing import Optional

from adapters.postfix_converter.shunting_yard_converter import ShuntingYardConverter
from adapters.postfix_evaluator.stack_evaluator import StackEvaluator
from contracts import CalculationOutcome, PostfixSequence
from errors import CalculatorError
from ports.postfix_converter import PostfixConverter
from ports.postfix_evaluator import PostfixEvaluator
from ports.variable_provider import VariableProvider

logger = logging.getLogger("rpncalc")


class Calculator:
    def __init__(
        self,
        expression: str,
        converter: Optional[PostfixConverter] = None,
        evaluator: Optional[PostfixEvaluator] = None,
    ) -> None:
        self._expression = expression
        self._converter = converter or ShuntingYardConverter()
        self._evaluator = evaluator or StackEvaluator()

    @property
    def expression(self) -> str:
        return self._expression

    def to_postfix(self) -> PostfixSequence:
        return self._converter.to_postfix(self._expression)

    def calculate(self, provider: VariableProvider) -> float:
        postfix = self.to_postfix()
        return self._evaluator.evaluate(postfix, provider)

    def try_calculate(self, provider: VariableProvider) -> CalculationOutcome:
        postfix: PostfixSequence | None = None
        try:
            postfix = self.to_postfix()
            value = self._evaluator.evaluate(postfix, provider)
        except CalculatorError as exc:
            logger.debug("Calculation of %r failed: %s", self._expression, exc)
            return CalculationOutcome.failure(
                exc, postfix=str(postfix) if postfix is not None else None
            )
        return CalculationOutcome.success(value, str(postfix))
