"""
Port: PostfixEvaluator
Responsibility: deterministic evaluation of a postfix sequence.
"""
from typing import Protocol, Sequence, Union, runtime_checkable

from contracts import PostfixSequence
from ports.variable_provider import VariableProvider

PostfixInput = Union[PostfixSequence, str, Sequence[str]]


@runtime_checkable
class PostfixEvaluator(Protocol):
    def evaluate(self, postfix: PostfixInput, provider: VariableProvider) -> float:
        """
        Evaluates `postfix` left to right with a value stack.
        Variables are resolved through `provider`, once per distinct name.
        Raises MalformedPostfixError on operand-count mismatch or an
        unrecognized token, DivisionByZeroError on division by exact zero.
        """
        ...
