"""
Port: PostfixConverter
Responsibility: infix expression text -> PostfixSequence.
"""
from typing import Protocol, runtime_checkable

from contracts import PostfixSequence


@runtime_checkable
class PostfixConverter(Protocol):
    def to_postfix(self, expression: str) -> PostfixSequence:
        """
        Converts an infix expression to Reverse Polish order.
        Raises MalformedExpressionError for unbalanced parentheses.
        Raises InvalidCharacterError for characters outside the alphabet.
        """
        ...
