"""
Adapter: ShuntingYardConverter
Implements the PostfixConverter port.

Single left-to-right scan with one operator stack:
  - digit/letter runs are merged greedily into one operand token
  - a run equal to a function marker (s, c) is a function, never a variable
  - "(" is pushed, ")" pops to the matching "("
  - an operator pops everything of higher or equal priority first,
    so all operators are left-associative (2^3^2 == (2^3)^2)
  - functions rank 0 and are only emitted by ")" or the final drain
"""
from __future__ import annotations

import logging

from adapters.classifier import is_function, is_operator, priority
from contracts import PostfixSequence, Token, TokenKind
from errors import InvalidCharacterError, MalformedExpressionError

logger = logging.getLogger("rpncalc.converter")


def _is_operand_char(ch: str) -> bool:
    return ch.isascii() and (ch.isdecimal() or ch.isalpha())


def _operand_token(run: str) -> Token:
    if run.isdecimal():
        return Token(kind=TokenKind.NUMBER, text=run)
    return Token(kind=TokenKind.IDENTIFIER, text=run)


class ShuntingYardConverter:
    """Infix -> postfix conversion (shunting-yard variant)."""

    def to_postfix(self, expression: str) -> PostfixSequence:
        stack: list[Token] = []
        output: list[Token] = []

        i = 0
        n = len(expression)
        while i < n:
            ch = expression[i]

            if ch.isspace():
                i += 1
                continue

            if _is_operand_char(ch):
                start = i
                while i + 1 < n and _is_operand_char(expression[i + 1]):
                    i += 1
                run = expression[start:i + 1]
                if is_function(run):
                    stack.append(Token(kind=TokenKind.FUNCTION, text=run))
                else:
                    output.append(_operand_token(run))

            elif ch == "(":
                stack.append(Token(kind=TokenKind.LEFT_PAREN, text=ch))

            elif ch == ")":
                while stack and stack[-1].kind != TokenKind.LEFT_PAREN:
                    output.append(stack.pop())
                if not stack:
                    raise MalformedExpressionError(
                        f"Unbalanced parentheses: ')' at position {i} has no matching '('"
                    )
                stack.pop()

            elif is_operator(ch):
                while (
                    stack
                    and stack[-1].kind != TokenKind.LEFT_PAREN
                    and priority(stack[-1].text) >= priority(ch)
                ):
                    output.append(stack.pop())
                stack.append(Token(kind=TokenKind.OPERATOR, text=ch))

            else:
                raise InvalidCharacterError(ch, i)

            i += 1

        while stack:
            top = stack.pop()
            if top.kind == TokenKind.LEFT_PAREN:
                raise MalformedExpressionError("Unbalanced parentheses: '(' is never closed")
            output.append(top)

        postfix = PostfixSequence(tokens=output)
        logger.debug("to_postfix %r -> %r", expression, str(postfix))
        return postfix
