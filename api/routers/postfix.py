"""
Router: POST /postfix
Converts an infix expression to postfix without evaluating it.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from adapters.postfix_converter.shunting_yard_converter import ShuntingYardConverter
from api.dependencies import get_converter, get_settings
from api.schemas import PostfixRequest, PostfixResponse
from config import Settings

router = APIRouter(prefix="/postfix", tags=["postfix"])


def check_expression_length(expression: str, settings: Settings) -> None:
    if len(expression) > settings.max_expression_length:
        raise HTTPException(
            status_code=413,
            detail=f"Expression longer than {settings.max_expression_length} characters",
        )


@router.post("", response_model=PostfixResponse)
async def to_postfix(
    body: PostfixRequest,
    converter: ShuntingYardConverter = Depends(get_converter),
    settings: Settings = Depends(get_settings),
) -> PostfixResponse:
    check_expression_length(body.expression, settings)
    postfix = converter.to_postfix(body.expression)
    return PostfixResponse(
        expression=body.expression,
        postfix=str(postfix),
        tokens=postfix.tokens,
    )
