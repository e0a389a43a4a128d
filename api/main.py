"""
api/main.py - FastAPI entry point.

Lifespan:
  - Creates the stateless adapters once (converter, evaluator)
  - Creates the HTTP value source if RPNCALC_VALUE_SOURCE_URL is set

CalculatorError escaping a route (e.g. from /postfix) becomes HTTP 422
with the error kind and code.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.postfix_converter.shunting_yard_converter import ShuntingYardConverter
from adapters.postfix_evaluator.stack_evaluator import StackEvaluator
from adapters.variable_provider import HttpVariableProvider
from api.routers import calculate, postfix
from api.schemas import ErrorResponse, HealthResponse
from config import Settings
from errors import CalculatorError

logger = logging.getLogger("rpncalc")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    app.state.converter = ShuntingYardConverter()
    app.state.evaluator = StackEvaluator()
    app.state.value_source = None
    if settings.value_source_url:
        logger.info("Using value source %s", settings.value_source_url)
        app.state.value_source = HttpVariableProvider(
            source_url=settings.value_source_url,
            timeout_ms=settings.value_source_timeout_ms,
        )

    logger.info("rpncalc API ready.")
    yield
    logger.info("Shutting down.")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(postfix.router)
    app.include_router(calculate.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    @app.exception_handler(CalculatorError)
    async def calculator_error_handler(request: Request, exc: CalculatorError):
        body = ErrorResponse(kind=exc.kind, code=exc.code, detail=exc.message)
        return JSONResponse(status_code=422, content=body.model_dump(mode="json"))

    return app


app = create_app()
