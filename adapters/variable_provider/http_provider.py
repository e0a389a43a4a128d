"""
Adapter: HttpVariableProvider
Fetches variable values from an external HTTP value source.

Request:  POST <source_url>  {"name": "<variable>"}
Response: {"value": <number>}  (optionally wrapped under "result")
"""
from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from errors import VariableSourceError

logger = logging.getLogger("rpncalc.variables")


class _ValueSourceOutput(BaseModel):
    value: float


class HttpVariableProvider:
    def __init__(self, source_url: str, timeout_ms: int = 5_000) -> None:
        self._url = source_url.strip()
        self._timeout = timeout_ms / 1000.0

    def request(self, name: str) -> float:
        if not self._url:
            raise VariableSourceError(name, "missing value source URL")
        try:
            response = httpx.post(
                self._url,
                json={"name": name},
                timeout=self._timeout,
            )
            response.raise_for_status()
            payload: Any = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Value source request for %r failed: %s", name, exc)
            raise VariableSourceError(name, str(exc)) from exc

        # Some sources wrap the payload under a "result" key.
        if isinstance(payload, dict) and isinstance(payload.get("result"), dict):
            payload = payload["result"]
        try:
            return _ValueSourceOutput.model_validate(payload).value
        except ValidationError as exc:
            logger.warning("Value source answered garbage for %r: %r", name, payload)
            raise VariableSourceError(name, "invalid response payload") from exc
