"""
Adapter: MappingVariableProvider
Implements the VariableProvider port over a plain mapping of name -> value.
Missing names go to an optional fallback provider (e.g. an interactive
prompt or a remote value source); without one they are an error.
"""
from __future__ import annotations

import logging
from typing import Mapping, Optional

from errors import UnboundVariableError
from ports.variable_provider import VariableProvider

logger = logging.getLogger("rpncalc.variables")


class MappingVariableProvider:
    def __init__(
        self,
        values: Optional[Mapping[str, float]] = None,
        fallback: Optional[VariableProvider] = None,
    ) -> None:
        self._values = dict(values or {})
        self._fallback = fallback

    def request(self, name: str) -> float:
        if name in self._values:
            return float(self._values[name])
        if self._fallback is not None:
            logger.info("Variable %r not in mapping, using fallback provider.", name)
            return self._fallback.request(name)
        raise UnboundVariableError(name)
