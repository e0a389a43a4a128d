"""
Adapter: RecordingVariableProvider
Wraps another provider and remembers which names were requested, in order.
"""
from __future__ import annotations

from ports.variable_provider import VariableProvider


class RecordingVariableProvider:
    def __init__(self, inner: VariableProvider) -> None:
        self._inner = inner
        self.requests: list[tuple[str, float]] = []

    def request(self, name: str) -> float:
        value = self._inner.request(name)
        self.requests.append((name, value))
        return value

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.requests]
