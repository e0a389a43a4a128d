"""
Port: VariableProvider
Responsibility: supply the numeric value of a named variable on demand.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class VariableProvider(Protocol):
    def request(self, name: str) -> float:
        """
        Returns the value of variable `name`.

        The evaluator calls this at most once per distinct name per
        evaluation, in the order names first appear in the postfix sequence.
        How the value is obtained (prompt, mapping, remote service) is up to
        the adapter. Failures propagate to the caller unchanged.
        """
        ...
