"""
Adapter: PromptVariableProvider
Asks the user for each variable's value on the terminal.
"""
from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.prompt import FloatPrompt


class PromptVariableProvider:
    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console

    def request(self, name: str) -> float:
        return FloatPrompt.ask(
            f"Enter a value for variable [bold cyan]{name}[/]",
            console=self._console,
        )
