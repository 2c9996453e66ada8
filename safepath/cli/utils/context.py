"""CLI context management."""

import asyncio
from dataclasses import dataclass
from typing import Any, Coroutine, TypeVar

from rich.console import Console

from safepath.core.config import Settings
from safepath.cli.utils.output import OutputFormatter

T = TypeVar("T")


@dataclass
class CLIContext:
    """Context object passed through CLI commands."""

    debug: bool
    settings: Settings
    formatter: OutputFormatter
    console: Console

    def run(self, operation: Coroutine[Any, Any, T]) -> T:
        """
        Run a filesystem coroutine to completion.

        Args:
            operation: Coroutine returned by a Directory or File method

        Returns:
            The awaited result
        """
        return asyncio.run(operation)
