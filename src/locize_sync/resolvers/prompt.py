"""Interactive resolver asking a human on the terminal."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.prompt import Prompt

from ..reconciliation.types import Answer, Question

logger = logging.getLogger(__name__)


class PromptResolver:
    """
    Ask for each missing translation on the terminal with ``rich``.

    The prompt blocks the event loop thread while it waits for input. Nothing
    else runs during resolution, and keeping stdin on the main thread lets
    Ctrl-C interrupt the read and end the run.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or Console()

    def _prompt(self, question: Question) -> str:
        return Prompt.ask(
            f"[cyan]?[/cyan] {question.message}",
            console=self.console,
            default="",
            show_default=False,
        )

    async def ask(self, question: Question) -> Answer:
        value = self._prompt(question)
        logger.debug(f"Answer for {question.name}: {value!r}")
        return Answer(question.name, value)
