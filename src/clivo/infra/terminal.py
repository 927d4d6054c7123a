"""questionary-backed implementation of :class:`~clivo.core.protocols.LineReader`.

This module is the **only** place in the codebase that imports
``questionary``.  The import is deferred to the first question so that
``clivo --help`` and the parser work without it.
"""

from __future__ import annotations

import logging
from typing import Any

from clivo.core.protocols import InterruptHandler
from clivo.exceptions import EnvironmentError

logger = logging.getLogger(__name__)


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


class TerminalLineReader:
    """Concrete :class:`LineReader` asking one free-text question at a time.

    ``questionary.text(...).ask()`` returns ``None`` when the user presses
    Ctrl+C; that is reported to every interrupt subscriber and then
    re-raised as :class:`KeyboardInterrupt`.
    """

    def __init__(self) -> None:
        self._interrupt_handlers: list[InterruptHandler] = []

    def on_interrupt(self, handler: InterruptHandler) -> None:
        self._interrupt_handlers.append(handler)

    def ask_question(self, prompt: str) -> str:
        questionary = _import_questionary()

        answer: str | None = questionary.text(prompt, qmark="").ask()
        if answer is None:
            self._notify_interrupt()
            raise KeyboardInterrupt
        return answer

    def _notify_interrupt(self) -> None:
        logger.debug("interrupt received, notifying %d handler(s)", len(self._interrupt_handlers))
        for handler in self._interrupt_handlers:
            handler()
