"""Protocols (interfaces) consumed by the prompt layer.

The parser has no I/O dependency at all; only the prompts talk to a
terminal, and they do so exclusively through :class:`LineReader`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

InterruptHandler = Callable[[], None]


class LineReader(Protocol):
    """Contract for blocking, line-based terminal input.

    One outstanding question at a time.  Any object implementing both
    methods satisfies this protocol structurally.
    """

    def ask_question(self, prompt: str) -> str:
        """Show *prompt* and return the line the user typed.

        Raises
        ------
        KeyboardInterrupt
            When the user interrupts the question.
        """
        ...  # pragma: no cover

    def on_interrupt(self, handler: InterruptHandler) -> None:
        """Register *handler* to be called when the user interrupts."""
        ...  # pragma: no cover
