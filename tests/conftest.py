"""Shared pytest fixtures and configuration for the clivo test suite.

Guidelines
----------
* No real terminal interaction in any test.
* questionary is mocked at the infra boundary.
* Parser tests are pure — no mocking, no side effects.
"""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from clivo.core.protocols import InterruptHandler


class FakeLineReader:
    """Scripted :class:`~clivo.core.protocols.LineReader` for prompt tests."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.questions: list[str] = []
        self.interrupt_handlers: list[InterruptHandler] = []

    def ask_question(self, prompt: str) -> str:
        self.questions.append(prompt)
        if not self._answers:
            raise AssertionError(f"Unexpected question: {prompt!r}")
        return self._answers.pop(0)

    def on_interrupt(self, handler: InterruptHandler) -> None:
        self.interrupt_handlers.append(handler)


@pytest.fixture
def make_reader() -> type[FakeLineReader]:
    return FakeLineReader


@pytest.fixture
def printed(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Capture every line the prompt layer prints."""
    lines: list[str] = []

    def _capture(*objects: object, markup: bool = True) -> None:
        lines.append(" ".join(str(obj) for obj in objects))

    from clivo.cli import prompts

    monkeypatch.setattr(prompts.console, "print", _capture)
    return lines
