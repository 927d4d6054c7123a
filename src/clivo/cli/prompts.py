"""Interactive line-based prompts.

Each prompt is a short request/response exchange over a
:class:`~clivo.core.protocols.LineReader`.  Answers that cannot be
accepted are reported and the question is asked again, indefinitely —
only Ctrl+C (``KeyboardInterrupt``) leaves a retry loop.

Answer parsing is lenient: ``"2nd"`` selects choice 2 and ``"4.5kg"``
reads as ``4.5``, mirroring what a human would mean.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from clivo.cli.console import console
from clivo.core.models import Choice, MenuAction, WorkflowStep
from clivo.core.protocols import LineReader
from clivo.exceptions import InvalidChoiceError, InvalidNumberError

logger = logging.getLogger(__name__)

SELECT_PROMPT: str = "Select an option: "

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _default_reader() -> LineReader:
    from clivo.infra.terminal import TerminalLineReader

    return TerminalLineReader()


# ---------------------------------------------------------------------------
# Answer parsing (pure)
# ---------------------------------------------------------------------------

def parse_choice_index(answer: str, count: int) -> int:
    """Turn a 1-based *answer* into a 0-based index below *count*.

    Raises
    ------
    InvalidChoiceError
        If *answer* does not start with an integer in ``1..count``.
    """
    match = _LEADING_INT.match(answer)
    if match is not None:
        index = int(match.group(1)) - 1
        if 0 <= index < count:
            return index
    raise InvalidChoiceError("Invalid option, please try again.")


def parse_number(answer: str) -> float:
    """Read the leading decimal number of *answer*.

    Raises
    ------
    InvalidNumberError
        If *answer* does not start with a number.
    """
    match = _LEADING_NUMBER.match(answer)
    if match is None:
        raise InvalidNumberError("Invalid number, please try again.")
    return float(match.group(1))


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

def _select_index(message: str, choices: Sequence[Choice], reader: LineReader) -> int:
    """Ask until a valid entry of *choices* is picked; return its index."""
    if not choices:
        raise InvalidChoiceError(
            "No choices to select from.",
            hint=f"Provide at least one choice for {message!r}.",
        )

    while True:
        console.print(message, markup=False)
        for number, choice in enumerate(choices, start=1):
            console.print(f"{number}. {choice.display}", markup=False)

        answer = reader.ask_question(SELECT_PROMPT)
        try:
            return parse_choice_index(answer, len(choices))
        except InvalidChoiceError as exc:
            logger.debug("rejected choice %r for %r", answer, message)
            console.print(str(exc), markup=False)


def prompt_options(
    message: str,
    choices: Sequence[Choice],
    *,
    reader: LineReader | None = None,
) -> Choice:
    """Show a numbered list of *choices* and return the selected one.

    Raises
    ------
    InvalidChoiceError
        If *choices* is empty — no answer could ever be valid.
    """
    reader = reader or _default_reader()
    return choices[_select_index(message, choices, reader)]


def prompt_text(message: str, *, reader: LineReader | None = None) -> str:
    """Ask for free text and return the answer unchanged."""
    reader = reader or _default_reader()
    return reader.ask_question(f"{message}: ")


def prompt_number(message: str, *, reader: LineReader | None = None) -> float:
    """Ask until the answer starts with a number, and return it."""
    reader = reader or _default_reader()

    while True:
        answer = reader.ask_question(f"{message}: ")
        try:
            return parse_number(answer)
        except InvalidNumberError as exc:
            logger.debug("rejected number %r for %r", answer, message)
            console.print(str(exc), markup=False)


def prompt_workflow(
    message: str,
    steps: Sequence[WorkflowStep],
    *,
    reader: LineReader | None = None,
) -> list[Choice | str | float]:
    """Run *steps* in order and collect one answer per step.

    An ``options`` step without choices is skipped and contributes no
    answer.
    """
    reader = reader or _default_reader()
    console.print(message, markup=False)

    results: list[Choice | str | float] = []
    for step in steps:
        if step.type == "options":
            if step.choices:
                results.append(prompt_options(step.message, step.choices, reader=reader))
        elif step.type == "text":
            results.append(prompt_text(step.message, reader=reader))
        elif step.type == "number":
            results.append(prompt_number(step.message, reader=reader))
    return results


def prompt_menu(
    message: str,
    menu: Sequence[MenuAction],
    *,
    reader: LineReader | None = None,
) -> None:
    """Offer the *menu* labels and run the selected action.

    Actions may open further menus, which gives nested navigation.
    """
    reader = reader or _default_reader()
    choices = [Choice(name=item.label) for item in menu]
    menu[_select_index(message, choices, reader)].action()
