"""Domain models for clivo.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  A parse result is a plain
``dict[str, list[str]]`` built fresh for every call.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Literal

FLAG_VALUE: str = "yes"
"""Value appended for an option that appeared without an explicit value."""

POSITIONAL_KEY: str = "_"
"""Result key collecting bare tokens not consumed as option values."""

ResultDictionary = dict[str, list[str]]

WorkflowType = Literal["options", "text", "number"]


# ---------------------------------------------------------------------------
# Parser input
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OptionSpec:
    """A recognised option."""

    name: str
    """Canonical name, used as the result key and after ``--``."""

    letter: str | None = None
    """Optional one-character alias used after a single ``-``."""

    label: str | None = None
    """Display text; never read by the parser."""


@dataclass(frozen=True, slots=True)
class ParseRequest:
    """Everything :func:`~clivo.core.parser.parse_arguments` needs."""

    tokens: Sequence[str]
    """Raw arguments, already sliced past the program and script names."""

    specs: Sequence[OptionSpec] = ()

    accept_unspecified: bool = False
    """Keep options that were not declared, under their literal name."""

    strict_equals: bool = False
    """Attach values only through ``=``; never absorb trailing bare tokens."""


# ---------------------------------------------------------------------------
# Prompt input
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Choice:
    """One selectable entry of an options prompt."""

    name: str
    label: str | None = None

    @property
    def display(self) -> str:
        return self.label if self.label is not None else self.name


@dataclass(frozen=True, slots=True)
class WorkflowStep:
    """A single question in a :func:`~clivo.cli.prompts.prompt_workflow`."""

    type: WorkflowType
    message: str
    choices: tuple[Choice, ...] = ()


@dataclass(frozen=True, slots=True)
class MenuAction:
    """A menu entry and the callable run when it is selected."""

    label: str
    action: Callable[[], object]
