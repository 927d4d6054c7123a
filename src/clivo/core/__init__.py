"""Core layer — option models, registry, and the token scanner.

Rules
-----
* No ``print()`` calls.
* No terminal, filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from clivo.core.models import (
    FLAG_VALUE,
    POSITIONAL_KEY,
    Choice,
    MenuAction,
    OptionSpec,
    ParseRequest,
    ResultDictionary,
    WorkflowStep,
)
from clivo.core.parser import parse_arguments, parse_cli
from clivo.core.protocols import InterruptHandler, LineReader
from clivo.core.registry import OptionRegistry

__all__: list[str] = [
    "FLAG_VALUE",
    "POSITIONAL_KEY",
    "Choice",
    "InterruptHandler",
    "LineReader",
    "MenuAction",
    "OptionRegistry",
    "OptionSpec",
    "ParseRequest",
    "ResultDictionary",
    "WorkflowStep",
    "parse_arguments",
    "parse_cli",
]
