"""Infrastructure layer — the interactive terminal.

Rules
-----
* No imports from ``cli``.
* No user-facing output besides the question itself.
* Third-party UI libraries are imported lazily and mapped to
  :class:`~clivo.exceptions.EnvironmentError` when missing.
"""

from clivo.infra.terminal import TerminalLineReader

__all__: list[str] = ["TerminalLineReader"]
