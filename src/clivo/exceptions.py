"""Custom exception hierarchy for clivo.

Every error clivo raises on purpose inherits from :class:`ClivoError`
so that the CLI error boundary can render a clean message (and an
optional hint) without a stack trace.

The parser itself never raises while scanning tokens — unknown or
malformed tokens are dropped.  Only the option declarations can be
wrong, and that is reported before any token is read.

Hierarchy
---------
ClivoError
├── ConfigurationError
│   ├── DuplicateOptionNameError
│   ├── DuplicateOptionLetterError
│   ├── InvalidOptionLetterError
│   └── InvalidOptionDeclarationError
├── PromptError
│   ├── InvalidChoiceError
│   └── InvalidNumberError
└── EnvironmentError
"""

from __future__ import annotations


class ClivoError(Exception):
    """Base exception for all clivo errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Option declarations ----------------------------------------------------

class ConfigurationError(ClivoError):
    """Raised when the declared option list is inconsistent.

    Not recoverable at the call site — the caller has to fix its option
    declarations.
    """


class DuplicateOptionNameError(ConfigurationError):
    """Raised when two option specs share the same ``name``."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Duplicate option name: {name}",
            hint="Every option needs a unique name.",
        )
        self.name: str = name


class DuplicateOptionLetterError(ConfigurationError):
    """Raised when two option specs share the same non-empty ``letter``."""

    def __init__(self, letter: str) -> None:
        super().__init__(
            f"Duplicate option letter: {letter}",
            hint="Short aliases must be unique across all options.",
        )
        self.letter: str = letter


class InvalidOptionLetterError(ConfigurationError):
    """Raised when an option letter is longer than one character."""


class InvalidOptionDeclarationError(ConfigurationError):
    """Raised when a ``NAME[:LETTER[:LABEL]]`` declaration cannot be read."""


# --- Prompts ----------------------------------------------------------------

class PromptError(ClivoError):
    """Base class for answers the prompt layer cannot accept."""


class InvalidChoiceError(PromptError):
    """Raised when an answer does not select one of the offered choices."""


class InvalidNumberError(PromptError):
    """Raised when an answer does not start with a number."""


# --- Environment / tooling --------------------------------------------------

class EnvironmentError(ClivoError):
    """Raised when an optional runtime dependency is not available."""
