"""Token scanner — turns raw arguments into ``dict[str, list[str]]``.

A single left-to-right pass.  Each token is classified as:

1. **Long option** — ``--name`` or ``--name=v1=v2``.
2. **Short cluster** — ``-abc`` or ``-abc=v1=v2``.
3. **Bare token** — anything not starting with ``-``.

Between tokens the scanner remembers which options are *pending*, i.e.
eligible to receive the next bare tokens as values.  Every pending
option receives the same values (``-ab x`` gives ``x`` to both).

Pending options that never received a value are *flushed*: they get
:data:`~clivo.core.models.FLAG_VALUE` unless they already have an entry.

The parser never raises on odd input.  Options that are not declared
(and ``accept_unspecified`` is off) are dropped together with any value
that would have attached to them.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Sequence

from clivo.core.models import (
    FLAG_VALUE,
    POSITIONAL_KEY,
    OptionSpec,
    ParseRequest,
    ResultDictionary,
)
from clivo.core.registry import OptionRegistry

logger = logging.getLogger(__name__)

DEFAULT_PARSE_FROM: int = 2
"""Skip the interpreter and script entries of ``sys.argv``."""


class _Scanner:
    """Mutable state for one :func:`parse_arguments` call."""

    def __init__(self, registry: OptionRegistry, *, strict_equals: bool) -> None:
        self._registry = registry
        self._strict_equals = strict_equals
        self._pending: tuple[str, ...] | None = None
        self.result: ResultDictionary = {}

    # ------------------------------------------------------------------
    # Result updates
    # ------------------------------------------------------------------

    def _attach(self, name: str, values: Sequence[str]) -> None:
        if self._registry.accepts(name):
            self.result.setdefault(name, []).extend(values)

    def _flush(self) -> None:
        """Mark still-valueless pending options as present."""
        if self._pending is None:
            return
        for name in self._pending:
            if self._registry.accepts(name) and name not in self.result:
                self.result[name] = [FLAG_VALUE]
        self._pending = None

    def _open(self, names: tuple[str, ...]) -> None:
        self._pending = names
        if self._strict_equals:
            self._flush()

    # ------------------------------------------------------------------
    # Token classes
    # ------------------------------------------------------------------

    def long_option(self, body: str) -> None:
        self._flush()
        name, *values = body.split("=")
        if values:
            self._attach(name, values)
            # Non-strict: later bare tokens keep extending the same option.
            self._pending = None if self._strict_equals else (name,)
        else:
            self._open((name,))

    def short_cluster(self, body: str) -> None:
        self._flush()
        letters, *values = body.split("=")

        names: list[str] = []
        for letter in letters:
            name = self._registry.resolve_letter(letter)
            if name is not None and name not in names:
                names.append(name)

        if values:
            for name in names:
                self._attach(name, values)
        elif names:
            self._open(tuple(names))

    def bare(self, token: str) -> None:
        if self._pending is None:
            self.result.setdefault(POSITIONAL_KEY, []).append(token)
            return
        for name in self._pending:
            self._attach(name, (token,))

    def finish(self) -> ResultDictionary:
        self._flush()
        return self.result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_arguments(request: ParseRequest) -> ResultDictionary:
    """Parse ``request.tokens`` against ``request.specs``.

    A letter repeated inside one short cluster counts once: ``-aa=v``
    and ``-aa v`` both give ``{"alpha": ["v"]}``, not ``["v", "v"]``.
    ``--`` is a long option with an empty name and ``-`` an empty
    cluster; neither is treated as a separator.

    Returns
    -------
    dict[str, list[str]]
        Option name → values in order of appearance.  Positional tokens
        are collected under :data:`~clivo.core.models.POSITIONAL_KEY`.

    Raises
    ------
    ConfigurationError
        If the specs contain a duplicate name or letter.  Raised before
        any token is looked at.
    """
    registry = OptionRegistry.build(
        request.specs,
        accept_unspecified=request.accept_unspecified,
    )
    scanner = _Scanner(registry, strict_equals=request.strict_equals)

    for token in request.tokens:
        if token.startswith("--"):
            scanner.long_option(token[2:])
        elif token.startswith("-"):
            scanner.short_cluster(token[1:])
        else:
            scanner.bare(token)

    result = scanner.finish()
    logger.debug("parsed %d token(s) into keys %s", len(request.tokens), sorted(result))
    return result


def parse_cli(
    args: Sequence[str] | None = None,
    options: Iterable[OptionSpec] = (),
    *,
    accept_unspecified: bool = False,
    strict_equals: bool = False,
    parse_from: int = DEFAULT_PARSE_FROM,
) -> ResultDictionary:
    """Parse a full argv-style list.

    Parameters
    ----------
    args:
        Argument list including the leading program entries.  Defaults
        to :data:`sys.argv`.
    options:
        Declared options.
    parse_from:
        Index of the first token to parse.  The default skips the
        interpreter and script path, e.g. ``["python", "app.py", ...]``.
    """
    if args is None:
        args = sys.argv
    request = ParseRequest(
        tokens=tuple(args[parse_from:]),
        specs=tuple(options),
        accept_unspecified=accept_unspecified,
        strict_equals=strict_equals,
    )
    return parse_arguments(request)
