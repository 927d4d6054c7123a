"""Option registry — validation and indexing of declared options.

Built once per parse call, before the first token is read, so a bad
declaration list fails the same way regardless of the arguments.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from clivo.core.models import OptionSpec
from clivo.exceptions import (
    DuplicateOptionLetterError,
    DuplicateOptionNameError,
    InvalidOptionLetterError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OptionRegistry:
    """Canonical option names plus the ``letter -> name`` alias map.

    Parameters
    ----------
    names:
        Every declared option name.
    name_by_letter:
        Short alias lookup.  Options without a letter are absent.
    accept_unspecified:
        When ``True`` any name is accepted, declared or not.
    """

    names: frozenset[str]
    name_by_letter: dict[str, str] = field(default_factory=dict)
    accept_unspecified: bool = False

    @classmethod
    def build(
        cls,
        specs: Iterable[OptionSpec],
        *,
        accept_unspecified: bool = False,
    ) -> OptionRegistry:
        """Validate *specs* and index them.

        Raises
        ------
        DuplicateOptionNameError
            If two specs share a ``name``.
        DuplicateOptionLetterError
            If two specs share a non-empty ``letter``.
        InvalidOptionLetterError
            If a ``letter`` is longer than one character.
        """
        names: set[str] = set()
        name_by_letter: dict[str, str] = {}

        for spec in specs:
            if spec.name in names:
                raise DuplicateOptionNameError(spec.name)
            names.add(spec.name)

            if not spec.letter:
                continue
            if len(spec.letter) != 1:
                raise InvalidOptionLetterError(
                    f"Option letter must be a single character: {spec.letter!r}",
                    hint=f"Use --{spec.name} for the long form instead.",
                )
            if spec.letter in name_by_letter:
                raise DuplicateOptionLetterError(spec.letter)
            name_by_letter[spec.letter] = spec.name

        logger.debug(
            "registered %d option(s), %d letter alias(es)",
            len(names),
            len(name_by_letter),
        )
        return cls(
            names=frozenset(names),
            name_by_letter=name_by_letter,
            accept_unspecified=accept_unspecified,
        )

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def accepts(self, name: str) -> bool:
        """Return whether values for *name* belong in the result."""
        return self.accept_unspecified or name in self.names

    def resolve_letter(self, letter: str) -> str | None:
        """Map a short alias to its canonical name.

        An undeclared letter resolves to itself when unspecified options
        are accepted, and to ``None`` otherwise.
        """
        name = self.name_by_letter.get(letter)
        if name is not None:
            return name
        if self.accept_unspecified:
            return letter
        return None
