"""Command registry and token resolver.

The registry is an ordered, immutable table of
:class:`~toodles.core.models.CommandDefinition` entries.  Resolution is
exact-match only: the leading token of a line must equal a long name or
a short alias, never a prefix of one.

Guarantees
----------
* Long names and short aliases form one disjoint namespace.
* Long-name matches always win over alias matches, whatever the
  declaration order.
* Pure — no I/O, no ``print()``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from toodles.core.models import CommandCategory, CommandDefinition, ResolvedCommand
from toodles.exceptions import InvalidCommandError

WHITESPACE: str = " \t"
"""Characters treated as blanks around the command token."""


def count_leading_whitespace(raw_line: str) -> int:
    """Return the number of spaces/tabs at the start of *raw_line*."""
    count = 0
    for char in raw_line:
        if char not in WHITESPACE:
            break
        count += 1
    return count


def extract_token(raw_line: str) -> str:
    """Return the first whitespace-delimited token of *raw_line*.

    Leading spaces/tabs are skipped; the token ends at the next blank or
    at the end of the line.  An all-blank line yields ``""``.
    """
    start = count_leading_whitespace(raw_line)
    end = start
    while end < len(raw_line) and raw_line[end] not in WHITESPACE:
        end += 1
    return raw_line[start:end]


class CommandRegistry:
    """Ordered table of command definitions.

    Parameters
    ----------
    definitions:
        Command definitions in declaration order.

    Raises
    ------
    ValueError
        If any name or alias is empty or used twice.
    """

    def __init__(self, definitions: Iterable[CommandDefinition]) -> None:
        self._definitions: tuple[CommandDefinition, ...] = tuple(definitions)
        self._validate()

    def _validate(self) -> None:
        seen: set[str] = set()
        for definition in self._definitions:
            tokens = [definition.name]
            if definition.short_name is not None:
                tokens.append(definition.short_name)
            for token in tokens:
                if not token or extract_token(token) != token:
                    raise ValueError(f"Invalid command token: {token!r}")
                if token in seen:
                    raise ValueError(f"Duplicate command token registered: {token}")
                seen.add(token)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup_by_token(self, raw_line: str) -> ResolvedCommand:
        """Resolve the leading token of *raw_line* to a command.

        Raises
        ------
        InvalidCommandError
            If the token matches no long name and no alias.
        """
        token = extract_token(raw_line)
        if token:
            for definition in self._definitions:
                if definition.name == token:
                    return ResolvedCommand(definition, via_short_form=False)
            for definition in self._definitions:
                if definition.short_name == token:
                    return ResolvedCommand(definition, via_short_form=True)
        raise InvalidCommandError("Invalid command.", hint="Type 'help' to list all commands.")

    def get(self, name: str) -> CommandDefinition | None:
        """Return the definition whose long name is *name*, or ``None``."""
        for definition in self._definitions:
            if definition.name == name:
                return definition
        return None

    def by_category(self, category: CommandCategory) -> list[CommandDefinition]:
        """Return definitions of *category* in declaration order."""
        return [d for d in self._definitions if d.category is category]

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[CommandDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)
