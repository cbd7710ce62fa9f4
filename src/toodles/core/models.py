"""Domain models for toodles.

Value objects are **frozen** dataclasses with no I/O.  The one mutable
type here, :class:`ArgumentSlot`, is a bounded write buffer used only
by the argument binder.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------

RAW_LINE_MAX: int = 8192
"""Maximum number of characters kept from one line of input."""

# Slot capacities count the terminator, so each holds ``capacity - 1``
# usable characters.
CAPACITY_ID: int = 17
CAPACITY_TITLE: int = 65
CAPACITY_DETAIL: int = 513
CAPACITY_LIST_OPTION: int = 17
CAPACITY_SEARCH: int = 129
CAPACITY_HISTORY_INDEX: int = 5
CAPACITY_PATH: int = 4096


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

class CommandCategory(enum.Enum):
    """Presentation grouping for the help screen."""

    TODOS = "Commands for ToDo entries"
    ATTACHMENTS = "Commands for attachments"
    MISC = "Miscellaneous commands"


CommandHandler = Callable[["ResolvedCommand", str], None]
"""Handler signature: the resolved command and the raw input line."""


@dataclass(frozen=True, slots=True)
class CommandDefinition:
    """One entry of the command table, registered once at startup."""

    name: str
    """Canonical long-form token, unique across the registry."""

    handler: CommandHandler
    """Performs the command's side effects."""

    category: CommandCategory
    description: str
    short_name: str | None = None
    """Optional alias token; never equal to any other name or alias."""

    synopsis: str = ""
    """Argument-shape hint, display only."""

    records_history: bool = True
    """Whether a successfully resolved line is appended to history."""


@dataclass(frozen=True, slots=True)
class ResolvedCommand:
    """Outcome of a successful token lookup."""

    definition: CommandDefinition
    via_short_form: bool = False

    @property
    def token(self) -> str:
        """The literal token that matched (long or short form)."""
        if self.via_short_form and self.definition.short_name is not None:
            return self.definition.short_name
        return self.definition.name


# ---------------------------------------------------------------------------
# Bounded argument buffer
# ---------------------------------------------------------------------------

class ArgumentSlot:
    """Fixed-capacity destination for one parsed argument.

    ``capacity`` counts a terminator the way a C buffer would, so the
    slot never stores more than ``capacity - 1`` characters.  Writes past
    that bound are dropped silently.
    """

    __slots__ = ("_capacity", "_chars")

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"Slot capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._chars: list[str] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def limit(self) -> int:
        """Number of usable characters."""
        return self._capacity - 1

    @property
    def full(self) -> bool:
        return len(self._chars) >= self.limit

    @property
    def value(self) -> str:
        return "".join(self._chars)

    def write(self, char: str) -> int:
        """Append one character; return 1 if stored, 0 if dropped."""
        if self.full:
            return 0
        self._chars.append(char)
        return 1

    def fill(self, text: str) -> int:
        """Append *text* up to the bound; return characters written."""
        room = self.limit - len(self._chars)
        accepted = text[: max(room, 0)]
        self._chars.extend(accepted)
        return len(accepted)

    def __len__(self) -> int:
        return len(self._chars)

    def __repr__(self) -> str:
        return f"ArgumentSlot(capacity={self._capacity}, value={self.value!r})"


# ---------------------------------------------------------------------------
# Todos and attachments
# ---------------------------------------------------------------------------

class ListFilter(enum.Enum):
    """Row selection for the ``list`` command."""

    ALL = "all"
    DONE = "done"
    OPEN = "open"

    @classmethod
    def from_option(cls, option: str | None) -> ListFilter:
        """Map a user keyword to a filter; unknown keywords mean ``ALL``."""
        if not option:
            return cls.ALL
        for member in cls:
            if member.value == option:
                return member
        return cls.ALL


@dataclass(frozen=True, slots=True)
class Todo:
    """A single todo row as listed or searched."""

    id: int
    title: str
    done: bool
    created: str
    """Creation timestamp as stored (local time, ``YYYY-MM-DD HH:MM:SS``)."""


@dataclass(frozen=True, slots=True)
class AttachmentInfo:
    """Attachment metadata without the payload."""

    id: int
    name: str
    size: int
    """Payload size in bytes."""


@dataclass(frozen=True, slots=True)
class Attachment:
    """An attachment including its binary content."""

    id: int
    name: str
    todo_id: int
    content: bytes
