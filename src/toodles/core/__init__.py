"""Core layer — command resolution, argument binding and history.

Rules
-----
* No ``print()`` calls.
* No filesystem, database or terminal I/O.
* No imports from ``cli`` or ``infra``.
"""

from toodles.core.binder import bind, bind_one
from toodles.core.history import HISTORY_SIZE, HistoryStore
from toodles.core.models import (
    ArgumentSlot,
    Attachment,
    AttachmentInfo,
    CommandCategory,
    CommandDefinition,
    ListFilter,
    ResolvedCommand,
    Todo,
)
from toodles.core.protocols import Prompter, TodoStorage
from toodles.core.registry import CommandRegistry, extract_token

__all__: list[str] = [
    "HISTORY_SIZE",
    "ArgumentSlot",
    "Attachment",
    "AttachmentInfo",
    "CommandCategory",
    "CommandDefinition",
    "CommandRegistry",
    "HistoryStore",
    "ListFilter",
    "Prompter",
    "ResolvedCommand",
    "Todo",
    "TodoStorage",
    "bind",
    "bind_one",
    "extract_token",
]
