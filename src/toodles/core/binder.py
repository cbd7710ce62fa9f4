"""Argument binder — extracts positional arguments from a raw line.

The binder never re-tokenizes the command: it skips a fixed prefix
(matched token + leading blanks + one separator) and copies what
follows into bounded :class:`~toodles.core.models.ArgumentSlot`
buffers.

Rules
-----
* One expected argument: spaces are part of the argument, so
  ``add hello world`` binds ``"hello world"`` without quoting.
* Several expected arguments: every single space closes the current
  slot and opens the next.
* A full slot drops further characters silently; truncation is never
  an error.
* Binding fails only when not a single character was copied.
"""

from __future__ import annotations

from collections.abc import Sequence

from toodles.core.models import ArgumentSlot, ResolvedCommand
from toodles.core.registry import WHITESPACE, count_leading_whitespace
from toodles.exceptions import MissingArgumentsError


def argument_offset(resolved: ResolvedCommand, raw_line: str) -> int:
    """Return the index where the argument region of *raw_line* starts.

    The fixed skip covers the leading blanks, the matched token and one
    separator.  Any further blanks right after it are skipped as well.
    """
    offset = count_leading_whitespace(raw_line) + len(resolved.token) + 1
    while offset < len(raw_line) and raw_line[offset] in WHITESPACE:
        offset += 1
    return offset


def bind(
    resolved: ResolvedCommand,
    raw_line: str,
    expected_arg_count: int,
    capacities: Sequence[int],
) -> tuple[str, ...]:
    """Bind up to *expected_arg_count* arguments from *raw_line*.

    Parameters
    ----------
    resolved:
        The command the line resolved to; its matched token decides how
        many leading characters are skipped.
    raw_line:
        The full line as typed.
    expected_arg_count:
        Number of argument slots, at least 1.
    capacities:
        Slot capacity per argument (terminator included).

    Returns
    -------
    tuple[str, ...]
        The populated argument values.  May be shorter than
        *expected_arg_count* when the line ends early.

    Raises
    ------
    MissingArgumentsError
        If no character at all could be copied.
    """
    if expected_arg_count < 1:
        raise ValueError("expected_arg_count must be at least 1")
    if len(capacities) < expected_arg_count:
        raise ValueError(
            f"{expected_arg_count} arguments expected but only "
            f"{len(capacities)} capacities given"
        )

    slots = [ArgumentSlot(capacity) for capacity in capacities[:expected_arg_count]]
    split_on_space = expected_arg_count > 1

    current = 0
    copied = 0
    for char in raw_line[argument_offset(resolved, raw_line):]:
        if split_on_space and char == " ":
            current += 1
            if current == expected_arg_count:
                break
            continue
        copied += slots[current].write(char)

    if copied == 0:
        raise MissingArgumentsError("Please provide an argument.")

    filled = max(i for i, slot in enumerate(slots) if len(slot)) + 1
    return tuple(slot.value for slot in slots[:filled])


def bind_one(resolved: ResolvedCommand, raw_line: str, capacity: int) -> str:
    """Bind the rest of the line as a single argument."""
    return bind(resolved, raw_line, 1, (capacity,))[0]
