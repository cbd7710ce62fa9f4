"""Session history ring.

A fixed-capacity circular buffer of raw command lines addressed by
absolute slot index (not by recency).  Once the write cursor reaches
the capacity it wraps to slot 0 before writing, silently replacing the
oldest content in that slot.

Listing iterates by slot index, so after a wrap the order is physical
position, not insertion order.
"""

from __future__ import annotations

from collections.abc import Iterator

from toodles.exceptions import HistoryIndexError

HISTORY_SIZE: int = 1024


class HistoryStore:
    """Fixed-size ring of previously executed command lines.

    Parameters
    ----------
    capacity:
        Number of slots; defaults to :data:`HISTORY_SIZE`.

    Not thread-safe: a wrap replaces a slot in two steps.
    """

    def __init__(self, capacity: int = HISTORY_SIZE) -> None:
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._slots: list[str | None] = [None] * capacity
        self._cursor = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def cursor(self) -> int:
        """Slot index the next append would target before wrapping."""
        return self._cursor

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def append(self, raw_line: str | None) -> bool:
        """Store *raw_line* in the next slot.

        Returns ``False`` only when *raw_line* is ``None``.
        """
        if raw_line is None:
            return False

        if self._cursor == self._capacity:
            self._cursor = 0

        self._slots[self._cursor] = raw_line
        self._cursor += 1
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, index: int) -> str | None:
        """Return the line stored at slot *index*, or ``None`` if empty.

        Raises
        ------
        HistoryIndexError
            If *index* is negative or not smaller than the capacity.
        """
        if index < 0:
            raise HistoryIndexError("History index must be bigger than 0.")
        if index > self._capacity - 1:
            raise HistoryIndexError(
                f"History index must be smaller than {self._capacity}.",
            )
        return self._slots[index]

    def entries(self) -> Iterator[tuple[int, str]]:
        """Yield ``(index, line)`` for every non-empty slot in slot order."""
        for index, line in enumerate(self._slots):
            if line is not None:
                yield index, line

    def __len__(self) -> int:
        return sum(1 for line in self._slots if line is not None)
