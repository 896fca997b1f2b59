"""
Column Registry — stable numeric ids for column names.

Every distinct column name gets a dense, increasing id the first time it
is seen. Ids are never reused or removed, so the same Column can be used
to read values from any number of ColumnFiles built against the same
registry.
"""

import logging
import threading
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Column:
    """A named column plus the id its registry assigned to that name."""

    name: str
    number: int

    def __eq__(self, other):
        return isinstance(other, Column) and self.number == other.number

    def __hash__(self):
        return hash(self.number)

    def __str__(self):
        return self.name


class ColumnRegistry:
    """
    Append-only mapping of column name → id.

    Allocation is serialized with a lock so concurrent callers never
    receive duplicate ids.
    """

    def __init__(self):
        self._ids: dict[str, int] = {}
        self._names: list[str] = []
        self._lock = threading.Lock()

    # ── Allocation ────────────────────────────────────────────────

    def id_of(self, name: str) -> int:
        """Return the id for *name*, allocating the next one if it's new."""
        with self._lock:
            number = self._ids.get(name)
            if number is None:
                number = len(self._names)
                self._ids[name] = number
                self._names.append(name)
                logger.debug("allocated column id %d for '%s'", number, name)
            return number

    def column(self, name: str) -> Column:
        """Return a Column for *name* bound to this registry's id."""
        return Column(name, self.id_of(name))

    # ── Lookup ────────────────────────────────────────────────────

    def has(self, name: str) -> bool:
        return name in self._ids

    def name_of(self, number: int) -> str:
        """Return the name registered under *number*.

        Raises KeyError if no such id has been allocated.
        """
        if not 0 <= number < len(self._names):
            raise KeyError(f"column id {number} is not allocated")
        return self._names[number]

    def all_columns(self) -> dict:
        """Return a copy of the name → id mapping."""
        with self._lock:
            return dict(self._ids)

    def __len__(self):
        return len(self._names)
