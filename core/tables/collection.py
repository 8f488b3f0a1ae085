"""In-memory backing collection for table records.

Rows are removed by identity, never by index or equality, so two records with
identical field values remain distinguishable. Each record receives a stable
integer key when it is added; hosts use the key to map a row action back to
the record object.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

R = TypeVar("R")


class RecordCollection(Generic[R]):
    """Ordered, identity-keyed collection of records."""

    def __init__(self, records: Iterable[R] = ()) -> None:
        self._entries: list[tuple[int, R]] = []
        self._next_key = 1
        for record in records:
            self.add(record)

    def add(self, record: R) -> int:
        """Append a record and return its row key."""

        key = self._next_key
        self._next_key += 1
        self._entries.append((key, record))
        return key

    def remove(self, record: R) -> bool:
        """Remove `record` by identity.

        Args:
            record: The exact object to remove.

        Returns:
            True when a record was removed, False when it was not present.
        """

        for idx, (_, candidate) in enumerate(self._entries):
            if candidate is record:
                del self._entries[idx]
                return True
        return False

    def find(self, key: int) -> R | None:
        """Return the record for a row key, or None when absent."""

        for candidate_key, record in self._entries:
            if candidate_key == key:
                return record
        return None

    def key_for(self, record: R) -> int | None:
        """Return the row key of `record` (by identity), or None when absent."""

        for key, candidate in self._entries:
            if candidate is record:
                return key
        return None

    def entries(self) -> tuple[tuple[int, R], ...]:
        """Return a snapshot of `(key, record)` pairs in collection order."""

        return tuple(self._entries)

    def __iter__(self) -> Iterator[R]:
        return iter([record for _, record in self._entries])

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, record: object) -> bool:
        return any(candidate is record for _, candidate in self._entries)


def delete_from(collection: RecordCollection[R]) -> Callable[[R], None]:
    """Build an `on_delete` callback that removes records from `collection`.

    Records that are not present are ignored.
    """

    def _delete(record: R) -> None:
        collection.remove(record)

    return _delete
