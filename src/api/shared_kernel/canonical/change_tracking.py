"""Field-level change tracking for canonical entities.

Entities record which of their fields have been mutated since the last
explicit clear. The record doubles as a lightweight audit trail that a
persistence layer can use for partial updates.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum
from typing import Generic, TypeVar

FieldT = TypeVar("FieldT", bound=StrEnum)
ValueT = TypeVar("ValueT")


class ChangeSet(Generic[FieldT]):
    """Ordered set of field tags changed since the last clear.

    Tags keep their first-insertion order. Recording a tag that is already
    present is a no-op.
    """

    def __init__(self) -> None:
        self._fields: list[FieldT] = []

    def record(self, field_tag: FieldT) -> None:
        """Record a changed field, ignoring duplicates."""
        if field_tag not in self._fields:
            self._fields.append(field_tag)

    def clear(self) -> None:
        """Forget all recorded changes."""
        self._fields.clear()

    def snapshot(self) -> tuple[FieldT, ...]:
        """Return the recorded fields as an immutable, ordered tuple."""
        return tuple(self._fields)

    def __contains__(self, field_tag: object) -> bool:
        return field_tag in self._fields

    def __iter__(self) -> Iterator[FieldT]:
        return iter(tuple(self._fields))

    def __len__(self) -> int:
        return len(self._fields)

    def __bool__(self) -> bool:
        return bool(self._fields)

    def __repr__(self) -> str:
        return f"ChangeSet({[str(f) for f in self._fields]!r})"


def replace_if_changed(
    current: ValueT | None, candidate: ValueT
) -> tuple[ValueT, bool]:
    """Compare a freshly built candidate with the current value.

    Args:
        current: The value currently owned by the entity (may be None)
        candidate: A fully constructed replacement

    Returns:
        Tuple of (value to keep, changed). When nothing changed the
        current instance is returned so owners keep their reference.
    """
    if current is not None and current == candidate:
        return current, False
    return candidate, True
