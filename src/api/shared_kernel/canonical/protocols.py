"""Protocols implemented by every canonical entity."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class CanonicalModel(Protocol):
    """Capability shared by versioned records.

    Attributes:
        is_active: Whether the record is live
        model_version: Schema tag in the form "<kind>/<semver>"
    """

    is_active: bool
    model_version: str

    @property
    def has_changes(self) -> bool:
        """True if the record has mutations since the last clear."""
        ...

    def clear_changes(self) -> None:
        """Mark the record as clean."""
        ...


@runtime_checkable
class TrackedCanonicalModel(CanonicalModel, Protocol):
    """Canonical model that can enumerate which fields changed."""

    def get_changes(self) -> Sequence[str]:
        """Return changed field names in first-change order."""
        ...
