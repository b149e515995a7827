"""Delivery access extension.

Describes how a courier may reach a location: free-text instructions, a
gate or door code, a delivery time window and an on-site contact. The
extension is owned by exactly one customer or shipment record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

UNASSIGNED_PARENT_ID = "unassigned"


def _normalize_parent_id(parent_id: str | None) -> str:
    if parent_id is None or not parent_id.strip():
        return UNASSIGNED_PARENT_ID
    return parent_id


@dataclass(eq=False)
class LocationAccessExtension:
    """Mutable delivery-access metadata with a dirty flag.

    Descriptive fields are only set through the update methods, which raise
    ``has_changes`` when a value actually changes. Use ``rehydrate()`` to
    restore a full state without leaving the extension dirty.

    Equality is structural over every field except ``has_changes``, with
    ``parent_id`` compared case-insensitively. Owners rely on it to detect
    updates that change nothing.
    """

    model_version: ClassVar[str] = "location-access-extension/1.0"

    parent_id: str | None = None
    instructions: str | None = field(default=None, init=False)
    access_code: str | None = field(default=None, init=False)
    window_start: str | None = field(default=None, init=False)
    window_end: str | None = field(default=None, init=False)
    contact_name: str | None = field(default=None, init=False)
    contact_phone: str | None = field(default=None, init=False)
    is_active: bool = field(default=True, init=False)
    has_changes: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.parent_id = _normalize_parent_id(self.parent_id)

    @classmethod
    def rehydrate(
        cls,
        parent_id: str | None,
        instructions: str | None,
        access_code: str | None,
        window_start: str | None,
        window_end: str | None,
        contact_name: str | None,
        contact_phone: str | None,
        is_active: bool,
    ) -> LocationAccessExtension:
        """Restore an extension from its full state.

        The state is applied through the regular update methods and the dirty
        flag is cleared afterwards, so a rehydrated extension is never dirty.
        """
        return cls(parent_id).with_state(
            instructions=instructions,
            access_code=access_code,
            window_start=window_start,
            window_end=window_end,
            contact_name=contact_name,
            contact_phone=contact_phone,
            is_active=is_active,
        )

    @classmethod
    def build(
        cls,
        parent_id: str | None,
        instructions: str | None,
        access_code: str | None,
        window_start: str | None,
        window_end: str | None,
        contact_name: str | None,
        contact_phone: str | None,
    ) -> LocationAccessExtension:
        """Build a new active extension as a replacement candidate.

        Unlike rehydrate(), the dirty flag is left as the update methods set
        it, so a populated candidate reports has_changes.
        """
        access = cls(parent_id)
        access.update_instructions(instructions)
        access.update_access_code(access_code)
        access.update_window(window_start, window_end)
        access.update_contact(contact_name, contact_phone)
        return access

    def update_instructions(self, instructions: str | None) -> None:
        if instructions != self.instructions:
            self.instructions = instructions
            self.has_changes = True

    def update_access_code(self, access_code: str | None) -> None:
        if access_code != self.access_code:
            self.access_code = access_code
            self.has_changes = True

    def update_window(self, start: str | None, end: str | None) -> None:
        """Replace the delivery window; start and end change together."""
        if start != self.window_start or end != self.window_end:
            self.window_start = start
            self.window_end = end
            self.has_changes = True

    def update_contact(self, name: str | None, phone: str | None) -> None:
        """Replace the on-site contact; name and phone change together."""
        if name != self.contact_name or phone != self.contact_phone:
            self.contact_name = name
            self.contact_phone = phone
            self.has_changes = True

    def activate(self) -> None:
        if not self.is_active:
            self.is_active = True
            self.has_changes = True

    def deactivate(self) -> None:
        if self.is_active:
            self.is_active = False
            self.has_changes = True

    def clear_changes(self) -> None:
        self.has_changes = False

    def with_state(
        self,
        instructions: str | None,
        access_code: str | None,
        window_start: str | None,
        window_end: str | None,
        contact_name: str | None,
        contact_phone: str | None,
        is_active: bool = True,
    ) -> LocationAccessExtension:
        """Apply a complete state in bulk and leave the extension clean.

        Returns:
            This extension, for chaining
        """
        self.update_instructions(instructions)
        self.update_access_code(access_code)
        self.update_window(window_start, window_end)
        self.update_contact(contact_name, contact_phone)

        if not is_active:
            self.deactivate()

        self.clear_changes()
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocationAccessExtension):
            return NotImplemented
        return (
            (self.parent_id or "").lower() == (other.parent_id or "").lower()
            and self.instructions == other.instructions
            and self.access_code == other.access_code
            and self.window_start == other.window_start
            and self.window_end == other.window_end
            and self.contact_name == other.contact_name
            and self.contact_phone == other.contact_phone
            and self.is_active == other.is_active
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return (
            f'Instructions: "{self.instructions}" | '
            f'Code: "{self.access_code}" | Active: {self.is_active}'
        )
