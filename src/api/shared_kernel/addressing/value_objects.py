"""Postal address value object.

Value objects are immutable descriptors whose equality is based on their
attribute values. Changing an address always means replacing it.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

_ADDRESS_FIELDS = ("street", "city", "state", "postal_code")


@dataclass(frozen=True)
class PostalAddress:
    """A validated street address.

    All fields are trimmed on construction.

    Business rules:
    - street has at least 3 characters
    - city has at least 2 characters
    - state is exactly 2 characters
    - postal_code is numeric and at least 5 digits
    """

    street: str
    city: str
    state: str
    postal_code: str

    def __post_init__(self) -> None:
        """Trim every field, then validate."""
        for name in _ADDRESS_FIELDS:
            value = getattr(self, name)
            if value is None:
                raise ValueError(f"Address {name} is required")
            object.__setattr__(self, name, value.strip())

        self.validate()

    def __str__(self) -> str:
        """Return single-line address."""
        return f"{self.street}, {self.city}, {self.state} {self.postal_code}"

    @classmethod
    def unspecified(cls) -> PostalAddress:
        """Return an empty placeholder address that skips validation.

        Used by records whose address has not been captured yet. The
        placeholder compares unequal to every real address.
        """
        address = object.__new__(cls)
        for f in fields(cls):
            object.__setattr__(address, f.name, "")
        return address

    @property
    def is_unspecified(self) -> bool:
        """True for the empty placeholder address."""
        return not any(getattr(self, name) for name in _ADDRESS_FIELDS)

    def validate(self) -> None:
        """Check the address invariants.

        Raises:
            ValueError: If any field is too short or malformed
        """
        if len(self.street) < 3:
            raise ValueError("Street must have at least 3 characters")
        if len(self.city) < 2:
            raise ValueError("City must have at least 2 characters")
        if len(self.state) != 2:
            raise ValueError("State must be a 2-letter code")
        if not self.postal_code.isdigit() or len(self.postal_code) < 5:
            raise ValueError("Postal code must be numeric and at least 5 digits")

    def with_(
        self,
        street: str | None = None,
        city: str | None = None,
        state: str | None = None,
        postal_code: str | None = None,
    ) -> PostalAddress:
        """Return a copy with the supplied fields replaced.

        Fields left as None keep their current value. The result is fully
        re-validated.

        Raises:
            ValueError: If the resulting address is invalid
        """
        return PostalAddress(
            street=street if street is not None else self.street,
            city=city if city is not None else self.city,
            state=state if state is not None else self.state,
            postal_code=postal_code if postal_code is not None else self.postal_code,
        )
