"""State errors shared by the canonical model.

Argument errors (blank strings, negative amounts, malformed addresses) are
raised as ValueError at the point of violation. The exceptions below signal
that the object graph itself is in a state the operation cannot accept.
"""


class DomainStateError(Exception):
    """Base exception for canonical model state violations."""

    pass


class MissingAddressError(DomainStateError):
    """Raised when a required postal address is absent."""

    def __init__(self, message: str, address_kind: str | None = None):
        super().__init__(message)
        self.address_kind = address_kind


class ReferentialIntegrityError(DomainStateError):
    """Raised when a child record does not belong to its aggregate's customer.

    Attributes:
        record_id: Identifier of the offending child record
        customer_id: Identifier of the aggregate's customer
    """

    def __init__(
        self,
        message: str,
        record_id: str | None = None,
        customer_id: str | None = None,
    ):
        super().__init__(message)
        self.record_id = record_id
        self.customer_id = customer_id


class VersionMismatchError(DomainStateError):
    """Raised when a model declares a schema version that is not current."""

    def __init__(self, message: str, declared: str, current: str):
        super().__init__(message)
        self.declared = declared
        self.current = current
