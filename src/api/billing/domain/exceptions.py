"""Domain exceptions for Billing bounded context."""

from shared_kernel.canonical import DomainStateError


class InvoiceNotFoundError(DomainStateError):
    """Raised when an operation references an invoice the aggregate does not hold."""

    def __init__(self, invoice_id: str):
        super().__init__(f"Invoice {invoice_id} not found.")
        self.invoice_id = invoice_id
