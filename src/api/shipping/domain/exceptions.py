"""Domain exceptions for Shipping bounded context."""

from shared_kernel.canonical import DomainStateError


class ShipmentNotFoundError(DomainStateError):
    """Raised when an operation references a shipment the aggregate does not hold."""

    def __init__(self, shipment_id: str):
        super().__init__(f"Shipment {shipment_id} not found.")
        self.shipment_id = shipment_id
