"""Shipping bounded context.

Owns shipment records and the customer shipping aggregate that tracks
deliveries and delivery-access metadata.
"""
