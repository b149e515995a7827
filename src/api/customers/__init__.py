"""Customers bounded context.

Owns the canonical customer record: identity, contact details, billing and
shipping addresses and delivery-access metadata.
"""
