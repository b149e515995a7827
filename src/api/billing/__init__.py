"""Billing bounded context.

Owns invoices (billing records) and the customer billing aggregate that
applies payments against them.
"""
