"""Domain models for the ATM customer data model."""

from atm_model.models.base import Address

__all__ = ["Address"]
