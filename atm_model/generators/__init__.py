"""Sample data generators for the ATM customer data model."""

from atm_model.generators.address import AddressGenerator
from atm_model.generators.base import BaseGenerator

__all__ = ["AddressGenerator", "BaseGenerator"]
