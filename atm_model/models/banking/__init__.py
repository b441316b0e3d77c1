"""Banking domain models."""

from atm_model.models.banking.account import Account
from atm_model.models.banking.card import Card
from atm_model.models.banking.customer import Customer
from atm_model.models.banking.enums import CustomerStatus
from atm_model.models.banking.handles import AtmHandle, TransactionHandle

__all__ = [
    "Account",
    "AtmHandle",
    "Card",
    "Customer",
    "CustomerStatus",
    "TransactionHandle",
]
