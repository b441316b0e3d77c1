"""Customer model for banking domain."""

from dataclasses import dataclass

from atm_model.models.base import Address
from atm_model.models.banking.account import Account
from atm_model.models.banking.card import Card
from atm_model.models.banking.enums import CustomerStatus
from atm_model.models.banking.handles import AtmHandle, TransactionHandle


@dataclass
class Customer:
    """Bank customer entity.

    Owns one address, one card and one account. Card, account and the
    ATM/transaction handles are assigned after construction.
    """

    name: str
    email: str
    phone: str
    address: Address
    status: CustomerStatus
    card: Card | None = None
    account: Account | None = None
    atm: AtmHandle | None = None
    transaction: TransactionHandle | None = None

    def make_transaction(self) -> bool:
        """Placeholder for transaction processing; always returns ``False``."""
        return False
