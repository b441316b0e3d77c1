"""Account model for banking domain."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from atm_model.exceptions import ImmutableFieldError


@dataclass
class Account:
    """Bank account entity.

    Positional order is ``(account_number, available_balance,
    total_balance)``. ``available_balance`` can only be set at
    construction; ``account_number`` and ``total_balance`` are freely
    mutable. No relation between the two balances is enforced here
    (see ``atm_model.validation.validate_balances``).
    """

    account_number: str
    available_balance: Decimal
    total_balance: Decimal

    _READ_ONLY = frozenset({"available_balance"})

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._READ_ONLY and name in self.__dict__:
            raise ImmutableFieldError(f"Account.{name} is fixed at construction")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in self._READ_ONLY:
            raise ImmutableFieldError(f"Account.{name} is fixed at construction")
        super().__delattr__(name)
