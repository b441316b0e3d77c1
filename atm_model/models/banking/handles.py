"""Opaque handles for collaborators defined outside this model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AtmHandle:
    """Reference to an ATM terminal, by identifier only."""

    atm_id: str


@dataclass(frozen=True)
class TransactionHandle:
    """Reference to a transaction, by identifier only."""

    transaction_id: str
