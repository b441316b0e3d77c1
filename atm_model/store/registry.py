"""Customer registry with referential consistency rules."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator

from atm_model.exceptions import (
    DuplicateEntityError,
    OwnershipError,
    ReferentialIntegrityError,
)
from atm_model.models.base import Address
from atm_model.models.banking import Account, Card, Customer
from atm_model.validation import (
    DEFAULT_PIN_LENGTH,
    check_holder_name,
    mask_card_number,
    validate_balances,
    validate_card,
    validate_customer,
)

logger = logging.getLogger(__name__)

# Customer fields holding instances owned by exactly one customer
OWNED_FIELDS = ("address", "card", "account")


@dataclass
class CustomerRegistry:
    """In-memory collection of customers keyed by email.

    Enforces that every address, card and account instance belongs to a
    single registered customer, and that card and account numbers are
    unique across the registry. In strict mode each customer, card and
    account is validated before it is accepted.

    Ownership is checked against the current fields of registered
    customers. Number indexes reflect the values seen at registration
    time; call ``reindex()`` after changing ``card_number`` or
    ``account_number`` on a registered instance.
    """

    strict: bool = True
    pin_length: int = DEFAULT_PIN_LENGTH

    customers: dict[str, Customer] = field(default_factory=dict)

    # Relationship indexes
    _card_numbers: dict[str, str] = field(default_factory=dict)
    _account_numbers: dict[str, str] = field(default_factory=dict)

    def add_customer(self, customer: Customer) -> None:
        """Register a customer together with any attached card and account."""
        if customer.email in self.customers:
            raise DuplicateEntityError(f"Customer {customer.email} already registered")

        for attr in OWNED_FIELDS:
            self._check_unowned(attr, getattr(customer, attr), customer.email)
        if customer.card is not None:
            self._check_card_number(customer.card, customer.email)
        if customer.account is not None:
            self._check_account_number(customer.account, customer.email)
        if self.strict:
            validate_customer(customer, pin_length=self.pin_length)

        self.customers[customer.email] = customer
        self._index(customer.email, customer)
        logger.debug("Registered customer %s", customer.email)

    def assign_card(self, email: str, card: Card) -> None:
        """Attach a card to a registered customer, replacing any previous one."""
        customer = self.get_customer(email)
        if card is customer.card:
            return
        self._check_unowned("card", card, email)
        self._check_card_number(card, email)
        if self.strict:
            validate_card(card, pin_length=self.pin_length)
            check_holder_name(card, customer)

        self._unindex(email)
        customer.card = card
        self._index(email, customer)
        logger.debug("Assigned card %s to %s", mask_card_number(card.card_number), email)

    def assign_account(self, email: str, account: Account) -> None:
        """Attach an account to a registered customer, replacing any previous one."""
        customer = self.get_customer(email)
        if account is customer.account:
            return
        self._check_unowned("account", account, email)
        self._check_account_number(account, email)
        if self.strict:
            validate_balances(account)

        self._unindex(email)
        customer.account = account
        self._index(email, customer)
        logger.debug("Assigned account %s to %s", account.account_number, email)

    def assign_address(self, email: str, address: Address) -> None:
        """Replace the address of a registered customer."""
        customer = self.get_customer(email)
        if address is customer.address:
            return
        self._check_unowned("address", address, email)

        customer.address = address
        logger.debug("Assigned address to %s", email)

    def remove_customer(self, email: str) -> Customer:
        """Remove a customer and release its card, account and address."""
        customer = self.get_customer(email)
        self._unindex(email)
        del self.customers[email]
        logger.debug("Removed customer %s", email)
        return customer

    # Query methods
    def get_customer(self, email: str) -> Customer:
        """Get a registered customer by email."""
        try:
            return self.customers[email]
        except KeyError:
            raise ReferentialIntegrityError(f"Customer {email} not found") from None

    def find_by_card_number(self, card_number: str) -> Customer | None:
        """Get the customer holding a card number, if any."""
        email = self._card_numbers.get(card_number)
        return self.customers[email] if email is not None else None

    def find_by_account_number(self, account_number: str) -> Customer | None:
        """Get the customer holding an account number, if any."""
        email = self._account_numbers.get(account_number)
        return self.customers[email] if email is not None else None

    def reindex(self) -> None:
        """Rebuild all indexes from the registered customers."""
        self._card_numbers.clear()
        self._account_numbers.clear()
        for email, customer in self.customers.items():
            self._index(email, customer)

    def summary(self) -> dict[str, int]:
        """Return summary counts of registered entities."""
        statuses = Counter(
            str(getattr(c.status, "value", c.status)) for c in self.customers.values()
        )
        return {
            "customers": len(self.customers),
            "cards": sum(1 for c in self.customers.values() if c.card is not None),
            "accounts": sum(1 for c in self.customers.values() if c.account is not None),
            **{f"status_{status.lower()}": count for status, count in sorted(statuses.items())},
        }

    def __len__(self) -> int:
        return len(self.customers)

    def __contains__(self, email: object) -> bool:
        return email in self.customers

    def __iter__(self) -> Iterator[Customer]:
        return iter(list(self.customers.values()))

    def _check_unowned(self, attr: str, owned: object | None, email: str) -> None:
        if owned is None:
            return
        for owner, other in self.customers.items():
            if owner != email and getattr(other, attr) is owned:
                raise OwnershipError(
                    f"{type(owned).__name__} instance already owned by customer {owner}"
                )

    def _check_card_number(self, card: Card, email: str) -> None:
        holder = self._card_numbers.get(card.card_number)
        if holder is not None and holder != email:
            raise DuplicateEntityError(
                f"Card {mask_card_number(card.card_number)} already registered to {holder}"
            )

    def _check_account_number(self, account: Account, email: str) -> None:
        holder = self._account_numbers.get(account.account_number)
        if holder is not None and holder != email:
            raise DuplicateEntityError(
                f"Account {account.account_number} already registered to {holder}"
            )

    def _index(self, email: str, customer: Customer) -> None:
        if customer.card is not None:
            self._card_numbers[customer.card.card_number] = email
        if customer.account is not None:
            self._account_numbers[customer.account.account_number] = email

    def _unindex(self, email: str) -> None:
        for index in (self._card_numbers, self._account_numbers):
            for key in [k for k, v in index.items() if v == email]:
                del index[key]
