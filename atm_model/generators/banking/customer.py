"""Customer generator for banking domain."""

from __future__ import annotations

import random
from typing import Iterator

from atm_model.generators.address import AddressGenerator
from atm_model.generators.banking.account import AccountGenerator
from atm_model.generators.banking.card import CardGenerator
from atm_model.generators.base import BaseGenerator
from atm_model.models.banking import Customer
from atm_model.models.banking.enums import CustomerStatus


class CustomerGenerator(BaseGenerator):
    """Generate synthetic customers, optionally with a card and account."""

    STATUSES = [CustomerStatus.ACTIVE, CustomerStatus.BLOCKED, CustomerStatus.CLOSED]
    STATUS_WEIGHTS = [0.90, 0.07, 0.03]

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        pin_length: int = 4,
    ) -> None:
        super().__init__(seed, locale)
        self._address_generator = AddressGenerator(seed=seed, locale=locale)
        self._card_generator = CardGenerator(seed=seed, locale=locale, pin_length=pin_length)
        self._account_generator = AccountGenerator(seed=seed, locale=locale)

    def generate(self) -> Customer:
        """Generate a single customer without card or account.

        Returns
        -------
        Customer
            Generated customer.
        """
        status = random.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0]

        return Customer(
            name=self.fake.name(),
            email=self.fake.unique.email(),
            phone=self.fake.phone_number(),
            address=self._address_generator.generate(),
            status=status,
        )

    def generate_with_products(self) -> Customer:
        """Generate a customer holding a card and an account."""
        customer = self.generate()
        customer.card = self._card_generator.generate(customer.name)
        customer.account = self._account_generator.generate()
        return customer

    def generate_batch(self, count: int) -> Iterator[Customer]:
        """Generate multiple customers with products.

        Parameters
        ----------
        count : int
            Number of customers to generate.

        Yields
        ------
        Customer
            Generated customers.
        """
        for _ in range(count):
            yield self.generate_with_products()
