"""Address generator."""

from __future__ import annotations

from typing import Iterator

from atm_model.generators.base import BaseGenerator
from atm_model.models.base import Address


class AddressGenerator(BaseGenerator):
    """Generate postal addresses using the configured Faker locale."""

    def generate(self) -> Address:
        """Generate a single address.

        Returns
        -------
        Address
            Generated address.
        """
        return Address(
            street_address=self.fake.street_address(),
            city=self.fake.city(),
            state=self._state(),
            zipcode=self.fake.postcode(),
            country=self.fake.current_country_code(),
        )

    def generate_batch(self, count: int) -> Iterator[Address]:
        """Generate multiple addresses."""
        for _ in range(count):
            yield self.generate()

    def _state(self) -> str:
        # Not every locale has a state/province provider
        for provider in ("state_abbr", "state", "province", "administrative_unit"):
            method = getattr(self.fake, provider, None)
            if method is not None:
                return method()
        return ""
