"""Card generator for banking domain."""

import random
from datetime import date, timedelta

from atm_model.generators.base import BaseGenerator
from atm_model.models.banking import Card


class CardGenerator(BaseGenerator):
    """Generate synthetic ATM cards."""

    CARD_TYPES = ["visa16", "mastercard", "discover"]
    CARD_TYPE_WEIGHTS = [0.55, 0.35, 0.10]

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        pin_length: int = 4,
    ) -> None:
        super().__init__(seed, locale)
        self.pin_length = pin_length

    def generate(self, customer_name: str) -> Card:
        """Generate a card for a holder.

        Parameters
        ----------
        customer_name : str
            Holder name printed on the card.

        Returns
        -------
        Card
            Generated card expiring one to five years from today.
        """
        card_type = random.choices(self.CARD_TYPES, weights=self.CARD_TYPE_WEIGHTS, k=1)[0]
        expiry = date.today() + timedelta(days=random.randint(365, 5 * 365))

        return Card(
            card_number=self.fake.unique.credit_card_number(card_type=card_type),
            customer_name=customer_name,
            card_expiry=expiry,
            pin=f"{random.randint(0, 10**self.pin_length - 1):0{self.pin_length}d}",
        )
