"""Account generator for banking domain."""

import random
from decimal import Decimal

from atm_model.generators.base import BaseGenerator
from atm_model.models.banking import Account


class AccountGenerator(BaseGenerator):
    """Generate synthetic bank accounts.

    Total balance follows a log-normal distribution; the available
    balance is a share of it, since pending holds can only reduce it.
    """

    # Share of total balance held back by pending operations
    HOLD_SHARES = [Decimal("0"), Decimal("0.05"), Decimal("0.20")]
    HOLD_WEIGHTS = [0.75, 0.20, 0.05]

    def generate(self) -> Account:
        """Generate a single account.

        Returns
        -------
        Account
            Generated account with ``available_balance <= total_balance``.
        """
        total = Decimal(str(round(random.lognormvariate(mu=8.0, sigma=1.2), 2)))
        hold = random.choices(self.HOLD_SHARES, weights=self.HOLD_WEIGHTS, k=1)[0]
        available = (total * (1 - hold)).quantize(Decimal("0.01"))

        return Account(
            account_number=self.fake.unique.numerify("##########"),
            available_balance=min(available, total),
            total_balance=total,
        )
