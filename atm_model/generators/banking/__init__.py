"""Banking domain generators."""

from atm_model.generators.banking.account import AccountGenerator
from atm_model.generators.banking.card import CardGenerator
from atm_model.generators.banking.customer import CustomerGenerator

__all__ = [
    "AccountGenerator",
    "CardGenerator",
    "CustomerGenerator",
]
