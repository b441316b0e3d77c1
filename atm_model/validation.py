"""Opt-in validation rules for banking entities.

Entities accept any values at construction and on assignment. The
checks here are only applied when called explicitly, or by a
``CustomerRegistry`` running in strict mode.
"""

import logging
from datetime import date

from atm_model.exceptions import (
    BalanceInvariantError,
    CardExpiredError,
    InvalidPinError,
)
from atm_model.models.banking import Account, Card, Customer

logger = logging.getLogger(__name__)

DEFAULT_PIN_LENGTH = 4


def validate_pin(pin: str, length: int = DEFAULT_PIN_LENGTH) -> None:
    """Check that ``pin`` is a string of exactly ``length`` ASCII digits.

    Parameters
    ----------
    pin : str
        PIN to check.
    length : int
        Required number of digits.

    Raises
    ------
    InvalidPinError
        If the PIN is not a fixed-width numeric code.
    """
    if not isinstance(pin, str):
        raise InvalidPinError(f"PIN must be a digit string, got {type(pin).__name__}")
    if len(pin) != length or not (pin.isascii() and pin.isdigit()):
        raise InvalidPinError(f"PIN must be exactly {length} digits")


def validate_balances(account: Account) -> None:
    """Check that the available balance does not exceed the total balance."""
    if account.available_balance > account.total_balance:
        raise BalanceInvariantError(
            f"Account {account.account_number}: available balance "
            f"{account.available_balance} exceeds total balance {account.total_balance}"
        )


def validate_card(
    card: Card,
    today: date | None = None,
    pin_length: int = DEFAULT_PIN_LENGTH,
) -> None:
    """Check a card's PIN format and expiry date.

    Parameters
    ----------
    card : Card
        Card to check.
    today : date | None
        Reference date for the expiry check (default: today).
    pin_length : int
        Required number of PIN digits.
    """
    validate_pin(card.pin, pin_length)
    reference = today or date.today()
    if card.card_expiry < reference:
        raise CardExpiredError(f"Card {mask_card_number(card.card_number)} expired on {card.card_expiry}")


def validate_customer(
    customer: Customer,
    today: date | None = None,
    pin_length: int = DEFAULT_PIN_LENGTH,
) -> None:
    """Validate the card and account attached to a customer, if any.

    A card whose holder name differs from the customer's name is only
    reported as a warning.
    """
    if customer.card is not None:
        validate_card(customer.card, today=today, pin_length=pin_length)
        check_holder_name(customer.card, customer)
    if customer.account is not None:
        validate_balances(customer.account)


def check_holder_name(card: Card, customer: Customer) -> None:
    """Log a warning when a card's holder name differs from the customer's."""
    if card.customer_name != customer.name:
        logger.warning(
            "Card %s holder name %r does not match customer %r",
            mask_card_number(card.card_number),
            card.customer_name,
            customer.name,
        )


def mask_card_number(card_number: str) -> str:
    """Mask all but the last four characters of a card number."""
    return "*" * max(0, len(card_number) - 4) + card_number[-4:]
