"""Card model for banking domain."""

from dataclasses import dataclass
from datetime import date


@dataclass
class Card:
    """ATM card entity.

    ``customer_name`` is a denormalized copy of the holder's name and is
    not kept in sync with the owning customer. ``pin`` is held as a digit
    string so codes with leading zeros (``"0042"``) keep their width.
    """

    card_number: str
    customer_name: str
    card_expiry: date
    pin: str
