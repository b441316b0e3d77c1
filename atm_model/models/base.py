"""Base models shared across the banking domain."""

from dataclasses import dataclass


@dataclass
class Address:
    """Postal address of a customer.

    All fields are free text and independently mutable; no field is
    checked against any other.
    """

    street_address: str
    city: str
    state: str
    zipcode: str
    country: str
