"""In-memory ATM customer data model."""

__version__ = "0.1.0"
