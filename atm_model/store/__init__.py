"""In-memory stores for maintaining entity relationships."""

from atm_model.store.registry import CustomerRegistry

__all__ = ["CustomerRegistry"]
