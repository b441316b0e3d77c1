"""Custom exception hierarchy for atm-model."""


class AtmModelError(Exception):
    """Base exception for all atm-model errors."""


class ValidationError(AtmModelError):
    """Raised when an entity violates a validation rule."""


class InvalidPinError(ValidationError):
    """Raised when a PIN is not a fixed-width numeric code."""


class BalanceInvariantError(ValidationError):
    """Raised when available balance exceeds total balance."""


class CardExpiredError(ValidationError):
    """Raised when a card's expiry date is in the past."""


class ImmutableFieldError(AtmModelError, AttributeError):
    """Raised when assigning a field that is fixed at construction."""


class EntityNotFoundError(AtmModelError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a reference points at an unregistered entity."""


class DuplicateEntityError(AtmModelError):
    """Raised when an identifier is already registered."""


class OwnershipError(AtmModelError):
    """Raised when an owned instance is already held by another customer."""


class ConfigurationError(AtmModelError):
    """Raised when configuration is invalid or missing."""
