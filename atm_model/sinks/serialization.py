"""Shared serialization utilities for sinks."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

# Fields never written out unless explicitly requested
SECRET_FIELDS = frozenset({"pin"})
MASK = "****"


def to_dict(obj: Any, include_secrets: bool = False) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return dataclass_to_dict(obj, include_secrets)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any, include_secrets: bool = False) -> dict:
    """Convert dataclass to dict, masking secret fields.

    Nested dataclasses (address, card, account) become nested dicts.
    """
    result = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if f.name in SECRET_FIELDS and not include_secrets:
            result[f.name] = MASK
        else:
            result[f.name] = serialize_value(value, include_secrets)
    return result


def serialize_value(value: Any, include_secrets: bool = False) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value, include_secrets)
    elif isinstance(value, dict):
        return {k: serialize_value(v, include_secrets) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v, include_secrets) for v in value]
    return value
