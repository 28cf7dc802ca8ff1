"""
Query parameter encoding helpers.

Optional parameters are dropped before they reach the transport: a key is
only present in the encoded query when its value is not ``None``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Dict, Optional

from hitbtc.errors import HitbtcSerializationError


def format_timestamp(value: datetime) -> str:
    """Return an RFC3339 timestamp in UTC; naive datetimes are treated as UTC."""
    if not isinstance(value, datetime):
        raise HitbtcSerializationError(f"Expected datetime, got {type(value).__name__}")
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def format_decimal(value: Decimal | int | str) -> str:
    """Canonical decimal string without exponent notation."""
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise HitbtcSerializationError(f"Invalid decimal value {value!r}", cause=exc) from exc
    if not number.is_finite():
        raise HitbtcSerializationError(f"Decimal value must be finite, got {value!r}")
    return format(number, "f")


def format_integer(value: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise HitbtcSerializationError(f"Expected integer, got {value!r}")
    if value < 0:
        raise HitbtcSerializationError(f"Expected non-negative integer, got {value}")
    return str(value)


def format_enum(member: Enum) -> str:
    """Return the declared wire value of an enum member."""
    if not isinstance(member, Enum):
        raise HitbtcSerializationError(f"Expected enum member, got {member!r}")
    return str(member.value)


class QueryBuilder:
    """Collects query parameters, skipping absent values."""

    def __init__(self) -> None:
        self._params: Dict[str, str] = {}

    def add(
        self,
        key: str,
        value: Optional[Any],
        encode: Callable[[Any], str] = str,
    ) -> "QueryBuilder":
        if value is None:
            return self
        self._params[key] = encode(value)
        return self

    def require(
        self,
        key: str,
        value: Any,
        encode: Callable[[Any], str] = str,
    ) -> "QueryBuilder":
        if value is None:
            raise HitbtcSerializationError(f"Missing required parameter {key!r}")
        self._params[key] = encode(value)
        return self

    def build(self) -> Dict[str, str]:
        return dict(self._params)
