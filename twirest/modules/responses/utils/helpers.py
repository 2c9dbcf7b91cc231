"""
Typed accessors for the loosely-typed text the API returns.

Records keep every value as received; these helpers convert on demand and
return None for empty or unparseable input instead of raising.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from email.utils import parsedate_to_datetime
from typing import Optional

_TRUE_VALUES = {"true", "1", "yes"}
_FALSE_VALUES = {"false", "0", "no"}


def to_int(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def to_decimal(value: Optional[str]) -> Optional[Decimal]:
    """Convert prices such as "-0.00750" without float rounding."""
    if not value:
        return None
    try:
        return Decimal(value.strip())
    except InvalidOperation:
        return None


def to_bool(value: Optional[str]) -> Optional[bool]:
    if not value:
        return None
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return None


def to_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Convert an API date.

    Resource dates are RFC 2822 ("Tue, 10 Aug 2010 08:02:17 +0000");
    usage records use ISO dates ("2012-09-01").
    """
    if not value:
        return None
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        parsed = None
    if parsed is not None:
        return parsed
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return None
