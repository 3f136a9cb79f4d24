"""Format and Kind Predicates

Plain boolean checks shared by the primitive schemas and the evaluator
adapter's utility functions. Each predicate accepts any value and never
raises.
"""
from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import date, datetime
from email.utils import parsedate_to_datetime
from typing import Any, Iterable
from urllib.parse import urlsplit

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$", re.IGNORECASE
)
DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
_HOST_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})


# ============================================================================
# Value kinds
# ============================================================================

def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """Real number, excluding booleans and NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def kind_of(value: Any) -> str:
    """Short name of a value's kind for error messages."""
    if value is None: return "null"
    if isinstance(value, bool): return "boolean"
    if isinstance(value, (int, float)): return "nan" if isinstance(value, float) and math.isnan(value) else "number"
    if isinstance(value, str): return "string"
    if isinstance(value, Mapping): return "object"
    if isinstance(value, (list, tuple)): return "array"
    return type(value).__name__


# ============================================================================
# String formats
# ============================================================================

def is_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None


def is_url(value: Any) -> bool:
    """Absolute URL with a scheme; web schemes also need a host.

    This is a ``urlsplit`` approximation, stricter than a WHATWG parser on
    some inputs: ``"http:example.com"`` is rejected here because it has no
    ``//`` authority, although browsers' ``new URL`` accepts it.
    """
    if not isinstance(value, str) or any(ch.isspace() for ch in value.strip()):
        return False
    candidate = value.strip()
    if not _SCHEME_PATTERN.match(candidate):
        return False
    try:
        parts = urlsplit(candidate)
        parts.port  # raises ValueError on a malformed port
    except ValueError:
        return False
    if parts.scheme.lower() in _HOST_SCHEMES:
        return bool(parts.hostname)
    return True


def is_uuid(value: Any) -> bool:
    return isinstance(value, str) and UUID_PATTERN.fullmatch(value) is not None


def is_date(value: Any) -> bool:
    """``YYYY-MM-DD`` naming a real calendar day."""
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def parse_datetime(value: str) -> datetime | None:
    """Parse ISO 8601 or RFC 2822 date strings. Returns None when unparseable."""
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        pass
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None


def is_datetime(value: Any) -> bool:
    return isinstance(value, str) and parse_datetime(value) is not None


# ============================================================================
# Numeric and collection checks
# ============================================================================

def is_integer(value: Any) -> bool:
    if not is_number(value): return False
    return isinstance(value, int) or value.is_integer()


def is_positive(value: Any) -> bool:
    return is_number(value) and value > 0


def is_negative(value: Any) -> bool:
    return is_number(value) and value < 0


def in_range(value: Any, minimum: float, maximum: float) -> bool:
    return is_number(value) and minimum <= value <= maximum


def has_length(value: Any, length: int) -> bool:
    return is_list(value) and len(value) == length


def min_length(value: Any, length: int) -> bool:
    return is_list(value) and len(value) >= length


def max_length(value: Any, length: int) -> bool:
    return is_list(value) and len(value) <= length


def has_keys(value: Any, keys: Iterable[str]) -> bool:
    return is_object(value) and all(key in value for key in keys)


def has_no_extra_keys(value: Any, allowed_keys: Iterable[str]) -> bool:
    if not is_object(value): return False
    allowed = set(allowed_keys)
    return all(key in allowed for key in value)
