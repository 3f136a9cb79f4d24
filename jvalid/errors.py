"""Validation Error Model

Structured, path-addressable errors produced by schema validation.

Error Format (``ValidationError.to_dict()``):
{
    "code": "string_too_short",
    "message": "String must be at least 2 characters long",
    "path": ["user", "addresses", 0, "street"],
    "received": 1,
    "expected": "string"
}

Errors are plain immutable values. Nothing in the recursive parse path raises;
``SchemaValidationError`` exists only for the ``safe_parse`` boundary.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence

from .config import get_settings

PathSegment = str | int
Path = tuple[PathSegment, ...]


class _Missing:
    """Marker for an absent value (a key not present in the input)."""
    _instance: _Missing | None = None
    __slots__ = ()

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str: return "MISSING"

    def __bool__(self) -> bool: return False

    def __copy__(self) -> _Missing: return self

    def __deepcopy__(self, memo: dict) -> _Missing: return self

    def __reduce__(self) -> str: return "MISSING"


MISSING: Any = _Missing()


class ErrorCode(str, Enum):
    """Fixed vocabulary of failure kinds.

    Structural: type, length, range, format and pattern violations.
    Presence: required / not_nullable.
    Composite: unknown_key, literal_mismatch, union_mismatch.
    User: custom_validation_failed and the custom-schema codes.
    """
    INVALID_TYPE = "invalid_type"
    # String
    STRING_TOO_SHORT = "string_too_short"
    STRING_TOO_LONG = "string_too_long"
    STRING_PATTERN_MISMATCH = "string_pattern_mismatch"
    INVALID_EMAIL = "invalid_email"
    INVALID_URL = "invalid_url"
    INVALID_UUID = "invalid_uuid"
    INVALID_DATE = "invalid_date"
    INVALID_DATETIME = "invalid_datetime"
    # Number
    NOT_INTEGER = "not_integer"
    NUMBER_TOO_SMALL = "number_too_small"
    NUMBER_TOO_LARGE = "number_too_large"
    NOT_POSITIVE = "not_positive"
    NOT_NEGATIVE = "not_negative"
    # Array
    ARRAY_TOO_SMALL = "array_too_small"
    ARRAY_TOO_LARGE = "array_too_large"
    ARRAY_WRONG_LENGTH = "array_wrong_length"
    # Object / union / literal
    UNKNOWN_KEY = "unknown_key"
    LITERAL_MISMATCH = "literal_mismatch"
    UNION_MISMATCH = "union_mismatch"
    # Presence
    REQUIRED = "required"
    NOT_NULLABLE = "not_nullable"
    # User-supplied checks
    CUSTOM_VALIDATION_FAILED = "custom_validation_failed"
    CUSTOM_EXPRESSION_ERROR = "custom_expression_error"
    ASYNC_VALIDATION_NOT_SUPPORTED = "async_validation_not_supported"
    EVALUATION_ERROR = "evaluation_error"

    def __str__(self) -> str: return self.value


def format_path(path: Sequence[PathSegment]) -> str:
    """Dotted form of a path, e.g. ``items.0.name``."""
    return ".".join(str(segment) for segment in path)


def _truncate(value: Any, limit: int) -> Any:
    if isinstance(value, str) and len(value) > limit:
        return value[:limit] + "..."
    return value


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A single validation failure.

    - code: failure kind from ``ErrorCode``
    - message: human-readable text
    - path: context path at the point of failure
    - received: echo of the offending value (``MISSING`` when absent)
    - expected: description of what was wanted
    - details: suppressed sub-errors (only populated for union debugging)
    """
    code: ErrorCode
    message: str
    path: Path = ()
    received: Any = MISSING
    expected: str | None = None
    details: tuple[ValidationError, ...] = field(default=(), compare=False)

    @property
    def dotted_path(self) -> str: return format_path(self.path)

    def with_path_prefix(self, prefix: Sequence[PathSegment]) -> ValidationError:
        """Copy of this error with ``prefix`` prepended to its path."""
        return ValidationError(code=self.code, message=self.message, path=(*prefix, *self.path),
            received=self.received, expected=self.expected, details=self.details)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output. Absent fields are omitted."""
        result: dict[str, Any] = {"code": self.code.value, "message": self.message, "path": list(self.path)}
        if self.received is not MISSING:
            result["received"] = _truncate(self.received, get_settings().max_received_length)
        if self.expected is not None: result["expected"] = self.expected
        if self.details: result["details"] = [d.to_dict() for d in self.details]
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, default_path: Sequence[PathSegment] = ()) -> ValidationError:
        """Build from a plain mapping, e.g. an error reported by a user callable.

        Unknown codes fall back to ``custom_validation_failed``.
        """
        try:
            code = ErrorCode(data.get("code", ErrorCode.CUSTOM_VALIDATION_FAILED))
        except ValueError:
            code = ErrorCode.CUSTOM_VALIDATION_FAILED
        path = data.get("path")
        return cls(code=code, message=str(data.get("message", "Validation failed")),
            path=tuple(path) if path is not None else tuple(default_path),
            received=data.get("received", MISSING), expected=data.get("expected"))

    def __str__(self) -> str:
        return f"{self.dotted_path}: {self.message}" if self.path else self.message


class SchemaValidationError(Exception):
    """Raised by ``safe_parse`` when validation fails.

    Carries the full accumulated error list so callers lose no detail by
    choosing the exception style over the result style.
    """

    def __init__(self, errors: Sequence[ValidationError]):
        self.errors: tuple[ValidationError, ...] = tuple(errors)
        super().__init__(
            "Validation failed: " + ", ".join(f"{format_path(e.path)}: {e.message}" for e in self.errors)
        )

    @property
    def first_error(self) -> ValidationError | None: return self.errors[0] if self.errors else None

    @property
    def field_errors(self) -> dict[str, list[ValidationError]]:
        """Group errors by dotted path."""
        result: dict[str, list[ValidationError]] = {}
        for error in self.errors: result.setdefault(error.dotted_path, []).append(error)
        return result

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"type": "validation_error", "message": "Validation failed",
            "error_count": len(self.errors), "errors": [e.to_dict() for e in self.errors]}}
