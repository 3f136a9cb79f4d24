"""Primitive Schemas

Leaf validators for strings, numbers, booleans and untyped values.

Constraint policy: the first failing constraint wins. A string that is both
too short and malformed reports only ``string_too_short``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Literal, Self

from .errors import ErrorCode
from .formats import (is_boolean, is_date, is_datetime, is_email, is_integer, is_number, is_string, is_url, is_uuid,
    kind_of)
from .result import ValidationContext, ValidationResult, ok
from .schema import Schema

StringFormat = Literal["email", "url", "uuid", "date", "datetime"]

# format -> (predicate, error code, message)
_FORMAT_CHECKS: dict[str, tuple[Callable[[Any], bool], ErrorCode, str]] = {
    "email": (is_email, ErrorCode.INVALID_EMAIL, "Invalid email format"),
    "url": (is_url, ErrorCode.INVALID_URL, "Invalid URL format"),
    "uuid": (is_uuid, ErrorCode.INVALID_UUID, "Invalid UUID format"),
    "date": (is_date, ErrorCode.INVALID_DATE, "Invalid date format (expected YYYY-MM-DD)"),
    "datetime": (is_datetime, ErrorCode.INVALID_DATETIME, "Invalid datetime format"),
}


@dataclass(frozen=True, slots=True, eq=False, repr=False, kw_only=True)
class StringSchema(Schema[str]):
    """String schema with length, pattern and format constraints.

    Checks run in order: type, min length, max length, pattern, format.

    Lengths count Unicode code points (``len``), not UTF-16 code units:
    ``"😀"`` has length 1 here, while a JavaScript string reports 2.
    """
    min_length: int | None = None
    max_length: int | None = None
    pattern: re.Pattern[str] | None = None
    format: StringFormat | None = None

    type_name: ClassVar[str] = "string"

    def _check(self, value: Any, context: ValidationContext) -> ValidationResult[str]:
        if not is_string(value):
            return self._error(ErrorCode.INVALID_TYPE, f"Expected string, received {kind_of(value)}", context,
                received=value, expected="string")

        if self.min_length is not None and len(value) < self.min_length:
            return self._error(ErrorCode.STRING_TOO_SHORT,
                f"String must be at least {self.min_length} characters long", context, received=len(value))

        if self.max_length is not None and len(value) > self.max_length:
            return self._error(ErrorCode.STRING_TOO_LONG,
                f"String must be at most {self.max_length} characters long", context, received=len(value))

        if self.pattern is not None and not self.pattern.search(value):
            return self._error(ErrorCode.STRING_PATTERN_MISMATCH,
                f"String does not match pattern {self.pattern.pattern}", context, received=value)

        if self.format is not None:
            predicate, code, message = _FORMAT_CHECKS[self.format]
            if not predicate(value):
                return self._error(code, message, context, received=value, expected=self.format)

        return ok(value)

    def min(self, length: int) -> Self:
        return self.clone(min_length=length)

    def max(self, length: int) -> Self:
        return self.clone(max_length=length)

    def length(self, length: int) -> Self:
        """Exact length: sets both bounds."""
        return self.clone(min_length=length, max_length=length)

    def regex(self, pattern: str | re.Pattern[str], flags: int = 0) -> Self:
        """Require a match anywhere in the string (anchor the pattern for a full match)."""
        return self.clone(pattern=pattern if isinstance(pattern, re.Pattern) else re.compile(pattern, flags))

    def email(self) -> Self: return self.clone(format="email")

    def url(self) -> Self: return self.clone(format="url")

    def uuid(self) -> Self: return self.clone(format="uuid")

    def date(self) -> Self: return self.clone(format="date")

    def datetime(self) -> Self: return self.clone(format="datetime")

    def describe(self) -> str:
        return f"string<{self.format}>" if self.format else "string"


@dataclass(frozen=True, slots=True, eq=False, repr=False, kw_only=True)
class NumberSchema(Schema[float]):
    """Number schema. Booleans and NaN are not numbers.

    Checks run in order: type, integer, min, max, positive, negative.
    Contradictory settings are accepted and simply reject every value.
    """
    min_value: float | None = None
    max_value: float | None = None
    integer: bool = False
    positive_only: bool = False
    negative_only: bool = False

    type_name: ClassVar[str] = "number"

    def _check(self, value: Any, context: ValidationContext) -> ValidationResult[float]:
        if not is_number(value):
            return self._error(ErrorCode.INVALID_TYPE, f"Expected number, received {kind_of(value)}", context,
                received=value, expected="number")

        if self.integer and not is_integer(value):
            return self._error(ErrorCode.NOT_INTEGER, "Expected integer", context, received=value)

        if self.min_value is not None and value < self.min_value:
            return self._error(ErrorCode.NUMBER_TOO_SMALL,
                f"Number must be greater than or equal to {self.min_value}", context, received=value)

        if self.max_value is not None and value > self.max_value:
            return self._error(ErrorCode.NUMBER_TOO_LARGE,
                f"Number must be less than or equal to {self.max_value}", context, received=value)

        if self.positive_only and value <= 0:
            return self._error(ErrorCode.NOT_POSITIVE, "Number must be positive", context, received=value)

        if self.negative_only and value >= 0:
            return self._error(ErrorCode.NOT_NEGATIVE, "Number must be negative", context, received=value)

        return ok(value)

    def min(self, value: float) -> Self:
        return self.clone(min_value=value)

    def max(self, value: float) -> Self:
        return self.clone(max_value=value)

    def int(self) -> Self:
        return self.clone(integer=True)

    def positive(self) -> Self:
        return self.clone(positive_only=True)

    def negative(self) -> Self:
        return self.clone(negative_only=True)

    def describe(self) -> str:
        return "integer" if self.integer else "number"


@dataclass(frozen=True, slots=True, eq=False, repr=False, kw_only=True)
class BooleanSchema(Schema[bool]):
    type_name: ClassVar[str] = "boolean"

    def _check(self, value: Any, context: ValidationContext) -> ValidationResult[bool]:
        if not is_boolean(value):
            return self._error(ErrorCode.INVALID_TYPE, f"Expected boolean, received {kind_of(value)}", context,
                received=value, expected="boolean")
        return ok(value)


@dataclass(frozen=True, slots=True, eq=False, repr=False, kw_only=True)
class AnySchema(Schema[Any]):
    """Accepts every present, non-null value (presence rules still apply)."""
    type_name: ClassVar[str] = "any"

    def _check(self, value: Any, context: ValidationContext) -> ValidationResult[Any]:
        return ok(value)
