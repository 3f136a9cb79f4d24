"""Complex Schemas

Schemas that delegate to child schemas: objects, arrays, unions, literals.

Error policy:
- Object fields and array elements accumulate: every failing child is
  reported, each at its own path.
- Array length constraints short-circuit: a length violation is reported
  alone and elements are not inspected.
- Unions report one ``union_mismatch`` when no member matches. Member errors
  are dropped unless ``Settings.union_debug_errors`` is on, in which case they
  ride along in ``ValidationError.details``.
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Iterable, Self

from .config import get_settings
from .errors import MISSING, ErrorCode, ValidationError
from .formats import is_list, is_object, kind_of
from .logging import validation_logger
from .result import Failure, ValidationContext, ValidationResult, fail, ok
from .schema import Schema


@dataclass(frozen=True, slots=True, eq=False, repr=False, kw_only=True)
class ObjectSchema(Schema[dict[str, Any]]):
    """Object schema keyed by a shape of field schemas.

    Unknown input keys are dropped by default, reported as ``unknown_key``
    when strict, and copied through verbatim when passthrough. With both
    modes set, unknown keys are reported (strict wins).
    """
    shape: Mapping[str, Schema[Any]] = field(default_factory=dict, kw_only=False)
    reject_unknown: bool = False
    keep_unknown: bool = False

    type_name: ClassVar[str] = "object"

    def __post_init__(self):
        object.__setattr__(self, "shape", MappingProxyType(dict(self.shape)))

    def _check(self, value: Any, context: ValidationContext) -> ValidationResult[dict[str, Any]]:
        if not is_object(value):
            return self._error(ErrorCode.INVALID_TYPE, f"Expected object, received {kind_of(value)}", context,
                received=value, expected="object")

        errors: list[ValidationError] = []
        output: dict[str, Any] = {}

        for key, schema in self.shape.items():
            child_value = value.get(key, MISSING)
            result = schema._parse(child_value, context.child(key, child_value))
            if isinstance(result, Failure):
                errors.extend(result.errors)
            elif result.data is not MISSING:
                output[key] = result.data

        unknown = [key for key in value if key not in self.shape]
        if self.reject_unknown:
            errors.extend(ValidationError(code=ErrorCode.UNKNOWN_KEY, message=f"Unknown key: {key}",
                path=(*context.path, key), received=value[key]) for key in unknown)
        elif self.keep_unknown:
            output.update((key, value[key]) for key in unknown)

        if errors:
            return fail(*errors)
        return ok(output)

    def strict(self) -> Self:
        """Report keys not declared in the shape."""
        return self.clone(reject_unknown=True)

    def passthrough(self) -> Self:
        """Copy keys not declared in the shape into the output."""
        return self.clone(keep_unknown=True)

    def _derive(self, shape: Mapping[str, Schema[Any]]) -> ObjectSchema:
        # Derived schemas keep the unknown-key mode; presence flags, defaults
        # and refinements describe the source object and are not carried.
        return ObjectSchema(shape, reject_unknown=self.reject_unknown, keep_unknown=self.keep_unknown)

    def pick(self, keys: Iterable[str]) -> ObjectSchema:
        """New schema over the named keys. Keys absent from the shape are ignored."""
        return self._derive({key: self.shape[key] for key in keys if key in self.shape})

    def omit(self, keys: Iterable[str]) -> ObjectSchema:
        excluded = set(keys)
        return self._derive({key: schema for key, schema in self.shape.items() if key not in excluded})

    def extend(self, fields: Mapping[str, Schema[Any]]) -> ObjectSchema:
        """New schema with ``fields`` added; they replace same-named fields."""
        return self._derive({**self.shape, **fields})

    def keyof(self) -> tuple[str, ...]:
        return tuple(self.shape)


@dataclass(frozen=True, slots=True, eq=False, repr=False, kw_only=True)
class ArraySchema(Schema[list[Any]]):
    """Array schema with optional element schema and length constraints.

    Length checks (min, max, exact) run before elements. Without an element
    schema, elements pass through unchanged.
    """
    element: Schema[Any] | None = field(default=None, kw_only=False)
    min_length: int | None = None
    max_length: int | None = None
    exact_length: int | None = None

    type_name: ClassVar[str] = "array"

    def _check(self, value: Any, context: ValidationContext) -> ValidationResult[list[Any]]:
        if not is_list(value):
            return self._error(ErrorCode.INVALID_TYPE, f"Expected array, received {kind_of(value)}", context,
                received=value, expected="array")

        size = len(value)
        if self.min_length is not None and size < self.min_length:
            return self._error(ErrorCode.ARRAY_TOO_SMALL,
                f"Array must have at least {self.min_length} elements", context, received=size)
        if self.max_length is not None and size > self.max_length:
            return self._error(ErrorCode.ARRAY_TOO_LARGE,
                f"Array must have at most {self.max_length} elements", context, received=size)
        if self.exact_length is not None and size != self.exact_length:
            return self._error(ErrorCode.ARRAY_WRONG_LENGTH,
                f"Array must have exactly {self.exact_length} elements", context, received=size)

        if self.element is None:
            return ok(list(value))

        errors: list[ValidationError] = []
        output: list[Any] = []
        for index, item in enumerate(value):
            result = self.element._parse(item, context.child(index, item))
            if isinstance(result, Failure):
                errors.extend(result.errors)
            else:
                output.append(result.data)

        if errors:
            return fail(*errors)
        return ok(output)

    def min(self, length: int) -> Self:
        return self.clone(min_length=length)

    def max(self, length: int) -> Self:
        return self.clone(max_length=length)

    def length(self, length: int) -> Self:
        return self.clone(exact_length=length)

    def nonempty(self) -> Self:
        return self.min(1)

    def describe(self) -> str:
        return f"array<{self.element.describe()}>" if self.element is not None else "array"


@dataclass(frozen=True, slots=True, eq=False, repr=False, kw_only=True)
class UnionSchema(Schema[Any]):
    """First-match union: members are tried in declaration order."""
    members: tuple[Schema[Any], ...] = field(default=(), kw_only=False)

    type_name: ClassVar[str] = "union"

    def __post_init__(self):
        object.__setattr__(self, "members", tuple(self.members))

    def _check(self, value: Any, context: ValidationContext) -> ValidationResult[Any]:
        suppressed: list[ValidationError] = []
        for member in self.members:
            result = member._parse(value, context)
            if isinstance(result, Failure):
                suppressed.extend(result.errors)
            elif result.data is not MISSING:
                return ok(result.data)

        validation_logger().debug("union_mismatch", path=list(context.path), members=len(self.members),
            suppressed_errors=len(suppressed))
        details = tuple(suppressed) if get_settings().union_debug_errors else ()
        return fail(ValidationError(code=ErrorCode.UNION_MISMATCH,
            message="Value does not match any of the union types", path=context.path,
            received=value, details=details))

    def describe(self) -> str:
        return " | ".join(member.describe() for member in self.members) or "never"


def _strict_equals(left: Any, right: Any) -> bool:
    """Equality without cross-kind coercion (``1 != True``, ``1 != "1"``)."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    if isinstance(left, str) or isinstance(right, str):
        return isinstance(left, str) and isinstance(right, str) and left == right
    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right
    return False


@dataclass(frozen=True, slots=True, eq=False, repr=False, kw_only=True)
class LiteralSchema(Schema[Any]):
    """Matches exactly one string, number or boolean."""
    value: str | int | float | bool = field(kw_only=False)

    type_name: ClassVar[str] = "literal"

    def _check(self, value: Any, context: ValidationContext) -> ValidationResult[Any]:
        if not _strict_equals(value, self.value):
            expected = json.dumps(self.value)
            return self._error(ErrorCode.LITERAL_MISMATCH, f"Expected literal value {expected}", context,
                received=value, expected=expected)
        return ok(value)

    def describe(self) -> str:
        return json.dumps(self.value)
