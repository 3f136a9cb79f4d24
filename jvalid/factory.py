"""Schema builders.

Imported as ``jv``:

    from jvalid import jv

    User = jv.object({
        "name": jv.string().min(2).max(50),
        "age": jv.number().int().min(0).max(120),
        "email": jv.email().opt(),
    })
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, TypeVar

from .complex import ArraySchema, LiteralSchema, ObjectSchema, UnionSchema
from .custom import CustomSchema
from .primitives import AnySchema, BooleanSchema, NumberSchema, StringSchema
from .schema import Schema

S = TypeVar("S", bound=Schema)

__all__ = [
    "string", "number", "boolean", "any", "object", "array", "union", "literal", "enum",
    "custom", "optional", "nullable", "email", "url", "uuid", "date", "datetime",
    "integer", "positive", "negative", "non_empty_array",
]


# Primitive types
def string() -> StringSchema: return StringSchema()


def number() -> NumberSchema: return NumberSchema()


def boolean() -> BooleanSchema: return BooleanSchema()


def any() -> AnySchema: return AnySchema()


# Complex types
def object(shape: Mapping[str, Schema[Any]] | None = None) -> ObjectSchema:
    return ObjectSchema(shape or {})


def array(element: Schema[Any] | None = None) -> ArraySchema:
    return ArraySchema(element)


def union(*schemas: Schema[Any]) -> UnionSchema:
    return UnionSchema(schemas)


def literal(value: str | int | float | bool) -> LiteralSchema:
    return LiteralSchema(value)


def enum(values: Iterable[str | int | float | bool]) -> UnionSchema:
    """Union of literals, one per allowed value."""
    return UnionSchema(tuple(LiteralSchema(value) for value in values))


def custom(check: Callable[[Any], Any], name: str = "custom") -> CustomSchema:
    return CustomSchema(check, name=name)


# Utility wrappers
def optional(schema: S) -> S: return schema.opt()


def nullable(schema: S) -> S: return schema.null()


# String presets
def email() -> StringSchema: return StringSchema().email()


def url() -> StringSchema: return StringSchema().url()


def uuid() -> StringSchema: return StringSchema().uuid()


def date() -> StringSchema: return StringSchema().date()


def datetime() -> StringSchema: return StringSchema().datetime()


# Number presets
def integer() -> NumberSchema: return NumberSchema().int()


def positive() -> NumberSchema: return NumberSchema().positive()


def negative() -> NumberSchema: return NumberSchema().negative()


# Array presets
def non_empty_array(element: Schema[Any] | None = None) -> ArraySchema:
    return ArraySchema(element).nonempty()
