"""Tests for the jv builder surface."""
import pytest

from jvalid import (
    AnySchema,
    ArraySchema,
    BooleanSchema,
    CustomSchema,
    LiteralSchema,
    NumberSchema,
    ObjectSchema,
    StringSchema,
    Success,
    UnionSchema,
    jv,
)


@pytest.mark.parametrize("builder,schema_type", [
    (jv.string, StringSchema),
    (jv.number, NumberSchema),
    (jv.boolean, BooleanSchema),
    (jv.any, AnySchema),
    (jv.object, ObjectSchema),
    (jv.array, ArraySchema),
    (jv.union, UnionSchema),
    (jv.email, StringSchema),
    (jv.url, StringSchema),
    (jv.uuid, StringSchema),
    (jv.date, StringSchema),
    (jv.datetime, StringSchema),
    (jv.integer, NumberSchema),
    (jv.positive, NumberSchema),
    (jv.negative, NumberSchema),
    (jv.non_empty_array, ArraySchema),
])
def test_builders_return_fresh_schemas(builder, schema_type):
    first, second = builder(), builder()
    assert isinstance(first, schema_type)
    assert first is not second


def test_presets_configure_schemas():
    assert jv.email().format == "email"
    assert jv.url().format == "url"
    assert jv.uuid().format == "uuid"
    assert jv.date().format == "date"
    assert jv.datetime().format == "datetime"
    assert jv.integer().integer
    assert jv.positive().positive_only
    assert jv.negative().negative_only
    assert jv.non_empty_array(jv.string()).min_length == 1


def test_literal_and_enum():
    assert isinstance(jv.literal(3), LiteralSchema)
    schema = jv.enum(["USD", "EUR", "GBP"])
    assert [m.value for m in schema.members] == ["USD", "EUR", "GBP"]


def test_custom():
    schema = jv.custom(lambda v: True, name="always")
    assert isinstance(schema, CustomSchema)
    assert schema.describe() == "always"


def test_optional_and_nullable_wrappers():
    base = jv.string()
    assert jv.optional(base).optional and not base.optional
    assert jv.nullable(base).nullable and not base.nullable
    assert jv.optional(base).parse().success


def test_object_without_shape():
    assert jv.object().parse({"x": 1}) == Success({})
