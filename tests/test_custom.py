"""Tests for callable-backed schemas."""
from jvalid import ErrorCode, Success, jv


def codes(result):
    return [e.code for e in result.errors]


def test_true_passes_value_through():
    assert jv.custom(lambda v: True).parse({"a": 1}) == Success({"a": 1})


def test_false_is_custom_validation_failed():
    error = jv.custom(lambda v: False, name="even").parse(3, ["n"]).errors[0]
    assert error.code == ErrorCode.CUSTOM_VALIDATION_FAILED
    assert error.path == ("n",)
    assert "even" in error.message


def test_truthy_non_true_result_fails():
    assert codes(jv.custom(lambda v: 1).parse(3)) == [ErrorCode.CUSTOM_VALIDATION_FAILED]


def test_reported_errors_are_returned():
    def check(value):
        return {"isValid": False, "errors": [
            {"code": "string_too_long", "message": "too long", "path": ["x"]},
            {"message": "no code"},
        ]}

    result = jv.custom(check).parse("abc", ["root"])
    assert [(e.code, e.path) for e in result.errors] == [
        (ErrorCode.STRING_TOO_LONG, ("x",)),
        (ErrorCode.CUSTOM_VALIDATION_FAILED, ("root",)),
    ]


def test_empty_reported_errors_fall_back():
    result = jv.custom(lambda v: {"isValid": False, "errors": []}).parse(1)
    assert codes(result) == [ErrorCode.CUSTOM_VALIDATION_FAILED]


def test_exception_becomes_expression_error():
    def check(value):
        raise ValueError("bad expression")

    error = jv.custom(check).parse(1).errors[0]
    assert error.code == ErrorCode.CUSTOM_EXPRESSION_ERROR
    assert error.message == "bad expression"


def test_awaitable_is_not_supported():
    async def check(value):
        return True

    assert codes(jv.custom(check).parse(1)) == [ErrorCode.ASYNC_VALIDATION_NOT_SUPPORTED]


def test_custom_inside_object_and_with_presence_rules():
    schema = jv.object({"even": jv.custom(lambda n: n % 2 == 0).opt()})
    assert schema.parse({}) == Success({})
    assert schema.parse({"even": 2}) == Success({"even": 2})
    assert schema.parse({"even": 3}).errors[0].path == ("even",)
