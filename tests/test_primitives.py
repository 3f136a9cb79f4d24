"""Tests for string, number, boolean and any schemas."""
import math
import re

import pytest

from jvalid import ErrorCode, Success, jv


def codes(result):
    return [e.code for e in result.errors]


class TestStringSchema:
    def test_accepts_strings(self):
        assert jv.string().parse("hello") == Success("hello")

    @pytest.mark.parametrize("value", [1, 1.5, True, [], {}])
    def test_rejects_other_kinds(self, value):
        error = jv.string().parse(value).errors[0]
        assert error.code == ErrorCode.INVALID_TYPE
        assert error.expected == "string"
        assert error.received == value

    def test_length_bounds(self):
        schema = jv.string().min(3).max(5)
        assert codes(schema.parse("hi")) == [ErrorCode.STRING_TOO_SHORT]
        assert schema.parse("hi").errors[0].received == 2
        assert codes(schema.parse("toolong")) == [ErrorCode.STRING_TOO_LONG]
        assert schema.parse("abcd") == Success("abcd")

    def test_exact_length(self):
        schema = jv.string().length(2)
        assert schema.parse("ab") == Success("ab")
        assert codes(schema.parse("a")) == [ErrorCode.STRING_TOO_SHORT]
        assert codes(schema.parse("abc")) == [ErrorCode.STRING_TOO_LONG]

    def test_length_counts_code_points(self):
        schema = jv.string().max(1)
        assert schema.parse("\N{GRINNING FACE}") == Success("\N{GRINNING FACE}")
        assert schema.parse("e\u0301").errors[0].received == 2

    def test_regex_searches_anywhere(self):
        schema = jv.string().regex(r"[0-9]+")
        assert schema.parse("abc123") == Success("abc123")
        assert codes(schema.parse("abc")) == [ErrorCode.STRING_PATTERN_MISMATCH]

    def test_regex_accepts_compiled_pattern(self):
        schema = jv.string().regex(re.compile(r"^ab$", re.IGNORECASE))
        assert schema.parse("AB") == Success("AB")

    def test_first_failing_constraint_wins(self):
        result = jv.email().min(10).parse("a@b")
        assert codes(result) == [ErrorCode.STRING_TOO_SHORT]

    def test_email(self):
        assert jv.email().parse("a@b.com") == Success("a@b.com")
        assert codes(jv.email().parse("not-an-email")) == [ErrorCode.INVALID_EMAIL]
        assert codes(jv.email().parse("a b@c.com")) == [ErrorCode.INVALID_EMAIL]

    @pytest.mark.parametrize("value", ["https://example.com", "http://localhost:8080/x?y=1", "mailto:a@b.com",
                                       "ftp://files.example.org/pub"])
    def test_url_accepts(self, value):
        assert jv.url().parse(value) == Success(value)

    @pytest.mark.parametrize("value", ["example.com", "not a url", "http://", "http://host:99999", "",
                                       "http:example.com"])
    def test_url_rejects(self, value):
        assert codes(jv.url().parse(value)) == [ErrorCode.INVALID_URL]

    def test_uuid(self):
        assert jv.uuid().parse("123E4567-E89B-12D3-A456-426614174000").success
        assert codes(jv.uuid().parse("123e4567-e89b-62d3-a456-426614174000")) == [ErrorCode.INVALID_UUID]
        assert codes(jv.uuid().parse("123e4567-e89b-12d3-c456-426614174000")) == [ErrorCode.INVALID_UUID]
        assert codes(jv.uuid().parse("123e4567e89b12d3a456426614174000")) == [ErrorCode.INVALID_UUID]

    def test_date(self):
        assert jv.date().parse("2024-02-29") == Success("2024-02-29")
        assert codes(jv.date().parse("2023-02-29")) == [ErrorCode.INVALID_DATE]
        assert codes(jv.date().parse("2024-1-05")) == [ErrorCode.INVALID_DATE]
        assert codes(jv.date().parse("2024-01-15T10:00:00Z")) == [ErrorCode.INVALID_DATE]

    @pytest.mark.parametrize("value", ["2024-01-15T10:30:00Z", "2024-01-15T10:30:00.123+02:00", "2024-01-15",
                                       "Tue, 15 Nov 1994 08:12:31 GMT"])
    def test_datetime_accepts(self, value):
        assert jv.datetime().parse(value) == Success(value)

    def test_datetime_rejects(self):
        assert codes(jv.datetime().parse("yesterday")) == [ErrorCode.INVALID_DATETIME]

    def test_format_error_uses_context_path(self):
        error = jv.object({"contact": jv.email()}).parse({"contact": "nope"}).errors[0]
        assert error.path == ("contact",)
        assert error.expected == "email"


class TestNumberSchema:
    @pytest.mark.parametrize("value", [0, -3, 2.5, 10**20])
    def test_accepts_numbers(self, value):
        assert jv.number().parse(value) == Success(value)

    @pytest.mark.parametrize("value", ["1", True, False, float("nan"), [1]])
    def test_rejects_non_numbers(self, value):
        assert codes(jv.number().parse(value)) == [ErrorCode.INVALID_TYPE]

    def test_integer(self):
        assert jv.integer().parse(4) == Success(4)
        assert jv.integer().parse(4.0) == Success(4.0)
        assert codes(jv.integer().parse(4.5)) == [ErrorCode.NOT_INTEGER]
        assert codes(jv.integer().parse(math.inf)) == [ErrorCode.NOT_INTEGER]

    def test_range(self):
        schema = jv.number().min(0).max(120)
        assert codes(schema.parse(-1)) == [ErrorCode.NUMBER_TOO_SMALL]
        assert codes(schema.parse(121)) == [ErrorCode.NUMBER_TOO_LARGE]
        assert schema.parse(0) == Success(0)
        assert schema.parse(120) == Success(120)

    def test_sign(self):
        assert codes(jv.positive().parse(0)) == [ErrorCode.NOT_POSITIVE]
        assert codes(jv.negative().parse(0)) == [ErrorCode.NOT_NEGATIVE]
        assert jv.positive().parse(0.1).success
        assert jv.negative().parse(-0.1).success

    def test_check_order(self):
        assert codes(jv.number().int().min(10).parse(2.5)) == [ErrorCode.NOT_INTEGER]
        assert codes(jv.number().min(10).positive().parse(-1)) == [ErrorCode.NUMBER_TOO_SMALL]

    def test_contradictory_constraints_reject_everything(self):
        schema = jv.number().positive().max(-1)
        for value in (-5, 0, 5):
            assert not schema.parse(value).success


class TestBooleanAndAny:
    def test_boolean(self):
        assert jv.boolean().parse(True) == Success(True)
        assert codes(jv.boolean().parse(1)) == [ErrorCode.INVALID_TYPE]
        assert codes(jv.boolean().parse("true")) == [ErrorCode.INVALID_TYPE]

    def test_any_accepts_everything_present(self):
        for value in (0, "", [], {}, False):
            assert jv.any().parse(value) == Success(value)
        assert codes(jv.any().parse(None)) == [ErrorCode.NOT_NULLABLE]
