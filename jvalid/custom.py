"""Custom Schemas

A schema whose structural check is a user callable, for rules that are
easier to state as code than as a schema tree.

The callable receives the value and may return:
- ``True``: the value is valid and passes through unchanged
- a mapping with ``isValid`` false: its ``errors`` (mappings) are reported
- anything else: ``custom_validation_failed``

Awaitables are not awaited; they are reported as
``async_validation_not_supported``. Exceptions become
``custom_expression_error``.

Usage:
    even = jv.custom(lambda n: isinstance(n, int) and n % 2 == 0, name="even")
"""
from __future__ import annotations

import inspect
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar

from .errors import ErrorCode, ValidationError
from .result import ValidationContext, ValidationResult, fail, ok
from .schema import Schema, discard_awaitable


@dataclass(frozen=True, slots=True, eq=False, repr=False, kw_only=True)
class CustomSchema(Schema[Any]):
    check: Callable[[Any], Any] = field(kw_only=False)
    name: str = "custom"

    type_name: ClassVar[str] = "custom"

    def _check(self, value: Any, context: ValidationContext) -> ValidationResult[Any]:
        try:
            outcome = self.check(value)
        except Exception as e:
            return self._error(ErrorCode.CUSTOM_EXPRESSION_ERROR, str(e) or type(e).__name__, context,
                received=value)

        if inspect.isawaitable(outcome):
            discard_awaitable(outcome)
            return self._error(ErrorCode.ASYNC_VALIDATION_NOT_SUPPORTED,
                "Asynchronous validation is not supported", context, received=value)

        if outcome is True:
            return ok(value)

        if isinstance(outcome, Mapping) and outcome.get("isValid") is False:
            reported = [ValidationError.from_dict(e, default_path=context.path)
                for e in outcome.get("errors") or () if isinstance(e, Mapping)]
            if reported:
                return fail(*reported)

        return self._error(ErrorCode.CUSTOM_VALIDATION_FAILED, f"Validation '{self.name}' returned false",
            context, received=value)

    def describe(self) -> str:
        return self.name
