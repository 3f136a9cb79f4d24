"""Evaluator Adapter

The engine-side half of wiring schemas into an expression evaluator. Nothing
here parses or evaluates expressions; an integration registers the callables
from ``ValidatorRegistry.as_functions()`` with its evaluator and passes
dot-separated paths for sub-document validation.

Callback payload:
{
    "isValid": false,
    "value": <input on failure, parsed data on success>,
    "errors": [ValidationError.to_dict(), ...]   # None when valid
}
"""
from __future__ import annotations

from typing import Any, Callable, Iterator, Mapping

from . import formats
from .errors import ErrorCode, ValidationError
from .logging import adapter_logger
from .result import Failure, ValidationResult, fail
from .schema import Schema

ValidationCallback = Callable[..., dict[str, Any]]


def split_path(path: str, *, keep_empty: bool = False) -> tuple[str, ...]:
    """``"a.b.0"`` -> ``("a", "b", "0")``.

    Empty segments (``"a..b"``) are dropped unless ``keep_empty`` is set. An
    empty path is always the root.
    """
    if not path:
        return ()
    return tuple(segment for segment in path.split(".") if keep_empty or segment)


def validation_callback(schema: Schema[Any]) -> ValidationCallback:
    """Wrap ``schema`` as an evaluator-friendly function ``fn(value, path="")``.

    The path prefix is split verbatim, empty segments included; only
    ``createError`` normalises them away.
    """

    def callback(value: Any, path: str = "") -> dict[str, Any]:
        result = schema.parse(value, split_path(path, keep_empty=True))
        if isinstance(result, Failure):
            return {"isValid": False, "errors": [e.to_dict() for e in result.errors], "value": value}
        return {"isValid": True, "value": result.data, "errors": None}

    return callback


def create_error(code: str, message: str, path: str = "", received: Any = None) -> dict[str, Any]:
    """Error mapping in the same shape as ``ValidationError.to_dict()``."""
    return {"code": code, "message": message, "path": list(split_path(path)), "received": received}


_UTILITY_FUNCTIONS: dict[str, Callable[..., Any]] = {
    # String validation
    "isEmail": formats.is_email,
    "isURL": formats.is_url,
    "isUUID": formats.is_uuid,
    "isDate": formats.is_date,
    # Number validation
    "isPositive": formats.is_positive,
    "isNegative": formats.is_negative,
    "isInteger": formats.is_integer,
    "inRange": formats.in_range,
    # Array validation
    "hasLength": formats.has_length,
    "minLength": formats.min_length,
    "maxLength": formats.max_length,
    # Object validation
    "hasKeys": formats.has_keys,
    "hasNoExtraKeys": formats.has_no_extra_keys,
    # Error helpers
    "createError": create_error,
}


class ValidatorRegistry:
    """Named validation functions for registration with an evaluator.

    Preloaded with the utility predicates; schemas are added by name and
    exposed as callbacks.
    """

    def __init__(self, schemas: Mapping[str, Schema[Any]] | None = None, *, include_utilities: bool = True):
        self._functions: dict[str, Callable[..., Any]] = dict(_UTILITY_FUNCTIONS) if include_utilities else {}
        if schemas: self.register_schemas(schemas)

    def register(self, name: str, schema: Schema[Any]) -> None:
        self._functions[name] = validation_callback(schema)

    def register_schemas(self, schemas: Mapping[str, Schema[Any]]) -> None:
        for name, schema in schemas.items(): self.register(name, schema)

    def get(self, name: str) -> Callable[..., Any]:
        try:
            return self._functions[name]
        except KeyError:
            raise KeyError(f"No validator registered under '{name}'") from None

    def names(self) -> list[str]:
        return sorted(self._functions)

    def as_functions(self) -> dict[str, Callable[..., Any]]:
        return dict(self._functions)

    def __contains__(self, name: object) -> bool: return name in self._functions

    def __iter__(self) -> Iterator[str]: return iter(self._functions)

    def __len__(self) -> int: return len(self._functions)


def validate_transform(
    transform: Callable[[Any], Any],
    data: Any,
    schema: Schema[Any],
) -> ValidationResult[Any]:
    """Run ``transform`` on ``data`` and validate its output against ``schema``.

    A failing transformation is reported as a single ``evaluation_error``
    rather than raised.
    """
    try:
        output = transform(data)
    except Exception as e:
        adapter_logger().debug("transform_failed", error=str(e), error_type=type(e).__name__)
        return fail(ValidationError(code=ErrorCode.EVALUATION_ERROR,
            message=str(e) or "Unknown evaluation error", path=(), received=data))
    return schema.parse(output)
