"""Schema Base

Every schema is an immutable, frozen dataclass. Fluent modifiers never touch
the receiver; they return a copy built with ``dataclasses.replace``. All
container configuration is stored as tuples or read-only mappings, so a copy
never aliases a mutable sequence of its source.

Validation order for every schema:
1. Presence gate: ``MISSING`` -> default (if optional) or ``required``;
   ``None`` -> ``None`` (if nullable) or ``not_nullable``.
2. Structural check owned by the subtype (``_check``).
3. Refinement chain, in attachment order, stopping at the first failure.
"""
from __future__ import annotations

import copy
import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Callable, ClassVar, Generic, Iterable, Self, TypeVar

from .errors import MISSING, ErrorCode, PathSegment, ValidationError
from .logging import validation_logger
from .result import Failure, ValidationContext, ValidationResult, fail, ok

T = TypeVar("T")

Predicate = Callable[[Any], Any]
MessageSource = str | Callable[[Any], str]


def discard_awaitable(pending: Any) -> None:
    """Close an un-awaited coroutine so it is never scheduled."""
    if (close := getattr(pending, "close", None)) is not None: close()
    elif (cancel := getattr(pending, "cancel", None)) is not None: cancel()


@dataclass(frozen=True, slots=True)
class Refinement:
    """User predicate plus the message reported when it rejects a value."""
    predicate: Predicate
    message: MessageSource = "Invalid value"

    def check(self, value: Any, context: ValidationContext) -> ValidationError | None:
        """Return an error if the predicate rejects ``value``, else None."""
        try:
            outcome = self.predicate(value)
            if inspect.isawaitable(outcome):
                discard_awaitable(outcome)
                return ValidationError(code=ErrorCode.ASYNC_VALIDATION_NOT_SUPPORTED,
                    message="Asynchronous validation is not supported", path=context.path, received=value)
            if outcome: return None
            message = self.message(value) if callable(self.message) else self.message
        except Exception as e:
            return ValidationError(code=ErrorCode.CUSTOM_VALIDATION_FAILED, message=f"Validation error: {e}",
                path=context.path, received=value)
        return ValidationError(code=ErrorCode.CUSTOM_VALIDATION_FAILED, message=message,
            path=context.path, received=value)


@dataclass(frozen=True, slots=True, eq=False, repr=False, kw_only=True)
class Schema(ABC, Generic[T]):
    """Base class for all schemas.

    Subclasses implement ``_check`` (the structural test for their value kind)
    and may add builder methods; they inherit presence handling, refinements
    and the clone discipline.
    """
    optional: bool = False
    nullable: bool = False
    default_value: Any = MISSING
    refinements: tuple[Refinement, ...] = ()

    type_name: ClassVar[str] = "unknown"

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def parse(self, value: Any = MISSING, path: Iterable[PathSegment] = ()) -> ValidationResult[T]:
        """Validate ``value`` and return a Success or Failure. Never raises."""
        return self._parse(value, ValidationContext.start(value, path))

    def safe_parse(self, value: Any = MISSING, path: Iterable[PathSegment] = ()) -> T:
        """Validate ``value`` and return the data, raising SchemaValidationError on failure."""
        result = self.parse(value, path)
        if isinstance(result, Failure):
            validation_logger().debug("safe_parse_failed", schema=self.describe(), error_count=len(result.errors),
                codes=[e.code.value for e in result.errors])
        return result.unwrap()

    def _parse(self, value: Any, context: ValidationContext) -> ValidationResult[T]:
        """Node-level parse used when a parent schema descends into this one."""
        if (gated := self._check_presence(value, context)) is not None:
            return gated
        result = self._check(value, context)
        if isinstance(result, Failure):
            return result
        return self._run_refinements(result.data, context)

    @abstractmethod
    def _check(self, value: Any, context: ValidationContext) -> ValidationResult[T]:
        """Structural check for a present, non-null value."""

    # ------------------------------------------------------------------
    # Shared steps
    # ------------------------------------------------------------------

    def _check_presence(self, value: Any, context: ValidationContext) -> ValidationResult[T] | None:
        if value is MISSING:
            if self.optional: return ok(copy.deepcopy(self.default_value))
            return fail(ValidationError(code=ErrorCode.REQUIRED, message="Required field is missing",
                path=context.path, received=MISSING))
        if value is None:
            if self.nullable: return ok(None)
            return fail(ValidationError(code=ErrorCode.NOT_NULLABLE, message="Field cannot be null",
                path=context.path, received=None))
        return None

    def _run_refinements(self, value: T, context: ValidationContext) -> ValidationResult[T]:
        for refinement in self.refinements:
            if (error := refinement.check(value, context)) is not None:
                return fail(error)
        return ok(value)

    def _error(self, code: ErrorCode, message: str, context: ValidationContext, *,
               received: Any = MISSING, expected: str | None = None) -> Failure:
        return fail(ValidationError(code=code, message=message, path=context.path,
            received=received, expected=expected))

    # ------------------------------------------------------------------
    # Modifiers
    # ------------------------------------------------------------------

    def clone(self, **changes: Any) -> Self:
        """Copy of this schema with ``changes`` applied."""
        return replace(self, **changes)

    def opt(self) -> Self:
        return self.clone(optional=True)

    def null(self) -> Self:
        return self.clone(nullable=True)

    def default(self, value: Any) -> Self:
        """Value returned for a missing input once the schema is optional.

        Each parse hands out its own deep copy, so callers may mutate it.
        """
        return self.clone(default_value=value)

    def refine(self, predicate: Predicate, message: MessageSource = "Invalid value") -> Self:
        """Append a predicate to the refinement chain.

        ``message`` may be a string or a function of the rejected value.
        """
        return self.clone(refinements=(*self.refinements, Refinement(predicate, message)))

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def has_default(self) -> bool: return self.default_value is not MISSING

    def describe(self) -> str:
        """Short type name, e.g. ``string`` or ``array<number>``."""
        return self.type_name

    def __repr__(self) -> str:
        flags = [name for name, on in (("optional", self.optional), ("nullable", self.nullable)) if on]
        return f"{type(self).__name__}({self.describe()}{', ' + ', '.join(flags) if flags else ''})"
