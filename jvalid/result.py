"""Validation Results and Context

``ValidationResult`` is a tagged union of ``Success`` and ``Failure``. Exactly
one variant exists per outcome; consumers match on the variant rather than
probing for ``data`` or ``errors``.

Usage:
    match schema.parse(payload):
        case Success(data):
            save(data)
        case Failure(errors):
            report([e.to_dict() for e in errors])
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, NoReturn, TypeVar, Union, final

from .errors import Path, PathSegment, SchemaValidationError, ValidationError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """Per-call bookkeeping threaded through recursive validation.

    ``root`` is the top-level input for the whole call. ``data`` is the value
    at ``path``. Descending never mutates a context; each child gets a new
    one with an extended path.
    """
    path: Path
    data: Any
    root: Any

    @classmethod
    def start(cls, value: Any, path: Iterable[PathSegment] = ()) -> ValidationContext:
        return cls(path=tuple(path), data=value, root=value)

    def child(self, segment: PathSegment, data: Any) -> ValidationContext:
        return ValidationContext(path=(*self.path, segment), data=data, root=self.root)


@final
@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful validation carrying the (possibly coerced) data."""
    data: T

    @property
    def success(self) -> bool: return True

    @property
    def errors(self) -> tuple[ValidationError, ...]: return ()

    def is_ok(self) -> bool: return True

    def is_err(self) -> bool: return False

    def unwrap(self) -> T: return self.data

    def unwrap_or(self, default: T) -> T: return self.data

    def map(self, f: Callable[[T], U]) -> Success[U]: return Success(f(self.data))

    def to_dict(self) -> dict[str, Any]: return {"success": True, "data": self.data}


@final
@dataclass(frozen=True, slots=True)
class Failure:
    """Failed validation carrying a non-empty, ordered error list."""
    errors: tuple[ValidationError, ...]

    def __post_init__(self):
        if not self.errors: raise ValueError("Failure requires at least one error")

    @property
    def success(self) -> bool: return False

    def is_ok(self) -> bool: return False

    def is_err(self) -> bool: return True

    def unwrap(self) -> NoReturn: raise SchemaValidationError(self.errors)

    def unwrap_or(self, default: T) -> T: return default

    def map(self, f: Callable[[Any], Any]) -> Failure: return self

    def to_dict(self) -> dict[str, Any]: return {"success": False, "errors": [e.to_dict() for e in self.errors]}


ValidationResult = Union[Success[T], Failure]


def ok(data: T) -> Success[T]:
    """Construct Success variant."""
    return Success(data)


def fail(*errors: ValidationError) -> Failure:
    """Construct Failure variant."""
    return Failure(tuple(errors))
