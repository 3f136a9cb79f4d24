"""Composable Runtime Schema Validation

Build a schema tree once, then validate untyped values (parsed JSON, the
output of a data transformation) against it as often as needed. Failures are
returned as structured, path-addressed error lists rather than raised.

Key Features:
- Immutable, chainable schemas (every modifier returns a new schema)
- Optional / nullable / default handling shared by every schema type
- Objects and arrays accumulate child errors; primitive constraints,
  array lengths and refinements stop at the first failure
- First-match unions, literals and enums
- Custom callable schemas and refinement predicates
- JSON Schema and TypeScript generation

Usage:
    from jvalid import jv, Success, Failure

    User = jv.object({
        "name": jv.string().min(2).max(50),
        "age": jv.number().int().min(0).max(120),
    })

    match User.parse(payload):
        case Success(data):
            ...
        case Failure(errors):
            ...

    user = User.safe_parse(payload)  # raises SchemaValidationError
"""

from . import factory as jv

# Errors
from .errors import (
    MISSING,
    ErrorCode,
    ValidationError,
    SchemaValidationError,
    format_path,
)

# Results
from .result import (
    ValidationContext,
    ValidationResult,
    Success,
    Failure,
    ok,
    fail,
)

# Schemas
from .schema import Schema, Refinement
from .primitives import StringSchema, NumberSchema, BooleanSchema, AnySchema
from .complex import ObjectSchema, ArraySchema, UnionSchema, LiteralSchema
from .custom import CustomSchema

# Evaluator adapter
from .adapter import (
    ValidatorRegistry,
    validation_callback,
    validate_transform,
    split_path,
    create_error,
)

# Generators
from .generators import (
    SchemaGenerator,
    JSONSchemaGenerator,
    TypeScriptGenerator,
    generate_all,
)

__all__ = [
    "jv",
    # Errors
    "MISSING",
    "ErrorCode",
    "ValidationError",
    "SchemaValidationError",
    "format_path",
    # Results
    "ValidationContext",
    "ValidationResult",
    "Success",
    "Failure",
    "ok",
    "fail",
    # Schemas
    "Schema",
    "Refinement",
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "AnySchema",
    "ObjectSchema",
    "ArraySchema",
    "UnionSchema",
    "LiteralSchema",
    "CustomSchema",
    # Adapter
    "ValidatorRegistry",
    "validation_callback",
    "validate_transform",
    "split_path",
    "create_error",
    # Generators
    "SchemaGenerator",
    "JSONSchemaGenerator",
    "TypeScriptGenerator",
    "generate_all",
]
