"""Schema Generators

Generate JSON Schema and TypeScript type definitions from schema trees, so a
schema written once can document and type the data it validates.

Features:
- JSON Schema draft 2020-12 with formats, ranges and required keys
- TypeScript type aliases with optional keys and nullable unions
"""
from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, Mapping

from .complex import ArraySchema, LiteralSchema, ObjectSchema, UnionSchema
from .custom import CustomSchema
from .primitives import AnySchema, BooleanSchema, NumberSchema, StringSchema
from .schema import Schema


class SchemaGenerator(ABC):
    """Base class for schema generators."""

    @abstractmethod
    def generate(self, schema: Schema[Any], name: str = "Schema") -> str:
        """Generate schema representation."""

    def generate_all(self, schemas: Mapping[str, Schema[Any]], separator: str = "\n\n") -> str:
        return separator.join(self.generate(schema, name) for name, schema in schemas.items())


class JSONSchemaGenerator(SchemaGenerator):
    """Generate JSON Schema (draft 2020-12)."""

    FORMAT_MAP: dict[str, str] = {
        "email": "email",
        "url": "uri",
        "uuid": "uuid",
        "date": "date",
        "datetime": "date-time",
    }

    def __init__(self, indent: int | None = 2): self.indent = indent

    def generate(self, schema: Schema[Any], name: str = "Schema") -> str:
        """Generate JSON Schema document."""
        return json.dumps(self.to_dict(schema, name), indent=self.indent)

    def to_dict(self, schema: Schema[Any], name: str | None = None) -> dict[str, Any]:
        document = {"$schema": "https://json-schema.org/draft/2020-12/schema"}
        if name: document["title"] = name
        document.update(self._convert(schema))
        return document

    def _convert(self, schema: Schema[Any]) -> dict[str, Any]:
        node = self._structure(schema)

        if schema.nullable and node:
            if isinstance(node.get("type"), str):
                node["type"] = [node["type"], "null"]
            else:
                node = {"anyOf": [node, {"type": "null"}]}

        if schema.has_default: node["default"] = schema.default_value
        return node

    def _structure(self, schema: Schema[Any]) -> dict[str, Any]:
        if isinstance(schema, StringSchema):
            node: dict[str, Any] = {"type": "string"}
            if schema.min_length is not None: node["minLength"] = schema.min_length
            if schema.max_length is not None: node["maxLength"] = schema.max_length
            if schema.pattern is not None: node["pattern"] = schema.pattern.pattern
            if schema.format: node["format"] = self.FORMAT_MAP[schema.format]
            return node

        if isinstance(schema, NumberSchema):
            node = {"type": "integer" if schema.integer else "number"}
            if schema.min_value is not None: node["minimum"] = schema.min_value
            if schema.max_value is not None: node["maximum"] = schema.max_value
            if schema.positive_only: node["exclusiveMinimum"] = 0
            if schema.negative_only: node["exclusiveMaximum"] = 0
            return node

        if isinstance(schema, BooleanSchema):
            return {"type": "boolean"}

        if isinstance(schema, ObjectSchema):
            node = {
                "type": "object",
                "properties": {key: self._convert(child) for key, child in schema.shape.items()},
            }
            if required := [key for key, child in schema.shape.items() if not child.optional]:
                node["required"] = required
            if schema.reject_unknown:
                node["additionalProperties"] = False
            return node

        if isinstance(schema, ArraySchema):
            node = {"type": "array"}
            if schema.element is not None: node["items"] = self._convert(schema.element)
            if schema.min_length is not None: node["minItems"] = schema.min_length
            if schema.max_length is not None: node["maxItems"] = schema.max_length
            if schema.exact_length is not None:
                node["minItems"] = node["maxItems"] = schema.exact_length
            return node

        if isinstance(schema, UnionSchema):
            return {"anyOf": [self._convert(member) for member in schema.members]}

        if isinstance(schema, LiteralSchema):
            return {"const": schema.value}

        if isinstance(schema, CustomSchema):
            return {"description": f"custom: {schema.name}"}

        if isinstance(schema, AnySchema):
            return {}

        raise TypeError(f"Unsupported schema type: {type(schema).__name__}")


class TypeScriptGenerator(SchemaGenerator):
    """Generate TypeScript type aliases.

    Features:
    - Optional object keys rendered with ``?``
    - Nullable schemas rendered as ``T | null``
    - Literal and union types
    """

    def __init__(self, export_style: str = "export", indent: str = "  "):
        self.export_style, self.indent = export_style, indent

    def generate(self, schema: Schema[Any], name: str = "Schema") -> str:
        """Generate TypeScript type alias."""
        ts_type = self._to_ts(schema, depth=0)
        if schema.optional: ts_type = f"{ts_type} | undefined"
        prefix = f"{self.export_style} " if self.export_style else ""
        return f"{prefix}type {name} = {ts_type};"

    def _to_ts(self, schema: Schema[Any], depth: int) -> str:
        ts_type = self._structure(schema, depth)
        if schema.nullable and ts_type != "unknown": ts_type = f"{ts_type} | null"
        return ts_type

    def _structure(self, schema: Schema[Any], depth: int) -> str:
        if isinstance(schema, StringSchema): return "string"
        if isinstance(schema, NumberSchema): return "number"
        if isinstance(schema, BooleanSchema): return "boolean"
        if isinstance(schema, LiteralSchema): return json.dumps(schema.value)
        if isinstance(schema, UnionSchema):
            return " | ".join(self._to_ts(member, depth) for member in schema.members) or "never"
        if isinstance(schema, ArraySchema):
            if schema.element is None: return "unknown[]"
            inner = self._to_ts(schema.element, depth)
            return f"({inner})[]" if " | " in inner else f"{inner}[]"
        if isinstance(schema, ObjectSchema): return self._object(schema, depth)
        return "unknown"

    def _object(self, schema: ObjectSchema, depth: int) -> str:
        if not schema.shape and not schema.keep_unknown: return "Record<string, never>"
        pad, inner_pad = self.indent * depth, self.indent * (depth + 1)
        lines = ["{"]
        for key, child in schema.shape.items():
            optional = "?" if child.optional else ""
            lines.append(f"{inner_pad}{self._key(key)}{optional}: {self._to_ts(child, depth + 1)};")
        if schema.keep_unknown and not schema.reject_unknown:
            lines.append(f"{inner_pad}[key: string]: unknown;")
        lines.append(f"{pad}}}")
        return "\n".join(lines)

    @staticmethod
    def _key(key: str) -> str:
        return key if key.isidentifier() else json.dumps(key)


def generate_all(schema: Schema[Any], name: str = "Schema") -> dict[str, str]:
    """Generate all schema representations.

    Returns dict with keys: json_schema, typescript
    """
    generators: dict[str, SchemaGenerator] = {
        "json_schema": JSONSchemaGenerator(),
        "typescript": TypeScriptGenerator(),
    }
    return {kind: generator.generate(schema, name) for kind, generator in generators.items()}
