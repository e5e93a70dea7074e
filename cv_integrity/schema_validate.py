"""
Structural validation of a CV document against the schema tree.

Walks schema and data together, depth-first, collecting every violation.
A node whose own type is wrong gets a single `type` error and nothing
below it is checked.
"""

from __future__ import annotations
import math
from typing import Any, List, Mapping

from .records import MIN_ITEMS, REQUIRED, TYPE, SchemaError, ValidationResult
from .schema_loader import SchemaLoader, get_default_loader
from .schema_node import ArraySchema, ObjectSchema, SchemaNode, parse_schema


def json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def is_type(value: Any, kind: str | None) -> bool:
    if kind == "array":
        return isinstance(value, list)
    if kind == "object":
        return isinstance(value, dict)
    if kind == "string":
        return isinstance(value, str)
    if kind == "boolean":
        return isinstance(value, bool)
    if kind in ("number", "integer"):
        if isinstance(value, bool):
            return False
        if isinstance(value, int):
            return True
        if isinstance(value, float):
            return value.is_integer() if kind == "integer" else math.isfinite(value)
        return False
    return True


def _validate_node(schema: SchemaNode, data: Any, path: str, errors: List[SchemaError]) -> None:
    if not is_type(data, schema.kind):
        errors.append(SchemaError(path, TYPE, expected=schema.kind, actual=json_type(data)))
        return

    if isinstance(schema, ObjectSchema):
        for key in schema.required:
            if key not in data:
                errors.append(SchemaError(f"{path}.{key}", REQUIRED))
        for key, child in schema.properties.items():
            if key in data:
                _validate_node(child, data[key], f"{path}.{key}", errors)
        if schema.additional is not None:
            for key, value in data.items():
                if key not in schema.properties:
                    _validate_node(schema.additional, value, f"{path}.{key}", errors)

    elif isinstance(schema, ArraySchema):
        if schema.min_items is not None and len(data) < schema.min_items:
            errors.append(SchemaError(path, MIN_ITEMS, expected=str(schema.min_items), actual=str(len(data))))
        if schema.items is not None:
            for index, item in enumerate(data):
                _validate_node(schema.items, item, f"{path}[{index}]", errors)


def validate(schema: SchemaNode | Mapping, data: Any) -> ValidationResult:
    """Validate `data` against a schema node (or a raw schema mapping)."""
    if isinstance(schema, Mapping):
        schema = parse_schema(schema)
    errors: List[SchemaError] = []
    _validate_node(schema, data, "$", errors)
    return ValidationResult(errors)


async def validate_cv_schema(document: Any, loader: SchemaLoader | None = None) -> ValidationResult:
    """
    Validate a CV document against cv.schema.json.

    Raises SchemaLoadError if the schema itself cannot be loaded; problems
    in the document are only ever reported in the result.
    """
    schema = await (loader or get_default_loader()).load()
    return validate(schema, document)
