"""
Schema nodes: the parsed, immutable form of cv.schema.json.

Only a small subset of JSON Schema is understood: `type`, `required`,
`properties`, `items`, `minItems` and `additionalProperties`.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)

SCALAR_KINDS = ("string", "number", "integer", "boolean")


@dataclass(frozen=True)
class AnySchema:
    """Node without a recognised type: accepts anything, never descended into."""
    kind: Optional[str] = None


@dataclass(frozen=True)
class ScalarSchema:
    kind: str


@dataclass(frozen=True)
class ArraySchema:
    min_items: Optional[int] = None
    items: Optional["SchemaNode"] = None
    kind: str = field(default="array", init=False)


@dataclass(frozen=True)
class ObjectSchema:
    required: Tuple[str, ...] = ()
    properties: Mapping[str, "SchemaNode"] = field(default_factory=lambda: MappingProxyType({}))
    additional: Optional["SchemaNode"] = None
    kind: str = field(default="object", init=False)


SchemaNode = Union[AnySchema, ScalarSchema, ArraySchema, ObjectSchema]


def parse_schema(raw: Any) -> SchemaNode:
    """Turn a raw schema mapping into a tree of schema nodes."""
    if not isinstance(raw, Mapping):
        return AnySchema()

    kind = raw.get("type")
    if kind is None:
        return AnySchema()

    if kind == "object":
        props = raw.get("properties")
        properties = {}
        if isinstance(props, Mapping):
            properties = {str(k): parse_schema(v) for k, v in props.items()}
        required = raw.get("required")
        if not isinstance(required, (list, tuple)):
            required = ()
        extra = raw.get("additionalProperties")
        # additionalProperties only counts when it names a type
        additional = parse_schema(extra) if isinstance(extra, Mapping) and extra.get("type") else None
        return ObjectSchema(
            required=tuple(str(k) for k in required),
            properties=MappingProxyType(properties),
            additional=additional,
        )

    if kind == "array":
        min_items = raw.get("minItems")
        if isinstance(min_items, float) and min_items.is_integer():
            min_items = int(min_items)
        if isinstance(min_items, bool) or not isinstance(min_items, int):
            min_items = None
        items = raw.get("items")
        return ArraySchema(
            min_items=min_items,
            items=parse_schema(items) if isinstance(items, Mapping) and items else None,
        )

    if kind in SCALAR_KINDS:
        return ScalarSchema(kind)

    logger.warning("Unrecognised schema type %r; node accepts any value", kind)
    return AnySchema(kind=str(kind))
