"""
Schema node definitions.

These nodes describe the shape of a JSON value: an object, an array or a
primitive, together with nullability, optionality and enum constraints.
They carry no behavior and are never mutated by the compiler.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass
class SchemaNode:
    """Base class for all schema nodes."""

    type_name: ClassVar[str] = ""

    # Property name inside the parent object (absent on the root)
    key: str | None = None

    # Explicit declaration name (root schemas only)
    name: str | None = None

    nullable: bool = False
    optional: bool = False

    # Opaque values, carried along but never interpreted
    default: Any = None
    description: str | None = None


@dataclass
class ObjectSchema(SchemaNode):
    """An object with an ordered list of properties."""

    type_name: ClassVar[str] = "object"

    properties: list[SchemaNode] = field(default_factory=list)


@dataclass
class ArraySchema(SchemaNode):
    """An array whose elements all share the `items` shape."""

    type_name: ClassVar[str] = "array"

    items: SchemaNode | None = None


@dataclass
class BooleanSchema(SchemaNode):
    type_name: ClassVar[str] = "boolean"


@dataclass
class NumberSchema(SchemaNode):
    type_name: ClassVar[str] = "number"

    enum: list[int | float] | None = None


@dataclass
class StringSchema(SchemaNode):
    type_name: ClassVar[str] = "string"

    enum: list[str] | None = None


PrimitiveSchema = BooleanSchema | NumberSchema | StringSchema

# Variant tag -> node class
SCHEMA_TYPES: dict[str, type[SchemaNode]] = {
    "object": ObjectSchema,
    "array": ArraySchema,
    "boolean": BooleanSchema,
    "number": NumberSchema,
    "string": StringSchema,
}
