"""
Schema model module.

Contains the schema node definitions and the dict loader.
"""

from __future__ import annotations

from .nodes import (
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    PrimitiveSchema,
    SchemaNode,
    StringSchema,
)
from .parser import SchemaParser

__all__ = [
    "SchemaNode",
    "ObjectSchema",
    "ArraySchema",
    "BooleanSchema",
    "NumberSchema",
    "StringSchema",
    "PrimitiveSchema",
    "SchemaParser",
]
