"""
Schema loader that builds schema nodes from plain dictionaries.

Callers usually describe shapes as JSON-like dicts
(``{"type": "object", "name": "User", "properties": [...]}``);
this turns them into the typed node classes the compiler works on.
"""

from __future__ import annotations

from typing import Any

from ..errors import UnsupportedSchemaVariant
from .nodes import (
    SCHEMA_TYPES,
    ArraySchema,
    NumberSchema,
    ObjectSchema,
    SchemaNode,
    StringSchema,
)


class SchemaParser:
    """Parses JSON-like dicts into schema nodes."""

    # Keys shared by every variant
    COMMON_FIELDS = ("key", "name", "nullable", "optional", "default", "description")

    def parse(self, schema: dict[str, Any]) -> SchemaNode:
        """
        Parse a schema dictionary.

        Args:
            schema: The schema dictionary

        Returns:
            The root schema node

        Raises:
            UnsupportedSchemaVariant: If a node has a missing or unknown type
        """
        return self._parse_schema_node(schema, "#")

    def _parse_schema_node(self, schema: dict[str, Any], path: str) -> SchemaNode:
        if not isinstance(schema, dict):
            raise UnsupportedSchemaVariant(type(schema).__name__, path)

        type_name = schema.get("type")
        node_class = SCHEMA_TYPES.get(type_name) if isinstance(type_name, str) else None
        if node_class is None:
            raise UnsupportedSchemaVariant(str(type_name), path)

        kwargs = {name: schema[name] for name in self.COMMON_FIELDS if name in schema}

        if node_class is ObjectSchema:
            kwargs["properties"] = self._parse_properties(schema.get("properties") or [], path)
        elif node_class is ArraySchema:
            if "items" not in schema:
                raise UnsupportedSchemaVariant("array without items", path)
            kwargs["items"] = self._parse_schema_node(schema["items"], f"{path}/items")
        elif node_class in (NumberSchema, StringSchema) and schema.get("enum"):
            kwargs["enum"] = list(schema["enum"])

        return node_class(**kwargs)

    def _parse_properties(self, properties: list[Any] | dict[str, Any], path: str) -> list[SchemaNode]:
        """
        Parse object properties.

        Properties are normally an ordered list of child schemas, each with
        its own ``key``. A ``{key: child}`` mapping is accepted as well; the
        key is then taken from the mapping.
        """
        if isinstance(properties, dict):
            items = [{**child, "key": child.get("key", key)} if isinstance(child, dict) else child for key, child in properties.items()]
        else:
            items = list(properties)

        nodes = []
        for index, child in enumerate(items):
            key = child.get("key") if isinstance(child, dict) else None
            nodes.append(self._parse_schema_node(child, f"{path}/properties/{key or index}"))
        return nodes
