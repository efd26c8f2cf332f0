"""
Declaration builder that compiles schema nodes into declarations.

Walks a schema tree and emits structure and alias declarations into an
accumulator. A property's type is resolved before its enclosing structure
is finalized, so nested declarations are always emitted before the
declarations that reference them.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from numbers import Real

from ..config import CodeGeneratorConfig
from ..errors import InvalidRoot, MissingDeclarationName, UnsupportedSchemaVariant
from ..schema_ast.nodes import (
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    SchemaNode,
    StringSchema,
)
from .ir_nodes import (
    AliasDeclaration,
    CompileResult,
    Declaration,
    FieldDef,
    StructureDeclaration,
    TypeKind,
    TypeRef,
)
from .name_resolver import capitalize_first, derive_plural_singular

logger = logging.getLogger(__name__)

KEYWORDS = {
    "number": "number",
    "string": "string",
    "boolean": "boolean",
}


def _variant_of(schema: object) -> str:
    return getattr(schema, "type_name", "") or type(schema).__name__


@dataclass
class CompileContext:
    """Accumulator shared by the recursive calls of one compilation."""

    declarations: list[Declaration] = field(default_factory=list)

    def emit(self, declaration: Declaration) -> TypeRef:
        """Append a declaration and return a reference to it."""
        logger.debug("Emitting %s %s", type(declaration).__name__, declaration.name)
        self.declarations.append(declaration)
        return TypeRef.reference(declaration.name)


class DeclarationBuilder:
    """Compiles a root schema into an ordered list of declarations."""

    def __init__(self, config: CodeGeneratorConfig | None = None):
        """
        Initialize the builder.

        Args:
            config: Code generation configuration
        """
        self.config = config or CodeGeneratorConfig()

    def compile(self, schema: SchemaNode) -> CompileResult:
        """
        Compile a root schema.

        Args:
            schema: An object or array schema with an explicit name

        Returns:
            CompileResult with declarations in emission order

        Raises:
            InvalidRoot: If the root is not an object or an array
            UnsupportedSchemaVariant: If a nested node cannot produce a type
        """
        context = CompileContext()

        match schema:
            case ObjectSchema():
                root = self.compile_object(schema, context)
            case ArraySchema():
                root = self._compile_root_array(schema, context)
            case _:
                raise InvalidRoot(_variant_of(schema))

        return CompileResult(declarations=context.declarations, root=root)

    def _compile_root_array(self, schema: ArraySchema, context: CompileContext) -> TypeRef:
        """Emit the element structure, then an alias for the array of it."""
        if not schema.name:
            raise MissingDeclarationName("Root array schema has no name")

        items = schema.items
        if not isinstance(items, ObjectSchema):
            variant = _variant_of(items) if items is not None else "array without items"
            raise UnsupportedSchemaVariant(variant, f"{schema.name}/items")

        element = self.compile_object(items, context, derive_plural_singular(schema.name))
        return context.emit(AliasDeclaration(name=schema.name, target=TypeRef.array_of(element)))

    def compile_object(self, schema: ObjectSchema, context: CompileContext, derived_name: str | None = None) -> TypeRef:
        """
        Compile an object schema into a structure declaration.

        The declaration is named after the explicit `name`, otherwise after
        `derived_name` (when a parent array named it), otherwise after the
        capitalized property key.
        """
        fields = tuple(self.compile_property(prop, context) for prop in schema.properties if prop.key not in self.config.ignore_fields)

        name = schema.name or capitalize_first(derived_name if derived_name is not None else schema.key or "")
        if not name:
            raise MissingDeclarationName("Object schema has neither a name nor a key")

        return context.emit(StructureDeclaration(name=name, fields=fields))

    def compile_property(self, schema: SchemaNode, context: CompileContext) -> FieldDef:
        """Compile a property schema into a field of its parent structure."""
        return FieldDef(
            name=schema.key or "",
            type_ref=self.compile_type(schema, context),
            is_optional=schema.optional,
        )

    def compile_type(self, schema: SchemaNode, context: CompileContext, derived_name: str | None = None) -> TypeRef:
        """
        Compute the type-expression of a schema node.

        Args:
            schema: The node to compile
            context: The shared accumulator
            derived_name: Name given by a parent array to its element

        Returns:
            The type-expression, extended with null when the node is nullable
        """
        match schema:
            case NumberSchema(enum=[_, *_]) | StringSchema(enum=[_, *_]):
                type_ref = self._compile_enum(schema)
            case NumberSchema() | StringSchema() | BooleanSchema():
                type_ref = TypeRef.keyword(KEYWORDS[schema.type_name])
            case ObjectSchema():
                type_ref = self.compile_object(schema, context, derived_name)
            case ArraySchema():
                type_ref = self._compile_array(schema, context, derived_name)
            case _:
                raise UnsupportedSchemaVariant(_variant_of(schema), getattr(schema, "key", None) or "")

        if schema.nullable:
            members = type_ref.type_args if type_ref.kind == TypeKind.UNION else (type_ref,)
            type_ref = TypeRef.union_of(*members, TypeRef.null())

        return type_ref

    def _compile_array(self, schema: ArraySchema, context: CompileContext, derived_name: str | None) -> TypeRef:
        if schema.items is None:
            raise UnsupportedSchemaVariant("array without items", schema.key or "")

        # Elements are named after the array, singularized
        element_name = derive_plural_singular(derived_name if derived_name is not None else schema.key or "")
        element = self.compile_type(schema.items, context, element_name)
        return TypeRef.array_of(element)

    def _compile_enum(self, schema: NumberSchema | StringSchema) -> TypeRef:
        """The literal union replaces the keyword type."""
        if isinstance(schema, NumberSchema):
            # NaN and Infinity have no TypeScript literal type
            valid = all(isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value) for value in schema.enum)
        else:
            valid = all(isinstance(value, str) for value in schema.enum)
        if not valid:
            raise UnsupportedSchemaVariant(f"{schema.type_name} enum with values {schema.enum!r}", schema.key or "")

        return TypeRef.union_of(*(TypeRef.literal_of(value) for value in schema.enum))
