"""
TypeScript code generation backend.

Renders structure declarations as interfaces and alias declarations as
type aliases.
"""

from __future__ import annotations

import json
import re
from typing import Any

from ..analyzer.ir_nodes import (
    AliasDeclaration,
    Declaration,
    FieldDef,
    StructureDeclaration,
    TypeKind,
    TypeRef,
)
from ..config import CodeGeneratorConfig
from .base import CodeBackend

# Property names that can be written without quotes
_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


class TypeScriptBackend(CodeBackend):
    """TypeScript code generation backend."""

    TEMPLATE_LANG = "typescript"
    FILE_EXTENSION = "ts"

    def __init__(self, config: CodeGeneratorConfig | None = None):
        super().__init__(config)
        self.interface_template = self.jinja_env.get_template("interface.ts.jinja2")
        self.type_alias_template = self.jinja_env.get_template("type_alias.ts.jinja2")

    def render_declaration(self, declaration: Declaration) -> str:
        """Render an interface or a type alias."""
        if isinstance(declaration, StructureDeclaration):
            return self.interface_template.render(
                EXPORT=self.config.export_types,
                NAME=declaration.name,
                TYPE_PARAMETERS=declaration.type_parameters,
                fields=[self._prepare_field_context(f) for f in declaration.fields],
            )
        if isinstance(declaration, AliasDeclaration):
            return self.type_alias_template.render(
                EXPORT=self.config.export_types,
                NAME=declaration.name,
                TYPE_PARAMETERS=declaration.type_parameters,
                TARGET=self.translate_type(declaration.target),
            )
        raise TypeError(f"Cannot render declaration of type {type(declaration).__name__}")

    def _prepare_field_context(self, field: FieldDef) -> dict[str, Any]:
        name = field.name if _IDENTIFIER_PATTERN.fullmatch(field.name) else json.dumps(field.name, ensure_ascii=False)
        return {
            "name": name,
            "type": self.translate_type(field.type_ref),
            "optional": field.is_optional,
        }

    def translate_type(self, type_ref: TypeRef) -> str:
        """Translate IR type to TypeScript type string."""
        match type_ref.kind:
            case TypeKind.KEYWORD | TypeKind.REFERENCE:
                return type_ref.name
            case TypeKind.LITERAL:
                return json.dumps(type_ref.literal, ensure_ascii=False)
            case TypeKind.NULL:
                return "null"
            case TypeKind.ARRAY:
                (element,) = type_ref.type_args
                element_str = self.translate_type(element)
                # `A | B[]` would bind the brackets to B only
                if element.kind == TypeKind.UNION and len(element.type_args) > 1:
                    element_str = f"({element_str})"
                return f"{element_str}[]"
            case TypeKind.UNION:
                return " | ".join(self.translate_type(member) for member in type_ref.type_args)
        raise ValueError(f"Unsupported type kind: {type_ref.kind}")
