"""
Analyzer module.

Contains name derivation, declaration building and deduplication.
"""

from __future__ import annotations

from .declaration_builder import CompileContext, DeclarationBuilder
from .deduplicator import deduplicate
from .ir_nodes import (
    AliasDeclaration,
    CompileResult,
    Declaration,
    FieldDef,
    StructureDeclaration,
    TypeKind,
    TypeRef,
)
from .name_resolver import capitalize_first, derive_plural_singular, to_pascal_case

__all__ = [
    "AliasDeclaration",
    "CompileContext",
    "CompileResult",
    "Declaration",
    "DeclarationBuilder",
    "FieldDef",
    "StructureDeclaration",
    "TypeKind",
    "TypeRef",
    "capitalize_first",
    "deduplicate",
    "derive_plural_singular",
    "to_pascal_case",
]
