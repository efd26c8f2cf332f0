"""
IR (Intermediate Representation) node definitions.

These nodes are the declaration descriptors produced by the compiler:
named structures (records of fields) and named aliases, together with the
type-expressions their fields and targets use. They are created once and
never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TypeKind(Enum):
    """Kind of type-expression in the IR."""

    KEYWORD = "keyword"  # string, number, boolean
    REFERENCE = "reference"  # Another declaration, by name
    LITERAL = "literal"  # "ACTIVE", 3
    NULL = "null"  # The null literal
    ARRAY = "array"  # T[]
    UNION = "union"  # A | B | ...


@dataclass(frozen=True)
class TypeRef:
    """A type-expression."""

    kind: TypeKind = TypeKind.KEYWORD
    name: str = ""  # Keyword or referenced declaration name

    # For literal types
    literal: Any = None

    # Element type for arrays, members for unions
    type_args: tuple[TypeRef, ...] = ()

    @staticmethod
    def keyword(name: str) -> TypeRef:
        return TypeRef(kind=TypeKind.KEYWORD, name=name)

    @staticmethod
    def reference(name: str) -> TypeRef:
        return TypeRef(kind=TypeKind.REFERENCE, name=name)

    @staticmethod
    def literal_of(value: Any) -> TypeRef:
        return TypeRef(kind=TypeKind.LITERAL, literal=value)

    @staticmethod
    def null() -> TypeRef:
        return TypeRef(kind=TypeKind.NULL)

    @staticmethod
    def array_of(element: TypeRef) -> TypeRef:
        return TypeRef(kind=TypeKind.ARRAY, type_args=(element,))

    @staticmethod
    def union_of(*members: TypeRef) -> TypeRef:
        return TypeRef(kind=TypeKind.UNION, type_args=tuple(members))


@dataclass(frozen=True)
class FieldDef:
    """A field of a structure declaration."""

    name: str = ""
    type_ref: TypeRef | None = None
    is_optional: bool = False


@dataclass(frozen=True)
class Declaration:
    """Base class for named declarations."""

    name: str = ""

    # Generic parameter names; no schema variant produces them yet
    type_parameters: tuple[str, ...] = ()

    @property
    def identity_key(self) -> str:
        """Key under which declarations are considered duplicates."""
        return "|".join((self.name, *self.type_parameters))


@dataclass(frozen=True)
class StructureDeclaration(Declaration):
    """A named record type (rendered as an interface)."""

    fields: tuple[FieldDef, ...] = ()


@dataclass(frozen=True)
class AliasDeclaration(Declaration):
    """A named alias, always for an array of another declaration."""

    target: TypeRef | None = None


@dataclass
class CompileResult:
    """Output of one compilation."""

    # Emission order: dependencies before the declarations referencing them
    declarations: list[Declaration] = field(default_factory=list)

    # Reference to the top-level declaration
    root: TypeRef | None = None
