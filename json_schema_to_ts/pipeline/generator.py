"""
Pipeline generator that ties the phases together.

1. Load: turn a schema dict into schema nodes (skipped for nodes)
2. Build: compile the schema into declarations, dependencies first
3. Deduplicate: keep the last declaration of each name
4. Render: reverse to root-first order and render each declaration
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any

from .analyzer import Declaration, DeclarationBuilder, deduplicate
from .backends import TypeScriptBackend
from .config import CodeGeneratorConfig
from .schema_ast import SchemaNode, SchemaParser

logger = logging.getLogger(__name__)


@dataclass
class IndividualType:
    """One rendered declaration."""

    declaration: Declaration
    name: str
    text: str


@dataclass
class GenerateResult:
    """Rendered output of a generation run."""

    full_text: str = ""

    # Root declaration first, its dependents after
    individual_types: list[IndividualType] = field(default_factory=list)


class PipelineGenerator:
    """Generates TypeScript declarations from a schema."""

    def __init__(
        self,
        schema: SchemaNode | dict[str, Any],
        config: CodeGeneratorConfig | None = None,
        name: str | None = None,
    ):
        """
        Initialize the generator.

        Args:
            schema: Root schema, as nodes or as a JSON-like dict
            config: Code generation configuration
            name: Overrides the root schema's `name`
        """
        self.config = config or CodeGeneratorConfig()
        self.schema = schema
        self.name = name

    def declarations(self) -> list[Declaration]:
        """Compile and deduplicate, returning declarations root first."""
        schema = self._load_schema()
        result = DeclarationBuilder(self.config).compile(schema)
        declarations = deduplicate(result.declarations)
        logger.debug(
            "Compiled %s into %d declarations (%d after deduplication)",
            schema.name,
            len(result.declarations),
            len(declarations),
        )
        return list(reversed(declarations))

    def generate(self) -> GenerateResult:
        """Run the full pipeline."""
        backend = TypeScriptBackend(self.config)

        individual_types = [
            IndividualType(declaration=declaration, name=declaration.name, text=backend.render_declaration(declaration))
            for declaration in self.declarations()
        ]

        root_name = individual_types[0].name if individual_types else ""
        full_text = backend.render_document(
            [t.text for t in individual_types],
            generation_comment=f"Generated by json_schema_to_ts from {root_name}. Do not edit by hand.",
        )
        return GenerateResult(full_text=full_text, individual_types=individual_types)

    def _load_schema(self) -> SchemaNode:
        schema = self.schema
        if not isinstance(schema, SchemaNode):
            schema = SchemaParser().parse(schema)
        if self.name:
            schema = dataclasses.replace(schema, name=self.name)
        return schema
