"""
Pipeline - JSON shape description to TypeScript declarations.

1. Phase 1 (Loader): Turn a schema dict into schema nodes
2. Phase 2 (Builder): Compile schema nodes into declarations
3. Phase 3 (Deduplicator): Keep one declaration per name
4. Phase 4 (Backend): Render declarations, root first
5. Phase 5 (Writer): Optional atomic write to disk
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, OutputConfig, OutputMode
from .errors import ConfigurationError, InvalidRoot, MissingDeclarationName, UnsupportedSchemaVariant
from .generator import GenerateResult, IndividualType, PipelineGenerator
from .writer import AtomicWriter, OutputWriteError

__all__ = [
    "PipelineGenerator",
    "GenerateResult",
    "IndividualType",
    "CodeGeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "ConfigurationError",
    "InvalidRoot",
    "MissingDeclarationName",
    "UnsupportedSchemaVariant",
    "AtomicWriter",
    "OutputWriteError",
]
