"""JSON Shape to TypeScript Declarations

A Python package for generating TypeScript interfaces and type aliases
from declarative descriptions of JSON values.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    ConfigurationError,
    GenerateResult,
    InvalidRoot,
    MissingDeclarationName,
    OutputConfig,
    OutputMode,
    OutputWriteError,
    PipelineGenerator,
    UnsupportedSchemaVariant,
)

__all__ = [
    "PipelineGenerator",
    "GenerateResult",
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
