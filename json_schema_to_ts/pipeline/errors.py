"""
Errors raised while compiling a schema into declarations.
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """Raised when a schema cannot be compiled.

    This can happen when:
    - The root schema is not an object or an array
    - A node carries a variant the compiler does not know
    - A declaration would end up without a name
    """

    pass


class UnsupportedSchemaVariant(ConfigurationError):
    """A schema node has a variant that cannot produce a type."""

    def __init__(self, variant: str, path: str = ""):
        self.variant = variant
        self.path = path
        location = f" at {path}" if path else ""
        super().__init__(f"Unknown type: {variant}{location}")


class InvalidRoot(ConfigurationError):
    """The root schema is neither an object nor an array."""

    def __init__(self, variant: str):
        self.variant = variant
        super().__init__(f"Root schema must be of type 'object' or 'array', got '{variant}'")


class MissingDeclarationName(ConfigurationError):
    """A declaration has neither an explicit name nor a key to derive one from."""

    pass
