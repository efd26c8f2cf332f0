"""
Configuration for the TypeScript declaration generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .errors import ConfigurationError


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to sanity-check code before writing
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Prefix every declaration with the `export` modifier
    export_types: bool = True

    # Add generation comment at top of file
    add_generation_comment: bool = False

    # Property keys skipped in every structure
    ignore_fields: list[str] = field(default_factory=list)

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary. Unknown keys are ignored.

        Raises:
            ConfigurationError: If the config or its "output" section is not a mapping,
                or the output mode is unknown
        """
        if not isinstance(d, dict):
            raise ConfigurationError(f"Config must be a JSON object, got {type(d).__name__}")

        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "output":
                if not isinstance(v, dict):
                    raise ConfigurationError(f"Config 'output' must be a JSON object, got {type(v).__name__}")
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS.value)
                try:
                    mode = OutputMode(mode)
                except ValueError as e:
                    choices = ", ".join(m.value for m in OutputMode)
                    raise ConfigurationError(f"Unknown output mode {mode!r}, expected one of: {choices}") from e
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "export_types": self.export_types,
            "add_generation_comment": self.add_generation_comment,
            "ignore_fields": self.ignore_fields,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
            },
        }
