"""
Atomic file writer for generated declarations.

Ensures that file writes are atomic so an interrupted run never leaves a
half-written declaration file behind.
"""

from __future__ import annotations

import logging
import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..config import OutputMode

logger = logging.getLogger(__name__)

# Quoted property names and literal types may contain any character
_STRING_LITERAL = re.compile(r'"(?:[^"\\]|\\.)*"')


class OutputWriteError(Exception):
    """Raised when generated code cannot be written.

    This can happen when:
    - The output file exists and overwriting was not requested
    - The generated code fails the sanity check
    """

    pass


class AtomicWriter:
    """Handles atomic file writes with validation.

    Content is written to a temporary file in the target directory,
    validated, then moved over the target in one rename.
    """

    def __init__(self, validate_typescript: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_typescript: Optional validation function for TypeScript code
        """
        self._validate_typescript = validate_typescript or self._default_validate_typescript

    def write(
        self,
        path: Path,
        content: str,
        mode: OutputMode = OutputMode.ERROR_IF_EXISTS,
        validate: bool = True,
    ) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            mode: What to do when the target already exists
            validate: Whether to validate before finalizing

        Raises:
            OutputWriteError: If the file exists in ERROR_IF_EXISTS mode, or validation fails
            OSError: If file operations fail
        """
        if mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise OutputWriteError(f"Output file already exists: {path}. Use force mode to overwrite.")

        if validate:
            self._validate_typescript(content)

        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory, so the final rename stays on one filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

        logger.info("Wrote %s", path)

    def _default_validate_typescript(self, content: str) -> None:
        """Basic TypeScript sanity check.

        Raises:
            OutputWriteError: If the code has no declarations or unbalanced delimiters
        """
        if "interface " not in content and "type " not in content:
            raise OutputWriteError("Generated TypeScript code has no type declarations")

        code = _STRING_LITERAL.sub('""', content)
        for open_char, close_char in ("{}", "[]", "()"):
            opened = code.count(open_char)
            closed = code.count(close_char)
            if opened != closed:
                raise OutputWriteError(f"Generated TypeScript code has unbalanced '{open_char}{close_char}': {opened} open, {closed} close")
