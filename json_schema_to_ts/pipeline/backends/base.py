"""
Base class for code generation backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

import jinja2

from ..analyzer.ir_nodes import Declaration, TypeRef
from ..config import CodeGeneratorConfig


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    # Separator between two rendered declarations (one blank line)
    DECLARATION_SEPARATOR = "\n\n"

    def __init__(self, config: CodeGeneratorConfig | None = None):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config or CodeGeneratorConfig()
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def render_declaration(self, declaration: Declaration) -> str:
        """
        Render one declaration to source text.

        Args:
            declaration: A structure or alias declaration

        Returns:
            Source text, without a trailing newline
        """

    @abstractmethod
    def translate_type(self, type_ref: TypeRef) -> str:
        """
        Translate an IR type to a language-specific type string.

        Args:
            type_ref: The type reference

        Returns:
            Language-specific type string
        """

    def render_document(self, rendered: Sequence[str], generation_comment: str = "") -> str:
        """
        Concatenate rendered declarations into one document.

        Args:
            rendered: Rendered declarations, in output order
            generation_comment: Comment placed on top when generation comments are enabled

        Returns:
            The document text
        """
        prefix = self.prefix_template.render(
            generation_comment=generation_comment if self.config.add_generation_comment else "",
        )
        return prefix + self.DECLARATION_SEPARATOR.join(rendered)
