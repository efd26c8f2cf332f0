"""
Rendering backends.

Turn declarations into source text for a target language.
"""

from __future__ import annotations

from .base import CodeBackend
from .typescript_backend import TypeScriptBackend

__all__ = [
    "CodeBackend",
    "TypeScriptBackend",
]
