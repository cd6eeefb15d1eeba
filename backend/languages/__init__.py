"""Language modules.

Provides factory/registry pattern for language-specific functionality.
"""
from .registry import get_module, register
from .base import LanguageModule

__all__ = [
    "get_module",
    "register",
    "LanguageModule",
]
