"""Abstract base class for language modules."""
from abc import ABC, abstractmethod
from typing import Any


class LanguageModule(ABC):
    """Abstract base for language-specific functionality."""

    @property
    @abstractmethod
    def code(self) -> str:
        """ISO 639-1 language code (e.g., 'uk')."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable language name."""
        ...

    @property
    @abstractmethod
    def native_name(self) -> str:
        """Language name in the language itself."""
        ...

    @abstractmethod
    def get_tagger(self) -> Any:
        """Get the tagger for this language."""
        ...

    def get_cases(self) -> list[dict]:
        """Grammatical cases with display labels. Override if language has declension."""
        return []
