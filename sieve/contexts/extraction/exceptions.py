"""Custom exceptions for the extraction context."""

from pathlib import Path
from typing import Iterable, Optional


class UnknownPatternError(KeyError):
    """
    Exception raised when a capability is requested for a pattern name
    outside the registry.

    Attributes:
        pattern_name: The requested name
        available: Names present in the registry
    """

    def __init__(self, pattern_name: str, available: Iterable[str] = ()):
        self.pattern_name = pattern_name
        self.available = tuple(available)
        self.message = f"Unknown pattern '{pattern_name}'. Available patterns: {list(self.available)}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class DictionaryConfigError(ValueError):
    """
    Exception raised when an entity dictionary override file is malformed.

    Attributes:
        message: Error description
        config_path: Path to the offending file
        category: Category whose entry failed validation
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        category: Optional[str] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.category = category

        parts = [message]
        if config_path:
            parts.append(f"File: {config_path}")
        if category:
            parts.append(f"Category: {category}")

        super().__init__("\n".join(parts))
