"""Exceptions raised by the property search core.

- PatternSyntaxError: the search pattern is not a valid regular expression
- CatalogAccessError: a metadata document could not be read or parsed
- ConfigError: the catalog configuration file is missing or malformed
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class PatternSyntaxError(ValueError):
    """Invalid search pattern, raised when a query is built.

    Attributes:
        pattern: The pattern text as supplied by the caller.
        position: Offset of the error within the pattern, when known.
    """

    def __init__(self, message: str, pattern: Optional[str] = None, position: Optional[int] = None):
        super().__init__(message)
        self.pattern = pattern
        self.position = position


class CatalogAccessError(RuntimeError):
    """Failure while reading the property catalog."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ConfigError(ValueError):
    """Catalog configuration file is missing or malformed."""


__all__ = ["PatternSyntaxError", "CatalogAccessError", "ConfigError"]
