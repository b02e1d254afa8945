"""Exception classes for configuration loading and parsing.

This module defines a small hierarchy of exceptions raised while reading
configuration files and deriving typed values from their entries.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence


class ConfigError(Exception):
    """Base class for all configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when a configuration file cannot be read or has the wrong shape.

    The store is left untouched when this is raised, so callers may keep
    serving the previously loaded values.
    """

    def __init__(
        self, path: Path, message: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize with load error details.

        Args:
            path: File that failed to load
            message: Description of the failure
            original_error: The original exception that was caught
        """
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message
        self.original_error = original_error


class OddsParseError(ConfigError, ValueError):
    """Raised when an odds string holds a token that is not an integer percentage.

    ``partial`` holds the odds parsed before the failing token, with the
    default value at the failing position and every position after it.
    """

    def __init__(
        self, raw: str, token: str, position: int, partial: Sequence[float]
    ) -> None:
        super().__init__(f"Invalid odds token {token!r} at position {position} in {raw!r}")
        self.raw = raw
        self.token = token
        self.position = position
        self.partial = tuple(partial)
