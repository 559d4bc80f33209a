"""Exception hierarchy for the layers around the validation core.

Validation failures are never raised: they are returned as
:class:`~charcheck.services.result.ValidationResult` values.
These exceptions cover configuration and collaborator loading only.
"""

from __future__ import annotations

from pathlib import Path


class CharcheckError(Exception):
    """Base class for all charcheck errors."""


class ConfigError(CharcheckError):
    """Configuration file is malformed or describes impossible bounds."""


class WordListError(CharcheckError):
    """The forbidden-term word list could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read word list {path}: {reason}")
