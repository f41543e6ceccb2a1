"""Exceptions raised while loading a build specification."""

from __future__ import annotations

from pathlib import Path


class SpecError(ValueError):
    """A spec document could not be turned into a BuildSpec."""

    def __init__(self, message: str, path: Path | str | None = None):
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{self.path}: {message}"
        super().__init__(message)


class SpecDecodeError(SpecError):
    """The document is not valid JSON/XML."""


class SpecStructureError(SpecError):
    """The document decodes but lacks required structure (e.g. no frames list)."""


class SpecReadError(SpecError):
    """The spec path exists but cannot be read (a directory, no permission, ...)."""
