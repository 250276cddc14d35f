"""
Exceptions raised while normalizing templates.

Malformed or non-matching glob patterns and templates without content are
not errors: they produce empty results or records without `content`.
"""

from pathlib import Path


class LoaderError(Exception):
    """Base error for template loading."""

    def __init__(self, message: str, path: str | Path | None = None):
        self.path = str(path) if path else None
        super().__init__(f"{message}" + (f": {path}" if path else ""))


class InvalidPatternError(LoaderError, TypeError):
    """The pattern (or one of its elements) cannot describe a template."""


class ReadError(LoaderError, OSError):
    """An existing template file could not be read."""
