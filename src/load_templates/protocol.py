"""
Collaborator protocols for template loading.

The normalizer never touches the filesystem, a glob implementation or a
YAML parser directly. It talks to three pluggable collaborators:

- FileSystem: existence checks and text reads
- GlobEngine: pattern expansion to an ordered list of paths
- FrontMatterParser: splitting raw text into metadata and body

Using Protocol (duck typing) instead of ABC allows any class with the
required methods to be passed in, e.g. an in-memory filesystem in tests.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass
class ParsedFrontMatter:
    """
    Result of front-matter parsing.

    Attributes:
        data: Parsed metadata; empty when the text has no front-matter block
        content: Body with the block removed, or the full text when absent
        matched: Whether a front-matter block was found
    """

    content: str
    data: dict[str, Any] = field(default_factory=dict)
    matched: bool = False


@runtime_checkable
class FileSystem(Protocol):
    """Read access to template files."""

    def exists(self, path: str) -> bool:
        """Return True if `path` names an existing regular file."""
        ...

    def read_text(self, path: str) -> str:
        """
        Read a file as text.

        Raises:
            ReadError: If the file cannot be read or decoded
        """
        ...


@runtime_checkable
class GlobEngine(Protocol):
    """Glob expansion."""

    def expand(self, pattern: str) -> list[str]:
        """Return matching file paths in a stable order (possibly empty)."""
        ...


@runtime_checkable
class FrontMatterParser(Protocol):
    """Front-matter splitting."""

    def parse(self, text: str) -> ParsedFrontMatter:
        ...
