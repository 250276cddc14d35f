"""Local filesystem reader used by default for template files."""

import logging
from pathlib import Path

from load_templates.errors import ReadError

logger = logging.getLogger(__name__)


class LocalFileSystem:
    """
    Reads template files from disk.

    Relative paths are resolved against `cwd` (the process working
    directory when `cwd` is None).

    Example:
        fs = LocalFileSystem(cwd="site/")
        if fs.exists("templates/page.md"):
            text = fs.read_text("templates/page.md")
    """

    def __init__(self, cwd: str | Path | None = None, encoding: str = "utf-8"):
        self.cwd = Path(cwd) if cwd is not None else None
        self.encoding = encoding

    def resolve(self, path: str | Path) -> Path:
        path = Path(path)
        if self.cwd is not None and not path.is_absolute():
            return self.cwd / path
        return path

    def exists(self, path: str) -> bool:
        try:
            return self.resolve(path).is_file()
        except (OSError, ValueError):
            # e.g. embedded NUL bytes or names too long for the OS
            return False

    def read_text(self, path: str) -> str:
        resolved = self.resolve(path)
        try:
            return resolved.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(f"Failed to read template ({e})", path) from e
