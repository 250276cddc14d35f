"""
Decide whether a string key is a file, a glob pattern, or an opaque name.

Precedence: an existing file always wins, so a literal file name that
happens to contain `*` or `[` is read rather than expanded.
"""

import glob
import logging
import re
from enum import Enum
from pathlib import Path, PurePath

from load_templates.protocol import FileSystem, GlobEngine

logger = logging.getLogger(__name__)

_MAGIC = re.compile(r"[*?]|\[[^\]]+\]")
_NUMERIC_RANGE = re.compile(r"^(-?\d+)\.\.(-?\d+)$")
_ALPHA_RANGE = re.compile(r"^([a-zA-Z])\.\.([a-zA-Z])$")


class KeyKind(str, Enum):
    IS_FILE = "file"
    IS_GLOB = "glob"
    IS_PLAIN_KEY = "plain_key"


def _split_alternatives(body: str) -> list[str] | None:
    """Split a brace body on top-level commas, or expand an `a..b` range."""
    parts: list[str] = []
    depth = 0
    current = ""
    for ch in body:
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        if ch == "," and depth == 0:
            parts.append(current)
            current = ""
        else:
            current += ch
    parts.append(current)
    if len(parts) > 1:
        return parts

    numeric = _NUMERIC_RANGE.match(body)
    if numeric:
        start, end = int(numeric.group(1)), int(numeric.group(2))
        step = 1 if end >= start else -1
        return [str(n) for n in range(start, end + step, step)]

    alpha = _ALPHA_RANGE.match(body)
    if alpha:
        start, end = ord(alpha.group(1)), ord(alpha.group(2))
        step = 1 if end >= start else -1
        return [chr(c) for c in range(start, end + step, step)]

    return None


def expand_braces(pattern: str) -> list[str]:
    """
    Expand shell-style brace groups.

    Groups without a comma or range are left untouched.

    Examples:
        >>> expand_braces("a.{md,txt}")
        ['a.md', 'a.txt']
        >>> expand_braces("page{1..3}.md")
        ['page1.md', 'page2.md', 'page3.md']
        >>> expand_braces("{{title}}.md")
        ['{{title}}.md']
    """
    depth = 0
    start = -1
    for i, ch in enumerate(pattern):
        if ch == "{":
            if depth == 0:
                start = i
            depth += 1
        elif ch == "}" and depth > 0:
            depth -= 1
            if depth == 0:
                alternatives = _split_alternatives(pattern[start + 1:i])
                if alternatives is None:
                    continue
                prefix, suffix = pattern[:start], pattern[i + 1:]
                expanded: list[str] = []
                for alternative in alternatives:
                    expanded.extend(expand_braces(prefix + alternative + suffix))
                return expanded
    return [pattern]


def is_glob(value: str) -> bool:
    """Return True if the string contains glob metacharacters or brace groups."""
    if _MAGIC.search(value):
        return True
    return len(expand_braces(value)) > 1


class StdlibGlobEngine:
    """
    Glob expansion on top of `glob.glob`, with brace groups and `**`.

    Matches are returned relative to `cwd` in the style the pattern was
    written (absolute patterns give absolute paths). Each brace alternative
    is sorted on its own; alternatives keep their written order.
    """

    def __init__(self, cwd: str | Path | None = None):
        self.cwd = Path(cwd) if cwd is not None else None

    def _is_file(self, path: str) -> bool:
        candidate = Path(path)
        if self.cwd is not None and not candidate.is_absolute():
            candidate = self.cwd / candidate
        return candidate.is_file()

    def expand(self, pattern: str) -> list[str]:
        matches: list[str] = []
        seen: set[str] = set()
        for alternative in expand_braces(pattern):
            try:
                found = glob.glob(alternative, root_dir=self.cwd, recursive=True)
            except (re.error, ValueError) as e:
                logger.debug(f"Ignoring malformed glob pattern {alternative!r}: {e}")
                continue
            for path in sorted(found):
                if not self._is_file(path):
                    continue
                path = PurePath(path).as_posix()
                if path in seen:
                    continue
                seen.add(path)
                matches.append(path)
        return matches


class PathResolver:
    """
    Classify string keys and expand glob patterns.

    Example:
        resolver = PathResolver(LocalFileSystem(), StdlibGlobEngine())
        resolver.resolve_key_kind("templates/*.md")   # KeyKind.IS_GLOB
        resolver.expand_glob("templates/*.md")        # ['templates/a.md', ...]
    """

    def __init__(self, filesystem: FileSystem, glob_engine: GlobEngine):
        self.filesystem = filesystem
        self.glob_engine = glob_engine

    def resolve_key_kind(self, key: str) -> KeyKind:
        if self.filesystem.exists(key):
            return KeyKind.IS_FILE
        if is_glob(key):
            return KeyKind.IS_GLOB
        return KeyKind.IS_PLAIN_KEY

    def expand_glob(self, pattern: str) -> list[str]:
        paths = self.glob_engine.expand(pattern)
        logger.debug(f"Glob {pattern!r} matched {len(paths)} files")
        return paths
