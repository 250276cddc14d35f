"""
Argument normalization: turn loosely shaped `normalize()` calls into records.

Supported call shapes:

    normalize("pages/a.md")                          # existing file
    normalize("pages/*.md", {"site": "x"}, {"engine": "hbs"})
    normalize("home", "Hello {{name}}", {"name": "Jon"}, {"engine": "hbs"})
    normalize("home", {"content": "Hello", "layout": "base"})
    normalize({"path": "home", "content": "Hello"}, {"name": "Jon"})
    normalize({"home": {"content": "Hello"}, "about": "About us"})
    normalize(["pages/*.md", "partials/*.hbs"], {"site": "x"})

The role of each positional argument is inferred from its shape; see
`Loader.normalize` for the rules. Every shape ends up in one of the named
constructors (`from_path`, `from_glob`, `from_inline_content`,
`from_record`, `from_record_map`), which can also be called directly.
"""

import logging
import posixpath
from collections.abc import Mapping
from typing import Any, Callable

from load_templates.config import LoaderConfig
from load_templates.content import ContentLoader
from load_templates.errors import InvalidPatternError
from load_templates.filesystem import LocalFileSystem
from load_templates.frontmatter import YamlFrontMatterParser
from load_templates.merge import (
    extract_options,
    merge_locals,
    merge_options,
    split_locals_source,
    split_options_source,
    split_record,
)
from load_templates.protocol import FileSystem, FrontMatterParser, GlobEngine
from load_templates.record import ResultSet, TemplateRecord
from load_templates.resolver import KeyKind, PathResolver, StdlibGlobEngine
from load_templates.types import Kind, as_mapping, classify, is_mapping

logger = logging.getLogger(__name__)

Source = Mapping[str, Any] | None


def _keep_key(key: str) -> str:
    return key


def _stem(key: str) -> str:
    name = posixpath.basename(key)
    stem, _ = posixpath.splitext(name)
    return stem or name


KEY_RENAMERS: dict[str, Callable[[str], str]] = {
    "path": _keep_key,
    "basename": posixpath.basename,
    "stem": _stem,
}


def _mapping_or_none(value: Any) -> Source:
    if value is None:
        return None
    if is_mapping(value):
        return as_mapping(value)
    logger.debug(f"Ignoring {type(value).__name__} argument where a mapping was expected")
    return None


class Loader:
    """
    Normalize template descriptions into a `ResultSet`.

    Collaborators default to the local filesystem, `glob` and the YAML
    front-matter parser, all rooted at `config.cwd`.

    Example:
        loader = Loader(LoaderConfig(cwd="site"))
        templates = loader.normalize("pages/*.md", {"site": "Example"})
        for key, record in templates.items():
            print(key, record.data, record.locals)
    """

    def __init__(
        self,
        config: LoaderConfig | None = None,
        filesystem: FileSystem | None = None,
        glob_engine: GlobEngine | None = None,
        front_matter: FrontMatterParser | None = None,
        rename_key: Callable[[str], str] | None = None,
    ):
        self.config = config or LoaderConfig()
        self.filesystem = filesystem or LocalFileSystem(self.config.cwd, self.config.encoding)
        self.glob_engine = glob_engine or StdlibGlobEngine(self.config.cwd)
        self.front_matter = front_matter or YamlFrontMatterParser(
            self.config.front_matter_delimiter
        )
        self.resolver = PathResolver(self.filesystem, self.glob_engine)
        self.content_loader = ContentLoader(
            self.filesystem,
            self.front_matter,
            parse_front_matter=self.config.parse_front_matter,
        )
        self.rename_key = rename_key or KEY_RENAMERS[self.config.key_style]

    @classmethod
    def from_config(cls, config: LoaderConfig) -> "Loader":
        """Create a loader with the default collaborators for `config`."""
        return cls(config=config)

    def normalize(self, pattern: Any, arg2: Any = None, arg3: Any = None, arg4: Any = None) -> ResultSet:
        """
        Normalize one call's arguments into a ResultSet.

        String pattern:
            - glob: one record per matched file. A string `arg2` is discarded;
              `arg2` is shared locals, `arg3` options.
            - existing file or plain key: a string `arg2` is the content,
              then `arg3` is shared locals and `arg4` options. A mapping
              `arg2` describes the record itself, then `arg3` is options.
        Mapping pattern:
            - with a string `path`: one record keyed by that path.
            - otherwise: one record per key. Values are record mappings
              (their `path` defaults to the key) or content strings.
            `arg2` is shared locals and `arg3` options for every record.
        List pattern:
            each element is normalized with the same `arg2`..`arg4`; the
            first record seen for a key wins.

        Raises:
            InvalidPatternError: If the pattern is not a string, mapping or list
            ReadError: If an existing template file cannot be read
        """
        result = ResultSet()
        self._dispatch(result, pattern, arg2, arg3, arg4)
        logger.info(f"Normalized {len(result)} templates")
        return result

    def _dispatch(self, result: ResultSet, pattern: Any, arg2: Any, arg3: Any, arg4: Any) -> None:
        kind = classify(pattern)
        if kind is Kind.ARRAY:
            for item in pattern:
                self._dispatch(result, item, arg2, arg3, arg4)
        elif kind is Kind.STRING:
            result.merge(self._from_string(pattern, arg2, arg3, arg4))
        elif kind is Kind.PLAIN_OBJECT:
            result.merge(self._from_object(as_mapping(pattern), arg2, arg3, arg4))
        else:
            raise InvalidPatternError(
                f"Expected a string, mapping or list pattern, got {type(pattern).__name__}"
            )

    def _from_string(self, pattern: str, arg2: Any, arg3: Any, arg4: Any) -> ResultSet:
        key_kind = self.resolver.resolve_key_kind(pattern)
        logger.debug(f"Template key {pattern!r} resolved as {key_kind.value}")

        if key_kind is KeyKind.IS_GLOB:
            if isinstance(arg2, str):
                logger.warning(
                    f"Ignoring content string for glob pattern {pattern!r}: "
                    "one string cannot apply to every matched file"
                )
                arg2 = None
            return self.from_glob(pattern, _mapping_or_none(arg2), _mapping_or_none(arg3))

        if isinstance(arg2, str):
            content, description = arg2, None
            locals_source, options_source = _mapping_or_none(arg3), _mapping_or_none(arg4)
        else:
            content, description = None, _mapping_or_none(arg2)
            locals_source, options_source = None, _mapping_or_none(arg3)
            if arg4 is not None:
                logger.debug(f"Ignoring fourth argument for {pattern!r}")

        if key_kind is KeyKind.IS_FILE:
            return self.from_path(pattern, description, locals_source, options_source, content=content)
        return self.from_inline_content(pattern, content, description, locals_source, options_source)

    def _from_object(self, pattern: Mapping[str, Any], arg2: Any, arg3: Any, arg4: Any) -> ResultSet:
        if arg4 is not None:
            logger.debug("Ignoring fourth argument for a mapping pattern")
        locals_source, options_source = _mapping_or_none(arg2), _mapping_or_none(arg3)

        if isinstance(pattern.get("path"), str):
            return self.from_record(pattern, locals_source, options_source)
        # Without a `path` a single record has no key, so `content` is
        # just another template key.
        return self.from_record_map(pattern, locals_source, options_source)

    def from_path(
        self,
        path: str,
        description: Source = None,
        locals_source: Source = None,
        options_source: Source = None,
        content: str | None = None,
    ) -> ResultSet:
        """
        Load one existing template file, keyed by `path`.

        An explicit `content` (or a `content` key in `description`) replaces
        the body read from the file; `orig` and `data` still come from disk.
        """
        loaded = self.content_loader.load(path)
        base: dict[str, Any] = {"content": loaded.content, "orig": loaded.orig, "data": loaded.data}
        if content is not None:
            base["content"] = content

        result = ResultSet()
        self._add(result, path, self._build(path, base, description, locals_source, options_source))
        return result

    def from_glob(
        self,
        pattern: str,
        locals_source: Source = None,
        options_source: Source = None,
    ) -> ResultSet:
        """Load every file matching `pattern`; no matches gives an empty ResultSet."""
        result = ResultSet()
        for path in self.resolver.expand_glob(pattern):
            loaded = self.content_loader.load(path)
            base = {"content": loaded.content, "orig": loaded.orig, "data": loaded.data}
            self._add(result, path, self._build(path, base, None, locals_source, options_source))
        return result

    def from_inline_content(
        self,
        key: str,
        content: str | None = None,
        description: Source = None,
        locals_source: Source = None,
        options_source: Source = None,
    ) -> ResultSet:
        """Build one record for a key that is not a file, without reading it."""
        base: dict[str, Any] = {}
        if content is not None:
            base["content"] = content
        result = ResultSet()
        self._add(result, key, self._build(key, base, description, locals_source, options_source))
        return result

    def from_record(
        self,
        description: Mapping[str, Any],
        locals_source: Source = None,
        options_source: Source = None,
    ) -> ResultSet:
        """Build one record from a mapping that carries its own `path`."""
        description = as_mapping(description)
        key = description.get("path")
        if not isinstance(key, str):
            raise InvalidPatternError("Template description needs a string `path`")
        result = ResultSet()
        self._add(result, key, self._build(key, {}, description, locals_source, options_source))
        return result

    def from_record_map(
        self,
        mapping: Mapping[str, Any],
        locals_source: Source = None,
        options_source: Source = None,
    ) -> ResultSet:
        """Build one record per key of `mapping`."""
        result = ResultSet()
        for key, value in mapping.items():
            if not isinstance(key, str):
                raise InvalidPatternError(f"Template keys must be strings, got {type(key).__name__}")
            if is_mapping(value):
                record = self._build(key, {}, as_mapping(value), locals_source, options_source)
            elif isinstance(value, str):
                record = self._build(key, {"content": value}, None, locals_source, options_source)
            else:
                raise InvalidPatternError(
                    f"Template must be a mapping or a content string, got {type(value).__name__}",
                    key,
                )
            self._add(result, key, record)
        return result

    def _build(
        self,
        key: str,
        base: dict[str, Any],
        description: Source,
        locals_source: Source,
        options_source: Source,
    ) -> TemplateRecord:
        parts = split_record(description, self.config.passthrough_keys)
        shared = split_locals_source(locals_source)

        fields = {**base, **parts.fields}
        path = fields.pop("path", key)
        if not isinstance(path, str):
            raise InvalidPatternError(f"Template path must be a string, got {type(path).__name__}", key)

        if "content" not in fields and self.filesystem.exists(path):
            loaded = self.content_loader.load(path)
            fields = {"content": loaded.content, "orig": loaded.orig, "data": loaded.data, **fields}

        content, orig, data = fields.get("content"), fields.get("orig"), fields.get("data")
        for name, value in (("content", content), ("orig", orig)):
            if value is not None and not isinstance(value, str):
                raise InvalidPatternError(
                    f"Template `{name}` must be a string, got {type(value).__name__}", key
                )
        if data is not None and not isinstance(data, Mapping):
            raise InvalidPatternError(f"Template `data` must be a mapping, got {type(data).__name__}", key)

        locals_ = merge_locals([parts.inline, parts.locals, shared.inline, shared.locals])
        options = merge_options([
            parts.options,
            extract_options(parts.locals),
            shared.options,
            extract_options(shared.locals),
            split_options_source(options_source),
        ])

        return TemplateRecord(
            path=path,
            content=content,
            orig=orig,
            data=dict(data) if data else None,
            locals=locals_,
            options=options,
            extra=parts.extra,
        )

    def _add(self, result: ResultSet, key: str, record: TemplateRecord) -> None:
        key = self.rename_key(key)
        if not result.add(key, record):
            logger.debug(f"Skipping duplicate template: {key}")


# Default loader instance (lazy loaded)
_default_loader: Loader | None = None


def get_default_loader() -> Loader:
    """Get or create the default loader."""
    global _default_loader
    if _default_loader is None:
        _default_loader = Loader()
    return _default_loader


def set_default_loader(loader: Loader | None) -> None:
    """Set the default loader (None resets to a fresh default on next use)."""
    global _default_loader
    _default_loader = loader


def normalize(pattern: Any, arg2: Any = None, arg3: Any = None, arg4: Any = None) -> ResultSet:
    """Normalize templates with the default loader. See `Loader.normalize`."""
    return get_default_loader().normalize(pattern, arg2, arg3, arg4)
