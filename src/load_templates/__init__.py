"""
load-templates: normalize template descriptions into canonical records.

Main exports:
- normalize: Module-level entry point using the default Loader
- Loader: Configurable normalizer with pluggable filesystem/glob/front matter
- TemplateRecord, ResultSet: Canonical output types
- LoaderConfig, load_config: TOML-based configuration
- InvalidPatternError, ReadError: Errors raised while normalizing
"""

__version__ = "0.1.0"

# Output types
from load_templates.record import ResultSet, TemplateRecord

# Errors
from load_templates.errors import InvalidPatternError, LoaderError, ReadError

# Configuration
from load_templates.config import LoaderConfig, load_config

# Collaborators
from load_templates.protocol import FileSystem, FrontMatterParser, GlobEngine, ParsedFrontMatter
from load_templates.filesystem import LocalFileSystem
from load_templates.frontmatter import YamlFrontMatterParser, parse_front_matter
from load_templates.resolver import KeyKind, PathResolver, StdlibGlobEngine, expand_braces, is_glob
from load_templates.content import ContentLoader, LoadedContent

# Classification and merging
from load_templates.types import Kind, classify
from load_templates.merge import merge_locals, merge_options

# Normalizer
from load_templates.normalize import Loader, get_default_loader, normalize, set_default_loader

__all__ = [
    # Version
    "__version__",
    # Output types
    "ResultSet",
    "TemplateRecord",
    # Errors
    "InvalidPatternError",
    "LoaderError",
    "ReadError",
    # Configuration
    "LoaderConfig",
    "load_config",
    # Collaborators
    "FileSystem",
    "FrontMatterParser",
    "GlobEngine",
    "ParsedFrontMatter",
    "LocalFileSystem",
    "YamlFrontMatterParser",
    "parse_front_matter",
    "KeyKind",
    "PathResolver",
    "StdlibGlobEngine",
    "expand_braces",
    "is_glob",
    "ContentLoader",
    "LoadedContent",
    # Classification and merging
    "Kind",
    "classify",
    "merge_locals",
    "merge_options",
    # Normalizer
    "Loader",
    "get_default_loader",
    "normalize",
    "set_default_loader",
]
