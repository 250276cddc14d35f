"""
TOML-based configuration for load-templates.

Supports named profiles, so one file can describe several loaders.

Example config (templates.toml):

    [default]
    cwd = "site"
    encoding = "utf-8"

    [default.front_matter]
    enabled = true
    delimiter = "---"

    [pages]
    cwd = "site/pages"
    key_style = "stem"
    passthrough_keys = ["layout"]
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Try to import tomllib (Python 3.11+) or tomli
try:
    import tomllib
except ImportError:
    import tomli as tomllib

KEY_STYLES = ("path", "basename", "stem")


@dataclass
class LoaderConfig:
    """
    Configuration for a template loader.

    Attributes:
        cwd: Working directory for file checks, reads and globs (None = process cwd)
        encoding: Text encoding used to read template files
        parse_front_matter: Whether loaded files are split into data + body
        front_matter_delimiter: Front-matter fence line
        key_style: How result keys are derived from template keys
            ("path" keeps them, "basename" and "stem" shorten file paths)
        passthrough_keys: Description keys kept on the record instead of
            being folded into locals
    """

    cwd: str | None = None
    encoding: str = "utf-8"
    parse_front_matter: bool = True
    front_matter_delimiter: str = "---"
    key_style: str = "path"
    passthrough_keys: list[str] = field(default_factory=list)

    def __post_init__(self):
        if self.key_style not in KEY_STYLES:
            raise ValueError(
                f"Invalid key_style: {self.key_style!r}. Must be one of {KEY_STYLES}"
            )
        if self.cwd is not None:
            self.cwd = str(self.cwd)
        self.passthrough_keys = list(self.passthrough_keys)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LoaderConfig":
        """Create config from dictionary (a TOML profile table)."""
        data = dict(data)
        front_matter = data.pop("front_matter", {})

        return cls(
            cwd=data.get("cwd"),
            encoding=data.get("encoding", "utf-8"),
            parse_front_matter=front_matter.get(
                "enabled", data.get("parse_front_matter", True)
            ),
            front_matter_delimiter=front_matter.get(
                "delimiter", data.get("front_matter_delimiter", "---")
            ),
            key_style=data.get("key_style", "path"),
            passthrough_keys=data.get("passthrough_keys", []),
        )

    @classmethod
    def from_toml(cls, path: str | Path, profile: str = "default") -> "LoaderConfig":
        """
        Load config from TOML file.

        Args:
            path: Path to TOML config file
            profile: Profile name to load (default: "default")

        Returns:
            Loaded LoaderConfig

        Raises:
            FileNotFoundError: If the file does not exist
            KeyError: If the profile is not in the file
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "rb") as f:
            data = tomllib.load(f)

        if profile not in data:
            available = list(data.keys())
            raise KeyError(
                f"Profile '{profile}' not found in config. "
                f"Available: {available}"
            )

        logger.info(f"Loaded config profile: {profile}")
        return cls.from_dict(data[profile])

    def to_dict(self) -> dict[str, Any]:
        """Serialize config to dictionary (TOML profile layout)."""
        result: dict[str, Any] = {
            "encoding": self.encoding,
            "key_style": self.key_style,
            "passthrough_keys": list(self.passthrough_keys),
            "front_matter": {
                "enabled": self.parse_front_matter,
                "delimiter": self.front_matter_delimiter,
            },
        }
        if self.cwd is not None:
            result["cwd"] = self.cwd
        return result


def load_config(path: str | Path | None = None, profile: str = "default") -> LoaderConfig:
    """
    Load configuration from a TOML file, or return the defaults.

    Args:
        path: Optional path to TOML config file
        profile: Profile name within TOML file

    Returns:
        Loaded LoaderConfig
    """
    if path is not None:
        return LoaderConfig.from_toml(path, profile)
    return LoaderConfig()
