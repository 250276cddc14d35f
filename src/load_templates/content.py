"""
Template content loading from files with front matter.

Format:
    ---
    title: AAA
    ---
    This is fixture a.md

Loading the file above yields:
    orig    = the full text, front matter included
    content = "This is fixture a.md"
    data    = {"title": "AAA"}
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from load_templates.protocol import FileSystem, FrontMatterParser

logger = logging.getLogger(__name__)


@dataclass
class LoadedContent:
    """
    Text read from a template file.

    Attributes:
        orig: Unmodified file text
        content: Body after front-matter removal
        data: Front-matter metadata (empty when the file has none)
    """

    orig: str
    content: str
    data: dict[str, Any] = field(default_factory=dict)


class ContentLoader:
    """
    Read template files and split off their front matter.

    Example:
        loader = ContentLoader(LocalFileSystem(), YamlFrontMatterParser())
        loaded = loader.load("templates/home.md")
        print(loaded.data.get("title"))
    """

    def __init__(
        self,
        filesystem: FileSystem,
        front_matter: FrontMatterParser,
        parse_front_matter: bool = True,
    ):
        self.filesystem = filesystem
        self.front_matter = front_matter
        self.parse_front_matter = parse_front_matter

    def load(self, path: str) -> LoadedContent:
        """
        Load a template file.

        Args:
            path: Path to the template file

        Returns:
            LoadedContent with raw text, body and front-matter data

        Raises:
            ReadError: If the file cannot be read
        """
        text = self.filesystem.read_text(path)
        if not self.parse_front_matter:
            return LoadedContent(orig=text, content=text)

        parsed = self.front_matter.parse(text)
        logger.debug(f"Loaded template file: {path} (front matter: {parsed.matched})")
        return LoadedContent(orig=text, content=parsed.content, data=dict(parsed.data))
