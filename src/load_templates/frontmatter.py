"""
YAML front-matter parsing.

Format:
    ---
    title: Home
    layout: default
    ---
    This is {{title}}

The block must open on the first line of the file and close with the
delimiter alone on a later line. Everything after the closing line is the
template body, kept byte for byte.
"""

import logging
import re
from typing import Any

import yaml

from load_templates.protocol import ParsedFrontMatter

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "---"


class YamlFrontMatterParser:
    """
    Split raw template text into front-matter data and body.

    Example:
        parser = YamlFrontMatterParser()
        parsed = parser.parse("---\\ntitle: AAA\\n---\\nThis is a.md")
        parsed.data     # {'title': 'AAA'}
        parsed.content  # 'This is a.md'
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER):
        if not delimiter or delimiter != delimiter.strip():
            raise ValueError(f"Invalid front-matter delimiter: {delimiter!r}")
        self.delimiter = delimiter
        fence = re.escape(delimiter)
        self._pattern = re.compile(
            rf"\A{fence}[ \t]*\r?\n(?P<block>.*?)^{fence}[ \t]*(?:\r?\n|\Z)",
            re.DOTALL | re.MULTILINE,
        )

    def parse(self, text: str) -> ParsedFrontMatter:
        match = self._pattern.match(text)
        if match is None:
            return ParsedFrontMatter(content=text)

        try:
            data = yaml.safe_load(match.group("block"))
        except yaml.YAMLError as e:
            logger.warning(f"Failed to parse front matter: {e}")
            return ParsedFrontMatter(content=text)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            logger.warning(
                f"Ignoring front matter: expected a mapping, got {type(data).__name__}"
            )
            return ParsedFrontMatter(content=text)

        return ParsedFrontMatter(
            content=text[match.end():],
            data=data,
            matched=True,
        )


def parse_front_matter(text: str, delimiter: str = DEFAULT_DELIMITER) -> tuple[dict[str, Any], str]:
    """
    Parse YAML front matter from template text.

    Args:
        text: Raw template text
        delimiter: Front-matter fence (default: ---)

    Returns:
        Tuple of (front-matter dict, body content)
    """
    parsed = YamlFrontMatterParser(delimiter).parse(text)
    return parsed.data, parsed.content
