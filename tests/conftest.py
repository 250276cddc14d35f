"""
Shared pytest fixtures for load-templates.

Fixture files are written under `tmp_path` so every test gets a fresh tree:

    fixtures/a.md        front matter (title: AAA)
    fixtures/b.md        no front matter
    fixtures/one/a.md    front matter (title: One)
    fixtures/a.txt       front matter (title: AAA)
    fixtures/b.txt       front matter (title: BBB)
    fixtures/c.txt       front matter (title: CCC)

Example Usage:
    # Run unit tests only
    pytest -m unit
"""

from pathlib import Path

import pytest

from load_templates import Loader, LoaderConfig, set_default_loader

FIXTURE_FILES = {
    "fixtures/a.md": "---\ntitle: AAA\n---\nThis is fixture a.md",
    "fixtures/b.md": "This is fixture b.md",
    "fixtures/one/a.md": "---\ntitle: One\n---\nThis is {{title}}",
    "fixtures/a.txt": "---\ntitle: AAA\n---\nThis is from a.txt.",
    "fixtures/b.txt": "---\ntitle: BBB\n---\nThis is from b.txt.",
    "fixtures/c.txt": "---\ntitle: CCC\n---\nThis is from c.txt.",
}


def write_files(root: Path, files: dict[str, str]) -> None:
    for name, text in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")


@pytest.fixture
def fixture_root(tmp_path):
    """Temporary directory populated with the fixture templates."""
    write_files(tmp_path, FIXTURE_FILES)
    return tmp_path


@pytest.fixture
def loader(fixture_root):
    """Loader rooted at the fixture directory."""
    return Loader(LoaderConfig(cwd=str(fixture_root)))


@pytest.fixture
def in_fixture_root(fixture_root, monkeypatch):
    """Run with the fixture directory as cwd and a fresh default loader."""
    monkeypatch.chdir(fixture_root)
    set_default_loader(None)
    yield fixture_root
    set_default_loader(None)


@pytest.fixture
def test_config_file(tmp_path):
    """Create a temporary test config file."""
    config_path = tmp_path / "templates.toml"
    config_path.write_text(
        """
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

[raw]
parse_front_matter = false
"""
    )
    return config_path
