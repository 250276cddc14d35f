"""
Canonical template records.

A `TemplateRecord` is the single shape every `normalize` call produces,
whatever the caller passed in. Fields that had no source are kept as `None`
on the dataclass and left out of `to_dict()` entirely.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator

RESERVED_KEYS = ("path", "content", "orig", "data", "locals", "options")


@dataclass
class TemplateRecord:
    """
    A normalized template.

    Attributes:
        path: Template identifier, often (not always) a filesystem path
        content: Template body after front-matter removal
        orig: Raw source text as read from disk
        data: Parsed front-matter metadata
        locals: Render-time data
        options: Loader/engine configuration
        extra: Pass-through fields copied verbatim from the description
    """

    path: str
    content: str | None = None
    orig: str | None = None
    data: dict[str, Any] | None = None
    locals: dict[str, Any] | None = None
    options: dict[str, Any] | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # Empty containers are indistinguishable from "no source"
        if not self.data:
            self.data = None
        if not self.locals:
            self.locals = None
        if not self.options:
            self.options = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dict, omitting absent fields."""
        result: dict[str, Any] = {"path": self.path}
        if self.content is not None:
            result["content"] = self.content
        if self.orig is not None:
            result["orig"] = self.orig
        if self.data:
            result["data"] = dict(self.data)
        if self.locals:
            result["locals"] = dict(self.locals)
        if self.options:
            result["options"] = dict(self.options)
        for key, value in self.extra.items():
            if key not in result:
                result[key] = value
        return result

    def __getitem__(self, key: str) -> Any:
        return self.to_dict()[key]

    def __contains__(self, key: object) -> bool:
        return key in self.to_dict()

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_dict())

    def keys(self):
        return self.to_dict().keys()

    def get(self, key: str, default: Any = None) -> Any:
        return self.to_dict().get(key, default)


class ResultSet(dict):
    """
    Ordered mapping of key to `TemplateRecord`.

    Insertion order is discovery order. The first record stored under a key
    is kept; later records with the same key are dropped.
    """

    def add(self, key: str, record: TemplateRecord) -> bool:
        """Store a record unless the key is already taken."""
        if key in self:
            return False
        self[key] = record
        return True

    def merge(self, other: "ResultSet") -> None:
        for key, record in other.items():
            self.add(key, record)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Serialize every record with `TemplateRecord.to_dict`."""
        return {key: record.to_dict() for key, record in self.items()}
