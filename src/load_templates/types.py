"""
Runtime shape classification for `normalize` arguments.

Every layer of the normalizer dispatches on the kind reported here rather
than on concrete Python types.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from load_templates.record import TemplateRecord


class Kind(str, Enum):
    """Semantic kind of a `normalize` argument."""

    STRING = "string"
    PLAIN_OBJECT = "plain_object"
    ARRAY = "array"
    OTHER = "other"


def classify(value: Any) -> Kind:
    """
    Report the semantic kind of a value.

    Any `Mapping` and any `TemplateRecord` count as plain objects, `list`
    and `tuple` as arrays. Everything else, including `None`, numbers and
    bytes, is `Kind.OTHER`.

    Examples:
        >>> classify("a.md")
        <Kind.STRING: 'string'>
        >>> classify({"path": "a.md"})
        <Kind.PLAIN_OBJECT: 'plain_object'>
        >>> classify(["*.md"])
        <Kind.ARRAY: 'array'>
        >>> classify(42)
        <Kind.OTHER: 'other'>
    """
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (Mapping, TemplateRecord)):
        return Kind.PLAIN_OBJECT
    if isinstance(value, (list, tuple)):
        return Kind.ARRAY
    return Kind.OTHER


def is_mapping(value: Any) -> bool:
    return classify(value) is Kind.PLAIN_OBJECT


def as_mapping(value: Any) -> Mapping[str, Any]:
    """Return a plain-object value as a mapping (records via `to_dict`)."""
    if isinstance(value, TemplateRecord):
        return value.to_dict()
    return value
