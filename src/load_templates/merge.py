"""
Locals/options merging for template records.

A record's locals and options come from several sources, applied left to
right with the later source winning on conflict:

    locals:  record inline keys -> record `locals` -> shared inline keys
             -> shared `locals`
    options: record `options` -> shared `options` -> options argument

A nested `options` mapping inside any locals-source is pulled out into the
options stream before either stream is finalized.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

RECORD_FIELDS = ("path", "content", "orig", "data")


@dataclass
class RecordParts:
    """
    A record description split by role.

    Attributes:
        fields: Values for `path`, `content`, `orig` and `data`
        inline: Non-reserved keys, folded into locals
        locals: The explicit `locals` sub-mapping
        options: The explicit `options` sub-mapping
        extra: Pass-through keys kept on the record as-is
    """

    fields: dict[str, Any] = field(default_factory=dict)
    inline: dict[str, Any] = field(default_factory=dict)
    locals: dict[str, Any] = field(default_factory=dict)
    options: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)


def _sub_mapping(value: Any) -> dict[str, Any]:
    return dict(value) if isinstance(value, Mapping) else {}


def extract_options(source: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return the nested `options` mapping of a locals-source, or {}."""
    if not source:
        return {}
    return _sub_mapping(source.get("options"))


def split_record(
    description: Mapping[str, Any] | None,
    passthrough: Iterable[str] = (),
) -> RecordParts:
    """
    Split a record description into record fields, locals and options.

    Args:
        description: Mapping describing one template
        passthrough: Keys copied to `extra` instead of being folded into locals

    Example:
        >>> parts = split_record({"content": "c", "a": "b", "options": {"y": "z"}})
        >>> parts.fields, parts.inline, parts.options
        ({'content': 'c'}, {'a': 'b'}, {'y': 'z'})
    """
    parts = RecordParts()
    if not description:
        return parts

    passthrough = set(passthrough)
    for key, value in description.items():
        if key in RECORD_FIELDS:
            if value is not None:
                parts.fields[key] = value
        elif key == "locals":
            parts.locals = _sub_mapping(value)
        elif key == "options":
            parts.options = _sub_mapping(value)
        elif key in passthrough:
            parts.extra[key] = value
        else:
            parts.inline[key] = value
    return parts


def split_locals_source(source: Mapping[str, Any] | None) -> RecordParts:
    """
    Split a shared locals argument.

    Unlike a record description, no key fills a record field: `path`,
    `content`, `orig` and `data` are ordinary locals here. Only the nested
    `locals` and `options` mappings are unwrapped.
    """
    parts = RecordParts()
    if not source:
        return parts

    for key, value in source.items():
        if key == "locals":
            parts.locals = _sub_mapping(value)
        elif key == "options":
            parts.options = _sub_mapping(value)
        else:
            parts.inline[key] = value
    return parts


def split_options_source(source: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Flatten an options argument.

    Plain keys are options as-is; a nested `options` mapping is unwrapped on
    top of them. A nested `locals` key is not an option and is dropped.
    """
    if not source:
        return {}
    options = {k: v for k, v in source.items() if k not in ("locals", "options")}
    options.update(extract_options(source))
    return options


def merge_locals(sources: Iterable[Mapping[str, Any] | None]) -> dict[str, Any]:
    """Merge locals-sources left to right, skipping nested `options`."""
    merged: dict[str, Any] = {}
    for source in sources:
        if not source:
            continue
        for key, value in source.items():
            if key == "options":
                continue
            merged[key] = value
    return merged


def merge_options(sources: Iterable[Mapping[str, Any] | None]) -> dict[str, Any]:
    """Merge options-sources left to right."""
    merged: dict[str, Any] = {}
    for source in sources:
        if source:
            merged.update(source)
    return merged
