"""Path table — YAML path entries compiled into a read-only lookup.

The table is built once, before any handler is installed, and never
changes afterwards. Lookups are exact and case-sensitive::

    entries = parse_yaml(b"- path: /docs\\n  url: https://example.com/docs\\n")
    table = build_table(entries)
    table["/docs"]  # "https://example.com/docs"
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, TypeAlias

import yaml

from urlshort.errors import ParseError

logger = logging.getLogger("urlshort.table")

PathTable: TypeAlias = Mapping[str, str]

# YAML null spellings; a null value reads as an empty string
_NULLS = frozenset({"~", "null", "Null", "NULL"})


@dataclass(frozen=True, slots=True)
class PathEntry:
    """One ``path -> url`` pair from the source document."""

    path: str = ""
    url: str = ""


def parse_yaml(data: bytes | str, *, source: str | None = None) -> tuple[PathEntry, ...]:
    """Deserialize a YAML sequence of ``{path, url}`` mappings.

    Missing or null ``path`` / ``url`` values default to the empty string.
    Other scalars keep their source text (``yes`` stays ``"yes"``);
    nothing is checked beyond structure.

    Args:
        data: Raw YAML document.
        source: Optional label (e.g. a filename) included in error messages.

    Raises:
        ParseError: If the YAML is malformed, or the document is not a
            sequence of mappings.
    """
    try:
        # BaseLoader keeps every scalar as its source text ("yes", "0123")
        payload = yaml.load(data, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise ParseError(f"invalid YAML: {exc}", source=source) from exc

    if payload is None:
        return ()
    if not isinstance(payload, list):
        msg = f"expected a top-level sequence, got {type(payload).__name__}"
        raise ParseError(msg, source=source)

    return tuple(_entry(item, index, source) for index, item in enumerate(payload))


def _entry(item: Any, index: int, source: str | None) -> PathEntry:
    if not isinstance(item, Mapping):
        msg = f"entry {index}: expected a mapping, got {type(item).__name__}"
        raise ParseError(msg, source=source)
    return PathEntry(
        path=_scalar(item.get("path"), "path", index, source),
        url=_scalar(item.get("url"), "url", index, source),
    )


def _scalar(value: Any, key: str, index: int, source: str | None) -> str:
    if isinstance(value, (Mapping, list)):
        msg = f"entry {index}: {key!r} must be a scalar, got {type(value).__name__}"
        raise ParseError(msg, source=source)
    if value is None or value in _NULLS:
        return ""
    return value


def entries_from_mapping(mapping: Mapping[str, str]) -> tuple[PathEntry, ...]:
    """Adapt an in-memory ``{path: url}`` table into entries, in insertion order."""
    return tuple(PathEntry(path=path, url=url) for path, url in mapping.items())


def build_table(entries: Iterable[PathEntry]) -> PathTable:
    """Insert entries in order into a fresh table. Last write wins."""
    table: dict[str, str] = {}
    for entry in entries:
        if entry.path in table:
            logger.debug(
                "Path %r redefined: %r replaces %r", entry.path, entry.url, table[entry.path]
            )
        table[entry.path] = entry.url
    logger.debug("Built path table with %d entries", len(table))
    return MappingProxyType(table)


def load_table(data: bytes | str, *, source: str | None = None) -> PathTable:
    """Parse a YAML document and build its table in one step.

    Either the whole table is built or ``ParseError`` propagates.
    """
    return build_table(parse_yaml(data, source=source))
