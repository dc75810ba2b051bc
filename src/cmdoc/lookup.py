# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Case-insensitive documentation lookup and rendering."""

import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType

import Levenshtein

from cmdoc.model import DocumentationRecord

logger = logging.getLogger(__name__)


def _normalize_key(name: str) -> str:
    return name.casefold()


class DocumentationTable:
    """Immutable mapping from entity name to documentation record.

    Keys are matched case-insensitively; each stored record keeps its
    original key. When two records share a key the later one wins.
    """

    def __init__(self, entries: dict[str, DocumentationRecord]) -> None:
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_records(cls, records: Iterable[DocumentationRecord]) -> "DocumentationTable":
        """Build a table from records in insertion order.

        Args:
            records: Records to index.

        Returns:
            The assembled table.
        """
        entries: dict[str, DocumentationRecord] = {}
        for record in records:
            normalized = _normalize_key(record.key)
            previous = entries.get(normalized)
            if previous is not None:
                logger.debug(
                    f"Record shadows earlier entry (key={record.key} previous_key={previous.key})"
                )
            entries[normalized] = record
        return cls(entries)

    def get(self, name: str) -> DocumentationRecord | None:
        """Return the record matching ``name`` in any case, if any."""
        return self._entries.get(_normalize_key(name))

    def records(self) -> list[DocumentationRecord]:
        """Return the stored records in insertion order."""
        return list(self._entries.values())

    def suggest(self, name: str, limit: int = 3, cutoff: float = 0.75) -> list[str]:
        """Return stored keys that closely resemble ``name``.

        Args:
            name: Queried name.
            limit: Maximum number of suggestions.
            cutoff: Minimum Levenshtein ratio for a key to qualify.

        Returns:
            Original-case keys ordered by descending similarity.
        """
        normalized = _normalize_key(name)
        scored = [
            (float(Levenshtein.ratio(normalized, candidate)), record.key)
            for candidate, record in self._entries.items()
        ]
        scored = [item for item in scored if item[0] >= cutoff]
        scored.sort(key=lambda item: (-item[0], item[1]))
        return [key for _, key in scored[:limit]]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _normalize_key(name) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return (record.key for record in self._entries.values())


def render_multiline(record: DocumentationRecord) -> str:
    """Render the synopsis and example on separate lines.

    Missing parts are left out; an empty example still follows the synopsis
    line. A record without either renders as an empty string.
    """
    return "\n".join(
        part for part in (record.synopsis, record.example) if part is not None
    )


def render_single_line(record: DocumentationRecord) -> str:
    """Render the synopsis flattened to one line; the example is never shown."""
    if not record.synopsis:
        return ""
    return " ".join(record.synopsis.splitlines())


class DocumentationLookup:
    """Resolve entity names against a documentation table."""

    def __init__(self, table: DocumentationTable) -> None:
        """Initialize the lookup engine.

        Args:
            table: Table assembled at build time.
        """
        self._table = table

    @property
    def table(self) -> DocumentationTable:
        return self._table

    def lookup(self, name: str, multiline_capable: bool) -> str | None:
        """Render the documentation snippet for ``name``.

        Args:
            name: Candidate entity name in any case.
            multiline_capable: Whether the caller can display several lines.

        Returns:
            The rendered snippet, possibly empty, or ``None`` for unknown names.
        """
        record = self._table.get(name)
        if record is None:
            return None
        if multiline_capable:
            return render_multiline(record)
        return render_single_line(record)
