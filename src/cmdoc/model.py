# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for documentation snippets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractedSnippet:
    """Represent the raw extraction result for one source file.

    Attributes:
        synopsis: First sentence of the opening paragraph; ``None`` if not found.
        example: First literal block after the synopsis; ``None`` if not found.
    """

    synopsis: str | None = None
    example: str | None = None


@dataclass(frozen=True)
class DocumentationRecord:
    """Represent one entry of the documentation table.

    Attributes:
        key: Entity name as found in the sources. Matching is case-insensitive.
        synopsis: One-sentence description, or ``None``.
        example: Verbatim usage block, or ``None``.
    """

    key: str
    synopsis: str | None = None
    example: str | None = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("DocumentationRecord key must not be empty")
