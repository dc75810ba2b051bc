# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Expansion of language-templated entity names."""

import logging
import re
from collections.abc import Sequence

from cmdoc.languages import LANGUAGE_NAMES
from cmdoc.model import DocumentationRecord, ExtractedSnippet

logger = logging.getLogger(__name__)

_TEMPLATE_NAME = re.compile(r"([A-Z_]+)_LANG_([A-Z_]+)")


def split_template_name(base_name: str) -> tuple[str, str] | None:
    """Split a ``<PREFIX>_LANG_<SUFFIX>`` name into prefix and suffix.

    Returns:
        The prefix and suffix, or ``None`` when the name is not a template.
    """
    match = _TEMPLATE_NAME.fullmatch(base_name)
    if match is None:
        return None
    return match.group(1), match.group(2)


class TemplateExpander:
    """Turn one extracted snippet into documentation records."""

    def __init__(self, languages: Sequence[str] = LANGUAGE_NAMES) -> None:
        """Initialize the expander.

        Args:
            languages: Ordered names substituted for the ``LANG`` placeholder.

        Raises:
            ValueError: If ``languages`` is empty.
        """
        if not languages:
            raise ValueError("languages must not be empty")
        self._languages = tuple(languages)

    def expand(
        self, base_name: str, snippet: ExtractedSnippet
    ) -> list[DocumentationRecord]:
        """Build the records for one source file.

        Args:
            base_name: Source file name without extension.
            snippet: Fields extracted from the file.

        Returns:
            One record per language for template names, in language order;
            otherwise a single record keyed by ``base_name``.
        """
        parts = split_template_name(base_name)
        if parts is None:
            return [
                DocumentationRecord(
                    key=base_name, synopsis=snippet.synopsis, example=snippet.example
                )
            ]
        prefix, suffix = parts
        logger.debug(
            f"Expanding template name (base_name={base_name} languages={len(self._languages)})"
        )
        return [
            DocumentationRecord(
                key=f"{prefix}_{language}_{suffix}",
                synopsis=snippet.synopsis,
                example=snippet.example,
            )
            for language in self._languages
        ]
