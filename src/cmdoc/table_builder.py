# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Assemble documentation records from source directories."""

import concurrent.futures
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from cmdoc.expander import TemplateExpander
from cmdoc.extractor import extract_snippet
from cmdoc.model import DocumentationRecord
from cmdoc.reader import DEFAULT_EXTENSION, iter_source_files, read_source_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceError:
    """Represent a source file that could not be read."""

    file_path: str
    message: str


@dataclass(frozen=True)
class BuildResult:
    """Represent the outcome of one pipeline run.

    Attributes:
        records: Records in source order; template files contribute one
            record per language.
        errors: Files skipped because they could not be read.
        file_count: Number of source files discovered.
    """

    records: list[DocumentationRecord]
    errors: list[SourceError]
    file_count: int


@dataclass(frozen=True)
class _FileOutcome:
    records: list[DocumentationRecord]
    error: SourceError | None = None


class TableBuilder:
    """Run reader, extractor and expander over documentation sources."""

    def __init__(
        self,
        extension: str = DEFAULT_EXTENSION,
        ignore_patterns: Sequence[str] = (),
        max_workers: int = 1,
        expander: TemplateExpander | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            extension: Suffix of documentation source files.
            ignore_patterns: Gitignore-style patterns excluded from each root.
            max_workers: Worker threads used to process files.
            expander: Template expander; defaults to all known languages.

        Raises:
            ValueError: If ``extension`` is empty or ``max_workers`` is not
                greater than zero.
        """
        if not extension:
            raise ValueError("extension must not be empty")
        if max_workers <= 0:
            raise ValueError("max_workers must be > 0")
        self._extension = extension
        self._ignore_patterns = tuple(ignore_patterns)
        self._max_workers = max_workers
        self._expander = expander or TemplateExpander()

    def build(self, roots: Iterable[Path]) -> BuildResult:
        """Build records from every source file under ``roots``.

        Args:
            roots: Documentation directories, processed in the given order.

        Returns:
            Records and recoverable per-file errors.

        Raises:
            SourceTreeError: If a root is not a directory.
        """
        file_paths: list[tuple[Path, Path]] = []
        for root_path in roots:
            file_paths.extend(
                (root_path, file_path)
                for file_path in iter_source_files(
                    root_path,
                    extension=self._extension,
                    ignore_patterns=self._ignore_patterns,
                )
            )

        if self._max_workers == 1:
            outcomes = [self._process_file(root, path) for root, path in file_paths]
        else:
            with concurrent.futures.ThreadPoolExecutor(
                max_workers=self._max_workers
            ) as executor:
                outcomes = list(
                    executor.map(lambda item: self._process_file(*item), file_paths)
                )

        records: list[DocumentationRecord] = []
        errors: list[SourceError] = []
        for outcome in outcomes:
            records.extend(outcome.records)
            if outcome.error is not None:
                errors.append(outcome.error)

        logger.info(
            f"Table build completed (files={len(file_paths)} records={len(records)} errors={len(errors)})"
        )
        return BuildResult(records=records, errors=errors, file_count=len(file_paths))

    def _process_file(self, root_path: Path, file_path: Path) -> _FileOutcome:
        relative_path = str(file_path.relative_to(root_path))
        try:
            source = read_source_file(file_path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                f"Skipping file due to read failure (file_path={relative_path} error={exc})"
            )
            return _FileOutcome(
                records=[], error=SourceError(file_path=relative_path, message=str(exc))
            )

        snippet = extract_snippet(source.text)
        if snippet.synopsis is None and snippet.example is None:
            logger.debug(f"No documentation extracted (file_path={relative_path})")
        return _FileOutcome(records=self._expander.expand(source.base_name, snippet))
