# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Read documentation source files from disk."""

import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

import pathspec

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".rst"


class SourceTreeError(RuntimeError):
    """Represent a documentation directory that cannot be walked."""


@dataclass(frozen=True)
class RawSourceFile:
    """Represent the full text of one documentation source file.

    Attributes:
        path: Location of the file on disk.
        base_name: File name without its extension; the default record key.
        text: Unmodified file contents.
    """

    path: Path
    base_name: str
    text: str


class IgnoreMatcher:
    """Match source paths against gitignore-style exclusion patterns."""

    def __init__(self, spec: pathspec.GitIgnoreSpec) -> None:
        self._spec = spec

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> "IgnoreMatcher":
        """Compile exclusion patterns.

        Args:
            patterns: Gitignore-style pattern lines.

        Returns:
            Configured ignore matcher.
        """
        return cls(spec=pathspec.GitIgnoreSpec.from_lines(list(patterns)))

    def matches(self, relative_path: str) -> bool:
        """Check whether a root-relative path is excluded."""
        normalized = relative_path.replace(os.sep, "/").strip("/")
        if not normalized:
            return False
        return bool(self._spec.match_file(normalized))


def read_source_file(path: Path) -> RawSourceFile:
    """Read one documentation source file.

    Args:
        path: File to read.

    Returns:
        The file text together with its base name.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    text = path.read_text(encoding="utf-8")
    return RawSourceFile(path=path, base_name=path.stem, text=text)


def iter_source_files(
    root_path: Path,
    extension: str = DEFAULT_EXTENSION,
    ignore_patterns: Iterable[str] = (),
) -> Iterator[Path]:
    """Yield documentation files beneath a root in sorted order.

    Args:
        root_path: Directory holding documentation sources.
        extension: File suffix to select, including the leading dot.
        ignore_patterns: Gitignore-style patterns relative to ``root_path``.

    Yields:
        Paths of matching files.

    Raises:
        SourceTreeError: If ``root_path`` is not a directory.
    """
    if not root_path.is_dir():
        logger.warning(f"Documentation root is not a directory (root_path={root_path})")
        raise SourceTreeError(f"Not a directory: {root_path}")

    matcher = IgnoreMatcher.from_patterns(ignore_patterns)
    for file_path in sorted(root_path.rglob(f"*{extension}")):
        if not file_path.is_file():
            continue
        relative_path = file_path.relative_to(root_path).as_posix()
        if matcher.matches(relative_path):
            logger.debug(f"Skipping excluded file (file_path={relative_path})")
            continue
        yield file_path
