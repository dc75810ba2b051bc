# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Static JSON artifact for the documentation table."""

import json
import logging
from collections.abc import Iterable
from dataclasses import asdict
from pathlib import Path
from typing import Any

from cmdoc.lookup import DocumentationTable
from cmdoc.model import DocumentationRecord
from cmdoc.table_builder import SourceError

logger = logging.getLogger(__name__)


class TableFormatError(RuntimeError):
    """Represent an unreadable or malformed table artifact."""


def table_payload(
    records: Iterable[DocumentationRecord], errors: Iterable[SourceError] = ()
) -> dict[str, list[dict[str, Any]]]:
    """Build the JSON-serializable artifact payload."""
    return {
        "records": [asdict(record) for record in records],
        "errors": [asdict(error) for error in errors],
    }


def write_table(
    records: Iterable[DocumentationRecord],
    output_path: Path,
    errors: Iterable[SourceError] = (),
) -> None:
    """Write the table artifact.

    Args:
        records: Records in source order.
        output_path: Target file path.
        errors: Per-file build errors kept alongside the records.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    payload = table_payload(records=records, errors=errors)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8"
    )


def read_table(path: Path) -> DocumentationTable:
    """Load a table artifact written by :func:`write_table`.

    Args:
        path: Artifact file path.

    Returns:
        The immutable documentation table.

    Raises:
        OSError: If the file cannot be read.
        TableFormatError: If the content is not a valid table artifact.
    """
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning(f"Table artifact is not valid JSON (path={path} error={exc})")
        raise TableFormatError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(payload, dict) or not isinstance(payload.get("records"), list):
        raise TableFormatError(f"Missing 'records' list in {path}")

    records = [
        _record_from_entry(entry, index)
        for index, entry in enumerate(payload["records"])
    ]
    logger.debug(f"Loaded table artifact (path={path} records={len(records)})")
    return DocumentationTable.from_records(records)


def _record_from_entry(entry: object, index: int) -> DocumentationRecord:
    if not isinstance(entry, dict):
        raise TableFormatError(f"Record {index} is not an object")
    key = entry.get("key")
    if not isinstance(key, str) or not key:
        raise TableFormatError(f"Record {index} has no key")
    synopsis = entry.get("synopsis")
    example = entry.get("example")
    for field_name, value in (("synopsis", synopsis), ("example", example)):
        if value is not None and not isinstance(value, str):
            raise TableFormatError(f"Record {index} ({key}) has a non-string {field_name}")
    return DocumentationRecord(key=key, synopsis=synopsis, example=example)
