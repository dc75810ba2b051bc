# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
import json
from pathlib import Path

import pytest

from cmdoc.model import DocumentationRecord
from cmdoc.table_builder import SourceError
from cmdoc.table_io import TableFormatError, read_table, write_table


def test_io_001_written_table_loads_back(tmp_path: Path) -> None:
    output_path = tmp_path / "out" / "table.json"
    records = [
        DocumentationRecord(key="add_executable", synopsis="S", example="E"),
        DocumentationRecord(key="EMPTY"),
    ]

    write_table(
        records=records,
        output_path=output_path,
        errors=[SourceError(file_path="broken.rst", message="bad")],
    )
    table = read_table(output_path)

    assert table.records() == records
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["errors"] == [{"file_path": "broken.rst", "message": "bad"}]
    assert payload["records"][1] == {"example": None, "key": "EMPTY", "synopsis": None}


def test_io_002_invalid_json_raises_format_error(tmp_path: Path) -> None:
    path = tmp_path / "table.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(TableFormatError):
        read_table(path)


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"records": {}},
        {"records": ["x"]},
        {"records": [{"key": ""}]},
        {"records": [{"key": "a", "synopsis": 3}]},
    ],
)
def test_io_003_malformed_payload_raises_format_error(
    tmp_path: Path, payload: object
) -> None:
    path = tmp_path / "table.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(TableFormatError):
        read_table(path)


def test_io_004_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_table(tmp_path / "missing.json")
