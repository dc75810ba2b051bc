# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
import io
import json
from pathlib import Path

from cli.cmdoc_harness import run


def _write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _make_help_tree(root: Path) -> None:
    _write_file(
        root / "command" / "add_executable.rst",
        "add_executable\n--------------\n\n"
        "Add an executable to the project using the\nspecified source files.\n\n"
        "::\n\n  add_executable(<name> [WIN32])\n\n",
    )
    _write_file(
        root / "variable" / "CMAKE_LANG_COMPILER.rst",
        "CMAKE_<LANG>_COMPILER\n---\n\nThe full path to the compiler for ``LANG``.\n",
    )


def _build_table(tmp_path: Path) -> Path:
    root = tmp_path / "Help"
    _make_help_tree(root)
    output_path = tmp_path / "table.json"
    exit_code = run(
        ["build", "--path", str(root), "--format", "json", "--output", str(output_path)],
        stdout=io.StringIO(),
        stderr=io.StringIO(),
    )
    assert exit_code == 0
    return output_path


def test_cli_001_build_json_writes_records(tmp_path: Path) -> None:
    root = tmp_path / "Help"
    _make_help_tree(root)
    stdout = io.StringIO()
    stderr = io.StringIO()

    exit_code = run(
        ["build", "--path", str(root), "--format", "json"],
        stdout=stdout,
        stderr=stderr,
    )

    assert exit_code == 0
    payload = json.loads(stdout.getvalue())
    keys = [record["key"] for record in payload["records"]]
    assert keys[0] == "add_executable"
    assert "CMAKE_CXX_COMPILER" in keys
    assert payload["errors"] == []
    assert stderr.getvalue() == ""


def test_cli_002_build_table_format_lists_keys(tmp_path: Path) -> None:
    root = tmp_path / "Help"
    _make_help_tree(root)
    stdout = io.StringIO()

    exit_code = run(["build", "--path", str(root)], stdout=stdout, stderr=io.StringIO())

    assert exit_code == 0
    output = stdout.getvalue()
    assert "synopsis" in output
    assert "example" in output
    assert "None" not in output


def test_cli_003_build_missing_path_returns_2(tmp_path: Path) -> None:
    stderr = io.StringIO()

    exit_code = run(
        ["build", "--path", str(tmp_path / "missing")],
        stdout=io.StringIO(),
        stderr=stderr,
    )

    assert exit_code == 2
    assert "Not a directory" in stderr.getvalue()


def test_cli_004_build_rejects_non_positive_workers(tmp_path: Path) -> None:
    stderr = io.StringIO()

    exit_code = run(
        ["build", "--path", str(tmp_path), "--workers", "0"],
        stdout=io.StringIO(),
        stderr=stderr,
    )

    assert exit_code == 2
    assert "max_workers must be > 0" in stderr.getvalue()


def test_cli_009_build_rejects_empty_extension(tmp_path: Path) -> None:
    stdout = io.StringIO()
    stderr = io.StringIO()

    exit_code = run(
        ["build", "--path", str(tmp_path), "--extension", ""],
        stdout=stdout,
        stderr=stderr,
    )

    assert exit_code == 2
    assert stdout.getvalue() == ""
    assert stderr.getvalue() == "extension must not be empty\n"


def test_cli_005_lookup_renders_both_modes(tmp_path: Path) -> None:
    table_path = _build_table(tmp_path)
    multi = io.StringIO()
    single = io.StringIO()

    multi_code = run(
        ["lookup", "--table", str(table_path), "--name", "Add_Executable"],
        stdout=multi,
        stderr=io.StringIO(),
    )
    single_code = run(
        ["lookup", "--table", str(table_path), "--name", "ADD_EXECUTABLE", "--single-line"],
        stdout=single,
        stderr=io.StringIO(),
    )

    assert multi_code == 0
    assert single_code == 0
    assert multi.getvalue() == (
        "Add an executable to the project using the\nspecified source files.\n"
        "  add_executable(<name> [WIN32])\n"
    )
    assert single.getvalue() == (
        "Add an executable to the project using the specified source files.\n"
    )


def test_cli_006_lookup_unknown_name_suggests_keys(tmp_path: Path) -> None:
    table_path = _build_table(tmp_path)
    stdout = io.StringIO()
    stderr = io.StringIO()

    exit_code = run(
        ["lookup", "--table", str(table_path), "--name", "add_executabel"],
        stdout=stdout,
        stderr=stderr,
    )

    assert exit_code == 1
    assert stdout.getvalue() == ""
    assert "add_executable" in stderr.getvalue()


def test_cli_007_lookup_bad_table_returns_2(tmp_path: Path) -> None:
    table_path = tmp_path / "table.json"
    table_path.write_text("[]", encoding="utf-8")
    stderr = io.StringIO()

    exit_code = run(
        ["lookup", "--table", str(table_path), "--name", "x"],
        stdout=io.StringIO(),
        stderr=stderr,
    )

    assert exit_code == 2
    assert "Failed to load table artifact" in stderr.getvalue()


def test_cli_008_invalid_arguments_return_2() -> None:
    assert run(["unknown"], stdout=io.StringIO(), stderr=io.StringIO()) == 2
