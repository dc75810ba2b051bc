# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
import pytest

from cmdoc.expander import TemplateExpander, split_template_name
from cmdoc.languages import LANGUAGE_NAMES
from cmdoc.model import DocumentationRecord, ExtractedSnippet


def test_exp_001_template_name_expands_per_language_in_order() -> None:
    snippet = ExtractedSnippet(synopsis="S", example="E")

    records = TemplateExpander().expand("FOO_LANG_BAR", snippet)

    assert [record.key for record in records] == [
        f"FOO_{language}_BAR" for language in LANGUAGE_NAMES
    ]
    assert all(record.synopsis == "S" and record.example == "E" for record in records)
    assert "FOO_LANG_BAR" not in {record.key for record in records}


def test_exp_002_plain_name_yields_single_record() -> None:
    snippet = ExtractedSnippet(synopsis=None, example="E")

    records = TemplateExpander().expand("plainname", snippet)

    assert records == [DocumentationRecord(key="plainname", synopsis=None, example="E")]


@pytest.mark.parametrize(
    "base_name",
    ["_LANG_BAR", "FOO_LANG_", "LANG", "foo_LANG_bar", "CMAKE_LANG", "FOO_LANG_BAR2"],
)
def test_exp_003_non_template_names_fall_through(base_name: str) -> None:
    records = TemplateExpander().expand(base_name, ExtractedSnippet())

    assert [record.key for record in records] == [base_name]


def test_exp_004_split_template_name_keeps_underscored_parts() -> None:
    assert split_template_name("CMAKE_LANG_FLAGS_RELEASE") == (
        "CMAKE",
        "FLAGS_RELEASE",
    )
    assert split_template_name("CMAKE_LANG_COMPILER") == ("CMAKE", "COMPILER")
    assert split_template_name("add_executable") is None


def test_exp_005_custom_language_list_and_validation() -> None:
    expander = TemplateExpander(languages=["C", "CXX"])

    records = expander.expand("CMAKE_LANG_COMPILER", ExtractedSnippet(synopsis="S"))

    assert [record.key for record in records] == [
        "CMAKE_C_COMPILER",
        "CMAKE_CXX_COMPILER",
    ]
    with pytest.raises(ValueError):
        TemplateExpander(languages=[])


def test_exp_006_record_rejects_empty_key() -> None:
    with pytest.raises(ValueError):
        DocumentationRecord(key="")
