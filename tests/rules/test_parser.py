"""Tests for the steering document parser."""

from pathlib import Path

import pytest

from steering_rules.errors import InvalidInclusionModeError, MalformedHeaderError
from steering_rules.rules.models import InclusionMode, RuleDocument
from steering_rules.rules.parser import (
    parse_document,
    parse_rule_file,
    serialize_document,
)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "# Just Markdown\n\nNo header here.\n",
        "plain text without newline",
        "Intro\n---\nnot a header because it is not on the first line\n",
    ],
)
def test_no_header_keeps_text_as_body(text: str) -> None:
    document = parse_document(text)
    assert document.inclusion_mode == InclusionMode.ALWAYS
    assert document.body == text
    assert document.file_patterns == ()


def test_parse_all_fields() -> None:
    document = parse_document(
        "---\n"
        "title: Go conventions\n"
        "inclusionMode: fileMatch\n"
        'fileMatchPattern: "**/*.go, cmd/*.go"\n'
        "---\n"
        "Use table-driven tests.\n",
        name="go",
    )
    assert document.name == "go"
    assert document.title == "Go conventions"
    assert document.inclusion_mode == InclusionMode.FILE_MATCH
    assert document.file_patterns == ("**/*.go", "cmd/*.go")
    assert document.body == "Use table-driven tests.\n"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("always", InclusionMode.ALWAYS),
        ("manual", InclusionMode.MANUAL),
    ],
)
def test_parse_valid_modes(value: str, expected: InclusionMode) -> None:
    document = parse_document(f"---\ninclusionMode: {value}\n---\nbody\n")
    assert document.inclusion_mode == expected
    assert document.file_patterns == ()


@pytest.mark.parametrize("value", ["Always", "filematch", "auto", "true", "1", "''"])
def test_parse_invalid_mode(value: str) -> None:
    with pytest.raises(InvalidInclusionModeError):
        parse_document(f"---\ninclusionMode: {value}\n---\nbody\n")


def test_inclusion_alias_is_accepted() -> None:
    document = parse_document("---\ninclusion: manual\n---\nbody\n")
    assert document.inclusion_mode == InclusionMode.MANUAL


def test_inclusion_mode_wins_over_alias() -> None:
    document = parse_document("---\ninclusion: manual\ninclusionMode: always\n---\n")
    assert document.inclusion_mode == InclusionMode.ALWAYS


def test_unclosed_header_is_malformed() -> None:
    with pytest.raises(MalformedHeaderError):
        parse_document("---\ntitle: Broken\ninclusionMode: always\n\nBody text.\n")


def test_header_must_be_mapping() -> None:
    with pytest.raises(MalformedHeaderError):
        parse_document("---\n- a\n- b\n---\nbody\n")


def test_header_with_broken_syntax_is_malformed() -> None:
    with pytest.raises(MalformedHeaderError):
        parse_document("---\ntitle: [unclosed\n  nested\n---\nbody\n")


def test_file_match_without_patterns_is_malformed() -> None:
    with pytest.raises(MalformedHeaderError):
        parse_document("---\ninclusionMode: fileMatch\n---\nbody\n")


def test_unquoted_glob_header_is_accepted() -> None:
    document = parse_document(
        "---\ninclusionMode: fileMatch\nfileMatchPattern: **/*.go\n---\nbody\n"
    )
    assert document.file_patterns == ("**/*.go",)


def test_pattern_list_keeps_braces_together() -> None:
    document = parse_document(
        "---\n"
        "inclusionMode: fileMatch\n"
        'fileMatchPattern: "src/**/*.{ts,tsx}, docs/*.md"\n'
        "---\n"
    )
    assert document.file_patterns == ("src/**/*.{ts,tsx}", "docs/*.md")


def test_pattern_yaml_list_is_accepted() -> None:
    document = parse_document(
        "---\n"
        "inclusionMode: fileMatch\n"
        "fileMatchPattern:\n"
        '  - "*.tf"\n'
        '  - "modules/**/*.tf"\n'
        "---\n"
    )
    assert document.file_patterns == ("*.tf", "modules/**/*.tf")


def test_patterns_dropped_for_non_file_match_modes() -> None:
    document = parse_document(
        '---\ninclusionMode: always\nfileMatchPattern: "*.py"\n---\nbody\n'
    )
    assert document.file_patterns == ()


def test_unknown_keys_are_ignored() -> None:
    document = parse_document(
        "---\ntitle: Future\npriority: 3\nowner: platform\n---\nbody\n"
    )
    assert document.title == "Future"
    assert document.inclusion_mode == InclusionMode.ALWAYS


def test_empty_header_defaults() -> None:
    document = parse_document("---\n---\nbody\n", name="empty-header")
    assert document.title == "empty-header"
    assert document.inclusion_mode == InclusionMode.ALWAYS
    assert document.body == "body\n"


def test_crlf_line_endings() -> None:
    document = parse_document("---\r\ninclusionMode: manual\r\n---\r\nbody\r\n")
    assert document.inclusion_mode == InclusionMode.MANUAL
    assert document.body == "body\r\n"


def test_parse_rule_file_uses_stem(tmp_path: Path) -> None:
    path = tmp_path / "python-style.md"
    path.write_text("---\ntitle: Python\n---\nUse type hints.\n", encoding="utf-8")
    document = parse_rule_file(path)
    assert document.name == "python-style"
    assert document.source_path == path
    assert document.title == "Python"


def test_model_rejects_inconsistent_patterns() -> None:
    with pytest.raises(ValueError):
        RuleDocument(name="x", title="x", inclusion_mode=InclusionMode.FILE_MATCH)
    with pytest.raises(ValueError):
        RuleDocument(name="x", title="x", file_patterns=("*.py",))


def test_serialize_roundtrip() -> None:
    document = RuleDocument(
        name="go",
        title="Go conventions",
        inclusion_mode=InclusionMode.FILE_MATCH,
        file_patterns=("**/*.go", "go.{mod,sum}"),
        body="Body content.\n",
    )
    parsed = parse_document(serialize_document(document), name="go")
    assert parsed == document


def test_serialize_plain_document_is_body() -> None:
    document = RuleDocument(name="plain", title="plain", body="Just text.\n")
    assert serialize_document(document) == "Just text.\n"


def test_serialize_guards_body_that_looks_like_header() -> None:
    document = RuleDocument(name="rule", title="rule", body="---\nnot a header\n")
    parsed = parse_document(serialize_document(document), name="rule")
    assert parsed.body == document.body


def test_bom_before_header_is_ignored() -> None:
    document = parse_document("\ufeff---\ninclusionMode: manual\n---\nbody\n")
    assert document.inclusion_mode == InclusionMode.MANUAL
    assert document.body == "body\n"


def test_parse_rule_file_with_bom(tmp_path: Path) -> None:
    path = tmp_path / "bom.md"
    path.write_bytes(
        "---\ninclusionMode: fileMatch\nfileMatchPattern: '*.go'\n---\nbody\n".encode(
            "utf-8-sig"
        )
    )
    document = parse_rule_file(path)
    assert document.inclusion_mode == InclusionMode.FILE_MATCH
    assert document.file_patterns == ("*.go",)
    assert document.body == "body\n"
