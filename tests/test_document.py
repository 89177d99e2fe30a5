"""Tests for the document model and section extraction."""

from __future__ import annotations

from pathlib import Path

import pytest

from readme_score.document import (
    Document,
    InputUnavailableError,
    count_code_blocks,
    count_headings,
    extract_section,
    heading_levels,
    load_document,
)


def test_document_splits_lines_on_newline() -> None:
    document = Document.from_text("# Title\n\nbody\n")
    assert document.lines == ("# Title", "", "body", "")
    assert document.line_count == 4
    assert not document.is_blank


def test_empty_document_has_one_blank_line() -> None:
    document = Document.from_text("")
    assert document.line_count == 1
    assert document.is_blank


def test_heading_levels_and_counts() -> None:
    text = "# One\n## Two\ntext\n### Three\n#NotAHeading\n"
    assert heading_levels(text) == [1, 2, 3]
    assert count_headings(text) == 3


def test_code_block_count_ignores_unclosed_trailing_fence() -> None:
    text = "```\na\n```\n\n```\nb\n```\n\n```\nc"
    assert count_code_blocks(text) == 2


def test_extract_section_stops_at_next_top_level_heading() -> None:
    document = Document.from_text(
        "\n".join(
            [
                "# Project",
                "## Installation",
                "```bash",
                "pip install project",
                "```",
                "### From source",
                "clone it",
                "## Usage",
                "run it",
            ]
        )
    )
    body = extract_section(document, "Installation")
    assert body is not None
    assert "pip install project" in body
    assert "clone it" in body
    assert "run it" not in body


def test_extract_section_runs_to_end_of_document() -> None:
    document = Document.from_text("# Project\n## License\nMIT")
    assert extract_section(document, "License") == "MIT"


def test_extract_section_accepts_alternation_and_is_case_insensitive() -> None:
    document = Document.from_text("# Project\n## overview\nA tool.\n## Usage\nrun")
    assert extract_section(document, "Overview|Description") == "A tool."


def test_extract_section_returns_none_when_absent() -> None:
    document = Document.from_text("# Project\nNothing else.")
    assert extract_section(document, "Usage") is None


def test_extract_section_ends_at_first_subheading_after_title_match() -> None:
    document = Document.from_text("# Example Project\n\n## Installation\n```\npip install x\n```")
    assert extract_section(document, "Example") == ""


def test_load_document_reads_utf8(tmp_path: Path) -> None:
    path = tmp_path / "README.md"
    path.write_text("# Café\n", encoding="utf-8")
    document = load_document(path)
    assert document.text == "# Café\n"
    assert document.source == str(path)


def test_load_document_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(InputUnavailableError, match="does not exist"):
        load_document(tmp_path / "missing.md")


def test_load_document_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(InputUnavailableError, match="directory"):
        load_document(tmp_path)


def test_load_document_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "README.md"
    path.write_bytes(b"\xff\xfe\xfa not text")
    with pytest.raises(InputUnavailableError, match="UTF-8"):
        load_document(path)
