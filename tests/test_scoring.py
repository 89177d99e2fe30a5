"""Tests for report aggregation."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from readme_score.document import Document
from readme_score.metrics import TOO_LONG, TOO_SHORT
from readme_score.rules import EXTRA_CATALOG, PRIMARY_CATALOG, RuleDefinition, build_catalog
from readme_score.scoring import AnalysisReport, analyze, analyze_text, max_attainable_score

WELL_FORMED_LINES = [
    "# Project Name",
    "",
    "A tool that scores README files.",
    "",
    "## Installation",
    "```bash",
    "pip install project-name",
    "```",
    "## Usage",
    "```python",
    "import project_name",
    "```",
    "## License",
    "",
    "Released under the MIT License.",
]

SAMPLES = [
    "",
    "hello",
    "\n".join(WELL_FORMED_LINES),
    "# A\n## B\n## C\n#### D\nTODO\n[broken](http://x",
    "\n".join(["# Title", "![a](b)", "![c](d)", "> quote", "| a | b |", "|---|---|"] * 40),
]


def test_max_score_is_fixed() -> None:
    assert max_attainable_score() == 121
    for text in SAMPLES:
        assert analyze_text(text).max_score == 121


@pytest.mark.parametrize("text", SAMPLES)
def test_total_is_sum_of_contributions_and_bounded(text: str) -> None:
    report = analyze_text(text)
    expected = (
        sum(item.points_awarded for item in report.sections.values())
        + report.length.points_awarded
        + report.formatting.points_awarded
        + sum(item.points_awarded for item in report.extras.values())
    )
    assert report.total_score == expected
    assert 0 <= report.total_score <= report.max_score


@pytest.mark.parametrize("text", SAMPLES)
def test_suggestions_follow_evaluation_order(text: str) -> None:
    report = analyze_text(text)
    expected = [item.remediation for item in report.sections.values() if not item.satisfied]
    expected += [
        metric.remediation for metric in (report.length, report.formatting) if metric.remediation
    ]
    expected += [item.remediation for item in report.extras.values() if not item.satisfied]
    assert list(report.suggestions) == expected


def test_analyze_is_idempotent() -> None:
    text = "\n".join(WELL_FORMED_LINES)
    assert analyze_text(text) == analyze_text(text)


def test_empty_document_scores_zero() -> None:
    report = analyze_text("")
    assert report.total_score == 0
    assert report.percent == 0
    assert len(report.suggestions) == 28


def test_minimal_document() -> None:
    report = analyze_text("hello")
    assert report.length.points_awarded == 0
    assert report.length.remediation == TOO_SHORT
    assert report.formatting.points_awarded == 0
    assert report.formatting.measurements["headings"] == 0
    assert report.sections["Title"].satisfied is False
    assert all(not item.satisfied for item in report.sections.values())
    assert report.total_score == 6
    assert len(report.suggestions) == 25
    assert report.suggestions[:8] == tuple(rule.remediation for rule in PRIMARY_CATALOG)
    assert report.suggestions[8] == TOO_SHORT


def test_well_formed_document() -> None:
    report = analyze_text("\n".join(WELL_FORMED_LINES))
    assert report.length.measurements["lines"] == 15
    for name in ("Title", "Installation", "Usage", "License"):
        assert report.sections[name].satisfied, name
    assert report.length.points_awarded == 10
    assert report.formatting.points_awarded == 10
    for name in (
        "Installation Section Has Code",
        "Usage Section Has Code",
        "License Section Has License Name",
    ):
        assert report.extras[name].satisfied, name


def test_long_document_only_changes_length_score() -> None:
    base = analyze_text("\n".join(WELL_FORMED_LINES))
    padded = WELL_FORMED_LINES + ["More details about the license."] * 235
    report = analyze_text("\n".join(padded))
    assert report.length.measurements["lines"] == 250
    assert report.length.points_awarded == 5
    assert TOO_LONG in report.suggestions
    assert report.formatting.points_awarded == base.formatting.points_awarded
    assert report.sections == base.sections
    assert report.extras == base.extras
    assert report.total_score == base.total_score - 5


def test_inconsistent_heading_levels() -> None:
    report = analyze_text("# One\n## Two\n## Three\n#### Four\n")
    assert report.extras["Consistent Heading Levels"].satisfied is False


def test_faulty_rule_degrades_score_without_aborting() -> None:
    def explode(document: Document) -> bool:
        raise ValueError("bad pattern")

    extras = build_catalog(
        "extras",
        [
            RuleDefinition(name="Explodes", predicate=explode, weight=3, remediation="Boom."),
            *EXTRA_CATALOG,
        ],
    )
    report = analyze(Document.from_text("hello"), extras=extras)
    assert report.extras["Explodes"].satisfied is False
    assert report.extras["Explodes"].error == "ValueError: bad pattern"
    assert len(report.extras) == 19
    assert report.max_score == 124
    assert "Boom." in report.suggestions


def test_percent_rounds_half_up() -> None:
    report = analyze_text("hello")
    halfway = AnalysisReport(
        total_score=1,
        max_score=8,
        sections=report.sections,
        length=report.length,
        formatting=report.formatting,
        extras=report.extras,
        suggestions=report.suggestions,
    )
    assert halfway.percent == 13


def test_report_is_immutable_and_hashable() -> None:
    report = analyze_text("hello")
    with pytest.raises(FrozenInstanceError):
        report.total_score = 121  # type: ignore[misc]
    with pytest.raises(TypeError):
        report.sections["Title"] = report.sections["Badges"]  # type: ignore[index]
    with pytest.raises(TypeError):
        report.extras["Links"] = report.extras["Lists"]  # type: ignore[index]
    with pytest.raises(TypeError):
        report.length.measurements["lines"] = 999  # type: ignore[index]
    assert report.length.measurements["lines"] == 1
    assert hash(report) == hash(analyze_text("hello"))
