"""Threshold-based structural metrics."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from readme_score.document import Document, count_code_blocks, count_headings

MIN_LINES = 10
MAX_LINES = 200
LENGTH_MAX_POINTS = 10
LONG_DOCUMENT_POINTS = 5

MIN_HEADINGS = 3
MIN_CODE_BLOCKS = 1
FORMATTING_MAX_POINTS = 10

TOO_SHORT = "README is too short. Add more details."
TOO_LONG = "README is very long. Consider splitting into sections or separate docs."
FEW_HEADINGS = "Add more headings to organize your README."
NO_CODE_BLOCKS = "Add code blocks for examples or usage instructions."


@dataclass(frozen=True, slots=True)
class MetricOutcome:
    """Score derived from measured quantities rather than a boolean check."""

    name: str
    measurements: Mapping[str, int] = field(hash=False)
    points_awarded: int
    max_points: int
    remediation: str | None = None

    @property
    def satisfied(self) -> bool:
        return self.points_awarded == self.max_points


def measure_length(document: Document) -> MetricOutcome:
    lines = document.line_count
    if lines < MIN_LINES:
        points, remediation = 0, TOO_SHORT
    elif lines > MAX_LINES:
        points, remediation = LONG_DOCUMENT_POINTS, TOO_LONG
    else:
        points, remediation = LENGTH_MAX_POINTS, None
    return MetricOutcome(
        name="Length",
        measurements=MappingProxyType({"lines": lines}),
        points_awarded=points,
        max_points=LENGTH_MAX_POINTS,
        remediation=remediation,
    )


def measure_formatting(document: Document) -> MetricOutcome:
    headings = count_headings(document.text)
    code_blocks = count_code_blocks(document.text)
    if headings < MIN_HEADINGS:
        points, remediation = 0, FEW_HEADINGS
    elif code_blocks < MIN_CODE_BLOCKS:
        points, remediation = 0, NO_CODE_BLOCKS
    else:
        points, remediation = FORMATTING_MAX_POINTS, None
    return MetricOutcome(
        name="Formatting",
        measurements=MappingProxyType({"headings": headings, "code_blocks": code_blocks}),
        points_awarded=points,
        max_points=FORMATTING_MAX_POINTS,
        remediation=remediation,
    )
