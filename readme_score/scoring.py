"""Scoring orchestration."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from readme_score.document import Document
from readme_score.evaluator import evaluate_catalog
from readme_score.metrics import (
    FORMATTING_MAX_POINTS,
    LENGTH_MAX_POINTS,
    MetricOutcome,
    measure_formatting,
    measure_length,
)
from readme_score.rules import EXTRA_CATALOG, PRIMARY_CATALOG, Catalog
from readme_score.rules.base import RuleOutcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """Complete result of one analysis run."""

    total_score: int
    max_score: int
    sections: Mapping[str, RuleOutcome] = field(hash=False)
    length: MetricOutcome
    formatting: MetricOutcome
    extras: Mapping[str, RuleOutcome] = field(hash=False)
    suggestions: tuple[str, ...]

    @property
    def percent(self) -> int:
        """Score as a whole percentage, rounding halves up."""
        return score_percent(self.total_score, self.max_score)


def score_percent(score: int, max_score: int) -> int:
    if max_score <= 0:
        return 0
    return (score * 200 + max_score) // (max_score * 2)


def max_attainable_score(
    primary: Catalog = PRIMARY_CATALOG,
    extras: Catalog = EXTRA_CATALOG,
) -> int:
    """Return the fixed maximum score for the given catalogs."""
    return primary.max_score + LENGTH_MAX_POINTS + FORMATTING_MAX_POINTS + extras.max_score


def analyze_text(text: str, *, source: str = "<memory>") -> AnalysisReport:
    """Analyze raw README text."""
    return analyze(Document.from_text(text, source=source))


def analyze(
    document: Document,
    *,
    primary: Catalog = PRIMARY_CATALOG,
    extras: Catalog = EXTRA_CATALOG,
) -> AnalysisReport:
    """Evaluate sections, length, formatting, then extras into one report.

    Suggestions follow that evaluation order, one per unsatisfied rule or
    metric that carries a remediation message.
    """
    section_outcomes = evaluate_catalog(primary, document)
    length = measure_length(document)
    formatting = measure_formatting(document)
    extra_outcomes = evaluate_catalog(extras, document)

    suggestions: list[str] = []
    suggestions.extend(_remediations(section_outcomes.values()))
    for metric in (length, formatting):
        if metric.remediation:
            suggestions.append(metric.remediation)
    suggestions.extend(_remediations(extra_outcomes.values()))

    total_score = (
        sum(outcome.points_awarded for outcome in section_outcomes.values())
        + length.points_awarded
        + formatting.points_awarded
        + sum(outcome.points_awarded for outcome in extra_outcomes.values())
    )
    max_score = max_attainable_score(primary, extras)
    logger.debug(
        "Analyzed %s: %d/%d with %d suggestions",
        document.source,
        total_score,
        max_score,
        len(suggestions),
    )

    return AnalysisReport(
        total_score=total_score,
        max_score=max_score,
        sections=MappingProxyType(section_outcomes),
        length=length,
        formatting=formatting,
        extras=MappingProxyType(extra_outcomes),
        suggestions=tuple(suggestions),
    )


def _remediations(outcomes: Iterable[RuleOutcome]) -> list[str]:
    return [
        outcome.remediation
        for outcome in outcomes
        if not outcome.satisfied and outcome.remediation
    ]
