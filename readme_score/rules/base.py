"""Rule definition and outcome models."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from readme_score.document import Document

Predicate = Callable[[Document], bool]


class CatalogError(ValueError):
    """Raised when a rule catalog is inconsistent."""


@dataclass(frozen=True, slots=True)
class RuleDefinition:
    """A named, weighted check against the document text."""

    name: str
    predicate: Predicate
    weight: int
    remediation: str


@dataclass(frozen=True, slots=True)
class RuleOutcome:
    """Result of applying one rule to one document."""

    rule_name: str
    satisfied: bool
    points_awarded: int
    weight: int
    remediation: str | None = None
    error: str | None = None
