"""Per-rule evaluation with local fault isolation."""

from __future__ import annotations

import logging

from readme_score.document import Document
from readme_score.rules import Catalog
from readme_score.rules.base import RuleDefinition, RuleOutcome

logger = logging.getLogger(__name__)


def evaluate(rule: RuleDefinition, document: Document) -> RuleOutcome:
    """Apply one rule to a document.

    A predicate that raises is treated as not satisfied; the fault is recorded
    on the outcome and never propagates to the caller.
    """
    error: str | None = None
    try:
        satisfied = bool(rule.predicate(document))
    except Exception as exc:
        logger.debug("Rule %r failed on %s: %r", rule.name, document.source, exc)
        satisfied = False
        error = f"{exc.__class__.__name__}: {exc}"

    return RuleOutcome(
        rule_name=rule.name,
        satisfied=satisfied,
        points_awarded=rule.weight if satisfied else 0,
        weight=rule.weight,
        remediation=None if satisfied else rule.remediation,
        error=error,
    )


def evaluate_catalog(catalog: Catalog, document: Document) -> dict[str, RuleOutcome]:
    """Evaluate every rule of a catalog in catalog order."""
    return {rule.name: evaluate(rule, document) for rule in catalog}
