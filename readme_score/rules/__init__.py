"""Rules package."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from readme_score.rules.base import CatalogError, Predicate, RuleDefinition, RuleOutcome
from readme_score.rules.extras import extra_rules
from readme_score.rules.sections import section_rules

__all__ = [
    "EXTRA_CATALOG",
    "PRIMARY_CATALOG",
    "Catalog",
    "CatalogError",
    "Predicate",
    "RuleDefinition",
    "RuleInfo",
    "RuleOutcome",
    "build_catalog",
    "list_rule_info",
]


@dataclass(frozen=True, slots=True)
class Catalog:
    """Ordered, validated, read-only set of rule definitions."""

    name: str
    rules: tuple[RuleDefinition, ...]

    def __iter__(self) -> Iterator[RuleDefinition]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def max_score(self) -> int:
        return sum(rule.weight for rule in self.rules)

    def names(self) -> list[str]:
        return [rule.name for rule in self.rules]


@dataclass(frozen=True, slots=True)
class RuleInfo:
    """Rule metadata for listing."""

    catalog: str
    name: str
    weight: int
    remediation: str


def build_catalog(name: str, rules: Iterable[RuleDefinition]) -> Catalog:
    """Validate rule definitions and freeze them into a catalog."""
    ordered = tuple(rules)
    seen: set[str] = set()
    for rule in ordered:
        if not rule.name:
            raise CatalogError(f"Catalog '{name}' contains a rule without a name.")
        if rule.name in seen:
            raise CatalogError(f"Duplicate rule name in catalog '{name}': {rule.name}")
        seen.add(rule.name)
        if isinstance(rule.weight, bool) or not isinstance(rule.weight, int) or rule.weight <= 0:
            raise CatalogError(
                f"Rule '{rule.name}' in catalog '{name}' must have a positive integer weight, "
                f"got {rule.weight!r}."
            )
        if not rule.remediation.strip():
            raise CatalogError(f"Rule '{rule.name}' in catalog '{name}' has no remediation.")
        if not callable(rule.predicate):
            raise CatalogError(f"Rule '{rule.name}' in catalog '{name}' has no predicate.")
    return Catalog(name=name, rules=ordered)


PRIMARY_CATALOG = build_catalog("sections", section_rules())
EXTRA_CATALOG = build_catalog("extras", extra_rules())


def list_rule_info() -> list[RuleInfo]:
    """Return metadata for every built-in rule in evaluation order."""
    info: list[RuleInfo] = []
    for catalog in (PRIMARY_CATALOG, EXTRA_CATALOG):
        for rule in catalog:
            info.append(
                RuleInfo(
                    catalog=catalog.name,
                    name=rule.name,
                    weight=rule.weight,
                    remediation=rule.remediation,
                )
            )
    return info
