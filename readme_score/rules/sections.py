"""Primary section-presence rules."""

from __future__ import annotations

from re import IGNORECASE, MULTILINE, Pattern, compile

from readme_score.document import Document
from readme_score.rules.base import Predicate, RuleDefinition

BADGE_RE = compile(r"!\[.*\]\(.*\)")

SECTION_RULES = [
    (
        "Title",
        compile(r"^#\s.+", MULTILINE),
        10,
        'Add a title at the top using "# Project Name".',
    ),
    (
        "Description",
        compile(r"##?\s*(Overview|Description)", IGNORECASE),
        10,
        "Add a description section.",
    ),
    ("Installation", compile(r"##?\s*Installation", IGNORECASE), 10, "Add an Installation section."),
    ("Usage", compile(r"##?\s*Usage", IGNORECASE), 10, "Add a Usage section."),
    ("Example", compile(r"##?\s*Example", IGNORECASE), 5, "Add an Example section."),
    ("Contributing", compile(r"##?\s*Contributing", IGNORECASE), 5, "Add a Contributing section."),
    ("License", compile(r"##?\s*License", IGNORECASE), 10, "Add a License section."),
    ("Badges", BADGE_RE, 5, "Add badges (e.g., build, coverage, npm version)."),
]


def section_rules() -> list[RuleDefinition]:
    """Return primary rule definitions in evaluation order."""
    return [
        RuleDefinition(
            name=name,
            predicate=pattern_present(pattern),
            weight=weight,
            remediation=remediation,
        )
        for name, pattern, weight, remediation in SECTION_RULES
    ]


def pattern_present(pattern: Pattern[str]) -> Predicate:
    def predicate(document: Document) -> bool:
        return pattern.search(document.text) is not None

    return predicate
