"""Secondary stylistic and content rules."""

from __future__ import annotations

from re import ASCII, IGNORECASE, MULTILINE, Pattern, compile

from readme_score.document import FENCE_MARKER, Document, extract_section, heading_levels
from readme_score.rules.base import Predicate, RuleDefinition
from readme_score.rules.sections import BADGE_RE, pattern_present

PROPER_TITLE_RE = compile(r"^# [A-Z][\w\s\-]+$", MULTILINE | ASCII)
TOC_RE = compile(r"##?\s*Table of Contents", IGNORECASE)
IMAGE_RE = compile(r"!\[.*(screenshot|image|demo|preview).*?\]\(.*\)", IGNORECASE)
LINK_RE = compile(r"\[.*?\]\(https?://.*?\)")
LIST_RE = compile(r"^(\s*[-*+]|\d+\.)\s+", MULTILINE)
TABLE_RE = compile(r"\|.+\|.+\n\|[-\s|:]+\|", MULTILINE)
INLINE_CODE_RE = compile(r"`[^`]+`")
BLOCKQUOTE_RE = compile(r"^>\s.+", MULTILINE)
PLACEHOLDER_RE = compile(r"(TODO|TBD|lorem ipsum|replace this)", IGNORECASE)
BROKEN_MARKDOWN_RE = compile(r"(#+[^ \n])|(\[[^\]]*\]\([^)]+\s*$)", MULTILINE)
GUIDELINES_RE = compile(r"(pull request|issue|contribut|guideline|how to)", IGNORECASE)
LICENSE_NAME_RE = compile(r"(mit|apache|gpl|bsd|mozilla|unlicense|lgpl|cc)", IGNORECASE)

MIN_DESCRIPTION_CHARS = 50


def has_long_description(document: Document) -> bool:
    body = extract_section(document, "Overview|Description")
    if body is None:
        return False
    return len(" ".join(body.split("\n")).strip()) > MIN_DESCRIPTION_CHARS


def has_multiple_badges(document: Document) -> bool:
    return len(BADGE_RE.findall(document.text)) > 1


def has_consistent_heading_levels(document: Document) -> bool:
    """Every heading sits at the first heading's level or one below it."""
    if document.is_blank:
        return False
    levels = heading_levels(document.text)
    if len(levels) <= 1:
        return True
    first = levels[0]
    return all(level in (first, first + 1) for level in levels)


def has_no_placeholder_text(document: Document) -> bool:
    if document.is_blank:
        return False
    return PLACEHOLDER_RE.search(document.text) is None


def has_no_broken_markdown(document: Document) -> bool:
    """No ``#`` run glued to a non-space character and no unclosed link target.

    ``#`` is not anchored to the line start, so ``## Usage``, ``(#usage)`` and
    ``#12`` all count as broken.
    """
    if document.is_blank:
        return False
    return BROKEN_MARKDOWN_RE.search(document.text) is None


def section_has_code(name: str) -> Predicate:
    def predicate(document: Document) -> bool:
        body = extract_section(document, name)
        return body is not None and FENCE_MARKER in body

    return predicate


def section_matches(name: str, pattern: Pattern[str]) -> Predicate:
    def predicate(document: Document) -> bool:
        body = extract_section(document, name)
        return body is not None and pattern.search(body) is not None

    return predicate


EXTRA_RULES = [
    (
        "Proper Title Format",
        pattern_present(PROPER_TITLE_RE),
        3,
        "Use a clear, properly capitalized project title.",
    ),
    (
        "Description Length",
        has_long_description,
        3,
        "Provide a more detailed project description.",
    ),
    ("Table of Contents", pattern_present(TOC_RE), 3, "Add a Table of Contents section."),
    (
        "Multiple Badges",
        has_multiple_badges,
        2,
        "Add more badges (e.g., build, coverage, npm version).",
    ),
    (
        "Images/Screenshots",
        pattern_present(IMAGE_RE),
        3,
        "Add images or screenshots to illustrate your project.",
    ),
    (
        "Links",
        pattern_present(LINK_RE),
        2,
        "Add relevant links (e.g., documentation, homepage, issues).",
    ),
    ("Lists", pattern_present(LIST_RE), 2, "Use lists to organize information."),
    ("Tables", pattern_present(TABLE_RE), 2, "Add tables for structured data."),
    ("Inline Code", pattern_present(INLINE_CODE_RE), 2, "Use inline code for commands or filenames."),
    ("Blockquotes", pattern_present(BLOCKQUOTE_RE), 1, "Use blockquotes for tips or notes."),
    (
        "Consistent Heading Levels",
        has_consistent_heading_levels,
        2,
        "Use consistent heading levels for structure.",
    ),
    (
        "No Placeholder Text",
        has_no_placeholder_text,
        2,
        "Remove placeholder text like TODO, TBD, or lorem ipsum.",
    ),
    (
        "No Broken Markdown",
        has_no_broken_markdown,
        2,
        "Fix broken Markdown syntax (headings, links, etc).",
    ),
    (
        "Installation Section Has Code",
        section_has_code("Installation"),
        2,
        "Add code blocks to the Installation section.",
    ),
    (
        "Usage Section Has Code",
        section_has_code("Usage"),
        2,
        "Add code blocks to the Usage section.",
    ),
    (
        "Example Section Has Code",
        section_has_code("Example"),
        1,
        "Add code blocks to the Example section.",
    ),
    (
        "Contributing Section Has Guidelines",
        section_matches("Contributing", GUIDELINES_RE),
        1,
        "Add contribution guidelines to the Contributing section.",
    ),
    (
        "License Section Has License Name",
        section_matches("License", LICENSE_NAME_RE),
        1,
        "Specify the license type in the License section.",
    ),
]


def extra_rules() -> list[RuleDefinition]:
    """Return secondary rule definitions in evaluation order."""
    return [
        RuleDefinition(name=name, predicate=predicate, weight=weight, remediation=remediation)
        for name, predicate, weight, remediation in EXTRA_RULES
    ]
