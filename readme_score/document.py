"""Document model and Markdown structure primitives."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from re import IGNORECASE, MULTILINE, Pattern, compile

HEADING_RE = compile(r"^#+\s+", MULTILINE)
LINE_HEADING_RE = compile(r"^(?P<marks>#+)\s")
FENCE_MARKER = "```"
SECTION_BREAK_LEVEL = 2


class InputUnavailableError(RuntimeError):
    """Raised when a document cannot be read or decoded."""


@dataclass(frozen=True, slots=True)
class Document:
    """Raw README text plus its newline-split lines."""

    text: str
    lines: tuple[str, ...]
    source: str = "<memory>"

    @classmethod
    def from_text(cls, text: str, *, source: str = "<memory>") -> Document:
        return cls(text=text, lines=tuple(text.split("\n")), source=source)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


def load_document(path: Path) -> Document:
    """Read a UTF-8 document from disk."""
    if not path.exists():
        raise InputUnavailableError(f"The specified README file does not exist: {path}")
    if path.is_dir():
        raise InputUnavailableError(f"Expected a file but got a directory: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InputUnavailableError(f"README is not valid UTF-8 text: {path}") from exc
    except OSError as exc:
        raise InputUnavailableError(f"Unable to read README {path}: {exc}") from exc
    return Document.from_text(text, source=str(path))


def heading_levels(text: str) -> list[int]:
    """Return the level of each heading line, in document order."""
    return [len(match.group(0).strip()) for match in HEADING_RE.finditer(text)]


def count_headings(text: str) -> int:
    return len(HEADING_RE.findall(text))


def count_code_blocks(text: str) -> int:
    """Count fenced code blocks; an unclosed trailing fence is ignored."""
    return text.count(FENCE_MARKER) // 2


def extract_section(document: Document, name: str) -> str | None:
    """Return the body of the first section whose heading mentions ``name``.

    ``name`` is a regular expression fragment, so alternations such as
    ``"Overview|Description"`` are accepted. The body runs from the line after
    the heading to the next level 1 or level 2 heading, or to the end of the
    document.
    """
    marker = _section_marker(name)
    start = next(
        (index for index, line in enumerate(document.lines) if marker.search(line)),
        None,
    )
    if start is None:
        return None

    body: list[str] = []
    for line in document.lines[start + 1 :]:
        if 0 < _line_heading_level(line) <= SECTION_BREAK_LEVEL:
            break
        body.append(line)
    return "\n".join(body)


def _section_marker(name: str) -> Pattern[str]:
    return compile(rf"##?\s*(?:{name})", IGNORECASE)


def _line_heading_level(line: str) -> int:
    match = LINE_HEADING_RE.match(line)
    if match is None:
        return 0
    return len(match.group("marks"))
