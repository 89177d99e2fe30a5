"""Configuration loading for readme-score."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

CONFIG_FILENAMES = (".readme-score.toml", "readme-score.toml")
PYPROJECT_FILENAME = "pyproject.toml"
FORMATS = ("human", "json")

DEFAULT_PROGRESS_WIDTH = 30


@dataclass(slots=True)
class AppConfig:
    """Runtime configuration values resolved from project files."""

    format: str = "human"
    fail_under: int | None = None
    show_extras: bool = False
    progress_width: int = DEFAULT_PROGRESS_WIDTH
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "format": self.format,
            "fail_under": self.fail_under,
            "show_extras": self.show_extras,
            "progress_width": self.progress_width,
            "source": self.source,
        }


def load_app_config(directory: Path, config_path: Path | None = None) -> AppConfig:
    """Load config from an explicit path, else the first project file found."""
    directory = directory.resolve()
    if config_path is not None:
        resolved = config_path if config_path.is_absolute() else (directory / config_path)
        if not resolved.exists():
            raise ValueError(f"Config file does not exist: {resolved}")
        candidates = [resolved]
    else:
        candidates = [directory / name for name in (*CONFIG_FILENAMES, PYPROJECT_FILENAME)]

    for path in candidates:
        if not path.exists():
            continue
        mapping = _load_toml(path)
        if path.name == PYPROJECT_FILENAME:
            tool = mapping.get("tool")
            mapping = tool.get("readme_score") if isinstance(tool, dict) else None
            if not isinstance(mapping, dict):
                continue
        return _from_mapping(mapping, source=str(path))
    return AppConfig()


def default_config_template() -> str:
    """Return a starter config template."""
    return "\n".join(
        [
            'format = "human"',
            "# Exit with status 1 when the README scores below this percentage.",
            "fail_under = 60",
            "show_extras = false",
            f"progress_width = {DEFAULT_PROGRESS_WIDTH}",
            "",
        ]
    )


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as file_obj:
            return tomllib.load(file_obj)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in {path}: {exc}") from exc


def _from_mapping(mapping: dict[str, Any], *, source: str) -> AppConfig:
    format_value = str(mapping.get("format", "human")).lower()
    if format_value not in FORMATS:
        raise ValueError(f"format must be one of: {', '.join(FORMATS)}")

    raw_fail = mapping.get("fail_under")
    fail_value = None if raw_fail is None else _as_int(raw_fail, "fail_under")
    if fail_value is not None and not 0 <= fail_value <= 100:
        raise ValueError("fail_under must be between 0 and 100")

    width = _as_int(mapping.get("progress_width", DEFAULT_PROGRESS_WIDTH), "progress_width")
    if width <= 0:
        raise ValueError("progress_width must be > 0")

    show_extras = mapping.get("show_extras", False)
    if not isinstance(show_extras, bool):
        raise ValueError("show_extras must be a boolean")

    return AppConfig(
        format=format_value,
        fail_under=fail_value,
        show_extras=show_extras,
        progress_width=width,
        source=source,
    )


def _as_int(raw: Any, field_name: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"{field_name} must be an integer")
    return raw
