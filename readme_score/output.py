"""Output rendering."""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

import click

from readme_score import __version__
from readme_score.metrics import MetricOutcome
from readme_score.rules.base import RuleOutcome
from readme_score.scoring import AnalysisReport, score_percent

CHECKED = "[✔]"
UNCHECKED = "[ ]"


def render_human(report: AnalysisReport, *, show_extras: bool = False, width: int = 30) -> str:
    """Render a colorized report with progress bar and suggestions."""
    lines: list[str] = [click.style("README Analysis Report:", bold=True, underline=True), ""]

    lines.append(click.style("Sections:", bold=True))
    lines.extend(_rule_lines(report.sections))

    lines.append("")
    lines.append(click.style("Length:", bold=True))
    lines.append(
        _metric_line(
            report.length,
            click.style(f"{report.length.measurements['lines']} lines", fg="yellow"),
        )
    )

    lines.append("")
    lines.append(click.style("Formatting:", bold=True))
    formatting = report.formatting.measurements
    lines.append(
        _metric_line(
            report.formatting,
            f"{click.style('Headings', fg='magenta')}: {formatting['headings']}, "
            f"{click.style('Code Blocks', fg='magenta')}: {formatting['code_blocks']}",
        )
    )

    if show_extras:
        lines.append("")
        lines.append(click.style("Extras:", bold=True))
        lines.extend(_rule_lines(report.extras))

    lines.append("")
    lines.append(render_progress_bar(report.total_score, report.max_score, width=width))

    if report.suggestions:
        lines.append("")
        lines.append(click.style("Suggestions to improve your README:", bold=True))
        for suggestion in report.suggestions:
            lines.append(click.style(f"- {suggestion}", fg="yellow"))
    return "\n".join(lines)


def render_progress_bar(score: int, max_score: int, *, width: int = 30) -> str:
    """Render ``Score: NN%`` followed by a filled/empty bar."""
    percent = score_percent(score, max_score)
    filled = (percent * width * 2 + 100) // 200
    bar = click.style("█" * filled, fg="green") + click.style(
        "░" * (width - filled), fg="bright_black"
    )
    return f"{click.style('Score:', bold=True)} {click.style(f'{percent}%', fg='cyan')}  {bar}"


def render_json(report: AnalysisReport, *, input_source: str) -> str:
    """Render stable JSON output for CI and automation."""
    return json.dumps(build_json_payload(report, input_source=input_source), sort_keys=True)


def build_json_payload(report: AnalysisReport, *, input_source: str) -> dict[str, Any]:
    """Build stable JSON payload for CI and automation."""
    return {
        "total_score": report.total_score,
        "max_score": report.max_score,
        "percent": report.percent,
        "sections": {name: _serialize_rule(item) for name, item in report.sections.items()},
        "length": _serialize_metric(report.length),
        "formatting": _serialize_metric(report.formatting),
        "extras": {name: _serialize_rule(item) for name, item in report.extras.items()},
        "suggestions": list(report.suggestions),
        "meta": {
            "generated_at": datetime.now(tz=UTC)
            .replace(microsecond=0)
            .isoformat()
            .replace("+00:00", "Z"),
            "input_source": input_source,
            "version": __version__,
        },
    }


def _rule_lines(outcomes: Mapping[str, RuleOutcome]) -> list[str]:
    lines: list[str] = []
    for name, outcome in outcomes.items():
        line = f"  {_marker(outcome.satisfied)} {click.style(name, fg='cyan')}"
        if not outcome.satisfied and outcome.remediation:
            line += click.style(f"  ← {outcome.remediation}", fg="yellow")
        lines.append(line)
    return lines


def _metric_line(metric: MetricOutcome, detail: str) -> str:
    line = f"  {_marker(metric.satisfied)} {detail}"
    if metric.remediation:
        line += click.style(f"  ← {metric.remediation}", fg="yellow")
    return line


def _marker(satisfied: bool) -> str:
    if satisfied:
        return click.style(CHECKED, fg="green")
    return click.style(UNCHECKED, fg="red")


def _serialize_rule(outcome: RuleOutcome) -> dict[str, Any]:
    return {
        "present": outcome.satisfied,
        "score": outcome.points_awarded,
        "weight": outcome.weight,
        "suggestion": outcome.remediation,
        "error": outcome.error,
    }


def _serialize_metric(metric: MetricOutcome) -> dict[str, Any]:
    payload: dict[str, Any] = dict(metric.measurements)
    payload.update(
        {
            "score": metric.points_awarded,
            "max_score": metric.max_points,
            "suggestion": metric.remediation,
        }
    )
    return payload
