"""CLI entrypoint for readme-score."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from readme_score import __version__
from readme_score.config import AppConfig, default_config_template, load_app_config
from readme_score.document import InputUnavailableError, load_document
from readme_score.metrics import FORMATTING_MAX_POINTS, LENGTH_MAX_POINTS
from readme_score.output import render_human, render_json
from readme_score.rules import EXTRA_CATALOG, PRIMARY_CATALOG, list_rule_info
from readme_score.scoring import analyze, max_attainable_score

app = typer.Typer(
    name="readme-score",
    no_args_is_help=True,
    help="Score a README for completeness and suggest improvements.",
)


def version_callback(value: bool) -> None:
    """Print version and exit when --version is provided."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option("--version", help="Show version and exit.", callback=version_callback),
    ] = False,
) -> None:
    """Root command callback."""
    _ = version


@app.command("score")
def score_command(
    readme: Annotated[Path, typer.Argument(help="Path to the README file.")],
    format: Annotated[
        str | None, typer.Option(help="Output format: human|json.", show_default="human")
    ] = None,
    fail_under: Annotated[
        int | None,
        typer.Option(help="Exit nonzero if the score percentage is below this value."),
    ] = None,
    show_extras: Annotated[
        bool | None,
        typer.Option("--show-extras/--hide-extras", help="List the extra rules too."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Analyze a README and print its score and suggestions."""
    _configure_logging(verbose)
    readme_path = readme.resolve()
    app_config = _load_config_or_raise(
        readme_path.parent, config_file.resolve() if config_file is not None else None
    )
    output_format = (format or app_config.format).lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")

    try:
        document = load_document(readme_path)
    except InputUnavailableError as exc:
        typer.secho(f"Error analyzing README: {exc}", fg="red", err=True)
        raise typer.Exit(code=1) from exc

    report = analyze(document)
    if output_format == "json":
        typer.echo(render_json(report, input_source=str(readme_path)))
    else:
        extras = show_extras if show_extras is not None else app_config.show_extras
        typer.echo(render_human(report, show_extras=extras, width=app_config.progress_width))

    threshold = fail_under if fail_under is not None else app_config.fail_under
    if threshold is not None and report.percent < threshold:
        raise typer.Exit(code=1)


@app.command("rules")
def rules_command(
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
) -> None:
    """List the scoring rules and their weights."""
    output_format = format.lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")

    rule_info = list_rule_info()
    if output_format == "json":
        payload = {
            "rules": [
                {
                    "catalog": item.catalog,
                    "name": item.name,
                    "weight": item.weight,
                    "remediation": item.remediation,
                }
                for item in rule_info
            ],
            "max_score": max_attainable_score(),
        }
        typer.echo(json.dumps(payload, sort_keys=True))
        return

    lines: list[str] = []
    for catalog in (PRIMARY_CATALOG, EXTRA_CATALOG):
        lines.append(f"{catalog.name.capitalize()} ({catalog.max_score} points):")
        for item in rule_info:
            if item.catalog == catalog.name:
                lines.append(f"- {item.name} [{item.weight}] - {item.remediation}")
    lines.append(
        f"Metrics: Length ({LENGTH_MAX_POINTS} points), Formatting ({FORMATTING_MAX_POINTS} points)."
    )
    lines.append(f"Maximum score: {max_attainable_score()}")
    typer.echo("\n".join(lines))


@app.command("config")
def config_command(
    repo: Annotated[Path, typer.Option(help="Directory to resolve config from.")] = Path("."),
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
) -> None:
    """Show resolved configuration."""
    output_format = format.lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")

    payload = _load_config_or_raise(repo, config_file).to_dict()
    if output_format == "json":
        typer.echo(json.dumps(payload, sort_keys=True))
        return

    lines = [
        "Resolved configuration:",
        f"- source: {payload['source'] or 'defaults'}",
        f"- format: {payload['format']}",
        f"- fail_under: {payload['fail_under']}",
        f"- show_extras: {payload['show_extras']}",
        f"- progress_width: {payload['progress_width']}",
    ]
    typer.echo("\n".join(lines))


@app.command("config-init")
def config_init_command(
    out: Annotated[Path, typer.Option(help="Output path for starter config TOML.")] = Path(
        ".readme-score.toml"
    ),
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite if file already exists."),
    ] = False,
) -> None:
    """Create a starter config file."""
    out_path = out.resolve()
    if out_path.exists() and not force:
        raise typer.BadParameter(
            f"Refusing to overwrite existing file: {out_path}. Use --force to overwrite."
        )
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(default_config_template(), encoding="utf-8")
    typer.echo(f"Wrote starter config: {out_path}")


def main() -> None:
    """Console script entrypoint."""
    app()


def _load_config_or_raise(directory: Path, config_file: Path | None = None) -> AppConfig:
    try:
        return load_app_config(directory, config_path=config_file)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="config") from exc


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
