"""
Feedback component picker — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Resolve the knowledge base (built-in or ``--catalog`` TOML file).
  4. Validate inputs.
  5. Report result to stdout.

Install and run::

    pip install -e .
    component-picker --help
    component-picker recommend --severity minor --type indicator
    component-picker recommend -s major -t validation -a action="Just informative"
    component-picker list-filters
    component-picker show-matrix
    component-picker validate-catalog --catalog my_catalog.toml
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="component-picker",
    help="Recommend UI feedback components for a message severity and type.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from component_picker.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from component_picker.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_kb_or_exit(config, catalog_path: Optional[str] = None):
    """Return the knowledge base named by ``--catalog`` / config, or the built-in one."""
    from pydantic import ValidationError

    from component_picker.knowledge.base import DEFAULT_KNOWLEDGE_BASE
    from component_picker.knowledge.loader import CatalogError, load_knowledge_base

    path = catalog_path or config.knowledge.catalog_path
    if not path:
        return DEFAULT_KNOWLEDGE_BASE

    try:
        return load_knowledge_base(Path(path))
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (CatalogError, ValidationError, tomllib.TOMLDecodeError) as exc:
        typer.echo(f"[ERROR] Catalog {path} is invalid:\n{exc}", err=True)
        raise typer.Exit(code=1)


def _parse_answers_or_exit(kb, raw_answers: list[str]) -> dict[str, str]:
    """Turn ``KEY=OPTION`` strings into a question-text → option mapping.

    KEY is a filter slug (``trigger``) or its full question text.  An empty
    OPTION clears the answer.
    """
    answers: dict[str, str] = {}
    for raw in raw_answers:
        key, sep, option = raw.partition("=")
        if not sep:
            typer.echo(f"[ERROR] Answer '{raw}' must look like KEY=OPTION.", err=True)
            raise typer.Exit(code=1)

        f = kb.filter_by_key(key)
        if f is None:
            known = ", ".join(x.key for x in kb.refinement_filters())
            typer.echo(f"[ERROR] Unknown filter '{key}'. Known filters: {known}.", err=True)
            raise typer.Exit(code=1)

        option = option.strip()
        if not option:
            answers.pop(f.question, None)
            continue

        matched = next((o for o in f.options if o.lower() == option.lower()), None)
        if matched is None:
            typer.echo(
                f"[ERROR] '{option}' is not an option for \"{f.question}\". "
                f"Choose one of: {', '.join(f.options)}.",
                err=True,
            )
            raise typer.Exit(code=1)
        answers[f.question] = matched
    return answers


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("recommend")
def recommend_cmd(
    severity: Optional[str] = typer.Option(
        None,
        "--severity",
        "-s",
        help="Severity: critical, major, minor or informational.",
    ),
    message_type: Optional[str] = typer.Option(
        None,
        "--type",
        "-t",
        help="Message type: indicator, validation or notification.",
    ),
    answer: Optional[list[str]] = typer.Option(
        None,
        "--answer",
        "-a",
        help='Refinement answer KEY=OPTION, e.g. trigger="User action". Repeatable.',
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the result as JSON instead of cards.",
    ),
    write: bool = typer.Option(
        False,
        "--write",
        help="Also write JSON + CSV reports to the output directory.",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        help="Override output.recommendations_dir from config.",
    ),
    catalog_path: Optional[str] = typer.Option(
        None,
        "--catalog",
        help="Path to a TOML component catalog (default: built-in).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Recommend components for a severity and message type.

    \b
    Without --severity or --type nothing is recommended yet; a combination
    no component fits prints suggestions instead.  See 'list-filters' for
    the refinement questions and their options.
    """
    from component_picker.recommendations.engine import recommend
    from component_picker.recommendations.reporter import (
        build_payload,
        write_recommendation_csv,
        write_recommendation_json,
    )
    from component_picker.reporting.formatters import format_recommendations
    from component_picker.taxonomy.message_taxonomy import (
        MessageType,
        SeverityLevel,
        coerce_message_type,
        coerce_severity,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    kb = _load_kb_or_exit(config, catalog_path)

    if severity and coerce_severity(severity) is None:
        valid = ", ".join(s.value for s in SeverityLevel)
        typer.echo(f"[ERROR] Unknown severity '{severity}'. Use one of: {valid}.", err=True)
        raise typer.Exit(code=1)
    if message_type and coerce_message_type(message_type) is None:
        valid = ", ".join(t.value for t in MessageType)
        typer.echo(f"[ERROR] Unknown message type '{message_type}'. Use one of: {valid}.", err=True)
        raise typer.Exit(code=1)

    answers = _parse_answers_or_exit(kb, answer or [])
    result = recommend(severity, message_type, answers, kb=kb)

    if as_json:
        typer.echo(json.dumps(build_payload(result, answers), indent=2, default=str))
    else:
        typer.echo(format_recommendations(result))

    if write:
        target = Path(output_dir or config.output.recommendations_dir)
        json_path = write_recommendation_json(result, target, filter_answers=answers)
        csv_path = write_recommendation_csv(result, target)
        typer.echo(f"  Written: {json_path}", err=as_json)
        typer.echo(f"  Written: {csv_path}", err=as_json)


@app.command("list-filters")
def list_filters(
    catalog_path: Optional[str] = typer.Option(
        None, "--catalog", help="Path to a TOML component catalog.",
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Show the refinement questions, their options and expected answers."""
    from component_picker.reporting.formatters import format_filters

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    kb = _load_kb_or_exit(config, catalog_path)
    typer.echo(format_filters(kb))


@app.command("show-matrix")
def show_matrix(
    catalog_path: Optional[str] = typer.Option(
        None, "--catalog", help="Path to a TOML component catalog.",
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Print the severity x message type eligibility matrix."""
    from component_picker.reporting.formatters import format_matrix

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    kb = _load_kb_or_exit(config, catalog_path)

    typer.echo("")
    typer.echo("Severities:")
    for s in kb.severity_levels():
        typer.echo(f"  {s.name:<14} {s.description}")
    typer.echo("Message types:")
    for t in kb.message_types():
        typer.echo(f"  {t.name:<14} {t.description}")
    typer.echo(format_matrix(kb))


@app.command("show-component")
def show_component(
    name: str = typer.Argument(..., help='Component name, e.g. "Status light".'),
    catalog_path: Optional[str] = typer.Option(
        None, "--catalog", help="Path to a TOML component catalog.",
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Print the catalog documentation for one component."""
    from component_picker.reporting.formatters import format_component

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    kb = _load_kb_or_exit(config, catalog_path)

    known = {n.lower(): n for n in kb.component_names()}
    resolved = known.get(name.strip().lower())
    if resolved is None:
        typer.echo(
            f"[ERROR] No catalog entry for '{name}'. "
            f"Known components: {', '.join(kb.component_names())}.",
            err=True,
        )
        raise typer.Exit(code=1)
    typer.echo(format_component(kb.component_entry(resolved)))


@app.command("validate-catalog")
def validate_catalog(
    catalog_path: Optional[str] = typer.Option(
        None, "--catalog", help="Path to a TOML component catalog (default: built-in).",
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Treat warnings as failures.",
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Check the catalog, matrix and filters for consistency.

    Exits with code 1 on errors (or on warnings with --strict).
    """
    from component_picker.knowledge.integrity import check_integrity, has_errors

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    kb = _load_kb_or_exit(config, catalog_path)

    issues = check_integrity(kb)
    typer.echo(f"Checked {kb!r}")
    for issue in issues:
        typer.echo(f"  {issue}")

    if has_errors(issues) or (strict and issues):
        typer.echo(f"[FAIL] {len(issues)} issue(s) found.", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"[OK] Catalog valid ({len(issues)} warning(s)).")


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Catalog:          {config.knowledge.catalog_path or '(built-in)'}")
    typer.echo(f"  Output dir:       {config.output.recommendations_dir}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


if __name__ == "__main__":
    app()
