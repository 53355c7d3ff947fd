"""
NicheFinder intelligence CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Load the ranked opportunities JSON (an ``/api/opportunities`` dump).
  4. Derive intelligence (pure functions, no I/O).
  5. Print or write the result.

Install and run::

    pip install -e .
    nichefinder-intel --help
    nichefinder-intel validate-config
    nichefinder-intel command-center --input data/opportunities.json
    nichefinder-intel explain <opportunity-id>
    nichefinder-intel report --format markdown --output report.md
    nichefinder-intel export --output-dir data/outputs
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="nichefinder-intel",
    help="NicheFinder opportunity intelligence: deterministic and offline.",
    add_completion=False,
)

_REPORT_FORMATS = ("text", "markdown", "json")


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    from nichefinder_intel.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (ValidationError, ValueError) as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config) -> None:
    from nichefinder_intel.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_opportunities_or_exit(config, input_path: Optional[str]):
    """Load the opportunities file named by ``--input`` or the config."""
    from pydantic import ValidationError

    from nichefinder_intel.reporting.reader import load_opportunities

    path = Path(input_path or config.data.opportunities_file)
    try:
        opportunities = load_opportunities(path)
    except (ValidationError, ValueError) as exc:
        typer.echo(f"[ERROR] Could not parse {path}: {exc}", err=True)
        raise typer.Exit(code=1)

    if opportunities is None:
        typer.echo(
            f"[ERROR] Opportunities file not found: {path}\n"
            "Save the backend's /api/opportunities response there or pass --input.",
            err=True,
        )
        raise typer.Exit(code=1)
    return opportunities


def _load_descriptions(config) -> dict[str, str]:
    from nichefinder_intel.content.descriptions import load_descriptions

    try:
        return load_descriptions(Path(config.data.descriptions_file))
    except ValueError as exc:
        typer.echo(f"[ERROR] Description table invalid: {exc}", err=True)
        raise typer.Exit(code=1)


# ── Commands ──────────────────────────────────────────────────────────────────

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
    typer.echo(f"  Opportunities file: {config.data.opportunities_file}")
    typer.echo(f"  Descriptions file:  {config.data.descriptions_file}")
    typer.echo(f"  Output dir:         {config.data.output_dir}")
    typer.echo(f"  Summary mode:       {config.intelligence.summary_mode.value}")
    typer.echo(f"  Log level:          {config.logging.level}")
    typer.echo(f"  Debug mode:         {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(mode="json"), indent=2))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("command-center")
def command_center(
    input_path: Optional[str] = typer.Option(
        None, "--input", help="Opportunities JSON (default: data.opportunities_file)."
    ),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """Show KPIs, the top opportunity cards and the intelligence feed."""
    from nichefinder_intel.intelligence.brief import build_command_center
    from nichefinder_intel.reporting.formatters import format_command_center

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    opportunities = _load_opportunities_or_exit(config, input_path)
    view = build_command_center(opportunities, top_cards=config.intelligence.top_cards)
    typer.echo(format_command_center(view))


@app.command("explain")
def explain(
    opportunity_id: str = typer.Argument(..., help="Opportunity id to open."),
    input_path: Optional[str] = typer.Option(
        None, "--input", help="Opportunities JSON (default: data.opportunities_file)."
    ),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """Print the full brief for one opportunity (summary, signals, Q&A, actions)."""
    from nichefinder_intel.intelligence.brief import build_brief, build_command_center
    from nichefinder_intel.reporting.formatters import format_brief
    from nichefinder_intel.reporting.reader import find_opportunity

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    opportunities = _load_opportunities_or_exit(config, input_path)
    target = find_opportunity(opportunities, opportunity_id)
    if target is None:
        typer.echo(f"[ERROR] No opportunity with id '{opportunity_id}'.", err=True)
        raise typer.Exit(code=1)

    view = build_command_center(opportunities, top_cards=config.intelligence.top_cards)
    brief = build_brief(
        target,
        feed=view.insights,
        descriptions=_load_descriptions(config),
        summary_mode=config.intelligence.summary_mode,
        recent_activity_days=config.intelligence.recent_activity_days,
    )
    typer.echo(format_brief(brief))


@app.command("report")
def report(
    fmt: str = typer.Option("text", "--format", help="text, markdown or json."),
    output: Optional[str] = typer.Option(None, "--output", help="Write to file instead of stdout."),
    input_path: Optional[str] = typer.Option(
        None, "--input", help="Opportunities JSON (default: data.opportunities_file)."
    ),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """Render an analysis report over the whole ranked collection."""
    from nichefinder_intel.reporting.formatters import format_report_markdown, format_report_text
    from nichefinder_intel.utils.time_utils import utcnow

    fmt = fmt.lower()
    if fmt not in _REPORT_FORMATS:
        typer.echo(f"[ERROR] --format must be one of {', '.join(_REPORT_FORMATS)}.", err=True)
        raise typer.Exit(code=1)

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    opportunities = _load_opportunities_or_exit(config, input_path)
    generated_at = utcnow()

    if fmt == "json":
        content = json.dumps(
            {
                "analyzed_at": generated_at.isoformat(),
                "opportunities": [
                    o.model_dump(mode="json", by_alias=True) for o in opportunities
                ],
            },
            indent=2,
            ensure_ascii=False,
        )
    elif fmt == "markdown":
        content = format_report_markdown(opportunities, generated_at)
    else:
        content = format_report_text(opportunities, generated_at)

    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(content, encoding="utf-8")
        typer.echo(f"[OK] Report written: {out_path}")
    else:
        typer.echo(content)


@app.command("export")
def export(
    output_dir: Optional[str] = typer.Option(
        None, "--output-dir", help="Target directory (default: data.output_dir)."
    ),
    input_path: Optional[str] = typer.Option(
        None, "--input", help="Opportunities JSON (default: data.opportunities_file)."
    ),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """Write derived intelligence (JSON) and a flat opportunity table (CSV)."""
    from nichefinder_intel.intelligence.brief import build_brief, build_command_center
    from nichefinder_intel.reporting.export import (
        FLAT_FIELDNAMES,
        build_intelligence_payload,
        export_to_csv,
        export_to_json,
        flatten_opportunities_for_export,
    )
    from nichefinder_intel.utils.time_utils import utcnow

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    opportunities = _load_opportunities_or_exit(config, input_path)
    descriptions = _load_descriptions(config)
    generated_at = utcnow()

    view = build_command_center(opportunities, top_cards=config.intelligence.top_cards)
    briefs = [
        build_brief(
            opp,
            feed=view.insights,
            descriptions=descriptions,
            summary_mode=config.intelligence.summary_mode,
            now=generated_at,
            recent_activity_days=config.intelligence.recent_activity_days,
        )
        for opp in opportunities
    ]

    target_dir = Path(output_dir or config.data.output_dir)
    stamp = generated_at.strftime("%Y-%m-%d")
    json_path = export_to_json(
        build_intelligence_payload(view, briefs, generated_at),
        target_dir / f"intelligence_{stamp}.json",
    )
    csv_path = export_to_csv(
        flatten_opportunities_for_export(opportunities),
        target_dir / f"opportunities_{stamp}.csv",
        fieldnames=FLAT_FIELDNAMES,
    )

    typer.echo(f"  Intelligence JSON: {json_path}")
    typer.echo(f"  Opportunity CSV:   {csv_path}")
    typer.echo(f"[OK] Exported {len(opportunities)} opportunit(ies).")


if __name__ == "__main__":
    app()
