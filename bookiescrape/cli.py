"""Typer based command line entry points for BookieScrape."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from bookiescrape.config import ConfigError, ConfigSnapshot, load_config
from bookiescrape.core.logger import get_logger
from bookiescrape.workbook_writer import write_skeleton

app = typer.Typer(help="Inspect and preview BookieScrape workbook configuration.")

CONFIG_HELP = "Properties file (defaults to $BOOKIESCRAPE_CONFIG or ./config/config.properties)."


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        help="Set global logging level (e.g. DEBUG/INFO/WARNING).",
    ),
) -> None:
    """Configure global CLI behaviour before executing commands."""

    level_value = getattr(logging, log_level.upper(), None)
    if not isinstance(level_value, int):
        raise typer.BadParameter(f"Unknown log level: {log_level}")
    get_logger().setLevel(level_value)


def _load(config: Optional[Path], excel_path: Optional[str] = None) -> ConfigSnapshot:
    try:
        return load_config(config, output_path=excel_path)
    except ConfigError as exc:
        typer.secho(f"Unable to load configuration: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc


def _echo_snapshot(snapshot: ConfigSnapshot) -> None:
    settings = snapshot.settings
    typer.echo(f"Configuration: {snapshot.source}")
    typer.echo(f"Excel file: {settings.output_path}")
    typer.echo(f"Font: {settings.font} {settings.font_size}")
    typer.echo(f"Size to fit: columns={settings.columns_auto_fit} rows={settings.rows_auto_fit}")
    if not snapshot.sheets:
        typer.echo("No sheets declared")
    for layout in snapshot.sheets:
        typer.echo("")
        typer.echo(f"[{layout.name}] {layout.title}")
        typer.echo(f"  url: {layout.scrape_url or '-'}")
        typer.echo(f"  title: row={layout.title_row} col={layout.title_col}")
        typer.echo(f"  table row: {layout.table_row}")
        opener = str(layout.opener_col) if layout.has_opener else "none"
        typer.echo(f"  columns: teams={layout.teams_col} opener={opener} bookie={layout.bookie_col}")
        for item in snapshot.adjustments_for(layout.name):
            typer.secho(f"  adjusted {item.describe()}", fg=typer.colors.YELLOW)


@app.command("show")
def show_command(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    excel_path: Optional[str] = typer.Option(None, "--excel-path", help="Override excel.file.path."),
    as_json: bool = typer.Option(False, "--json", help="Print the snapshot as JSON."),
) -> None:
    """Print the resolved workbook settings and sheet layouts."""

    snapshot = _load(config, excel_path)
    if as_json:
        typer.echo(json.dumps(snapshot.to_dict(), ensure_ascii=False, indent=2))
        return
    _echo_snapshot(snapshot)


@app.command("check")
def check_command(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    strict: bool = typer.Option(False, help="Fail when a configured index had to be adjusted."),
) -> None:
    """Validate the configuration and report adjusted indices."""

    snapshot = _load(config)
    explicit = [item for item in snapshot.adjustments if item.explicit]
    for item in snapshot.adjustments:
        typer.echo(f"[{item.sheet}] adjusted {item.describe()}")
    typer.echo(f"Sheets: {len(snapshot.sheets)}, adjusted indices: {len(snapshot.adjustments)}")
    if strict and explicit:
        typer.secho(
            f"{len(explicit)} configured index(es) overlap their predecessor.",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)
    typer.echo("Configuration OK")


@app.command("skeleton")
def skeleton_command(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Workbook to write (defaults to excel.file.path)."
    ),
    dry_run: bool = typer.Option(False, help="Only log what would be written."),
) -> None:
    """Write an empty workbook with titles and table headers in place."""

    snapshot = _load(config)
    target = write_skeleton(snapshot, output, dry_run=dry_run)
    typer.echo(f"Skeleton {'planned' if dry_run else 'written'}: {target}")


if __name__ == "__main__":
    app()
