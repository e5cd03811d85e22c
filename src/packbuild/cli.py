"""Typer CLI entrypoint for packbuild."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import get_args

import typer
import yaml

from packbuild.config import AppSettings, BuildConfig, LogLevel, load_settings
from packbuild.engine import load_engine
from packbuild.logging_utils import configure_logging, fallback_logger
from packbuild.pipeline import run_build_pipeline
from packbuild.report.budget import write_budget_report

LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)

app = typer.Typer(
    add_completion=False,
    help="packbuild command line interface.",
    no_args_is_help=True,
)


def _load_and_optionally_configure_logger(
    config_file: Path | None,
    configure: bool,
    log_level: str | None = None,
) -> tuple[AppSettings, logging.Logger]:
    settings = load_settings(config_file=config_file)
    if configure:
        level = log_level or settings.project.log_level
        logger = configure_logging(settings.paths.logs_root / "build.log", level=level)
    else:
        logger = logging.getLogger("packbuild")
    return settings, logger


def _normalize_log_level(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip().upper()
    if normalized not in LOG_LEVELS:
        raise typer.BadParameter(f"log-level must be one of: {','.join(LOG_LEVELS)}")
    return normalized


def _config_file_option() -> Path | None:
    return typer.Option(
        None,
        "--config-file",
        help="Optional settings YAML path.",
        exists=False,
        file_okay=True,
        dir_okay=False,
        readable=True,
    )


@app.command("show-config")
def show_config(config_file: Path | None = _config_file_option()) -> None:
    """Print the effective configuration after env overrides."""

    settings, _ = _load_and_optionally_configure_logger(config_file, configure=False)
    rendered = yaml.safe_dump(settings.as_dict(), sort_keys=False, allow_unicode=True)
    typer.echo(rendered)


@app.command("build")
def build(
    title: str | None = typer.Option(
        None,
        "--title",
        help="Override the document title.",
    ),
    size_limit: int | None = typer.Option(
        None,
        "--size-limit",
        min=1,
        help="Override the byte budget for the packed artifact.",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Override the log level: DEBUG, INFO, WARNING or ERROR.",
    ),
    config_file: Path | None = _config_file_option(),
) -> None:
    """Pack the source, report its size against the budget, and write the artifacts."""

    level = _normalize_log_level(log_level)
    try:
        settings, logger = _load_and_optionally_configure_logger(config_file, configure=True, log_level=level)
        config = BuildConfig.from_settings(settings, title=title, size_limit=size_limit)
        engine = load_engine(settings.engine.factory)
        result = run_build_pipeline(
            config,
            engine=engine,
            engine_options=settings.engine.options,
            stream=sys.stderr,
            logger=logger,
        )
    except Exception:
        logger = fallback_logger(level or logging.INFO)
        logger.exception("build.failed")
        raise typer.Exit(code=1) from None

    typer.echo(f"packed: {result.packed_path}")
    typer.echo(f"document: {result.document_path}")
    typer.echo(f"packed_size: {result.packed_size}")
    typer.echo(f"size_limit: {result.size_limit}")
    typer.echo(f"candidates_seen: {result.candidates_seen}")


@app.command("report")
def report(
    size: int = typer.Argument(..., min=0, help="Observed artifact size in bytes."),
    size_limit: int | None = typer.Option(
        None,
        "--size-limit",
        min=1,
        help="Override the byte budget.",
    ),
    config_file: Path | None = _config_file_option(),
) -> None:
    """Render the budget bar for a given byte size."""

    settings, _ = _load_and_optionally_configure_logger(config_file, configure=False)
    limit = settings.budget.size_limit if size_limit is None else size_limit
    write_budget_report(
        size,
        limit,
        sys.stderr,
        fallback_columns=settings.report.fallback_columns,
        min_columns=settings.report.min_columns,
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
