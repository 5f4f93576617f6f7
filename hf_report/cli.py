"""
Command-line interface for hostfetch.

Prints the OS, kernel, uptime, CPU and memory of the local host as aligned
key/value text. Diagnostics go to stderr.
"""

from __future__ import annotations

from typing import Optional

import structlog
import typer

from hf_common.errors import HFError, error_to_payload
from hf_common.logging import configure_logging
from hf_report import __version__
from hf_report.collector import collect
from hf_report.formatter import format_entries
from hf_report.models import Entry
from hf_report.settings import ReporterSettings
from hf_report.target import resolve_target

logger = structlog.get_logger(__name__)

app = typer.Typer(
    name="hostfetch",
    help="Print a short summary of the local host.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"hostfetch {__version__}")
        raise typer.Exit()


def run_report(settings: ReporterSettings | None = None) -> int:
    """Collect, log and print the report; return the process exit status.

    The report is printed even when collection fails, in which case it is
    empty. The status is non-zero only for failures under ``strict_exit``.
    """
    settings = settings or ReporterSettings.from_env()
    configure_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        json=settings.log_json,
        force=True,
    )

    target = resolve_target()
    entries: list[Entry] = []
    status = 0
    try:
        entries = collect(target)
    except HFError as exc:
        logger.error("failed to collect", target=target, **error_to_payload(exc))
        if settings.strict_exit:
            status = 1

    typer.echo(format_entries(entries))
    return status


@app.command()
def report(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Print OS, kernel, uptime, CPU and memory information."""
    status = run_report()
    if status:
        raise typer.Exit(status)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
