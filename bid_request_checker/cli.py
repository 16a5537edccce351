import logging
from pathlib import Path

import typer

from bid_request_checker.core import run_checks
from bid_request_checker.loggy import setup_logging
from bid_request_checker.rules.openrtb import DEFAULT_CATALOG
from bid_request_checker.schemas import CliArgs

logger = logging.getLogger(__name__)

app = typer.Typer()


@app.command()
def check(
    input_dir: Path = typer.Option(
        Path("bidRequests"),
        "--input-dir",
        "-i",
        envvar="BID_REQUESTS_DIR",
        help="Directory holding the bid request JSON files",
    ),
    logs_dir: Path = typer.Option(
        Path("Logs"),
        "--logs-dir",
        "-l",
        envvar="BID_CHECK_LOGS_DIR",
        help="Directory receiving one timestamped report folder per file",
    ),
    workers: int = typer.Option(
        1, "--workers", "-w", min=1, help="Number of files checked in parallel"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log parsed bid requests"
    ),
):
    """Check every bid request in a directory and write HTML reports."""
    cli_args = CliArgs(
        input_dir=input_dir, logs_dir=logs_dir, workers=workers, verbose=verbose
    )
    setup_logging(level=logging.DEBUG if cli_args.verbose else logging.INFO)

    outcomes = run_checks(
        cli_args.input_dir, cli_args.logs_dir, workers=cli_args.workers
    )
    if not outcomes:
        raise typer.Exit(code=1)

    for outcome in outcomes:
        if outcome.error is not None:
            typer.echo(f"{outcome.file_name}: invalid JSON ({outcome.error.message})")
        else:
            typer.echo(f"{outcome.file_name}: grade {outcome.result.grade.value}")


@app.command()
def rules():
    """List the fields checked, by tier."""
    for tier in ("mandatory", "recommended", "interesting"):
        typer.echo(f"{tier}:")
        for rule in getattr(DEFAULT_CATALOG, tier):
            typer.echo(f"  - {rule.path} ({rule.type_name})")
    consent = DEFAULT_CATALOG.consent
    typer.echo(
        f"required when {consent.country_path} is in the EU: "
        f"{consent.flag.path}, {consent.consent_string.path}"
    )


if __name__ == "__main__":
    app()
