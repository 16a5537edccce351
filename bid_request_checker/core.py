"""File-level pipeline: discover, check and save bid request reports."""

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from pathlib import Path

from bid_request_checker.annotator import annotate_and_grade
from bid_request_checker.errors import InvalidDocumentError, describe_json_error
from bid_request_checker.evaluator import evaluate
from bid_request_checker.report.html import render_error_report, render_report
from bid_request_checker.rules.openrtb import DEFAULT_CATALOG
from bid_request_checker.rules.schemas import RuleCatalog
from bid_request_checker.schemas import CheckOutcome, JsonErrorReport

logger = logging.getLogger(__name__)

DEEP_NESTING_ERROR = "The bid request is nested too deeply to be checked."


def discover_bid_requests(input_dir: Path) -> list[Path]:
    """List the JSON files in a directory, sorted by name."""
    return sorted(
        path
        for path in input_dir.iterdir()
        if path.is_file() and path.suffix == ".json"
    )


def get_output_path(
    logs_dir: Path, file_name: str, now: datetime | None = None
) -> Path:
    """
    Create and return the output directory for one checked file.

    Args:
        logs_dir (Path): Root directory for all reports.
        file_name (str): Name of the checked bid request file.
        now (datetime | None): Timestamp to use; defaults to the current time.

    Returns:
        Path: ``<logs_dir>/<stem>_<YYYY-MM-DDTHH-MM-SS>``.
    """
    timestamp = (now or datetime.now()).strftime("%Y-%m-%dT%H-%M-%S")
    output_dir = logs_dir / f"{Path(file_name).stem}_{timestamp}"
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def check_bid_request(
    raw: str, file_name: str, catalog: RuleCatalog = DEFAULT_CATALOG
) -> CheckOutcome:
    """
    Parse, evaluate, grade and render one bid request.

    Args:
        raw (str): File contents.
        file_name (str): Name used in the report file name.
        catalog (RuleCatalog): Rules to check against.

    Returns:
        CheckOutcome: Findings, audit result and report HTML, or an error
            report when the contents are not a JSON object or nest too deeply.
    """
    try:
        bid_request = json.loads(raw)
        logger.debug(f"Bid Request: {file_name} {bid_request}")
        findings = evaluate(bid_request, catalog)
        result = annotate_and_grade(bid_request, findings)
        html = render_report(findings, result)
    except json.JSONDecodeError as exc:
        logger.warning(f"Invalid JSON in {file_name}: {exc}")
        error = describe_json_error(exc)
        return CheckOutcome(
            file_name=file_name, html=render_error_report(error), error=error
        )
    except InvalidDocumentError as exc:
        logger.warning(f"Unsupported bid request in {file_name}: {exc}")
        error = JsonErrorReport(
            message="The JSON is valid but the bid request must be a JSON object.",
            error_details=str(exc),
        )
        return CheckOutcome(
            file_name=file_name, html=render_error_report(error), error=error
        )
    except RecursionError:
        logger.error(f"Bid request in {file_name} is nested too deeply to check")
        error = JsonErrorReport(
            message=DEEP_NESTING_ERROR,
            error_details="maximum recursion depth exceeded while checking the bid request",
        )
        return CheckOutcome(
            file_name=file_name, html=render_error_report(error), error=error
        )

    return CheckOutcome(
        file_name=file_name,
        html=html,
        findings=findings,
        result=result,
    )


def save_outputs(outcome: CheckOutcome, raw: str, output_dir: Path) -> list[Path]:
    """
    Write the HTML report and, for valid requests, a copy of the request.

    Args:
        outcome (CheckOutcome): Result of ``check_bid_request``.
        raw (str): Original file contents.
        output_dir (Path): Directory to write into.

    Returns:
        list[Path]: Files written.
    """
    report_path = output_dir / outcome.report_file_name
    report_path.write_text(outcome.html.strip(), encoding="utf-8")
    logger.info(f"{report_path.name} generated in {output_dir}")
    written = [report_path]

    if not outcome.is_error:
        copy_name = f"bidRequestCheck_{Path(outcome.report_file_name).stem}.json"
        copy_path = output_dir / copy_name
        copy_path.write_text(raw.strip(), encoding="utf-8")
        logger.info(f"{copy_name} saved in {output_dir}")
        written.append(copy_path)
    return written


def process_file(
    path: Path, logs_dir: Path, catalog: RuleCatalog = DEFAULT_CATALOG
) -> CheckOutcome | None:
    """Check one file and save its outputs; returns None if it cannot be read."""
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error(f"Error reading file {path.name}: {exc}")
        return None

    outcome = check_bid_request(raw, path.name, catalog)
    save_outputs(outcome, raw, get_output_path(logs_dir, path.name))
    return outcome


def run_checks(
    input_dir: Path,
    logs_dir: Path,
    workers: int = 1,
    catalog: RuleCatalog = DEFAULT_CATALOG,
) -> list[CheckOutcome]:
    """
    Check every JSON file in a directory.

    Creates ``input_dir`` and returns nothing when it does not exist yet.
    Files are independent, so ``workers > 1`` checks them in parallel.

    Args:
        input_dir (Path): Directory holding bid request files.
        logs_dir (Path): Root directory for reports.
        workers (int): Number of worker threads.
        catalog (RuleCatalog): Rules to check against.

    Returns:
        list[CheckOutcome]: Outcomes in file name order, unreadable files omitted.
    """
    if not input_dir.exists():
        logger.info(f"Directory {input_dir} not found. Creating the directory...")
        input_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Please place your bid request files in the {input_dir} directory.")
        return []

    files = discover_bid_requests(input_dir)
    if not files:
        logger.info(f"No JSON files found in the {input_dir} directory.")
        return []

    logger.info(f"Checking {len(files)} bid request(s) from {input_dir}")
    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            outcomes = list(
                executor.map(lambda path: process_file(path, logs_dir, catalog), files)
            )
    else:
        outcomes = [process_file(path, logs_dir, catalog) for path in files]

    return [outcome for outcome in outcomes if outcome is not None]
