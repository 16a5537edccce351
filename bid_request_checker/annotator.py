"""Placeholder injection and grading for evaluated bid requests."""

import copy
import logging
from typing import Any

from bid_request_checker.errors import PathConflictError
from bid_request_checker.models import Grade, Severity
from bid_request_checker.schemas import AnnotatedDocument, AuditResult, Findings
from bid_request_checker.utils.json_path import has_path, set_value

logger = logging.getLogger(__name__)


def placeholder_for(path: str, severity: Severity) -> str:
    """Build the marker written in place of a missing field."""
    return f"This field ({path}) is __{severity.value}__"


def annotate(document: dict[str, Any], findings: Findings) -> AnnotatedDocument:
    """
    Insert placeholder markers for every missing field into a copy of a bid request.

    Presence is re-checked against the copy before each write, since earlier
    insertions can create the containers later paths live in.

    Args:
        document (dict[str, Any]): Original bid request; left untouched.
        findings (Findings): Output of ``evaluate`` for this document.

    Returns:
        AnnotatedDocument: The annotated copy and the paths written, in order.
    """
    annotated = copy.deepcopy(document)
    added_paths: list[str] = []

    tiers = (
        (findings.missing_mandatory, Severity.REQUIRED),
        (findings.missing_recommended, Severity.RECOMMENDED),
        (findings.missing_interesting, Severity.INTERESTING),
    )
    for tier_findings, severity in tiers:
        for finding in tier_findings:
            if has_path(annotated, finding.name):
                continue
            try:
                set_value(annotated, finding.name, placeholder_for(finding.name, severity))
            except PathConflictError as exc:
                logger.warning(f"Skipping placeholder for {finding.name}: {exc}")
                continue
            added_paths.append(finding.name)

    return AnnotatedDocument(document=annotated, added_paths=added_paths)


def calculate_grade(findings: Findings) -> Grade:
    """
    Grade a bid request from its finding counts.

    Any missing mandatory field is an F. Otherwise the grade follows the number
    of missing recommended fields; interesting fields only separate A+ from A,
    and improvements never count.

    Args:
        findings (Findings): Output of ``evaluate``.

    Returns:
        Grade: A+ to F.
    """
    if findings.missing_mandatory:
        return Grade.F

    total_recommended = len(findings.missing_recommended)
    total_interesting = len(findings.missing_interesting)

    if total_recommended == 0:
        return Grade.A_PLUS if total_interesting == 0 else Grade.A
    if total_recommended <= 1:
        return Grade.B
    if total_recommended <= 3:
        return Grade.C
    if total_recommended <= 5:
        return Grade.D
    return Grade.F


def annotate_and_grade(document: dict[str, Any], findings: Findings) -> AuditResult:
    """Annotate a bid request and grade it."""
    annotated = annotate(document, findings)
    return AuditResult(
        annotated_document=annotated.document,
        added_paths=annotated.added_paths,
        grade=calculate_grade(findings),
    )
