"""HTML rendering of bid request reports."""

import json
import re
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape

from bid_request_checker.models import Severity, get_grade_color
from bid_request_checker.schemas import AuditResult, Findings, JsonErrorReport

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

MARKER_LABELS: dict[Severity, str] = {
    Severity.REQUIRED: "required",
    Severity.RECOMMENDED: "recommended",
    Severity.INTERESTING: "interesting to have",
}

_MARKER = re.compile(r"__(required|recommended|interesting)__")


def display_field_name(name: str) -> str:
    """Show the first impression index as a generic array marker."""
    return name.replace("[0]", "[]", 1)


def highlight_markers(text: str) -> Markup:
    """
    Escape text and wrap placeholder markers in styled spans.

    Args:
        text (str): Pretty-printed JSON containing ``__<severity>__`` markers.

    Returns:
        Markup: Safe HTML.
    """

    def _span(match: re.Match[str]) -> str:
        severity = Severity(match.group(1))
        return (
            f'<span class="{severity.value}-field">{MARKER_LABELS[severity]}</span>'
        )

    return Markup(_MARKER.sub(_span, str(escape(text))))


ENV = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
ENV.filters["display_field_name"] = display_field_name
ENV.filters["highlight_markers"] = highlight_markers


def render_report(findings: Findings, result: AuditResult) -> str:
    """
    Render the HTML report for an evaluated bid request.

    Args:
        findings (Findings): Output of ``evaluate``.
        result (AuditResult): Output of ``annotate_and_grade``.

    Returns:
        str: Complete HTML document.
    """
    template = ENV.get_template("report.html")
    return template.render(
        grade=result.grade.value,
        grade_color=get_grade_color(result.grade),
        missing_mandatory=findings.missing_mandatory,
        missing_recommended=findings.missing_recommended,
        missing_interesting=findings.missing_interesting,
        improvements=findings.improvements,
        annotated_json=json.dumps(
            result.annotated_document, indent=4, ensure_ascii=False
        ),
    )


def render_error_report(error: JsonErrorReport) -> str:
    """Render the HTML report for a bid request that could not be parsed."""
    template = ENV.get_template("error_report.html")
    return template.render(error=error)
