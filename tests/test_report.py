"""Tests for HTML report rendering."""

from typing import Any

from bid_request_checker.annotator import annotate_and_grade
from bid_request_checker.evaluator import evaluate
from bid_request_checker.report.html import (
    display_field_name,
    highlight_markers,
    render_error_report,
    render_report,
)
from bid_request_checker.schemas import JsonErrorReport


def test_display_field_name_replaces_first_index_only() -> None:
    """Only a leading imp[0] is shown as imp[]."""
    assert display_field_name("imp[0].bidfloor") == "imp[].bidfloor"
    assert display_field_name("imp[0].format[0].w") == "imp[].format[0].w"
    assert display_field_name("imp[1].bidfloor") == "imp[1].bidfloor"


def test_highlight_markers_escapes_and_wraps() -> None:
    """Markers become styled spans after HTML escaping."""
    html = str(highlight_markers('"<b>": "This field (tmax) is __interesting__"'))

    assert "&lt;b&gt;" in html
    assert '<span class="interesting-field">interesting to have</span>' in html


def test_render_report_for_perfect_request(complete_bid_request: dict[str, Any]) -> None:
    """A perfect request renders a green A+ with empty tables."""
    findings = evaluate(complete_bid_request)
    html = render_report(findings, annotate_and_grade(complete_bid_request, findings))

    assert '<span class="grade">A+</span>' in html
    assert "#4CAF50" in html
    assert "All recommended fields are present." in html
    assert "All interesting fields are present." in html
    assert "Fields With Values to Improve" not in html


def test_render_report_lists_findings_and_highlights_placeholders() -> None:
    """Findings are tabulated and placeholders highlighted."""
    document = {"id": "x", "imp": [{}], "device": {"geo": {"country": "ITA"}}, "user": {}}
    findings = evaluate(document)

    html = render_report(findings, annotate_and_grade(document, findings))

    assert '<span class="grade">F</span>' in html
    assert "#D32F2F" in html
    assert "<td>imp[].bidfloor</td><td>float</td>" in html
    assert "<td>regs.ext.gdpr</td><td>integer</td>" in html
    assert '<span class="required-field">required</span>' in html
    assert '<span class="recommended-field">recommended</span>' in html


def test_render_report_shows_improvements(complete_bid_request: dict[str, Any]) -> None:
    """Improvements get their own table when present."""
    complete_bid_request["regs"]["ext"]["gdpr"] = 0
    findings = evaluate(complete_bid_request)

    html = render_report(findings, annotate_and_grade(complete_bid_request, findings))

    assert "Fields With Values to Improve" in html
    assert "GDPR should be set to 1 if the request is subject to GDPR." in html


def test_render_error_report() -> None:
    """The error report shows the hint and escapes the details."""
    error = JsonErrorReport(
        message="There seems to be a syntax error in the JSON file.",
        specific_error_message="There is an extra comma at line 4. Please remove it.",
        error_details="Illegal trailing comma <here>",
        line_number=4,
    )

    html = render_error_report(error)

    assert "Bid Request Check Report - Error" in html
    assert "There is an extra comma at line 4. Please remove it." in html
    assert "Illegal trailing comma &lt;here&gt;" in html
