"""Tests for JSON parse-error diagnosis."""

import json

import pytest

from bid_request_checker.errors import (
    GENERIC_JSON_ERROR,
    SYNTAX_JSON_ERROR,
    describe_json_error,
)


def _decode_error(raw: str) -> json.JSONDecodeError:
    with pytest.raises(json.JSONDecodeError) as excinfo:
        json.loads(raw)
    return excinfo.value


def test_trailing_comma_in_object_points_at_comma_line() -> None:
    """A trailing comma in an object is reported on the comma's line."""
    raw = '{\n    "device": {\n        "ip": "22.11.10.9",\n    }\n}'

    report = describe_json_error(_decode_error(raw))

    assert report.message == SYNTAX_JSON_ERROR
    assert report.line_number == 3
    assert report.specific_error_message == (
        "There is an extra comma at line 3. Please remove it."
    )


def test_trailing_comma_in_array() -> None:
    """A trailing comma in an array is reported too."""
    raw = '{"cur": ["USD",\n]}'

    report = describe_json_error(_decode_error(raw))

    assert report.specific_error_message == (
        "There is an extra comma at line 1. Please remove it."
    )


def test_missing_comma_between_members() -> None:
    """A missing comma is reported on the line that needs it."""
    raw = '{\n    "devicetype": 6\n    "ip": "73.141.79.240"\n}'

    report = describe_json_error(_decode_error(raw))

    assert report.line_number == 3
    assert report.specific_error_message == "There is a missing ',' or '}' at line 3."


def test_other_syntax_errors_get_line_hint() -> None:
    """Other syntax errors point at the offending line."""
    report = describe_json_error(_decode_error('{"secure": tru}'))

    assert report.message == SYNTAX_JSON_ERROR
    assert report.specific_error_message == "Please check the JSON at line 1."
    assert "line 1" in report.error_details


def test_empty_file_gets_generic_message() -> None:
    """An empty file gets the generic message with no line."""
    report = describe_json_error(_decode_error("   "))

    assert report.message == GENERIC_JSON_ERROR
    assert report.specific_error_message == ""
    assert report.line_number is None
