"""Error types and JSON parse-error diagnosis."""

import json

from bid_request_checker.schemas import JsonErrorReport

GENERIC_JSON_ERROR = (
    "The JSON is invalid. Please check the structure of the JSON file."
)
SYNTAX_JSON_ERROR = "There seems to be a syntax error in the JSON file."


class PathConflictError(ValueError):
    """Raised when a write has to descend through a value that is not a container."""

    def __init__(self, path: str, segment: str, found: object) -> None:
        self.path = path
        self.segment = segment
        super().__init__(
            f"Cannot write '{path}': segment '{segment}' is not addressable "
            f"in a value of type {type(found).__name__}"
        )


class InvalidDocumentError(TypeError):
    """Raised when a bid request is not a JSON object."""

    def __init__(self, document: object) -> None:
        super().__init__(
            f"Bid request must be a JSON object, got {type(document).__name__}"
        )


def _trailing_comma_position(error: json.JSONDecodeError) -> int | None:
    """Return the index of a comma directly followed by a closing bracket."""
    doc = error.doc or ""
    if doc[error.pos : error.pos + 1] not in ("}", "]"):
        return None
    before = doc[: error.pos].rstrip()
    if not before.endswith(","):
        return None
    return len(before) - 1


def describe_json_error(error: json.JSONDecodeError) -> JsonErrorReport:
    """
    Turn a decoder error into a human-readable error report.

    Args:
        error (json.JSONDecodeError): Error raised by ``json.loads``.

    Returns:
        JsonErrorReport: Message, line-specific hint and raw decoder details.
    """
    doc = error.doc or ""
    if not doc.strip():
        return JsonErrorReport(
            message=GENERIC_JSON_ERROR,
            specific_error_message="",
            error_details=str(error),
            line_number=None,
        )

    comma_pos = _trailing_comma_position(error)
    if comma_pos is not None or "trailing comma" in error.msg:
        line_number = (
            doc.count("\n", 0, comma_pos) + 1 if comma_pos is not None else error.lineno
        )
        specific = f"There is an extra comma at line {line_number}. Please remove it."
    elif error.msg.startswith("Expecting ',' delimiter"):
        line_number = error.lineno
        specific = f"There is a missing ',' or '}}' at line {line_number}."
    else:
        line_number = error.lineno
        specific = f"Please check the JSON at line {line_number}."

    return JsonErrorReport(
        message=SYNTAX_JSON_ERROR,
        specific_error_message=specific,
        error_details=str(error),
        line_number=line_number,
    )
