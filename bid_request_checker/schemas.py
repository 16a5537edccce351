"""Pydantic schemas for findings, audit results and CLI arguments."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from bid_request_checker.models import Grade


class CliArgs(BaseModel):
    """CLI arguments."""

    input_dir: Path = Path("bidRequests")
    logs_dir: Path = Path("Logs")
    workers: int = Field(default=1, ge=1)
    verbose: bool = False


class Finding(BaseModel):
    """A rule that a bid request does not satisfy."""

    name: str = Field(
        ..., description="Resolved field path, e.g. 'imp[1].bidfloor'."
    )
    type_name: str = Field(..., description="Declared OpenRTB type of the field.")
    description: str


class Findings(BaseModel):
    """Classified findings for one bid request."""

    missing_mandatory: list[Finding] = Field(default_factory=list)
    missing_recommended: list[Finding] = Field(default_factory=list)
    missing_interesting: list[Finding] = Field(default_factory=list)
    improvements: list[Finding] = Field(
        default_factory=list,
        description="Fields that are present but hold a value that should change.",
    )

    def as_tuple(
        self,
    ) -> tuple[list[Finding], list[Finding], list[Finding], list[Finding]]:
        """Return the four lists as (mandatory, recommended, interesting, improvements)."""
        return (
            self.missing_mandatory,
            self.missing_recommended,
            self.missing_interesting,
            self.improvements,
        )


class AnnotatedDocument(BaseModel):
    """Copy of a bid request with placeholder markers for missing fields."""

    document: dict[str, Any]
    added_paths: list[str] = Field(default_factory=list)


class AuditResult(BaseModel):
    """Annotated bid request plus its grade."""

    annotated_document: dict[str, Any]
    added_paths: list[str] = Field(default_factory=list)
    grade: Grade


class JsonErrorReport(BaseModel):
    """Explanation of why a bid request file could not be parsed."""

    message: str
    specific_error_message: str = ""
    error_details: str
    line_number: int | None = None


class CheckOutcome(BaseModel):
    """Result of checking one bid request file."""

    file_name: str
    html: str
    findings: Findings | None = None
    result: AuditResult | None = None
    error: JsonErrorReport | None = None

    @property
    def is_error(self) -> bool:
        """True when the file could not be evaluated."""
        return self.error is not None

    @property
    def report_file_name(self) -> str:
        """Name of the HTML report for this file."""
        stem = Path(self.file_name).stem
        prefix = "error_report" if self.is_error else "report"
        return f"{prefix}_{stem}.html"
