"""Field-presence evaluation of bid requests against a rule catalog."""

import logging
from typing import Any

from bid_request_checker.errors import InvalidDocumentError
from bid_request_checker.rules.openrtb import DEFAULT_CATALOG
from bid_request_checker.rules.schemas import (
    IMPRESSION_SEGMENT,
    ConsentRule,
    FieldRule,
    RuleCatalog,
)
from bid_request_checker.schemas import Finding, Findings
from bid_request_checker.utils.json_path import MISSING, get_value, has_path

logger = logging.getLogger(__name__)


def _finding(rule: FieldRule, name: str | None = None) -> Finding:
    return Finding(
        name=name or rule.path, type_name=rule.type_name, description=rule.description
    )


def _missing_document_fields(
    document: dict[str, Any], rules: list[FieldRule]
) -> list[Finding]:
    return [_finding(rule) for rule in rules if not has_path(document, rule.path)]


def _missing_impression_fields(
    impressions: list[Any], rules: list[FieldRule]
) -> list[Finding]:
    """Expand impression-scoped rules over every impression, in index order."""
    findings: list[Finding] = []
    for index, impression in enumerate(impressions):
        for rule in rules:
            if not has_path(impression, rule.impression_subpath):
                findings.append(_finding(rule, rule.resolve_for_impression(index)))
    return findings


def _is_compliant(value: Any, compliant_value: int) -> bool:
    # bool is an int subclass; JSON true is not the flag value 1
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value == compliant_value


def _check_consent(
    document: dict[str, Any], rule: ConsentRule, findings: Findings
) -> None:
    """Apply the region-conditional GDPR rule."""
    country = get_value(document, rule.country_path)
    if not rule.applies_to(country):
        return

    logger.debug(f"Request from regulated region {country}, checking consent fields")
    flag = get_value(document, rule.flag.path)
    if flag is MISSING:
        findings.missing_mandatory.append(_finding(rule.flag))
    elif not _is_compliant(flag, rule.compliant_value):
        findings.improvements.append(
            Finding(
                name=rule.flag.path,
                type_name=rule.flag.type_name,
                description=rule.improvement_description,
            )
        )

    if not has_path(document, rule.consent_string.path):
        findings.missing_mandatory.append(_finding(rule.consent_string))


def evaluate(
    document: dict[str, Any], catalog: RuleCatalog = DEFAULT_CATALOG
) -> Findings:
    """
    Classify a bid request against a rule catalog.

    Impression-scoped findings come first within their tier, ordered by
    impression index and then by catalog order. The document is not modified.

    Args:
        document (dict[str, Any]): Parsed bid request.
        catalog (RuleCatalog): Rules to check; defaults to the OpenRTB catalog.

    Returns:
        Findings: Missing mandatory, recommended and interesting fields plus
            improvement advisories.

    Raises:
        InvalidDocumentError: If the document is not a JSON object.
    """
    if not isinstance(document, dict):
        raise InvalidDocumentError(document)

    findings = Findings(
        missing_mandatory=_missing_document_fields(document, list(catalog.mandatory))
    )

    impressions = document.get(IMPRESSION_SEGMENT)
    if isinstance(impressions, list):
        findings.missing_recommended.extend(
            _missing_impression_fields(
                impressions, catalog.impression_rules("recommended")
            )
        )
        findings.missing_interesting.extend(
            _missing_impression_fields(
                impressions, catalog.impression_rules("interesting")
            )
        )

    findings.missing_recommended.extend(
        _missing_document_fields(document, catalog.document_rules("recommended"))
    )
    findings.missing_interesting.extend(
        _missing_document_fields(document, catalog.document_rules("interesting"))
    )

    _check_consent(document, catalog.consent, findings)

    logger.debug(
        f"Evaluated bid request: {len(findings.missing_mandatory)} mandatory, "
        f"{len(findings.missing_recommended)} recommended, "
        f"{len(findings.missing_interesting)} interesting missing"
    )
    return findings
