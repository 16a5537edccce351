"""Tests for rule catalog construction and validation."""

import pytest
from pydantic import ValidationError

from bid_request_checker.rules import DEFAULT_CATALOG, EU_COUNTRIES_ISO3
from bid_request_checker.rules.schemas import FieldRule, RuleCatalog


def _rule(path: str) -> FieldRule:
    return FieldRule(path=path, type_name="string", description=f"{path} field")


def test_default_catalog_tiers() -> None:
    """The default catalog carries the OpenRTB 2.5 field tables."""
    assert [rule.path for rule in DEFAULT_CATALOG.mandatory] == [
        "id",
        "imp",
        "device",
        "user",
    ]
    assert len(DEFAULT_CATALOG.recommended) == 15
    assert len(DEFAULT_CATALOG.interesting) == 11
    assert len(EU_COUNTRIES_ISO3) == 27
    assert DEFAULT_CATALOG.consent.country_path == "device.geo.country"


def test_impression_scoped_rules_are_detected() -> None:
    """Only paths under imp with a subpath are impression-scoped."""
    assert [rule.path for rule in DEFAULT_CATALOG.impression_rules("recommended")] == [
        "imp.bidfloor",
        "imp.secure",
    ]
    assert DEFAULT_CATALOG.impression_rules("interesting") == []
    assert not _rule("imp").is_impression_scoped
    assert not _rule("impression.id").is_impression_scoped


def test_resolve_for_impression_substitutes_index() -> None:
    """Impression rules resolve to a concrete impression index."""
    rule = _rule("imp.banner.w")

    assert rule.impression_subpath == "banner.w"
    assert rule.resolve_for_impression(3) == "imp[3].banner.w"


def test_field_rule_rejects_empty_segments() -> None:
    """Paths with empty segments are rejected."""
    with pytest.raises(ValidationError):
        _rule("device..os")
    with pytest.raises(ValidationError):
        _rule("")


def test_catalog_rejects_paths_declared_in_two_tiers() -> None:
    """A path may only be declared in one tier."""
    with pytest.raises(ValidationError, match="already declared in mandatory"):
        RuleCatalog(
            mandatory=(_rule("id"),),
            recommended=(_rule("id"),),
            interesting=(),
            consent=DEFAULT_CATALOG.consent,
        )


def test_catalog_rejects_impression_scoped_mandatory_rules() -> None:
    """Mandatory rules cannot be impression-scoped."""
    with pytest.raises(ValidationError, match="impression-scoped"):
        RuleCatalog(
            mandatory=(_rule("imp.id"),),
            recommended=(),
            interesting=(),
            consent=DEFAULT_CATALOG.consent,
        )


def test_catalog_is_immutable() -> None:
    """Catalogs are frozen once built."""
    with pytest.raises(ValidationError):
        DEFAULT_CATALOG.mandatory = ()


def test_consent_rule_only_applies_to_listed_alpha3_codes() -> None:
    """Only exact alpha-3 strings from the region list match."""
    consent = DEFAULT_CATALOG.consent

    assert consent.applies_to("DEU")
    assert not consent.applies_to("DE")
    assert not consent.applies_to("USA")
    assert not consent.applies_to(["FRA"])
    assert not consent.applies_to(None)
