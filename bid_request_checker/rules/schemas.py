"""Schemas for field rules and rule catalogs."""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from bid_request_checker.utils.json_path import parse_path

IMPRESSION_SEGMENT = "imp"


class FieldRule(BaseModel):
    """A field a bid request is expected to carry."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Dotted field path, e.g. 'device.geo.lat'.")
    type_name: str = Field(..., description="OpenRTB type name, for reporting only.")
    description: str

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Reject empty paths and empty segments."""
        if not v or any(not segment for segment in parse_path(v)):
            raise ValueError(f"Rule path must not contain empty segments, got '{v}'")
        return v

    @property
    def is_impression_scoped(self) -> bool:
        """True when the rule applies once per element of ``imp``."""
        segments = parse_path(self.path)
        return len(segments) > 1 and segments[0] == IMPRESSION_SEGMENT

    @property
    def impression_subpath(self) -> str:
        """Path relative to a single impression."""
        return ".".join(parse_path(self.path)[1:])

    def resolve_for_impression(self, index: int) -> str:
        """Path of this rule inside impression ``index``, e.g. 'imp[0].bidfloor'."""
        return f"{IMPRESSION_SEGMENT}[{index}].{self.impression_subpath}"


class ConsentRule(BaseModel):
    """GDPR flag and consent string, required only for requests from listed regions."""

    model_config = ConfigDict(frozen=True)

    country_path: str = "device.geo.country"
    regions: frozenset[str]
    flag: FieldRule
    consent_string: FieldRule
    compliant_value: int = 1
    improvement_description: str

    def applies_to(self, country: object) -> bool:
        """Check whether a country code falls inside the regulated regions."""
        return isinstance(country, str) and country in self.regions


class RuleCatalog(BaseModel):
    """Mandatory, recommended and interesting rules plus the consent rule."""

    model_config = ConfigDict(frozen=True)

    mandatory: tuple[FieldRule, ...]
    recommended: tuple[FieldRule, ...]
    interesting: tuple[FieldRule, ...]
    consent: ConsentRule

    @model_validator(mode="after")
    def validate_tiers(self) -> Self:
        """Validate that no path is declared twice and mandatory rules are document-level."""
        seen: dict[str, str] = {}
        for tier in ("mandatory", "recommended", "interesting"):
            for rule in getattr(self, tier):
                if rule.path in seen:
                    raise ValueError(
                        f"Rule path '{rule.path}' declared in {tier} "
                        f"is already declared in {seen[rule.path]}"
                    )
                seen[rule.path] = tier

        scoped = [rule.path for rule in self.mandatory if rule.is_impression_scoped]
        if scoped:
            raise ValueError(
                f"Mandatory rules cannot be impression-scoped: {scoped}"
            )
        return self

    def impression_rules(self, tier: str) -> list[FieldRule]:
        """Rules of a tier that apply to each impression."""
        return [rule for rule in getattr(self, tier) if rule.is_impression_scoped]

    def document_rules(self, tier: str) -> list[FieldRule]:
        """Rules of a tier that apply to the whole document."""
        return [rule for rule in getattr(self, tier) if not rule.is_impression_scoped]
