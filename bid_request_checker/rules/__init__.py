from bid_request_checker.rules.openrtb import DEFAULT_CATALOG, EU_COUNTRIES_ISO3
from bid_request_checker.rules.schemas import ConsentRule, FieldRule, RuleCatalog

__all__ = [
    "DEFAULT_CATALOG",
    "EU_COUNTRIES_ISO3",
    "ConsentRule",
    "FieldRule",
    "RuleCatalog",
]
