"""Default rule catalog for OpenRTB 2.5 bid requests."""

from bid_request_checker.rules.schemas import ConsentRule, FieldRule, RuleCatalog

MANDATORY_FIELDS: tuple[FieldRule, ...] = (
    FieldRule(
        path="id",
        type_name="string",
        description="Unique ID for the bid request; used for tracking and identification.",
    ),
    FieldRule(
        path="imp",
        type_name="array",
        description="Array of at least one impression object.",
    ),
    FieldRule(
        path="device",
        type_name="object",
        description=(
            "Device information object; provides context about the user's device "
            "for targeting and compliance."
        ),
    ),
    FieldRule(
        path="user",
        type_name="object",
        description=(
            "User information object; used for audience targeting and user-level "
            "bidding optimizations."
        ),
    ),
)

RECOMMENDED_FIELDS: tuple[FieldRule, ...] = (
    FieldRule(
        path="regs",
        type_name="object",
        description="Indicates if the request is subject to GDPR, CCPA, or other regulations.",
    ),
    FieldRule(
        path="regs.ext.gdpr",
        type_name="integer",
        description="Flag indicating if GDPR is applicable (1 if applicable).",
    ),
    FieldRule(
        path="user.ext.consent",
        type_name="string",
        description="User consent string for GDPR compliance.",
    ),
    FieldRule(
        path="cur",
        type_name="array",
        description=(
            "List of accepted currencies; allows bidders to know the acceptable "
            "currencies for bids."
        ),
    ),
    FieldRule(
        path="device.os",
        type_name="string",
        description="Operating system of the device; helps in targeting ads.",
    ),
    FieldRule(
        path="device.ua",
        type_name="string",
        description="User agent for browser or app environment targeting.",
    ),
    FieldRule(
        path="device.geo.lat",
        type_name="number",
        description="Latitude for geo-targeted advertising.",
    ),
    FieldRule(
        path="device.geo.lon",
        type_name="number",
        description="Longitude for geo-targeted advertising.",
    ),
    FieldRule(
        path="device.geo.country",
        type_name="string",
        description="Country code (ISO 3166-1 alpha-3) for targeting.",
    ),
    FieldRule(
        path="device.ip",
        type_name="string",
        description="IP address for geo-targeting and fraud prevention.",
    ),
    FieldRule(
        path="device.devicetype",
        type_name="integer",
        description="Device type for bid adjustments.",
    ),
    FieldRule(
        path="user.id",
        type_name="string",
        description="Unique user ID for frequency capping and matching.",
    ),
    FieldRule(
        path="user.buyeruid",
        type_name="string",
        description="Buyer's user ID for recognizing their users.",
    ),
    FieldRule(
        path="imp.bidfloor",
        type_name="float",
        description="Minimum bid floor to ensure a base level of revenue.",
    ),
    FieldRule(
        path="imp.secure",
        type_name="integer",
        description="Secure flag for HTTPS in-app environments.",
    ),
)

INTERESTING_FIELDS: tuple[FieldRule, ...] = (
    FieldRule(
        path="tmax", type_name="integer", description="Maximum time allowed for bids."
    ),
    FieldRule(
        path="device.language",
        type_name="string",
        description="Browser language for targeted ads.",
    ),
    FieldRule(
        path="device.geo.utcoffset",
        type_name="integer",
        description="UTC offset of the user's location.",
    ),
    FieldRule(
        path="device.geo.type",
        type_name="integer",
        description="Source of location data for accuracy.",
    ),
    FieldRule(
        path="device.geo.region",
        type_name="string",
        description="Region code for regional targeting.",
    ),
    FieldRule(
        path="device.geo.city",
        type_name="string",
        description="City name for localized campaigns.",
    ),
    FieldRule(
        path="device.geo.zip",
        type_name="string",
        description="ZIP code for hyper-local targeting.",
    ),
    FieldRule(
        path="device.dnt",
        type_name="integer",
        description="Do Not Track flag for privacy compliance.",
    ),
    FieldRule(
        path="device.osv",
        type_name="string",
        description="Operating system version for compatibility.",
    ),
    FieldRule(
        path="user.yob", type_name="integer", description="Year of birth for age-based targeting."
    ),
    FieldRule(
        path="user.gender",
        type_name="string",
        description="Gender for gender-specific targeting.",
    ),
)

# EU member states, ISO 3166-1 alpha-3
EU_COUNTRIES_ISO3: frozenset[str] = frozenset(
    {
        "AUT", "BEL", "BGR", "CYP", "CZE", "DEU", "DNK", "ESP", "EST",
        "FIN", "FRA", "GRC", "HRV", "HUN", "IRL", "ITA", "LTU", "LUX",
        "LVA", "MLT", "NLD", "POL", "PRT", "ROU", "SVK", "SVN", "SWE",
    }
)  # fmt: skip

GDPR_CONSENT_RULE = ConsentRule(
    country_path="device.geo.country",
    regions=EU_COUNTRIES_ISO3,
    flag=FieldRule(
        path="regs.ext.gdpr",
        type_name="integer",
        description="Flag indicating if GDPR is applicable (1 if applicable).",
    ),
    consent_string=FieldRule(
        path="user.ext.consent",
        type_name="string",
        description="User consent string for GDPR compliance.",
    ),
    compliant_value=1,
    improvement_description="GDPR should be set to 1 if the request is subject to GDPR.",
)

DEFAULT_CATALOG = RuleCatalog(
    mandatory=MANDATORY_FIELDS,
    recommended=RECOMMENDED_FIELDS,
    interesting=INTERESTING_FIELDS,
    consent=GDPR_CONSENT_RULE,
)
