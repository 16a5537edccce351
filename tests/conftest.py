import copy
from typing import Any

import pytest

COMPLETE_BID_REQUEST: dict[str, Any] = {
    "id": "req-1",
    "imp": [{"id": "1", "bidfloor": 0.5, "secure": 1}],
    "device": {
        "os": "iOS",
        "ua": "Mozilla/5.0",
        "ip": "22.11.10.9",
        "devicetype": 4,
        "language": "fr",
        "dnt": 0,
        "osv": "17.0",
        "geo": {
            "lat": 48.85,
            "lon": 2.35,
            "country": "FRA",
            "utcoffset": 60,
            "type": 2,
            "region": "IDF",
            "city": "Paris",
            "zip": "75001",
        },
    },
    "user": {
        "id": "user-1",
        "buyeruid": "buyer-1",
        "yob": 1990,
        "gender": "F",
        "ext": {"consent": "CPXxRfAPXxRfAAfKABENB-CgAAAAAAAAAAYgAAAAAAAA"},
    },
    "regs": {"ext": {"gdpr": 1}},
    "cur": ["EUR"],
    "tmax": 120,
}


@pytest.fixture
def complete_bid_request() -> dict[str, Any]:
    """A bid request that satisfies every rule of the default catalog."""
    return copy.deepcopy(COMPLETE_BID_REQUEST)
