import urllib.error
import urllib.request

import pytest


@pytest.fixture(autouse=True)
def no_network(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests offline: any real WDS call fails like an unreachable host."""

    def _refuse(*args, **kwargs):
        raise urllib.error.URLError("network disabled in tests")

    monkeypatch.setattr(urllib.request, "urlopen", _refuse)
    monkeypatch.delenv("USE_LIVE_STATCAN", raising=False)


@pytest.fixture()
def wds_records() -> list[dict]:
    """Records shaped like a WDS jsonDownload response for table 17-10-0005-01."""
    base = {
        "REF_DATE": "2024-04",
        "GEO": "Canada",
        "DGUID": "2021A000011124",
        "Gender": "Total - gender",
        "Age group": "All ages",
        "UOM": "Persons",
        "UOM_ID": "249",
        "SCALAR_FACTOR": "units",
        "SCALAR_ID": "0",
        "VECTOR": "v466668",
        "COORDINATE": "1.1.1",
        "VALUE": 41012563,
        "STATUS": None,
        "SYMBOL": None,
        "TERMINATED": None,
        "DECIMALS": 0,
    }
    geos = ["Canada", "Ontario", "Quebec", "British Columbia", "Alberta", "Manitoba",
            "Saskatchewan", "Nova Scotia", "New Brunswick", "Prince Edward Island",
            "Newfoundland and Labrador", "Yukon"]
    return [dict(base, GEO=geo, VALUE=1000 * (i + 1)) for i, geo in enumerate(geos)]
