import http.client
import logging
import urllib.request

import pytest

from core import retrieval
from core.retrieval import browse_catalogue, get_table_data, get_topic_data
from core.wds import DecodeError, TransportError


@pytest.fixture()
def live_records(monkeypatch, wds_records):
    """Serve wds_records from the fetcher, honouring max_rows like the real one."""
    calls = []

    def _fetch(table_id, max_rows=20):
        calls.append((table_id, max_rows))
        return wds_records[:max_rows]

    monkeypatch.setattr(retrieval, "fetch_table", _fetch)
    return calls


def _failing_fetch(error):
    def _fetch(table_id, max_rows=20):
        raise error

    return _fetch


# -----------------------------------------------------------------------------
# browse_catalogue
# -----------------------------------------------------------------------------
def test_browse_lists_every_entry():
    reply = browse_catalogue()

    assert len(reply.table.rows) == 8
    assert [c.key for c in reply.table.columns] == ["theme", "title", "id", "description"]
    for row in reply.table.rows:
        assert list(row) == ["theme", "title", "id", "description"]
        assert all(row.values())
    assert reply.summary.startswith("Found 8 datasets in the Statistics Canada catalogue.")
    assert "education" in reply.summary


def test_browse_never_touches_the_network(monkeypatch):
    monkeypatch.setattr(retrieval, "fetch_table", _failing_fetch(AssertionError("network")))

    assert browse_catalogue().table.title == "Statistics Canada Open Data Catalogue"


# -----------------------------------------------------------------------------
# get_topic_data
# -----------------------------------------------------------------------------
def test_topic_live_success_uses_catalogue_title(live_records):
    reply = get_topic_data("population", 10)

    assert live_records == [("17-10-0005-01", 10)]
    assert reply.table.title == "Population estimates, quarterly"
    assert reply.table.notes == {"table_id": "17-10-0005-01"}
    assert len(reply.table.rows) == 10
    assert reply.summary == 'Loaded 10 records for "Population estimates, quarterly".'


def test_topic_falls_back_to_sample_on_transport_error(monkeypatch, caplog):
    monkeypatch.setattr(retrieval, "fetch_table", _failing_fetch(TransportError("WDS API error 503")))
    caplog.set_level(logging.WARNING, logger="core.retrieval")

    reply = get_topic_data("population", 15)

    assert reply.table.title == "Population Estimates by Province (2024 Q2)"
    assert len(reply.table.rows) == 14
    assert "Live API failed for population" in caplog.text


def test_topic_falls_back_on_decode_error(monkeypatch):
    monkeypatch.setattr(retrieval, "fetch_table", _failing_fetch(DecodeError("No data returned")))

    reply = get_topic_data("labour", 20)

    assert reply.table.title == "Labour Force Characteristics by Province (Dec 2024)"


def test_topic_falls_back_when_records_cannot_be_normalized(monkeypatch):
    monkeypatch.setattr(retrieval, "fetch_table", lambda table_id, max_rows=20: ["not", "objects"])

    reply = get_topic_data("housing", 15)

    assert reply.table.title == "Housing Starts by Province (Oct 2024)"


def test_topic_fallback_respects_row_cap():
    # conftest blocks the network, so this goes straight to the sample
    reply = get_topic_data("cpi", 5)

    assert len(reply.table.rows) == 5
    assert reply.summary == 'Loaded 5 records for "Consumer Price Index by Category (Nov 2024)".'


def test_topic_without_sample_gets_population_sample():
    reply = get_topic_data("gdp", 50)

    assert reply.table.title == "Population Estimates by Province (2024 Q2)"


def test_unknown_topic_returns_empty_error_table(live_records):
    reply = get_topic_data("weather", 15)

    assert live_records == []
    assert reply.summary == "Unknown topic: weather"
    assert reply.table.title == "Error"
    assert reply.table.rows == [] and reply.table.columns == []


def test_live_disabled_serves_sample_without_fetching(monkeypatch, live_records):
    monkeypatch.setenv("USE_LIVE_STATCAN", "false")

    reply = get_topic_data("population", 15)

    assert live_records == []
    assert reply.table.title == "Population Estimates by Province (2024 Q2)"


# -----------------------------------------------------------------------------
# get_table_data
# -----------------------------------------------------------------------------
def test_table_live_success(live_records):
    reply = get_table_data("17-10-0005-01", 20)

    assert reply.table.title == "Statistics Canada Table 17-10-0005-01"
    assert len(reply.table.rows) == 12
    assert reply.summary == "Loaded 12 rows from table 17-10-0005-01."


def test_table_failure_returns_explicit_empty_table(caplog):
    caplog.set_level(logging.WARNING, logger="core.retrieval")

    reply = get_table_data("17-10-0005-01", 20)

    assert reply.table.title == "Table 17-10-0005-01"
    assert reply.table.source == "Statistics Canada"
    assert reply.table.rows == [] and reply.table.columns == []
    assert reply.summary == "Could not retrieve table 17-10-0005-01."
    assert "17-10-0005-01" in caplog.text


def test_table_passes_identifier_through_verbatim(live_records):
    get_table_data("not-a-real-id", 5)

    assert live_records == [("not-a-real-id", 5)]


@pytest.mark.parametrize(
    "table_id, error",
    [
        ("17 10 0005", http.client.InvalidURL("URL can't contain control characters")),
        ("éé-10-0005-01", UnicodeEncodeError("ascii", "éé100005", 0, 2, "ordinal not in range(128)")),
    ],
)
def test_table_with_unusable_identifier_returns_failure_table(monkeypatch, table_id, error):
    def _urlopen(req, timeout=None):
        raise error

    monkeypatch.setattr(urllib.request, "urlopen", _urlopen)

    reply = get_table_data(table_id, 20)

    assert reply.table.title == f"Table {table_id}"
    assert reply.table.rows == [] and reply.table.columns == []
    assert reply.summary == f"Could not retrieve table {table_id}."
