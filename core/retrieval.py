# =============================================================================
# core/retrieval.py  —  The three request handlers
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Composes catalogue + fetcher + normalizer + samples into the three
#   operations the MCP tools expose.  Each returns a ToolReply: a one-line
#   summary for the agent plus the Table for the widget.
#
# NEVER RAISE:
#   WDS failures (TransportError / DecodeError) are logged and turned into
#   a result here.  The topic path falls back to sample data; the raw
#   table-ID path has no topic to fall back to, so it returns an empty
#   "could not retrieve" table instead.
#
# DATA SOURCE TOGGLE:
#   USE_LIVE_STATCAN=false skips the network entirely, which is handy for
#   offline development and demos.  Default is live.
# =============================================================================

import logging
import os

from core.catalogue import list_entries, lookup
from core.models import Column, Table, ToolReply
from core.normalize import parse_wds_records
from core.samples import sample_table
from core.wds import StatCanError, fetch_table

logger = logging.getLogger(__name__)

DEFAULT_TOPIC_ROWS = 15
DEFAULT_TABLE_ROWS = 20


def _live_enabled() -> bool:
    return os.environ.get("USE_LIVE_STATCAN", "true").lower() == "true"


def _fetch_live(table_id: str, max_rows: int) -> Table | None:
    """Fetch and normalize one table.  Raises StatCanError on WDS failure."""
    if not _live_enabled():
        raise StatCanError("live StatCan data disabled (USE_LIVE_STATCAN=false)")
    records = fetch_table(table_id, max_rows)
    table = parse_wds_records(records, table_id, max_rows)
    if table is None:
        logger.warning("WDS records for %s could not be normalized", table_id)
    return table


# =============================================================================
# browse_catalogue
# =============================================================================
def browse_catalogue() -> ToolReply:
    """List every curated dataset.  No network call."""
    entries = list_entries()
    rows = [
        {
            "theme": entry.theme,
            "title": entry.title,
            "id": entry.table_id,
            "description": entry.description,
        }
        for entry in entries
    ]
    table = Table(
        title="Statistics Canada Open Data Catalogue",
        source="Statistics Canada (statcan.gc.ca)",
        columns=[
            Column(key="theme", label="Theme"),
            Column(key="title", label="Dataset"),
            Column(key="id", label="Table ID"),
            Column(key="description", label="Description"),
        ],
        rows=rows,
        notes={"reference_period": "2024", "geography": "Canada", "table_id": "Multiple"},
    )
    topics = ", ".join(entry.topic for entry in entries)
    return ToolReply(
        summary=(
            f"Found {len(rows)} datasets in the Statistics Canada catalogue. "
            f"Topics: {topics}."
        ),
        table=table,
    )


# =============================================================================
# get_topic_data
# =============================================================================
def get_topic_data(topic: str, max_rows: int = DEFAULT_TOPIC_ROWS) -> ToolReply:
    """Fetch a catalogue topic, falling back to sample data on any failure."""
    entry = lookup(topic)
    if entry is None:
        return ToolReply(
            summary=f"Unknown topic: {topic}",
            table=Table(title="Error", source=""),
        )

    table = None
    try:
        table = _fetch_live(entry.table_id, max_rows)
    except StatCanError as e:
        logger.warning("Live API failed for %s (%s): %s", topic, entry.table_id, e)

    if table is not None:
        table.title = entry.title
    else:
        logger.info("Serving sample data for %s", topic)
        table = sample_table(topic)
        table.rows = table.rows[:max_rows]

    return ToolReply(
        summary=f'Loaded {len(table.rows)} records for "{table.title}".',
        table=table,
    )


# =============================================================================
# get_table_data
# =============================================================================
def get_table_data(table_id: str, max_rows: int = DEFAULT_TABLE_ROWS) -> ToolReply:
    """Fetch an arbitrary StatCan table by ID.  Live only, no sample fallback."""
    table = None
    try:
        table = _fetch_live(table_id, max_rows)
    except StatCanError as e:
        logger.warning("Live API error for table %s: %s", table_id, e)

    if table is None:
        return ToolReply(
            summary=f"Could not retrieve table {table_id}.",
            table=Table(title=f"Table {table_id}", source="Statistics Canada"),
        )

    table.title = f"Statistics Canada Table {table_id}"
    return ToolReply(
        summary=f"Loaded {len(table.rows)} rows from table {table_id}.",
        table=table,
    )
