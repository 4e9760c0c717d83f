# =============================================================================
# core/normalize.py  —  WDS records → Table
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the raw list of WDS record dicts into the uniform Table shape.
#
# THE HEURISTIC (keep it exactly as is):
#   WDS rows carry a lot of bookkeeping fields (DGUID, UOM_ID, VECTOR, ...)
#   that mean nothing to a reader.  We drop a fixed denylist of them, then
#   keep the first 6 of whatever is left, in the order the first record
#   lists them.  Fewer than 6 left means fewer columns, never padding.
#   The widget and the agent both rely on that exact shape.
#
# Values are passed through untouched.  "numeric" is decided by field NAME,
# not by looking at the values, so a column keeps the same flag from one
# response to the next.
# =============================================================================

import re
from collections.abc import Mapping, Sequence
from typing import Any

from core.models import Column, Table

MAX_DISPLAY_COLUMNS = 6

METADATA_FIELDS = frozenset({
    "DGUID",            # Geography unique identifier
    "UOM",
    "UOM_ID",
    "SCALAR_FACTOR",
    "SCALAR_ID",
    "VECTOR",
    "COORDINATE",
    "STATUS",
    "SYMBOL",
    "TERMINATED",
    "DECIMALS",
})

# Applied in order, after word capitalization.  Whole words only, so a label
# that is already right ("Geography", "Reference Date") is left alone.
_LABEL_OVERRIDES = (
    (re.compile(r"\bRef Date\b"), "Reference Date"),
    (re.compile(r"\bGeo\b"), "Geography"),
    (re.compile(r"\bVALUE\b"), "Value"),
)

PLACEHOLDER_TITLE = "Statistics Canada Data"
SOURCE = "Statistics Canada"


def column_label(key: str) -> str:
    """Turn a WDS field name into a display label.

    "REF_DATE" → "Reference Date", "GEO" → "Geography", "VALUE" → "Value".
    """
    label = " ".join(word.capitalize() for word in key.replace("_", " ").split(" "))
    for pattern, replacement in _LABEL_OVERRIDES:
        label = pattern.sub(replacement, label)
    return label


def is_numeric_field(key: str) -> bool:
    """True for VALUE and any field whose name mentions "value"."""
    return key == "VALUE" or "value" in key.lower()


def display_keys(record: Mapping[str, Any]) -> list[str]:
    """Pick the displayed field names from a record's keys."""
    keys = [k for k in record if k not in METADATA_FIELDS]
    return keys[:MAX_DISPLAY_COLUMNS]


def parse_wds_records(
    records: Sequence[Any],
    table_id: str,
    max_rows: int,
) -> Table | None:
    """Normalize WDS records into a Table.

    Args:
        records: Decoded WDS records (normally dicts).
        table_id: The table ID the records came from; recorded in notes.
        max_rows: Row cap.

    Returns:
        A Table, or None if there are no records or one of the rows we'd
        display isn't a JSON object.
    """
    if not records:
        return None

    kept = list(records[:max_rows])
    if not all(isinstance(record, Mapping) for record in kept):
        return None

    keys = display_keys(kept[0])
    columns = [
        Column(key=k, label=column_label(k), numeric=is_numeric_field(k))
        for k in keys
    ]
    rows = [{k: record.get(k) for k in keys} for record in kept]

    return Table(
        title=PLACEHOLDER_TITLE,
        source=SOURCE,
        columns=columns,
        rows=rows,
        notes={"table_id": table_id},
    )
