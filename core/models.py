# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that flows
# through the system.  They carry almost no behavior; they are structured bags
# of data that the tools layer turns into JSON.
#
# THE ONE SHAPE RULE:
#   Every tool returns a Table.  Live WDS data, sample data, the catalogue
#   listing and even error results all use it, so the widget (and the agent)
#   only ever has to understand one payload.
# =============================================================================

from dataclasses import asdict, dataclass, field
from typing import Any


# -----------------------------------------------------------------------------
# CatalogueEntry — one curated StatCan table behind a friendly topic key
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class CatalogueEntry:
    """A curated Statistics Canada table, addressed by topic key."""

    topic: str                         # "population", "cpi", ...
    table_id: str                      # "17-10-0005-01" (NN-NN-NNNN-NN)
    title: str                         # Display title for live results
    description: str                   # One-line description for browsing
    theme: str                         # Subject area, e.g. "Demographics"


# -----------------------------------------------------------------------------
# Column — one displayed field of a Table
# -----------------------------------------------------------------------------
@dataclass
class Column:
    """Display metadata for one column.

    `key` is the row field name, `label` what the widget shows.
    """

    key: str
    label: str
    numeric: bool = False              # Right-align / number-format this column
    change: bool = False               # Render as a +/- change indicator


# -----------------------------------------------------------------------------
# Table — the uniform payload every tool returns
# -----------------------------------------------------------------------------
# Column order IS display order, and every row is built with its keys in
# that same order.
# -----------------------------------------------------------------------------
@dataclass
class Table:
    """A normalized tabular result ready for display."""

    title: str
    source: str
    columns: list[Column] = field(default_factory=list)
    rows: list[dict[str, Any]] = field(default_factory=list)
    notes: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to the JSON-ready dict sent as structured content."""
        return asdict(self)


# -----------------------------------------------------------------------------
# ToolReply — what a request handler hands back to the tools layer
# -----------------------------------------------------------------------------
@dataclass
class ToolReply:
    """A short human-readable summary plus the table it describes."""

    summary: str
    table: Table
