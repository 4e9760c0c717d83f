# =============================================================================
# core/catalogue.py  —  Curated Statistics Canada table catalogue
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Maps the 8 friendly topic keys the agent can ask for ("population",
#   "cpi", ...) to real StatCan table IDs plus display metadata.
#
# WHY A STATIC TABLE?
#   StatCan publishes thousands of tables.  The agent doesn't need to search
#   all of them to answer "what's inflation doing?"; it needs a short,
#   trustworthy list.  Arbitrary tables are still reachable through the
#   search_statcan tool, which takes a raw table ID.
# =============================================================================

from core.models import CatalogueEntry


_CATALOGUE: dict[str, CatalogueEntry] = {
    "population": CatalogueEntry(
        topic="population",
        table_id="17-10-0005-01",
        title="Population estimates, quarterly",
        description="Canadian population by province/territory",
        theme="Demographics",
    ),
    "labour": CatalogueEntry(
        topic="labour",
        table_id="14-10-0287-01",
        title="Labour force characteristics by province",
        description="Employment, unemployment rate, participation rate",
        theme="Labour market",
    ),
    "cpi": CatalogueEntry(
        topic="cpi",
        table_id="18-10-0004-01",
        title="Consumer Price Index, monthly",
        description="CPI by product group - food, shelter, energy",
        theme="Prices",
    ),
    "gdp": CatalogueEntry(
        topic="gdp",
        table_id="36-10-0434-01",
        title="GDP by industry",
        description="GDP at basic prices by industry group, monthly",
        theme="National accounts",
    ),
    "housing": CatalogueEntry(
        topic="housing",
        table_id="34-10-0158-01",
        title="Housing starts (CMHC)",
        description="Housing starts by type of dwelling, monthly",
        theme="Housing",
    ),
    "trade": CatalogueEntry(
        topic="trade",
        table_id="12-10-0011-01",
        title="International merchandise trade",
        description="Canadian exports and imports by commodity",
        theme="International trade",
    ),
    "crime": CatalogueEntry(
        topic="crime",
        table_id="35-10-0177-01",
        title="Crime severity index",
        description="Crime severity index by province and CMA",
        theme="Justice",
    ),
    "education": CatalogueEntry(
        topic="education",
        table_id="37-10-0003-01",
        title="Postsecondary enrolments",
        description="University and college enrolments by province",
        theme="Education",
    ),
}

# Topic keys in catalogue order.  The MCP layer builds its input enum from
# the same literal list, and a test keeps the two in sync.
TOPICS: tuple[str, ...] = tuple(_CATALOGUE)


def lookup(topic: str) -> CatalogueEntry | None:
    """Return the catalogue entry for a topic key, or None if unknown."""
    return _CATALOGUE.get(topic)


def list_entries() -> list[CatalogueEntry]:
    """All catalogue entries, in catalogue order."""
    return list(_CATALOGUE.values())
