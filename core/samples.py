# =============================================================================
# core/samples.py  —  Static fallback tables
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds hand-authored sample tables that the topic tool serves when the
#   live WDS call fails.  The agent keeps working (and the widget still
#   renders something sensible) even when StatCan is slow or down.
#
# COVERAGE:
#   Only population, labour, cpi and housing have dedicated samples.  Every
#   other topic (gdp, trade, crime, education, anything unknown) gets the
#   population table.  That's almost certainly a gap rather than a choice:
#   the summary text still names the catalogue title, but the rows are
#   population rows.
#
# The values are illustrative, rounded from published releases.
# =============================================================================

import copy

from core.models import Column, Table


_SAMPLES: dict[str, Table] = {
    "population": Table(
        title="Population Estimates by Province (2024 Q2)",
        source="Statistics Canada, Table 17-10-0005-01",
        columns=[
            Column(key="geo", label="Province / Territory"),
            Column(key="population", label="Population", numeric=True),
            Column(key="change", label="Year-over-Year Change (%)", change=True),
        ],
        rows=[
            {"geo": "Canada", "population": 41000000, "change": "2.3"},
            {"geo": "Ontario", "population": 15300000, "change": "2.7"},
            {"geo": "Quebec", "population": 9000000, "change": "1.8"},
            {"geo": "British Columbia", "population": 5700000, "change": "3.1"},
            {"geo": "Alberta", "population": 4900000, "change": "4.2"},
            {"geo": "Manitoba", "population": 1450000, "change": "2.0"},
            {"geo": "Saskatchewan", "population": 1250000, "change": "2.5"},
            {"geo": "Nova Scotia", "population": 1050000, "change": "3.6"},
            {"geo": "New Brunswick", "population": 850000, "change": "2.9"},
            {"geo": "Newfoundland and Labrador", "population": 542000, "change": "0.8"},
            {"geo": "Prince Edward Island", "population": 180000, "change": "3.5"},
            {"geo": "Northwest Territories", "population": 44000, "change": "0.5"},
            {"geo": "Yukon", "population": 46000, "change": "1.9"},
            {"geo": "Nunavut", "population": 40000, "change": "1.2"},
        ],
        notes={
            "reference_period": "Q2 2024",
            "table_id": "17-10-0005-01",
            "geography": "Provinces & Territories",
        },
    ),
    "labour": Table(
        title="Labour Force Characteristics by Province (Dec 2024)",
        source="Statistics Canada, Table 14-10-0287-01",
        columns=[
            Column(key="geo", label="Province"),
            Column(key="employed", label="Employed (000s)", numeric=True),
            Column(key="unemployed", label="Unemployed (000s)", numeric=True),
            Column(key="unemployment_rate", label="Unemployment Rate (%)", numeric=True),
            Column(key="participation_rate", label="Participation Rate (%)", numeric=True),
        ],
        rows=[
            {"geo": "Canada", "employed": 20500, "unemployed": 1450, "unemployment_rate": 6.6, "participation_rate": 65.1},
            {"geo": "Ontario", "employed": 7800, "unemployed": 560, "unemployment_rate": 6.7, "participation_rate": 65.5},
            {"geo": "Quebec", "employed": 4600, "unemployed": 290, "unemployment_rate": 5.9, "participation_rate": 64.8},
            {"geo": "British Columbia", "employed": 2900, "unemployed": 185, "unemployment_rate": 6.0, "participation_rate": 64.3},
            {"geo": "Alberta", "employed": 2500, "unemployed": 155, "unemployment_rate": 5.8, "participation_rate": 69.2},
            {"geo": "Manitoba", "employed": 720, "unemployed": 42, "unemployment_rate": 5.5, "participation_rate": 66.3},
            {"geo": "Saskatchewan", "employed": 620, "unemployed": 33, "unemployment_rate": 5.0, "participation_rate": 68.1},
            {"geo": "Nova Scotia", "employed": 510, "unemployed": 38, "unemployment_rate": 6.9, "participation_rate": 62.4},
            {"geo": "New Brunswick", "employed": 390, "unemployed": 32, "unemployment_rate": 7.6, "participation_rate": 61.8},
        ],
        notes={
            "reference_period": "December 2024",
            "table_id": "14-10-0287-01",
            "geography": "Provinces",
        },
    ),
    "cpi": Table(
        title="Consumer Price Index by Category (Nov 2024)",
        source="Statistics Canada, Table 18-10-0004-01",
        columns=[
            Column(key="category", label="Category"),
            Column(key="index", label="Index (2002=100)", numeric=True),
            Column(key="annual_change", label="Annual Change (%)", change=True),
            Column(key="monthly_change", label="Monthly Change (%)", change=True),
        ],
        rows=[
            {"category": "All-items", "index": 162.5, "annual_change": "1.9", "monthly_change": "0.1"},
            {"category": "Food", "index": 178.2, "annual_change": "2.6", "monthly_change": "0.4"},
            {"category": "Shelter", "index": 189.6, "annual_change": "4.6", "monthly_change": "0.3"},
            {"category": "Household operations", "index": 151.3, "annual_change": "1.2", "monthly_change": "-0.1"},
            {"category": "Clothing and footwear", "index": 108.7, "annual_change": "-0.8", "monthly_change": "-0.5"},
            {"category": "Transportation", "index": 165.4, "annual_change": "-0.4", "monthly_change": "0.2"},
            {"category": "Health and personal care", "index": 155.8, "annual_change": "3.1", "monthly_change": "0.2"},
            {"category": "Energy", "index": 152.1, "annual_change": "-9.2", "monthly_change": "-1.4"},
        ],
        notes={
            "reference_period": "November 2024",
            "table_id": "18-10-0004-01",
            "geography": "Canada",
        },
    ),
    "housing": Table(
        title="Housing Starts by Province (Oct 2024)",
        source="Statistics Canada / CMHC, Table 34-10-0158-01",
        columns=[
            Column(key="geo", label="Province"),
            Column(key="total", label="Total Starts", numeric=True),
            Column(key="single", label="Single-Detached", numeric=True),
            Column(key="multi", label="Multi-Unit", numeric=True),
            Column(key="annual_change", label="Year-over-Year (%)", change=True),
        ],
        rows=[
            {"geo": "Canada", "total": 22543, "single": 5821, "multi": 16722, "annual_change": "8.3"},
            {"geo": "Ontario", "total": 8120, "single": 1840, "multi": 6280, "annual_change": "12.1"},
            {"geo": "British Columbia", "total": 4350, "single": 720, "multi": 3630, "annual_change": "-4.2"},
            {"geo": "Quebec", "total": 4780, "single": 810, "multi": 3970, "annual_change": "15.6"},
            {"geo": "Alberta", "total": 3200, "single": 1650, "multi": 1550, "annual_change": "18.9"},
            {"geo": "Manitoba", "total": 560, "single": 220, "multi": 340, "annual_change": "3.7"},
            {"geo": "Saskatchewan", "total": 480, "single": 310, "multi": 170, "annual_change": "-2.0"},
            {"geo": "Nova Scotia", "total": 380, "single": 160, "multi": 220, "annual_change": "7.9"},
            {"geo": "New Brunswick", "total": 290, "single": 110, "multi": 180, "annual_change": "4.3"},
        ],
        notes={
            "reference_period": "October 2024",
            "table_id": "34-10-0158-01",
            "geography": "Provinces",
        },
    ),
}

DEFAULT_SAMPLE_TOPIC = "population"


def sample_table(topic: str) -> Table:
    """Return a fresh copy of the sample table for a topic.

    Topics without a dedicated sample get the population table.
    """
    sample = _SAMPLES.get(topic, _SAMPLES[DEFAULT_SAMPLE_TOPIC])
    return copy.deepcopy(sample)


def sample_topics() -> list[str]:
    """Topics that have their own sample table."""
    return list(_SAMPLES)
