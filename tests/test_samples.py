import pytest

from core.samples import sample_table, sample_topics


def test_population_sample():
    table = sample_table("population")

    assert table.title == "Population Estimates by Province (2024 Q2)"
    assert len(table.rows) == 14
    assert table.notes["reference_period"] == "Q2 2024"
    assert table.notes["table_id"] == "17-10-0005-01"


@pytest.mark.parametrize("topic", ["gdp", "trade", "crime", "education", "nonsense"])
def test_topics_without_a_sample_get_population(topic):
    assert sample_table(topic).title == "Population Estimates by Province (2024 Q2)"


@pytest.mark.parametrize("topic", ["population", "labour", "cpi", "housing"])
def test_samples_keep_rows_aligned_with_columns(topic):
    table = sample_table(topic)

    keys = [c.key for c in table.columns]
    assert table.rows
    for row in table.rows:
        assert list(row) == keys
    assert {"reference_period", "table_id", "geography"} <= set(table.notes)


def test_dedicated_samples():
    assert sorted(sample_topics()) == ["cpi", "housing", "labour", "population"]
    assert sample_table("cpi").title == "Consumer Price Index by Category (Nov 2024)"
    assert [c.change for c in sample_table("cpi").columns] == [False, False, True, True]


def test_sample_is_a_fresh_copy():
    first = sample_table("labour")
    first.rows.clear()
    first.title = "changed"

    second = sample_table("labour")
    assert second.title == "Labour Force Characteristics by Province (Dec 2024)"
    assert len(second.rows) == 9
