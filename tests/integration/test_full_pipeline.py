"""
Integration tests for the full ingestion and aggregation pipeline.

Tests the flow from CSV through CategoryTable and aggregate utilities to a
Range describing the result.
"""

import pytest

from chartdata import (
    DefaultKeyedValues,
    Range,
    calculate_column_total,
    calculate_row_total,
    get_cumulative_percentages,
    read_category_dataset,
)
from chartdata.config.loader import ConfigLoader
from chartdata.data.parsers import CSVReader

HOUSE_PRICES_CSV = """\
price,lotsize,bedrooms,bathrooms
42000,5850,3,1
38500,4000,2,1
49500,3060,3,
60500,6650,3,1
"""


class TestFullPipeline:
    """Test end-to-end processing."""

    def test_csv_to_totals(self, write_csv):
        """Test column and row totals over an ingested table."""
        table = read_category_dataset(write_csv(HOUSE_PRICES_CSV))

        assert table.get_row_count() == 4
        assert table.get_column_count() == 4
        assert calculate_column_total(table, table.get_column_index("price")) == 190500.0
        assert calculate_column_total(table, table.get_column_index("bathrooms")) == 3.0
        assert calculate_row_total(table, 2) == 52563.0

    def test_column_totals_to_cumulative_distribution(self, write_csv):
        """Test cumulative percentages of column totals span [0, 1]."""
        table = read_category_dataset(write_csv(HOUSE_PRICES_CSV))

        totals = DefaultKeyedValues()
        for column, key in enumerate(table.get_column_keys()):
            totals.add_value(key, calculate_column_total(table, column))

        cumulative = get_cumulative_percentages(totals)
        assert cumulative.get_keys() == table.get_column_keys()
        assert cumulative.get_value(cumulative.get_item_count() - 1) == pytest.approx(1.0)

        domain = None
        for _, value in cumulative.items():
            domain = Range.expand_to_include(domain, value)
        assert domain.upper_bound == pytest.approx(1.0)
        assert Range(0.0, 1.0).intersects(domain)
        values = [value for _, value in cumulative.items()]
        assert values == sorted(values)

    def test_axis_extent_from_table(self, write_csv):
        """Test building a padded axis range over every cell."""
        table = read_category_dataset(write_csv("a,b\n1,2\n3,4\n"))

        extent = None
        for row in range(table.get_row_count()):
            for column in range(table.get_column_count()):
                value = table.get_value(row, column)
                if value is not None:
                    extent = Range.expand_to_include(extent, value)

        assert extent == Range(1.0, 4.0)
        padded = Range.expand(extent, 0.1, 0.1)
        assert padded.lower_bound == pytest.approx(0.7)
        assert padded.upper_bound == pytest.approx(4.3)

    def test_configured_reader(self, write_csv, tmp_path):
        """Test a reader built from loaded configuration."""
        (tmp_path / "chartdata.yaml").write_text("csv:\n  field_delimiter: ';'\n  row_key_start: 0\n")
        config = ConfigLoader.create(tmp_path).load_config()

        table = CSVReader(config.csv).read_category_dataset(write_csv("a;b\n1;2\n", name="semi.csv"))
        assert table.get_row_keys() == ["0"]
        assert calculate_row_total(table, 0) == 3.0
