"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Callable

import pytest

from chartdata.data.category_table import CategoryTable
from chartdata.data.keyed_values import DefaultKeyedValues
from chartdata.data.range import Range


@pytest.fixture
def unit_range() -> Range:
    """Range [0, 100] used across Range tests."""
    return Range(0.0, 100.0)


@pytest.fixture
def house_prices() -> CategoryTable:
    """Small table with distinct row and column totals."""
    table = CategoryTable()
    rows = {
        "1": {"price": 42000.0, "lotsize": 5850.0, "bedrooms": 3.0},
        "2": {"price": 38500.0, "lotsize": 4000.0, "bedrooms": 2.0},
        "3": {"price": 49500.0, "lotsize": 3060.0, "bedrooms": 3.0},
    }
    for row_key, cells in rows.items():
        for column_key, value in cells.items():
            table.add_value(value, row_key, column_key)
    return table


@pytest.fixture
def empty_table() -> CategoryTable:
    """Table cleared back to zero rows and columns."""
    table = CategoryTable()
    table.add_value(1.0, "r", "c")
    table.clear()
    return table


@pytest.fixture
def keyed_5_9_2() -> DefaultKeyedValues:
    """Integer keys 0, 1, 2 holding 5, 9, 2 in that order."""
    values = DefaultKeyedValues()
    values.add_value(0, 5)
    values.add_value(1, 9)
    values.add_value(2, 2)
    return values


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write CSV text to a file under tmp_path and return its path."""
    def _write(content: str, name: str = "data.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
