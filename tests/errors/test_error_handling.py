"""
Error handling tests for the chart data core.

Tests cover the error classification and how each kind surfaces from the
public operations.
"""

import pytest

from chartdata.data.category_table import CategoryTable
from chartdata.data.range import Range
from chartdata.data.utilities import calculate_column_total, get_cumulative_percentages
from chartdata.errors import (
    DataQualityError,
    InvalidArgumentError,
    MalformedDataError,
    ParseError,
    SourceReadError,
    SystemFailureError,
)
from chartdata.errors.arguments import check_index, require


class TestErrorClassification:
    """Test error classification system."""

    def test_invalid_argument_error(self):
        """Test invalid argument errors carry the offending argument."""
        error = InvalidArgumentError("bad column", argument="column", value=7,
                                     context={"size": 3})
        assert isinstance(error, ValueError)
        assert error.argument == "column"
        assert error.value == 7
        assert error.context == {"size": 3}
        assert error.recoverable is False

    def test_data_quality_error_hierarchy(self):
        """Test that parse errors are recoverable data quality errors."""
        base_error = DataQualityError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        parse_error = ParseError("bad number", line_number=4, field_index=2,
                                 raw_data="x", expected_format="number")
        assert isinstance(parse_error, MalformedDataError)
        assert isinstance(parse_error, DataQualityError)
        assert parse_error.line_number == 4
        assert parse_error.field_index == 2
        assert parse_error.raw_data == "x"
        assert parse_error.expected_format == "number"

    def test_system_failure_error_hierarchy(self):
        """Test that read errors are unrecoverable system failures and OSErrors."""
        error = SourceReadError("cannot open", operation="open", target="x.csv")
        assert isinstance(error, SystemFailureError)
        assert isinstance(error, OSError)
        assert error.recoverable is False
        assert error.operation == "open"
        assert error.target == "x.csv"
        assert str(error) == "cannot open"


class TestArgumentHelpers:
    """Test shared argument validation helpers."""

    def test_require(self):
        """Test require passes values through and rejects None."""
        assert require(0, "x") == 0
        with pytest.raises(InvalidArgumentError, match="Null 'x' argument"):
            require(None, "x")

    @pytest.mark.parametrize("index", [0, 4])
    def test_check_index_valid(self, index):
        """Test in-range indices pass."""
        assert check_index(index, 5, "row") == index

    @pytest.mark.parametrize("index", [-1, 5, 1.0, True, "0"])
    def test_check_index_invalid(self, index):
        """Test out-of-range or non-integer indices fail."""
        with pytest.raises(InvalidArgumentError) as excinfo:
            check_index(index, 5, "row")
        assert excinfo.value.argument == "row"


class TestSingleInvalidArgumentKind:
    """Test the same error kind is raised for every argument failure."""

    def test_bad_bounds(self):
        """Test reversed Range bounds."""
        with pytest.raises(InvalidArgumentError) as excinfo:
            Range(2.0, 1.0)
        assert excinfo.value.context == {"upper": 1.0}

    def test_bad_column_index(self):
        """Test a column index past the end."""
        table = CategoryTable()
        table.add_value(1.0, "R", "C")
        with pytest.raises(InvalidArgumentError) as excinfo:
            calculate_column_total(table, 1)
        assert excinfo.value.context == {"size": 1}

    def test_absent_input(self):
        """Test an absent required input."""
        with pytest.raises(InvalidArgumentError) as excinfo:
            get_cumulative_percentages(None)
        assert excinfo.value.argument == "data"
