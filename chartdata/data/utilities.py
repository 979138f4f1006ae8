"""
Stateless aggregate functions over the Values2D and KeyedValues contracts.

None of these functions keep references to their inputs. Missing cells
count as zero in totals; absent (None) required arguments always fail.
"""

import math
from collections.abc import Iterable, Sequence
from numbers import Real
from typing import Any, Optional

from ..errors import InvalidArgumentError
from ..errors.arguments import check_index, require
from ..logging.config import get_logger
from .keyed_values import DefaultKeyedValues, KeyedValues
from .values2d import Values2D

logger = get_logger(__name__)


def calculate_column_total(data: Values2D, column: int,
                           valid_rows: Optional[Iterable[int]] = None) -> float:
    """
    Sum the values in one column.

    Args:
        data: Table to read
        column: Zero-based column index
        valid_rows: Optional row indices to include; indices outside the
            table are ignored

    Returns:
        Column total, with missing cells counted as zero

    Raises:
        InvalidArgumentError: If data is None or column is out of range
    """
    require(data, "data")
    check_index(column, data.get_column_count(), "column")

    row_count = data.get_row_count()
    rows = range(row_count) if valid_rows is None else (
        r for r in valid_rows if 0 <= r < row_count)

    total = 0.0
    for row in rows:
        value = data.get_value(row, column)
        if value is not None:
            total += value
    return total


def calculate_row_total(data: Values2D, row: int,
                        valid_cols: Optional[Iterable[int]] = None) -> float:
    """
    Sum the values in one row.

    Args:
        data: Table to read
        row: Zero-based row index
        valid_cols: Optional column indices to include; indices outside the
            table are ignored

    Returns:
        Row total, with missing cells counted as zero

    Raises:
        InvalidArgumentError: If data is None or row is out of range
    """
    require(data, "data")
    check_index(row, data.get_row_count(), "row")

    column_count = data.get_column_count()
    columns = range(column_count) if valid_cols is None else (
        c for c in valid_cols if 0 <= c < column_count)

    total = 0.0
    for column in columns:
        value = data.get_value(row, column)
        if value is not None:
            total += value
    return total


def create_number_array(data: Sequence[Any]) -> list[float]:
    """Convert a sequence of raw numbers to a list of floats, preserving order."""
    require(data, "data")
    return [_to_number(v) for v in data]


def create_number_array_2d(data: Sequence[Sequence[Any]]) -> list[list[float]]:
    """Apply create_number_array to every row; jagged input stays jagged."""
    require(data, "data")
    return [create_number_array(row) for row in data]


def get_cumulative_percentages(data: KeyedValues) -> DefaultKeyedValues:
    """
    Running sum over insertion order, divided by the total.

    For keys ``0, 1, 2`` with values ``5, 9, 2`` the result is
    ``0.3125, 0.875, 1.0``. Missing values add nothing to the running sum but
    their keys are still emitted. When the total is zero every key maps to 0.0.

    Args:
        data: Ordered keyed values

    Returns:
        New DefaultKeyedValues with the same keys in the same order

    Raises:
        InvalidArgumentError: If data is None
    """
    require(data, "data")

    values = [data.get_value(i) for i in range(data.get_item_count())]
    total = sum(v for v in values if v is not None)
    if total == 0.0:
        logger.debug("Zero total in cumulative percentages", item_count=len(values))

    result = DefaultKeyedValues()
    running = 0.0
    for key, value in zip(data.get_keys(), values):
        if value is not None:
            running += value
        result.add_value(key, running / total if total != 0.0 else 0.0)
    return result


def equal(a: Optional[Sequence[Sequence[float]]],
          b: Optional[Sequence[Sequence[float]]]) -> bool:
    """
    Compare two 2D float arrays.

    Two absent arrays are equal; NaN is equal to NaN.
    """
    if a is None:
        return b is None
    if b is None or len(a) != len(b):
        return False
    for row_a, row_b in zip(a, b):
        if row_a is None or row_b is None:
            if row_a is not row_b:
                return False
            continue
        if len(row_a) != len(row_b):
            return False
        for x, y in zip(row_a, row_b):
            if not (x == y or (_is_nan(x) and _is_nan(y))):
                return False
    return True


def clone(source: Sequence[Sequence[float]]) -> list[Optional[list[float]]]:
    """Deep copy of a 2D float array; absent rows stay absent."""
    require(source, "source")
    return [None if row is None else list(row) for row in source]


def _to_number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(
            f"Expected a number, got {value!r}",
            argument="data",
            value=value,
        )
    return float(value)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)
