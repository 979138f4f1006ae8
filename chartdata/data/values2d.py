"""
Two-dimensional grids of optional numeric values.

``Values2D`` addresses cells by zero-based row and column index.
``KeyedValues2D`` adds a key for every row and column. Aggregate utilities
only depend on these contracts, so any table variant implementing them can
be summed or converted without changes elsewhere.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Hashable, Optional

from ..errors import InvalidArgumentError
from ..errors.arguments import check_index, require
from .keyed_values import as_value


class Values2D(ABC):
    """Index-addressable grid of optional numeric cells."""

    @abstractmethod
    def get_row_count(self) -> int:
        """Number of rows."""

    @abstractmethod
    def get_column_count(self) -> int:
        """Number of columns."""

    @abstractmethod
    def get_value(self, row: int, column: int) -> Optional[float]:
        """Cell value; None when the cell is missing."""


class KeyedValues2D(Values2D):
    """Values2D with a unique key for every row and column."""

    @abstractmethod
    def get_row_keys(self) -> list[Hashable]:
        """Row keys in index order."""

    @abstractmethod
    def get_column_keys(self) -> list[Hashable]:
        """Column keys in index order."""

    @abstractmethod
    def get_row_index(self, key: Hashable) -> int:
        """Index of a row key, or -1 when it is not present."""

    @abstractmethod
    def get_column_index(self, key: Hashable) -> int:
        """Index of a column key, or -1 when it is not present."""

    def get_row_key(self, row: int) -> Hashable:
        check_index(row, self.get_row_count(), "row")
        return self.get_row_keys()[row]

    def get_column_key(self, column: int) -> Hashable:
        check_index(column, self.get_column_count(), "column")
        return self.get_column_keys()[column]

    def get_value_for_keys(self, row_key: Hashable, column_key: Hashable) -> Optional[float]:
        """Cell value by keys; None when either key is unknown or the cell missing."""
        row = self.get_row_index(row_key)
        column = self.get_column_index(column_key)
        if row < 0 or column < 0:
            return None
        return self.get_value(row, column)


class DenseValues2D(Values2D):
    """
    Immutable array-backed Values2D.

    Rows shorter than the column count are padded with missing cells.
    ``column_count`` defaults to the longest row and may be given explicitly
    to describe a table with columns but no rows.
    """

    def __init__(self, rows: Sequence[Sequence[Any]], column_count: Optional[int] = None):
        require(rows, "rows")
        self._rows = tuple(
            tuple(as_value(v, "rows") for v in require(row, "rows"))
            for row in rows
        )
        widest = max((len(row) for row in self._rows), default=0)
        if column_count is None:
            column_count = widest
        elif column_count < widest:
            raise InvalidArgumentError(
                f"column_count ({column_count}) is less than the widest row ({widest})",
                argument="column_count",
                value=column_count,
            )
        self._column_count = column_count

    def get_row_count(self) -> int:
        return len(self._rows)

    def get_column_count(self) -> int:
        return self._column_count

    def get_value(self, row: int, column: int) -> Optional[float]:
        check_index(row, len(self._rows), "row")
        check_index(column, self._column_count, "column")
        cells = self._rows[row]
        return cells[column] if column < len(cells) else None
