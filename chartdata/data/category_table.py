"""
Mutable keyed table used as the ingestion target and aggregation source.

Rows and columns are created lazily, in first-seen order, the first time a
value is added under their key. Cells that were never set are missing,
which is distinct from a recorded zero.

A CategoryTable is not synchronized; concurrent writers need external locking.
"""

from typing import Any, Hashable, Optional

from ..errors import InvalidArgumentError
from ..errors.arguments import check_index, require
from .keyed_values import DefaultKeyedValues, as_value
from .values2d import KeyedValues2D


class CategoryTable(KeyedValues2D):
    """Lazily grown KeyedValues2D keyed by row and column."""

    def __init__(self):
        self._row_keys: list[Hashable] = []
        self._column_keys: list[Hashable] = []
        self._row_indexes: dict[Hashable, int] = {}
        self._column_indexes: dict[Hashable, int] = {}
        # One entry per row, keyed by column key; absent entries are missing cells
        self._rows: list[DefaultKeyedValues] = []

    def get_row_count(self) -> int:
        return len(self._row_keys)

    def get_column_count(self) -> int:
        return len(self._column_keys)

    def get_row_keys(self) -> list[Hashable]:
        return list(self._row_keys)

    def get_column_keys(self) -> list[Hashable]:
        return list(self._column_keys)

    def get_row_index(self, key: Hashable) -> int:
        require(key, "row_key")
        return self._row_indexes.get(key, -1)

    def get_column_index(self, key: Hashable) -> int:
        require(key, "column_key")
        return self._column_indexes.get(key, -1)

    def get_value(self, row: int, column: int) -> Optional[float]:
        check_index(row, len(self._row_keys), "row")
        check_index(column, len(self._column_keys), "column")
        return self._rows[row].get_value_for_key(self._column_keys[column])

    def get_row_values(self, row: int) -> DefaultKeyedValues:
        """Snapshot of one row keyed by column key, in column order."""
        check_index(row, len(self._row_keys), "row")
        values = DefaultKeyedValues()
        for column_key in self._column_keys:
            values.add_value(column_key, self._rows[row].get_value_for_key(column_key))
        return values

    def add_value(self, value: Any, row_key: Hashable, column_key: Hashable) -> None:
        """
        Set the cell at (row_key, column_key), creating either key if new.

        Args:
            value: Number, or None to record a missing cell
            row_key: Row key, appended when not yet present
            column_key: Column key, appended when not yet present
        """
        require(row_key, "row_key")
        require(column_key, "column_key")
        value = as_value(value)

        row = self._row_indexes.get(row_key)
        if row is None:
            row = len(self._row_keys)
            self._row_indexes[row_key] = row
            self._row_keys.append(row_key)
            self._rows.append(DefaultKeyedValues())

        if column_key not in self._column_indexes:
            self._column_indexes[column_key] = len(self._column_keys)
            self._column_keys.append(column_key)

        self._rows[row].add_value(column_key, value)

    set_value = add_value

    def increment_value(self, delta: Any, row_key: Hashable, column_key: Hashable) -> None:
        """Add ``delta`` to a cell, counting a missing cell as zero."""
        delta = as_value(delta, "delta")
        if delta is None:
            raise InvalidArgumentError("Null 'delta' argument", argument="delta")
        current = self.get_value_for_keys(row_key, column_key)
        self.add_value((current or 0.0) + delta, row_key, column_key)

    def remove_value(self, row_key: Hashable, column_key: Hashable) -> None:
        """
        Make a cell missing.

        A row or column left with only missing cells is removed.
        """
        row = self._require_row(row_key)
        self._require_column(column_key)
        row_values = self._rows[row]
        if column_key in row_values:
            row_values.remove_value(column_key)

        if all(v is None for _, v in row_values.items()):
            self.remove_row(row_key)
        if all(r.get_value_for_key(column_key) is None for r in self._rows):
            self.remove_column(column_key)

    def remove_row(self, row_key: Hashable) -> None:
        """Remove a row and all of its cells."""
        row = self._require_row(row_key)
        del self._row_keys[row]
        del self._rows[row]
        self._row_indexes = {key: i for i, key in enumerate(self._row_keys)}

    def remove_column(self, column_key: Hashable) -> None:
        """Remove a column and all of its cells."""
        column = self._require_column(column_key)
        for row_values in self._rows:
            if column_key in row_values:
                row_values.remove_value(column_key)
        del self._column_keys[column]
        self._column_indexes = {key: i for i, key in enumerate(self._column_keys)}

    def clear(self) -> None:
        """Discard every row, column and cell."""
        self._row_keys.clear()
        self._column_keys.clear()
        self._row_indexes.clear()
        self._column_indexes.clear()
        self._rows.clear()

    def _require_row(self, row_key: Hashable) -> int:
        row = self.get_row_index(row_key)
        if row < 0:
            raise InvalidArgumentError(
                f"Row key ({row_key!r}) not recognised.",
                argument="row_key",
                value=row_key,
            )
        return row

    def _require_column(self, column_key: Hashable) -> int:
        column = self.get_column_index(column_key)
        if column < 0:
            raise InvalidArgumentError(
                f"Column key ({column_key!r}) not recognised.",
                argument="column_key",
                value=column_key,
            )
        return column

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyedValues2D):
            return NotImplemented
        if (self.get_row_keys() != other.get_row_keys()
                or self.get_column_keys() != other.get_column_keys()):
            return False
        return all(
            self.get_value(r, c) == other.get_value(r, c)
            for r in range(self.get_row_count())
            for c in range(self.get_column_count())
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (f"CategoryTable(rows={self.get_row_count()}, "
                f"columns={self.get_column_count()})")
