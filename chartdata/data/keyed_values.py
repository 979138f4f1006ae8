"""
Ordered mapping from unique keys to optional numeric values.

Insertion order is significant: consumers such as cumulative percentage
calculations walk the values in the order their keys were first added.
"""

import math
from abc import ABC, abstractmethod
from numbers import Real
from typing import Any, Hashable, Iterator, Optional

from ..errors import InvalidArgumentError
from ..errors.arguments import check_index, require


def as_value(value: Any, argument: str = "value") -> Optional[float]:
    """Normalize an optional numeric value, rejecting anything non-numeric."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(
            f"'{argument}' must be a number or None, got {value!r}",
            argument=argument,
            value=value,
        )
    return float(value)


class KeyedValues(ABC):
    """Read access to an ordered sequence of (key, optional value) pairs."""

    @abstractmethod
    def get_item_count(self) -> int:
        """Number of keys."""

    @abstractmethod
    def get_keys(self) -> list[Hashable]:
        """Keys in insertion order."""

    @abstractmethod
    def get_index(self, key: Hashable) -> int:
        """Index of ``key``, or -1 when it is not present."""

    @abstractmethod
    def get_value(self, index: int) -> Optional[float]:
        """Value at ``index``; None when the value is missing."""

    def get_key(self, index: int) -> Hashable:
        """Key at ``index``."""
        check_index(index, self.get_item_count(), "index")
        return self.get_keys()[index]

    def get_value_for_key(self, key: Hashable) -> Optional[float]:
        """Value for ``key``; None when the key is unknown or its value missing."""
        index = self.get_index(key)
        if index < 0:
            return None
        return self.get_value(index)

    def items(self) -> Iterator[tuple[Hashable, Optional[float]]]:
        """Iterate over (key, value) pairs in order."""
        for index, key in enumerate(self.get_keys()):
            yield key, self.get_value(index)

    def __len__(self) -> int:
        return self.get_item_count()

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.get_keys())

    def __contains__(self, key: object) -> bool:
        return self.get_index(key) >= 0


class DefaultKeyedValues(KeyedValues):
    """List-backed KeyedValues with upsert semantics."""

    def __init__(self):
        self._keys: list[Hashable] = []
        self._values: list[Optional[float]] = []
        self._indexes: dict[Hashable, int] = {}

    def get_item_count(self) -> int:
        return len(self._keys)

    def get_keys(self) -> list[Hashable]:
        return list(self._keys)

    def get_index(self, key: Hashable) -> int:
        require(key, "key")
        return self._indexes.get(key, -1)

    def get_value(self, index: int) -> Optional[float]:
        check_index(index, len(self._values), "index")
        return self._values[index]

    def add_value(self, key: Hashable, value: Any) -> None:
        """
        Set the value for ``key``.

        An existing key keeps its position; a new key is appended.
        """
        require(key, "key")
        value = as_value(value)
        index = self._indexes.get(key)
        if index is None:
            self._indexes[key] = len(self._keys)
            self._keys.append(key)
            self._values.append(value)
        else:
            self._values[index] = value

    set_value = add_value

    def insert_value(self, position: int, key: Hashable, value: Any) -> None:
        """
        Insert ``key`` at ``position``, moving it there if already present.

        ``position`` may equal the item count to append.
        """
        require(key, "key")
        value = as_value(value)
        present = key in self._indexes
        check_index(position, len(self._keys) + (0 if present else 1), "position")
        if present:
            self.remove_value(key)
        self._keys.insert(position, key)
        self._values.insert(position, value)
        self._rebuild_index()

    def remove_value(self, key: Hashable) -> None:
        """Remove ``key`` and its value."""
        index = self.get_index(key)
        if index < 0:
            raise InvalidArgumentError(
                f"The key ({key!r}) is not recognised.",
                argument="key",
                value=key,
            )
        del self._keys[index]
        del self._values[index]
        self._rebuild_index()

    def clear(self) -> None:
        """Remove every key."""
        self._keys.clear()
        self._values.clear()
        self._indexes.clear()

    def sort_by_keys(self, descending: bool = False) -> None:
        """Reorder entries by key."""
        self._reorder(sorted(range(len(self._keys)),
                             key=lambda i: self._keys[i], reverse=descending))

    def sort_by_values(self, descending: bool = False) -> None:
        """Reorder entries by value; missing values always sort last."""
        present = [i for i, v in enumerate(self._values) if v is not None and not math.isnan(v)]
        absent = [i for i, v in enumerate(self._values) if v is None or math.isnan(v)]
        present.sort(key=lambda i: self._values[i], reverse=descending)
        self._reorder(present + absent)

    def _reorder(self, order: list[int]) -> None:
        self._keys = [self._keys[i] for i in order]
        self._values = [self._values[i] for i in order]
        self._rebuild_index()

    def _rebuild_index(self) -> None:
        self._indexes = {key: i for i, key in enumerate(self._keys)}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyedValues):
            return NotImplemented
        return list(self.items()) == list(other.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"DefaultKeyedValues({{{pairs}}})"
