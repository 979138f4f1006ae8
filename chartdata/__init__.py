"""
Chart Data - numeric foundation for charting and reporting

Provides an immutable Range interval type, an ordered keyed data model
(KeyedValues, Values2D, KeyedValues2D, CategoryTable), aggregate utilities
over that model and CSV ingestion into a CategoryTable.
"""

__version__ = "0.1.0"
__author__ = "Chart Data Team"

from .data.category_table import CategoryTable
from .data.keyed_values import DefaultKeyedValues, KeyedValues
from .data.parsers import CSVReader, read_category_dataset
from .data.range import Range
from .data.utilities import (
    calculate_column_total,
    calculate_row_total,
    create_number_array,
    create_number_array_2d,
    get_cumulative_percentages,
)
from .data.values2d import DenseValues2D, KeyedValues2D, Values2D
from .errors import InvalidArgumentError, ParseError, SourceReadError

__all__ = [
    "Range",
    "KeyedValues",
    "DefaultKeyedValues",
    "Values2D",
    "KeyedValues2D",
    "DenseValues2D",
    "CategoryTable",
    "calculate_column_total",
    "calculate_row_total",
    "create_number_array",
    "create_number_array_2d",
    "get_cumulative_percentages",
    "CSVReader",
    "read_category_dataset",
    "InvalidArgumentError",
    "ParseError",
    "SourceReadError",
]
