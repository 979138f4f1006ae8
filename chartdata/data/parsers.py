"""
CSV parsing into a CategoryTable.

The first record is a header naming the column keys. Each following record
holds an optional row key and one numeric field per column; an empty field
becomes a missing cell. A leading empty header field declares an explicit
row-key column, which every record must then fill.
"""

import csv
import os
import re
import time
from typing import Any, Optional, TextIO, Union

from ..config.defaults import CSVParams
from ..errors import InvalidArgumentError, ParseError, SourceReadError
from ..logging.config import get_ingestion_logger, log_ingestion_summary
from .category_table import CategoryTable

Source = Union[str, "os.PathLike[str]", TextIO]

# Decimal or exponent notation, plus the NaN and Infinity literals
NUMBER_PATTERN = re.compile(r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|NaN|Infinity)")


class ParsingMetrics:
    """Simple metrics collection for parsing operations."""

    def __init__(self):
        self.total_parses = 0
        self.successful_parses = 0
        self.failed_parses = 0
        self.total_rows_parsed = 0
        self.total_missing_cells = 0
        self.total_parse_time = 0.0
        self.last_failure_time = None

    def record_parse_start(self) -> float:
        """Record the start of a parsing operation."""
        self.total_parses += 1
        return time.time()

    def record_parse_success(self, start_time: float, row_count: int, missing_cells: int):
        """Record successful parsing."""
        self.successful_parses += 1
        self.total_rows_parsed += row_count
        self.total_missing_cells += missing_cells
        self.total_parse_time += time.time() - start_time

    def record_parse_failure(self, start_time: float):
        """Record parsing failure."""
        self.failed_parses += 1
        self.total_parse_time += time.time() - start_time
        self.last_failure_time = time.time()

    def get_stats(self) -> dict[str, Any]:
        """Get current metrics."""
        avg_parse_time = self.total_parse_time / max(self.total_parses, 1)
        success_rate = self.successful_parses / max(self.total_parses, 1)

        return {
            "total_parses": self.total_parses,
            "successful_parses": self.successful_parses,
            "failed_parses": self.failed_parses,
            "success_rate": success_rate,
            "total_rows_parsed": self.total_rows_parsed,
            "total_missing_cells": self.total_missing_cells,
            "avg_parse_time_ms": avg_parse_time * 1000,
            "last_failure_time": self.last_failure_time,
        }


class CSVReader:
    """Reads category datasets from delimited text."""

    def __init__(self, params: Optional[CSVParams] = None):
        self.params = params or CSVParams()
        self.metrics = ParsingMetrics()
        self.logger = get_ingestion_logger(__name__)

    def read_category_dataset(self, source: Source) -> CategoryTable:
        """
        Parse a CSV source into a fresh CategoryTable.

        Args:
            source: Path to a CSV file, or an open text stream. Paths are
                opened and closed here; streams are left open for the caller.

        Returns:
            Populated CategoryTable

        Raises:
            InvalidArgumentError: If source is None or of an unsupported type
            ParseError: If the header or a record is malformed or a value is not numeric
            SourceReadError: If the source cannot be opened or read to completion
        """
        if source is None:
            raise InvalidArgumentError("Null 'source' argument", argument="source")

        if isinstance(source, (str, os.PathLike)):
            target = os.fspath(source)
            self.logger.debug("Opening CSV source", source=target)
            try:
                stream = open(target, newline="", encoding=self.params.encoding)
            except OSError as e:
                self.logger.error("Cannot open CSV source", source=target, error=str(e))
                raise SourceReadError(
                    f"Cannot open CSV source '{target}': {e}",
                    operation="open",
                    target=target,
                ) from e
            with stream:
                return self._read(stream, target)

        if not hasattr(source, "read"):
            raise InvalidArgumentError(
                f"Unsupported CSV source type: {type(source).__name__}",
                argument="source",
                value=source,
            )
        return self._read(source, getattr(source, "name", "<stream>"))

    def _read(self, stream: TextIO, target: str) -> CategoryTable:
        start_time = self.metrics.record_parse_start()
        try:
            table, missing_cells = self._parse(stream)
        except ParseError as e:
            self.metrics.record_parse_failure(start_time)
            self.logger.warning("CSV parse failed", source=target,
                                line_number=e.line_number, error=str(e))
            raise
        except (OSError, UnicodeDecodeError) as e:
            self.metrics.record_parse_failure(start_time)
            self.logger.error("CSV read failed", source=target, error=str(e))
            raise SourceReadError(
                f"Cannot read CSV source '{target}': {e}",
                operation="read",
                target=target,
            ) from e

        self.metrics.record_parse_success(start_time, table.get_row_count(), missing_cells)
        log_ingestion_summary(
            self.logger,
            source=target,
            rows=table.get_row_count(),
            columns=table.get_column_count(),
            missing_cells=missing_cells,
        )
        return table

    def _parse(self, stream: TextIO) -> tuple[CategoryTable, int]:
        reader = csv.reader(
            stream,
            delimiter=self.params.field_delimiter,
            quotechar=self.params.text_delimiter,
            strict=True,
        )
        table = CategoryTable()
        missing_cells = 0
        column_keys: Optional[list[str]] = None
        keyed_rows = False
        record_number = 0

        try:
            for fields in reader:
                if _is_blank(fields):
                    continue
                if self.params.strip_whitespace:
                    fields = [f.strip() for f in fields]

                if column_keys is None:
                    column_keys, keyed_rows = _parse_header(fields, reader.line_num)
                    continue

                row_key, cells = self._split_record(
                    fields, column_keys, keyed_rows, record_number, reader.line_num)
                record_number += 1

                for index, (column_key, field) in enumerate(zip(column_keys, cells)):
                    value = _parse_value(field, reader.line_num, index)
                    if value is None:
                        missing_cells += 1
                    table.add_value(value, row_key, column_key)
        except csv.Error as e:
            raise ParseError(
                f"Malformed CSV at line {reader.line_num}: {e}",
                line_number=reader.line_num,
                expected_format="csv",
            ) from e

        return table, missing_cells

    def _split_record(self, fields: list[str], column_keys: list[str], keyed_rows: bool,
                      record_number: int, line_number: int) -> tuple[str, list[str]]:
        column_count = len(column_keys)

        if len(fields) == column_count + 1:
            row_key = fields[0]
            if not row_key:
                raise ParseError(
                    f"Empty row key at line {line_number}",
                    line_number=line_number,
                    field_index=0,
                    raw_data=",".join(fields),
                )
            return row_key, fields[1:]

        if len(fields) == column_count and not keyed_rows:
            return str(self.params.row_key_start + record_number), fields

        expected = f"{column_count + 1}" if keyed_rows else f"{column_count} or {column_count + 1}"
        raise ParseError(
            f"Expected {expected} fields at line {line_number}, got {len(fields)}",
            line_number=line_number,
            raw_data=",".join(fields),
            expected_format=f"{expected} fields",
        )


def read_category_dataset(source: Source, params: Optional[CSVParams] = None) -> CategoryTable:
    """Read a CSV source into a CategoryTable with a one-off CSVReader."""
    return CSVReader(params).read_category_dataset(source)


def _parse_header(fields: list[str], line_number: int) -> tuple[list[str], bool]:
    keyed_rows = len(fields) > 1 and fields[0] == ""
    column_keys = fields[1:] if keyed_rows else fields

    seen = set()
    for index, key in enumerate(column_keys):
        if not key:
            raise ParseError(
                f"Empty column key in header at line {line_number}",
                line_number=line_number,
                field_index=index + keyed_rows,
            )
        if key in seen:
            raise ParseError(
                f"Duplicate column key '{key}' in header at line {line_number}",
                line_number=line_number,
                field_index=index + keyed_rows,
            )
        seen.add(key)

    return column_keys, keyed_rows


def _parse_value(field: str, line_number: int, index: int) -> Optional[float]:
    if field == "":
        return None
    if NUMBER_PATTERN.fullmatch(field.strip()) is None:
        raise ParseError(
            f"Invalid numeric value '{field}' at line {line_number}, column {index}",
            line_number=line_number,
            field_index=index,
            raw_data=field,
            expected_format="number",
        )
    return float(field)


def _is_blank(fields: list[str]) -> bool:
    """
    True for empty lines and lines holding only whitespace.

    A quoted empty field (``""``) reads as ``[""]`` and is a record, which
    in a one-column table becomes a missing cell.
    """
    if not fields:
        return True
    return len(fields) == 1 and fields[0] != "" and not fields[0].strip()
