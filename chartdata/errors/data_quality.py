"""
Data quality error classifications for ingested data.

These exceptions describe input that exists but cannot be turned into
numeric table content.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for problems with the content of ingested data."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MalformedDataError(DataQualityError):
    """Data exists but is in incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format


class ParseError(MalformedDataError):
    """A CSV record or field cannot be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None,
                 field_index: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.line_number = line_number
        self.field_index = field_index
