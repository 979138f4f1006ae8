"""
Error classification for the numeric core.

Every failure raised by the package belongs to one of three kinds: an
invalid argument supplied by the caller, malformed input data, or a
failure to read a data source.
"""

from .arguments import InvalidArgumentError
from .data_quality import (
    DataQualityError,
    MalformedDataError,
    ParseError,
)
from .system_failures import (
    SourceReadError,
    SystemFailureError,
)

__all__ = [
    # Caller errors
    "InvalidArgumentError",
    # Data Quality Errors
    "DataQualityError",
    "MalformedDataError",
    "ParseError",
    # System Failures
    "SystemFailureError",
    "SourceReadError",
]
