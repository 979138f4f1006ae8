"""
Logging configuration and utilities for the chart data core.
"""
from .config import (
    configure_logging,
    get_ingestion_logger,
    get_logger,
    log_ingestion_summary,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_ingestion_logger",
    "log_ingestion_summary",
]
