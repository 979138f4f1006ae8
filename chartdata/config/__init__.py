"""Configuration defaults, loading and validation."""

from .defaults import CSVParams, DefaultConfig, LoggingParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "CSVParams",
    "LoggingParams",
    "DefaultConfig",
    "get_default_config",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
]
