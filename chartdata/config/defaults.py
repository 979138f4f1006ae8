"""Default configuration parameters for the chart data core."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CSVParams:
    """CSV ingestion parameters."""
    field_delimiter: str = ","          # Separates fields within a record
    text_delimiter: str = '"'           # Quotes fields containing the field delimiter
    encoding: str = "utf-8"             # Encoding used when opening a path
    row_key_start: int = 1              # First auto-generated row key
    strip_whitespace: bool = True       # Trim keys and values before parsing


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    csv: CSVParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        csv=CSVParams(),
        logging=LoggingParams(),
    )
