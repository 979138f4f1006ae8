"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from .defaults import CSVParams, LoggingParams

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_csv_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate CSV ingestion parameters."""
        errors = []

        for name in ("field_delimiter", "text_delimiter"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or len(value) != 1:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a single character",
                        value=value
                    ))

        if (params.get("field_delimiter") is not None
                and params.get("field_delimiter") == params.get("text_delimiter")):
            errors.append(ValidationError(
                field="text_delimiter",
                message="Must differ from field_delimiter",
                value=params["text_delimiter"]
            ))

        if "encoding" in params:
            value = params["encoding"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="encoding",
                    message="Must be a non-empty string",
                    value=value
                ))

        if "row_key_start" in params:
            value = params["row_key_start"]
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                errors.append(ValidationError(
                    field="row_key_start",
                    message="Must be a non-negative integer",
                    value=value
                ))

        if "strip_whitespace" in params:
            value = params["strip_whitespace"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="strip_whitespace",
                    message="Must be a boolean",
                    value=value
                ))

        errors.extend(ConfigValidator._unknown_fields(params, CSVParams))
        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        errors.extend(ConfigValidator._unknown_fields(params, LoggingParams))
        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []
        sections = {
            "csv": ConfigValidator.validate_csv_params,
            "logging": ConfigValidator.validate_logging_params,
        }

        for section, validate in sections.items():
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            errors.extend(validate(params))

        return errors

    @staticmethod
    def _unknown_fields(params: dict[str, Any], params_type: type) -> list[ValidationError]:
        known = params_type.__dataclass_fields__
        return [
            ValidationError(field=name, message="Unknown parameter", value=value)
            for name, value in params.items()
            if name not in known
        ]
