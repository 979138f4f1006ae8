"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from chartdata.config.defaults import CSVParams, get_default_config
from chartdata.config.loader import ConfigLoader
from chartdata.config.validation import ConfigValidator
from chartdata.errors import InvalidArgumentError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.csv.field_delimiter == ","
        assert config.csv.text_delimiter == '"'
        assert config.csv.row_key_start == 1
        assert config.logging.level == "INFO"


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, tmp_path) -> None:
        """Test config merging without a config file."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config()

        assert config["csv"]["field_delimiter"] == ","
        assert config["logging"]["format_json"] is False

    def test_file_overrides_defaults(self, tmp_path) -> None:
        """Test the YAML file overrides defaults."""
        (tmp_path / "chartdata.yaml").write_text("csv:\n  field_delimiter: ';'\n")
        config = ConfigLoader.create(tmp_path).merge_config()

        assert config["csv"]["field_delimiter"] == ";"
        assert config["csv"]["text_delimiter"] == '"'

    def test_overrides_beat_file(self, tmp_path) -> None:
        """Test explicit overrides take priority over the file."""
        (tmp_path / "chartdata.yaml").write_text("csv:\n  row_key_start: 5\n")
        config = ConfigLoader.create(tmp_path).merge_config({"csv": {"row_key_start": 0}})

        assert config["csv"]["row_key_start"] == 0

    def test_empty_file(self, tmp_path) -> None:
        """Test an empty YAML file means no overrides."""
        (tmp_path / "chartdata.yaml").write_text("")
        config = ConfigLoader.create(tmp_path).merge_config()
        assert config["csv"]["encoding"] == "utf-8"

    def test_load_config_typed(self, tmp_path) -> None:
        """Test load_config returns typed parameters."""
        config = ConfigLoader.create(tmp_path).load_config({"csv": {"field_delimiter": "\t"}})
        assert config.csv == CSVParams(field_delimiter="\t")

    def test_load_config_rejects_invalid(self, tmp_path) -> None:
        """Test invalid merged configuration fails."""
        with pytest.raises(InvalidArgumentError, match="field_delimiter"):
            ConfigLoader.create(tmp_path).load_config({"csv": {"field_delimiter": ";;"}})

    def test_shipped_config_is_valid(self) -> None:
        """Test the project config file validates."""
        config = ConfigLoader.create().load_config()
        assert config.csv.field_delimiter == ","


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_csv_params(self) -> None:
        """Test validation of valid CSV parameters."""
        params = {"field_delimiter": ";", "text_delimiter": "'", "row_key_start": 0}
        assert ConfigValidator.validate_csv_params(params) == []

    @pytest.mark.parametrize("field,value", [
        ("field_delimiter", ""),
        ("text_delimiter", 1),
        ("encoding", ""),
        ("row_key_start", -1),
        ("row_key_start", True),
        ("strip_whitespace", "yes"),
    ])
    def test_invalid_csv_params(self, field, value) -> None:
        """Test validation of invalid CSV parameters."""
        errors = ConfigValidator.validate_csv_params({field: value})
        assert len(errors) == 1
        assert errors[0].field == field

    def test_same_delimiters(self) -> None:
        """Test field and text delimiters must differ."""
        errors = ConfigValidator.validate_csv_params(
            {"field_delimiter": ",", "text_delimiter": ","})
        assert [e.field for e in errors] == ["text_delimiter"]

    def test_unknown_parameter(self) -> None:
        """Test unknown parameters are reported."""
        errors = ConfigValidator.validate_config({"csv": {"quote": "'"}})
        assert errors[0].field == "quote"

    def test_invalid_logging_params(self) -> None:
        """Test validation of logging parameters."""
        errors = ConfigValidator.validate_logging_params({"level": "LOUD", "format_json": 1})
        assert sorted(e.field for e in errors) == ["format_json", "level"]

    def test_section_must_be_mapping(self) -> None:
        """Test a non-mapping section is reported."""
        errors = ConfigValidator.validate_config({"csv": "comma"})
        assert errors[0].field == "csv"
