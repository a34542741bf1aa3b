# tests/test_config.py
import logging

import pytest

from rlcsim import AnalysisConfig, load_config, ConfigParsingError, ConfigSchemaError
from rlcsim.config import build_config
from rlcsim.constants import DEFAULT_INPUT_UNITS, MIN_POSITIVE_VALUE


def write_config(tmp_path, text, name="rlcsim.yaml"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestDefaults:

    def test_default_values(self):
        config = AnalysisConfig()
        assert config.min_positive_value == MIN_POSITIVE_VALUE
        assert config.resonance_tolerance_ohm == 0.001
        assert config.power_factor_thresholds == {"excellent": 0.9, "good": 0.7, "fair": 0.5}
        assert config.input_units == DEFAULT_INPUT_UNITS
        assert config.log_level == "WARNING"

    def test_empty_mapping_builds_defaults(self):
        assert build_config({}) == AnalysisConfig()


class TestLoadConfig:

    def test_partial_file_is_merged_over_defaults(self, tmp_path):
        path = write_config(tmp_path, """
min_positive_value: 1.0e-9
resonance_tolerance_ohm: 0.01
input_units:
  inductance: H
  capacitance: nF
log_level: debug
""")
        config = load_config(path)
        assert config.min_positive_value == 1e-9
        assert config.resonance_tolerance_ohm == 0.01
        assert config.input_units["inductance"] == "H"
        assert config.input_units["capacitance"] == "nF"
        assert config.input_units["resistance"] == "ohm"
        assert config.log_level == "DEBUG"
        assert config.power_factor_thresholds == AnalysisConfig().power_factor_thresholds

    def test_numbers_written_without_a_dot_are_coerced(self, tmp_path):
        # YAML 1.1 reads '1e-6' as a string.
        path = write_config(tmp_path, "min_positive_value: 1e-6\n")
        assert load_config(path).min_positive_value == 1e-6

    def test_custom_thresholds(self, tmp_path):
        path = write_config(tmp_path, """
power_factor_thresholds: {excellent: 0.99, good: 0.95, fair: 0.8}
""")
        assert load_config(path).power_factor_thresholds == {"excellent": 0.99, "good": 0.95, "fair": 0.8}

    def test_load_logs_source(self, tmp_path, caplog):
        path = write_config(tmp_path, "log_level: INFO\n")
        with caplog.at_level(logging.INFO, logger="rlcsim"):
            load_config(path)
        assert "Loading analysis configuration" in caplog.text


class TestSchemaErrors:

    @pytest.mark.parametrize("text, bad_field", [
        ("unknown_key: 1\n", "unknown_key"),
        ("min_positive_value: -1.0\n", "min_positive_value"),
        ("min_positive_value: abc\n", "min_positive_value"),
        ("resonance_tolerance_ohm: 0\n", "resonance_tolerance_ohm"),
        ("resonance_tolerance_ohm: -0.5\n", "resonance_tolerance_ohm"),
        ("log_level: LOUD\n", "log_level"),
        ("power_factor_thresholds: {excellent: 0.5, good: 0.7, fair: 0.9}\n", "power_factor_thresholds"),
        ("power_factor_thresholds: {excellent: 1.5, good: 0.7, fair: 0.5}\n", "power_factor_thresholds"),
        ("power_factor_thresholds: {excellent: 0.9, good: 0.7}\n", "power_factor_thresholds"),
        ("input_units: {inductance: uF}\n", "input_units"),
        ("input_units: {capacitance: blargs}\n", "input_units"),
        ("input_units: {charge: C}\n", "input_units"),
    ])
    def test_invalid_content_is_rejected(self, tmp_path, text, bad_field):
        path = write_config(tmp_path, text)
        with pytest.raises(ConfigSchemaError) as excinfo:
            load_config(path)
        assert bad_field in excinfo.value.errors
        report = excinfo.value.get_diagnostic_report()
        assert "Configuration Schema Error" in report
        assert str(path.resolve()) in report


class TestFileErrors:

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigParsingError) as excinfo:
            load_config(tmp_path / "missing.yaml")
        assert "not found" in str(excinfo.value)

    @pytest.mark.parametrize("text, message", [
        ("", "empty"),
        ("- 1\n- 2\n", "must be a dictionary"),
        ("a: [1, 2\n", "Invalid YAML syntax"),
    ])
    def test_unusable_file(self, tmp_path, text, message):
        path = write_config(tmp_path, text)
        with pytest.raises(ConfigParsingError) as excinfo:
            load_config(path)
        assert message in excinfo.value.details
        assert "YAML Parsing or File Error" in excinfo.value.get_diagnostic_report()
